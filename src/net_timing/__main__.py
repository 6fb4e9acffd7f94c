import argparse
import json
import sys
from pathlib import Path

from .analysis import estimate_rtt_by_origin, estimate_server_response_time_by_origin
from .core.config import EstimatorOptions
from .exceptions import NetTimingError
from .parsers import load_records
from .reporting import summary_to_dataframe


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Per-origin network timing estimates")
    sub = parser.add_subparsers(dest="cmd", required=True)
    for name, help_text in (
        ("rtt", "estimate round trip time per origin"),
        ("response-time", "estimate server response time per origin"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("records", help="JSON file of timing records")
        cmd.add_argument("--force-coarse", action="store_true", default=None, help="ignore handshake timing")
        cmd.add_argument("--multiplier", type=float, default=None, help="coarse estimate multiplier")
        cmd.add_argument("--format", choices=("json", "csv"), default="json")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    options = EstimatorOptions.from_settings().merged(
        force_coarse_estimates=args.force_coarse,
        coarse_estimate_multiplier=args.multiplier,
    )

    try:
        records = load_records(Path(args.records))
        if args.cmd == "rtt":
            result = estimate_rtt_by_origin(records, options)
        else:
            result = estimate_server_response_time_by_origin(records, options)
    except NetTimingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if exc.suggestion:
            print(f"hint: {exc.suggestion}", file=sys.stderr)
        return 1

    df = summary_to_dataframe(result)
    if args.format == "csv":
        print(df.to_csv(index=False), end="")
    else:
        print(json.dumps(df.to_dict("records")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
