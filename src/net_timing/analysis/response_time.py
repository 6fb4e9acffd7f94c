"""Server response time estimation: time to first byte minus network RTT."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..core.config import EstimatorOptions
from ..core.decorators import handle_analysis_errors, log_performance
from ..core.models import TimingRecord, is_valid_phase
from ..exceptions import NoTimingInformationError
from ..logging import get_logger
from ..metrics.summary import SUMMARY, SummaryByOrigin, SummaryKey, summarize
from .rtt import EstimateContext, SamplesByOrigin, estimate_rtt_by_origin, estimate_value_by_origin

logger = get_logger(__name__)

RTTByOrigin = Mapping[SummaryKey, float]


def minimum_rtt_by_origin(rtt_summary: SummaryByOrigin) -> dict[SummaryKey, float]:
    """Reduce each RTT summary to its ``min``, the estimate least padded by queuing."""
    return {origin: summary["min"] for origin, summary in rtt_summary.items()}


def estimate_response_time_samples_by_origin(
    records: Sequence[TimingRecord], rtt_by_origin: RTTByOrigin
) -> SamplesByOrigin:
    """Return server response time samples per origin.

    Origins missing from ``rtt_by_origin``, or mapped to a zero RTT, use the
    ``SUMMARY`` RTT when the map has one.
    """

    def _response_time(ctx: EstimateContext) -> Sequence[float]:
        timing = ctx.timing
        if not is_valid_phase(timing.receive_headers_end) or not is_valid_phase(timing.send_end):
            return ()

        ttfb = timing.receive_headers_end - timing.send_end
        rtt = rtt_by_origin.get(ctx.record.origin)
        if not rtt and SUMMARY in rtt_by_origin:
            rtt = rtt_by_origin[SUMMARY]
        if rtt is None:
            logger.debug("No RTT available for %s, skipping %s", ctx.record.origin, ctx.record.request_id)
            return ()
        return (max(ttfb - rtt, 0.0),)

    return estimate_value_by_origin(records, _response_time)


@log_performance
@handle_analysis_errors
def estimate_server_response_time_by_origin(
    records: Sequence[TimingRecord],
    options: Optional[EstimatorOptions] = None,
    rtt_by_origin: Optional[RTTByOrigin] = None,
    **overrides,
) -> SummaryByOrigin:
    """Return server response time summaries (milliseconds) per origin.

    Parameters
    ----------
    records:
        Recorded requests; those without ``send_end`` and
        ``receive_headers_end`` are ignored.
    options, **overrides:
        Passed to :func:`estimate_rtt_by_origin` when ``rtt_by_origin`` is
        not given.
    rtt_by_origin:
        Precomputed RTT per origin.  When omitted the RTT is estimated from
        ``records`` and each origin's minimum is used.

    Raises
    ------
    NoTimingInformationError
        If the RTT cannot be estimated or no record yields a response time.
    """
    records = list(records)
    if rtt_by_origin is None:
        rtt_by_origin = minimum_rtt_by_origin(estimate_rtt_by_origin(records, options, **overrides))

    estimates_by_origin = estimate_response_time_samples_by_origin(records, rtt_by_origin)
    if not estimates_by_origin:
        raise NoTimingInformationError(
            "No timing information available",
            context=f"{len(records)} records without usable response timing or RTT",
        )
    return summarize(estimates_by_origin)


__all__ = [
    "RTTByOrigin",
    "minimum_rtt_by_origin",
    "estimate_response_time_samples_by_origin",
    "estimate_server_response_time_by_origin",
]
