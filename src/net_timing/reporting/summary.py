from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..core.constants import SUMMARY_LABEL
from ..metrics.summary import SUMMARY, SummaryByOrigin

_DEF_COLUMNS = ["origin", "min", "max", "avg", "median"]


def summary_to_dataframe(summary_by_origin: SummaryByOrigin) -> pd.DataFrame:
    """Return one row per origin, with the combined ``SUMMARY`` entry last."""
    rows = [
        {"origin": origin, **summary}
        for origin, summary in summary_by_origin.items()
        if origin is not SUMMARY
    ]
    if SUMMARY in summary_by_origin:
        rows.append({"origin": SUMMARY_LABEL, **summary_by_origin[SUMMARY]})
    return pd.DataFrame(rows, columns=_DEF_COLUMNS)


def export_summary_csv(summary_by_origin: SummaryByOrigin, path: str | Path) -> None:
    """Write :func:`summary_to_dataframe` output to ``path`` as CSV without index."""
    summary_to_dataframe(summary_by_origin).to_csv(path, index=False)


__all__ = ["summary_to_dataframe", "export_summary_csv"]
