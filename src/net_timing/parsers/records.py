"""Load :class:`TimingRecord` objects from dicts, JSON files and DataFrames."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping

import pandas as pd

from ..core.decorators import handle_parse_errors
from ..core.models import TimingRecord
from ..exceptions import RecordParsingError
from ..logging import get_logger

logger = get_logger(__name__)

TIMING_COLUMN_PREFIX = "timing_"


@handle_parse_errors
def parse_records(rows: Iterable[Mapping[str, Any]]) -> List[TimingRecord]:
    """Return a :class:`TimingRecord` for every mapping in ``rows``."""
    records = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise RecordParsingError(
                f"Record {index} is a {type(row).__name__}, expected an object",
                context=f"row {index}",
            )
        records.append(TimingRecord.from_dict(row))
    logger.debug("Parsed %d timing records", len(records))
    return records


@handle_parse_errors
def load_records(path: str | Path) -> List[TimingRecord]:
    """Read records from a JSON file.

    The file holds either a list of record objects or an object with a
    ``records`` list.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    if isinstance(data, Mapping):
        data = data.get("records")
    if not isinstance(data, list):
        raise RecordParsingError(
            "Records file must contain a list of records",
            context=str(path),
            suggestion="Use a JSON list or an object with a 'records' list",
        )
    return parse_records(data)


def _row_to_record_dict(row: Mapping[str, Any]) -> dict[str, Any]:
    flat = {k: v for k, v in row.items() if not str(k).startswith(TIMING_COLUMN_PREFIX)}
    timing = {
        str(k)[len(TIMING_COLUMN_PREFIX):]: v
        for k, v in row.items()
        if str(k).startswith(TIMING_COLUMN_PREFIX)
    }
    if timing and not all(pd.isna(v) for v in timing.values()):
        flat["timing"] = timing
    return flat


@handle_parse_errors
def records_from_dataframe(df: pd.DataFrame) -> List[TimingRecord]:
    """Return records from a flat DataFrame.

    Timing phases live in ``timing_``-prefixed columns (for example
    ``timing_send_start``); a row whose timing columns are all NaN has no
    timing.
    """
    if df.empty:
        return []
    return parse_records(_row_to_record_dict(row) for row in df.to_dict("records"))


def records_to_dataframe(records: Iterable[TimingRecord]) -> pd.DataFrame:
    """Inverse of :func:`records_from_dataframe`."""
    return pd.DataFrame([record.to_dict() for record in records])


__all__ = [
    "TIMING_COLUMN_PREFIX",
    "parse_records",
    "load_records",
    "records_from_dataframe",
    "records_to_dataframe",
]
