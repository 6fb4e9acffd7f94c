"""Decide whether each request ran on a reused transport connection."""

from __future__ import annotations

from typing import Dict, Sequence

from ..core.models import TimingRecord
from ..logging import get_logger
from .grouping import group_by_origin

logger = get_logger(__name__)


def estimate_if_connection_was_reused(records: Sequence[TimingRecord]) -> Dict[str, bool]:
    """Return a map of ``request_id -> connection_reused``.

    The explicit ``connection_reused`` flags are trusted when the records
    carry more than one distinct connection id (or there are fewer than two
    records).  A single shared id means the ids are placeholders, and reuse is
    estimated per origin instead.  A request may not have needed a fresh
    connection if:

    * it was not the first request to the origin,
    * it was multiplexed (H2 family), or
    * it started after the first request to the origin ended.
    """
    records = list(records)
    connection_ids = {record.connection_id for record in records}
    if len(connection_ids) > 1 or len(records) < 2:
        return {record.request_id: bool(record.connection_reused) for record in records}

    logger.debug(
        "All %d records share connection id %r, estimating reuse from timing",
        len(records),
        next(iter(connection_ids)),
    )
    connection_was_reused: Dict[str, bool] = {}
    for origin_records in group_by_origin(records).values():
        earliest_reuse_possible = min(record.end_time for record in origin_records)

        for record in origin_records:
            connection_was_reused[record.request_id] = (
                record.start_time >= earliest_reuse_possible or record.is_multiplexed
            )

        # min() keeps the first record on start_time ties
        first_record = min(origin_records, key=lambda record: record.start_time)
        connection_was_reused[first_record.request_id] = False

    return connection_was_reused


__all__ = ["estimate_if_connection_was_reused"]
