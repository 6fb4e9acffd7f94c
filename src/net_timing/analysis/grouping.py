"""Partition timing records by origin."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from ..core.models import TimingRecord


def group_by_origin(records: Iterable[TimingRecord]) -> Dict[str, List[TimingRecord]]:
    """Return records keyed by origin, preserving input order within each origin."""
    grouped: defaultdict[str, List[TimingRecord]] = defaultdict(list)
    for record in records:
        grouped[record.origin].append(record)
    return dict(grouped)


__all__ = ["group_by_origin"]
