"""Summary statistics over RTT and response time samples."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Mapping, TypedDict, Union, overload

import numpy as np


class _SummaryKey:
    """Key of the combined entry in a per-origin summary mapping."""

    _instance: "_SummaryKey | None" = None

    def __new__(cls) -> "_SummaryKey":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SUMMARY"

    def __reduce__(self):
        return (_SummaryKey, ())


SUMMARY = _SummaryKey()


class Summary(TypedDict):
    """``min``/``max``/``avg``/``median`` of a sample collection."""

    min: float
    max: float
    avg: float
    median: float


SummaryKey = Union[str, _SummaryKey]
SummaryByOrigin = Dict[SummaryKey, Summary]


def _summarize_values(values: Iterable[float]) -> Summary:
    ordered = sorted(values)
    if not ordered:
        raise ValueError("cannot summarize an empty collection")
    return {
        "min": ordered[0],
        "max": ordered[-1],
        "avg": float(np.mean(ordered)),
        # lower median for even-length input, no interpolation
        "median": ordered[(len(ordered) - 1) // 2],
    }


@overload
def summarize(values: Mapping[Hashable, Iterable[float]]) -> SummaryByOrigin: ...


@overload
def summarize(values: Iterable[float]) -> Summary: ...


def summarize(values):
    """Return summary statistics for ``values``.

    A flat collection yields a single :class:`Summary`.  A mapping of key to
    samples yields a summary per key plus one entry under :data:`SUMMARY`
    covering every sample of every key.  The input is never mutated.

    Raises
    ------
    ValueError
        If the collection (or the mapping) is empty.
    """
    if isinstance(values, Mapping):
        summary_by_key: SummaryByOrigin = {}
        all_estimates: List[float] = []
        for key, estimates in values.items():
            estimates = list(estimates)
            summary_by_key[key] = _summarize_values(estimates)
            all_estimates.extend(estimates)
        summary_by_key[SUMMARY] = _summarize_values(all_estimates)
        return summary_by_key
    return _summarize_values(values)


__all__ = ["SUMMARY", "Summary", "SummaryKey", "SummaryByOrigin", "summarize"]
