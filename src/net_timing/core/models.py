"""Core data structures for recorded request timings."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from functools import cached_property
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

import pandas as pd

from ..exceptions import RecordParsingError
from .constants import DEFAULT_PORTS, MULTIPLEXED_PROTOCOLS, TIMING_NOT_APPLICABLE

ConnectionId = Union[int, str]

_TIMING_ALIASES = {
    "connect_start": "connectStart",
    "connect_end": "connectEnd",
    "ssl_start": "sslStart",
    "ssl_end": "sslEnd",
    "send_start": "sendStart",
    "send_end": "sendEnd",
    "receive_headers_end": "receiveHeadersEnd",
}


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))  # handles NaN and pandas.NA
    except (TypeError, ValueError):
        return False


def _safe_float(value: Any, default: float) -> float:
    """Return ``float(value)`` or ``default`` when missing or unparsable."""
    if _is_missing(value):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _safe_bool(value: Any) -> Optional[bool]:
    if _is_missing(value):
        return None
    if isinstance(value, str):
        s_val = value.strip().lower()
        if s_val in {"true", "1", "yes"}:
            return True
        if s_val in {"false", "0", "no"}:
            return False
        return None
    return bool(value)


def _pick(row: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if name in row and not _is_missing(row[name]):
            return row[name]
    return None


def is_valid_phase(value: float) -> bool:
    """Return ``True`` when a timing phase holds a usable, non-negative value."""
    return math.isfinite(value) and value >= 0


@dataclass(frozen=True)
class ResourceTiming:
    """Request phase offsets in milliseconds relative to the request start.

    ``-1`` marks a phase that did not happen for the request.
    """

    connect_start: float = TIMING_NOT_APPLICABLE
    connect_end: float = TIMING_NOT_APPLICABLE
    ssl_start: float = TIMING_NOT_APPLICABLE
    ssl_end: float = TIMING_NOT_APPLICABLE
    send_start: float = TIMING_NOT_APPLICABLE
    send_end: float = TIMING_NOT_APPLICABLE
    receive_headers_end: float = TIMING_NOT_APPLICABLE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResourceTiming":
        """Create timing from snake_case or DevTools camelCase keys."""
        values = {
            name: _safe_float(_pick(data, name, alias), TIMING_NOT_APPLICABLE)
            for name, alias in _TIMING_ALIASES.items()
        }
        return cls(**values)


@dataclass
class TimingRecord:
    """One recorded network request and its timing information."""

    request_id: str
    url: str
    connection_id: Optional[ConnectionId] = None
    connection_reused: Optional[bool] = None
    protocol: str = ""
    start_time: float = 0.0
    end_time: float = 0.0
    transfer_size: int = 0
    scheme: str = ""
    timing: Optional[ResourceTiming] = None

    def __post_init__(self) -> None:
        """Normalize the scheme and validate sizes."""
        if not self.scheme:
            self.scheme = urlsplit(self.url).scheme
        self.scheme = self.scheme.lower()
        self.protocol = (self.protocol or "").lower()
        if self.transfer_size < 0:
            raise ValueError(f"transfer_size must be >= 0, got {self.transfer_size}")

    @cached_property
    def origin(self) -> str:
        """Serialized ``scheme://host[:port]`` origin of :attr:`url`."""
        return origin_of(self.url)

    @property
    def is_multiplexed(self) -> bool:
        return self.protocol in MULTIPLEXED_PROTOCOLS

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "TimingRecord":
        """Create a :class:`TimingRecord` from a loosely typed ``row``.

        Both DevTools style camelCase keys (``requestId``, ``startTime``,
        ``parsedURL.scheme``, ``_timing``) and the snake_case field names are
        accepted.  Missing, ``None`` or NaN values fall back to the field
        default.
        """
        request_id = _pick(row, "request_id", "requestId")
        url = _pick(row, "url")
        if request_id is None or url is None:
            raise RecordParsingError(
                "Record is missing a request id or url",
                context=f"keys: {sorted(row)}",
                suggestion="Every record needs 'requestId' and 'url'",
            )

        scheme = _pick(row, "scheme")
        parsed_url = row.get("parsedURL")
        if scheme is None and isinstance(parsed_url, Mapping):
            scheme = parsed_url.get("scheme")

        timing_data = _pick(row, "timing", "_timing")
        timing = None
        if isinstance(timing_data, ResourceTiming):
            timing = timing_data
        elif isinstance(timing_data, Mapping):
            timing = ResourceTiming.from_dict(timing_data)

        connection_id = _pick(row, "connection_id", "connectionId")
        if isinstance(connection_id, float) and connection_id.is_integer():
            connection_id = int(connection_id)

        transfer_size = _safe_float(_pick(row, "transfer_size", "transferSize"), 0.0)
        try:
            return cls(
                request_id=str(request_id),
                url=str(url),
                connection_id=connection_id,
                connection_reused=_safe_bool(_pick(row, "connection_reused", "connectionReused")),
                protocol=str(_pick(row, "protocol") or ""),
                start_time=_safe_float(_pick(row, "start_time", "startTime"), 0.0),
                end_time=_safe_float(_pick(row, "end_time", "endTime"), 0.0),
                transfer_size=int(transfer_size),
                scheme=str(scheme or ""),
                timing=timing,
            )
        except ValueError as exc:
            raise RecordParsingError(str(exc), context=f"request {request_id}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a flat ``dict`` with ``timing_`` prefixed phases."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "timing"}
        for f in fields(ResourceTiming):
            data[f"timing_{f.name}"] = getattr(self.timing, f.name) if self.timing else None
        return data


def origin_of(url: str) -> str:
    """Return the serialized origin of ``url``.

    Default ports are dropped and the host is lower-cased, so
    ``https://Example.com:443/a`` and ``https://example.com/b`` share the
    origin ``https://example.com``.  URLs without a host have the opaque
    origin ``"null"``.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = parts.hostname
    if not scheme or not host:
        return "null"
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is None or port == DEFAULT_PORTS.get(scheme):
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


__all__ = ["ConnectionId", "ResourceTiming", "TimingRecord", "origin_of", "is_valid_phase"]
