"""Per-origin round-trip time estimation.

Three strategies are tried in order of reliability:

1. connection timing: the TCP and TLS handshakes each take one round trip;
2. download timing: the time spent receiving the body after the first byte,
   divided by the number of congestion window doublings it took;
3. send-start timing: the delay before the request could be sent, which
   covers one round trip for TCP and one more for TLS.

Strategies 2 and 3 are coarse and are only used when no request exposes
handshake timing (or when forced); their samples are merged per origin and
scaled by ``coarse_estimate_multiplier``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from ..core.config import EstimatorOptions, resolve_options
from ..core.constants import INITIAL_CWND_BYTES
from ..core.decorators import handle_analysis_errors, log_performance
from ..core.models import ResourceTiming, TimingRecord, is_valid_phase
from ..exceptions import NoTimingInformationError
from ..logging import get_logger
from ..metrics.summary import SummaryByOrigin, summarize
from .connection_reuse import estimate_if_connection_was_reused
from .grouping import group_by_origin

logger = get_logger(__name__)

SamplesByOrigin = Dict[str, List[float]]


@dataclass(frozen=True)
class EstimateContext:
    """Inputs handed to a per-record estimator."""

    record: TimingRecord
    timing: ResourceTiming
    connection_reused: bool


Estimator = Callable[[EstimateContext], Sequence[float]]


def estimate_value_by_origin(records: Sequence[TimingRecord], iteratee: Estimator) -> SamplesByOrigin:
    """Collect the samples ``iteratee`` produces for each record, keyed by origin.

    Records without timing are skipped.  ``iteratee`` returns zero or more
    samples per record.  Origins that end up without samples are omitted.
    """
    connection_was_reused = estimate_if_connection_was_reused(records)

    estimates: SamplesByOrigin = {}
    for origin, origin_records in group_by_origin(records).items():
        origin_estimates: List[float] = []
        for record in origin_records:
            if record.timing is None:
                continue
            context = EstimateContext(
                record=record,
                timing=record.timing,
                connection_reused=connection_was_reused[record.request_id],
            )
            origin_estimates.extend(iteratee(context))

        if origin_estimates:
            estimates[origin] = origin_estimates

    return estimates


def _rtt_from_connection_timing(ctx: EstimateContext) -> Sequence[float]:
    if ctx.connection_reused:
        return ()

    timing = ctx.timing
    if timing.ssl_start > 0 and timing.ssl_end > 0:
        # TLS handshake, then the TCP handshake before it
        return (timing.connect_end - timing.ssl_start, timing.ssl_start - timing.connect_start)
    if timing.connect_start > 0 and timing.connect_end > 0:
        return (timing.connect_end - timing.connect_start,)
    return ()


def _rtt_from_download_timing(ctx: EstimateContext) -> Sequence[float]:
    record = ctx.record
    if ctx.connection_reused:
        return ()
    # a single congestion window says nothing about bandwidth-limited round trips
    if record.transfer_size <= INITIAL_CWND_BYTES:
        return ()
    if not is_valid_phase(ctx.timing.receive_headers_end):
        return ()

    total_time_ms = (record.end_time - record.start_time) * 1000
    download_time_after_first_byte = total_time_ms - ctx.timing.receive_headers_end
    number_of_round_trips = math.log2(record.transfer_size / INITIAL_CWND_BYTES)
    return (download_time_after_first_byte / number_of_round_trips,)


def _rtt_from_send_start_timing(ctx: EstimateContext) -> Sequence[float]:
    if ctx.connection_reused:
        return ()
    if not is_valid_phase(ctx.timing.send_start):
        return ()

    round_trips = 1
    if ctx.record.scheme == "https":
        round_trips += 1
    return (ctx.timing.send_start / round_trips,)


def estimate_rtt_via_connection_timing(records: Sequence[TimingRecord]) -> SamplesByOrigin:
    """RTT samples from TCP connect and TLS handshake phases."""
    return estimate_value_by_origin(records, _rtt_from_connection_timing)


def estimate_rtt_via_download_timing(records: Sequence[TimingRecord]) -> SamplesByOrigin:
    """Coarse RTT samples from body download duration and transfer size."""
    return estimate_value_by_origin(records, _rtt_from_download_timing)


def estimate_rtt_via_send_start_timing(records: Sequence[TimingRecord]) -> SamplesByOrigin:
    """Coarse RTT samples from the delay before the request was sent."""
    return estimate_value_by_origin(records, _rtt_from_send_start_timing)


def _estimate_coarse_rtt_by_origin(records: Sequence[TimingRecord], multiplier: float) -> SamplesByOrigin:
    estimates_by_origin: SamplesByOrigin = {}
    for source in (estimate_rtt_via_download_timing, estimate_rtt_via_send_start_timing):
        for origin, estimates in source(records).items():
            estimates_by_origin.setdefault(origin, []).extend(estimates)

    return {
        origin: [estimate * multiplier for estimate in estimates]
        for origin, estimates in estimates_by_origin.items()
    }


@log_performance
@handle_analysis_errors
def estimate_rtt_samples_by_origin(
    records: Sequence[TimingRecord],
    options: Optional[EstimatorOptions] = None,
    **overrides,
) -> SamplesByOrigin:
    """Return the raw per-origin RTT samples chosen by :func:`estimate_rtt_by_origin`.

    Raises
    ------
    NoTimingInformationError
        If no strategy produced a single sample.
    """
    records = list(records)
    opts = resolve_options(options, **overrides)

    estimates_by_origin = estimate_rtt_via_connection_timing(records)
    if not estimates_by_origin or opts.force_coarse_estimates:
        logger.debug(
            "Using coarse RTT estimates (handshake origins: %d, forced: %s)",
            len(estimates_by_origin),
            opts.force_coarse_estimates,
        )
        estimates_by_origin = _estimate_coarse_rtt_by_origin(records, opts.coarse_estimate_multiplier)

    if not estimates_by_origin:
        raise NoTimingInformationError(
            "No timing information available",
            context=f"{len(records)} records",
            suggestion="Provide records with connection, download or send-start timing",
        )

    logger.debug(
        "Estimated RTT for %d origins from %d samples",
        len(estimates_by_origin),
        sum(len(v) for v in estimates_by_origin.values()),
    )
    return estimates_by_origin


def estimate_rtt_by_origin(
    records: Sequence[TimingRecord],
    options: Optional[EstimatorOptions] = None,
    **overrides,
) -> SummaryByOrigin:
    """Return RTT summaries (milliseconds) per origin plus the combined ``SUMMARY`` entry.

    Parameters
    ----------
    records:
        Recorded requests; those without timing are ignored.
    options:
        Explicit estimator options.  Defaults come from :class:`Settings`.
    **overrides:
        ``force_coarse_estimates`` or ``coarse_estimate_multiplier`` applied
        on top of ``options``.

    Raises
    ------
    NoTimingInformationError
        If no strategy produced a single sample.
    """
    return summarize(estimate_rtt_samples_by_origin(records, options, **overrides))


__all__ = [
    "EstimateContext",
    "Estimator",
    "SamplesByOrigin",
    "estimate_value_by_origin",
    "estimate_rtt_via_connection_timing",
    "estimate_rtt_via_download_timing",
    "estimate_rtt_via_send_start_timing",
    "estimate_rtt_samples_by_origin",
    "estimate_rtt_by_origin",
]
