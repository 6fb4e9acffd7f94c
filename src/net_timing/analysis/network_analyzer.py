"""Convenience facade bundling estimator options with the estimators."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from ..core.config import EstimatorOptions, resolve_options
from ..core.models import TimingRecord
from ..exceptions import NoTimingInformationError
from ..logging import get_logger
from ..metrics.summary import SummaryByOrigin
from .response_time import RTTByOrigin, estimate_server_response_time_by_origin, minimum_rtt_by_origin
from .rtt import estimate_rtt_by_origin

logger = get_logger(__name__)


class NetworkAnalyzer:
    """Estimate per-origin RTT and server response times with fixed options."""

    def __init__(self, options: Optional[EstimatorOptions] = None, **overrides) -> None:
        self.options = resolve_options(options, **overrides)

    def estimate_rtt_by_origin(self, records: Sequence[TimingRecord]) -> SummaryByOrigin:
        return estimate_rtt_by_origin(records, self.options)

    def estimate_server_response_time_by_origin(
        self,
        records: Sequence[TimingRecord],
        rtt_by_origin: Optional[RTTByOrigin] = None,
    ) -> SummaryByOrigin:
        return estimate_server_response_time_by_origin(records, self.options, rtt_by_origin=rtt_by_origin)

    def get_summary(self, records: Sequence[TimingRecord]) -> Dict[str, object]:
        """Return RTT and response time summaries computed from one RTT pass.

        A missing RTT is fatal and raises :class:`NoTimingInformationError`;
        missing response times are reported as ``None``.
        """
        records = list(records)
        rtt_summary = self.estimate_rtt_by_origin(records)
        try:
            response_summary = self.estimate_server_response_time_by_origin(
                records, rtt_by_origin=minimum_rtt_by_origin(rtt_summary)
            )
        except NoTimingInformationError as exc:
            logger.warning("Server response time unavailable: %s", exc)
            response_summary = None

        return {
            "rtt_by_origin": rtt_summary,
            "server_response_time_by_origin": response_summary,
            "response_time_limited_data": response_summary is None,
        }


__all__ = ["NetworkAnalyzer"]
