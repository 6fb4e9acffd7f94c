from .grouping import group_by_origin
from .connection_reuse import estimate_if_connection_was_reused
from .rtt import (
    EstimateContext,
    estimate_value_by_origin,
    estimate_rtt_via_connection_timing,
    estimate_rtt_via_download_timing,
    estimate_rtt_via_send_start_timing,
    estimate_rtt_samples_by_origin,
    estimate_rtt_by_origin,
)
from .response_time import (
    minimum_rtt_by_origin,
    estimate_response_time_samples_by_origin,
    estimate_server_response_time_by_origin,
)
from .network_analyzer import NetworkAnalyzer

__all__ = [
    "group_by_origin",
    "estimate_if_connection_was_reused",
    "EstimateContext",
    "estimate_value_by_origin",
    "estimate_rtt_via_connection_timing",
    "estimate_rtt_via_download_timing",
    "estimate_rtt_via_send_start_timing",
    "estimate_rtt_samples_by_origin",
    "estimate_rtt_by_origin",
    "minimum_rtt_by_origin",
    "estimate_response_time_samples_by_origin",
    "estimate_server_response_time_by_origin",
    "NetworkAnalyzer",
]
