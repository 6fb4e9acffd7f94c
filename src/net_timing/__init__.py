# src/net_timing/__init__.py
from .core.config import EstimatorOptions, Settings, get_settings
from .core.models import ResourceTiming, TimingRecord
from .metrics.summary import SUMMARY, Summary, summarize
from .analysis import (
    NetworkAnalyzer,
    group_by_origin,
    estimate_if_connection_was_reused,
    estimate_rtt_by_origin,
    estimate_server_response_time_by_origin,
)
from .parsers import load_records, parse_records, records_from_dataframe
from .reporting import summary_to_dataframe, export_summary_csv
from .exceptions import NetTimingError, RecordParsingError, AnalysisError, NoTimingInformationError


__all__ = [
    "EstimatorOptions",
    "Settings",
    "get_settings",
    "ResourceTiming",
    "TimingRecord",
    "SUMMARY",
    "Summary",
    "summarize",
    "NetworkAnalyzer",
    "group_by_origin",
    "estimate_if_connection_was_reused",
    "estimate_rtt_by_origin",
    "estimate_server_response_time_by_origin",
    "load_records",
    "parse_records",
    "records_from_dataframe",
    "summary_to_dataframe",
    "export_summary_csv",
    "NetTimingError",
    "RecordParsingError",
    "AnalysisError",
    "NoTimingInformationError",
]
