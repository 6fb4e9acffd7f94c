from .config import settings, get_settings, Settings, EstimatorOptions, resolve_options
from .constants import *  # noqa: F401,F403
from .models import ConnectionId, ResourceTiming, TimingRecord, origin_of, is_valid_phase

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "EstimatorOptions",
    "resolve_options",
    "ConnectionId",
    "ResourceTiming",
    "TimingRecord",
    "origin_of",
    "is_valid_phase",
] + [name for name in globals().keys() if name.isupper()]
