"""Constants shared by the timing estimators."""

# One initial TCP congestion window (10 segments of ~1.4KB).
INITIAL_CWND_BYTES = 14 * 1024

# Timing phases use -1 for "not applicable".
TIMING_NOT_APPLICABLE = -1.0

# HTTP/2 protocols that multiplex requests over a single TCP connection.
MULTIPLEXED_PROTOCOLS = frozenset({"h2", "h2c"})

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}

SUMMARY_LABEL = "(all)"

__all__ = [
    "INITIAL_CWND_BYTES",
    "TIMING_NOT_APPLICABLE",
    "MULTIPLEXED_PROTOCOLS",
    "DEFAULT_PORTS",
    "SUMMARY_LABEL",
]
