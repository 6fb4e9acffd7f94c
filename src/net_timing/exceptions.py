"""Custom exceptions for the :mod:`net_timing` package."""


class NetTimingError(Exception):
    """Base class for all custom ``net_timing`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion


class RecordParsingError(NetTimingError):
    """Raised when timing records cannot be loaded or coerced."""


class AnalysisError(NetTimingError):
    """Raised when an estimation step fails."""


class NoTimingInformationError(AnalysisError):
    """Raised when no estimation strategy produced a single sample."""
