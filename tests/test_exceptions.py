"""Tests for custom exception hierarchy."""

import pytest

from net_timing.exceptions import (
    NetTimingError,
    RecordParsingError,
    AnalysisError,
    NoTimingInformationError,
)


def test_exceptions_can_be_caught():
    """Each custom exception should be catchable via the base class."""
    with pytest.raises(NetTimingError):
        raise NetTimingError()
    for exc_cls in [RecordParsingError, AnalysisError, NoTimingInformationError]:
        with pytest.raises(NetTimingError):
            raise exc_cls()


def test_no_timing_information_is_analysis_error():
    """NoTimingInformationError must inherit from AnalysisError."""
    assert issubclass(NoTimingInformationError, AnalysisError)


def test_context_and_suggestion_are_kept():
    exc = RecordParsingError("bad row", context="row 3", suggestion="fix it")
    assert str(exc) == "bad row"
    assert exc.context == "row 3"
    assert exc.suggestion == "fix it"
