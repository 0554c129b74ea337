"""
Test exception formatting and the error taxonomy
"""
import pytest

from dayofweek.exceptions import (
    ConfigError,
    DateValidationError,
    DayOfWeekError,
    InputFormatError,
    InvalidDayError,
    InvalidIndexError,
    InvalidMonthError,
    InvalidYearError,
)


class TestDayOfWeekError:
    """Test base exception formatting"""

    def test_message_only(self):
        err = DayOfWeekError("Something failed")
        assert str(err) == "Something failed"
        assert err.message == "Something failed"
        assert err.context == {}
        assert err.original_error is None

    def test_context_appended(self):
        err = DayOfWeekError("Bad day", context={"day": 32, "max_day": 31})
        assert str(err) == "Bad day [day=32, max_day=31]"
        assert err.message == "Bad day"

    def test_original_error_appended(self):
        cause = ValueError("boom")
        err = DayOfWeekError("Wrapped", original_error=cause)
        assert str(err) == "Wrapped (caused by: ValueError: boom)"


class TestHierarchy:
    """Test that callers can catch errors at the right level"""

    @pytest.mark.parametrize("exc_cls", [InvalidYearError, InvalidMonthError, InvalidDayError])
    def test_validation_errors(self, exc_cls):
        assert issubclass(exc_cls, DateValidationError)
        assert issubclass(exc_cls, DayOfWeekError)

    @pytest.mark.parametrize("exc_cls", [InputFormatError, InvalidIndexError, ConfigError])
    def test_other_errors_are_not_validation_errors(self, exc_cls):
        assert issubclass(exc_cls, DayOfWeekError)
        assert not issubclass(exc_cls, DateValidationError)

    def test_invalid_day_max_day(self):
        err = InvalidDayError("Day must be between 1 and 30 for 4/2025.", context={"day": 31, "max_day": 30})
        assert err.max_day == 30

    def test_invalid_day_without_context(self):
        assert InvalidDayError("no context").max_day is None
