"""Custom exceptions for the day of the week calculator with error context"""

from typing import Any


class DayOfWeekError(Exception):
    """Base exception for calculator errors with enhanced context

    Attributes:
        message: Error message (user-facing, without context)
        context: Additional context dictionary (e.g., day, month, year)
        original_error: Original exception if wrapped
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None,
                 original_error: Exception | None = None):
        self.message = message
        self.context = context or {}
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context"""
        msg = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            msg = f"{msg} [{ctx_str}]"
        if self.original_error:
            msg = f"{msg} (caused by: {type(self.original_error).__name__}: {self.original_error})"
        return msg


class InputFormatError(DayOfWeekError):
    """Input could not be parsed as DD/MM/YYYY

    Common causes:
    - Letters or other non-digit characters
    - Wrong separator (e.g. 15-10-2025)
    - Missing or extra fields
    - Empty input / end of input
    """
    pass


class DateValidationError(DayOfWeekError):
    """Parsed date is not a valid date in the supported range"""
    pass


class InvalidYearError(DateValidationError):
    """Year outside the supported 1700-2500 range"""
    pass


class InvalidMonthError(DateValidationError):
    """Month outside 1-12"""
    pass


class InvalidDayError(DateValidationError):
    """Day below 1 or beyond the length of the month

    The computed maximum day is available as ``context["max_day"]``.
    """

    @property
    def max_day(self) -> int | None:
        return self.context.get("max_day")


class InvalidIndexError(DayOfWeekError):
    """Weekday index outside 0-6"""
    pass


class ConfigError(DayOfWeekError):
    """Configuration validation failed

    Common causes:
    - Config file passed with --config does not exist
    - Malformed YAML
    - Unknown log level
    """
    pass
