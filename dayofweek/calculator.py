"""Gregorian date validation and day of the week arithmetic.

All functions here are pure except ``is_valid_date``, which reports the
validation failure through a callback or the logger.
"""

from collections.abc import Callable
from enum import IntEnum

from .constants import (
    FEBRUARY,
    FEBRUARY_DAYS,
    FEBRUARY_LEAP_DAYS,
    INVALID_INDEX_MESSAGE,
    MAX_MONTH,
    MAX_YEAR,
    MIN_MONTH,
    MIN_YEAR,
    THIRTY_DAY_MONTHS,
    THIRTY_ONE_DAY_MONTHS,
)
from .exceptions import (
    DateValidationError,
    InvalidDayError,
    InvalidIndexError,
    InvalidMonthError,
    InvalidYearError,
)
from .logger import logger


class Weekday(IntEnum):
    """Weekday index as produced by ``compute_weekday``.

    The sequence starts at Saturday, not Monday or Sunday:
    0=Saturday, 1=Sunday, 2=Monday, 3=Tuesday, 4=Wednesday,
    5=Thursday, 6=Friday. Do not reorder.
    """

    SATURDAY = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(month: int, year: int) -> int:
    """
    Number of days in a month of a given year

    Raises:
        InvalidMonthError: if month is outside 1-12
    """
    if month in THIRTY_DAY_MONTHS:
        return 30
    if month in THIRTY_ONE_DAY_MONTHS:
        return 31
    if month == FEBRUARY:
        return FEBRUARY_LEAP_DAYS if is_leap_year(year) else FEBRUARY_DAYS

    raise InvalidMonthError(
        f"Month must be between {MIN_MONTH} and {MAX_MONTH}.",
        context={"month": month},
    )


def validate_date(day: int, month: int, year: int) -> None:
    """
    Validate a (day, month, year) triple

    Checks run in order: year range, month range, day range. The first
    failing check raises.

    Raises:
        InvalidYearError: year outside MIN_YEAR..MAX_YEAR
        InvalidMonthError: month outside 1-12
        InvalidDayError: day below 1 or beyond the month length
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYearError(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR} for this calculation.",
            context={"year": year},
        )

    if month < MIN_MONTH or month > MAX_MONTH:
        raise InvalidMonthError(
            f"Month must be between {MIN_MONTH} and {MAX_MONTH}.",
            context={"month": month},
        )

    max_day = days_in_month(month, year)
    if day < 1 or day > max_day:
        raise InvalidDayError(
            f"Day must be between 1 and {max_day} for {month}/{year}.",
            context={"day": day, "max_day": max_day},
        )


def is_valid_date(
    day: int,
    month: int,
    year: int,
    report: Callable[[str], None] | None = None,
) -> bool:
    """
    Check whether a date is valid, reporting why when it is not

    Args:
        day, month, year: Date to check
        report: Called with the diagnostic message on failure. When omitted
            the diagnostic is logged as a warning.

    Returns:
        True only when year, month and day checks all pass
    """
    try:
        validate_date(day, month, year)
    except DateValidationError as e:
        if report is not None:
            report(e.message)
        else:
            logger.warning("date.invalid", reason=type(e).__name__, detail=e.message)
        return False
    return True


def compute_weekday(day: int, month: int, year: int) -> Weekday:
    """
    Day of the week via Zeller's congruence

    January and February count as months 13 and 14 of the previous year.
    With C = year // 100 and D = year % 100:

        h = (day + 13*(month+1)//5 + D + D//4 + C//4 + 5*C) % 7

    Inputs are assumed valid; the supported range keeps every term
    non-negative.
    """
    if month == 1:
        month = 13
        year -= 1
    elif month == 2:
        month = 14
        year -= 1

    century = year // 100
    year_of_century = year % 100

    h = (day
         + (13 * (month + 1)) // 5
         + year_of_century
         + year_of_century // 4
         + century // 4
         + 5 * century) % 7

    return Weekday(h)


def weekday_name(index: int) -> str:
    """
    Map a weekday index (0=Saturday ... 6=Friday) to its English name

    Raises:
        InvalidIndexError: index outside 0-6
    """
    try:
        return Weekday(index).display_name
    except ValueError as e:
        raise InvalidIndexError(
            INVALID_INDEX_MESSAGE,
            context={"index": index},
            original_error=e,
        ) from e


def day_of_week(day: int, month: int, year: int) -> str:
    """Validate a date and return the name of its weekday."""
    validate_date(day, month, year)
    return weekday_name(compute_weekday(day, month, year))
