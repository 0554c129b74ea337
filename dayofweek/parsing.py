"""Input parsing for DD/MM/YYYY dates"""

import re

from .constants import INPUT_FORMAT_MESSAGE
from .exceptions import InputFormatError

_DATE_PATTERN = re.compile(r'(\d+)/(\d+)/(\d+)', re.ASCII)


def parse_date(text: str) -> tuple[int, int, int]:
    """
    Parse a date typed as DD/MM/YYYY

    Rules:
    - Exactly three groups of ASCII digits separated by '/'
    - Leading and trailing whitespace is ignored
    - Field widths are not enforced (5/3/2025 is accepted)

    Examples:
        15/10/2025   -> (15, 10, 2025)
        ' 1/1/2000 ' -> (1, 1, 2000)
        15-10-2025   -> InputFormatError
        abc          -> InputFormatError

    Range checks are not done here; see calculator.validate_date.

    Raises:
        InputFormatError: if text is not in the expected shape
    """
    if not text or not isinstance(text, str):
        raise InputFormatError(INPUT_FORMAT_MESSAGE, context={"input": repr(text)})

    match = _DATE_PATTERN.fullmatch(text.strip())
    if not match:
        raise InputFormatError(INPUT_FORMAT_MESSAGE, context={"input": repr(text)})

    try:
        day, month, year = (int(group) for group in match.groups())
    except ValueError as e:
        # Digit groups past the interpreter's int conversion limit
        raise InputFormatError(INPUT_FORMAT_MESSAGE, context={"input": repr(text[:32])},
                               original_error=e) from e
    return day, month, year


def format_date(day: int, month: int, year: int) -> str:
    """Echo a date back as d/m/y, without zero padding."""
    return f"{day}/{month}/{year}"
