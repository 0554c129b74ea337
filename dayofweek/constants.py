"""
Central constants for the day of the week calculator.
All magic numbers and user-facing texts are defined here.
"""

# =============================================================================
# SUPPORTED RANGE
# =============================================================================
MIN_YEAR = 1700                 # Earliest accepted year (inclusive)
MAX_YEAR = 2500                 # Latest accepted year (inclusive)
MIN_MONTH = 1
MAX_MONTH = 12


# =============================================================================
# MONTH LENGTHS
# =============================================================================
THIRTY_DAY_MONTHS = (4, 6, 9, 11)           # April, June, September, November
THIRTY_ONE_DAY_MONTHS = (1, 3, 5, 7, 8, 10, 12)
FEBRUARY = 2
FEBRUARY_DAYS = 28
FEBRUARY_LEAP_DAYS = 29


# =============================================================================
# CLI TEXTS
# =============================================================================
BANNER = "--- Day of the Week Calculator ---"
PROMPT = "Enter a date in the format DD/MM/YYYY (e.g., 15/10/2025): "
INPUT_FORMAT_MESSAGE = "Please ensure the format is exactly DD/MM/YYYY with numbers."
INVALID_DATE_EXIT_MESSAGE = "Exiting program due to invalid date."
INVALID_INDEX_MESSAGE = "Invalid day index calculated."


# =============================================================================
# EXIT CODES
# =============================================================================
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130
