"""Day of the week calculator for proleptic Gregorian dates."""

__version__ = "1.0.0"
