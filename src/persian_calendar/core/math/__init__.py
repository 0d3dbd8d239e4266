"""
Core math modules

Календарная арифметика на целых числах с гарантией точного round-trip.
"""

# Numerical Safeguards
from persian_calendar.core.math.numerical_safeguards import (
    JD_EXACT_LIMIT,
    JD_HALF_DAY,
    day_offset,
    is_valid_float,
    normalize_midnight,
    normalize_noon,
    validate_julian_day,
)

# Julian Day Converter
from persian_calendar.core.math.julian_day import (
    GREGORIAN_EPOCH,
    GREGORIAN_MONTH_LENGTHS,
    gregorian_month_length,
    gregorian_to_jd,
    is_gregorian_leap_year,
    jd_to_gregorian,
)

# Persian Calendar Arithmetic
from persian_calendar.core.math.persian_arithmetic import (
    DAYS_BEFORE_MONTH,
    GRAND_CYCLE_DAYS,
    GRAND_CYCLE_LEAP_TABLE,
    GRAND_CYCLE_LEAP_YEARS,
    GRAND_CYCLE_YEARS,
    PERSIAN_EPOCH,
    PERSIAN_MONTH_LENGTHS,
    PERSIAN_YEAR_LIMIT,
    days_before_year,
    days_in_persian_year,
    get_persian_month_length,
    is_persian_leap_year,
    jd_to_persian,
    persian_to_jd,
)

__all__ = [
    # Numerical Safeguards
    "JD_EXACT_LIMIT",
    "JD_HALF_DAY",
    "day_offset",
    "is_valid_float",
    "normalize_midnight",
    "normalize_noon",
    "validate_julian_day",
    # Julian Day Converter: Constants
    "GREGORIAN_EPOCH",
    "GREGORIAN_MONTH_LENGTHS",
    # Julian Day Converter: Functions
    "gregorian_month_length",
    "gregorian_to_jd",
    "is_gregorian_leap_year",
    "jd_to_gregorian",
    # Persian Arithmetic: Constants
    "DAYS_BEFORE_MONTH",
    "GRAND_CYCLE_DAYS",
    "GRAND_CYCLE_LEAP_TABLE",
    "GRAND_CYCLE_LEAP_YEARS",
    "GRAND_CYCLE_YEARS",
    "PERSIAN_EPOCH",
    "PERSIAN_MONTH_LENGTHS",
    "PERSIAN_YEAR_LIMIT",
    # Persian Arithmetic: Functions
    "days_before_year",
    "days_in_persian_year",
    "get_persian_month_length",
    "is_persian_leap_year",
    "jd_to_persian",
    "persian_to_jd",
]
