"""
persian_calendar — Gregorian ↔ Persian (solar Hijri) calendar engine.

Stateless pure-computation library: conversion through a continuous
Julian Day Number, exact 2820-year grand-cycle leap arithmetic,
and display formatting.
"""

__version__ = "0.1.0"

from persian_calendar.clock import ClockConfig, get_current_persian_date
from persian_calendar.converter import (
    create_gregorian_date,
    create_persian_date,
    get_persian_weekday,
    gregorian_to_julian_day,
    gregorian_to_persian,
    julian_day_to_gregorian,
    julian_day_to_persian,
    parse_gregorian_date,
    parse_persian_date,
    persian_to_gregorian,
    persian_to_julian_day,
)
from persian_calendar.core.contracts import validate_gregorian_date, validate_persian_date
from persian_calendar.core.domain import (
    PERSIAN_MONTH_NAMES,
    PERSIAN_WEEKDAY_NAMES,
    GregorianDate,
    PersianDate,
)
from persian_calendar.core.exceptions import CalendarError, ClockUnavailable, InvalidDateComponent
from persian_calendar.core.math import (
    days_in_persian_year,
    get_persian_month_length,
    is_gregorian_leap_year,
    is_persian_leap_year,
)
from persian_calendar.formatting import DateFormat, format_persian_date

__all__ = [
    # Conversion
    "gregorian_to_persian",
    "persian_to_gregorian",
    "gregorian_to_julian_day",
    "julian_day_to_gregorian",
    "persian_to_julian_day",
    "julian_day_to_persian",
    # Construction
    "create_persian_date",
    "create_gregorian_date",
    "parse_persian_date",
    "parse_gregorian_date",
    "validate_persian_date",
    "validate_gregorian_date",
    # Queries
    "is_persian_leap_year",
    "is_gregorian_leap_year",
    "get_persian_month_length",
    "days_in_persian_year",
    "get_persian_weekday",
    # Clock
    "ClockConfig",
    "get_current_persian_date",
    # Formatting
    "DateFormat",
    "format_persian_date",
    # Types
    "PersianDate",
    "GregorianDate",
    "PERSIAN_MONTH_NAMES",
    "PERSIAN_WEEKDAY_NAMES",
    # Exceptions
    "CalendarError",
    "InvalidDateComponent",
    "ClockUnavailable",
]
