"""
Domain models and value objects.

Contains calendar date values and canonical name tables.
"""

from persian_calendar.core.domain.dates import GregorianDate, PersianDate
from persian_calendar.core.domain.names import (
    PERSIAN_MONTH_NAMES,
    PERSIAN_WEEKDAY_NAMES,
    month_name,
)

__all__ = [
    # Date models
    "PersianDate",
    "GregorianDate",
    # Name tables
    "PERSIAN_MONTH_NAMES",
    "PERSIAN_WEEKDAY_NAMES",
    "month_name",
]
