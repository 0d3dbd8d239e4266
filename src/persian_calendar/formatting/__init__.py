"""Display formatting for Persian dates."""

from persian_calendar.formatting.formatter import DateFormat, format_persian_date

__all__ = [
    "DateFormat",
    "format_persian_date",
]
