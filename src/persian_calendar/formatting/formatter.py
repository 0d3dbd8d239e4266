"""
Date Formatter — отображение PersianDate в строку

Форматы:
- numeric: "{year}/{month}/{day}"
- short:   "{day} {monthName} {year}"
- long:    "{day} {monthName} {year}"

short и long сейчас совпадают посимвольно (унаследованное поведение,
сохранено намеренно).
"""

from enum import Enum
from typing import Union

from persian_calendar.core.domain.dates import PersianDate
from persian_calendar.core.domain.names import month_name


# =============================================================================
# ENUMS
# =============================================================================


class DateFormat(str, Enum):
    """Именованные форматы отображения"""

    SHORT = "short"
    LONG = "long"
    NUMERIC = "numeric"


# =============================================================================
# FORMATTING
# =============================================================================


def format_persian_date(
    persian_date: PersianDate,
    format: Union[DateFormat, str] = DateFormat.LONG,
) -> str:
    """
    Форматирование персидской даты.

    Args:
        persian_date: Дата для отображения
        format: DateFormat или его строковое значение (default: long)

    Returns:
        Строка для отображения

    Raises:
        ValueError: Если format не один из short/long/numeric

    Examples:
        >>> format_persian_date(PersianDate(year=1402, month=1, day=1), "numeric")
        '1402/1/1'
    """
    date_format = DateFormat(format)

    if date_format is DateFormat.NUMERIC:
        return f"{persian_date.year}/{persian_date.month}/{persian_date.day}"

    # SHORT и LONG
    return f"{persian_date.day} {month_name(persian_date.month)} {persian_date.year}"
