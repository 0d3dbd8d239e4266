"""
Converter — публичный API конвертации григорианский ↔ персидский календарь

Композиции через Julian Day Number:
    gregorian_to_persian = julian_day_to_persian ∘ gregorian_to_julian_day
    persian_to_gregorian = julian_day_to_gregorian ∘ persian_to_julian_day

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gregorian_to_persian(persian_to_gregorian(y, m, d)) == PersianDate(y, m, d)
2. persian_to_gregorian(*gregorian_to_persian(g).as_tuple()) == g
3. Компоненты с границы (сырые int, payload) валидируются до арифметики;
   невалидные → InvalidDateComponent, без clamping и без значений по умолчанию
"""

import logging
import math
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional, Union

from jsonschema import ValidationError as SchemaValidationError

from persian_calendar.core.contracts import validate_gregorian_date, validate_persian_date
from persian_calendar.core.domain import GregorianDate, PersianDate
from persian_calendar.core.exceptions import InvalidDateComponent
from persian_calendar.core.math import (
    PERSIAN_YEAR_LIMIT,
    get_persian_month_length,
    gregorian_month_length,
    gregorian_to_jd,
    jd_to_gregorian,
    jd_to_persian,
    persian_to_jd,
)

logger = logging.getLogger(__name__)

GregorianInput = Union[date, datetime, GregorianDate]


# =============================================================================
# ВАЛИДАЦИЯ КОМПОНЕНТОВ
# =============================================================================


def _require_int(component: str, value: Any) -> int:
    # bool является подклассом int, но не валидный компонент даты
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("Rejected %s=%r: not an integer", component, value)
        raise InvalidDateComponent(
            f"{component} must be an integer, got {type(value).__name__}",
            component=component,
            value=value,
        )
    return value


def _check_components(
    year: Any,
    month: Any,
    day: Any,
    month_length: Callable[[int, int], int],
    year_limit: Optional[int] = None,
) -> tuple[int, int, int]:
    year = _require_int("year", year)
    month = _require_int("month", month)
    day = _require_int("day", day)

    if year_limit is not None and abs(year) > year_limit:
        logger.debug("Rejected year=%d: beyond exact Julian day range", year)
        raise InvalidDateComponent(
            f"year must be in -{year_limit}..{year_limit}, got {year}",
            component="year",
            value=year,
        )

    if not 1 <= month <= 12:
        logger.debug("Rejected month=%d for year %d", month, year)
        raise InvalidDateComponent(
            f"month must be in 1..12, got {month}", component="month", value=month
        )

    max_day = month_length(year, month)
    if not 1 <= day <= max_day:
        logger.debug("Rejected day=%d for %d/%d (max %d)", day, year, month, max_day)
        raise InvalidDateComponent(
            f"day must be in 1..{max_day} for month {month} of year {year}, got {day}",
            component="day",
            value=day,
        )

    return year, month, day


def _check_persian_components(year: Any, month: Any, day: Any) -> tuple[int, int, int]:
    return _check_components(year, month, day, get_persian_month_length, PERSIAN_YEAR_LIMIT)


def create_persian_date(year: int, month: int, day: int) -> PersianDate:
    """
    Валидирующий конструктор PersianDate — единственная безопасная точка входа.

    Args:
        year: Год (г. х.)
        month: Месяц 1..12
        day: День 1..get_persian_month_length(year, month)

    Returns:
        PersianDate

    Raises:
        InvalidDateComponent: Если компонент вне домена или не целое число

    Examples:
        >>> create_persian_date(1402, 1, 1)
        PersianDate(year=1402, month=1, day=1)
    """
    year, month, day = _check_persian_components(year, month, day)
    return PersianDate(year=year, month=month, day=day)


def create_gregorian_date(year: int, month: int, day: int) -> GregorianDate:
    """
    Валидирующий конструктор GregorianDate (пролептический, любой год).

    Raises:
        InvalidDateComponent: Если компонент вне домена или не целое число
    """
    year, month, day = _check_components(year, month, day, gregorian_month_length)
    return GregorianDate(year=year, month=month, day=day)


def _schema_error_to_component(error: SchemaValidationError, payload: Any) -> InvalidDateComponent:
    component = str(error.path[0]) if error.path else None
    value = payload.get(component) if component and isinstance(payload, dict) else payload
    return InvalidDateComponent(
        f"invalid date payload: {error.message}", component=component, value=value
    )


def parse_persian_date(payload: Dict[str, Any]) -> PersianDate:
    """
    payload {year, month, day} → PersianDate.

    Сначала JSON Schema (форма и диапазоны), затем create_persian_date
    (длина месяца).

    Raises:
        InvalidDateComponent: Если payload не соответствует контракту
    """
    try:
        validate_persian_date(payload)
    except SchemaValidationError as e:
        raise _schema_error_to_component(e, payload) from e

    return create_persian_date(payload["year"], payload["month"], payload["day"])


def parse_gregorian_date(payload: Dict[str, Any]) -> GregorianDate:
    """
    payload {year, month, day} → GregorianDate.

    Raises:
        InvalidDateComponent: Если payload не соответствует контракту
    """
    try:
        validate_gregorian_date(payload)
    except SchemaValidationError as e:
        raise _schema_error_to_component(e, payload) from e

    return create_gregorian_date(payload["year"], payload["month"], payload["day"])


# =============================================================================
# JULIAN DAY NUMBER
# =============================================================================


def _gregorian_components(value: GregorianInput) -> tuple[int, int, int]:
    if isinstance(value, GregorianDate):
        return value.as_tuple()
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    raise TypeError(
        f"Expected datetime.date, datetime.datetime or GregorianDate, got {type(value).__name__}"
    )


def gregorian_to_julian_day(value: GregorianInput) -> float:
    """
    Григорианская дата → JDN.

    Args:
        value: datetime.date, datetime.datetime (используется дата) или GregorianDate

    Returns:
        Полуцелый JDN
    """
    return gregorian_to_jd(*_gregorian_components(value))


def julian_day_to_gregorian(jd: float) -> GregorianDate:
    """
    JDN → GregorianDate (пролептически, год любого знака).

    Raises:
        ValueError: Если jd NaN/Inf
    """
    year, month, day = jd_to_gregorian(jd)
    return GregorianDate(year=year, month=month, day=day)


def persian_to_julian_day(year: int, month: int, day: int) -> float:
    """
    Персидская дата → JDN.

    Raises:
        InvalidDateComponent: Если компонент вне домена
            (включая |year| > PERSIAN_YEAR_LIMIT, где JDN теряет точность)
    """
    year, month, day = _check_persian_components(year, month, day)
    return persian_to_jd(year, month, day)


def julian_day_to_persian(jd: float) -> PersianDate:
    """
    JDN → PersianDate.

    Raises:
        ValueError: Если jd NaN/Inf
    """
    year, month, day = jd_to_persian(jd)
    return PersianDate(year=year, month=month, day=day)


# =============================================================================
# КОМПОЗИЦИИ
# =============================================================================


def gregorian_to_persian(value: GregorianInput) -> PersianDate:
    """
    Григорианская дата → PersianDate.

    Examples:
        >>> gregorian_to_persian(date(2023, 3, 21))
        PersianDate(year=1402, month=1, day=1)
    """
    return julian_day_to_persian(gregorian_to_julian_day(value))


def persian_to_gregorian(year: int, month: int, day: int) -> date:
    """
    Персидская дата → datetime.date.

    Для дат вне диапазона datetime.date (годы 1..9999) используйте
    julian_day_to_gregorian(persian_to_julian_day(...)).

    Raises:
        InvalidDateComponent: Если компонент вне домена или результат
            вне диапазона datetime.date

    Examples:
        >>> persian_to_gregorian(1402, 1, 1)
        datetime.date(2023, 3, 21)
    """
    return julian_day_to_gregorian(persian_to_julian_day(year, month, day)).to_date()


def get_persian_weekday(value: PersianDate) -> int:
    """
    День недели персидской даты: суббота = 0 … пятница = 6.

    JDN полночи jd: (⌊jd + 1.5⌋ mod 7) даёт воскресенье = 0; сдвиг +1
    переносит начало недели на субботу.
    """
    jd = persian_to_jd(*value.as_tuple())
    return (math.floor(jd + 1.5) + 1) % 7
