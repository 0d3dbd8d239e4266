"""
Date value objects — PersianDate, GregorianDate

Immutable Pydantic модели (frozen=True, strict=True): каждая конвертация
создаёт новый экземпляр, частичная мутация невозможна.

Прямое создание модели с невалидными компонентами → pydantic ValidationError.
Безопасная точка входа для внешних данных — create_persian_date
(InvalidDateComponent).
"""

from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Union

from pydantic import BaseModel, Field, model_validator

from persian_calendar.core.exceptions import InvalidDateComponent
from persian_calendar.core.math.julian_day import gregorian_month_length
from persian_calendar.core.math.persian_arithmetic import get_persian_month_length


# =============================================================================
# PERSIAN DATE
# =============================================================================


class PersianDate(BaseModel):
    """
    Дата персидского (солнечного хиджры) календаря.

    Инвариант: 1 <= day <= get_persian_month_length(year, month)
    """

    year: int = Field(..., description="Год (г. х., любой знак)")
    month: int = Field(..., ge=1, le=12, description="Месяц 1..12 (фарвардин = 1)")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "PersianDate":
        """Проверка дня против длины месяца (12-й месяц зависит от високосности)."""
        month_length = get_persian_month_length(self.year, self.month)
        if self.day > month_length:
            raise ValueError(
                f"day {self.day} exceeds length {month_length} of month {self.month} "
                f"in year {self.year}"
            )
        return self

    def as_tuple(self) -> tuple[int, int, int]:
        """(year, month, day)"""
        return self.year, self.month, self.day

    def __str__(self) -> str:
        return f"{self.year}/{self.month}/{self.day}"


# =============================================================================
# GREGORIAN DATE
# =============================================================================


class GregorianDate(BaseModel):
    """
    Дата пролептического григорианского календаря.

    В отличие от datetime.date допускает любой год (включая 0 и отрицательные).
    """

    year: int = Field(..., description="Год (пролептически, любой знак)")
    month: int = Field(..., ge=1, le=12, description="Месяц 1..12")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "GregorianDate":
        month_length = gregorian_month_length(self.year, self.month)
        if self.day > month_length:
            raise ValueError(
                f"day {self.day} exceeds length {month_length} of month {self.month} "
                f"in year {self.year}"
            )
        return self

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> "GregorianDate":
        """Из datetime.date / datetime.datetime (используется только дата)."""
        if isinstance(value, datetime):
            value = value.date()
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        """
        Конверсия в datetime.date.

        Raises:
            InvalidDateComponent: Если год вне диапазона datetime.date (1..9999)
        """
        if not MINYEAR <= self.year <= MAXYEAR:
            raise InvalidDateComponent(
                f"year {self.year} is outside datetime.date range {MINYEAR}..{MAXYEAR}",
                component="year",
                value=self.year,
            )
        return date(self.year, self.month, self.day)

    def as_tuple(self) -> tuple[int, int, int]:
        """(year, month, day)"""
        return self.year, self.month, self.day
