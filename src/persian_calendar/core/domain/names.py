"""
Names — таблицы названий персидского календаря

Единственный источник названий месяцев и дней недели.
Форматтер и локализованные таблицы читают их отсюда.
"""

from typing import Final

# Фарвардин .. Эсфанд, индекс month - 1
PERSIAN_MONTH_NAMES: Final[tuple[str, ...]] = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

# Неделя начинается с субботы: индекс 0 = شنبه, 6 = جمعه
PERSIAN_WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنج‌شنبه",
    "جمعه",
)


def month_name(month: int) -> str:
    """Название месяца 1..12."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return PERSIAN_MONTH_NAMES[month - 1]
