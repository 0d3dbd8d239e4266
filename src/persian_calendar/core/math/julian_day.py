"""
Julian Day Converter — григорианский календарь ↔ Julian Day Number

Пролептический григорианский календарь (правило високосности продлено на все
годы любого знака) ↔ непрерывный счёт дней.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. jd_to_gregorian(gregorian_to_jd(y, m, d)) == (y, m, d) для любой валидной даты
2. Целочисленное деление — floor (Python //), поэтому формулы тотальны для y <= 0
3. JDN 1 января 1 г. н.э. = GREGORIAN_EPOCH (полночь, полуцелое значение)

ФОРМУЛЫ:
    jd = GREGORIAN_EPOCH - 1
         + 365·(y-1) + ⌊(y-1)/4⌋ - ⌊(y-1)/100⌋ + ⌊(y-1)/400⌋
         + ⌊(367·m - 362)/12⌋
         - (0 если m <= 2, иначе 1 для високосного года, иначе 2)
         + d
"""

from typing import Final

from persian_calendar.core.math.numerical_safeguards import day_offset, normalize_noon

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# JDN 1 января 1 г. н.э. (полночь)
GREGORIAN_EPOCH: Final[float] = 1721425.5

# Длины периодов в днях
DAYS_PER_400_YEARS: Final[int] = 146097
DAYS_PER_100_YEARS: Final[int] = 36524
DAYS_PER_4_YEARS: Final[int] = 1461
DAYS_PER_YEAR: Final[int] = 365

# Длины месяцев невисокосного года
GREGORIAN_MONTH_LENGTHS: Final[tuple[int, ...]] = (
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)


# =============================================================================
# ВИСОКОСНОСТЬ И ДЛИНЫ МЕСЯЦЕВ
# =============================================================================


def is_gregorian_leap_year(year: int) -> bool:
    """
    Високосный год пролептического григорианского календаря.

    Examples:
        >>> is_gregorian_leap_year(2000)
        True
        >>> is_gregorian_leap_year(1900)
        False
        >>> is_gregorian_leap_year(0)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_length(year: int, month: int) -> int:
    """Количество дней в месяце (1..12) григорианского года."""
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return GREGORIAN_MONTH_LENGTHS[month - 1]


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def gregorian_to_jd(year: int, month: int, day: int) -> float:
    """
    Григорианская дата → Julian Day Number.

    Args:
        year: Год (любой знак, пролептически)
        month: Месяц 1..12
        day: День месяца

    Returns:
        Полуцелый JDN (полночь начала дня)

    Examples:
        >>> gregorian_to_jd(1, 1, 1)
        1721425.5
        >>> gregorian_to_jd(2023, 3, 21)
        2460024.5
    """
    prev = year - 1
    days = DAYS_PER_YEAR * prev + prev // 4 - prev // 100 + prev // 400
    days += (367 * month - 362) // 12

    if month > 2:
        days -= 1 if is_gregorian_leap_year(year) else 2

    days += day
    return (GREGORIAN_EPOCH - 1) + days


def jd_to_gregorian(jd: float) -> tuple[int, int, int]:
    """
    Julian Day Number → григорианская дата.

    Алгоритм:
        1. Нормализация: floor(jd - 0.5) + 0.5
        2. Декомпозиция смещения от эпохи: 400 лет → 100 лет → 4 года → 1 год
        3. Год +1, кроме последнего дня високосного цикла (cent == 4 или yindex == 4)
        4. Месяц: ⌊((yearday + leapadj)·12 + 373) / 367⌋,
           leapadj = 0 до 1 марта, иначе 1 (високосный) или 2

    Args:
        jd: Julian Day Number

    Returns:
        (year, month, day)

    Raises:
        ValueError: Если jd NaN/Inf
    """
    wjd = normalize_noon(jd)
    depoch = day_offset(wjd, GREGORIAN_EPOCH)

    quadricent, dqc = divmod(depoch, DAYS_PER_400_YEARS)
    cent, dcent = divmod(dqc, DAYS_PER_100_YEARS)
    quad, dquad = divmod(dcent, DAYS_PER_4_YEARS)
    yindex = dquad // DAYS_PER_YEAR

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = day_offset(wjd, gregorian_to_jd(year, 1, 1))

    if wjd < gregorian_to_jd(year, 3, 1):
        leapadj = 0
    elif is_gregorian_leap_year(year):
        leapadj = 1
    else:
        leapadj = 2

    month = ((yearday + leapadj) * 12 + 373) // 367
    day = day_offset(wjd, gregorian_to_jd(year, month, 1)) + 1

    return year, month, day
