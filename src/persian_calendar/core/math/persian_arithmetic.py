"""
Persian Calendar Arithmetic — персидский календарь ↔ Julian Day Number

Арифметический солнечный хиджры календарь с великим циклом 2820 лет:
- 2820 лет = 683 високосных года = 1 029 983 дня
- Месяцы 1..6 по 31 дню, 7..11 по 30 дней, 12-й — 29 или 30
- Не зависит от григорианского конвертера: общий только счёт дней (JDN)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. jd_to_persian(persian_to_jd(y, m, d)) == (y, m, d) для любой валидной даты
2. Високосность точна для любого целого года (только int-арифметика)
3. Длина 12-го месяца == 30 тогда и только тогда, когда год високосный
4. Длина года == 365 + is_persian_leap_year(year)

ФОРМУЛЫ:
    Исходное правило: a = (year + 2346) × 0.24219858156, где
    0.24219858156 — десятичное усечение 683/2820. Точная целочисленная форма:

        счётчик високосных дней растёт в году y  ⇔  ((y + 2346)·683) mod 2820 < 683

    Так как 2346·683 ≡ 558 (mod 2820), число дней от PERSIAN_EPOCH
    до 1 фарвардина года y:

        days_before_year(y) = ⌊(1029983·(y - 1) + 558) / 2820⌋

    Обратное преобразование внутри цикла (cyear — день цикла, 0-based):

        ycycle = ⌊(2820·cyear + 2261) / 1029983⌋ + 1
"""

from typing import Final

from persian_calendar.core.math.numerical_safeguards import JD_EXACT_LIMIT, day_offset, normalize_midnight

# =============================================================================
# КОНСТАНТЫ ВЕЛИКОГО ЦИКЛА
# =============================================================================

# JDN 1 фарвардина 1 г. х. (полночь)
PERSIAN_EPOCH: Final[float] = 1948320.5

GRAND_CYCLE_YEARS: Final[int] = 2820
GRAND_CYCLE_LEAP_YEARS: Final[int] = 683
GRAND_CYCLE_DAYS: Final[int] = 365 * GRAND_CYCLE_YEARS + GRAND_CYCLE_LEAP_YEARS  # 1029983

# Сдвиг года 1 г. х. внутри великого цикла (из исходного правила year + 2346)
GRAND_CYCLE_YEAR_OFFSET: Final[int] = 2346

# (GRAND_CYCLE_YEAR_OFFSET · 683) mod 2820
GRAND_CYCLE_PHASE: Final[int] = (GRAND_CYCLE_YEAR_OFFSET * GRAND_CYCLE_LEAP_YEARS) % GRAND_CYCLE_YEARS

# Числитель округления обратной интерполяции: 2820 - PHASE - 1
GRAND_CYCLE_INVERSE_BIAS: Final[int] = GRAND_CYCLE_YEARS - GRAND_CYCLE_PHASE - 1

# Последний день цикла (cyear, 0-based)
LAST_DAY_OF_CYCLE: Final[int] = GRAND_CYCLE_DAYS - 1

# Максимальный |year|, при котором JDN любого дня года меньше JD_EXACT_LIMIT
PERSIAN_YEAR_LIMIT: Final[int] = (int(JD_EXACT_LIMIT) // GRAND_CYCLE_DAYS - 2) * GRAND_CYCLE_YEARS

# Длины месяцев невисокосного года; 12-й месяц високосного года имеет 30 дней
PERSIAN_MONTH_LENGTHS: Final[tuple[int, ...]] = (
    31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29,
)


def _is_leap_position(year: int) -> bool:
    # Счётчик ⌊(year + 2346)·683/2820⌋ увеличивается на этом году
    return ((year + GRAND_CYCLE_YEAR_OFFSET) * GRAND_CYCLE_LEAP_YEARS) % GRAND_CYCLE_YEARS < GRAND_CYCLE_LEAP_YEARS


# Таблица високосности по позиции в цикле: индекс (year - 1) mod 2820
GRAND_CYCLE_LEAP_TABLE: Final[tuple[bool, ...]] = tuple(
    _is_leap_position(position + 1) for position in range(GRAND_CYCLE_YEARS)
)

# Накопленные дни до начала месяца (индекс month - 1); 12-й месяц не влияет
DAYS_BEFORE_MONTH: Final[tuple[int, ...]] = tuple(
    sum(PERSIAN_MONTH_LENGTHS[:index]) for index in range(12)
)


# =============================================================================
# ВИСОКОСНОСТЬ И ДЛИНЫ МЕСЯЦЕВ
# =============================================================================


def is_persian_leap_year(year: int) -> bool:
    """
    Високосный год персидского календаря (великий цикл 2820 лет).

    Точный поиск в предвычисленной таблице GRAND_CYCLE_LEAP_TABLE,
    без сравнения float.

    Args:
        year: Год персидского календаря (любой знак)

    Returns:
        True если в году 366 дней

    Examples:
        >>> is_persian_leap_year(1399)
        True
        >>> is_persian_leap_year(1402)
        False
        >>> is_persian_leap_year(1403)
        True
    """
    return GRAND_CYCLE_LEAP_TABLE[(year - 1) % GRAND_CYCLE_YEARS]


def get_persian_month_length(year: int, month: int) -> int:
    """
    Количество дней в месяце персидского года.

    Args:
        year: Год персидского календаря
        month: Месяц 1..12

    Returns:
        31 для месяцев 1..6, 30 для 7..11, 30/29 для 12-го
    """
    if month == 12 and is_persian_leap_year(year):
        return 30
    return PERSIAN_MONTH_LENGTHS[month - 1]


def days_in_persian_year(year: int) -> int:
    """Количество дней в персидском году: 365 или 366."""
    return 366 if is_persian_leap_year(year) else 365


def days_before_year(year: int) -> int:
    """
    Число дней от PERSIAN_EPOCH до 1 фарвардина года year.

    Равно 365·(year - 1) плюс число високосных лет в [1, year).
    Тотально для любого целого года, включая year <= 0.
    """
    return (GRAND_CYCLE_DAYS * (year - 1) + GRAND_CYCLE_PHASE) // GRAND_CYCLE_YEARS


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def persian_to_jd(year: int, month: int, day: int) -> float:
    """
    Персидская дата → Julian Day Number.

    jd = PERSIAN_EPOCH - 1 + days_before_year(year) + Σ длин месяцев < month + day

    Компоненты не валидируются: валидация выполняется на границе
    (create_persian_date).

    Examples:
        >>> persian_to_jd(1, 1, 1)
        1948320.5
        >>> persian_to_jd(1402, 1, 1)
        2460024.5
    """
    days = days_before_year(year) + DAYS_BEFORE_MONTH[month - 1] + day
    return (PERSIAN_EPOCH - 1) + days


def jd_to_persian(jd: float) -> tuple[int, int, int]:
    """
    Julian Day Number → персидская дата.

    Алгоритм:
        1. Нормализация: floor(jd) + 0.5
        2. depoch = jd - PERSIAN_EPOCH; cycle = ⌊depoch / 1029983⌋,
           cyear = depoch mod 1029983
        3. Последний день цикла (cyear == 1029982) → ycycle = 2820
        4. Иначе ycycle = ⌊(2820·cyear + 2261) / 1029983⌋ + 1
        5. year = ycycle + 2820·cycle (ycycle 1-based)
        6. День года: jd - persian_to_jd(year, 1, 1) + 1
        7. Проход по месяцам 1..6 (31), затем 7..12 (30/29)

    Args:
        jd: Julian Day Number

    Returns:
        (year, month, day)

    Raises:
        ValueError: Если jd NaN/Inf
    """
    jd = normalize_midnight(jd)
    depoch = day_offset(jd, PERSIAN_EPOCH)

    cycle, cyear = divmod(depoch, GRAND_CYCLE_DAYS)

    if cyear == LAST_DAY_OF_CYCLE:
        ycycle = GRAND_CYCLE_YEARS
    else:
        ycycle = (GRAND_CYCLE_YEARS * cyear + GRAND_CYCLE_INVERSE_BIAS) // GRAND_CYCLE_DAYS + 1

    # ycycle 1-based: цикл 0 начинается с 1 г. х.
    year = ycycle + GRAND_CYCLE_YEARS * cycle
    yday = day_offset(jd, persian_to_jd(year, 1, 1)) + 1

    month = 1
    day = yday
    while month < 12 and day > get_persian_month_length(year, month):
        day -= get_persian_month_length(year, month)
        month += 1

    return year, month, day
