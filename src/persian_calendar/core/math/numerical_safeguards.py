"""
Numerical Safeguards — защита арифметики Julian Day Number

Модуль обеспечивает численную устойчивость всех календарных преобразований:
- NaN/Inf никогда не попадают в календарную арифметику (ValueError)
- Нормализация JDN к полуцелому значению (две конвенции: полночь/полдень)
- Точный переход от float JDN к целому смещению в днях от эпохи

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все JDN после нормализации имеют дробную часть ровно 0.5
2. Разность двух полуцелых JDN всегда точное целое (float точен до 2**52)
3. Вся циклическая арифметика выполняется на int, а не на float
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Дробная часть любого нормализованного JDN
JD_HALF_DAY: Final[float] = 0.5

# Максимальный |JDN|, при котором полуцелые значения представимы точно
JD_EXACT_LIMIT: Final[float] = float(2**52)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_julian_day(jd: float) -> float:
    """
    Валидация JDN перед календарной арифметикой.

    Args:
        jd: Julian Day Number

    Returns:
        jd как float

    Raises:
        ValueError: Если jd NaN/Inf или вне диапазона точного представления

    Examples:
        >>> validate_julian_day(2460024.5)
        2460024.5
    """
    try:
        jd = float(jd)
    except OverflowError as e:
        raise ValueError(f"Julian day is too large to represent as float: {e}") from e

    if not is_valid_float(jd):
        raise ValueError(f"Julian day must be a valid float (not NaN/Inf), got {jd}")

    if abs(jd) >= JD_EXACT_LIMIT:
        raise ValueError(
            f"Julian day {jd} exceeds exact half-day resolution limit {JD_EXACT_LIMIT:.0f}"
        )

    return jd


# =============================================================================
# НОРМАЛИЗАЦИЯ JDN
# =============================================================================


def normalize_midnight(jd: float) -> float:
    """
    Нормализация JDN для персидского календаря: floor(jd) + 0.5

    Полуцелые значения не меняются; целое n переходит в n + 0.5.

    Examples:
        >>> normalize_midnight(2460024.5)
        2460024.5
        >>> normalize_midnight(2460024.0)
        2460024.5
    """
    jd = validate_julian_day(jd)
    return math.floor(jd) + JD_HALF_DAY


def normalize_noon(jd: float) -> float:
    """
    Нормализация JDN для григорианского календаря: floor(jd - 0.5) + 0.5

    Полуцелые значения не меняются; целое n переходит в n - 0.5.

    Examples:
        >>> normalize_noon(2460024.5)
        2460024.5
        >>> normalize_noon(2460024.0)
        2460023.5
    """
    jd = validate_julian_day(jd)
    return math.floor(jd - JD_HALF_DAY) + JD_HALF_DAY


def day_offset(jd: float, epoch: float) -> int:
    """
    Точное целое смещение в днях между нормализованным JDN и эпохой.

    Args:
        jd: Нормализованный (полуцелый) JDN
        epoch: Полуцелый JDN эпохи

    Returns:
        jd - epoch как int

    Raises:
        ValueError: Если разность не целая (jd не нормализован)
    """
    delta = jd - epoch
    offset = int(delta)

    if offset != delta:
        raise ValueError(f"Julian day {jd} is not aligned with epoch {epoch}")

    return offset
