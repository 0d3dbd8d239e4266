"""
Clock — текущая персидская дата по системным часам

Часы являются единственным внешним источником данных движка.
Часы читаются ровно один раз за вызов: все компоненты даты берутся
из одного снимка. Любая ошибка часов → ClockUnavailable.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Callable, Optional

from persian_calendar.converter import gregorian_to_persian
from persian_calendar.core.domain import PersianDate
from persian_calendar.core.exceptions import ClockUnavailable

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ClockConfig:
    """Конфигурация источника времени.

    timezone: None → локальное время процесса
    clock: callable(tz) → datetime; None → datetime.now
    """

    timezone: Optional[tzinfo] = None
    clock: Optional[Callable[[Optional[tzinfo]], datetime]] = None


DEFAULT_CLOCK_CONFIG = ClockConfig()


# =============================================================================
# CURRENT DATE
# =============================================================================


def read_clock(config: Optional[ClockConfig] = None) -> date:
    """
    Один снимок часов → дата (григорианская).

    Raises:
        ClockUnavailable: Если часы выбросили ошибку или вернули не дату
    """
    config = config or DEFAULT_CLOCK_CONFIG
    clock = config.clock or datetime.now

    try:
        snapshot = clock(config.timezone)
    except Exception as e:
        logger.error("Wall clock read failed: %s", e)
        raise ClockUnavailable(f"wall clock read failed: {e}") from e

    if isinstance(snapshot, datetime):
        return snapshot.date()
    if isinstance(snapshot, date):
        return snapshot

    logger.error("Wall clock returned %r instead of a date", snapshot)
    raise ClockUnavailable(
        f"wall clock returned {type(snapshot).__name__}, expected datetime or date"
    )


def get_current_persian_date(config: Optional[ClockConfig] = None) -> PersianDate:
    """
    Текущая персидская дата.

    Args:
        config: Источник времени и часовой пояс (default: локальные часы)

    Returns:
        PersianDate для сегодняшней даты

    Raises:
        ClockUnavailable: Если часы недоступны
    """
    today = read_clock(config)
    logger.debug("Wall clock snapshot: %s", today.isoformat())
    return gregorian_to_persian(today)
