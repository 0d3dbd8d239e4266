"""
Exceptions — таксономия ошибок календарного движка

- InvalidDateComponent: год/месяц/день вне документированного домена
- ClockUnavailable: чтение системных часов невозможно

Политика: fail-fast, без retry, без clamping/коэрции компонентов.
"""

from typing import Any, Optional


class CalendarError(Exception):
    """Базовая ошибка календарного движка."""

    pass


class InvalidDateComponent(CalendarError, ValueError):
    """
    Компонент даты вне документированного домена.

    Вызывающий код НЕ должен подменять дату значением по умолчанию:
    ошибка пробрасывается дальше или показывается явно.

    Attributes:
        component: Имя компонента ('year', 'month', 'day')
        value: Отклонённое значение
    """

    def __init__(self, message: str, component: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.component = component
        self.value = value


class ClockUnavailable(CalendarError):
    """Системные часы недоступны (влияет только на get_current_persian_date)."""

    pass
