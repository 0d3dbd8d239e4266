"""
Тесты для Date Formatter

Проверяет:
1. numeric: "{year}/{month}/{day}" без ведущих нулей
2. long/short: "{day} {monthName} {year}"
3. short и long совпадают
4. Строковые значения формата и отказ на неизвестном формате
"""

import pytest

from persian_calendar.core.domain import PERSIAN_MONTH_NAMES, PersianDate
from persian_calendar.formatting import DateFormat, format_persian_date


@pytest.fixture
def nowruz_1402() -> PersianDate:
    return PersianDate(year=1402, month=1, day=1)


class TestFormatPersianDate:
    """Тесты для format_persian_date"""

    def test_numeric(self, nowruz_1402: PersianDate) -> None:
        """Числовой формат без ведущих нулей"""
        assert format_persian_date(nowruz_1402, DateFormat.NUMERIC) == "1402/1/1"
        assert format_persian_date(PersianDate(year=1403, month=12, day=30), "numeric") == (
            "1403/12/30"
        )

    def test_long(self, nowruz_1402: PersianDate) -> None:
        """День, название месяца, год"""
        result = format_persian_date(nowruz_1402, DateFormat.LONG)
        assert result == f"1 {PERSIAN_MONTH_NAMES[0]} 1402"
        assert result.startswith("1 ")
        assert result.endswith(" 1402")

    def test_default_is_long(self, nowruz_1402: PersianDate) -> None:
        """Формат по умолчанию — long"""
        assert format_persian_date(nowruz_1402) == format_persian_date(nowruz_1402, "long")

    def test_short_equals_long(self) -> None:
        """short и long дают одинаковую строку"""
        for month in range(1, 13):
            value = PersianDate(year=1404, month=month, day=15)
            assert format_persian_date(value, DateFormat.SHORT) == format_persian_date(
                value, DateFormat.LONG
            )

    def test_month_name_per_month(self) -> None:
        """Название месяца берётся по month - 1"""
        for month in range(1, 13):
            value = PersianDate(year=1402, month=month, day=1)
            assert format_persian_date(value) == f"1 {PERSIAN_MONTH_NAMES[month - 1]} 1402"

    def test_negative_year(self) -> None:
        """Год до эпохи печатается со знаком"""
        value = PersianDate(year=-5, month=7, day=2)
        assert format_persian_date(value, "numeric") == "-5/7/2"

    def test_string_format_values(self, nowruz_1402: PersianDate) -> None:
        """Строковые значения принимаются наравне с DateFormat"""
        assert format_persian_date(nowruz_1402, "short") == format_persian_date(
            nowruz_1402, DateFormat.SHORT
        )

    @pytest.mark.parametrize("bogus", ["bogus", "LONG", "", "iso"])
    def test_unknown_format_raises(self, nowruz_1402: PersianDate, bogus: str) -> None:
        """Неизвестный формат → ValueError"""
        with pytest.raises(ValueError):
            format_persian_date(nowruz_1402, bogus)
