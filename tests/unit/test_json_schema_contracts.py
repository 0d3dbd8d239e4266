"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/additionalProperties)
- Интеграция с Pydantic моделями
"""

import pytest
from jsonschema import ValidationError

from persian_calendar.core.contracts import (
    GREGORIAN_DATE_CONTRACT,
    PERSIAN_DATE_CONTRACT,
    validate_gregorian_date,
    validate_persian_date,
)
from persian_calendar.core.contracts import validators
from persian_calendar.core.domain import PersianDate


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_persian_date():
    """Валидный persian_date для тестирования."""
    return {"year": 1402, "month": 1, "day": 1}


@pytest.fixture
def valid_gregorian_date():
    """Валидный gregorian_date для тестирования."""
    return {"year": 2023, "month": 3, "day": 21}


# =============================================================================
# COMPILED SCHEMAS
# =============================================================================


class TestCompiledSchemas:
    """Тесты компиляции схем"""

    def test_persian_schema(self):
        """Схема persian_date скомпилирована при импорте"""
        assert PERSIAN_DATE_CONTRACT.schema["title"] == "PersianDate"

    def test_gregorian_schema(self):
        """Схема gregorian_date"""
        assert set(GREGORIAN_DATE_CONTRACT.schema["required"]) == {"year", "month", "day"}

    def test_no_validator_built_per_call(self, monkeypatch):
        """validate_persian_date использует валидатор, собранный при импорте"""
        def fail(*args, **kwargs):
            raise AssertionError("validator constructed on call")

        monkeypatch.setattr(validators, "Draft202012Validator", fail)
        validate_persian_date({"year": 1402, "month": 1, "day": 1})
        validate_gregorian_date({"year": 2023, "month": 3, "day": 21})

    def test_missing_schema(self):
        """Несуществующая схема"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            validators._compile("hijri_lunar_date")


# =============================================================================
# PERSIAN DATE CONTRACT
# =============================================================================


class TestPersianDateContract:
    """Тесты persian_date контракта"""

    def test_valid(self, valid_persian_date):
        """Валидные данные проходят"""
        validate_persian_date(valid_persian_date)
        assert PERSIAN_DATE_CONTRACT.is_valid(valid_persian_date)

    def test_negative_year_allowed(self):
        """Год любого знака"""
        validate_persian_date({"year": -621, "month": 10, "day": 11})

    @pytest.mark.parametrize("field", ["year", "month", "day"])
    def test_missing_required(self, valid_persian_date, field):
        """Отсутствие обязательного поля"""
        del valid_persian_date[field]
        with pytest.raises(ValidationError, match="required"):
            validate_persian_date(valid_persian_date)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("year", "1402"),
            ("month", 1.5),
            ("day", None),
            ("year", True),
        ],
    )
    def test_wrong_type(self, valid_persian_date, field, value):
        """Нарушение типа"""
        valid_persian_date[field] = value
        with pytest.raises(ValidationError):
            validate_persian_date(valid_persian_date)

    @pytest.mark.parametrize(
        "field,value",
        [("month", 0), ("month", 13), ("day", 0), ("day", 32)],
    )
    def test_out_of_range(self, valid_persian_date, field, value):
        """Нарушение min/max"""
        valid_persian_date[field] = value
        with pytest.raises(ValidationError):
            validate_persian_date(valid_persian_date)

    def test_additional_properties(self, valid_persian_date):
        """Лишние поля запрещены"""
        valid_persian_date["calendar"] = "jalali"
        with pytest.raises(ValidationError, match="Additional properties"):
            validate_persian_date(valid_persian_date)

    def test_iter_errors_collects_all(self):
        """iter_errors возвращает все нарушения"""
        errors = list(PERSIAN_DATE_CONTRACT.iter_errors({"year": "x", "month": 13, "day": 0}))
        assert len(errors) == 3

    def test_schema_does_not_check_month_length(self):
        """30 эсфанда 1402 проходит схему, но не модель"""
        payload = {"year": 1402, "month": 12, "day": 30}
        validate_persian_date(payload)
        with pytest.raises(ValueError, match="exceeds length 29"):
            PersianDate(**payload)

    def test_pydantic_dump_matches_contract(self):
        """model_dump() модели соответствует контракту"""
        validate_persian_date(PersianDate(year=1403, month=12, day=30).model_dump())


# =============================================================================
# GREGORIAN DATE CONTRACT
# =============================================================================


class TestGregorianDateContract:
    """Тесты gregorian_date контракта"""

    def test_valid(self, valid_gregorian_date):
        """Валидные данные проходят"""
        validate_gregorian_date(valid_gregorian_date)
        assert GREGORIAN_DATE_CONTRACT.is_valid(valid_gregorian_date)

    def test_month_out_of_range(self, valid_gregorian_date):
        """Месяц 13"""
        valid_gregorian_date["month"] = 13
        with pytest.raises(ValidationError):
            validate_gregorian_date(valid_gregorian_date)
        assert not GREGORIAN_DATE_CONTRACT.is_valid(valid_gregorian_date)
