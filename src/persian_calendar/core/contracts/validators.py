"""
Date Payload Contracts

Презентационные слои передают даты как {year, month, day}. Форма и
диапазоны проверяются JSON Schema (draft 2020-12); длина месяца зависит
от високосности и проверяется create_persian_date / create_gregorian_date.

Схемы лежат в schema/ рядом с модулем и компилируются один раз при импорте.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


def _compile(schema_name: str) -> Draft202012Validator:
    """
    schema/<schema_name>.json → скомпилированный валидатор.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return Draft202012Validator(schema)


# =============================================================================
# COMPILED CONTRACTS
# =============================================================================

PERSIAN_DATE_CONTRACT: Final[Draft202012Validator] = _compile("persian_date")
GREGORIAN_DATE_CONTRACT: Final[Draft202012Validator] = _compile("gregorian_date")


# =============================================================================
# VALIDATION
# =============================================================================


def validate_persian_date(data: Dict[str, Any]) -> None:
    """
    Проверка persian_date payload.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    PERSIAN_DATE_CONTRACT.validate(data)


def validate_gregorian_date(data: Dict[str, Any]) -> None:
    """
    Проверка gregorian_date payload.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    GREGORIAN_DATE_CONTRACT.validate(data)
