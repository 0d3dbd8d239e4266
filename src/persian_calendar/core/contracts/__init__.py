"""
Contract Validation Module

Валидация JSON payload дат (persian_date, gregorian_date).
"""

from .validators import (
    GREGORIAN_DATE_CONTRACT,
    PERSIAN_DATE_CONTRACT,
    validate_gregorian_date,
    validate_persian_date,
)

__all__ = [
    # Compiled schemas
    "PERSIAN_DATE_CONTRACT",
    "GREGORIAN_DATE_CONTRACT",
    # Functions
    "validate_persian_date",
    "validate_gregorian_date",
]
