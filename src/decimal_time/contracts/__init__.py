"""
Contract Validation Module

Модуль для валидации JSON контрактов Decimal Time.
"""

from .validators import (
    ContractValidator,
    DecimalTimeValidator,
    SchemaLoader,
    validate_decimal_time,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalTimeValidator",
    # Functions
    "validate_decimal_time",
]
