"""
Contract Validation Module

Модуль для валидации JSON контрактов маркетплейса (product, receipt).
"""

from .validators import (
    Contract,
    contract_validator,
    load_schema,
    validate_product,
    validate_receipt,
)

__all__ = [
    "Contract",
    "load_schema",
    "contract_validator",
    "validate_product",
    "validate_receipt",
]
