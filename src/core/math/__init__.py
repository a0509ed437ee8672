"""
Core math modules маркетплейса

Денежные примитивы: Decimal-арифметика и форматирование сумм.
"""

from src.core.math.money import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_MONEY_PLACES,
    MoneyLike,
    format_money,
    quantize_money,
    to_money,
    total_cost,
)

__all__ = [
    # Constants
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_MONEY_PLACES",
    # Types
    "MoneyLike",
    # Conversion
    "to_money",
    "total_cost",
    # Formatting
    "quantize_money",
    "format_money",
]
