"""
Money — Денежные примитивы маркетплейса

Единственный допустимый способ работы с денежными суммами:
- приведение входных значений (int/float/str) к Decimal
- расчёт стоимости покупки (цена за единицу × количество)
- форматирование сумм для консольного вывода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Денежные суммы всегда Decimal, float в расчётах не участвует
2. Стоимость вычисляется без округления (округление только при выводе)
3. Сравнение баланса и суммы — точное, без epsilon
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final, Union


MoneyLike = Union[Decimal, int, float, str]


# =============================================================================
# ПАРАМЕТРЫ ВЫВОДА
# =============================================================================

# Количество знаков после запятой при выводе
DEFAULT_MONEY_PLACES: Final[int] = 2

# Символ валюты при выводе
DEFAULT_CURRENCY_SYMBOL: Final[str] = "$"


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_money(value: MoneyLike) -> Decimal:
    """
    Приведение значения к Decimal.

    float конвертируется через str, чтобы 0.1 не превращался в
    0.1000000000000000055511151231257827...

    Args:
        value: Сумма (Decimal, int, float или строка)

    Returns:
        Сумма как Decimal

    Raises:
        ValueError: Если значение не является конечным числом
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        try:
            result = Decimal(value)
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"Not a money amount: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Money amount must be finite, got {value!r}")
    return result


def total_cost(unit_price: MoneyLike, quantity: int) -> Decimal:
    """
    Стоимость покупки: unit_price × quantity.

    Знак quantity не проверяется: нулевое количество даёт нулевую стоимость,
    отрицательное — отрицательную.

    Args:
        unit_price: Цена за единицу
        quantity: Количество единиц

    Returns:
        Полная стоимость (Decimal, без округления)
    """
    return to_money(unit_price) * quantity


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def quantize_money(value: MoneyLike, places: int = DEFAULT_MONEY_PLACES) -> Decimal:
    """
    Округление суммы до places знаков (ROUND_HALF_UP).

    Args:
        value: Сумма
        places: Количество знаков после запятой (>= 0)

    Returns:
        Округлённая сумма

    Raises:
        ValueError: Если places отрицательный
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    exponent = Decimal(1).scaleb(-places)
    return to_money(value).quantize(exponent, rounding=ROUND_HALF_UP)


def format_money(
    value: MoneyLike,
    places: int = DEFAULT_MONEY_PLACES,
    symbol: str = "",
) -> str:
    """
    Строковое представление суммы для вывода.

    Examples:
        >>> format_money(2000)
        '2000.00'
        >>> format_money("1000.005", symbol="$")
        '$1000.01'
        >>> format_money(-5, places=0)
        '-5'
    """
    amount = quantize_money(value, places)
    if amount == 0:
        # -0.00 → 0.00
        amount = abs(amount)
    if amount < 0:
        return f"-{symbol}{-amount}"
    return f"{symbol}{amount}"
