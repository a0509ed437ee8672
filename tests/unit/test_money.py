"""
Тесты для денежных примитивов (src.core.math.money)

Проверяет:
1. Приведение int/float/str к Decimal без артефактов float
2. Расчёт стоимости покупки
3. Округление и форматирование для вывода
"""

from decimal import Decimal

import pytest

from src.core.math import format_money, quantize_money, to_money, total_cost


class TestToMoney:
    """Тесты для to_money"""

    def test_float_converted_through_str(self) -> None:
        """0.1 → Decimal('0.1'), а не двоичное приближение"""
        assert to_money(0.1) == Decimal("0.1")

    def test_int_and_str(self) -> None:
        assert to_money(2000) == Decimal("2000")
        assert to_money("1000.50") == Decimal("1000.50")

    def test_decimal_passthrough(self) -> None:
        value = Decimal("12.34")
        assert to_money(value) is value

    def test_garbage_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_money("abc")

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_money(float("inf"))
        with pytest.raises(ValueError):
            to_money("NaN")


class TestTotalCost:
    """Тесты для total_cost"""

    def test_price_times_quantity(self) -> None:
        assert total_cost(1000.0, 2) == Decimal("2000")

    def test_exact_decimal_arithmetic(self) -> None:
        """0.1 × 3 == 0.3 точно (во float это не так)"""
        assert total_cost(0.1, 3) == Decimal("0.3")

    def test_zero_and_negative_quantity_not_rejected(self) -> None:
        assert total_cost(500, 0) == 0
        assert total_cost(500, -1) == Decimal("-500")


class TestFormatting:
    """Тесты для quantize_money / format_money"""

    def test_two_places_by_default(self) -> None:
        assert format_money(2000) == "2000.00"
        assert format_money(Decimal("0.0")) == "0.00"

    def test_half_up_rounding(self) -> None:
        assert quantize_money("1.005") == Decimal("1.01")
        assert quantize_money("1.004") == Decimal("1.00")

    def test_symbol_and_sign(self) -> None:
        assert format_money(1000, symbol="$") == "$1000.00"
        assert format_money(-5, places=0, symbol="$") == "-$5"

    def test_negative_zero_printed_as_zero(self) -> None:
        assert format_money(Decimal("-0.001")) == "0.00"

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(ValueError):
            quantize_money(1, places=-1)
