"""
Product — Модель товара

Pydantic модель товара, выставленного продавцом на маркетплейс.

Идентификация (name, seller_id) и цена неизменяемы после создания
(frozen-поля). Изменяемо только remaining_quantity, и только через
purchase(). Остаток никогда не становится отрицательным: validate_assignment
перепроверяет ограничение ge=0 при каждом присваивании.

Отрицательные цена и остаток отклоняются уже при создании (ValidationError).
Название не проверяется: пустая строка допустима.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from src.core.math.money import to_money


class Product(BaseModel):
    """
    Модель товара.

    Связь с продавцом — только по значению seller_id (существование продавца
    не проверяется).
    """

    name: str = Field(..., frozen=True, description="Название товара")
    unit_price: Decimal = Field(..., ge=0, frozen=True, description="Цена за единицу")
    remaining_quantity: int = Field(..., ge=0, description="Остаток на складе")
    seller_id: int = Field(..., frozen=True, description="Идентификатор продавца")

    model_config = {"validate_assignment": True}

    @field_validator("unit_price", mode="before")
    @classmethod
    def coerce_unit_price(cls, v):
        """float → Decimal через str (1000.0 → Decimal('1000.0'))."""
        if isinstance(v, (int, float, str, Decimal)) and not isinstance(v, bool):
            return to_money(v)
        return v

    def purchase(self, quantity_to_buy: int) -> bool:
        """
        Списание остатка.

        Успех только если quantity_to_buy <= remaining_quantity (покупка всего
        остатка до нуля разрешена). При неуспехе состояние не меняется.
        Нижняя граница quantity_to_buy не проверяется.

        Args:
            quantity_to_buy: Количество к списанию

        Returns:
            True если остаток списан
        """
        if quantity_to_buy <= self.remaining_quantity:
            self.remaining_quantity -= quantity_to_buy
            return True
        return False

    def in_stock(self, quantity: int = 1) -> bool:
        """Достаточно ли остатка для покупки quantity единиц."""
        return self.remaining_quantity >= quantity
