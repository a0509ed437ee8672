"""
Seller — Модель продавца

Immutable Pydantic модель. Продавец не хранит свои товары: товар ссылается
на продавца по seller_id.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from src.core.domain.product import Product
from src.core.math.money import MoneyLike

if TYPE_CHECKING:
    from src.marketplace.registry import Marketplace


class Seller(BaseModel):
    """Модель продавца (уникальность id не проверяется)."""

    name: str = Field(..., description="Имя продавца")
    id: int = Field(..., description="Идентификатор, назначается вызывающим кодом")

    model_config = {"frozen": True}

    def add_product(
        self,
        marketplace: "Marketplace",
        name: str,
        price: MoneyLike,
        quantity: int,
    ) -> None:
        """
        Создание товара от имени продавца и регистрация его на маркетплейсе.

        Args:
            marketplace: Маркетплейс, в который регистрируется товар
            name: Название товара
            price: Цена за единицу
            quantity: Начальный остаток

        Raises:
            pydantic.ValidationError: Если цена или остаток отрицательные
        """
        marketplace.add_product(
            Product(name=name, unit_price=price, remaining_quantity=quantity, seller_id=self.id)
        )
