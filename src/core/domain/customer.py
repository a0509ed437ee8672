"""
Customer — Модель покупателя

Pydantic модель покупателя с изменяемым балансом и назначенным способом
оплаты. Начальный баланс и имя не проверяются. Баланс меняется только
через способ оплаты (pay/refund), а pay списывает сумму лишь при
balance >= amount, поэтому успешная оплата не уводит баланс в минус.
"""

import sys
from decimal import Decimal
from typing import Optional, TextIO

from pydantic import BaseModel, Field, field_validator

from src.core.domain.product import Product
from src.core.math.money import to_money
from src.core.payments.methods import PaymentMethod


class Customer(BaseModel):
    """
    Модель покупателя.

    Без назначенного способа оплаты любая покупка завершается отказом.
    """

    name: str = Field(..., description="Имя покупателя")
    balance: Decimal = Field(..., description="Баланс")
    payment_method: Optional[PaymentMethod] = Field(
        None, description="Назначенный способ оплаты (None — покупки невозможны)"
    )

    model_config = {"validate_assignment": True, "arbitrary_types_allowed": True}

    @field_validator("balance", mode="before")
    @classmethod
    def coerce_balance(cls, v):
        """float → Decimal через str (2000.0 → Decimal('2000.0'))."""
        if isinstance(v, (int, float, str, Decimal)) and not isinstance(v, bool):
            return to_money(v)
        return v

    def set_payment_method(self, method: Optional[PaymentMethod]) -> None:
        """Назначение (или снятие, если None) способа оплаты."""
        self.payment_method = method

    def buy_product(
        self,
        product: Product,
        quantity: int,
        out: Optional[TextIO] = None,
    ) -> bool:
        """
        Покупка quantity единиц товара.

        product должен быть экземпляром, хранящимся в маркетплейсе
        (find_product / list_products), иначе списание остатка не будет
        видно в листинге.

        Печатает чек при успехе или уведомление об отказе при неуспехе.

        Args:
            product: Товар из маркетплейса
            quantity: Количество
            out: Поток вывода (по умолчанию sys.stdout)

        Returns:
            True если покупка состоялась
        """
        # src.checkout.transaction импортирует src.core.domain, чей __init__ импортирует этот модуль
        from src.checkout.transaction import execute_purchase, render_outcome

        result = execute_purchase(self, product, quantity)
        stream = out if out is not None else sys.stdout
        stream.write(render_outcome(result) + "\n")
        return result.success
