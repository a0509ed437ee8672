"""
Receipt — Чек успешной покупки

Immutable Pydantic модель. Соответствует контракту receipt
(src/core/contracts/schema/receipt.json).
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.core.math.money import DEFAULT_MONEY_PLACES, format_money


class Receipt(BaseModel):
    """
    Чек покупки.

    Создаётся транзакцией покупки после списания оплаты и остатка.
    """

    product_name: str = Field(..., description="Название товара")
    quantity: int = Field(..., description="Купленное количество")
    total_cost: Decimal = Field(..., description="Полная стоимость")
    payment_method: str = Field(..., min_length=1, description="Отображаемое имя способа оплаты")
    remaining_balance: Decimal = Field(..., description="Баланс покупателя после оплаты")

    model_config = {"frozen": True}

    def render(self, places: int = DEFAULT_MONEY_PLACES) -> str:
        """
        Текстовое представление чека для консоли.

        Args:
            places: Знаков после запятой для сумм

        Returns:
            Многострочный текст чека (без завершающего перевода строки)
        """
        return "\n".join(
            [
                "Receipt:",
                f"Product: {self.product_name}",
                f"Quantity: {self.quantity}",
                f"Total Cost: {format_money(self.total_cost, places)}",
                f"Payment Method: {self.payment_method}",
                f"Remaining Balance: {format_money(self.remaining_balance, places)}",
            ]
        )
