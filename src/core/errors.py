"""
Errors — Исключения маркетплейса

Бизнес-отказы транзакции покупки исключениями НЕ являются: они
возвращаются как bool / PurchaseResult. Исключения поднимаются только
там, где вызывающий код запросил гарантированный результат
(require_product, payment_method_for).
"""

from typing import Any, Optional


class MarketplaceError(Exception):
    """Базовое исключение маркетплейса (message + машиночитаемый code)."""

    def __init__(self, message: str, code: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ProductNotFoundError(MarketplaceError):
    """Товар с таким именем не зарегистрирован."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Product not found: {name!r}",
            code="PRODUCT_NOT_FOUND",
            details={"name": name},
        )


class UnknownPaymentMethodError(MarketplaceError):
    """Неизвестный способ оплаты."""

    def __init__(self, method: str, supported: list[str]):
        super().__init__(
            message=f"Unknown payment method {method!r}, supported: {', '.join(supported)}",
            code="UNKNOWN_PAYMENT_METHOD",
            details={"method": method, "supported": supported},
        )
