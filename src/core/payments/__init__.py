"""
Способы оплаты (Cash, Card, Crypto).
"""

from src.core.payments.methods import (
    CardPayment,
    CashPayment,
    CryptoPayment,
    PaymentMethod,
    PaymentMethodType,
    payment_method_for,
)

__all__ = [
    "PaymentMethod",
    "PaymentMethodType",
    "CashPayment",
    "CardPayment",
    "CryptoPayment",
    "payment_method_for",
]
