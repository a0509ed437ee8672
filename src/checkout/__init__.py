"""Checkout — транзакция покупки.

- Фиксированный порядок проверок (остаток → способ оплаты → баланс)
- Компенсирующий возврат оплаты, если остаток не удалось списать
- PurchaseResult с причиной отказа для диагностики
"""

from .transaction import (
    FAILURE_NOTICE,
    SUCCESS_NOTICE,
    PurchaseBlockReason,
    PurchaseResult,
    execute_purchase,
    render_outcome,
)

__all__ = [
    "FAILURE_NOTICE",
    "SUCCESS_NOTICE",
    "PurchaseBlockReason",
    "PurchaseResult",
    "execute_purchase",
    "render_outcome",
]
