"""Транзакция покупки: проверки, оплата, списание остатка, чек.

Порядок проверок фиксирован, первая неуспешная останавливает транзакцию:
1. Остаток товара >= quantity → иначе insufficient_stock
2. Способ оплаты назначен → иначе no_payment_method
3. Оплата прошла (balance >= total_cost) → иначе insufficient_balance

После успешной оплаты списывается остаток. Если списание не удалось,
оплата возвращается (refund) и транзакция завершается отказом.
Чек успешной покупки проверяется по контракту receipt.
При любом отказе состояние товара и покупателя не меняется.

Однопоточная модель: между проверкой остатка и списанием никто другой
состояние не меняет.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Optional

from src.core.contracts import validate_receipt
from src.core.domain.product import Product
from src.core.domain.receipt import Receipt
from src.core.math.money import total_cost as compute_total_cost
from src.core.settings import get_settings
from src.utils.logger import get_logger

if TYPE_CHECKING:
    from src.core.domain.customer import Customer

logger = get_logger(__name__)

SUCCESS_NOTICE = "Purchase successful!"
FAILURE_NOTICE = "Purchase failed."


class PurchaseBlockReason(str, Enum):
    """Причина отказа в покупке."""

    INSUFFICIENT_STOCK = "insufficient_stock"
    NO_PAYMENT_METHOD = "no_payment_method"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    STOCK_DECREMENT_FAILED = "stock_decrement_failed"


@dataclass(frozen=True)
class PurchaseResult:
    """Результат транзакции покупки."""

    success: bool
    block_reason: Optional[PurchaseBlockReason]

    # Входные параметры для диагностики
    product_name: str
    quantity: int
    total_cost: Decimal

    # Чек (только при success)
    receipt: Optional[Receipt]

    # Детали
    details: str


def execute_purchase(customer: "Customer", product: Product, quantity: int) -> PurchaseResult:
    """
    Выполнение транзакции покупки.

    Args:
        customer: Покупатель (баланс и способ оплаты)
        product: Товар из маркетплейса
        quantity: Количество

    Returns:
        PurchaseResult с решением, чеком и причиной отказа
    """
    cost = compute_total_cost(product.unit_price, quantity)

    # 1. Остаток
    if not product.in_stock(quantity):
        return _blocked(
            PurchaseBlockReason.INSUFFICIENT_STOCK,
            customer,
            product,
            quantity,
            cost,
            f"Requested {quantity}, in stock {product.remaining_quantity}",
        )

    # 2. Способ оплаты
    method = customer.payment_method
    if method is None:
        return _blocked(
            PurchaseBlockReason.NO_PAYMENT_METHOD,
            customer,
            product,
            quantity,
            cost,
            "No payment method assigned",
        )

    # 3. Оплата (сама перепроверяет баланс и списывает его)
    if not method.pay(cost, customer):
        return _blocked(
            PurchaseBlockReason.INSUFFICIENT_BALANCE,
            customer,
            product,
            quantity,
            cost,
            f"Balance {customer.balance} below total cost {cost}",
        )

    # 4. Списание остатка; при неуспехе — компенсирующий возврат оплаты
    if not product.purchase(quantity):
        method.refund(cost, customer)
        return _blocked(
            PurchaseBlockReason.STOCK_DECREMENT_FAILED,
            customer,
            product,
            quantity,
            cost,
            "Stock changed after payment, payment refunded",
        )

    receipt = Receipt(
        product_name=product.name,
        quantity=quantity,
        total_cost=cost,
        payment_method=method.name(),
        remaining_balance=customer.balance,
    )
    validate_receipt(receipt.model_dump(mode="json"))
    logger.info(
        "Purchase completed: customer=%s product=%s qty=%d total=%s method=%s balance=%s",
        customer.name,
        product.name,
        quantity,
        cost,
        method.name(),
        customer.balance,
    )
    return PurchaseResult(
        success=True,
        block_reason=None,
        product_name=product.name,
        quantity=quantity,
        total_cost=cost,
        receipt=receipt,
        details=f"PASS: {quantity} x {product.name} via {method.name()}",
    )


def render_outcome(result: PurchaseResult, places: Optional[int] = None) -> str:
    """
    Консольный текст результата: чек при успехе, уведомление при отказе.

    Причина отказа в текст не попадает (она есть в логе и в result).
    """
    if not result.success or result.receipt is None:
        return FAILURE_NOTICE
    if places is None:
        places = get_settings().money_places
    return f"{SUCCESS_NOTICE}\n{result.receipt.render(places)}"


def _blocked(
    reason: PurchaseBlockReason,
    customer: "Customer",
    product: Product,
    quantity: int,
    cost: Decimal,
    details: str,
) -> PurchaseResult:
    logger.warning(
        "Purchase blocked: customer=%s product=%s qty=%d reason=%s (%s)",
        customer.name,
        product.name,
        quantity,
        reason.value,
        details,
    )
    return PurchaseResult(
        success=False,
        block_reason=reason,
        product_name=product.name,
        quantity=quantity,
        total_cost=cost,
        receipt=None,
        details=details,
    )
