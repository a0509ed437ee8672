"""Демонстрационный сценарий маркетплейса.

Детерминированный прогон:
1. Продавцы Alice (id=1) и Bob (id=2) регистрируются
2. Alice выставляет Laptop ($1000, 5 шт.), Bob — Phone ($500, 10 шт.)
3. Покупатель John (баланс $2000, оплата наличными) регистрируется
4. Листинг товаров
5. John покупает 2 Laptop

Запуск: python -m src.scenario
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from src.core.domain.customer import Customer
from src.core.domain.product import Product
from src.core.domain.seller import Seller
from src.core.math.money import format_money
from src.core.payments.methods import PaymentMethodType, payment_method_for
from src.core.settings import MarketplaceSettings, get_settings
from src.marketplace.registry import Marketplace
from src.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

PURCHASE_PRODUCT = "Laptop"
PURCHASE_QUANTITY = 2


@dataclass(frozen=True)
class ScenarioOutcome:
    """Итог прогона сценария."""

    purchase_attempted: bool
    purchase_succeeded: bool


def build_demo_marketplace() -> tuple[Marketplace, Customer]:
    """Маркетплейс с продавцами, товарами и покупателем John."""
    marketplace = Marketplace()

    alice = Seller(name="Alice", id=1)
    bob = Seller(name="Bob", id=2)
    marketplace.add_seller(alice)
    marketplace.add_seller(bob)

    alice.add_product(marketplace, "Laptop", 1000.0, 5)
    bob.add_product(marketplace, "Phone", 500.0, 10)

    john = Customer(name="John", balance=2000.0)
    john.set_payment_method(payment_method_for(PaymentMethodType.CASH))
    marketplace.add_customer(john)

    return marketplace, john


def format_inventory(
    products: Iterable[Product],
    settings: Optional[MarketplaceSettings] = None,
) -> str:
    """
    Листинг товаров для консоли.

    Returns:
        "Available products:" и по строке на товар
    """
    settings = settings or get_settings()
    lines = ["Available products:"]
    for product in products:
        price = format_money(product.unit_price, settings.money_places, settings.currency_symbol)
        lines.append(f"- {product.name} ({price}, Quantity: {product.remaining_quantity})")
    return "\n".join(lines)


def run(out: Optional[TextIO] = None) -> ScenarioOutcome:
    """
    Прогон сценария.

    Args:
        out: Поток вывода (по умолчанию sys.stdout)

    Returns:
        ScenarioOutcome
    """
    stream = out if out is not None else sys.stdout
    marketplace, customer = build_demo_marketplace()

    stream.write(format_inventory(marketplace.list_products()) + "\n")

    product = marketplace.find_product(PURCHASE_PRODUCT)
    if product is None:
        logger.warning("Product %r not listed, purchase skipped", PURCHASE_PRODUCT)
        return ScenarioOutcome(purchase_attempted=False, purchase_succeeded=False)

    succeeded = customer.buy_product(product, PURCHASE_QUANTITY, out=stream)
    return ScenarioOutcome(purchase_attempted=True, purchase_succeeded=succeeded)


def main() -> int:
    """Точка входа: настройка логирования и прогон сценария."""
    setup_logging()
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
