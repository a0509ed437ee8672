"""Marketplace — реестр продавцов, покупателей и товаров в памяти.

- Три упорядоченные последовательности, порядок вставки сохраняется
- При добавлении реестр сохраняет собственную копию записи: изменения
  исходного объекта после add_* в реестре не видны
- find_product / list_products возвращают экземпляры из реестра, поэтому
  покупка по найденному товару видна в последующих листингах
- Удаления нет, поиск — линейный по имени
"""

from typing import Any, Dict, List, Optional

from src.core.contracts import validate_product
from src.core.domain.customer import Customer
from src.core.domain.product import Product
from src.core.domain.seller import Seller
from src.core.errors import ProductNotFoundError
from src.utils.logger import get_logger

logger = get_logger(__name__)


class Marketplace:
    """Реестр маркетплейса (без валидации и без ошибок при добавлении)."""

    def __init__(self):
        self._sellers: List[Seller] = []
        self._customers: List[Customer] = []
        self._products: List[Product] = []

    # ----- registration -----
    def add_seller(self, seller: Seller) -> None:
        self._sellers.append(seller.model_copy(deep=True))
        logger.debug("Seller registered: id=%s name=%s", seller.id, seller.name)

    def add_customer(self, customer: Customer) -> None:
        self._customers.append(customer.model_copy(deep=True))
        logger.debug("Customer registered: name=%s", customer.name)

    def add_product(self, product: Product) -> None:
        self._products.append(product.model_copy(deep=True))
        logger.debug(
            "Product registered: name=%s price=%s qty=%d seller_id=%s",
            product.name,
            product.unit_price,
            product.remaining_quantity,
            product.seller_id,
        )

    # ----- views -----
    def list_products(self) -> tuple[Product, ...]:
        """Товары в порядке регистрации (экземпляры из реестра)."""
        return tuple(self._products)

    def list_sellers(self) -> tuple[Seller, ...]:
        return tuple(self._sellers)

    def list_customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers)

    # ----- lookup -----
    def find_product(self, name: str) -> Optional[Product]:
        """
        Первый товар с точным (регистрозависимым) совпадением имени.

        Args:
            name: Название товара

        Returns:
            Экземпляр из реестра или None
        """
        for product in self._products:
            if product.name == name:
                return product
        return None

    def require_product(self, name: str) -> Product:
        """
        То же, что find_product, но отсутствие товара — ошибка.

        Raises:
            ProductNotFoundError: Если товара с таким именем нет
        """
        product = self.find_product(name)
        if product is None:
            raise ProductNotFoundError(name)
        return product

    # ----- export -----
    def inventory_snapshot(self) -> List[Dict[str, Any]]:
        """
        Снимок склада в JSON-совместимом виде.

        Каждая запись проверяется по контракту product.

        Raises:
            jsonschema.ValidationError: Если запись не соответствует контракту
        """
        snapshot = []
        for product in self._products:
            data = product.model_dump(mode="json")
            validate_product(data)
            snapshot.append(data)
        return snapshot
