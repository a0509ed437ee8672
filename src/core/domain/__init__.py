"""
Domain models and value objects.

Contains fundamental domain entities like Product, Seller, Customer, Receipt.
"""

from src.core.domain.customer import Customer
from src.core.domain.product import Product
from src.core.domain.receipt import Receipt
from src.core.domain.seller import Seller

__all__ = [
    "Product",
    "Seller",
    "Customer",
    "Receipt",
]
