"""Marketplace — реестр продавцов, покупателей и товаров."""

from .registry import Marketplace

__all__ = ["Marketplace"]
