"""
Core domain models, money primitives, payment methods and contracts.

This module contains the foundational building blocks of the marketplace
that are independent of the registry and the entry flow.
"""
