"""Persistence adapters."""

from catalog.repositories.product_repository import (
    ProductRepository,
    SQLAlchemyProductRepository,
)

__all__ = [
    "ProductRepository",
    "SQLAlchemyProductRepository",
]
