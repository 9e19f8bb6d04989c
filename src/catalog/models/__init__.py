"""SQLAlchemy ORM models."""

from catalog.models.product import Product, ProductStatus

__all__ = [
    "Product",
    "ProductStatus",
]
