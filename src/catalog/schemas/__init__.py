"""Pydantic schemas for input records and responses."""

from catalog.schemas.product import ProductCreate, ProductResponse, ViolationResponse

__all__ = [
    "ProductCreate",
    "ProductResponse",
    "ViolationResponse",
]
