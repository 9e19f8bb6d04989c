"""Product schemas for input records and responses."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from catalog.models.product import Product, ProductStatus
from catalog.validation.validator import Violation


class ProductCreate(BaseModel):
    """Schema for an incoming product record.

    Fields carry types only; range and length rules are checked by
    ``catalog.validation`` so that a missing field is reported as a
    violation rather than a parse error.
    """

    title: str | None = None
    price: Decimal | None = None
    status: ProductStatus | None = None
    date_added: datetime | None = Field(None, alias="dateAdded")
    description: str | None = None
    keywords: str | None = None
    weight: float | None = None
    quantity_in_stock: int | None = Field(None, alias="quantityInStock")

    model_config = {"populate_by_name": True}

    def to_entity(self) -> Product:
        """Build an unsaved Product from this record."""
        return Product(**self.model_dump())


class ProductResponse(BaseModel):
    """Schema for product response."""

    id: int
    title: str
    price: Decimal
    status: ProductStatus
    date_added: datetime = Field(serialization_alias="dateAdded")
    description: str | None
    keywords: str | None
    weight: float | None
    quantity_in_stock: int | None = Field(serialization_alias="quantityInStock")

    model_config = {"from_attributes": True}


class ViolationResponse(BaseModel):
    """Schema for a reported constraint violation."""

    model_config = {"frozen": True}

    field_path: str = Field(serialization_alias="fieldPath")
    message: str

    @classmethod
    def from_violation(cls, violation: Violation) -> "ViolationResponse":
        return cls(field_path=violation.field_path, message=violation.message)
