"""Product model for catalog items."""

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Enum, Float, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database import Base


class ProductStatus(str, enum.Enum):
    """Availability of a product."""

    IN_STOCK = "IN_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    BACK_ORDER = "BACK_ORDER"


class Product(Base):
    """Product model representing a catalog item.

    The constructor performs no checks, so an unsaved instance may carry
    ``None`` in any field until it is validated.
    """

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(21, 2),
        nullable=False,
    )
    status: Mapped[ProductStatus] = mapped_column(
        Enum(ProductStatus, name="product_status"),
        nullable=False,
    )
    date_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(1000),
        nullable=True,
    )
    keywords: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
    )
    weight: Mapped[float | None] = mapped_column(
        Float,
        nullable=True,
    )
    quantity_in_stock: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="chk_product_price_non_negative"),
        CheckConstraint("weight >= 0", name="chk_product_weight_non_negative"),
        CheckConstraint(
            "quantity_in_stock >= 0", name="chk_product_quantity_non_negative"
        ),
        CheckConstraint(
            "char_length(title) BETWEEN 3 AND 100", name="chk_product_title_length"
        ),
        CheckConstraint(
            "char_length(description) BETWEEN 10 AND 1000",
            name="chk_product_description_length",
        ),
    )

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, title={self.title!r}, status={self.status!r})"
