"""Storage for products."""

from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.product import Product


class ProductRepository(Protocol):
    """Storage operations the product service depends on."""

    async def save(self, product: Product) -> Product: ...

    async def find_by_id(self, product_id: int) -> Product | None: ...

    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Product]: ...

    async def delete_by_id(self, product_id: int) -> None: ...


class SQLAlchemyProductRepository:
    """Product repository backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, product: Product) -> Product:
        """Insert or update a product.

        Args:
            product: Product to persist

        Returns:
            The same product, refreshed from the database
        """
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def find_by_id(self, product_id: int) -> Product | None:
        """Get product by ID."""
        result = await self.db.execute(select(Product).where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Product]:
        """Get products ordered by ID.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of products
        """
        result = await self.db.execute(
            select(Product).order_by(Product.id).offset(skip).limit(limit)
        )
        return list(result.scalars().all())

    async def delete_by_id(self, product_id: int) -> None:
        """Delete product by ID."""
        await self.db.execute(delete(Product).where(Product.id == product_id))
        await self.db.commit()
