"""Product service for CRUD operations."""

import logging

from catalog.core.config import settings
from catalog.models.product import Product
from catalog.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Service class for product operations.

    Every method delegates to the repository and returns its result as is.
    Products are expected to be validated by the caller; repository errors
    propagate unchanged.
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def save(self, product: Product) -> Product:
        """Save a product.

        Args:
            product: Product to save

        Returns:
            Whatever the repository returns for the product
        """
        logger.debug(f"Request to save Product: {product!r}")
        return await self.repository.save(product)

    async def find_one(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product or None if not found
        """
        return await self.repository.find_by_id(product_id)

    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[Product]:
        """Get products with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return, defaults to
                ``settings.DEFAULT_PAGE_SIZE``

        Returns:
            List of products
        """
        if limit is None:
            limit = settings.DEFAULT_PAGE_SIZE
        return await self.repository.find_all(skip=skip, limit=limit)

    async def delete(self, product_id: int) -> None:
        """Delete product by ID."""
        logger.debug(f"Request to delete Product: {product_id}")
        await self.repository.delete_by_id(product_id)
