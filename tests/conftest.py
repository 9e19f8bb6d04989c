"""Pytest configuration and fixtures for testing."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog.models.product import Product, ProductStatus


# Valid product fixture
@pytest.fixture
def valid_product() -> Product:
    """Create a product that satisfies every constraint."""
    return Product(
        title="Producto Válido",
        price=Decimal("99.99"),
        status=ProductStatus.IN_STOCK,
        date_added=datetime.now(timezone.utc),
    )


# Mock repository fixture
@pytest.fixture
def mock_repository() -> AsyncMock:
    """Create a mock product repository."""
    repository = AsyncMock()

    repository.save = AsyncMock(side_effect=lambda product: product)
    repository.find_by_id = AsyncMock(return_value=None)
    repository.find_all = AsyncMock(return_value=[])
    repository.delete_by_id = AsyncMock(return_value=None)

    return repository


# Mock database session fixture
@pytest.fixture
def mock_db() -> AsyncMock:
    """Create a mock AsyncSession."""
    db = AsyncMock()

    # Session.add is synchronous
    db.add = MagicMock()
    db.commit = AsyncMock()
    db.refresh = AsyncMock()
    db.execute = AsyncMock()

    return db
