"""Seed data script for development and testing.

Creates sample catalog products. Every record is checked against the
product validation rules first; records with violations are reported and
skipped.

Environment Variables:
    RESET_DATA: Set to "true" to clear products before seeding (default: false)

Usage:
    python -m scripts.seed_data

    # Start from an empty product table
    RESET_DATA=true python -m scripts.seed_data
"""

import asyncio
import os
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.database import Base, async_session_maker, engine
from catalog.core.logging import configure_logging
from catalog.models import Product, ProductStatus
from catalog.repositories import SQLAlchemyProductRepository
from catalog.schemas import ProductCreate
from catalog.services import ProductService
from catalog.validation import validate

RESET_DATA = os.getenv("RESET_DATA", "false").lower() == "true"

SAMPLE_PRODUCTS = [
    ProductCreate(
        title="Wireless Headphones",
        price=Decimal("99.99"),
        status=ProductStatus.IN_STOCK,
        description="Over-ear noise cancelling headphones",
        keywords="audio, headphones, wireless",
        weight=0.35,
        quantity_in_stock=25,
    ),
    ProductCreate(
        title="Mechanical Keyboard",
        price=Decimal("129.00"),
        status=ProductStatus.BACK_ORDER,
        description="Tenkeyless keyboard with hot-swappable switches",
        keywords="keyboard, peripherals",
        weight=0.9,
        quantity_in_stock=0,
    ),
    ProductCreate(
        title="USB-C Cable",
        price=Decimal("9.50"),
        status=ProductStatus.OUT_OF_STOCK,
        quantity_in_stock=0,
    ),
]


async def reset_products(session: AsyncSession) -> None:
    """Clear the product table."""
    print("Resetting products...")
    await session.execute(text("DELETE FROM product"))
    await session.commit()
    print("  Cleared products")


async def seed_products(service: ProductService, session: AsyncSession) -> list[Product]:
    """Validate and save the sample products."""
    print("Seeding products...")

    # Check if products already exist
    result = await session.execute(select(Product).limit(1))
    if result.scalar_one_or_none():
        print("  Products already exist, skipping...")
        return await service.find_all()

    created = []
    now = datetime.now(timezone.utc)

    for record in SAMPLE_PRODUCTS:
        product = record.model_copy(update={"date_added": now}).to_entity()

        violations = validate(product)
        if violations:
            print(f"  Skipped {record.title!r}:")
            for violation in sorted(violations, key=lambda v: v.field_path):
                print(f"    {violation.field_path}: {violation.message}")
            continue

        created.append(await service.save(product))
        print(f"  Created product: {product.title} (price={product.price}, status={product.status.value})")

    return created


async def main():
    """Create tables and seed products."""
    configure_logging()

    print("=" * 60)
    print("Seeding catalog database...")
    print("=" * 60)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        if RESET_DATA:
            await reset_products(session)

        service = ProductService(SQLAlchemyProductRepository(session))
        products = await seed_products(service, session)

    await engine.dispose()

    print("\n" + "=" * 60)
    print(f"Seeding complete: {len(products)} products")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
