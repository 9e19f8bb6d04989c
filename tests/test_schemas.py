"""Tests for product schemas."""

from datetime import datetime, timezone
from decimal import Decimal

from catalog.models.product import Product, ProductStatus
from catalog.schemas.product import ProductCreate, ProductResponse, ViolationResponse
from catalog.validation import Violation, validate


class TestProductCreate:
    """Test the incoming product record."""

    def test_to_entity_carries_fields(self):
        """Test every field is copied onto the entity."""
        added = datetime(2024, 5, 1, tzinfo=timezone.utc)
        record = ProductCreate(
            title="Desk Lamp",
            price=Decimal("24.90"),
            status=ProductStatus.IN_STOCK,
            date_added=added,
            description="Adjustable LED desk lamp",
            keywords="lighting",
            weight=1.2,
            quantity_in_stock=8,
        )

        product = record.to_entity()

        assert isinstance(product, Product)
        assert product.id is None
        assert product.title == "Desk Lamp"
        assert product.price == Decimal("24.90")
        assert product.status is ProductStatus.IN_STOCK
        assert product.date_added == added
        assert product.description == "Adjustable LED desk lamp"
        assert product.keywords == "lighting"
        assert product.weight == 1.2
        assert product.quantity_in_stock == 8

    def test_accepts_camel_case_keys(self):
        """Test camelCase input keys populate the snake_case fields."""
        record = ProductCreate.model_validate(
            {
                "title": "Desk Lamp",
                "price": "24.90",
                "status": "OUT_OF_STOCK",
                "dateAdded": "2024-05-01T00:00:00Z",
                "quantityInStock": 0,
            }
        )

        assert record.status is ProductStatus.OUT_OF_STOCK
        assert record.date_added == datetime(2024, 5, 1, tzinfo=timezone.utc)
        assert record.quantity_in_stock == 0

    def test_missing_fields_reach_validator(self):
        """Test an incomplete record parses and is reported by validation."""
        record = ProductCreate(title="ab")

        violations = validate(record)

        assert Violation(field_path="title", message="size must be between 3 and 100") in violations
        assert Violation(field_path="dateAdded", message="must not be null") in violations


class TestResponses:
    """Test response schemas."""

    def test_product_response_from_entity(self, valid_product):
        """Test responses are built from ORM attributes."""
        valid_product.id = 5

        response = ProductResponse.model_validate(valid_product)
        data = response.model_dump(by_alias=True)

        assert data["id"] == 5
        assert data["title"] == "Producto Válido"
        assert data["status"] is ProductStatus.IN_STOCK
        assert "dateAdded" in data
        assert data["quantityInStock"] is None

    def test_violation_response_shape(self):
        """Test violations serialize as fieldPath and message."""
        violation = Violation(field_path="keywords", message="size must be between 0 and 200")

        response = ViolationResponse.from_violation(violation)

        assert response.model_dump(by_alias=True) == {
            "fieldPath": "keywords",
            "message": "size must be between 0 and 200",
        }

    def test_violation_paths_match_input_keys(self):
        """Test a missing camelCase input key is reported under the same key."""
        record = ProductCreate.model_validate(
            {"title": "Valid title", "price": "1", "status": "IN_STOCK"}
        )

        reported = [
            ViolationResponse.from_violation(v).model_dump(by_alias=True)
            for v in validate(record)
        ]

        assert reported == [{"fieldPath": "dateAdded", "message": "must not be null"}]
