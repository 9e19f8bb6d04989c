"""Declarative field validation."""

from catalog.validation.constraints import Constraint, Min, NotNull, Size
from catalog.validation.validator import (
    PRODUCT_CONSTRAINTS,
    PRODUCT_FIELD_PATHS,
    Validator,
    Violation,
    product_validator,
    validate,
)

__all__ = [
    "Constraint",
    "NotNull",
    "Size",
    "Min",
    "Violation",
    "Validator",
    "PRODUCT_CONSTRAINTS",
    "PRODUCT_FIELD_PATHS",
    "product_validator",
    "validate",
]
