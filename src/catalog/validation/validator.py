"""Rule-table validation for catalog entities.

A rule table is a sequence of ``(field, constraint)`` pairs keyed by attribute
name. The validator reads each field from the object, checks it against the
constraint, and reports every failure as a :class:`Violation` under the
field's external path (``date_added`` is reported as ``dateAdded``).
Validation never raises: an empty result means the object is valid.
"""

import logging
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict

from catalog.validation.constraints import Constraint, Min, NotNull, Size

logger = logging.getLogger(__name__)

Rule = tuple[str, Constraint]


class Violation(BaseModel):
    """A failed constraint on a single field."""

    model_config = ConfigDict(frozen=True)

    field_path: str
    message: str


PRODUCT_CONSTRAINTS: tuple[Rule, ...] = (
    ("title", NotNull()),
    ("title", Size(min=3, max=100)),
    ("price", NotNull()),
    ("price", Min(0)),
    ("status", NotNull()),
    ("date_added", NotNull()),
    ("description", Size(min=10, max=1000)),
    ("keywords", Size(min=0, max=200)),
    ("weight", Min(0)),
    ("quantity_in_stock", Min(0)),
)

PRODUCT_FIELD_PATHS: dict[str, str] = {
    "date_added": "dateAdded",
    "quantity_in_stock": "quantityInStock",
}


class Validator:
    """Evaluate a rule table against objects."""

    def __init__(self, rules: Iterable[Rule], field_paths: dict[str, str] | None = None):
        self.rules = tuple(rules)
        self.field_paths = dict(field_paths or {})

    def path_for(self, field: str) -> str:
        """Reported path of an attribute; unmapped attributes report as is."""
        return self.field_paths.get(field, field)

    def _check(self, obj: Any, rules: Iterable[Rule]) -> set[Violation]:
        violations: set[Violation] = set()
        for field, constraint in rules:
            value = getattr(obj, field, None)
            if not constraint.is_valid(value):
                violations.add(
                    Violation(field_path=self.path_for(field), message=constraint.message)
                )
        return violations

    def validate(self, obj: Any) -> set[Violation]:
        """Check every rule in the table.

        Args:
            obj: Object exposing the validated fields as attributes

        Returns:
            Set of violations, empty when the object is valid
        """
        violations = self._check(obj, self.rules)
        if violations:
            logger.debug(
                f"{type(obj).__name__} failed validation with {len(violations)} violation(s)"
            )
        return violations

    def validate_property(self, obj: Any, field: str) -> set[Violation]:
        """Check only the rules registered for ``field``.

        ``field`` may be the attribute name or its reported path.
        """
        return self._check(
            obj,
            [rule for rule in self.rules if field in (rule[0], self.path_for(rule[0]))],
        )

    def is_valid(self, obj: Any) -> bool:
        return not self.validate(obj)


product_validator = Validator(PRODUCT_CONSTRAINTS, PRODUCT_FIELD_PATHS)


def validate(product: Any) -> set[Violation]:
    """Validate a product against ``PRODUCT_CONSTRAINTS``."""
    return product_validator.validate(product)
