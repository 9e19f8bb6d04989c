"""Field constraints used by the validator rule tables."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


class Constraint(ABC):
    """Base class for a single field constraint."""

    message: str = "is invalid"

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return True when ``value`` satisfies the constraint."""


@dataclass(frozen=True)
class NotNull(Constraint):
    """Value must be present."""

    @property
    def message(self) -> str:
        return "must not be null"

    def is_valid(self, value: Any) -> bool:
        return value is not None


@dataclass(frozen=True)
class Size(Constraint):
    """Length of a present value must lie in ``[min, max]``."""

    min: int = 0
    max: int = 2**31 - 1

    @property
    def message(self) -> str:
        return f"size must be between {self.min} and {self.max}"

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        return self.min <= len(value) <= self.max


@dataclass(frozen=True)
class Min(Constraint):
    """A present numeric value must be greater than or equal to ``value``.

    NaN is never in range.
    """

    value: int | Decimal = 0

    @property
    def message(self) -> str:
        return f"must be greater than or equal to {self.value}"

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, Decimal) and value.is_nan():
            return False
        if isinstance(value, float) and math.isnan(value):
            return False
        return value >= self.value
