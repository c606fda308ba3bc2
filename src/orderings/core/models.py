"""Core types shared by every ordering constructor and combinator."""
from __future__ import annotations

from enum import Enum
from numbers import Real
from typing import Callable, TypeVar

T = TypeVar("T")
F = TypeVar("F")


class ComparisonError(TypeError):
    """Raised when a comparator result cannot be read as a three-way outcome."""


class Comparison(Enum):
    """Three-way outcome of comparing two values."""

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1

    @classmethod
    def from_int(cls, value: object) -> Comparison:
        """Read a signed-integer comparator result (negative, zero, positive)."""
        if not isinstance(value, Real):
            raise ComparisonError(f"Comparator returned non-numeric result {value!r}")
        if value < 0:
            return cls.LESS_THAN
        if value > 0:
            return cls.GREATER_THAN
        return cls.EQUAL

    def reversed(self) -> Comparison:
        if self is Comparison.LESS_THAN:
            return Comparison.GREATER_THAN
        if self is Comparison.GREATER_THAN:
            return Comparison.LESS_THAN
        return self

    def to_int(self) -> int:
        return self.value


Ordering = Callable[[T, T], Comparison]

__all__ = ["Comparison", "ComparisonError", "Ordering", "T", "F"]
