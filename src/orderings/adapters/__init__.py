"""Adapters between orderings and Python's signed-integer sort conventions."""
from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from ..core.models import Comparison, Ordering, T


@runtime_checkable
class Comparator(Protocol):
    """Old-style ``cmp`` function: negative, zero or positive."""

    def __call__(self, left: Any, right: Any) -> int:
        ...


def to_cmp(ordering: Ordering[T]) -> Comparator:
    def _cmp(left: T, right: T) -> int:
        return ordering(left, right).to_int()

    return _cmp


def from_cmp(cmp: Comparator) -> Ordering[Any]:
    """Wrap a signed-integer comparator as an ordering.

    A comparator returning something other than a number raises
    ``ComparisonError`` when the ordering is invoked.
    """

    def _compare(x: Any, y: Any) -> Comparison:
        return Comparison.from_int(cmp(x, y))

    return _compare


def sort_key(ordering: Ordering[T]) -> Callable[[T], Any]:
    """Key function for ``sorted``, ``list.sort``, ``min``, ``max`` and friends."""
    return cmp_to_key(to_cmp(ordering))


def sorted_by(ordering: Ordering[T], items: Iterable[T], *, descending: bool = False) -> list[T]:
    return sorted(items, key=sort_key(ordering), reverse=descending)


__all__ = ["Comparator", "to_cmp", "from_cmp", "sort_key", "sorted_by"]
