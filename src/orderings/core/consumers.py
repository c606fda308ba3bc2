"""Predicates that consume an ordering."""
from __future__ import annotations

from itertools import pairwise
from typing import Iterable

from .models import Comparison, Ordering, T


def is_ordered(ordering: Ordering[T], items: Iterable[T]) -> bool:
    """Return True when ``items`` is non-decreasing under ``ordering``.

    Stops at the first adjacent pair that compares greater-than. Empty and
    single-item inputs are ordered.
    """
    for left, right in pairwise(items):
        if ordering(left, right) is Comparison.GREATER_THAN:
            return False
    return True


def less_than_by(ordering: Ordering[T], x: T, y: T) -> bool:
    return ordering(x, y) is Comparison.LESS_THAN


def greater_than_by(ordering: Ordering[T], x: T, y: T) -> bool:
    return ordering(x, y) is Comparison.GREATER_THAN


__all__ = ["is_ordered", "less_than_by", "greater_than_by"]
