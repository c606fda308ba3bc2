"""Constructors that turn plain values, predicates and projections into orderings."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from .models import Comparison, F, Ordering, T

logger = logging.getLogger(__name__)


def natural(x: Any, y: Any) -> Comparison:
    """Order values by their built-in ``<`` / ``>`` operators."""
    if x < y:
        return Comparison.LESS_THAN
    if x > y:
        return Comparison.GREATER_THAN
    return Comparison.EQUAL


def from_less_than(lt: Callable[[T, T], bool]) -> Ordering[T]:
    """Lift a strict less-than predicate into a three-way ordering.

    The predicate is called at most twice per comparison and is trusted to be
    a strict weak ordering; nothing is validated.
    """

    def _compare(x: T, y: T) -> Comparison:
        if lt(x, y):
            return Comparison.LESS_THAN
        if lt(y, x):
            return Comparison.GREATER_THAN
        return Comparison.EQUAL

    return _compare


def by_to_string(x: Any, y: Any) -> Comparison:
    """Order values by their ``str()`` form, codepoint by codepoint.

    Handy while prototyping; the result changes whenever a type's text
    representation does, so prefer a field-based ordering for anything lasting.
    """
    return natural(str(x), str(y))


def explicit(ranking: Iterable[T]) -> Ordering[T]:
    """Rank values by their position in ``ranking`` (earlier is lesser).

    Values missing from the ranking sort before every ranked value and are
    all equal to one another. Duplicates keep their first position. Lookups
    use ``==`` so unhashable values work, at linear cost per comparison.
    """
    ranked = tuple(ranking)
    logger.debug("Built explicit ordering over %d ranked values", len(ranked))

    def _compare(x: T, y: T) -> Comparison:
        remaining = iter(ranked)
        for value in remaining:
            found_x = value == x
            found_y = value == y
            if found_x and found_y:
                return Comparison.EQUAL
            if found_x:
                # x ranks first; y is greater if it shows up later, else absent
                if any(other == y for other in remaining):
                    return Comparison.LESS_THAN
                return Comparison.GREATER_THAN
            if found_y:
                if any(other == x for other in remaining):
                    return Comparison.GREATER_THAN
                return Comparison.LESS_THAN
        return Comparison.EQUAL

    return _compare


def by_field_with(field_ordering: Ordering[F], extract: Callable[[T], F]) -> Ordering[T]:
    """Compare values by a projected field using ``field_ordering``."""

    def _compare(x: T, y: T) -> Comparison:
        return field_ordering(extract(x), extract(y))

    return _compare


def by_field(extract: Callable[[T], Any]) -> Ordering[T]:
    return by_field_with(natural, extract)


__all__ = [
    "natural",
    "from_less_than",
    "by_to_string",
    "explicit",
    "by_field_with",
    "by_field",
]
