"""Combinators that build new orderings out of existing ones."""
from __future__ import annotations

from functools import reduce

from .models import Comparison, Ordering, T


def break_ties_with(tiebreaker: Ordering[T], primary: Ordering[T]) -> Ordering[T]:
    """Consult ``tiebreaker`` only when ``primary`` reports equality.

    The tiebreaker comes first so partial application reads in priority
    order: ``functools.partial(break_ties_with, by_value)(by_suit)``.
    """

    def _compare(x: T, y: T) -> Comparison:
        result = primary(x, y)
        if result is Comparison.EQUAL:
            return tiebreaker(x, y)
        return result

    return _compare


def reverse(ordering: Ordering[T]) -> Ordering[T]:
    """Flip less-than and greater-than outcomes; equality is kept."""

    def _compare(x: T, y: T) -> Comparison:
        return ordering(x, y).reversed()

    return _compare


def chain(primary: Ordering[T], *tiebreakers: Ordering[T]) -> Ordering[T]:
    """Combine orderings in priority order, each breaking the ties of the last."""
    return reduce(lambda combined, nxt: break_ties_with(nxt, combined), tiebreakers, primary)


__all__ = ["break_ties_with", "reverse", "chain"]
