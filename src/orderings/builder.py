"""Compose a line ordering from a SortConfig."""
from __future__ import annotations

import logging

from .config import SortConfig
from .core import (
    Ordering,
    break_ties_with,
    by_field,
    by_field_with,
    by_to_string,
    chain,
    explicit,
    natural,
    reverse,
)
from .utils import parse_number

logger = logging.getLogger(__name__)


def _numeric_key(line: str) -> tuple[int, float]:
    number = parse_number(line)
    if number is None:
        return (0, 0.0)
    return (1, number)


class OrderingBuilder:
    """Builds an ``Ordering[str]`` for text lines."""

    def __init__(self, config: SortConfig) -> None:
        config.validate()
        self.config = config

    def build(self) -> Ordering[str]:
        ordering = self._key_ordering()
        steps = [self.config.key]
        if self.config.ranking:
            ranking = self.config.ranking
            if self.config.ignore_case:
                ranking = tuple(entry.casefold() for entry in ranking)
            ordering = chain(explicit(ranking), ordering)
            steps.insert(0, f"explicit[{len(ranking)}]")
        if self.config.ignore_case:
            ordering = by_field_with(ordering, str.casefold)
            steps.append("casefold")
        if self.config.descending:
            ordering = reverse(ordering)
            steps.append("reverse")
        logger.debug("Built line ordering: %s", " -> ".join(steps))
        return ordering

    def _key_ordering(self) -> Ordering[str]:
        key = self.config.key
        if key == "numeric":
            # non-numeric lines first, then by value, text breaks the rest
            return break_ties_with(natural, by_field(_numeric_key))
        if key == "length":
            return break_ties_with(natural, by_field(len))
        if key == "text":
            return by_to_string
        return natural


__all__ = ["OrderingBuilder"]
