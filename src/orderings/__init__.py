"""Composable three-way orderings for sorting and comparing values."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import SortConfig

__all__ = [
    "Comparison",
    "ComparisonError",
    "Ordering",
    "natural",
    "from_less_than",
    "by_to_string",
    "explicit",
    "by_field_with",
    "by_field",
    "break_ties_with",
    "reverse",
    "chain",
    "is_ordered",
    "less_than_by",
    "greater_than_by",
    "Comparator",
    "to_cmp",
    "from_cmp",
    "sort_key",
    "sorted_by",
    "OrderingBuilder",
    "SortConfig",
    "utils",
]

_ADAPTERS = {"Comparator", "to_cmp", "from_cmp", "sort_key", "sorted_by"}


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in _ADAPTERS:
        module = import_module(".adapters", __name__)
        return getattr(module, name)
    if name == "OrderingBuilder":
        module = import_module(".builder", __name__)
        return module.OrderingBuilder
    if name in __all__:
        module = import_module(".core", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
