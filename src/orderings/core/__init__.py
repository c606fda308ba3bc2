"""Pure building blocks: the Comparison type and everything built on it."""
from __future__ import annotations

from importlib import import_module
from typing import Any

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
]

_MODULES = {
    "Comparison": ".models",
    "ComparisonError": ".models",
    "Ordering": ".models",
    "natural": ".constructors",
    "from_less_than": ".constructors",
    "by_to_string": ".constructors",
    "explicit": ".constructors",
    "by_field_with": ".constructors",
    "by_field": ".constructors",
    "break_ties_with": ".combinators",
    "reverse": ".combinators",
    "chain": ".combinators",
    "is_ordered": ".consumers",
    "less_than_by": ".consumers",
    "greater_than_by": ".consumers",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in _MODULES:
        module = import_module(_MODULES[name], __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
