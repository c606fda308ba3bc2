"""Configuration dataclasses for the line-sorting tool."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(slots=True)
class SortConfig:
    key: str = "natural"  # natural|numeric|length|text
    ranking: tuple[str, ...] = ()
    descending: bool = False
    ignore_case: bool = False
    strip: bool = True

    KEYS: ClassVar[tuple[str, ...]] = ("natural", "numeric", "length", "text")

    def validate(self) -> None:
        if self.key not in self.KEYS:
            raise ValueError(
                f"Unknown sort key {self.key!r}; expected one of {', '.join(self.KEYS)}"
            )
