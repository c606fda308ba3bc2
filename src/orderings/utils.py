"""Utility helpers for turning command-line text into sortable values."""
from __future__ import annotations

import math
import re
from typing import Optional

_LIST_SPLIT_RE = re.compile(r"\s*,\s*")


def parse_ranking(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated ranking, dropping blank entries."""
    if not value:
        return ()
    return tuple(entry for entry in _LIST_SPLIT_RE.split(value.strip()) if entry)


def parse_number(value: str) -> Optional[float]:
    try:
        number = float(value)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def clean_line(value: str, strip: bool = True) -> str:
    line = value.rstrip("\r\n")
    return line.strip() if strip else line
