"""Normalization helpers.

Centralizes defensive parsing of the free-form values WMATA sends in
otherwise numeric fields (``"ARR"``, ``"BRD"``, ``"---"``).
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--" or value == "---":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def split_codes(value: Any, separator: str = ";") -> list[str]:
    """Split a delimited code list such as ``"RD; BL;"`` into ``["RD", "BL"]``."""
    if not value:
        return []
    return [part.strip() for part in str(value).split(separator) if part.strip()]
