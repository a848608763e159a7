# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Key validator functions module"""

from __future__ import annotations

__all__ = [
    "is_numeric_key",
    "parse_numeric_key",
]

import math
from numbers import Integral, Real
from typing import Any, TypeAlias

_Number: TypeAlias = int | float


def parse_numeric_key(key: Any) -> _Number | None:
    """Return the number represented by key, or None if it is not a finite number.

    Numbers are taken as is; other objects are parsed from their string form.
    Booleans are never considered as numbers.
    """
    match key:
        case bool():
            return None
        case Integral():
            return int(key)
        case Real():
            value = float(key)
            return value if math.isfinite(value) else None
        case _:
            pass

    text: str = str(key).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def is_numeric_key(key: Any) -> bool:
    return parse_numeric_key(key) is not None
