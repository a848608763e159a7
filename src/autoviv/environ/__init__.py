# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""autoviv's environment configuration module

Settings can be given through the following environment variables:
- AUTOVIV_MAX_RESOLUTION_DEPTH: nesting depth after which self-referential resolutions are deferred (default: 128)
"""

from __future__ import annotations

__all__ = [
    "AutovivEnvironmentWarning",
    "DEFAULT_MAX_RESOLUTION_DEPTH",
    "MAX_RESOLUTION_DEPTH_ENV_VAR",
    "get_max_resolution_depth",
]

import os
import warnings
from typing import Final

DEFAULT_MAX_RESOLUTION_DEPTH: Final[int] = 128
MAX_RESOLUTION_DEPTH_ENV_VAR: Final[str] = "AUTOVIV_MAX_RESOLUTION_DEPTH"


class AutovivEnvironmentWarning(UserWarning):
    pass


def get_max_resolution_depth() -> int:
    value: str = os.environ.get(MAX_RESOLUTION_DEPTH_ENV_VAR, "").strip()
    if not value:
        return DEFAULT_MAX_RESOLUTION_DEPTH
    try:
        depth = int(value)
    except ValueError:
        depth = 0
    if depth < 1:
        warnings.warn(
            f"Invalid value for {MAX_RESOLUTION_DEPTH_ENV_VAR!r}, got {value!r}. Using default ({DEFAULT_MAX_RESOLUTION_DEPTH})",
            category=AutovivEnvironmentWarning,
            stacklevel=2,
        )
        return DEFAULT_MAX_RESOLUTION_DEPTH
    return depth
