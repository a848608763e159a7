# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Lazy mapping exceptions definition module"""

from __future__ import annotations

__all__ = ["CyclicResolutionError", "InvalidKeyError", "UnresolvedKeyError"]

from typing import Any


class UnresolvedKeyError(KeyError):
    """The resolver did not give a value for the key"""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key: Any = key


class InvalidKeyError(KeyError):
    """The key is not valid for the resolver"""

    def __init__(self, key: Any, message: str) -> None:
        super().__init__(key, message)
        self.key: Any = key

    def __str__(self) -> str:
        return f"{self.args[1]}: {self.key!r}"


class CyclicResolutionError(RecursionError):
    """The resolution of the key needs the key itself"""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Cyclic resolution of key {key!r}")
        self.key: Any = key
