# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""autoviv's collections module"""

from __future__ import annotations

__all__ = [
    "LazyDefaultMap",
    "Resolver",
    "SelfReferentialLazyDefaultMap",
]

from ._lazydict import LazyDefaultMap, Resolver, SelfReferentialLazyDefaultMap
