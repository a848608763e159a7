# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Ready-made resolvers for lazy default mappings

A resolver is called with the mapping and the missing key, and is expected to store
the value for the key in the mapping.

Resolvers doing arithmetic on keys must only accept keys parsing as numbers,
see numeric_keys_only(). This policy belongs to the resolver, not to the mapping,
which accepts any hashable key.
"""

from __future__ import annotations

__all__ = [
    "default_factory",
    "fibonacci",
    "key_factory",
    "noop",
    "numeric_keys_only",
    "recurrence",
]

import logging
import operator
from collections.abc import Callable, MutableMapping
from functools import wraps
from typing import Any

from .exceptions import InvalidKeyError
from .validation import parse_numeric_key

logger = logging.getLogger(__name__)


def noop(mapping: MutableMapping[Any, Any], key: Any, /) -> None:
    return None


def default_factory[_VT](factory: Callable[[], _VT], /) -> Callable[[MutableMapping[Any, _VT], Any], _VT]:
    """Store a new value given by factory() for each missing key

    >>> from autoviv.collections import LazyDefaultMap
    >>> h = LazyDefaultMap(default_factory(list))
    >>> h["foo"].append(13)
    >>> h["bar"].append(15)
    >>> h["foo"], h["bar"]
    ([13], [15])
    """
    assert callable(factory)

    def resolver(mapping: MutableMapping[Any, _VT], key: Any, /) -> _VT:
        mapping[key] = value = factory()
        return value

    return _named(resolver, f"default_factory({factory!r})")


def key_factory[_KT, _VT](factory: Callable[[_KT], _VT], /) -> Callable[[MutableMapping[_KT, _VT], _KT], _VT]:
    """Store the value given by factory(key) for each missing key"""
    assert callable(factory)

    def resolver(mapping: MutableMapping[_KT, _VT], key: _KT, /) -> _VT:
        mapping[key] = value = factory(key)
        return value

    return _named(resolver, f"key_factory({factory!r})")


def numeric_keys_only[_F: Callable[..., Any]](resolver: _F, /, *, strict: bool = False) -> _F:
    """Guard resolver against keys whose string form does not parse as a finite number

    Such keys are left absent, or an InvalidKeyError is raised if strict is True.
    """

    @wraps(resolver)
    def wrapper(mapping: MutableMapping[Any, Any], key: Any, /) -> Any:
        if parse_numeric_key(key) is None:
            if strict:
                raise InvalidKeyError(key, "Not a numeric key")
            logger.debug("Non-numeric key %r ignored by %r", key, resolver)
            return None
        return resolver(mapping, key)

    return wrapper  # type: ignore[return-value]


def recurrence(combine: Callable[..., Any], /, order: int = 2) -> Callable[[MutableMapping[Any, Any], Any], None]:
    """Resolver computing f(n) = combine(f(n - 1), f(n - 2), ..., f(n - order))

    The previous terms are read from the mapping, so it must be a self-referential one
    for them to be computed on demand. Keys lower than 'order' are the base cases and must
    be stored by the caller. Keys which are not integral numbers are left absent.

    A numeric string key and its number (e.g. "10" and 10) are the same term: previous terms
    are read with the same form as the requested key, unless only the other form is stored,
    and a term already stored under the other form is copied instead of being computed again.
    """
    assert callable(combine)
    order = int(order)
    if order < 1:
        raise ValueError(f"order must be a positive integer, got {order!r}")

    def resolver(mapping: MutableMapping[Any, Any], key: Any, /) -> None:
        n = parse_numeric_key(key)
        if n is None or n != int(n):
            logger.debug("Key %r is not an integral number", key)
            return
        n = int(n)
        other_form = _other_key_form(key, n)
        if other_form in mapping:
            mapping[key] = mapping[other_form]
            return
        if n < order:
            return
        mapping[key] = combine(*[mapping[_term_key(mapping, key, n - i)] for i in range(1, order + 1)])

    return _named(resolver, f"recurrence({combine!r}, order={order})")


def _other_key_form(key: Any, n: int) -> Any:
    return n if isinstance(key, str) else str(n)


def _term_key(mapping: MutableMapping[Any, Any], key: Any, n: int) -> Any:
    term_key: Any = str(n) if isinstance(key, str) else n
    if term_key not in mapping:
        other_key = _other_key_form(key, n)
        if other_key in mapping:
            return other_key
    return term_key


def _named[_F: Callable[..., Any]](resolver: _F, name: str) -> _F:
    resolver.__name__ = resolver.__qualname__ = name
    return resolver


fibonacci = _named(recurrence(operator.add), "fibonacci")
fibonacci.__doc__ = "Resolver computing f(n) = f(n - 1) + f(n - 2); f(0) and f(1) must be stored by the caller"
