# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Lazy default mapping module"""

from __future__ import annotations

__all__ = ["LazyDefaultMap", "Resolver", "SelfReferentialLazyDefaultMap"]

import logging
import reprlib
from collections.abc import Callable, Iterator, MutableMapping
from numbers import Integral
from typing import Any, Self

from typing_extensions import final

from ..environ import get_max_resolution_depth
from ..exceptions import CyclicResolutionError, UnresolvedKeyError
from ..resolvers import noop

type Resolver[_KT, _VT] = Callable[[MutableMapping[_KT, _VT], _KT], _VT | None]

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class LazyDefaultMap[_KT, _VT](MutableMapping[_KT, _VT]):
    """A mapping calling a resolver on a read of an absent key.

    The resolver receives the underlying storage (a plain dict) and the missing key.
    It is expected to insert the value in the storage; a non-None value returned
    without insertion is stored as well.
    """

    __slots__ = ("__resolver", "__storage", "__weakref__")

    def __init__(self, __resolver: Resolver[_KT, _VT] | None = None, __initial: dict[_KT, _VT] | None = None, /) -> None:
        if __resolver is None:
            __resolver = noop
        elif not callable(__resolver):
            raise TypeError(f"resolver must be callable, got {__resolver!r}")
        self.__resolver: Resolver[_KT, _VT] = __resolver
        self.__storage: dict[_KT, _VT] = __initial if __initial is not None else {}

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__resolver!r}, {self.__storage!r})"

    def __getitem__(self, key: _KT, /) -> _VT:
        storage = self.__storage
        if key in storage:
            return storage[key]
        value = self._resolve(key)
        if value is _MISSING:
            raise UnresolvedKeyError(key)
        return value

    def __setitem__(self, key: _KT, value: _VT, /) -> None:
        self.__storage[key] = value

    def __delitem__(self, key: _KT, /) -> None:
        del self.__storage[key]

    def __contains__(self, key: object, /) -> bool:
        return key in self.__storage

    def __len__(self) -> int:
        return len(self.__storage)

    def __iter__(self) -> Iterator[_KT]:
        return iter(self.__storage)

    @final
    def read(self, key: _KT, default: Any = None) -> Any:
        """Return the value for key, resolving it if absent.

        If the resolver left the key absent, default is returned and nothing is stored.
        """
        storage = self.__storage
        if key in storage:
            return storage[key]
        value = self._resolve(key)
        if value is _MISSING:
            return default
        return value

    @final
    def write(self, key: _KT, value: _VT) -> None:
        self.__storage[key] = value

    @final
    def has(self, key: _KT) -> bool:
        return key in self.__storage

    # Not resolving counterparts of the MutableMapping mixin methods

    def get(self, key: _KT, default: Any = None) -> Any:  # type: ignore[override]
        return self.__storage.get(key, default)

    def setdefault(self, key: _KT, default: Any = None) -> Any:  # type: ignore[override]
        return self.__storage.setdefault(key, default)

    def pop(self, key: _KT, /, *default: Any) -> Any:  # type: ignore[override]
        return self.__storage.pop(key, *default)

    def clear(self) -> None:
        self.__storage.clear()

    def copy(self) -> Self:
        return self.__class__(self.__resolver, self.__storage.copy())

    __copy__ = copy  # Force use copy() method for 'copy' module, in order not to reduce the object

    def _resolve(self, key: _KT) -> Any:
        storage = self.__storage
        logger.debug("Resolving missing key %r", key)
        returned = self.__resolver(storage, key)
        return self._settle(key, returned)

    def _settle(self, key: _KT, returned: Any) -> Any:
        storage = self.__storage
        if key in storage:
            return storage[key]
        if returned is not None:
            storage[key] = returned
            return returned
        logger.debug("Key %r left unresolved", key)
        return _MISSING

    @property
    def resolver(self) -> Resolver[_KT, _VT]:
        return self.__resolver

    @property
    def storage(self) -> dict[_KT, _VT]:
        return self.__storage


@final
class _DeferredResolution(BaseException):
    # Internal signal unwinding nested resolutions; must never escape a top-level read.

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key: Any = key


@final
class _ResolutionContext:
    __slots__ = ("active", "max_depth")

    def __init__(self, max_depth: int) -> None:
        self.active: dict[Any, None] = {}  # Keys being resolved, ordered from the outermost
        self.max_depth: int = max_depth


class SelfReferentialLazyDefaultMap[_KT, _VT](LazyDefaultMap[_KT, _VT]):
    """A LazyDefaultMap whose resolver receives an autovivifying view over the same storage.

    The resolver can therefore read other missing keys, which are resolved through the same
    mechanism (e.g. computing a recurrence lazily). Nested resolutions deeper than 'max_depth'
    are deferred and finished from a work-list by the outermost read, so that deep keys do not
    exhaust the interpreter stack.
    """

    __slots__ = ("__context",)

    def __init__(
        self,
        __resolver: Resolver[_KT, _VT] | None = None,
        __initial: dict[_KT, _VT] | None = None,
        /,
        *,
        max_depth: int | None = None,
    ) -> None:
        super().__init__(__resolver, __initial)
        if max_depth is None:
            max_depth = get_max_resolution_depth()
        elif isinstance(max_depth, bool) or not isinstance(max_depth, Integral):
            raise TypeError(f"max_depth must be an integer, got {max_depth!r}")
        elif max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {max_depth!r}")
        self.__context: _ResolutionContext = _ResolutionContext(int(max_depth))

    def copy(self) -> Self:
        return self.__class__(self.resolver, self.storage.copy(), max_depth=self.__context.max_depth)

    __copy__ = copy

    def _resolve(self, key: _KT) -> Any:
        context = self.__context
        active = context.active
        if not active:
            return self.__resolve_from_work_list(key)
        if key in active:
            raise CyclicResolutionError(key)
        if len(active) >= context.max_depth:
            raise _DeferredResolution(key)
        return self.__call_resolver(key)

    def __call_resolver(self, key: _KT) -> Any:
        active = self.__context.active
        active[key] = None
        try:
            logger.debug("Resolving missing key %r (depth=%d)", key, len(active))
            returned = self.resolver(self.__view(), key)
        finally:
            del active[key]
        return self._settle(key, returned)

    def __resolve_from_work_list(self, key: _KT) -> Any:
        storage = self.storage
        pending: list[Any] = [key]
        pending_set: set[Any] = {key}
        while pending:
            current = pending[-1]
            if current not in storage:
                try:
                    self.__call_resolver(current)
                except _DeferredResolution as exc:
                    deferred = exc.key
                    if deferred in pending_set:
                        raise CyclicResolutionError(deferred) from None
                    logger.debug("Resolution of %r deferred to resolve %r first", current, deferred)
                    pending.append(deferred)
                    pending_set.add(deferred)
                    continue
            pending_set.discard(pending.pop())
        if key in storage:
            return storage[key]
        return _MISSING

    def __view(self) -> Self:
        view = object.__new__(type(self))
        LazyDefaultMap.__init__(view, self.resolver, self.storage)
        view.__context = self.__context
        return view

    @property
    def max_depth(self) -> int:
        return self.__context.max_depth
