"""Normalization of iteratee shorthands into a single callback shape.

Every traversal primitive accepts the same four shorthands for "what to do
with each element":

- ``None``: identity.
- a callable: used as-is, optionally bound to a receiver ``context``.
- a non-list object (usually a dict): a partial-match predicate.
- anything else (a key, or a ``list`` path): a property getter.

``cb`` is the single dispatch point. A process-wide factory can replace the
translation via ``set_iteratee``; it is meant to be installed once at start-up
and must not be swapped while traversals are in flight.
"""

from __future__ import annotations

import inspect
import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Callable, Final

from .accessors import matcher, property_
from .errors import IterateeConfigError
from .shapes import is_function, is_object

logger = logging.getLogger(__name__)

_SIGNATURE_CACHE_MAX: Final[int] = max(1, int(os.environ.get("UTILBELT_SIGNATURE_CACHE_MAX", "1024")))
_TRIM_ARGUMENTS: Final[bool] = os.environ.get("UTILBELT_DISABLE_ARITY_TRIM", "0") != "1"

_POSITIONAL_KINDS: Final = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

IterateeFactory = Callable[[object, object], Callable[..., object]]


class IterateeKind(str, Enum):
    IDENTITY = "identity"
    CALLABLE = "callable"
    PROPERTY = "property"
    MATCHER = "matcher"


@dataclass(frozen=True)
class IterateeSpec:
    kind: IterateeKind
    value: object


def identity(value: object, *_args: object) -> object:
    return value


def constant(value: object) -> Callable[..., object]:
    def get(*_args: object) -> object:
        return value

    return get


def noop(*_args: object, **_kwargs: object) -> None:
    return None


def classify_iteratee(value: object) -> IterateeSpec:
    if value is None:
        return IterateeSpec(IterateeKind.IDENTITY, None)
    if is_function(value):
        return IterateeSpec(IterateeKind.CALLABLE, value)
    if is_object(value) and not isinstance(value, (list, tuple)):
        return IterateeSpec(IterateeKind.MATCHER, value)
    return IterateeSpec(IterateeKind.PROPERTY, value)


def _inspect_capacity(func: Callable[..., object]) -> int | None:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtin types such as ``str`` or ``int`` expose no signature.
        return 1
    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL_KINDS:
            count += 1
    return count


@lru_cache(maxsize=_SIGNATURE_CACHE_MAX)
def _cached_capacity(func: Callable[..., object]) -> int | None:
    return _inspect_capacity(func)


def positional_capacity(func: Callable[..., object]) -> int | None:
    """Number of positional arguments ``func`` accepts; ``None`` when unbounded."""
    if not _TRIM_ARGUMENTS:
        return None
    try:
        hash(func)
    except TypeError:
        return _inspect_capacity(func)
    return _cached_capacity(func)


def signature_cache_stats(*, reset: bool = False) -> dict[str, float | int]:
    info = _cached_capacity.cache_info()
    total = info.hits + info.misses
    stats: dict[str, float | int] = {
        "hits": int(info.hits),
        "misses": int(info.misses),
        "size": int(info.currsize),
        "max_size": int(info.maxsize) if info.maxsize is not None else 0,
        "hit_rate": float(info.hits / total) if total else 0.0,
    }
    if reset:
        _cached_capacity.cache_clear()
    return stats


def _trimmed(func: Callable[..., object], capacity: int) -> Callable[..., object]:
    def call(*args: object) -> object:
        return func(*args[:capacity])

    return call


def _with_receiver(func: Callable[..., object], context: object, capacity: int | None) -> Callable[..., object]:
    if capacity is None:
        return lambda *args: func(context, *args)
    if capacity == 0:
        return lambda *args: func()
    limit = capacity - 1
    return lambda *args: func(context, *args[:limit])


def optimize_cb(func: Callable[..., object], context: object = None, arity: int | None = 3) -> Callable[..., object]:
    """Adapt ``func`` to be called with ``arity`` positional arguments.

    Without a ``context`` the function comes back unchanged whenever it can
    already take ``arity`` arguments. With a ``context`` it is passed as the
    first positional argument, the way a bound method receives ``self``.
    Supported arities are 1 (value), 3 (value, key, collection) and
    4 (accumulator, value, key, collection); anything else passes every
    argument through.
    """
    capacity = positional_capacity(func)
    if context is None:
        if capacity is None or (arity in (1, 3, 4) and capacity >= arity):
            return func
        return _trimmed(func, capacity)

    bound = _with_receiver(func, context, capacity)
    if arity == 1:
        return lambda value: bound(value)
    if arity == 3:
        return lambda value, index, collection: bound(value, index, collection)
    if arity == 4:
        return lambda accumulator, value, index, collection: bound(accumulator, value, index, collection)
    return bound


def base_iteratee(value: object, context: object = None, arity: int | None = 3) -> Callable[..., object]:
    spec = classify_iteratee(value)
    if spec.kind is IterateeKind.IDENTITY:
        return identity
    if spec.kind is IterateeKind.CALLABLE:
        return optimize_cb(spec.value, context, arity)
    if spec.kind is IterateeKind.MATCHER:
        return matcher(spec.value)
    return property_(spec.value)


def iteratee(value: object, context: object = None) -> Callable[..., object]:
    """Default factory: translate ``value`` with no fixed argument count."""
    return base_iteratee(value, context, None)


_iteratee_factory: IterateeFactory = iteratee


def get_iteratee() -> IterateeFactory:
    return _iteratee_factory


def is_default_iteratee() -> bool:
    return _iteratee_factory is iteratee


def set_iteratee(factory: IterateeFactory) -> None:
    global _iteratee_factory
    if not callable(factory):
        raise IterateeConfigError(factory)
    _iteratee_factory = factory
    logger.debug("installed custom iteratee factory %r", factory)


def reset_iteratee() -> None:
    global _iteratee_factory
    _iteratee_factory = iteratee
    logger.debug("restored default iteratee factory")


def cb(
    value: object,
    context: object = None,
    arity: int | None = 3,
    *,
    factory: IterateeFactory | None = None,
) -> Callable[..., object]:
    """Translate an iteratee shorthand into a callback for traversal primitives.

    An explicit ``factory`` takes precedence over the process-wide one; the
    built-in translation is used directly while no override is installed.
    """
    if factory is None and _iteratee_factory is iteratee:
        return base_iteratee(value, context, arity)
    chosen = factory if factory is not None else _iteratee_factory
    callback = chosen(value, context)
    return optimize_cb(callback, None, arity)
