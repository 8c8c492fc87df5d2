"""Shape predicates and own/inherited key enumeration for arbitrary values."""

from __future__ import annotations

import math
import numbers
from collections import ChainMap
from collections.abc import Hashable, Iterator, Mapping, Sized
from enum import Enum
from typing import Final

import jax
import jax.numpy as jnp

MAX_ARRAY_INDEX: Final[int] = 2**53 - 1

_SCALAR_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, bool, numbers.Number)


class CollectionKind(str, Enum):
    EMPTY = "empty"
    ARRAY_LIKE = "array_like"
    MAPPING = "mapping"


def _is_index(key: object) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def get_length(value: object) -> object:
    """Return the length used for array-likeness, or ``None`` when there is none."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get("length")
    if isinstance(value, jax.Array):
        return None if value.ndim == 0 else int(value.shape[0])
    if getattr(value, "ndim", None) == 0:
        return None
    if isinstance(value, Sized) and hasattr(value, "__getitem__"):
        return len(value)
    return None


def is_array_like(value: object) -> bool:
    length = get_length(value)
    if not isinstance(length, numbers.Real) or isinstance(length, bool):
        return False
    return 0 <= length <= MAX_ARRAY_INDEX


def is_object(value: object) -> bool:
    if callable(value):
        return True
    return value is not None and not isinstance(value, _SCALAR_TYPES)


def is_function(value: object) -> bool:
    return callable(value)


def is_string(value: object) -> bool:
    return isinstance(value, str)


def is_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return True
    # 0-d arrays are boxed scalars.
    return isinstance(value, jax.Array) and value.ndim == 0 and bool(jnp.issubdtype(value.dtype, jnp.number))


def is_arguments(value: object) -> bool:
    return isinstance(value, tuple)


def is_undefined(value: object) -> bool:
    return value is None


def collection_kind(value: object) -> CollectionKind:
    if value is None:
        return CollectionKind.EMPTY
    if is_array_like(value):
        return CollectionKind.ARRAY_LIKE
    return CollectionKind.MAPPING


def _attribute_names(value: object) -> list[str]:
    names = [name for name in getattr(value, "__dict__", {}) if not (name.startswith("__") and name.endswith("__"))]
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__") or slot in names:
                continue
            if hasattr(value, slot):
                names.append(slot)
    return names


def _has_attribute_storage(value: object) -> bool:
    if hasattr(value, "__dict__"):
        return True
    return any("__slots__" in cls.__dict__ for cls in type(value).__mro__)


def get_keys(value: object) -> list:
    """Own enumerable keys of ``value``; ``[]`` for anything that is not an object.

    Mappings give their keys, array-likes their indices, other objects their
    instance attributes. Sets, dict views and generators carry no own keys, so
    traversals over them visit nothing; convert them with ``list()`` first.
    """
    if not is_object(value):
        return []
    if isinstance(value, ChainMap):
        return list(value.maps[0]) if value.maps else []
    if isinstance(value, Mapping):
        return list(value)
    if is_array_like(value):
        return list(range(math.ceil(get_length(value))))
    return _attribute_names(value)


def _inherited_keys(value: object) -> list:
    if isinstance(value, ChainMap):
        return [key for parent in value.maps[1:] for key in parent]
    if isinstance(value, Mapping) or is_array_like(value) or not _has_attribute_storage(value):
        return []
    keys = []
    for cls in type(value).__mro__:
        if cls is object:
            continue
        for name, attr in cls.__dict__.items():
            if name.startswith("_") or callable(attr):
                continue
            if isinstance(attr, (property, staticmethod, classmethod)):
                continue
            keys.append(name)
    return keys


def all_keys(value: object) -> list:
    """Own keys followed by inherited keys that are not shadowed."""
    if not is_object(value):
        return []
    keys = get_keys(value)
    seen = set(keys)
    for key in _inherited_keys(value):
        if key not in seen:
            seen.add(key)
            keys.append(key)
    return keys


def lookup(obj: object, key: object) -> object:
    """Null-safe single-step access: item for mappings/array-likes, attribute otherwise."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key) if isinstance(key, Hashable) else None
    if _is_index(key) and is_array_like(obj):
        return obj[key] if 0 <= key < get_length(obj) else None
    if isinstance(key, str):
        return getattr(obj, key, None)
    return None


def contains_key(obj: object, key: object) -> bool:
    """Membership test that also sees inherited keys (parent maps, class attributes)."""
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return isinstance(key, Hashable) and key in obj
    if _is_index(key) and is_array_like(obj):
        return 0 <= key < get_length(obj)
    if isinstance(key, str):
        return hasattr(obj, key)
    return False


def _has_own(obj: object, key: object) -> bool:
    if obj is None:
        return False
    if isinstance(obj, ChainMap):
        return bool(obj.maps) and isinstance(key, Hashable) and key in obj.maps[0]
    if isinstance(obj, Mapping):
        return isinstance(key, Hashable) and key in obj
    if _is_index(key) and is_array_like(obj):
        return 0 <= key < get_length(obj)
    return key in get_keys(obj)


def has_property(obj: object, path: object) -> bool:
    """Own-key membership for a single key or a ``list`` path."""
    if not isinstance(path, list):
        return _has_own(obj, path)
    for key in path:
        if not _has_own(obj, key):
            return False
        obj = lookup(obj, key)
    return bool(path)


def iter_elements(collection: object) -> Iterator[object]:
    if not is_array_like(collection):
        return
    length = math.ceil(get_length(collection))
    if isinstance(collection, Mapping):
        for index in range(length):
            yield collection.get(index)
        return
    for index in range(length):
        yield collection[index]


def values(obj: object) -> list:
    return [lookup(obj, key) for key in get_keys(obj)]


def to_pairs(obj: object) -> list[tuple[object, object]]:
    return [(key, lookup(obj, key)) for key in get_keys(obj)]
