"""Single-pass traversal primitives over array-likes and mappings."""

from __future__ import annotations

from typing import Callable

from .callbacks import cb
from .shapes import CollectionKind, collection_kind, get_keys, iter_elements, lookup


def _drive(collection, callback: Callable[..., object]) -> None:
    kind = collection_kind(collection)
    if kind is CollectionKind.ARRAY_LIKE:
        for index, value in enumerate(iter_elements(collection)):
            callback(value, index, collection)
    elif kind is CollectionKind.MAPPING:
        for key in get_keys(collection):
            callback(lookup(collection, key), key, collection)


def for_each(collection, iteratee=None, context=None):
    """Call ``iteratee(value, key, collection)`` for every element and return ``collection``.

    Array-likes are visited by ascending index, everything else by its own
    keys in enumeration order. ``None`` is passed straight back.
    """
    if collection is None:
        return collection
    _drive(collection, cb(iteratee, context))
    return collection


def map_(collection, iteratee=None, context=None) -> list:
    callback = cb(iteratee, context)
    results = []
    _drive(collection, lambda value, key, items: results.append(callback(value, key, items)))
    return results


def filter_(collection, predicate=None, context=None) -> list:
    callback = cb(predicate, context)
    results = []

    def keep(value, key, items):
        if callback(value, key, items):
            results.append(value)

    _drive(collection, keep)
    return results


def find_index(array, predicate=None, context=None) -> int:
    callback = cb(predicate, context)
    for index, value in enumerate(iter_elements(array)):
        if callback(value, index, array):
            return index
    return -1


def find_key(obj, predicate=None, context=None):
    callback = cb(predicate, context)
    for key in get_keys(obj):
        if callback(lookup(obj, key), key, obj):
            return key
    return None


def find(collection, predicate=None, context=None):
    """First value satisfying ``predicate``, or ``None``."""
    if collection_kind(collection) is CollectionKind.ARRAY_LIKE:
        index = find_index(collection, predicate, context)
        return lookup(collection, index) if index != -1 else None
    key = find_key(collection, predicate, context)
    return lookup(collection, key) if key is not None else None
