"""Property getters and partial-match predicates."""

from __future__ import annotations

from typing import Callable

from .shapes import contains_key, get_keys, lookup, to_pairs


def shallow_property(key: object) -> Callable[..., object]:
    def getter(obj: object, *_args: object) -> object:
        return lookup(obj, key)

    return getter


def deep_get(obj: object, path: list) -> object:
    """Walk ``path`` left to right, stopping with ``None`` at the first missing link.

    Found falsy leaves (``False``, ``0``, ``""``, ``None``) are returned as-is;
    an empty path yields ``None``.
    """
    for key in path:
        if obj is None:
            return None
        obj = lookup(obj, key)
    return obj if path else None


def property_(path: object) -> Callable[..., object]:
    if not isinstance(path, list):
        return shallow_property(path)
    keys = list(path)

    def getter(obj: object, *_args: object) -> object:
        return deep_get(obj, keys)

    return getter


def _strict_equal(actual: object, expected: object) -> bool:
    if actual is expected:
        return True
    # No coercion between bools and numbers.
    if isinstance(actual, bool) is not isinstance(expected, bool):
        return False
    equal = actual == expected
    # Elementwise comparisons (arrays) never count as a match.
    return isinstance(equal, bool) and equal


def key_in_obj(value: object, key: object, obj: object) -> bool:
    return contains_key(obj, key)


def is_match(obj: object, attrs: object) -> bool:
    """Partial shallow equality of ``obj`` against the own keys of ``attrs``.

    ``attrs`` contributes only its own keys, while the membership check on
    ``obj`` also accepts inherited ones (class attributes, ChainMap parents).
    """
    keys = get_keys(attrs)
    if obj is None:
        return not keys
    for key in keys:
        if not contains_key(obj, key):
            return False
        expected = lookup(attrs, key)
        actual = lookup(obj, key)
        if not _strict_equal(actual, expected):
            return False
    return True


def matcher(attrs: object) -> Callable[..., bool]:
    snapshot = dict(to_pairs(attrs))

    def predicate(obj: object, *_args: object) -> bool:
        return is_match(obj, snapshot)

    return predicate
