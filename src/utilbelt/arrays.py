"""Array helpers that do not go through the iteratee normalizer."""

from __future__ import annotations

import math
import re

from .shapes import get_length, is_array_like, is_string, iter_elements, lookup, values

# A well-formed surrogate pair stays one element; lone halves stand alone.
_STRING_SYMBOL = re.compile("[^\ud800-\udfff]|[\ud800-\udbff][\udc00-\udfff]|[\ud800-\udfff]")


def _is_nested(value: object) -> bool:
    return isinstance(value, (list, tuple))


def flatten(array, shallow: bool = False) -> list:
    """Concatenate nested lists/tuples into one list.

    Uses an explicit stack of iterators, so nesting depth is bounded only by
    memory. With ``shallow`` exactly one level is unwrapped.
    """
    output: list = []
    if not is_array_like(array):
        return output
    if shallow:
        for item in iter_elements(array):
            if _is_nested(item):
                output.extend(item)
            else:
                output.append(item)
        return output

    stack = [iter_elements(array)]
    while stack:
        for item in stack[-1]:
            if _is_nested(item):
                stack.append(iter(item))
                break
            output.append(item)
        else:
            stack.pop()
    return output


def range_(start, stop=None, step=None) -> list:
    if stop is None:
        stop = start or 0
        start = 0
    if not step:
        step = -1 if stop < start else 1

    length = max(math.ceil((stop - start) / step), 0)
    result = []
    for _ in range(length):
        result.append(start)
        start += step
    return result


def initial(array, n=None, guard=None) -> list:
    """All but the last ``n`` elements (default one); ``guard`` forces the default."""
    items = list(iter_elements(array))
    drop = 1 if n is None or guard else n
    return items[: max(0, math.trunc(len(items) - drop))]


def first(array, n=None, guard=None):
    """First element, or the first ``n`` elements as a list.

    ``guard`` lets ``first`` be used directly as a ``map_`` callback, where
    ``n`` would otherwise receive the iteration index.
    """
    length = get_length(array) if is_array_like(array) else 0
    if length < 1:
        return None if n is None else []
    if n is None or guard:
        return lookup(array, 0)
    return initial(array, length - n)


def to_array(value) -> list:
    """A new list built from ``value``; never an alias of the input."""
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    if is_string(value):
        return _STRING_SYMBOL.findall(value)
    if is_array_like(value):
        return list(iter_elements(value))
    return values(value)
