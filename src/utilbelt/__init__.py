"""utilbelt public API."""

from .accessors import deep_get, is_match, key_in_obj, matcher, property_, shallow_property
from .arrays import first, flatten, initial, range_, to_array
from .callbacks import (
    IterateeKind,
    IterateeSpec,
    base_iteratee,
    cb,
    classify_iteratee,
    constant,
    get_iteratee,
    identity,
    is_default_iteratee,
    iteratee,
    noop,
    optimize_cb,
    positional_capacity,
    reset_iteratee,
    set_iteratee,
    signature_cache_stats,
)
from .errors import IterateeConfigError, UtilbeltError
from .shapes import (
    MAX_ARRAY_INDEX,
    CollectionKind,
    all_keys,
    collection_kind,
    get_keys,
    get_length,
    has_property,
    is_arguments,
    is_array_like,
    is_function,
    is_number,
    is_object,
    is_string,
    is_undefined,
    to_pairs,
    values,
)
from .traversal import filter_, find, find_index, find_key, for_each, map_

__all__ = [
    "MAX_ARRAY_INDEX",
    "CollectionKind",
    "collection_kind",
    "get_length",
    "is_array_like",
    "is_object",
    "is_function",
    "is_string",
    "is_number",
    "is_arguments",
    "is_undefined",
    "get_keys",
    "all_keys",
    "values",
    "to_pairs",
    "has_property",
    "shallow_property",
    "deep_get",
    "property_",
    "key_in_obj",
    "is_match",
    "matcher",
    "IterateeKind",
    "IterateeSpec",
    "classify_iteratee",
    "identity",
    "constant",
    "noop",
    "optimize_cb",
    "positional_capacity",
    "signature_cache_stats",
    "base_iteratee",
    "iteratee",
    "cb",
    "get_iteratee",
    "set_iteratee",
    "reset_iteratee",
    "is_default_iteratee",
    "for_each",
    "map_",
    "filter_",
    "find",
    "find_key",
    "find_index",
    "flatten",
    "range_",
    "first",
    "initial",
    "to_array",
    "UtilbeltError",
    "IterateeConfigError",
]
