"""Conversions from map-like containers to sequences."""

from typing import List, Mapping, Tuple

from mapops.exceptions import EmptyMapError
from mapops.types import K, V


def map_to_pairs(mapping: Mapping[K, V]) -> List[Tuple[K, V]]:
    """Return the (key, value) pairs of ``mapping`` in iteration order.

    Examples:
        >>> map_to_pairs({"a": 1, "b": 2})
        [('a', 1), ('b', 2)]
    """
    return list(mapping.items())


def get_first_key(mapping: Mapping[K, V]) -> K:
    """Return the key the mapping yields first.

    Raises:
        EmptyMapError: If ``mapping`` is empty
    """
    for key in mapping:
        return key
    raise EmptyMapError("get_first_key")


def get_key_list(mapping: Mapping[K, V]) -> List[K]:
    """Return all keys of ``mapping`` in iteration order."""
    return list(mapping)
