"""Key filtering, renaming and generation for string-keyed maps."""

from typing import Mapping, MutableMapping, Optional, Union

from mapops.config import get_config
from mapops.exceptions import KeyCollisionError
from mapops.logging import get_logger
from mapops.options import KeyCollisionPolicy, UniqueKeyAlgorithm, coerce_option
from mapops.types import V
from mapops.utils.containers import empty_like
from mapops.utils.strings import replace_substr, starts_with

logger = get_logger(__name__)


def get_pairs_where_keys_start_with(
    mapping: Mapping[str, V], prefix: str
) -> MutableMapping[str, V]:
    """Return the entries whose key starts with ``prefix``.

    Args:
        mapping: Mapping with string keys
        prefix: Required key prefix

    Returns:
        New mapping of the same kind holding only the matching entries

    Examples:
        >>> get_pairs_where_keys_start_with(
        ...     {"style:x": 1, "style:y": 2, "z": 3}, "style:"
        ... )
        {'style:x': 1, 'style:y': 2}
    """
    result = empty_like(mapping)
    for key, value in mapping.items():
        if starts_with(key, prefix):
            result[key] = value
    return result


def erase_string_from_keys(
    mapping: Mapping[str, V],
    target: str,
    on_collision: Optional[Union[KeyCollisionPolicy, str]] = None,
) -> MutableMapping[str, V]:
    """Return a copy of ``mapping`` with ``target`` removed from every key.

    All occurrences are removed, values are untouched. When two keys
    collapse into the same key, entries are resolved in iteration order
    according to ``on_collision``:

    - ``"overwrite"``: the later entry replaces the earlier one
    - ``"keep_first"``: the earlier entry is kept
    - ``"error"``: :class:`KeyCollisionError` is raised

    Args:
        mapping: Mapping with string keys
        target: Substring to erase
        on_collision: Collision policy; defaults to the configured one

    Returns:
        New mapping of the same kind with rewritten keys

    Raises:
        KeyCollisionError: On a collision under the ``"error"`` policy
        InvalidOptionError: If ``on_collision`` is not a known policy

    Examples:
        >>> erase_string_from_keys(
        ...     {"style:textColor": "red", "style:backgroundColor": "black"},
        ...     "style:",
        ... )
        {'textColor': 'red', 'backgroundColor': 'black'}
    """
    if on_collision is None:
        on_collision = get_config().collision_policy
    policy = coerce_option(KeyCollisionPolicy, on_collision, "collision policy")

    result = empty_like(mapping)
    sources = {}
    for key, value in mapping.items():
        new_key = replace_substr(key, target, "")
        if new_key in sources:
            logger.debug(
                f"Keys {sources[new_key]!r} and {key!r} both become {new_key!r}"
            )
            if policy is KeyCollisionPolicy.ERROR:
                raise KeyCollisionError(new_key, sources[new_key], key)
            if policy is KeyCollisionPolicy.KEEP_FIRST:
                continue
        sources[new_key] = key
        result[new_key] = value
    return result


def create_unique_key_string(
    mapping: Mapping[str, V],
    key_string: str = "",
    algorithm: Optional[Union[UniqueKeyAlgorithm, str]] = None,
) -> str:
    """Return a key that is not yet used in ``mapping``.

    With integer concatenation, ``key_string`` is returned as is when it
    is free; otherwise ``0``, ``1``, ``2``... are appended to it until
    the result is free. The mapping is not modified.

    Args:
        mapping: Mapping with string keys
        key_string: Preferred key
        algorithm: Generation algorithm; defaults to the configured one

    Returns:
        A key absent from ``mapping``

    Raises:
        InvalidOptionError: If ``algorithm`` is not a known algorithm

    Examples:
        >>> create_unique_key_string({"x": 1, "x0": 2}, "x")
        'x1'
    """
    if algorithm is None:
        algorithm = get_config().unique_key_algorithm
    coerce_option(UniqueKeyAlgorithm, algorithm, "unique key algorithm")

    candidate = key_string
    suffix = 0
    while candidate in mapping:
        candidate = f"{key_string}{suffix}"
        suffix += 1

    if candidate != key_string:
        logger.debug(f"Key {key_string!r} taken, using {candidate!r}")
    return candidate
