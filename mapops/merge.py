"""Element-wise merging of two maps."""

from typing import Mapping, MutableMapping, Union

from mapops.logging import get_logger
from mapops.options import AddTarget, coerce_option
from mapops.types import A, K
from mapops.utils.containers import empty_like

logger = get_logger(__name__)


def add_maps(
    a: Mapping[K, A],
    b: Mapping[K, A],
    target: Union[AddTarget, str] = AddTarget.KEYS_AND_VALUES,
    omit_keys_not_shared: bool = False,
) -> MutableMapping[K, A]:
    """Add two maps together on their shared keys.

    For every key ``k`` found in both maps, in ``a``'s order:

    - ``"values"``: ``result[k] = a[k] + b[k]``
    - ``"keys and values"``: ``result[k + k] = a[k] + b[k]``
    - ``"keys"``: ``result[k + k] = a[k]``

    Shared keys are the same object on both sides, so "adding keys"
    concatenates the key with itself.

    Unless ``omit_keys_not_shared`` is set, entries only in ``a`` are
    copied next, then entries only in ``b``. An entry from ``b`` never
    replaces a key already in the result.

    Args:
        a: First map
        b: Second map
        target: Where ``+`` is applied
        omit_keys_not_shared: Drop entries whose key is in only one map

    Returns:
        New map of the same kind as ``a``; neither input is modified

    Raises:
        InvalidOptionError: If ``target`` is not a known target
        TypeError: If ``+`` is not defined for the keys or values

    Examples:
        >>> add_maps({"a": 1, "b": 2}, {"b": 3, "c": 4}, "values")
        {'a': 1, 'b': 5, 'c': 4}
        >>> add_maps({"a": 1}, {"a": 2})
        {'aa': 3}
    """
    target = coerce_option(AddTarget, target, "add target")
    result = empty_like(a)
    shared = 0

    for key, value in a.items():
        if key in b:
            shared += 1
            if target is AddTarget.VALUES:
                result[key] = value + b[key]
            elif target is AddTarget.KEYS:
                result[key + key] = value
            else:
                result[key + key] = value + b[key]
        elif not omit_keys_not_shared:
            result[key] = value

    if not omit_keys_not_shared:
        for key, value in b.items():
            if key in a:
                continue
            if key in result:
                logger.debug(f"Keeping existing entry for {key!r} over b's value")
                continue
            result[key] = value

    logger.debug(
        f"Merged maps of {len(a)} and {len(b)} entries "
        f"({shared} shared, target={target.value!r}) into {len(result)}"
    )
    return result
