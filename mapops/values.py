"""Value transformations for map-like containers."""

from typing import Any, MutableMapping

from mapops.logging import get_logger
from mapops.types import SupportsLessThanZero

logger = get_logger(__name__)


def set_negative_values_to_zero(
    mapping: MutableMapping[Any, SupportsLessThanZero],
) -> None:
    """Set every value below zero to zero, in place.

    Examples:
        >>> scores = {"a": 3, "b": -9001, "c": -4}
        >>> set_negative_values_to_zero(scores)
        >>> scores
        {'a': 3, 'b': 0, 'c': 0}
    """
    clamped = [key for key, value in mapping.items() if value < 0]
    for key in clamped:
        mapping[key] = 0

    if clamped:
        logger.debug(f"Clamped {len(clamped)} negative value(s) to zero")
