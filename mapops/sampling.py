"""Random selection from map-like containers.

Both operations accept an ``rng`` argument. Without one they share a
single module-level :class:`random.Random`, seeded from
``MapOpsConfig.random_seed`` on first use. That shared source is not
locked, so threads should pass their own generator.
"""

import random
from itertools import islice
from typing import Mapping, MutableMapping, Optional, Tuple

from mapops.config import get_config
from mapops.exceptions import EmptyMapError
from mapops.logging import get_logger
from mapops.types import K, SupportsRandrange, V

logger = get_logger(__name__)

_default_random: Optional[random.Random] = None


def get_default_random() -> random.Random:
    """Return the shared random source, creating it on first use."""
    global _default_random
    if _default_random is None:
        _default_random = random.Random(get_config().random_seed)
    return _default_random


def seed_default_random(seed: Optional[int] = None) -> None:
    """Reseed the shared random source.

    Args:
        seed: New seed; None seeds from system entropy
    """
    get_default_random().seed(seed)


def get_random_key(
    mapping: Mapping[K, V], rng: Optional[SupportsRandrange] = None
) -> K:
    """Return a uniformly chosen key of ``mapping``.

    Args:
        mapping: Non-empty mapping to pick from
        rng: Random source; defaults to the shared one

    Returns:
        A key present in ``mapping``

    Raises:
        EmptyMapError: If ``mapping`` is empty

    Examples:
        >>> get_random_key({"only": 1})
        'only'
    """
    if not mapping:
        raise EmptyMapError("get_random_key")

    if rng is None:
        rng = get_default_random()
    steps = rng.randrange(len(mapping))
    key = next(islice(iter(mapping), steps, None))
    logger.debug(f"Picked key {key!r} at position {steps} of {len(mapping)}")
    return key


def pop_random(
    mapping: MutableMapping[K, V], rng: Optional[SupportsRandrange] = None
) -> Tuple[K, V]:
    """Remove a random entry from ``mapping`` and return it.

    Args:
        mapping: Non-empty mapping, modified in place
        rng: Random source; defaults to the shared one

    Returns:
        The removed (key, value) pair

    Raises:
        EmptyMapError: If ``mapping`` is empty
    """
    if not mapping:
        raise EmptyMapError("pop_random")

    key = get_random_key(mapping, rng)
    value = mapping.pop(key)
    return key, value
