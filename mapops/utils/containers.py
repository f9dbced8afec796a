"""Helpers for building result containers."""

from collections import OrderedDict, defaultdict
from typing import Any, Mapping, MutableMapping


def empty_like(mapping: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Return a new, empty mapping of the same kind as ``mapping``.

    Only ``dict``, ``OrderedDict`` and ``defaultdict`` (with its default
    factory) are reproduced. Any other mapping, including views onto
    shared state such as ``os.environ`` or a ``ChainMap``, produces a
    plain ``dict`` so the input is never touched.
    """
    if type(mapping) is defaultdict:
        return defaultdict(mapping.default_factory)
    if type(mapping) is OrderedDict:
        return OrderedDict()
    return {}
