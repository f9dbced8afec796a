"""mapops - convenience operations for map-like containers."""

__version__ = "0.1.0"
__package_name__ = "mapops"

# Initialize logging with default configuration
from mapops.logging import configure_logging

configure_logging()

from .config import MapOpsConfig, get_config, load_config, reset_config
from .conversion import get_first_key, get_key_list, map_to_pairs
from .exceptions import (
    ConfigurationError,
    EmptyMapError,
    InvalidOptionError,
    KeyCollisionError,
    MapOpsError,
)
from .keys import (
    create_unique_key_string,
    erase_string_from_keys,
    get_pairs_where_keys_start_with,
)
from .merge import add_maps
from .options import AddTarget, KeyCollisionPolicy, UniqueKeyAlgorithm
from .sampling import (
    get_default_random,
    get_random_key,
    pop_random,
    seed_default_random,
)
from .values import set_negative_values_to_zero

__all__ = [
    "add_maps",
    "map_to_pairs",
    "get_random_key",
    "get_first_key",
    "get_key_list",
    "get_pairs_where_keys_start_with",
    "erase_string_from_keys",
    "set_negative_values_to_zero",
    "create_unique_key_string",
    "pop_random",
    "get_default_random",
    "seed_default_random",
    "AddTarget",
    "UniqueKeyAlgorithm",
    "KeyCollisionPolicy",
    "MapOpsConfig",
    "load_config",
    "get_config",
    "reset_config",
    "MapOpsError",
    "EmptyMapError",
    "InvalidOptionError",
    "KeyCollisionError",
    "ConfigurationError",
]
