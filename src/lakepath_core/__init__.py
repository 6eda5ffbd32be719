"""Data file location strategies for lakepath tables."""

from .config import LocationConfig, TableProperties, property_as_bool
from .errors import (
    ConfigurationError,
    InvalidPrefixError,
    InvariantViolation,
    LocationError,
    TypeMismatchError,
)
from .hashing import compute_hash, hash_bytes, murmur3_32
from .path_util import normalize_path, path_name, path_parent, strip_trailing_slash, strip_trailing_slashes
from .properties_loader import load_properties_file, parse_property_overrides
from .registry import StrategyRegistry, default_registry, import_factory, register_location_strategy
from .resolver import locations_for
from .strategies import (
    DefaultLocationStrategy,
    LocationRelativizer,
    LocationStrategy,
    NullLocationRelativizer,
    NullLocationStrategy,
    ObjectStoreLocationStrategy,
    path_context,
)

__all__ = [
    "LocationConfig",
    "TableProperties",
    "property_as_bool",
    "LocationError",
    "ConfigurationError",
    "TypeMismatchError",
    "InvalidPrefixError",
    "InvariantViolation",
    "murmur3_32",
    "hash_bytes",
    "compute_hash",
    "normalize_path",
    "path_name",
    "path_parent",
    "strip_trailing_slash",
    "strip_trailing_slashes",
    "load_properties_file",
    "parse_property_overrides",
    "StrategyRegistry",
    "default_registry",
    "import_factory",
    "register_location_strategy",
    "locations_for",
    "LocationStrategy",
    "LocationRelativizer",
    "DefaultLocationStrategy",
    "ObjectStoreLocationStrategy",
    "NullLocationStrategy",
    "NullLocationRelativizer",
    "path_context",
]
