"""Table property schema consumed by location strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

DATA_DIR_NAME = "data"
DEFAULT_OBJECT_STORE_ENABLED = False
DEFAULT_USE_RELATIVE_PATH = False


class TableProperties:
    """Names of the table properties that influence data file locations."""

    WRITE_LOCATION_PROVIDER_IMPL = "write.location-provider.impl"

    OBJECT_STORE_ENABLED = "write.object-storage.enabled"
    OBJECT_STORE_PATH = "write.object-storage.path"

    WRITE_DATA_LOCATION = "write.data.path"
    # Legacy alias for write.data.path kept for older tables.
    WRITE_FOLDER_STORAGE_LOCATION = "write.folder-storage.path"

    WRITE_METADATA_USE_RELATIVE_PATH = "write.metadata.use.relative-path"
    PREFIX = "prefix"


def property_as_bool(properties: Mapping[str, str], key: str, default: bool) -> bool:
    """Parse a boolean property; only a case-insensitive ``true`` is truthy."""

    value = properties.get(key)
    if value is None:
        return default
    return str(value).lower() == "true"


@dataclass(frozen=True)
class LocationConfig:
    """Location-related table settings, parsed once from the property map."""

    table_location: str
    provider_impl: Optional[str] = None
    object_store_enabled: bool = DEFAULT_OBJECT_STORE_ENABLED
    object_store_path: Optional[str] = None
    write_data_location: Optional[str] = None
    folder_storage_location: Optional[str] = None
    use_relative_path: bool = DEFAULT_USE_RELATIVE_PATH
    prefix: Optional[str] = None

    @classmethod
    def from_properties(cls, table_location: str, properties: Mapping[str, str]) -> "LocationConfig":
        return cls(
            table_location=table_location,
            provider_impl=properties.get(TableProperties.WRITE_LOCATION_PROVIDER_IMPL),
            object_store_enabled=property_as_bool(
                properties, TableProperties.OBJECT_STORE_ENABLED, DEFAULT_OBJECT_STORE_ENABLED
            ),
            object_store_path=properties.get(TableProperties.OBJECT_STORE_PATH),
            write_data_location=properties.get(TableProperties.WRITE_DATA_LOCATION),
            folder_storage_location=properties.get(TableProperties.WRITE_FOLDER_STORAGE_LOCATION),
            use_relative_path=property_as_bool(
                properties, TableProperties.WRITE_METADATA_USE_RELATIVE_PATH, DEFAULT_USE_RELATIVE_PATH
            ),
            prefix=properties.get(TableProperties.PREFIX),
        )

    @property
    def default_data_location(self) -> str:
        return f"{self.table_location}/{DATA_DIR_NAME}"

    def data_location(self) -> str:
        """Resolve where hierarchical data files are written."""

        if self.write_data_location is not None:
            return self.write_data_location
        if self.folder_storage_location is not None:
            return self.folder_storage_location
        return self.default_data_location

    def object_storage_location(self) -> str:
        """Resolve where hash-prefixed data files are written."""

        for candidate in (self.write_data_location, self.object_store_path, self.folder_storage_location):
            if candidate is not None:
                return candidate
        return self.default_data_location

    def relative_path_prefix(self) -> str:
        """Return the raw prefix used in relative-path mode (table location by default)."""

        return self.prefix if self.prefix is not None else self.table_location
