"""Location strategies that assign storage paths to new table data files.

A strategy is bound to one table for its lifetime. Its roots are resolved once
in ``__init__`` from the table location and table properties; every call to
``new_data_location`` is a pure function of its arguments and those roots.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Protocol, runtime_checkable

from .config import LocationConfig
from .errors import InvalidPrefixError, InvariantViolation
from .hashing import compute_hash
from .metrics import INVALID_PREFIX_TOTAL
from .path_util import normalize_path, path_name, path_parent, strip_trailing_slashes

logger = logging.getLogger(__name__)


@runtime_checkable
class LocationRelativizer(Protocol):
    """Converts paths between absolute and table-relative forms."""

    def is_relative(self) -> bool: ...

    def get_relative_path(self, path: str) -> str: ...

    def get_absolute_path(self, path: str) -> str: ...


@runtime_checkable
class LocationStrategy(LocationRelativizer, Protocol):
    """Computes the destination of each data file written to a table."""

    def new_data_location(self, filename: str, partition_path: Optional[str] = None) -> Optional[str]: ...


class DefaultLocationStrategy:
    """Hierarchical layout: ``{data_location}/{partition_path}/{filename}``."""

    strategy_name = "default"

    def __init__(self, table_location: str, properties: Mapping[str, str]) -> None:
        config = LocationConfig.from_properties(table_location, properties)
        self._data_location = strip_trailing_slashes(config.data_location())
        self._use_relative_path = config.use_relative_path
        self._prefix = normalize_path(config.relative_path_prefix().lower())
        logger.debug(
            "default location strategy data_location=%s relative=%s prefix=%s",
            self._data_location,
            self._use_relative_path,
            self._prefix,
        )

    @property
    def data_location(self) -> str:
        return self._data_location

    @property
    def prefix(self) -> str:
        return self._prefix

    def new_data_location(self, filename: str, partition_path: Optional[str] = None) -> str:
        if partition_path is None:
            return f"{self._data_location}/{filename}"
        return f"{self._data_location}/{partition_path}/{filename}"

    def is_relative(self) -> bool:
        return self._use_relative_path

    def get_relative_path(self, path: str) -> str:
        """Strip the configured prefix from ``path`` when relative-path mode is on.

        Matching is case-insensitive and the returned remainder is lower-cased.
        """

        if not self._use_relative_path:
            return path

        normalized = normalize_path(path).lower()
        if normalized.startswith(self._prefix):
            return normalized[len(self._prefix) :]

        INVALID_PREFIX_TOTAL.inc()
        logger.warning("Path outside relative-path prefix prefix=%s path=%s", self._prefix, path)
        raise InvalidPrefixError(self._prefix, path)

    def get_absolute_path(self, path: str) -> str:
        # TODO: re-apply the prefix once readers store relative paths.
        return path


def path_context(table_location: str) -> str:
    """Derive the ``{parent}/{table}`` fragment that disambiguates shared storage."""

    name = path_name(table_location)
    parent = path_parent(table_location)
    if parent is None:
        context = name
    else:
        # A root parent has an empty name, which yields "/{table}".
        context = f"{path_name(parent)}/{name}"

    if context.endswith("/"):
        raise InvariantViolation(f"Path context must not end with a slash: {context!r}")
    return context


class ObjectStoreLocationStrategy:
    """Flat hash-prefixed layout that spreads writes across object-store partitions.

    Files land at ``{storage_location}/{hash}/{filename}``. When the storage
    location is outside the table location, the ``{parent}/{table}`` context is
    inserted after the hash so tables sharing a bucket stay apart.
    """

    strategy_name = "object-store"

    def __init__(self, table_location: str, properties: Mapping[str, str]) -> None:
        config = LocationConfig.from_properties(table_location, properties)
        self._storage_location = strip_trailing_slashes(config.object_storage_location())
        if self._storage_location.startswith(table_location):
            self._context: Optional[str] = None
        else:
            self._context = path_context(table_location)
        logger.debug(
            "object store location strategy storage_location=%s context=%s",
            self._storage_location,
            self._context,
        )

    @property
    def storage_location(self) -> str:
        return self._storage_location

    @property
    def context(self) -> Optional[str]:
        return self._context

    def new_data_location(self, filename: str, partition_path: Optional[str] = None) -> str:
        if partition_path is not None:
            # Hash the partition-qualified name so partitions spread across buckets too.
            return self.new_data_location(f"{partition_path}/{filename}")

        file_hash = compute_hash(filename)
        if self._context is not None:
            return f"{self._storage_location}/{file_hash}/{self._context}/{filename}"
        return f"{self._storage_location}/{file_hash}/{filename}"

    def is_relative(self) -> bool:
        return False

    def get_relative_path(self, path: str) -> str:
        return path

    def get_absolute_path(self, path: str) -> str:
        return path


class NullLocationStrategy:
    """Strategy for writers that assign data file locations elsewhere."""

    strategy_name = "null"

    def new_data_location(self, filename: str, partition_path: Optional[str] = None) -> None:
        return None

    def is_relative(self) -> bool:
        return False

    def get_relative_path(self, path: str) -> str:
        return path

    def get_absolute_path(self, path: str) -> str:
        return path


class NullLocationRelativizer:
    """Relativizer that leaves every path untouched."""

    def is_relative(self) -> bool:
        return False

    def get_relative_path(self, path: str) -> str:
        return path

    def get_absolute_path(self, path: str) -> str:
        return path
