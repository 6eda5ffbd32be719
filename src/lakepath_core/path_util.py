"""Helpers for manipulating table and data-file locations.

Locations are treated as ``scheme://authority/path`` strings (or plain paths)
using ``/`` as the only separator. Nothing here touches a filesystem.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Optional, Tuple

SCHEME_SEPARATOR = "://"

_REPEATED_SLASHES = re.compile(r"/{2,}")


def split_root(location: str) -> Tuple[str, str]:
    """Split a location into its ``scheme://authority`` root and path part."""

    idx = location.find(SCHEME_SEPARATOR)
    if idx <= 0 or "/" in location[:idx]:
        return "", location
    slash = location.find("/", idx + len(SCHEME_SEPARATOR))
    if slash == -1:
        return location, ""
    return location[:slash], location[slash:]


def strip_trailing_slash(location: str) -> str:
    """Remove a single trailing slash, keeping ``/`` and ``scheme://`` intact."""

    if not location.endswith("/") or location == "/" or location.endswith(SCHEME_SEPARATOR):
        return location
    return location[:-1]


def strip_trailing_slashes(location: str) -> str:
    """Remove every trailing slash from the path part of a location."""

    root, rest = split_root(location)
    stripped = rest.rstrip("/")
    if not stripped and not root and rest.startswith("/"):
        return "/"
    return root + stripped


def normalize_path(location: str) -> str:
    """Collapse repeated slashes and drop a trailing slash from the path part."""

    root, rest = split_root(location)
    collapsed = _REPEATED_SLASHES.sub("/", rest)
    if len(collapsed) > 1 and collapsed.endswith("/"):
        collapsed = collapsed[:-1]
    return root + collapsed


def path_name(location: str) -> str:
    """Return the final segment of a location, or ``""`` for a root."""

    _, rest = split_root(normalize_path(location))
    if rest in ("", "/"):
        return ""
    return PurePosixPath(rest).name


def path_parent(location: str) -> Optional[str]:
    """Return the parent location, or ``None`` when there is no parent segment."""

    root, rest = split_root(normalize_path(location))
    if rest in ("", "/") or "/" not in rest:
        return None
    return root + str(PurePosixPath(rest).parent)
