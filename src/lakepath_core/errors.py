"""Exceptions raised while resolving and using location strategies."""

from __future__ import annotations


class LocationError(Exception):
    """Base class for lakepath location errors."""


class ConfigurationError(LocationError, ValueError):
    """Raised when a configured strategy implementation cannot be constructed."""


class TypeMismatchError(LocationError, TypeError):
    """Raised when a constructed implementation is not a location strategy."""


class InvalidPrefixError(LocationError, ValueError):
    """Raised when a path does not start with the configured relative-path prefix."""

    def __init__(self, prefix: str, path: str) -> None:
        super().__init__(f"Provided value for property prefix as {prefix} is not valid for path {path}")
        self.prefix = prefix
        self.path = path


class InvariantViolation(LocationError, RuntimeError):
    """Raised when derived strategy state is malformed."""
