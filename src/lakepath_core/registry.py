"""Named factories for location strategies configured by table properties.

A configured implementation is either a name registered here (the built-ins
are ``default``, ``object-store`` and ``null``) or an import path such as
``my_pkg.locations:HiveLocationStrategy``. Factories are called with
``(table_location, properties)`` when their signature allows it and with no
arguments otherwise.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from threading import RLock
from typing import Any, Callable, Dict, List, Mapping, Optional

from .errors import ConfigurationError, TypeMismatchError
from .metrics import LOCATION_STRATEGY_ERRORS_TOTAL
from .strategies import (
    DefaultLocationStrategy,
    LocationStrategy,
    NullLocationStrategy,
    ObjectStoreLocationStrategy,
)

logger = logging.getLogger(__name__)

StrategyFactory = Callable[..., Any]


def _accepts(factory: StrategyFactory, *args: Any) -> bool:
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        # Uninspectable callables are assumed to take the table arguments.
        return len(args) == 2
    try:
        signature.bind(*args)
    except TypeError:
        return False
    return True


def import_factory(impl: str) -> StrategyFactory:
    """Import ``module:attr`` or ``module.attr`` and return the attribute."""

    if ":" in impl:
        module_name, _, attr = impl.partition(":")
    else:
        module_name, _, attr = impl.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(f"Invalid location strategy implementation {impl!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Unable to import module {module_name!r} for implementation {impl!r}") from exc
    try:
        factory = getattr(module, attr)
    except AttributeError as exc:
        raise ConfigurationError(f"Module {module_name!r} has no attribute {attr!r}") from exc
    if not callable(factory):
        raise ConfigurationError(f"Implementation {impl!r} is not callable")
    return factory


class StrategyRegistry:
    """Thread-safe mapping from implementation name to strategy factory."""

    def __init__(self, factories: Mapping[str, StrategyFactory] | None = None) -> None:
        self._factories: Dict[str, StrategyFactory] = dict(factories or {})
        self._lock = RLock()

    def register(self, name: str, factory: StrategyFactory, *, replace: bool = False) -> None:
        if not name:
            raise ValueError("Strategy name must be a non-empty string")
        if not callable(factory):
            raise TypeError(f"Factory for {name!r} must be callable")
        with self._lock:
            if name in self._factories and not replace:
                raise ValueError(f"Location strategy {name!r} is already registered")
            self._factories[name] = factory

    def unregister(self, name: str) -> None:
        with self._lock:
            self._factories.pop(name, None)

    def get(self, name: str) -> Optional[StrategyFactory]:
        with self._lock:
            return self._factories.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)

    def load(self, impl: str) -> StrategyFactory:
        """Return the registered factory for ``impl`` or import it by path."""

        factory = self.get(impl)
        if factory is not None:
            return factory
        return import_factory(impl)

    def construct(self, impl: str, table_location: str, properties: Mapping[str, str]) -> LocationStrategy:
        """Build the configured strategy and check that it is a ``LocationStrategy``."""

        try:
            factory = self.load(impl)
        except ConfigurationError:
            LOCATION_STRATEGY_ERRORS_TOTAL.labels(reason="unknown_impl").inc()
            raise

        if _accepts(factory, table_location, properties):
            instance = factory(table_location, properties)
        elif _accepts(factory):
            logger.debug("Using no-arg constructor impl=%s", impl)
            instance = factory()
        else:
            LOCATION_STRATEGY_ERRORS_TOTAL.labels(reason="no_constructor").inc()
            raise ConfigurationError(
                f"Unable to find a constructor for implementation {impl} of LocationStrategy. "
                "Make sure the implementation is importable, and that it either has a no-arg "
                "constructor or a two-arg constructor taking in the string base table location "
                "and its property string map."
            )

        if not isinstance(instance, LocationStrategy):
            LOCATION_STRATEGY_ERRORS_TOTAL.labels(reason="type_mismatch").inc()
            raise TypeMismatchError(
                f"Provided implementation {impl} for dynamic instantiation should implement LocationStrategy, "
                f"got {type(instance).__name__}."
            )
        return instance


default_registry = StrategyRegistry(
    {
        DefaultLocationStrategy.strategy_name: DefaultLocationStrategy,
        ObjectStoreLocationStrategy.strategy_name: ObjectStoreLocationStrategy,
        NullLocationStrategy.strategy_name: NullLocationStrategy,
    }
)


def register_location_strategy(name: str, factory: StrategyFactory, *, replace: bool = False) -> None:
    """Register ``factory`` under ``name`` in the default registry."""

    default_registry.register(name, factory, replace=replace)
