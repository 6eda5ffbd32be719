"""Pick the location strategy for a table from its properties."""

from __future__ import annotations

import logging
from typing import Mapping

from .config import LocationConfig
from .metrics import LOCATION_STRATEGIES_RESOLVED_TOTAL
from .path_util import strip_trailing_slash
from .registry import StrategyRegistry, default_registry
from .strategies import DefaultLocationStrategy, LocationStrategy, ObjectStoreLocationStrategy

logger = logging.getLogger(__name__)


def _strategy_label(strategy: LocationStrategy) -> str:
    return getattr(strategy, "strategy_name", type(strategy).__name__)


def locations_for(
    input_location: str,
    properties: Mapping[str, str],
    *,
    registry: StrategyRegistry | None = None,
) -> LocationStrategy:
    """Return the strategy that assigns data file locations for a table.

    An explicit ``write.location-provider.impl`` wins; otherwise the
    object-store layout is used when ``write.object-storage.enabled`` is true,
    and the hierarchical default layout in every other case.
    """

    location = strip_trailing_slash(input_location)
    config = LocationConfig.from_properties(location, properties)

    strategy: LocationStrategy
    if config.provider_impl is not None:
        strategy = (registry or default_registry).construct(config.provider_impl, location, properties)
    elif config.object_store_enabled:
        strategy = ObjectStoreLocationStrategy(location, properties)
    else:
        strategy = DefaultLocationStrategy(location, properties)

    label = _strategy_label(strategy)
    LOCATION_STRATEGIES_RESOLVED_TOTAL.labels(strategy=label).inc()
    logger.debug("Resolved location strategy table=%s strategy=%s", location, label)
    return strategy
