"""Prometheus metrics for location strategy resolution."""

from __future__ import annotations

from prometheus_client import Counter

LOCATION_STRATEGIES_RESOLVED_TOTAL = Counter(
    "lakepath_location_strategies_resolved_total",
    "Number of location strategies resolved from table properties",
    ["strategy"],
)

LOCATION_STRATEGY_ERRORS_TOTAL = Counter(
    "lakepath_location_strategy_errors_total",
    "Number of failures while constructing a configured location strategy",
    ["reason"],
)

INVALID_PREFIX_TOTAL = Counter(
    "lakepath_invalid_prefix_total",
    "Number of paths rejected because they do not match the relative-path prefix",
)

__all__ = [
    "LOCATION_STRATEGIES_RESOLVED_TOTAL",
    "LOCATION_STRATEGY_ERRORS_TOTAL",
    "INVALID_PREFIX_TOTAL",
]
