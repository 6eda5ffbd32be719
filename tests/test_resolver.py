from __future__ import annotations

import pytest

from lakepath_core.config import TableProperties
from lakepath_core.errors import ConfigurationError
from lakepath_core.registry import StrategyRegistry, default_registry, register_location_strategy
from lakepath_core.resolver import locations_for
from lakepath_core.strategies import DefaultLocationStrategy, NullLocationStrategy, ObjectStoreLocationStrategy


def test_default_strategy_when_nothing_configured() -> None:
    strategy = locations_for("s3://bucket/table/", {})

    assert isinstance(strategy, DefaultLocationStrategy)
    assert strategy.data_location == "s3://bucket/table/data"


def test_only_one_trailing_slash_is_stripped() -> None:
    strategy = locations_for("s3://bucket/table//", {TableProperties.WRITE_METADATA_USE_RELATIVE_PATH: "true"})

    assert isinstance(strategy, DefaultLocationStrategy)
    assert strategy.data_location == "s3://bucket/table//data"
    assert strategy.prefix == "s3://bucket/table"


@pytest.mark.parametrize("flag", ["true", "TRUE", "True"])
def test_object_store_flag_selects_object_store(flag: str) -> None:
    strategy = locations_for("s3://bucket/db/table", {TableProperties.OBJECT_STORE_ENABLED: flag})

    assert isinstance(strategy, ObjectStoreLocationStrategy)
    assert strategy.context is None


@pytest.mark.parametrize("flag", ["false", "1", "yes", ""])
def test_non_true_flag_keeps_default(flag: str) -> None:
    strategy = locations_for("s3://bucket/db/table", {TableProperties.OBJECT_STORE_ENABLED: flag})
    assert isinstance(strategy, DefaultLocationStrategy)


def test_explicit_impl_wins_over_object_store_flag() -> None:
    props = {
        TableProperties.OBJECT_STORE_ENABLED: "true",
        TableProperties.WRITE_LOCATION_PROVIDER_IMPL: "null",
    }
    strategy = locations_for("s3://bucket/db/table", props)

    assert isinstance(strategy, NullLocationStrategy)
    assert strategy.new_data_location("f.parquet") is None


def test_explicit_impl_can_name_builtin_default() -> None:
    props = {
        TableProperties.OBJECT_STORE_ENABLED: "true",
        TableProperties.WRITE_LOCATION_PROVIDER_IMPL: "default",
    }
    assert isinstance(locations_for("s3://bucket/t", props), DefaultLocationStrategy)


def test_explicit_impl_receives_stripped_location_and_properties() -> None:
    captured: dict[str, object] = {}

    def factory(location: str, properties: dict[str, str]) -> NullLocationStrategy:
        captured["location"] = location
        captured["properties"] = properties
        return NullLocationStrategy()

    register_location_strategy("capturing", factory)
    try:
        props = {TableProperties.WRITE_LOCATION_PROVIDER_IMPL: "capturing"}
        locations_for("s3://bucket/t/", props)
    finally:
        default_registry.unregister("capturing")

    assert captured["location"] == "s3://bucket/t"
    assert captured["properties"] == props


def test_custom_registry_is_used() -> None:
    registry = StrategyRegistry({"only": NullLocationStrategy})
    props = {TableProperties.WRITE_LOCATION_PROVIDER_IMPL: "only"}

    assert isinstance(locations_for("s3://b/t", props, registry=registry), NullLocationStrategy)
    with pytest.raises(ConfigurationError):
        locations_for("s3://b/t", {TableProperties.WRITE_LOCATION_PROVIDER_IMPL: "default"}, registry=registry)


def test_unknown_impl_fails_at_resolution() -> None:
    with pytest.raises(ConfigurationError):
        locations_for("s3://b/t", {TableProperties.WRITE_LOCATION_PROVIDER_IMPL: "lakepath_nope_mod.Strategy"})
