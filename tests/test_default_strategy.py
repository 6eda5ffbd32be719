from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lakepath_core.config import TableProperties
from lakepath_core.errors import InvalidPrefixError
from lakepath_core.path_util import normalize_path
from lakepath_core.strategies import DefaultLocationStrategy, LocationStrategy

TABLE = "s3://bucket/table"
RELATIVE = {TableProperties.WRITE_METADATA_USE_RELATIVE_PATH: "true"}


def test_data_location_defaults_under_table() -> None:
    strategy = DefaultLocationStrategy(TABLE, {})

    assert isinstance(strategy, LocationStrategy)
    assert strategy.data_location == "s3://bucket/table/data"
    assert strategy.new_data_location("file.parquet") == "s3://bucket/table/data/file.parquet"
    assert strategy.new_data_location("file.parquet", "a/b") == "s3://bucket/table/data/a/b/file.parquet"


def test_data_location_overrides_strip_trailing_slash() -> None:
    strategy = DefaultLocationStrategy(TABLE, {TableProperties.WRITE_DATA_LOCATION: "s3://other/data/"})
    assert strategy.data_location == "s3://other/data"
    assert strategy.new_data_location("f.avro") == "s3://other/data/f.avro"

    legacy = DefaultLocationStrategy(TABLE, {TableProperties.WRITE_FOLDER_STORAGE_LOCATION: "s3://legacy//"})
    assert legacy.data_location == "s3://legacy"


def test_relative_path_disabled_is_identity() -> None:
    strategy = DefaultLocationStrategy(TABLE, {})

    assert strategy.is_relative() is False
    for path in ("s3://bucket/table/data/x", "s3://other//X/", "anything"):
        assert strategy.get_relative_path(path) == path


def test_relative_path_strips_prefix() -> None:
    strategy = DefaultLocationStrategy(TABLE, RELATIVE)

    assert strategy.is_relative() is True
    assert strategy.prefix == "s3://bucket/table"
    assert strategy.get_relative_path("s3://bucket/table/data/x") == "/data/x"


def test_relative_path_matches_case_insensitively_and_lowercases() -> None:
    strategy = DefaultLocationStrategy("s3://Bucket/Table/", RELATIVE)

    assert strategy.prefix == "s3://bucket/table"
    assert strategy.get_relative_path("S3://BUCKET/Table//Data/File.parquet") == "/data/file.parquet"


def test_relative_path_with_explicit_prefix() -> None:
    props = {**RELATIVE, TableProperties.PREFIX: "s3://bucket/"}
    strategy = DefaultLocationStrategy(TABLE, props)

    assert strategy.prefix == "s3://bucket/"
    assert strategy.get_relative_path("s3://bucket/table/data/x") == "table/data/x"


def test_relative_path_rejects_foreign_prefix() -> None:
    strategy = DefaultLocationStrategy(TABLE, RELATIVE)

    with pytest.raises(InvalidPrefixError) as excinfo:
        strategy.get_relative_path("s3://other/x")

    assert excinfo.value.prefix == "s3://bucket/table"
    assert excinfo.value.path == "s3://other/x"
    assert "s3://bucket/table" in str(excinfo.value)


def test_absolute_path_is_identity() -> None:
    strategy = DefaultLocationStrategy(TABLE, RELATIVE)
    assert strategy.get_absolute_path("/data/x") == "/data/x"


_segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789_-.=", min_size=1, max_size=10)


@given(segments=st.lists(_segment, min_size=1, max_size=5))
@settings(max_examples=50)
def test_relative_path_round_trip(segments: list[str]) -> None:
    strategy = DefaultLocationStrategy(TABLE, RELATIVE)
    path = f"{TABLE}/" + "/".join(segments)

    relative = strategy.get_relative_path(path)

    assert strategy.prefix + relative == normalize_path(path).lower()
