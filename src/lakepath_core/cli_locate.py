"""CLI for previewing where a table writes its data files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import click

from .errors import InvalidPrefixError, LocationError
from .properties_loader import load_properties_file, parse_property_overrides
from .resolver import locations_for
from .strategies import LocationStrategy

logger = logging.getLogger("lakepath")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s lakepath %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _collect_properties(properties_file: Optional[Path], overrides: Tuple[str, ...]) -> Dict[str, str]:
    properties: Dict[str, str] = {}
    try:
        if properties_file is not None:
            properties.update(load_properties_file(properties_file))
        properties.update(parse_property_overrides(overrides))
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return properties


def _resolve(table_location: str, properties_file: Optional[Path], overrides: Tuple[str, ...]) -> LocationStrategy:
    properties = _collect_properties(properties_file, overrides)
    logger.debug("Collected table properties count=%d", len(properties))
    try:
        return locations_for(table_location, properties)
    except LocationError as exc:
        raise click.ClickException(f"Failed to resolve location strategy: {exc}") from exc


def _table_options(func: Callable[..., None]) -> Callable[..., None]:
    func = click.option(
        "--property",
        "overrides",
        multiple=True,
        metavar="KEY=VALUE",
        help="Table property override; may be repeated.",
    )(func)
    func = click.option(
        "--properties-file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="JSON or YAML file with table properties.",
    )(func)
    return func


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Data file location commands."""

    _setup_logging(verbose)


@cli.command()
@click.argument("table_location")
@click.argument("filenames", nargs=-1, required=True)
@click.option("--partition", default=None, help="Rendered partition path, e.g. 'dt=2024-01-01'.")
@_table_options
def locate(
    table_location: str,
    filenames: Tuple[str, ...],
    partition: Optional[str],
    properties_file: Optional[Path],
    overrides: Tuple[str, ...],
) -> None:
    """Print the location assigned to each FILENAME."""

    strategy = _resolve(table_location, properties_file, overrides)
    for filename in filenames:
        location = strategy.new_data_location(filename, partition)
        click.echo(location or "")


@cli.command()
@click.argument("table_location")
@click.argument("paths", nargs=-1, required=True)
@_table_options
def relativize(
    table_location: str,
    paths: Tuple[str, ...],
    properties_file: Optional[Path],
    overrides: Tuple[str, ...],
) -> None:
    """Print each PATH in the form recorded in table metadata."""

    strategy = _resolve(table_location, properties_file, overrides)
    for path in paths:
        try:
            click.echo(strategy.get_relative_path(path))
        except InvalidPrefixError as exc:
            raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("table_location")
@_table_options
def describe(table_location: str, properties_file: Optional[Path], overrides: Tuple[str, ...]) -> None:
    """Show which strategy the table resolves to and its roots."""

    strategy = _resolve(table_location, properties_file, overrides)
    click.echo(f"Strategy: {type(strategy).__name__}")
    click.echo(f"Relative paths: {strategy.is_relative()}")
    for attr in ("data_location", "prefix", "storage_location", "context"):
        if hasattr(strategy, attr):
            click.echo(f"{attr}: {getattr(strategy, attr)}")


def main() -> None:  # pragma: no cover
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
