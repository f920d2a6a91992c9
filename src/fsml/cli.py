"""CLI interface for FSML.

Command-line tool for inspecting FSML paths, building navigation trees
and planning reorder renames. Paths are read from arguments or stdin;
the filesystem is never scanned or modified.
"""

import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import cast

import click

from fsml.config import Config
from fsml.core.navigation import build_nav_tree
from fsml.core.paths import parse_path
from fsml.core.reorder import compute_reorder
from fsml.core.sorting import sort_paths
from fsml.core.types import POSITIONS, Position

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover fsml.toml)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def cli(verbose: bool) -> None:
    """FSML - ordered document trees encoded in filenames."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("paths", nargs=-1, required=True)
def parse(paths: tuple[str, ...]) -> None:
    """Show the FSML components of each PATH as JSON."""
    descriptors = [parse_path(path).to_dict() for path in paths]
    output = descriptors[0] if len(descriptors) == 1 else descriptors
    click.echo(json.dumps(output, indent=2))


@cli.command(name="sort")
@click.argument("paths", nargs=-1)
def sort_command(paths: tuple[str, ...]) -> None:
    """Print PATHS in FSML order (reads stdin lines when no PATHS given)."""
    for path in sort_paths(_read_paths(paths)):
        click.echo(path)


@cli.command()
@click.argument("paths", nargs=-1)
@config_option
@click.option(
    "--index-filename",
    "index_filenames",
    multiple=True,
    help="Recognized index filename (repeatable, overrides config)",
)
@click.option(
    "--root-manifest",
    default=None,
    help="Root manifest filename to exclude (overrides config)",
)
def tree(
    paths: tuple[str, ...],
    config_path: Path | None,
    index_filenames: tuple[str, ...],
    root_manifest: str | None,
) -> None:
    """Print the navigation tree for PATHS as JSON (reads stdin when no PATHS given)."""
    config = _load_config(config_path).with_overrides(
        index_filenames=index_filenames or None,
        root_manifest=root_manifest,
    )
    nodes = build_nav_tree(_read_paths(paths), config.navigation)
    click.echo(json.dumps([node.to_dict() for node in nodes], indent=2))


@cli.command()
@click.argument("source")
@click.argument("target")
@click.option(
    "--position",
    "-p",
    type=click.Choice(POSITIONS),
    required=True,
    help="Where to place SOURCE relative to TARGET",
)
@click.option(
    "--sibling",
    "-s",
    "siblings",
    multiple=True,
    help="Current path in the target directory (repeatable, default: stdin lines)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the plan as JSON",
)
def reorder(
    source: str,
    target: str,
    position: str,
    siblings: tuple[str, ...],
    as_json: bool,
) -> None:
    """Plan the renames that move SOURCE before, after or inside TARGET."""
    plan = compute_reorder(source, target, cast(Position, position), _read_paths(siblings))

    if as_json:
        click.echo(json.dumps(plan.to_dict(), indent=2))
        return

    if not plan.renames:
        click.echo(click.style("No changes needed.", fg="green"))
        click.echo(f"Path: {plan.new_path}")
        return

    click.echo(f"Renames ({len(plan.renames)}), apply in this order:")
    for rename in plan.renames:
        click.echo(f"  {rename.source} -> {rename.target}")
    click.echo(f"New path: {plan.new_path}")


@cli.command()
@config_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(config_path: Path | None, host: str | None, port: int | None) -> None:
    """Start the FSML API server."""
    from fsml.server import run_server

    config = _load_config(config_path).with_overrides(host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    if config.config_path is not None:
        click.echo(f"Configuration: {config.config_path}")

    run_server(config)


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error.

    Raises:
        SystemExit: If the configuration file is missing or invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _read_paths(paths: Sequence[str]) -> list[str]:
    """Return paths from arguments, or from stdin lines when none given."""
    if paths:
        return list(paths)

    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        return []
    return [line.rstrip("\r\n") for line in stdin if line.strip()]


if __name__ == "__main__":
    cli()
