"""Command-line interface for Stepgraph."""

import os
import random
import sys

import click

from .algorithms.errors import AlgorithmError
from .config.errors import ConfigLoadError, ConfigValidationError
from .config.loader import load_settings, parse_graph_file
from .logging_config import LEVEL_ENV_VAR, configure_logging
from .output.formatter import format_graph, format_stages
from .storage.builder import build_session
from .storage.errors import DisconnectedGraphError, EdgeCountError, PathEndpointError
from .storage.graph_storage import clamp_edge_count
from .storage.session import Session


def _report_config_error(e: ConfigLoadError | ConfigValidationError) -> None:
    if isinstance(e, ConfigValidationError):
        click.echo(f"Validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    else:
        click.echo(f"Error loading file: {e}", err=True)
    sys.exit(2)


def _load_session(graph_file: str, settings_file: str | None) -> Session:
    try:
        settings = load_settings(settings_file)
        document = parse_graph_file(graph_file)
    except (ConfigLoadError, ConfigValidationError) as e:
        _report_config_error(e)
    try:
        return build_session(document, settings)
    except AlgorithmError as e:
        click.echo(f"Algorithm error: {e}", err=True)
        sys.exit(2)


@click.group()
@click.version_option()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """Stepgraph: watch graph algorithms run one step at a time."""
    if verbose:
        configure_logging("DEBUG")
    elif LEVEL_ENV_VAR in os.environ:
        configure_logging()


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option("--source", default=None, help="Start node (overrides the file)")
@click.option("--destination", default=None, help="End node (overrides the file)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(exists=True),
    envvar="STEPGRAPH_SETTINGS",
    default=None,
    help="Settings YAML file (defaults to STEPGRAPH_SETTINGS env var)",
)
def run(
    graph_file: str,
    source: str | None,
    destination: str | None,
    output_format: str,
    settings_file: str | None,
):
    """Run the graph file's algorithm and print every stage.

    GRAPH_FILE is the path to a YAML graph file.

    Exit codes:
      0 - Run completed
      1 - Graph cannot be run (disconnected, missing path ends)
      2 - File, schema or algorithm error
    """
    session = _load_session(graph_file, settings_file)

    try:
        player = session.run(source, destination)
    except (PathEndpointError, DisconnectedGraphError) as e:
        click.echo(f"Cannot run: {e}", err=True)
        sys.exit(1)
    except AlgorithmError as e:
        click.echo(f"Algorithm error: {e}", err=True)
        sys.exit(2)

    click.echo(format_stages(player.stages, output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
def validate(graph_file: str):
    """Check that a graph file describes a connected graph.

    Exit codes:
      0 - Graph is connected
      1 - Graph is not connected
      2 - File or schema error
    """
    session = _load_session(graph_file, None)
    components = session.graph.count_connected_components()

    if session.storage.is_valid():
        click.echo("Graph is connected")
        sys.exit(0)
    click.echo(f"Graph is not connected: {components} component(s)")
    sys.exit(1)


@main.command("random")
@click.argument("nodes", type=click.IntRange(min=0))
@click.argument("edges", type=click.IntRange(min=0))
@click.option("--seed", type=int, default=None, help="Seed for reproducible graphs")
@click.option(
    "--clamp",
    is_flag=True,
    default=False,
    help="Fit EDGES into the range a connected graph allows instead of failing",
)
@click.option(
    "--algorithm",
    default="dijkstra",
    help="Algorithm whose properties the elements get",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def random_cmd(
    nodes: int,
    edges: int,
    seed: int | None,
    clamp: bool,
    algorithm: str,
    output_format: str,
):
    """Generate a random connected graph with NODES nodes and EDGES edges.

    Exit codes:
      0 - Success
      2 - Invalid edge count or algorithm
    """
    if clamp:
        edges = clamp_edge_count(nodes, edges)

    session = Session()
    try:
        session.storage.change_algorithm(algorithm)
        session.storage.random_graph(nodes, edges, random.Random(seed))
    except EdgeCountError as e:
        click.echo(f"Invalid edge count: {e}", err=True)
        sys.exit(2)
    except AlgorithmError as e:
        click.echo(f"Algorithm error: {e}", err=True)
        sys.exit(2)

    click.echo(format_graph(session.graph, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
