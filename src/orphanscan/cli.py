# src/orphanscan/cli.py
"""Orphanscan Command Line Interface.

Entry point for the orphanscan CLI tool.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import networkx as nx
import typer
from pydantic import ValidationError

from orphanscan import __version__
from orphanscan.core.config import DocumentParseError, load_graph_document
from orphanscan.core.graph import BuildResult, ConfigurationError, OrphanReport, build_graph, find_orphans

__all__ = [
    "app",
]


class OutputFormat(str, Enum):
    """Result format for the orphans command."""

    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="orphanscan",
    help="Find graph nodes that have no path to the root after edges are deleted.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"orphanscan version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """Orphanscan: find orphan nodes in a directed graph."""
    # Configure logging before any subcommand runs
    from orphanscan.core.logging import configure_logging

    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(json_output=json_logs, level=log_level)


def _format_error(
    title: str,
    message: str,
    hint: str | None = None,
    details: list[str] | None = None,
) -> None:
    """Display a formatted error with optional hint and details."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(stderr=True)

    content = Text()
    content.append(message, style="white")

    if details:
        content.append("\n\n")
        for detail in details:
            content.append(f"  • {detail}\n", style="dim")

    if hint:
        content.append("\n")
        content.append("Hint: ", style="yellow bold")
        content.append(hint, style="yellow")

    panel = Panel(
        content,
        title=f"[red bold]{title}[/]",
        border_style="red",
        padding=(0, 1),
    )
    console.print(panel)


def _load_and_build(path: Path) -> BuildResult:
    """Load a graph document and build its graph, exiting with code 1 on any fatal error."""
    try:
        document = load_graph_document(path)
    except FileNotFoundError:
        _format_error(
            title="File Not Found",
            message=f"Graph document does not exist: {path}",
            hint="Check the path and ensure the file exists.",
        )
        raise typer.Exit(1) from None
    except DocumentParseError as e:
        _format_error(
            title="Parse Error",
            message=f"Failed to parse {path.name}",
            details=[e.reason],
            hint="JSON and YAML (.yaml/.yml) documents are supported.",
        )
        raise typer.Exit(1) from None
    except ValidationError as e:
        details = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            details.append(f"{loc}: {error['msg']}")
        _format_error(
            title="Invalid Graph Document",
            message=f"Invalid graph description in {path.name}",
            details=details,
            hint="A document needs 'nodes' (list of {id}) and 'root'; 'edges' and 'deletedEdge' are lists of {from, to}.",
        )
        raise typer.Exit(1) from None

    try:
        return build_graph(
            document.node_names(),
            document.root,
            document.edge_pairs(),
            document.deleted_pairs(),
        )
    except ConfigurationError as e:
        _format_error(
            title="Graph Configuration Error",
            message=str(e),
            hint="The root must be one of the declared nodes.",
        )
        raise typer.Exit(1) from None


def _report_as_json(report: OrphanReport) -> str:
    payload = {
        "root": report.root,
        "orphans": list(report.orphans),
        "warnings": [warning.to_dict() for warning in report.warnings],
    }
    return json.dumps(payload, indent=2)


@app.command()
def orphans(
    document: Path = typer.Argument(
        ...,
        help="Path to the graph document (JSON or YAML).",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format.",
    ),
) -> None:
    """List the nodes that have no directed path to the root."""
    result = _load_and_build(document.expanduser())
    report = find_orphans(result)

    if output_format == OutputFormat.JSON:
        typer.echo(_report_as_json(report))
        return

    for warning in report.warnings:
        typer.secho(f"Warning: {warning.message}", fg=typer.colors.YELLOW, err=True)

    if not report.has_orphans:
        typer.echo("No orphan nodes exist in the graph")
        return

    typer.echo("The orphan nodes in the graph are:")
    typer.echo(" ".join(report.orphans))


@app.command()
def inspect(
    document: Path = typer.Argument(
        ...,
        help="Path to the graph document (JSON or YAML).",
    ),
) -> None:
    """Show the built graph: node indices and reversed edges."""
    result = _load_and_build(document.expanduser())
    graph = result.graph

    typer.echo(f"Graph: {graph.node_count} nodes, {graph.edge_count} edges, root {result.root_name}")
    typer.echo("")
    typer.echo("Node name to index mapping:")
    for index, name in enumerate(graph.node_names()):
        typer.echo(f"  {name} -> {index}")

    typer.echo("")
    typer.echo("Predecessors (node <- nodes with an edge into it):")
    for index, name in enumerate(graph.node_names()):
        preds = sorted(graph.predecessors(index))
        if not preds:
            continue
        typer.echo(f"  {name} <- {', '.join(graph.name_of(p) for p in preds)}")

    isolated = sorted(nx.isolates(graph.get_nx_graph()), key=graph.index_of)
    if isolated:
        typer.echo("")
        typer.echo(f"Isolated nodes (no edges at all): {' '.join(isolated)}")

    for warning in result.warnings:
        typer.secho(f"Warning: {warning.message}", fg=typer.colors.YELLOW, err=True)


if __name__ == "__main__":
    app()
