"""Output formatting for eshttp operations."""

import json
from collections.abc import Sequence
from pathlib import Path

import typer

from eshttp.models import Collection
from eshttp.models import Workspace
from eshttp.models import WorkspaceTree


def print_json(data: object) -> None:
    """Print data as indented JSON to stdout."""
    typer.echo(json.dumps(data, indent=2))


def print_workspaces(workspaces: Sequence[Workspace]) -> None:
    """Print workspaces to stdout, one per line.

    Args:
        workspaces: Workspaces to print
    """
    if not workspaces:
        typer.secho("No workspaces found", fg=typer.colors.BRIGHT_BLACK)
        return

    for workspace in workspaces:
        typer.secho(workspace.name, bold=True, nl=False)
        typer.secho(f"  {_display_path(workspace.uri)}", fg=typer.colors.BRIGHT_BLACK)


def print_collections(workspace: Workspace, collections: Sequence[Collection]) -> None:
    """Print discovered collections to stdout.

    Args:
        workspace: Workspace that was walked
        collections: Collections found in it
    """
    for collection in collections:
        typer.secho(collection.name, bold=True, nl=False)
        typer.secho(f"  {_display_path(collection.uri)}", fg=typer.colors.BRIGHT_BLACK)

    count = len(collections)
    typer.secho(
        f"✓ {count} collection{'s' if count != 1 else ''} in {workspace.name}",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_tree(tree: WorkspaceTree) -> None:
    """Print a workspace with its collections and requests."""
    typer.secho(tree.workspace.name, bold=True)
    for node in tree.collections:
        typer.secho(f"  {node.collection.name}", fg=typer.colors.CYAN)
        for request in node.requests:
            typer.echo(f"    {request.title}")

    num_collections = len(tree.collections)
    num_requests = sum(len(node.requests) for node in tree.collections)
    typer.secho(
        f"✓ {num_collections} collection{'s' if num_collections != 1 else ''}, "
        f"{num_requests} request{'s' if num_requests != 1 else ''}",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)


def _display_path(path: Path) -> str:
    """Format path for display, using ~ for home directory.

    Args:
        path: Path to format

    Returns:
        String representation with ~ substitution if applicable
    """
    try:
        rel_path = path.relative_to(Path.home())
        return f"~/{rel_path}"
    except ValueError:
        return str(path)
