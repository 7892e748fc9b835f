"""Command-line interface for eshttp."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from eshttp import __version__
from eshttp.exceptions import DiscoveryConfigError
from eshttp.exceptions import EshttpError
from eshttp.exceptions import FilesystemError
from eshttp.exceptions import InvalidInputError
from eshttp.exceptions import SecurityViolationError
from eshttp.files.sandbox import canonicalize_root
from eshttp.log import setup_logging
from eshttp.models import Workspace
from eshttp.operations import default_workspace_roots
from eshttp.operations import discover_collections
from eshttp.operations import list_workspaces
from eshttp.operations import load_workspace_tree
from eshttp.operations import parse_env_text
from eshttp.operations import read_environment_file
from eshttp.operations import read_text_file
from eshttp.operations import write_text_file
from eshttp.output import print_collections
from eshttp.output import print_error
from eshttp.output import print_json
from eshttp.output import print_tree
from eshttp.output import print_workspaces

app = typer.Typer(help="Browse .http request collections inside workspaces")

JsonOption = Annotated[bool, typer.Option("--json", help="Print JSON output")]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"eshttp {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(envvar="ESHTTP_LOG_LEVEL", help="Minimum log level on stderr"),
    ] = "WARNING",
) -> None:
    """Browse .http request collections inside workspaces."""
    setup_logging(log_level)


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Turn eshttp errors into a red message and exit code 1."""
    try:
        yield
    except SecurityViolationError as e:
        print_error(f"Security violation: {e}")
        raise typer.Exit(1) from None
    except DiscoveryConfigError as e:
        print_error(f"Config error: {e}")
        raise typer.Exit(1) from None
    except InvalidInputError as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except FilesystemError as e:
        print_error(f"Filesystem error: {e}")
        raise typer.Exit(1) from None
    except EshttpError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None


def _workspace_for(path: Path) -> Workspace:
    return Workspace.from_path(canonicalize_root(path))


@app.command()
def workspaces(
    roots: Annotated[
        list[Path] | None,
        typer.Option(
            "--root", "-r", help="Directory holding workspaces (repeatable)"
        ),
    ] = None,
    as_json: JsonOption = False,
) -> None:
    """List workspaces found in the workspace roots."""
    if not roots:
        roots = default_workspace_roots()

    with _exit_on_error():
        found = list_workspaces(roots)

    if as_json:
        print_json([w.to_dict() for w in found])
    else:
        print_workspaces(found)


@app.command()
def collections(
    workspace_dir: Annotated[Path, typer.Argument(help="Workspace directory")],
    as_json: JsonOption = False,
) -> None:
    """Discover collections inside a workspace."""
    with _exit_on_error():
        workspace = _workspace_for(workspace_dir)
        found = discover_collections(workspace)

    if as_json:
        print_json([c.to_dict() for c in found])
    else:
        print_collections(workspace, found)


@app.command()
def requests(
    workspace_dir: Annotated[Path, typer.Argument(help="Workspace directory")],
    as_json: JsonOption = False,
) -> None:
    """Show every collection in a workspace with its request files."""
    with _exit_on_error():
        (tree,) = load_workspace_tree([_workspace_for(workspace_dir)])

    if as_json:
        print_json(tree.to_dict())
    else:
        print_tree(tree)


@app.command()
def read(
    root: Annotated[Path, typer.Argument(help="Directory the read is confined to")],
    path: Annotated[str, typer.Argument(help="File path relative to root")],
) -> None:
    """Print a file from inside a root directory."""
    with _exit_on_error():
        text = read_text_file(root, path)

    if text is None:
        print_error(f"Not found: {path}")
        raise typer.Exit(1)
    typer.echo(text, nl=False)


@app.command()
def write(
    root: Annotated[Path, typer.Argument(help="Directory the write is confined to")],
    path: Annotated[str, typer.Argument(help="File path relative to root")],
    content: Annotated[
        str | None,
        typer.Option("--content", "-c", help="Text to write (default: stdin)"),
    ] = None,
) -> None:
    """Write a file inside a root directory, creating parent directories."""
    if content is None:
        content = typer.get_text_stream("stdin").read()

    with _exit_on_error():
        written = write_text_file(root, path, content)

    typer.secho(f"✓ Wrote {written}", fg=typer.colors.GREEN, bold=True)


@app.command()
def env(
    scope: Annotated[Path, typer.Argument(help="Workspace or collection directory")],
    name: Annotated[str, typer.Argument(help="Environment name (reads .env.<name>)")],
    parse: Annotated[
        bool, typer.Option("--parse", help="Print parsed variables as JSON")
    ] = False,
) -> None:
    """Print an environment file from a workspace or collection."""
    with _exit_on_error():
        text = read_environment_file(scope, name)

    if text is None:
        print_error(f"No environment named {name!r} in {scope}")
        raise typer.Exit(1)

    if parse:
        print_json(parse_env_text(text))
    else:
        typer.echo(text, nl=False)


def main() -> None:
    """Main entry point for the eshttp CLI."""
    app()


if __name__ == "__main__":
    main()
