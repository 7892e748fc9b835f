"""Workspace listing."""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger
from platformdirs import user_config_path

from eshttp.exceptions import FilesystemError
from eshttp.models import Workspace

APP_NAME = "eshttp"


def default_workspace_roots(cwd: Path | None = None) -> list[Path]:
    """Get the default directories that hold workspaces.

    Args:
        cwd: Directory for the process-local root. If None, uses the current
            working directory.

    Returns:
        [<cwd>/.eshttp/workspaces, <user config dir>/eshttp/workspaces]
    """
    if cwd is None:
        cwd = Path.cwd()

    config_dir = user_config_path(APP_NAME, appauthor=False, roaming=True)
    return [cwd / f".{APP_NAME}" / "workspaces", config_dir / "workspaces"]


def list_workspaces(roots: Iterable[Path]) -> list[Workspace]:
    """List workspaces found one level deep inside each root.

    Args:
        roots: Directories to scan. Missing roots are skipped.

    Returns:
        Workspaces in root order, then by directory name. Entries that
        resolve to the same canonical directory are reported once (first
        seen wins).

    Raises:
        FilesystemError: If an existing root cannot be listed
    """
    workspaces: dict[Path, Workspace] = {}

    for root in roots:
        if not root.is_dir():
            logger.debug("Skipping missing workspace root {}", root)
            continue

        try:
            entries = sorted(root.iterdir())
        except OSError as e:
            raise FilesystemError("read directory", root, e) from e

        for entry in entries:
            if not entry.is_dir():
                continue
            try:
                uri = entry.resolve(strict=True)
            except OSError as e:
                raise FilesystemError("resolve", entry, e) from e
            if uri in workspaces:
                continue
            workspaces[uri] = Workspace.from_path(uri)

    return list(workspaces.values())
