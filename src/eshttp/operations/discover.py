"""Collection discovery."""

from pathlib import Path

from loguru import logger

from eshttp.files.config import load_discovery_config
from eshttp.files.discover import scan_directory
from eshttp.files.patterns import matches_entries
from eshttp.files.patterns import path_included
from eshttp.files.sandbox import canonicalize_root
from eshttp.files.sandbox import ensure_within_root
from eshttp.identity import EntityKind
from eshttp.identity import make_id
from eshttp.identity import relative_path
from eshttp.models import ActiveConfig
from eshttp.models import Collection
from eshttp.models import Workspace


def discover_collections(workspace: Workspace) -> list[Collection]:
    """Find every collection inside a workspace.

    Args:
        workspace: Workspace to walk

    Returns:
        Collections sorted by name. Empty if the workspace directory is gone.

    Raises:
        DiscoveryConfigError: If any config file in the walk is malformed.
            The whole call fails, since configs decide which subtrees are
            visited at all.
        InvalidInputError: If the workspace path is not a directory
        FilesystemError: If a directory in the walk cannot be read
    """
    if not workspace.uri.exists():
        logger.debug("Workspace {} does not exist", workspace.uri)
        return []

    root = canonicalize_root(workspace.uri)
    collections: list[Collection] = []
    _find_collections(workspace, root, root, None, set(), collections)

    return sorted(collections, key=lambda c: c.name)


def _find_collections(
    workspace: Workspace,
    root: Path,
    directory: Path,
    active: ActiveConfig | None,
    visited: set[Path],
    out: list[Collection],
) -> None:
    """Walk one directory and recurse into its subdirectories.

    Args:
        workspace: Workspace being walked
        root: Canonical workspace root
        directory: Canonical directory to walk
        active: Nearest config from this directory or an ancestor
        visited: Canonical directories already walked in this call
        out: Collections found so far
    """
    if directory in visited:
        return
    visited.add(directory)

    ensure_within_root(root, directory)

    # A local config replaces the inherited one, it is never merged
    local_config = load_discovery_config(directory, root)
    if local_config is not None:
        active = ActiveConfig(origin_dir=directory, config=local_config)

    relative = relative_path(root, directory)
    if active is not None and not path_included(active.config, relative):
        logger.debug("Pruned {} (config from {})", relative, active.origin_dir)
        return

    scan = scan_directory(directory, root)

    if scan.has_requests and _is_entry(active, directory):
        name = workspace.name if relative == "." else relative
        logger.debug("Found collection {} at {}", name, directory)
        out.append(
            Collection(
                id=make_id(EntityKind.COLLECTION, f"{workspace.id}/{relative}"),
                workspace_id=workspace.id,
                name=name,
                uri=directory,
            )
        )

    for subdirectory in scan.subdirectories:
        _find_collections(workspace, root, subdirectory, active, visited, out)


def _is_entry(active: ActiveConfig | None, directory: Path) -> bool:
    """Check entries patterns, measured from the directory that defined them."""
    if active is None:
        return True
    return matches_entries(active.config, relative_path(active.origin_dir, directory))
