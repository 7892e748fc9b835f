"""Directory scanning operations."""

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from eshttp.exceptions import FilesystemError
from eshttp.exceptions import SecurityViolationError
from eshttp.files.sandbox import ensure_within_root
from eshttp.identity import is_request_file_name


@dataclass
class DirectoryScan:
    """Direct contents of a directory that matter for discovery."""

    has_requests: bool = False
    subdirectories: list[Path] = field(default_factory=list)  # Canonical


def _list_entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        raise FilesystemError("read directory", directory, e) from e


def scan_directory(directory: Path, root: Path) -> DirectoryScan:
    """Scan the direct entries of a directory once.

    Symlinks are skipped entirely: a symlinked request file doesn't count and
    a symlinked directory is never descended into.

    Args:
        directory: Canonical directory to scan
        root: Canonical workspace root

    Returns:
        DirectoryScan noting whether any request file exists directly in
        directory, and the canonical subdirectories that stay inside root.
        Subdirectories are sorted for deterministic walk order.
    """
    scan = DirectoryScan()
    for entry in _list_entries(directory):
        if entry.is_symlink():
            continue

        if entry.is_file():
            if is_request_file_name(entry.name):
                scan.has_requests = True
        elif entry.is_dir():
            try:
                scan.subdirectories.append(ensure_within_root(root, entry))
            except SecurityViolationError:
                continue

    return scan


def list_request_paths(directory: Path) -> list[Path]:
    """List request files directly inside a directory.

    Args:
        directory: Canonical directory to list

    Returns:
        Sorted canonical paths of non-symlink request files. Each is checked
        to lie inside directory.
    """
    paths = []
    for entry in _list_entries(directory):
        if entry.is_symlink() or not entry.is_file():
            continue
        if not is_request_file_name(entry.name):
            continue
        paths.append(ensure_within_root(directory, entry))

    return sorted(paths)
