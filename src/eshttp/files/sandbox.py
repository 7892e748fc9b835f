"""Path canonicalization and root containment.

Every check here compares canonical (fully resolved) paths. Raw strings
supplied by callers are never compared against the root directly.
"""

import errno
import os
import re
from pathlib import Path

from loguru import logger

from eshttp.exceptions import FilesystemError
from eshttp.exceptions import InvalidInputError
from eshttp.exceptions import SecurityViolationError

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


def canonicalize_root(path: Path) -> Path:
    """Resolve a root directory to its canonical form.

    Args:
        path: Directory to use as a sandbox root

    Returns:
        Absolute path with symlinks, "." and ".." resolved

    Raises:
        InvalidInputError: If path does not exist or is not a directory
        FilesystemError: If path cannot be resolved
    """
    try:
        root = path.resolve(strict=True)
    except FileNotFoundError:
        raise InvalidInputError(f"Root directory does not exist: {path}") from None
    except OSError as e:
        raise FilesystemError("resolve", path, e) from e

    if not root.is_dir():
        raise InvalidInputError(f"Root path is not a directory: {root}")

    return root


def ensure_within_root(root: Path, candidate: Path) -> Path:
    """Canonicalize candidate and check it is root or lies inside root.

    Args:
        root: Canonical root directory (see canonicalize_root)
        candidate: Path to check, absolute or relative to the working directory

    Returns:
        Canonical candidate path

    Raises:
        SecurityViolationError: If the canonical candidate is outside root
        FilesystemError: If candidate cannot be resolved
    """
    try:
        resolved = candidate.resolve()
    except OSError as e:
        raise FilesystemError("resolve", candidate, e) from e
    except RuntimeError as e:
        # Python 3.12 reports symlink loops as RuntimeError
        loop = OSError(errno.ELOOP, os.strerror(errno.ELOOP))
        raise FilesystemError("resolve", candidate, loop) from e

    if resolved == root or resolved.is_relative_to(root):
        return resolved

    logger.warning("Blocked path {} outside root {}", resolved, root)
    raise SecurityViolationError(resolved, root)


def parse_relative(value: str) -> list[str]:
    """Split a caller-supplied relative path into plain name segments.

    Both "/" and "\\" separate segments. "." and empty segments are dropped.
    Nothing is resolved: a path that tries to leave its root is rejected
    outright rather than normalized.

    Args:
        value: Relative path such as "collection/get-user.http"

    Returns:
        List of name segments (empty if value only names the root itself)

    Raises:
        InvalidInputError: If value is empty or absolute, if any segment is
            ".." or starts with a drive prefix, or if it contains a NUL
            character
    """
    if not value or not value.strip():
        raise InvalidInputError("Path must not be empty")
    if "\x00" in value:
        raise InvalidInputError("Path must not contain NUL characters")

    normalized = value.replace("\\", "/")
    if normalized.startswith("/"):
        raise InvalidInputError(f"Path must be relative: {value}")

    segments = []
    for segment in normalized.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            raise InvalidInputError(f"Path must not contain '..': {value}")
        if _DRIVE_PREFIX.match(segment):
            raise InvalidInputError(f"Path must not have a drive prefix: {value}")
        segments.append(segment)

    return segments


def resolve_scoped_read(root: Path, relative: str) -> Path:
    """Resolve a relative path under root for reading.

    Args:
        root: Canonical root directory
        relative: Caller-supplied relative path

    Returns:
        - The joined (unresolved) path if nothing exists there
        - The canonical path for any other existing entry (file, symlink,
          device, FIFO)
        - The joined (unresolved) path for an existing real directory;
          callers must re-validate before opening it as a file

    Raises:
        InvalidInputError: If relative cannot be parsed
        SecurityViolationError: If an existing non-directory entry resolves
            outside root
    """
    joined = root.joinpath(*parse_relative(relative))

    if not joined.exists(follow_symlinks=False):
        return joined

    # Entries reached through a symlinked parent directory are resolved too
    if joined.is_symlink() or not joined.is_dir():
        return ensure_within_root(root, joined)

    return joined


def resolve_scoped_write(root: Path, relative: str) -> Path:
    """Resolve a relative path under root for writing, creating parents.

    Parent directories are walked one level at a time without following
    symlinks. Each level is created if missing, then re-canonicalized and
    checked against root before descending. No lock is held between the
    check and the caller's write, so a concurrent symlink swap is only
    narrowed, not prevented.

    Args:
        root: Canonical root directory
        relative: Caller-supplied relative path to a file

    Returns:
        Path the caller may create or overwrite (canonical if the final
        segment was an in-root symlink)

    Raises:
        InvalidInputError: If relative cannot be parsed or names no file, a
            parent is not a directory, or the target is a directory or
            special file
        SecurityViolationError: If a parent is a symlink, or the target
            symlink resolves outside root
        FilesystemError: If a parent directory cannot be created
    """
    segments = parse_relative(relative)
    if not segments:
        raise InvalidInputError(f"Path does not name a file: {relative}")

    *parent_segments, file_name = segments

    current = root
    for segment in parent_segments:
        level = current / segment

        if not level.exists(follow_symlinks=False):
            try:
                level.mkdir(exist_ok=True)
            except OSError as e:
                raise FilesystemError("create directory", level, e) from e
            logger.debug("Created directory {}", level)

        if level.is_symlink():
            raise SecurityViolationError(
                level, root, f"Refusing to write through symlinked directory {level}"
            )
        if not level.is_dir():
            raise InvalidInputError(f"Path component is not a directory: {level}")

        current = ensure_within_root(root, level)

    target = current / file_name

    if target.is_symlink():
        resolved = ensure_within_root(root, target)
        if resolved.is_dir():
            raise InvalidInputError(f"Symlink target is a directory: {target}")
        return resolved

    if target.is_dir():
        raise InvalidInputError(f"Path is a directory: {target}")
    if target.exists() and not target.is_file():
        raise InvalidInputError(f"Path is not a regular file: {target}")

    return target
