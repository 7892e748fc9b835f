"""Reads and writes confined to a root directory."""

import re
from pathlib import Path

from loguru import logger

from eshttp.exceptions import FilesystemError
from eshttp.exceptions import InvalidInputError
from eshttp.files.sandbox import canonicalize_root
from eshttp.files.sandbox import resolve_scoped_read
from eshttp.files.sandbox import resolve_scoped_write

ENV_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]+")


def read_text_file(root: Path, relative: str) -> str | None:
    """Read a text file under root.

    Args:
        root: Directory the read is confined to
        relative: Path relative to root

    Returns:
        File contents, or None if nothing exists at the path

    Raises:
        InvalidInputError: If relative is malformed, names a directory or
            special file, or the file is not valid UTF-8
        SecurityViolationError: If the path resolves outside root
        FilesystemError: If the file cannot be read
    """
    root = canonicalize_root(root)
    path = resolve_scoped_read(root, relative)

    if not path.exists():
        return None
    if path.is_dir():
        raise InvalidInputError(f"Path is a directory: {path}")
    if not path.is_file():
        raise InvalidInputError(f"Path is not a regular file: {path}")

    # Line endings are returned exactly as stored
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInputError(f"File is not valid UTF-8: {path}") from None
    except OSError as e:
        raise FilesystemError("read", path, e) from e


def write_text_file(root: Path, relative: str, contents: str) -> Path:
    """Write a text file under root, creating missing parent directories.

    Args:
        root: Directory the write is confined to
        relative: Path relative to root
        contents: Text to write (replaces any existing content)

    Returns:
        Path that was written

    Raises:
        InvalidInputError: If relative is malformed or the target is a directory
        SecurityViolationError: If the write would leave root or go through a
            symlinked directory
        FilesystemError: If the file cannot be written
    """
    root = canonicalize_root(root)
    path = resolve_scoped_write(root, relative)

    try:
        path.write_text(contents, encoding="utf-8", newline="")
    except OSError as e:
        raise FilesystemError("write", path, e) from e

    logger.debug("Wrote {} ({} chars)", path, len(contents))
    return path


def environment_file_name(env_name: str) -> str:
    """Get the file name for a named environment.

    Raises:
        InvalidInputError: If env_name has characters outside [A-Za-z0-9_.-]
    """
    if not ENV_NAME_PATTERN.fullmatch(env_name):
        raise InvalidInputError(f"Invalid environment name: {env_name!r}")
    return f".env.{env_name}"


def read_environment_file(scope: Path, env_name: str) -> str | None:
    """Read the ``.env.<name>`` file directly inside a workspace or collection.

    The name is validated before the filesystem is touched.
    """
    return read_text_file(scope, environment_file_name(env_name))
