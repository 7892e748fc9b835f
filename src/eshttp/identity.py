"""Deterministic ids and names for workspaces, collections and requests."""

from enum import Enum
from pathlib import Path

REQUEST_SUFFIX = ".http"


class EntityKind(str, Enum):
    """Prefix used in entity ids."""

    WORKSPACE = "workspace"
    COLLECTION = "collection"
    REQUEST = "request"


def normalize_path(value: str) -> str:
    """Replace backslashes with forward slashes."""
    return value.replace("\\", "/")


def make_id(kind: EntityKind, value: str | Path) -> str:
    """Build an id of the form ``<kind>:<normalized path>``.

    Ids are stable across runs as long as the filesystem doesn't change.
    """
    return f"{kind.value}:{normalize_path(str(value))}"


def relative_path(base: Path, path: Path) -> str:
    """Return ``path`` relative to ``base`` with forward slashes.

    Returns "." when ``path`` is ``base`` itself or is not inside it.
    """
    try:
        relative = path.relative_to(base)
    except ValueError:
        return "."
    value = relative.as_posix()
    if value in ("", "."):
        return "."
    return normalize_path(value)


def is_request_file_name(name: str) -> bool:
    """Check if a file name looks like a request file."""
    return name.endswith(REQUEST_SUFFIX)


def request_title(name: str) -> str:
    """Strip the request suffix from a file name."""
    return name.removesuffix(REQUEST_SUFFIX)
