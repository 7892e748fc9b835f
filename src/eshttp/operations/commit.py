"""Path sanitizing for version-control commits."""

import re
from collections.abc import Iterable

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


def sanitize_commit_paths(paths: Iterable[str]) -> list[str]:
    """Filter caller-supplied paths down to safe repository-relative ones.

    Backslashes become forward slashes and surrounding whitespace is
    trimmed. Empty, absolute and drive-prefixed paths are dropped, as is any
    path with an empty, "." or ".." segment. Duplicates are dropped.

    Args:
        paths: Paths relative to a repository root

    Returns:
        Sanitized paths in their original order
    """
    sanitized: list[str] = []

    for path in paths:
        normalized = path.replace("\\", "/").strip()
        if not normalized:
            continue
        if normalized.startswith("/") or _DRIVE_PREFIX.match(normalized):
            continue
        if any(segment in ("", ".", "..") for segment in normalized.split("/")):
            continue
        if normalized not in sanitized:
            sanitized.append(normalized)

    return sanitized
