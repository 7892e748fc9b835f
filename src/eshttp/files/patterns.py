"""Glob matching for discovery configs.

Patterns are shell globs matched against forward-slash relative paths:

- ``*`` matches any run of characters within a segment
- ``?`` matches one character within a segment
- ``[abc]`` / ``[!abc]`` match one character from (or not from) a class
- ``**`` as a whole segment matches zero or more segments, so ``A/**``
  matches ``A`` itself as well as everything below it

A pattern that cannot be compiled never matches. One bad pattern in a config
must not abort a whole discovery walk.
"""

import re
from functools import lru_cache

from loguru import logger

from eshttp.identity import normalize_path
from eshttp.models import DiscoveryConfig


class _InvalidPattern(ValueError):
    """Glob pattern cannot be translated."""


def _translate_segment(segment: str) -> str:
    """Translate one pattern segment (no slashes) into a regex fragment."""
    if "**" in segment:
        raise _InvalidPattern("'**' must be a whole path segment")

    parts = []
    i = 0
    while i < len(segment):
        char = segment[i]
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "[":
            end = segment.find("]", i + 2)
            if end == -1:
                raise _InvalidPattern("unterminated character class")
            body = segment[i + 1 : end]
            negate = body.startswith("!")
            if negate:
                body = body[1:]
            for special in ("\\", "^", "[", "]"):
                body = body.replace(special, "\\" + special)
            parts.append(f"[^/{body}]" if negate else f"[{body}]")
            i = end
        else:
            parts.append(re.escape(char))
        i += 1

    return "".join(parts)


def _translate(pattern: str) -> str:
    segments: list[str] = []
    for segment in normalize_path(pattern).split("/"):
        if segment == "**" and segments and segments[-1] == "**":
            continue
        segments.append(segment)

    regex = ""
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "**":
            if index == 0:
                # Leading "**" matches everything, or any prefix of segments
                regex += ".*" if last else "(?:.*/)?"
            elif last:
                # Trailing "/**" also matches the parent segment itself
                regex += "(?:/.*)?"
            else:
                regex += "(?:/.*)?/"
            continue

        if index > 0 and segments[index - 1] != "**":
            regex += "/"
        regex += _translate_segment(segment)

    return regex


@lru_cache(maxsize=512)
def compile_glob(pattern: str) -> re.Pattern[str] | None:
    """Compile a glob pattern, or return None if it is invalid."""
    try:
        return re.compile(_translate(pattern), re.DOTALL)
    except (_InvalidPattern, re.error) as e:
        logger.warning("Ignoring invalid glob pattern {!r}: {}", pattern, e)
        return None


def glob_match(pattern: str, candidate: str) -> bool:
    """Check if a relative path matches a glob pattern.

    Args:
        pattern: Glob pattern (backslashes are treated as separators)
        candidate: Relative path (backslashes are treated as separators)

    Returns:
        True if the whole candidate matches. Invalid patterns never match.
    """
    regex = compile_glob(pattern)
    if regex is None:
        return False
    return regex.fullmatch(normalize_path(candidate)) is not None


def path_included(config: DiscoveryConfig, relative: str) -> bool:
    """Check if a directory should be walked under config.

    Exclude patterns always win over include patterns. With no include
    patterns, everything not excluded is walked.
    """
    if any(glob_match(pattern, relative) for pattern in config.exclude):
        return False

    if not config.include:
        return True

    return any(glob_match(pattern, relative) for pattern in config.include)


def matches_entries(config: DiscoveryConfig, relative: str) -> bool:
    """Check if a request-holding directory should become a collection.

    An empty entries list matches everything.
    """
    if not config.entries:
        return True

    return any(glob_match(pattern, relative) for pattern in config.entries)
