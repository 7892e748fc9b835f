"""Custom exceptions for eshttp."""

from pathlib import Path


class EshttpError(Exception):
    """Base exception for eshttp."""


class InvalidInputError(EshttpError):
    """Caller-supplied input is malformed (relative path, environment name, etc.)."""


class SecurityViolationError(EshttpError):
    """A resolved path escapes its root, or a write would go through a symlink."""

    def __init__(self, path: Path, root: Path, reason: str | None = None):
        self.path = path
        self.root = root
        message = reason or f"Path {path} is outside root {root}"
        super().__init__(message)


class FilesystemError(EshttpError):
    """A filesystem operation failed (permissions, races, disk errors)."""

    def __init__(self, action: str, path: Path, cause: OSError):
        self.action = action
        self.path = path
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"Failed to {action} {path}: {detail}")


class DiscoveryConfigError(EshttpError):
    """A discovery config file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")
