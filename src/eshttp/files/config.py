"""Per-directory discovery config files."""

import json
from pathlib import Path

from eshttp.exceptions import DiscoveryConfigError
from eshttp.exceptions import FilesystemError
from eshttp.files.sandbox import ensure_within_root
from eshttp.models import DiscoveryConfig

CONFIG_FILENAME = ".eshttp.json"


def load_discovery_config(
    directory: Path, root: Path | None = None
) -> DiscoveryConfig | None:
    """Load the discovery config directly inside a directory.

    Args:
        directory: Directory to look in
        root: Canonical root the config must stay inside. If the config file
            is a symlink, its target is checked against root.

    Returns:
        DiscoveryConfig, or None if the directory has no config file

    Raises:
        DiscoveryConfigError: If the file is not valid UTF-8 JSON or doesn't
            match the schema
        SecurityViolationError: If the config is a symlink pointing outside root
        FilesystemError: If the file exists but cannot be read
    """
    config_path = directory / CONFIG_FILENAME
    if not config_path.exists(follow_symlinks=False):
        return None

    if root is not None and config_path.is_symlink():
        config_path = ensure_within_root(root, config_path)
        if not config_path.exists():
            return None

    try:
        raw = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DiscoveryConfigError(config_path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise FilesystemError("read", config_path, e) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DiscoveryConfigError(config_path, f"invalid JSON: {e}") from e

    try:
        return DiscoveryConfig.from_dict(data)
    except ValueError as e:
        raise DiscoveryConfigError(config_path, str(e)) from e
