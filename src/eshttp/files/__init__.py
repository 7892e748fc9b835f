"""Filesystem operations for eshttp."""

from eshttp.files.config import CONFIG_FILENAME
from eshttp.files.config import load_discovery_config
from eshttp.files.discover import DirectoryScan
from eshttp.files.discover import list_request_paths
from eshttp.files.discover import scan_directory
from eshttp.files.patterns import glob_match
from eshttp.files.patterns import matches_entries
from eshttp.files.patterns import path_included
from eshttp.files.sandbox import canonicalize_root
from eshttp.files.sandbox import ensure_within_root
from eshttp.files.sandbox import parse_relative
from eshttp.files.sandbox import resolve_scoped_read
from eshttp.files.sandbox import resolve_scoped_write

__all__ = [
    "CONFIG_FILENAME",
    "DirectoryScan",
    "canonicalize_root",
    "ensure_within_root",
    "glob_match",
    "list_request_paths",
    "load_discovery_config",
    "matches_entries",
    "parse_relative",
    "path_included",
    "resolve_scoped_read",
    "resolve_scoped_write",
    "scan_directory",
]
