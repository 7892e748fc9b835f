"""High-level operations for eshttp."""

from eshttp.operations.commit import sanitize_commit_paths
from eshttp.operations.discover import discover_collections
from eshttp.operations.environment import merge_environment
from eshttp.operations.environment import parse_env_text
from eshttp.operations.requests import list_requests
from eshttp.operations.requests import read_request_text
from eshttp.operations.scoped import read_environment_file
from eshttp.operations.scoped import read_text_file
from eshttp.operations.scoped import write_text_file
from eshttp.operations.tree import load_workspace_tree
from eshttp.operations.workspaces import default_workspace_roots
from eshttp.operations.workspaces import list_workspaces

__all__ = [
    "default_workspace_roots",
    "discover_collections",
    "list_requests",
    "list_workspaces",
    "load_workspace_tree",
    "merge_environment",
    "parse_env_text",
    "read_environment_file",
    "read_request_text",
    "read_text_file",
    "sanitize_commit_paths",
    "write_text_file",
]
