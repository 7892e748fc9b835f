"""Full workspace snapshots."""

from collections.abc import Iterable

from eshttp.models import CollectionNode
from eshttp.models import Workspace
from eshttp.models import WorkspaceTree
from eshttp.operations.discover import discover_collections
from eshttp.operations.requests import list_requests


def load_workspace_tree(workspaces: Iterable[Workspace]) -> list[WorkspaceTree]:
    """Discover collections and list requests for each workspace."""
    trees = []
    for workspace in workspaces:
        tree = WorkspaceTree(workspace=workspace)
        for collection in discover_collections(workspace):
            tree.collections.append(
                CollectionNode(collection=collection, requests=list_requests(collection))
            )
        trees.append(tree)

    return trees
