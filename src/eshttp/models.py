"""Data models for eshttp."""

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self

from eshttp.identity import EntityKind
from eshttp.identity import make_id

DISCOVERY_CONFIG_KEYS = ("entries", "include", "exclude")


@dataclass(frozen=True)
class Workspace:
    """A registered root directory that holds collections."""

    id: str
    name: str
    uri: Path  # Canonical root directory

    @classmethod
    def from_path(cls, path: Path) -> Self:
        """Create a workspace for an already canonical directory."""
        return cls(id=make_id(EntityKind.WORKSPACE, path), name=path.name, uri=path)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {"id": self.id, "name": self.name, "uri": str(self.uri)}

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        return cls(id=data["id"], name=data["name"], uri=Path(data["uri"]))


@dataclass(frozen=True)
class Collection:
    """A directory that directly contains request files."""

    id: str
    workspace_id: str
    name: str  # Workspace name for the root, else path relative to workspace
    uri: Path  # Canonical directory

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "workspaceId": self.workspace_id,
            "name": self.name,
            "uri": str(self.uri),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        return cls(
            id=data["id"],
            workspace_id=data["workspaceId"],
            name=data["name"],
            uri=Path(data["uri"]),
        )


@dataclass(frozen=True)
class RequestFile:
    """A single stored request definition."""

    id: str
    collection_id: str
    title: str  # File name without the .http suffix
    uri: Path  # Canonical file path

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "collectionId": self.collection_id,
            "title": self.title,
            "uri": str(self.uri),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        return cls(
            id=data["id"],
            collection_id=data["collectionId"],
            title=data["title"],
            uri=Path(data["uri"]),
        )


@dataclass(frozen=True)
class DiscoveryConfig:
    """Glob filters read from a directory's discovery config file.

    ``include``/``exclude`` decide which directories are walked (relative to
    the workspace root); ``entries`` decides which request-holding
    directories become collections (relative to the config's directory).
    """

    entries: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "entries": list(self.entries),
            "include": list(self.include),
            "exclude": list(self.exclude),
        }

    @classmethod
    def from_dict(cls, data: object) -> Self:
        """Create from parsed JSON.

        Raises:
            ValueError: If data is not an object or a known key is not a list
                of strings. Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")

        values: dict[str, list[str]] = {}
        for key in DISCOVERY_CONFIG_KEYS:
            patterns = data.get(key, [])
            if not isinstance(patterns, list) or not all(
                isinstance(p, str) for p in patterns
            ):
                raise ValueError(f"'{key}' must be a list of strings")
            values[key] = patterns

        return cls(**values)


@dataclass(frozen=True)
class ActiveConfig:
    """The nearest discovery config in effect, with the directory that defined it."""

    origin_dir: Path
    config: DiscoveryConfig


@dataclass
class CollectionNode:
    """A collection together with its request files."""

    collection: Collection
    requests: list[RequestFile]


@dataclass
class WorkspaceTree:
    """A workspace with every discovered collection and its requests."""

    workspace: Workspace
    collections: list[CollectionNode] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "workspace": self.workspace.to_dict(),
            "collections": [
                {
                    "collection": node.collection.to_dict(),
                    "requests": [r.to_dict() for r in node.requests],
                }
                for node in self.collections
            ],
        }
