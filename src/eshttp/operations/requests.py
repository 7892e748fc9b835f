"""Request file listing and reading."""

from eshttp.exceptions import InvalidInputError
from eshttp.exceptions import SecurityViolationError
from eshttp.files.discover import list_request_paths
from eshttp.files.sandbox import canonicalize_root
from eshttp.identity import EntityKind
from eshttp.identity import make_id
from eshttp.identity import request_title
from eshttp.models import Collection
from eshttp.models import RequestFile
from eshttp.operations.scoped import read_text_file


def list_requests(collection: Collection) -> list[RequestFile]:
    """List the request files directly inside a collection.

    Args:
        collection: Collection to list

    Returns:
        Request files sorted by title

    Raises:
        InvalidInputError: If the collection directory is missing or not a
            directory
        FilesystemError: If the directory cannot be read
    """
    directory = canonicalize_root(collection.uri)

    requests = [
        RequestFile(
            id=make_id(EntityKind.REQUEST, path),
            collection_id=collection.id,
            title=request_title(path.name),
            uri=path,
        )
        for path in list_request_paths(directory)
    ]

    return sorted(requests, key=lambda r: r.title)


def read_request_text(collection: Collection, request: RequestFile) -> str:
    """Read a request file's text.

    The request must sit directly inside the collection directory.

    Raises:
        SecurityViolationError: If the request is not inside the collection
        InvalidInputError: If the request file no longer exists
        FilesystemError: If the file cannot be read
    """
    directory = canonicalize_root(collection.uri)
    if request.uri.parent != directory:
        raise SecurityViolationError(
            request.uri,
            directory,
            f"Request {request.uri} is not in collection {directory}",
        )

    text = read_text_file(directory, request.uri.name)
    if text is None:
        raise InvalidInputError(f"Request file does not exist: {request.uri}")
    return text
