"""Static file resolution for everything that is not the JSON API."""
import os
from collections import namedtuple
from types import MappingProxyType

from werkzeug.exceptions import NotFound as _HTTPNotFound

INDEX_DOCUMENT = "/index.html"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = MappingProxyType({
    ".html": "text/html; charset=UTF-8",
    ".css": "text/css; charset=UTF-8",
    ".js": "text/javascript; charset=UTF-8",
    ".json": "application/json; charset=UTF-8",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
})

StaticFile = namedtuple("StaticFile", ["content", "content_type"])


class NotFound(_HTTPNotFound):
    """Raised for any failure to read a requested file."""


def guess_content_type(path):
    ext = os.path.splitext(path)[1].lower()
    return MIME_TYPES.get(ext, DEFAULT_CONTENT_TYPE)


def join_path(root, url_path):
    """Join a decoded URL path onto the static root.

    The result is normalised, so ``..`` segments collapse the same way a
    plain path join would, but it is not checked to stay inside ``root``.
    A trailing slash survives, so ``/styles.css/`` never opens the file.
    """
    path = os.path.normpath(os.path.join(root, url_path.lstrip("/")))
    if url_path.endswith("/"):
        path += os.sep
    return path


def read_file(path):
    try:
        with open(path, "rb") as f:
            content = f.read()
    except (OSError, ValueError):
        # Missing, unreadable, directories and NUL bytes all look the same to the client
        raise NotFound() from None
    return StaticFile(content, guess_content_type(path))


def resolve(root, url_path):
    return read_file(join_path(root, url_path))
