"""Pick a handler for a raw request target."""
from collections import namedtuple
from urllib.parse import unquote

from .data import API_PATH
from .static_files import INDEX_DOCUMENT

API = "api"
FILE = "file"

Target = namedtuple("Target", ["kind", "path"])


def resolve_target(url):
    """Map a raw, still percent-encoded request target to a Target.

    Only an exact match on the API path goes to the JSON responder, so a
    query string turns it into a (missing) file. The method is not looked at.
    """
    if url == API_PATH:
        return Target(API, None)
    if not url or url == "/":
        return Target(FILE, INDEX_DOCUMENT)
    return Target(FILE, unquote(url))
