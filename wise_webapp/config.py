"""Runtime settings read from the environment (and .env, if present)."""
import os
import re
from collections import namedtuple

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_STATIC_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

Settings = namedtuple("Settings", ["host", "port", "static_root"])


def parse_port(value, default=DEFAULT_PORT):
    """Read a port the way parseInt(value, 10) would.

    Trailing junk after the digits is ignored ("8080abc" is 8080). Anything
    without leading digits, zero, or outside 1-65535 gives ``default``.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    port = int(match.group(1))
    if not 0 < port < 65536:
        return default
    return port


def load_settings(environ=None):
    if environ is None:
        load_dotenv()
        environ = os.environ
    return Settings(
        host=environ.get("HOST") or DEFAULT_HOST,
        port=parse_port(environ.get("PORT")),
        static_root=environ.get("STATIC_ROOT") or DEFAULT_STATIC_ROOT,
    )
