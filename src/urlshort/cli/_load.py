"""Routes-file loading shared by ``urlshort run`` and ``urlshort check``."""

import sys

from urlshort.errors import ConfigurationError, DecodeError
from urlshort.routing.loader import load_routes_file


def load_or_exit(path: str) -> dict[str, str]:
    """Load *path*, or print the error to stderr and exit with code 1."""
    try:
        return load_routes_file(path)
    except (ConfigurationError, DecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
