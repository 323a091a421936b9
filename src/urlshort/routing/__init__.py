"""Routing — exact-match redirect tables and the YAML loader that builds them.

Route tables are built once, before serving, and are read-only
afterwards. No locks are needed for concurrent lookups.
"""

from urlshort.routing.loader import (
    decode_records,
    load_routes,
    load_routes_file,
    to_routes,
    yaml_handler,
)
from urlshort.routing.mapping import RedirectMiddleware, map_handler

__all__ = [
    "RedirectMiddleware",
    "decode_records",
    "load_routes",
    "load_routes_file",
    "map_handler",
    "to_routes",
    "yaml_handler",
]
