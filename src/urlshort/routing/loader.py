"""YAML route loading.

Two stages, kept separate so each can be tested alone::

    records = decode_records(payload)   # YAML -> list of {path, url} dicts
    routes = to_routes(records)         # fold in order, last write wins

Expected document shape::

    - path: /some-path
      url: https://www.some-url.com/demo

``load_routes`` runs both stages; ``yaml_handler`` goes one step further
and builds the redirect handler.
"""

import logging
from collections.abc import Iterable, Mapping
from os import PathLike
from pathlib import Path
from typing import Any

import yaml

from urlshort.errors import ConfigurationError, DecodeError
from urlshort.middleware.protocol import Handler
from urlshort.routing.mapping import map_handler

logger = logging.getLogger("urlshort.routing")

_ROUTE_FIELDS = ("path", "url")


def decode_records(payload: bytes | str) -> list[dict[str, str]]:
    """Parse *payload* into an ordered list of route records.

    An empty document decodes to ``[]``. Keys other than ``path`` and
    ``url`` are dropped; a record may omit either of those two.

    Raises:
        DecodeError: If the payload is not valid YAML, is not a list,
            holds a non-mapping item, or has a non-string ``path`` or
            ``url``.
    """
    try:
        data: Any = yaml.safe_load(payload)
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in routes payload: {exc}"
        raise DecodeError(msg) from exc

    if data is None:
        return []
    if not isinstance(data, list):
        msg = f"Routes payload must be a list of records, got {type(data).__name__}"
        raise DecodeError(msg)

    records: list[dict[str, str]] = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            msg = f"Route record #{index} must be a mapping, got {type(item).__name__}"
            raise DecodeError(msg)
        record: dict[str, str] = {}
        for name in _ROUTE_FIELDS:
            if name not in item:
                continue
            value = item[name]
            if not isinstance(value, str):
                msg = (
                    f"Route record #{index}: {name!r} must be a string, "
                    f"got {type(value).__name__}"
                )
                raise DecodeError(msg)
            record[name] = value
        records.append(record)
    return records


def to_routes(records: Iterable[Mapping[str, str]]) -> dict[str, str]:
    """Fold records into a path -> URL mapping.

    Records are applied in order, so a repeated ``path`` keeps the last
    ``url``. A missing ``path`` or ``url`` counts as ``""``; in particular
    a record without ``path`` produces a route for the empty path. That
    is kept on purpose and logged as a warning.
    """
    routes: dict[str, str] = {}
    for index, record in enumerate(records):
        missing = [name for name in _ROUTE_FIELDS if name not in record]
        if missing:
            logger.warning(
                "Route record #%d has no %s; using empty string",
                index,
                " or ".join(missing),
            )
        routes[record.get("path", "")] = record.get("url", "")
    return routes


def load_routes(payload: bytes | str) -> dict[str, str]:
    """Decode *payload* and fold it into a route mapping.

    Raises:
        DecodeError: See ``decode_records``. Nothing is returned on failure.
    """
    return to_routes(decode_records(payload))


def load_routes_file(path: str | PathLike[str]) -> dict[str, str]:
    """Read a YAML routes file and return its route mapping.

    Raises:
        ConfigurationError: If the file cannot be read.
        DecodeError: If its contents cannot be decoded.
    """
    try:
        payload = Path(path).read_bytes()
    except OSError as exc:
        msg = f"Cannot read routes file {str(path)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    return load_routes(payload)


def yaml_handler(payload: bytes | str, fallback: Handler, *, status: int = 301) -> Handler:
    """Build a redirect handler from a YAML payload.

    Decoding happens up front: a ``DecodeError`` propagates and no
    handler is built. On success this is
    ``map_handler(load_routes(payload), fallback)``.
    """
    routes = load_routes(payload)
    return map_handler(routes, fallback, status=status)
