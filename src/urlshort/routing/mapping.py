"""Exact-match redirect handler.

``map_handler`` closes over a read-only copy of a path -> URL table.
A hit answers with a redirect; a miss hands the request, untouched,
to the fallback.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from urlshort.http.request import Request
from urlshort.http.response import Response, redirect
from urlshort.middleware.protocol import Handler, Next

logger = logging.getLogger("urlshort.routing")


async def _dispatch(
    table: Mapping[str, str],
    request: Request,
    fallback: Handler,
    status: int,
) -> Response:
    url = table.get(request.path)
    if url is None:
        return await fallback(request)
    logger.debug("%d %s -> %s", status, request.path, url)
    return redirect(url, status)


def map_handler(
    routes: Mapping[str, str],
    fallback: Handler,
    *,
    status: int = 301,
) -> Handler:
    """Return a handler that redirects paths found in *routes*.

    Lookup is exact string equality on ``request.path``: no case
    folding, no trailing-slash handling, no query stripping beyond what
    the request already did. Paths not in *routes* are passed to
    *fallback*, which owns the response.

    *routes* is copied, so mutating the caller's dict afterwards has no
    effect on the returned handler.

    Args:
        routes: Path to destination URL. May be empty.
        fallback: Handler for every path without a route.
        status: Redirect status code (301 Moved Permanently by default).
    """
    table: Mapping[str, str] = MappingProxyType(dict(routes))

    async def handle(request: Request) -> Response:
        return await _dispatch(table, request, fallback, status)

    return handle


class RedirectMiddleware:
    """``map_handler`` as middleware: ``next`` is the fallback.

    Usage::

        app = App(not_found, middleware=[RedirectMiddleware(routes)])
    """

    __slots__ = ("routes", "status")

    def __init__(self, routes: Mapping[str, str], *, status: int = 301) -> None:
        self.routes: Mapping[str, str] = MappingProxyType(dict(routes))
        self.status = status

    async def __call__(self, request: Request, next: Next) -> Response:
        return await _dispatch(self.routes, request, next, self.status)
