"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    RedirectMiddleware -- Redirect exact-match paths, pass the rest to next
"""

from urlshort.middleware.protocol import Handler, Middleware, Next
from urlshort.routing.mapping import RedirectMiddleware

__all__ = [
    "Handler",
    "Middleware",
    "Next",
    "RedirectMiddleware",
]
