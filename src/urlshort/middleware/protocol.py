"""Handler and middleware protocols.

A handler is any async callable taking a ``Request`` and returning a
``Response``. A fallback is just a handler. A middleware is any callable
matching::

    async def my_mw(request: Request, next: Next) -> Response: ...

No base class required. The shape is checked, not the lineage.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from urlshort.http.request import Request
from urlshort.http.response import Response

# A request handler; also the type of every fallback
Handler: TypeAlias = Callable[[Request], Awaitable[Response]]

# The next handler in a middleware chain
Next: TypeAlias = Handler


class Middleware(Protocol):
    """Protocol for urlshort middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def server_header(request: Request, next: Next) -> Response:
            response = await next(request)
            return response.with_header("Server", "urlshort")

        # Class middleware
        class RedirectMiddleware:
            async def __call__(self, request: Request, next: Next) -> Response:
                ...
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...
