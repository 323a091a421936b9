"""Error handling pipeline for urlshort requests.

Maps HTTPError exceptions and unexpected failures to plain-text
responses. Nothing here is reached on the redirect path itself; only
fallbacks raise.
"""

import logging

from urlshort.errors import HTTPError
from urlshort.http.request import Request
from urlshort.http.response import Response

logger = logging.getLogger("urlshort.server")


def handle_http_error(exc: HTTPError, request: Request, *, debug: bool = False) -> Response:
    """Map an HTTPError to a Response carrying its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    response = Response(body=detail, status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    if debug:
        return Response(body=f"Internal Server Error\n\n{type(exc).__name__}: {exc}", status=500)
    return Response(body="Internal Server Error", status=500)
