"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. ``redirect()`` builds the
one response the redirect handler ever produces itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from urllib.parse import quote

PLAIN_TEXT = "text/plain; charset=utf-8"

# Printable ASCII and space pass through ``redirect()`` untouched.
_LOCATION_SAFE = "".join(chr(c) for c in range(0x20, 0x7F))


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = PLAIN_TEXT
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def location(self) -> str | None:
        """The ``Location`` header, if this is a redirect."""
        return self.header("Location")

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status < 400 and self.location is not None

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


def redirect(url: str, status: int = 301) -> Response:
    """An empty-bodied redirect to *url*.

    Printable ASCII is sent verbatim in ``Location``. Anything else
    (non-ASCII text in an IRI, control characters) is percent-encoded
    as UTF-8 so the header stays latin-1 safe. Nothing is validated.
    """
    return Response(status=status).with_header("Location", quote(url, safe=_LOCATION_SAFE))
