"""urlshort exception hierarchy.

Shared across the loader, handlers, app, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when setup is invalid (unreadable routes file, bad handler)."""


class DecodeError(UrlshortError):
    """Raised when a routes payload cannot be decoded into records.

    The underlying YAML error, when there is one, is chained as
    ``__cause__``. No partial route mapping is ever returned alongside it.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(UrlshortError):
    """An error that maps directly to an HTTP status code.

    Raised by handlers (typically the fallback). The app catches these
    and turns them into a plain-text response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched and the fallback has nothing to serve."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
