"""urlshort — exact-match short-URL redirects over ASGI.

Build a handler from a mapping, or from YAML, and serve it::

    from urlshort import App, map_handler, not_found

    routes = {"/gh": "https://github.com"}
    app = App(map_handler(routes, not_found))

YAML routes are a list of ``{path, url}`` records::

    from urlshort import yaml_handler

    handler = yaml_handler(payload, fallback)   # raises DecodeError on bad YAML
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "DecodeError",
    "HTTPError",
    "Handler",
    "Middleware",
    "Next",
    "NotFound",
    "RedirectMiddleware",
    "Request",
    "Response",
    "UrlshortError",
    "load_routes",
    "load_routes_file",
    "map_handler",
    "not_found",
    "redirect",
    "yaml_handler",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "App": "urlshort.app",
    "not_found": "urlshort.app",
    "AppConfig": "urlshort.config",
    "ConfigurationError": "urlshort.errors",
    "DecodeError": "urlshort.errors",
    "HTTPError": "urlshort.errors",
    "NotFound": "urlshort.errors",
    "UrlshortError": "urlshort.errors",
    "Handler": "urlshort.middleware.protocol",
    "Middleware": "urlshort.middleware.protocol",
    "Next": "urlshort.middleware.protocol",
    "Request": "urlshort.http.request",
    "Response": "urlshort.http.response",
    "redirect": "urlshort.http.response",
    "RedirectMiddleware": "urlshort.routing.mapping",
    "map_handler": "urlshort.routing.mapping",
    "load_routes": "urlshort.routing.loader",
    "load_routes_file": "urlshort.routing.loader",
    "yaml_handler": "urlshort.routing.loader",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` fast (no YAML parser import) while
    providing a flat top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
