"""urlshort application class.

Wraps a single request handler (usually built by ``map_handler`` or
``yaml_handler``) in an ASGI 3.0 callable. Middleware and lifecycle
hooks are registered during setup; the chain is composed once, on the
first call.
"""

import inspect
import threading
from collections.abc import Callable, Sequence
from typing import Any

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.config import AppConfig
from urlshort.errors import ConfigurationError, HTTPError, NotFound
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.middleware.protocol import Handler, Middleware, Next
from urlshort.server.errors import handle_http_error, handle_internal_error
from urlshort.server.sender import send_response


async def not_found(request: Request) -> Response:
    """Default fallback: every unmatched path is a 404."""
    raise NotFound(f"No redirect for {request.path}")


class App:
    """The urlshort application.

    Mutable during setup (middleware, startup/shutdown hooks).
    Frozen on the first ASGI call.

    Usage::

        routes = load_routes_file("routes.yaml")
        app = App(map_handler(routes, not_found))
    """

    __slots__ = (
        "_chain",
        "_freeze_lock",
        "_frozen",
        "_handler",
        "_middleware_list",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(
        self,
        handler: Handler = not_found,
        config: AppConfig | None = None,
        *,
        middleware: Sequence[Middleware] = (),
    ) -> None:
        if not callable(handler):
            msg = f"App handler must be callable, got {type(handler).__name__}"
            raise ConfigurationError(msg)
        self.config: AppConfig = config or AppConfig()
        self._handler: Handler = handler
        self._middleware_list: list[Middleware] = list(middleware)
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._chain: Handler | None = None
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Setup --

    def add_middleware(self, middleware: Middleware) -> None:
        """Append a middleware; the first added is the outermost."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async hook for ASGI lifespan startup."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async hook for ASGI lifespan shutdown."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with the pounce development server."""
        from urlshort.server.dev import run_dev_server

        self._ensure_frozen()
        run_dev_server(
            self,
            self.config.host if host is None else host,
            self.config.port if port is None else port,
            reload=self.config.reload,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point. Non-HTTP, non-lifespan scopes are ignored."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        self._ensure_frozen()
        assert self._chain is not None

        request = Request.from_asgi(scope, receive)
        try:
            response = await self._chain(request)
        except HTTPError as exc:
            response = handle_http_error(exc, request, debug=self.config.debug)
        except Exception as exc:
            response = handle_internal_error(exc, request, debug=self.config.debug)

        await send_response(response, send, head=request.method == "HEAD")

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol, calling registered hooks."""
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await _run_hooks(self._startup_hooks)
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await _run_hooks(self._shutdown_hooks)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Compose the middleware chain exactly once, even under threads."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._chain = _compose(self._handler, self._middleware_list)
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify the app after it has started serving requests."
            raise ConfigurationError(msg)


def _compose(handler: Handler, middleware: Sequence[Middleware]) -> Handler:
    """Wrap *handler* so that ``middleware[0]`` runs first."""
    chain = handler
    for mw in reversed(middleware):

        async def link(request: Request, _mw: Middleware = mw, _next: Next = chain) -> Response:
            return await _mw(request, _next)

        chain = link
    return chain


async def _run_hooks(hooks: Sequence[Callable[..., Any]]) -> None:
    for hook in hooks:
        result = hook()
        if inspect.isawaitable(result):
            await result
