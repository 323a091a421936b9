"""Development server.

Starts a pounce ASGI server with the live urlshort App object.
Single worker; reload is opt-in.
"""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given ASGI app.

    Pounce's ``run()`` takes an import string, but ``urlshort run``
    builds a live ``App`` from a routes file, so ``pounce.Server`` is
    used directly with the ASGI callable.

    Args:
        app: ASGI callable (urlshort App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes.
        app_path: Optional ``"module:attribute"`` import string that
            pounce re-imports on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload)
    server = Server(config, app, app_path=app_path)
    server.run()
