"""``urlshort run`` — serve a routes file.

Loads the YAML routes, wraps them in a redirect handler whose fallback
answers 404, and starts the pounce development server.
"""

import argparse
import logging
from dataclasses import replace

from urlshort.app import App, not_found
from urlshort.cli._load import load_or_exit
from urlshort.config import AppConfig
from urlshort.routing.mapping import map_handler

logger = logging.getLogger("urlshort.server")


def build_app(args: argparse.Namespace, config: AppConfig | None = None) -> App:
    """Build the App ``urlshort run`` would serve, without serving it.

    CLI flags override *config*.
    """
    config = config or AppConfig()
    overrides = {
        "host": args.host,
        "port": args.port,
        "redirect_status": args.status,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    if args.reload:
        config = replace(config, reload=True)

    routes = load_or_exit(args.routes)
    app = App(map_handler(routes, not_found, status=config.redirect_status), config)

    @app.on_startup
    def _announce() -> None:
        logger.info("Serving %d redirect(s) from %s", len(routes), args.routes)

    return app


def run_server(args: argparse.Namespace) -> None:
    """Start the server for ``args.routes``."""
    app = build_app(args)
    app.run()
