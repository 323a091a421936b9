"""urlshort CLI — serve or check a YAML routes file.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import logging
import sys

from urlshort.config import AppConfig


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort — redirect short paths to full URLs.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: info)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve redirects from a routes file")
    run_parser.add_argument("routes", help="Path to a YAML routes file")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when files change",
    )
    run_parser.add_argument(
        "--status",
        type=int,
        default=None,
        choices=[301, 302, 307, 308],
        help="Redirect status code (default: 301)",
    )

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate and list a routes file")
    check_parser.add_argument("routes", help="Path to a YAML routes file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=(args.log_level or AppConfig().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        from urlshort.cli._run import run_server

        run_server(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
