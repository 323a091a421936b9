"""``urlshort check`` — decode a routes file and list what it maps.

Prints one ``path -> url`` line per route, sorted by path. Exits with
code 1 if the file cannot be read or decoded.
"""

import argparse

from urlshort.cli._load import load_or_exit


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.routes`` and print its route table."""
    routes = load_or_exit(args.routes)

    if not routes:
        print(f"{args.routes}: no routes")
        return

    labels = {path: path or '""' for path in routes}
    width = max(len(label) for label in labels.values())
    for path in sorted(routes):
        print(f"{labels[path]:<{width}} -> {routes[path]}")

    if "" in routes:
        print("warning: a record without 'path' maps the empty path")
    print(f"{len(routes)} route(s)")
