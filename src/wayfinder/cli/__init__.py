"""Wayfinder CLI: inspect and probe routers.

Entry point registered as ``wayfinder`` in ``pyproject.toml``::

    [project.scripts]
    wayfinder = "wayfinder.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wayfinder`` command."""
    parser = argparse.ArgumentParser(
        prog="wayfinder",
        description="Wayfinder: literal and pattern path routing.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log routing decisions at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wayfinder routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Router target, module[:attr] (attr defaults to router)",
    )

    # -- wayfinder match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route handles a path")
    match_parser.add_argument(
        "router",
        help="Router target, module[:attr] (attr defaults to router)",
    )
    match_parser.add_argument("path", help="Path to look up (matched verbatim)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from wayfinder.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wayfinder.cli._match import run_match

        run_match(args)
