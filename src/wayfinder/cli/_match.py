"""``wayfinder match``: report which route a path resolves to.

Uses ``Router.match`` so no handler is constructed. Exits 0 when the
path is routed and 1 when it is not.
"""

import argparse
import logging
import sys

from wayfinder.cli._resolve import resolve_router
from wayfinder.cli._routes import factory_label
from wayfinder.errors import RouterLoadError

logger = logging.getLogger("wayfinder.cli")


def run_match(args: argparse.Namespace) -> None:
    """Print the route matching ``args.path`` for the resolved Router."""
    try:
        router = resolve_router(args.router)
    except RouterLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.debug("matching %r against %r", args.path, router)
    found = router.match(args.path)
    if found is None:
        print(f"{args.path!r} is not routed.")
        raise SystemExit(1)

    route = found.route
    print(f"{args.path!r} -> {route.kind} route {route.key!r}")
    print(f"factory: {factory_label(route.factory, route.name)}")
    for group, value in found.groups.items():
        print(f"  {group} = {value!r}")
