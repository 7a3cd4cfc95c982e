"""``wayfinder routes``: list registered routes.

Resolves an import string to a Router and prints all registrations
with kind, route key, and factory name, in lookup order.
"""

import argparse
import sys

from wayfinder.cli._resolve import resolve_router
from wayfinder.errors import RouterLoadError


def factory_label(factory: object, name: str | None = None) -> str:
    """Human-readable label for a factory, with the route name if any."""
    label = getattr(factory, "__qualname__", None) or repr(factory)
    if name:
        label = f"{label} ({name})"
    return label


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a wayfinder Router.

    Literal routes come first, then pattern routes in the order they are
    tried.
    """
    try:
        router = resolve_router(args.router)
    except RouterLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [
        (route.kind, repr(route.key), factory_label(route.factory, route.name))
        for route in routes
    ]

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_key = max(max(len(r[1]) for r in rows), 5)  # "ROUTE" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_key}}}  {{}}"
    print(fmt.format("KIND", "ROUTE", "FACTORY"))
    sep_len = max_kind + max_key + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for kind, key, label in rows:
        print(fmt.format(kind, key, label))
