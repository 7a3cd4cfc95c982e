"""Router targets: ``module[:attr.path]`` strings naming a Router.

A target names a module and, after the colon, a dotted attribute path
inside it (``myapp:router``, ``myapp.site:pages.router``). The attribute
defaults to ``router``. If the attribute is a callable other than a
Router, it is called with no arguments and must return one.

Every failure surfaces as ``RouterLoadError`` so the commands have a
single error to report.
"""

import importlib
import logging

from wayfinder.errors import RouterLoadError
from wayfinder.routing.router import Router

logger = logging.getLogger("wayfinder.cli")

DEFAULT_ATTRIBUTE = "router"


def parse_target(target: str) -> tuple[str, list[str]]:
    """Split *target* into a module path and attribute path parts."""
    module_path, _, attr_path = target.partition(":")
    if not module_path:
        raise RouterLoadError(target, "missing module name before ':'")
    if module_path.startswith("."):
        raise RouterLoadError(target, "relative module names are not supported")

    parts = (attr_path or DEFAULT_ATTRIBUTE).split(".")
    if not all(part.isidentifier() for part in parts):
        raise RouterLoadError(target, f"{attr_path!r} is not a dotted attribute path")
    return module_path, parts


def resolve_router(target: str) -> Router:
    """Load the Router named by *target*.

    Raises ``RouterLoadError`` if the target is malformed, its module does
    not import, an attribute is missing, a router factory raises, or the
    result is not a Router.
    """
    module_path, parts = parse_target(target)

    try:
        obj = importlib.import_module(module_path)
    except Exception as exc:
        raise RouterLoadError(target, f"importing {module_path!r} failed: {exc}") from exc

    for part in parts:
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise RouterLoadError(target, f"no attribute {part!r}") from exc

    if not isinstance(obj, Router) and callable(obj):
        logger.debug("calling router factory %r", target)
        try:
            obj = obj()
        except Exception as exc:
            raise RouterLoadError(target, f"router factory raised {exc!r}") from exc

    if not isinstance(obj, Router):
        raise RouterLoadError(target, f"got {type(obj).__name__}, expected a wayfinder Router")
    return obj
