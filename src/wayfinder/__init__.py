"""Wayfinder: a two-tier path router.

Maps a path string to the product of a registered factory. Exact literal
routes always win; pattern routes are tried in registration order and must
match the whole path.

Basic usage::

    from wayfinder import NOT_FOUND, Router

    router = Router()
    router.route("/", HomePage)
    router.route_pattern(r"/user/\\d+", UserPage)

    page = router.resolve("/user/42")
    if page is NOT_FOUND:
        ...
"""

__version__ = "0.1.0"
__all__ = [
    "NOT_FOUND",
    "InvalidPatternError",
    "LiteralRoute",
    "NotFoundType",
    "PatternRoute",
    "RouteMatch",
    "RouteNotFound",
    "RouterLoadError",
    "Router",
    "RouterConfig",
    "WayfinderError",
    "zero_factory",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "NOT_FOUND": "wayfinder.routing.route",
    "InvalidPatternError": "wayfinder.errors",
    "LiteralRoute": "wayfinder.routing.route",
    "NotFoundType": "wayfinder.routing.route",
    "PatternRoute": "wayfinder.routing.route",
    "RouteMatch": "wayfinder.routing.route",
    "RouteNotFound": "wayfinder.errors",
    "RouterLoadError": "wayfinder.errors",
    "Router": "wayfinder.routing.router",
    "RouterConfig": "wayfinder.config",
    "WayfinderError": "wayfinder.errors",
    "zero_factory": "wayfinder.routing.factory",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
