"""Wayfinder exception hierarchy.

Shared across Router and CLI so every module raises and
catches the same types.

A route miss is *not* an error: ``Router.resolve`` returns ``NOT_FOUND``.
``RouteNotFound`` exists only for callers that opt into ``Router.require``.
``RouterLoadError`` is raised when the CLI cannot load a router target.
"""

from dataclasses import dataclass


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


@dataclass(frozen=True, slots=True)
class InvalidPatternError(WayfinderError):
    """A pattern route could not be compiled.

    Raised synchronously by ``Router.route_pattern``. The router is left
    unchanged. The underlying ``re.error`` is chained as ``__cause__``.
    """

    pattern: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"Invalid route pattern {self.pattern!r}: {self.reason}"
        return f"Invalid route pattern {self.pattern!r}"


class RouteNotFound(WayfinderError):  # noqa: N818
    """No literal or pattern route matches the path.

    Only raised by ``Router.require``.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No route matches {path!r}")


class RouterLoadError(WayfinderError):
    """A ``module[:attr]`` target could not be turned into a Router.

    Raised by the CLI's target resolution for every failure: a malformed
    target, a module that fails to import, a missing attribute, a router
    factory that raises, or an object that is not a Router. The original
    exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot load router from {target!r}: {reason}")
