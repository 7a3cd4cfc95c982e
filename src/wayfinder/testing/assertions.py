"""Routing assertion helpers for wayfinder tests.

Each assertion checks ``is_routed`` and ``resolve`` together, so a test
also catches the two disagreeing, and produces a clear error message on
failure.
"""

from typing import Any

from wayfinder.routing.route import NOT_FOUND
from wayfinder.routing.router import Router


def assert_routed(router: Router, path: str, expected_type: type | None = None) -> Any:
    """Assert *path* is routed and return the resolved handler.

    With *expected_type*, also checks the handler is exactly that type.
    """
    assert router.is_routed(path), f"Expected {path!r} to be routed by {router!r}"
    handler = router.resolve(path)
    assert handler is not NOT_FOUND, (
        f"is_routed({path!r}) is True but resolve({path!r}) returned NOT_FOUND"
    )
    if expected_type is not None:
        assert type(handler) is expected_type, (
            f"Expected {path!r} to resolve to {expected_type.__name__}, "
            f"got {type(handler).__name__}"
        )
    return handler


def assert_not_routed(router: Router, path: str) -> None:
    """Assert *path* is not routed by any literal or pattern route."""
    found = router.match(path)
    assert found is None, (
        f"Expected {path!r} not to be routed, "
        f"but it matches {found.route.kind} route {found.route.key!r}"
    )
    assert router.resolve(path) is NOT_FOUND, (
        f"is_routed({path!r}) is False but resolve({path!r}) produced a handler"
    )
