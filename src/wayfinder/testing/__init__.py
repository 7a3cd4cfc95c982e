"""Test utilities for applications routed with wayfinder::

    from wayfinder.testing import assert_not_routed, assert_routed
"""

from wayfinder.testing.assertions import assert_not_routed, assert_routed

__all__ = [
    "assert_not_routed",
    "assert_routed",
]
