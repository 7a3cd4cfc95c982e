"""Factory helpers.

A factory is any zero-argument callable. Classes with a no-argument
constructor already qualify, so most callers pass the class directly.
``zero_factory`` covers the case where only a prototype instance is at hand.
"""

from typing import Any

from wayfinder._internal.types import Factory


def zero_factory(prototype: Any) -> Factory:
    """Return a factory producing fresh, default-constructed instances.

    *prototype* may be a class or an instance; for an instance its type
    is used. The prototype itself is never returned::

        router.route("/", zero_factory(HomePage()))
        router.resolve("/")  # -> a new HomePage
    """
    cls = prototype if isinstance(prototype, type) else type(prototype)

    def factory() -> Any:
        return cls()

    factory.__name__ = f"zero_factory({cls.__qualname__})"
    factory.__qualname__ = factory.__name__
    return factory
