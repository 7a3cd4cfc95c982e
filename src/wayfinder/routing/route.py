"""Route definitions, RouteMatch, and the NOT_FOUND result."""

import re
from dataclasses import dataclass, field
from typing import Final, TypeAlias

from wayfinder._internal.types import Factory


@dataclass(frozen=True, slots=True)
class LiteralRoute:
    """A route keyed by exact string equality with the path."""

    path: str
    factory: Factory
    name: str | None = None

    @property
    def kind(self) -> str:
        return "literal"

    @property
    def key(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class PatternRoute:
    """A route keyed by a compiled regular expression.

    The expression must match the *whole* path; ``regex.fullmatch`` is
    used, so a pattern written without ``^``/``$`` is still anchored.
    """

    pattern: str
    regex: re.Pattern[str] = field(compare=False)
    factory: Factory
    name: str | None = None

    @property
    def kind(self) -> str:
        return "pattern"

    @property
    def key(self) -> str:
        return self.pattern


AnyRoute: TypeAlias = LiteralRoute | PatternRoute


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route lookup. No handler is constructed.

    ``groups`` holds the named capture groups of a pattern match; it is
    empty for literal matches. An optional group that did not take part
    in the match maps to ``None``.
    """

    route: AnyRoute
    groups: dict[str, str | None] = field(default_factory=dict)


class NotFoundType:
    """Type of ``NOT_FOUND``, the result of resolving an unrouted path.

    There is exactly one instance. It is falsy so ``if not page:`` reads
    naturally, but identity (``page is NOT_FOUND``) is the reliable test
    because a factory may legitimately produce a falsy handler.
    """

    __slots__ = ()
    _instance: "NotFoundType | None" = None

    def __new__(cls) -> "NotFoundType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = NotFoundType()
