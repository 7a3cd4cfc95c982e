"""Two-tier router: exact literal routes, then full-match pattern routes.

Literal routes live in a dict keyed by path and always win. Pattern
routes live in a list and are tried in registration order; the first
whose regex matches the whole path wins.
"""

import logging
import re
from typing import Any

from wayfinder._internal.types import Factory
from wayfinder.config import RouterConfig
from wayfinder.errors import InvalidPatternError, RouteNotFound
from wayfinder.routing.route import (
    NOT_FOUND,
    AnyRoute,
    LiteralRoute,
    NotFoundType,
    PatternRoute,
    RouteMatch,
)

logger = logging.getLogger("wayfinder.routing")


class Router:
    """Path router with literal-over-pattern precedence.

    Usage::

        router = Router()
        router.route("/abc", AbcPage)
        router.route_pattern(r"^/a.*$", APage)

        router.resolve("/abc")   # -> AbcPage()  (literal wins)
        router.resolve("/ab")    # -> APage()
        router.resolve("/zzz")   # -> NOT_FOUND

    Not safe for registration concurrent with lookups; synchronize
    externally if routes are added while other threads resolve.
    """

    __slots__ = ("_config", "_literals", "_patterns")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._literals: dict[str, LiteralRoute] = {}
        self._patterns: list[PatternRoute] = []

    @property
    def config(self) -> RouterConfig:
        return self._config

    # -- Registration ---------------------------------------------------------

    def route(self, path: str, factory: Factory, *, name: str | None = None) -> None:
        """Register *factory* for the exact *path*.

        Any string is a valid key, including ``""``. Registering the same
        path again replaces the previous factory. The factory is stored
        as given and only called by ``resolve``/``require``.
        """
        if path in self._literals:
            logger.debug("replacing literal route %r", path)
        else:
            logger.debug("registered literal route %r", path)
        self._literals[path] = LiteralRoute(path=path, factory=factory, name=name)

    def route_pattern(
        self,
        pattern: str,
        factory: Factory,
        *,
        name: str | None = None,
    ) -> None:
        """Register *factory* for every path the regex *pattern* fully matches.

        Appended after all previously registered patterns. Raises
        ``InvalidPatternError`` if *pattern* does not compile; nothing is
        registered in that case.
        """
        try:
            regex = re.compile(pattern, self._config.pattern_flags)
        except re.error as exc:
            logger.warning("rejected route pattern %r: %s", pattern, exc)
            raise InvalidPatternError(pattern=pattern, reason=str(exc)) from exc

        self._patterns.append(
            PatternRoute(pattern=pattern, regex=regex, factory=factory, name=name)
        )
        logger.debug("registered pattern route %r (#%d)", pattern, len(self._patterns))

    # -- Lookup ---------------------------------------------------------------

    def match(self, path: str) -> RouteMatch | None:
        """Find the route for *path* without constructing a handler.

        Returns ``None`` when nothing matches.
        """
        literal = self._literals.get(path)
        if literal is not None:
            return RouteMatch(route=literal)

        for route in self._patterns:
            m = route.regex.fullmatch(path)
            if m is not None:
                return RouteMatch(route=route, groups=m.groupdict())

        logger.debug("no route matches %r", path)
        return None

    def is_routed(self, path: str) -> bool:
        """Return whether *path* resolves to a route. No factory is called."""
        return self.match(path) is not None

    def resolve(self, path: str) -> Any | NotFoundType:
        """Return a fresh handler for *path*, or ``NOT_FOUND``."""
        found = self.match(path)
        if found is None:
            return NOT_FOUND
        return found.route.factory()

    def require(self, path: str) -> Any:
        """Like ``resolve`` but raises ``RouteNotFound`` on a miss."""
        found = self.match(path)
        if found is None:
            raise RouteNotFound(path)
        return found.route.factory()

    # -- Introspection --------------------------------------------------------

    @property
    def routes(self) -> list[AnyRoute]:
        """All registrations: literals first, then patterns in order."""
        return [*self._literals.values(), *self._patterns]

    def __len__(self) -> int:
        return len(self._literals) + len(self._patterns)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.is_routed(path)

    def __repr__(self) -> str:
        return f"<Router literals={len(self._literals)} patterns={len(self._patterns)}>"
