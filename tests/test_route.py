"""Tests for wayfinder.routing.route: route records, RouteMatch, NOT_FOUND."""

import copy
import pickle
import re

import pytest

from wayfinder.routing.route import (
    NOT_FOUND,
    LiteralRoute,
    NotFoundType,
    PatternRoute,
    RouteMatch,
)


def _factory() -> str:
    return "ok"


class TestLiteralRoute:
    def test_creation(self) -> None:
        route = LiteralRoute(path="/users", factory=_factory)
        assert route.path == "/users"
        assert route.factory is _factory
        assert route.name is None
        assert route.kind == "literal"
        assert route.key == "/users"

    def test_frozen(self) -> None:
        route = LiteralRoute(path="/", factory=_factory)
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]


class TestPatternRoute:
    def test_creation(self) -> None:
        regex = re.compile(r"/user/\d+")
        route = PatternRoute(pattern=r"/user/\d+", regex=regex, factory=_factory, name="user")
        assert route.regex is regex
        assert route.kind == "pattern"
        assert route.key == r"/user/\d+"
        assert route.name == "user"

    def test_equality_ignores_compiled_regex(self) -> None:
        a = PatternRoute(pattern="/x", regex=re.compile("/x"), factory=_factory)
        b = PatternRoute(pattern="/x", regex=re.compile("/x", re.IGNORECASE), factory=_factory)
        assert a == b


class TestRouteMatch:
    def test_default_groups_empty(self) -> None:
        route = LiteralRoute(path="/", factory=_factory)
        match = RouteMatch(route=route)
        assert match.route is route
        assert match.groups == {}

    def test_frozen(self) -> None:
        route = LiteralRoute(path="/", factory=_factory)
        match = RouteMatch(route=route)
        with pytest.raises(AttributeError):
            match.route = route  # type: ignore[misc]


class TestNotFound:
    def test_singleton(self) -> None:
        assert NotFoundType() is NOT_FOUND

    def test_falsy(self) -> None:
        assert not NOT_FOUND

    def test_repr(self) -> None:
        assert repr(NOT_FOUND) == "NOT_FOUND"

    def test_identity_survives_copy_and_pickle(self) -> None:
        assert copy.copy(NOT_FOUND) is NOT_FOUND
        assert copy.deepcopy(NOT_FOUND) is NOT_FOUND
        assert pickle.loads(pickle.dumps(NOT_FOUND)) is NOT_FOUND
