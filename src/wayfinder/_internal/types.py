"""Shared type aliases used across wayfinder modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route factory, a zero-argument callable producing a fresh handler per call
Factory: TypeAlias = Callable[[], Any]
