"""Shared type aliases used across roost modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Raw named captures gathered while evaluating a route
Captures: TypeAlias = Mapping[str, str | None]

# Custom predicate — receives (attrs, read-only captures) and returns either
# a bool or a (bool, updated_captures) pair
CustomMatch: TypeAlias = Callable[[Any, Captures], "bool | tuple[bool, Captures]"]
