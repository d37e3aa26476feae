"""RouteSpec, CompiledPattern, and MatchAttempt frozen dataclasses."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from roost._internal.types import CustomMatch


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """The compiled form of a route template.

    Built once per ``RouteSpec`` by ``compile_route()`` and never changed.
    """

    pattern: str
    regex: re.Pattern[str]
    names: tuple[str, ...]
    server: tuple[tuple[str, re.Pattern[str]], ...] = ()


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A frozen route definition.

    Created once by a builder; the template is compiled in ``__post_init__``
    so a malformed route fails at construction, not at request time::

        route = RouteSpec(
            "/blog/{id}{/year,month}",
            tokens={"id": r"\\d+"},
            methods=frozenset({"GET", "HEAD"}),
        )

    ``values`` holds the parameter defaults. After compilation it also
    contains a ``None`` default for every template token that had none.
    ``tokens``, ``values`` and ``server`` are read-only views; equality and
    hashing ignore them and the custom predicate.
    """

    path: str
    tokens: Mapping[str, str] = field(default_factory=dict, compare=False)
    values: Mapping[str, Any] = field(default_factory=dict, compare=False)
    wildcard: str | None = None
    secure: bool | None = None
    methods: frozenset[str] = frozenset()
    accept: tuple[str, ...] = ()
    server: Mapping[str, str] = field(default_factory=dict, compare=False)
    is_match: CustomMatch | None = field(default=None, compare=False)
    routable: bool = True
    name: str | None = None

    # Memoized by compile_route(); written exactly once
    compiled: CompiledPattern | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        from roost.routing.compiler import compile_route

        object.__setattr__(self, "tokens", MappingProxyType(dict(self.tokens)))
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "methods", frozenset(self.methods))
        object.__setattr__(self, "accept", tuple(self.accept))
        object.__setattr__(self, "server", MappingProxyType(dict(self.server)))
        compile_route(self)

    @property
    def pattern(self) -> str:
        """The anchored regular expression for this route's template."""
        from roost.routing.compiler import compile_route

        return compile_route(self).pattern


@dataclass(frozen=True, slots=True)
class MatchAttempt:
    """The outcome of evaluating one path against one route.

    A fresh instance is returned by every ``evaluate()`` call. ``params`` is
    only populated on success; ``debug`` holds the single reason for the
    first failing check on rejection.
    """

    route: RouteSpec
    matched: bool
    params: dict[str, Any] = field(default_factory=dict)
    captures: dict[str, Any] = field(default_factory=dict)
    debug: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.matched
