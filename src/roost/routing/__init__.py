"""Routing — single-route template compilation and request matching.

Templates are compiled once when a ``RouteSpec`` is built; ``evaluate()``
then checks a path and request attributes against it, returning a fresh
``MatchAttempt`` each time.
"""

from roost.routing.compiler import compile_route
from roost.routing.matcher import evaluate
from roost.routing.route import CompiledPattern, MatchAttempt, RouteSpec

__all__ = ["CompiledPattern", "MatchAttempt", "RouteSpec", "compile_route", "evaluate"]
