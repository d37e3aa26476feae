"""Roost — URL route templates and request matching.

Compile a path template once, then evaluate incoming requests against it.

Basic usage::

    from roost import RequestAttributes, RouteSpec, evaluate

    route = RouteSpec("/blog/{id}{/year,month}", tokens={"id": r"\\d+"})
    attempt = evaluate(route, "/blog/42/2024", RequestAttributes(method="GET"))
    if attempt:
        attempt.params  # {"id": "42", "year": "2024", "month": None}
    else:
        attempt.debug   # ("not a regex match.",)
"""

__version__ = "0.1.0"
__all__ = [
    "CompiledPattern",
    "ConfigurationError",
    "MatchAttempt",
    "MatchConfig",
    "RequestAttributes",
    "RoostError",
    "RouteConfigurationError",
    "RouteSpec",
    "compile_route",
    "evaluate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name in ("CompiledPattern", "MatchAttempt", "RouteSpec", "compile_route", "evaluate"):
        from roost import routing as _routing

        return getattr(_routing, name)

    if name == "RequestAttributes":
        from roost.http.attributes import RequestAttributes

        return RequestAttributes

    if name == "MatchConfig":
        from roost.config import MatchConfig

        return MatchConfig

    if name in ("ConfigurationError", "RoostError", "RouteConfigurationError"):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
