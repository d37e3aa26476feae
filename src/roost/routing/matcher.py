"""Route evaluation — the ordered, fail-fast predicate chain.

Checks run in a fixed order and stop at the first failure:

1. routable       -> ``not routable.``
2. secure         -> ``not a secure match.``
3. path pattern   -> ``not a regex match.``
4. method         -> ``not a method match.``
5. accept header  -> ``not an accept match.``
6. server values  -> ``not a server match (NAME).``
7. custom         -> ``not a custom match.``

Later checks never run once one has failed, so a rejected attempt always
carries exactly one reason.
"""

import logging
from types import MappingProxyType
from typing import Any

from roost.config import DEFAULT_CONFIG, MatchConfig
from roost.http.attributes import RequestAttributes
from roost.routing.compiler import compile_route
from roost.routing.negotiation import accepts
from roost.routing.params import extract_params
from roost.routing.route import CompiledPattern, MatchAttempt, RouteSpec

logger = logging.getLogger("roost.routing")

NOT_ROUTABLE = "not routable."
NOT_SECURE = "not a secure match."
NOT_REGEX = "not a regex match."
NOT_METHOD = "not a method match."
NOT_ACCEPT = "not an accept match."
NOT_CUSTOM = "not a custom match."


def evaluate(
    route: RouteSpec,
    path: str,
    attrs: RequestAttributes,
    *,
    config: MatchConfig | None = None,
) -> MatchAttempt:
    """Evaluate *path* and *attrs* against *route*.

    Returns a new ``MatchAttempt`` on every call. A non-match is not an
    error; exceptions raised by the route's custom predicate propagate
    unchanged.
    """
    config = config or DEFAULT_CONFIG
    compiled = compile_route(route)
    captures: dict[str, Any] = {}

    reason = (
        _check_routable(route)
        or _check_secure(route, attrs)
        or _check_path(route, compiled, path, config, captures)
        or _check_method(route, attrs)
        or _check_accept(route, attrs)
        or _check_server(compiled, attrs, captures)
        or _check_custom(route, attrs, captures)
    )

    if reason is not None:
        if config.log_rejections:
            logger.debug("Route %r rejected %r: %s", route.name or route.path, path, reason)
        return MatchAttempt(route=route, matched=False, captures=captures, debug=(reason,))

    return MatchAttempt(
        route=route,
        matched=True,
        params=extract_params(route, captures),
        captures=captures,
    )


def _check_routable(route: RouteSpec) -> str | None:
    return None if route.routable else NOT_ROUTABLE


def _check_secure(route: RouteSpec, attrs: RequestAttributes) -> str | None:
    if route.secure is None or route.secure == attrs.is_secure:
        return None
    return NOT_SECURE


def _check_path(
    route: RouteSpec,
    compiled: CompiledPattern,
    path: str,
    config: MatchConfig,
    captures: dict[str, Any],
) -> str | None:
    limit = config.max_path_length
    if limit is not None and len(path) > limit:
        logger.warning(
            "Path of length %d exceeds limit %d for route %r", len(path), limit, route.path
        )
        return NOT_REGEX

    match = compiled.regex.fullmatch(path)
    if match is None:
        return NOT_REGEX
    captures.update(match.groupdict())
    return None


def _check_method(route: RouteSpec, attrs: RequestAttributes) -> str | None:
    if not route.methods or attrs.method in route.methods:
        return None
    return NOT_METHOD


def _check_accept(route: RouteSpec, attrs: RequestAttributes) -> str | None:
    return None if accepts(route.accept, attrs.accept) else NOT_ACCEPT


def _check_server(
    compiled: CompiledPattern,
    attrs: RequestAttributes,
    captures: dict[str, Any],
) -> str | None:
    for name, regex in compiled.server:
        value = attrs.server.get(name, "")
        if not isinstance(value, str):
            value = str(value)
        match = regex.search(value)
        if match is None:
            return f"not a server match ({name})."
        captures[name] = match.group(name)
    return None


def _check_custom(
    route: RouteSpec,
    attrs: RequestAttributes,
    captures: dict[str, Any],
) -> str | None:
    """Run the route's custom predicate.

    The predicate receives a read-only snapshot of the captures. It returns
    either a bool, or ``(bool, captures)`` to replace the captures.
    """
    if route.is_match is None:
        return None

    result = route.is_match(attrs, MappingProxyType(dict(captures)))
    if isinstance(result, tuple):
        result, updated = result
        captures.clear()
        captures.update(updated)
    return None if result else NOT_CUSTOM
