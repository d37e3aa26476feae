"""Route template compilation.

Turns a template like ``/blog/{id}{/year,month}`` into an anchored regular
expression with named groups::

    ^/blog/(?P<id>[^/]+)(/(?P<year>[^/]+)(/(?P<month>[^/]+))?)?$

Template syntax:

- ``{name}`` — a token. Its body is ``tokens[name]`` when registered,
  otherwise one or more characters other than ``/``.
- ``{/a,b,c}`` — an optional group (at most one per template). ``a``,
  ``a/b`` and ``a/b/c`` are accepted; a later name never appears without
  the earlier ones.
- A configured wildcard appends an optional catch-all for the rest of the
  path.

Text outside placeholders is used as regex source verbatim.
"""

from __future__ import annotations

import logging
import re
import threading
from types import MappingProxyType
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from roost.errors import RouteConfigurationError
from roost.routing.route import CompiledPattern

if TYPE_CHECKING:
    from roost.routing.route import RouteSpec

logger = logging.getLogger("roost.routing")

# Body used for tokens without a custom subpattern
DEFAULT_SUBPATTERN = r"[^/]+"

_NAME = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")
_OPTIONAL = re.compile(r"\{/([^{}]+)\}")
_TOKEN = re.compile(r"\{([A-Za-z][A-Za-z0-9_]*)\}")

# Guards the one-time write of RouteSpec.compiled
_compile_lock = threading.Lock()


def compile_route(spec: RouteSpec) -> CompiledPattern:
    """Compile *spec*'s template, memoizing the result on the spec.

    Returns the existing ``CompiledPattern`` unchanged when the spec has
    already been compiled. Raises ``RouteConfigurationError`` for a
    malformed template or an invalid token, server or accept constraint.
    """
    if spec.compiled is not None:
        return spec.compiled

    with _compile_lock:
        if spec.compiled is not None:
            return spec.compiled
        compiled, values = _build(spec)
        object.__setattr__(spec, "values", MappingProxyType(values))
        object.__setattr__(spec, "compiled", compiled)

    logger.debug("Compiled route %r to %s", spec.path, compiled.pattern)
    return compiled


def _build(spec: RouteSpec) -> tuple[CompiledPattern, dict[str, Any]]:
    _validate_placeholders(spec.path)
    _validate_accept(spec.path, spec.accept)

    pattern = expand_optional(spec.path)
    pattern, names = expand_tokens(pattern, spec.tokens)
    if spec.wildcard:
        if not _NAME.fullmatch(spec.wildcard):
            raise RouteConfigurationError(spec.path, f"invalid wildcard name {spec.wildcard!r}")
        pattern = expand_wildcard(pattern, spec.wildcard)
    pattern = f"^{pattern}$"

    values = dict(spec.values)
    for name in names:
        values.setdefault(name, None)

    compiled = CompiledPattern(
        pattern=pattern,
        regex=_compile(spec.path, pattern),
        names=tuple(names),
        server=tuple(
            (name, _compile_server(spec.path, name, regex)) for name, regex in spec.server.items()
        ),
    )
    return compiled, values


def _validate_placeholders(path: str) -> None:
    """Reject placeholders that are neither a token nor an optional group."""
    optional_groups = 0
    for match in _PLACEHOLDER.finditer(path):
        inner = match.group(1)
        if inner.startswith("/"):
            optional_groups += 1
            names = inner[1:].split(",")
            if not inner[1:] or not all(_NAME.fullmatch(name) for name in names):
                raise RouteConfigurationError(path, f"malformed optional group {match.group(0)!r}")
        elif not _NAME.fullmatch(inner):
            raise RouteConfigurationError(path, f"invalid token name {inner!r}")
    if optional_groups > 1:
        raise RouteConfigurationError(path, "only one optional group is allowed")


def _validate_accept(path: str, accept: tuple[str, ...]) -> None:
    for media_type in accept:
        main, sep, sub = media_type.partition("/")
        if not sep or not main or not sub or "/" in sub:
            raise RouteConfigurationError(path, f"invalid media type {media_type!r}")


def expand_optional(pattern: str) -> str:
    """Expand ``{/a,b}`` into nested optional groups of ``{name}`` tokens."""
    match = _OPTIONAL.search(pattern)
    if match is None:
        return pattern

    names = match.group(1).split(",")
    head = ""
    # A leading optional group supplies the first separator itself
    if pattern.startswith("{/"):
        head = f"/({{{names.pop(0)}}})?"
    body = "".join(f"(/{{{name}}}" for name in names) + ")?" * len(names)
    return pattern.replace(match.group(0), head + body, 1)


def expand_tokens(pattern: str, tokens: Mapping[str, str]) -> tuple[str, list[str]]:
    """Replace each ``{name}`` with a named group.

    Returns the new pattern and the token names in template order.
    """
    names: list[str] = []

    def subpattern(match: re.Match[str]) -> str:
        name = match.group(1)
        names.append(name)
        body = tokens.get(name)
        if body is None:
            body = DEFAULT_SUBPATTERN
        return f"(?P<{name}>{body})"

    return _TOKEN.sub(subpattern, pattern), names


def expand_wildcard(pattern: str, wildcard: str) -> str:
    """Append an optional catch-all group named *wildcard*."""
    return pattern.rstrip("/") + f"(/(?P<{wildcard}>.*))?"


def _compile(path: str, pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise RouteConfigurationError(path, f"pattern {pattern!r} does not compile: {exc}") from exc


def _compile_server(path: str, name: str, regex: str) -> re.Pattern[str]:
    if not _NAME.fullmatch(name):
        raise RouteConfigurationError(path, f"invalid server variable name {name!r}")
    return _compile(path, f"(?P<{name}>{regex})")
