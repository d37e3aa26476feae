"""Route parameter extraction.

Merges a route's default values with the raw captures of a successful
match, percent-decoding captured text and splitting the wildcard tail.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote

if TYPE_CHECKING:
    from roost.routing.route import RouteSpec


def extract_params(spec: "RouteSpec", captures: Mapping[Any, Any]) -> dict[str, Any]:
    """Build the final parameter mapping for a matched route.

    Captures that are ``None`` or exactly ``""`` count as absent, so an
    optional trailing token that matched nothing keeps its default instead
    of appearing blank.
    """
    params = dict(spec.values)
    for key, value in captures.items():
        if not isinstance(key, str) or value is None or value == "":
            continue
        params[key] = unquote(value) if isinstance(value, str) else value

    if spec.wildcard:
        params[spec.wildcard] = split_wildcard(params.get(spec.wildcard))
    return params


def split_wildcard(value: Any) -> list[str]:
    """Split a wildcard capture into percent-decoded path segments.

    ``"a/b%20c"`` -> ``["a", "b c"]``; an empty or missing value -> ``[]``.
    """
    if not value:
        return []
    if not isinstance(value, str):
        return list(value)
    return [unquote(segment) for segment in value.split("/")]
