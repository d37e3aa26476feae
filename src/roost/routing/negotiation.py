"""Accept-header content negotiation for route matching.

A route lists the media types it can produce. The request's Accept header
is searched for each of them, honoring ``type/*`` ranges and a one-decimal
quality value. Only the literal quality ``0.0`` refuses a type; any other
spelling of zero is still treated as acceptable.
"""

import re
from collections.abc import Sequence
from functools import lru_cache

ANY_MEDIA_RANGE = "*/*"
REFUSED_QUALITY = "0.0"

_WHITESPACE = re.compile(r"\s+")


def accepts(media_types: Sequence[str], header: str | None) -> bool:
    """True if *header* accepts at least one of *media_types*.

    An empty *media_types* or a missing header accepts everything.
    """
    if not media_types or header is None:
        return True

    header = _WHITESPACE.sub("", header)
    if ANY_MEDIA_RANGE in header:
        return True

    return any(accepts_media_type(media_type, header) for media_type in media_types)


def accepts_media_type(media_type: str, header: str) -> bool:
    """Check one ``type/subtype`` against a whitespace-free Accept header."""
    match = _media_type_regex(media_type).search(header)
    if match is None:
        return False
    quality = match.group("quality")
    return quality is None or quality != REFUSED_QUALITY


@lru_cache(maxsize=256)
def _media_type_regex(media_type: str) -> re.Pattern[str]:
    main, _, sub = media_type.partition("/")
    return re.compile(rf"{re.escape(main)}/({re.escape(sub)}|\*)(;q=(?P<quality>[0-9]\.[0-9]))?")
