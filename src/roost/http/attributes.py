"""Immutable request attributes consulted while matching a route.

Routes never see a full request object, only the handful of values the
matching checks need plus an open-ended mapping of CGI-style environment
values for server-variable constraints and custom predicates.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

SECURE_PORT = 443


@dataclass(frozen=True, slots=True)
class RequestAttributes:
    """The attribute bundle a route is evaluated against.

    ``method`` is compared by exact membership, so callers normalize its
    case before building the bundle. ``server`` maps environment names
    (``HTTP_HOST``, ``REMOTE_ADDR``, ...) to string values.
    """

    method: str = "GET"
    https: str | None = None
    port: int | None = None
    accept: str | None = None
    server: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "server", MappingProxyType(dict(self.server)))

    @property
    def is_secure(self) -> bool:
        """True if the HTTPS indicator is ``on`` or the port is 443."""
        if self.https is not None and self.https.lower() == "on":
            return True
        return self.port == SECURE_PORT

    # -- Factories --

    @classmethod
    def from_environ(cls, environ: Mapping[str, Any]) -> RequestAttributes:
        """Create attributes from a WSGI/CGI environ dict.

        Non-string entries (``wsgi.input`` and friends) are left out of
        ``server``.
        """
        return cls(
            method=environ.get("REQUEST_METHOD", "GET"),
            https=environ.get("HTTPS"),
            port=_parse_port(environ.get("SERVER_PORT")),
            accept=environ.get("HTTP_ACCEPT"),
            server={k: v for k, v in environ.items() if isinstance(v, str)},
        )

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> RequestAttributes:
        """Create attributes from an ASGI HTTP scope.

        Headers are exposed in ``server`` under CGI names
        (``accept-language`` -> ``HTTP_ACCEPT_LANGUAGE``); repeated headers
        are joined with ``,``.
        """
        headers: dict[str, str] = {}
        for raw_name, raw_value in scope.get("headers", ()):
            name = raw_name.decode("latin-1").lower()
            value = raw_value.decode("latin-1")
            headers[name] = f"{headers[name]},{value}" if name in headers else value

        method = scope.get("method", "GET")
        scheme = scope.get("scheme", "http")
        server_addr = scope.get("server")
        client_addr = scope.get("client")
        port = int(server_addr[1]) if server_addr and server_addr[1] is not None else None
        https = "on" if scheme in ("https", "wss") else None

        environ: dict[str, str] = {
            "REQUEST_METHOD": method,
            "SCRIPT_NAME": scope.get("root_path", ""),
            "PATH_INFO": scope.get("path", ""),
            "QUERY_STRING": scope.get("query_string", b"").decode("latin-1"),
            "SERVER_PROTOCOL": f"HTTP/{scope.get('http_version', '1.1')}",
        }
        if server_addr:
            environ["SERVER_NAME"] = str(server_addr[0])
            if port is not None:
                environ["SERVER_PORT"] = str(port)
        if client_addr:
            environ["REMOTE_ADDR"] = str(client_addr[0])
        if https:
            environ["HTTPS"] = https
        for name, value in headers.items():
            key = name.upper().replace("-", "_")
            if key not in ("CONTENT_TYPE", "CONTENT_LENGTH"):
                key = f"HTTP_{key}"
            environ[key] = value

        return cls(
            method=method,
            https=https,
            port=port,
            accept=headers.get("accept"),
            server=environ,
        )


def _parse_port(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
