"""Roost exception hierarchy.

A route that does not match is not an error: ``evaluate()`` reports it
through ``MatchAttempt.matched`` and ``MatchAttempt.debug``. Exceptions are
reserved for configuration mistakes caught when a route is built.
"""


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when library configuration is invalid."""


class RouteConfigurationError(ConfigurationError):
    """Raised when a route template or its constraints cannot be compiled.

    Carries the offending template so a builder registering many routes
    can point at the bad one.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid route {path!r}: {reason}")
