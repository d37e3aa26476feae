"""``roost compile`` and ``roost match`` implementations."""

import argparse
import json
import sys

from roost.errors import RouteConfigurationError
from roost.http.attributes import RequestAttributes
from roost.routing.matcher import evaluate
from roost.routing.route import RouteSpec


def _parse_tokens(pairs: list[str]) -> dict[str, str]:
    tokens: dict[str, str] = {}
    for pair in pairs:
        name, sep, regex = pair.partition("=")
        if not sep or not name:
            print(f"Error: --token expects NAME=REGEX, got {pair!r}", file=sys.stderr)
            sys.exit(2)
        tokens[name] = regex
    return tokens


def _build_route(args: argparse.Namespace, **options: object) -> RouteSpec:
    try:
        return RouteSpec(
            args.template,
            tokens=_parse_tokens(args.token),
            wildcard=args.wildcard,
            **options,  # type: ignore[arg-type]
        )
    except RouteConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


def run_compile(args: argparse.Namespace) -> None:
    """Print the anchored pattern for a template."""
    route = _build_route(args)
    print(route.pattern)


def run_match(args: argparse.Namespace) -> None:
    """Evaluate a path and print params (exit 0) or the rejection (exit 1)."""
    route = _build_route(
        args,
        methods=frozenset(args.method),
        accept=tuple(args.accept),
        secure=args.secure,
    )
    attrs = RequestAttributes(
        method=args.request_method,
        https="on" if args.https else None,
        port=args.port,
        accept=args.header_accept,
    )
    attempt = evaluate(route, args.path, attrs)
    if attempt:
        print(json.dumps(attempt.params, indent=2, sort_keys=True))
        sys.exit(0)

    for reason in attempt.debug:
        print(reason)
    sys.exit(1)
