"""Roost CLI — inspect how a route template compiles and matches.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys


def _add_route_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("template", help="Route path template (e.g. /blog/{id}{/year,month})")
    parser.add_argument(
        "--token",
        action="append",
        default=[],
        metavar="NAME=REGEX",
        help="Custom subpattern for a token (repeatable)",
    )
    parser.add_argument("--wildcard", default=None, help="Name of the trailing wildcard param")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — URL route templates and request matching.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- roost compile ----------------------------------------------------
    compile_parser = subparsers.add_parser("compile", help="Print a template's compiled pattern")
    _add_route_arguments(compile_parser)

    # -- roost match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Evaluate a path against a template")
    _add_route_arguments(match_parser)
    match_parser.add_argument("path", help="Request path to evaluate")
    match_parser.add_argument(
        "--method",
        action="append",
        default=[],
        help="Allowed HTTP method for the route (repeatable)",
    )
    match_parser.add_argument(
        "--accept",
        action="append",
        default=[],
        metavar="TYPE/SUBTYPE",
        help="Media type the route produces (repeatable)",
    )
    security = match_parser.add_mutually_exclusive_group()
    security.add_argument("--secure", dest="secure", action="store_const", const=True)
    security.add_argument("--insecure", dest="secure", action="store_const", const=False)
    match_parser.add_argument("--request-method", default="GET", help="Request method")
    match_parser.add_argument("--header-accept", default=None, help="Request Accept header")
    match_parser.add_argument("--https", action="store_true", help="Request arrived over TLS")
    match_parser.add_argument("--port", type=int, default=None, help="Request server port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from roost.cli._commands import run_compile, run_match

    if args.command == "compile":
        run_compile(args)
    elif args.command == "match":
        run_match(args)
