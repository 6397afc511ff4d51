"""routekit CLI — inspect registered routes.

Entry point registered as ``routekit`` in ``pyproject.toml``::

    [project.scripts]
    routekit = "routekit.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routekit`` command."""
    parser = argparse.ArgumentParser(
        prog="routekit",
        description="routekit — typed routes to relative URLs and back.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routekit routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "modules",
        nargs="+",
        help="Modules that define routes (e.g. myapp.routes)",
    )
    routes_parser.add_argument("--group", default="", help="Route group (default: '')")

    # -- routekit match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Find the route matching a URL")
    match_parser.add_argument("url", help="Relative URL (e.g. /posts/hello?page=2)")
    match_parser.add_argument(
        "modules",
        nargs="+",
        help="Modules that define routes (e.g. myapp.routes)",
    )
    match_parser.add_argument("--group", default="", help="Route group (default: '')")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routekit.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from routekit.cli._match import run_match

        run_match(args)
