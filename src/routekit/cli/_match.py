"""``routekit match`` — reverse lookup from the command line."""

import argparse
import sys

from routekit.cli._resolve import load_modules
from routekit.registry import find_route


def run_match(args: argparse.Namespace) -> None:
    """Print the name and parsed instance of the route matching ``args.url``.

    Exits with status 1 when no registered route matches.
    """
    try:
        load_modules(args.modules)
    except ModuleNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    match = find_route(args.url, group=args.group)
    if match is None:
        print(f"No route matches {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"{match.name}: {match.route!r}")
