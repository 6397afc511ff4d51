"""``routekit routes`` — list registered routes.

Imports the given modules and prints every route in a group with its
name, pattern, and route type.
"""

import argparse
import sys

from routekit.cli._resolve import load_modules
from routekit.registry import defined_routes
from routekit.info import route_path


def run_routes(args: argparse.Namespace) -> None:
    """Print a NAME / PATTERN / TYPE table for ``args.group``."""
    try:
        load_modules(args.modules)
    except ModuleNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = defined_routes(args.group)
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (name, pattern, type_name)
    rows: list[tuple[str, str, str]] = []
    for name, types in routes.items():
        for cls in types:
            rows.append((name, route_path(cls), f"{cls.__module__}.{cls.__qualname__}"))

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_name}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("NAME", "PATTERN", "TYPE"))
    sep_len = max_name + max_pattern + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for name, pattern, type_name in rows:
        print(fmt.format(name, pattern, type_name))
