"""routekit — typed routes to relative URLs and back.

A route is a dataclass whose fields describe the path segments and
query parameters of a URL.  routekit serializes instances into relative
URLs and parses URLs back into instances.

Basic usage::

    from dataclasses import dataclass
    from routekit import from_url, path, query, route, to_relative_url

    @route("post", "/posts/{slug}")
    @dataclass
    class Post:
        slug: str | None = path()
        page: str = query(default="1")
        draft: bool = query(kind=bool, default=False)

    to_relative_url(Post(slug="hello world", draft=True))
    # "/posts/hello%20world?page=1&draft"

    from_url(Post, "/posts/hello?page=3")
    # Post(slug="hello", page="3", draft=False)
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "FieldConversionError",
    "InvalidAnnotationError",
    "InvalidPatternError",
    "MissingPathFieldError",
    "MissingQueryFieldError",
    "PatternUnfulfilledError",
    "QueryParams",
    "RouteConfig",
    "RouteInfo",
    "RouteMatch",
    "RouteParseError",
    "RouteRegistry",
    "RoutingError",
    "UnregisteredRouteError",
    "defined_routes",
    "find_route",
    "from_url",
    "is_route",
    "path",
    "path_serde",
    "query",
    "query_serde",
    "route",
    "route_name",
    "route_path",
    "to_relative_url",
    "try_from_url",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_CONFIG": "routekit.config",
    "RouteConfig": "routekit.config",
    "FieldConversionError": "routekit.errors",
    "InvalidAnnotationError": "routekit.errors",
    "InvalidPatternError": "routekit.errors",
    "MissingPathFieldError": "routekit.errors",
    "MissingQueryFieldError": "routekit.errors",
    "PatternUnfulfilledError": "routekit.errors",
    "RouteParseError": "routekit.errors",
    "RoutingError": "routekit.errors",
    "UnregisteredRouteError": "routekit.errors",
    "path": "routekit.fields",
    "path_serde": "routekit.fields",
    "query": "routekit.fields",
    "query_serde": "routekit.fields",
    "RouteInfo": "routekit.info",
    "RouteMatch": "routekit.info",
    "is_route": "routekit.info",
    "route_name": "routekit.info",
    "route_path": "routekit.info",
    "from_url": "routekit.parse",
    "try_from_url": "routekit.parse",
    "QueryParams": "routekit.querystring",
    "RouteRegistry": "routekit.registry",
    "defined_routes": "routekit.registry",
    "find_route": "routekit.registry",
    "route": "routekit.registry",
    "to_relative_url": "routekit.serialize",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routekit`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
