"""Route instance -> relative URL.

Walks the annotated fields of a route instance, collects path and query
parameter maps, substitutes the path parameters into the pattern, and
appends the encoded query string.
"""

from typing import Any

from routekit.config import DEFAULT_CONFIG, RouteConfig
from routekit.fields import PlainPath, PlainQuery, SerdePath, SerdeQuery, route_fields
from routekit.info import route_path
from routekit.pattern import fill_pattern
from routekit.querystring import encode_query


def collect_params(
    instance: Any,
) -> tuple[dict[str, str], dict[str, str | list[str]]]:
    """Build the path and query parameter maps for *instance*.

    Fields set to ``None`` are skipped.  Serde output is merged into the
    shared maps in field order; a later field overwrites an earlier key.
    """
    path_params: dict[str, str] = {}
    query_params: dict[str, str | list[str]] = {}

    for rf in route_fields(type(instance)):
        value = getattr(instance, rf.name, None)
        if value is None:
            continue

        match rf.annotation:
            case PlainPath(kind=kind):
                # Flags have no segment representation
                if kind is bool:
                    continue
                path_params[rf.key] = str(value)
            case SerdePath(serialize=serialize):
                path_params.update(serialize(value))
            case PlainQuery(kind=kind):
                if kind is bool:
                    if value:
                        query_params[rf.key] = ""
                elif isinstance(value, (list, tuple)):
                    query_params[rf.key] = [str(v) for v in value]
                else:
                    query_params[rf.key] = str(value)
            case SerdeQuery(serialize=serialize):
                query_params.update(serialize(value))

    return path_params, query_params


def to_relative_url(
    instance: Any,
    pattern: str | None = None,
    *,
    config: RouteConfig = DEFAULT_CONFIG,
) -> str:
    """Serialize a route instance into a relative URL.

    Uses the registered pattern of the instance's type unless *pattern*
    is given.  The result never includes a scheme or host::

        >>> to_relative_url(Post(slug="hello world", page="2"))
        '/posts/hello%20world?page=2'

    Raises ``UnregisteredRouteError`` if no pattern is available.
    Raises ``PatternUnfulfilledError`` if a placeholder is left unfilled.
    """
    if pattern is None:
        pattern = route_path(instance)

    path_params, query_params = collect_params(instance)
    url = fill_pattern(pattern, path_params, safe=config.path_safe)

    query_string = encode_query(
        query_params,
        bare_flags=config.bare_flags,
        plus_spaces=config.query_plus_spaces,
    )
    if query_string:
        return f"{url}?{query_string}"
    return url
