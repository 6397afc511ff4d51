"""Framework integration — parse the current request into a route.

Web frameworks know the current URL and their own native pattern for
the matched page, written in their own placeholder syntax.  These
helpers translate that pattern into ``{name}`` syntax and parse.

Usage with an ASGI app::

    async def app(scope, receive, send):
        post = from_asgi_scope(Post, scope, "/posts/{slug:str}")
"""

from collections.abc import MutableMapping
from typing import Any

from routekit.config import DEFAULT_CONFIG, RouteConfig
from routekit.parse import from_url
from routekit.pattern import PatternSyntax, translate_pattern


def request_target(path: str, query_string: bytes | str = b"") -> str:
    """Join a request path and raw query string into a relative URL."""
    if isinstance(query_string, bytes):
        query_string = query_string.decode("latin-1")
    if query_string:
        return f"{path}?{query_string}"
    return path


def from_request_target[T](
    cls: type[T],
    path: str,
    query_string: bytes | str = b"",
    native_pattern: str | None = None,
    *,
    syntax: PatternSyntax = "brackets",
    config: RouteConfig = DEFAULT_CONFIG,
) -> T:
    """Parse a request's path and query into an instance of *cls*.

    When *native_pattern* is given it is translated from *syntax* and
    used instead of the registered pattern.
    """
    pattern = translate_pattern(native_pattern, syntax) if native_pattern is not None else None
    return from_url(cls, request_target(path, query_string), pattern, config=config)


def from_asgi_scope[T](
    cls: type[T],
    scope: MutableMapping[str, Any],
    native_pattern: str | None = None,
    *,
    syntax: PatternSyntax = "typed",
    config: RouteConfig = DEFAULT_CONFIG,
) -> T:
    """Parse the path and query of an ASGI HTTP scope into *cls*.

    ``scope["path"]`` is already percent-decoded by the server, so the
    raw path is used when the server provides one.
    """
    raw_path = scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else scope["path"]
    return from_request_target(
        cls,
        path,
        scope.get("query_string", b""),
        native_pattern,
        syntax=syntax,
        config=config,
    )
