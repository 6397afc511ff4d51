"""URL encoding configuration.

RouteConfig is a frozen dataclass — immutable after creation, passed
explicitly to the serializer and parser instead of module globals.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """Encoding options shared by ``to_relative_url`` and ``from_url``.

    The defaults reproduce browser behavior (``encodeURIComponent`` for
    path segments, ``URLSearchParams`` for the query string) with one
    exception: empty query values render as bare flags (``?happy``).
    Override what you need::

        config = RouteConfig(bare_flags=False)
        to_relative_url(route, config=config)  # "/?happy="
    """

    # Characters left unescaped in path segments, besides ASCII alphanumerics
    path_safe: str = "-_.!~*'()"

    # Empty query values render as ``key`` instead of ``key=``
    bare_flags: bool = True

    # Spaces in query keys and values encode as ``+`` (form encoding)
    query_plus_spaces: bool = True


DEFAULT_CONFIG = RouteConfig()
