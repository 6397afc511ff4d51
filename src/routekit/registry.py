"""Route registry — named route types with reverse lookup.

Route types are registered with the ``@route`` decorator, normally at
module import time, and looked up by URL afterwards::

    @route("post", "/posts/{slug}")
    @dataclass
    class Post:
        slug: str | None = path()

    find_route("/posts/hello")  # RouteMatch(name="post", route=Post(slug="hello"))

Free-threading safety:
    - RouteInfo is a frozen dataclass (immutable)
    - Registration appends under a lock
    - Readers work on snapshots and never see a half-appended list
"""

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType

from routekit.config import DEFAULT_CONFIG, RouteConfig
from routekit.errors import InvalidAnnotationError
from routekit.fields import PlainPath, RouteField, SerdePath, route_fields
from routekit.info import ROUTE_ATTR, RouteInfo, RouteMatch
from routekit.parse import parse_url
from routekit.pattern import compile_pattern, placeholder_names

logger = logging.getLogger("routekit.registry")


class RouteRegistry:
    """Route types keyed by group, then name, in registration order.

    Several types may share one name (variants of a route); reverse
    lookup tries them in the order they were registered.
    """

    __slots__ = ("_lock", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, dict[str, list[type]]] = {}
        self._lock = threading.Lock()

    def register(self, cls: type, name: str, pattern: str, group: str = "") -> type:
        """Attach *name* and *pattern* to *cls* and add it to the registry.

        Validates the pattern and the field annotations up front so
        mistakes surface at import, not on the first navigation.
        """
        compile_pattern(pattern)
        fields = route_fields(cls)
        _check_placeholders(cls, pattern, fields)

        setattr(cls, ROUTE_ATTR, RouteInfo(name=name, pattern=pattern, group=group))

        with self._lock:
            self._routes.setdefault(group, {}).setdefault(name, []).append(cls)

        logger.debug("Registered route %r (%s) -> %s", name, pattern, cls.__qualname__)
        return cls

    def groups(self) -> tuple[str, ...]:
        """Return every group with at least one route."""
        with self._lock:
            return tuple(self._routes)

    def defined_routes(self, group: str = "") -> Mapping[str, tuple[type, ...]]:
        """Return a read-only snapshot of name -> route types for *group*.

        Unknown groups yield an empty mapping.
        """
        with self._lock:
            names = self._routes.get(group, {})
            snapshot = {name: tuple(types) for name, types in names.items()}
        return MappingProxyType(snapshot)

    def find(
        self,
        url: str,
        group: str = "",
        *,
        config: RouteConfig = DEFAULT_CONFIG,
    ) -> RouteMatch | None:
        """Return the first registered route in *group* that parses *url*.

        Candidates are tried by name, then by variant, in registration
        order.  Returns ``None`` if every candidate rejects the URL.
        """
        for name, candidates in self.defined_routes(group).items():
            for candidate in candidates:
                result = parse_url(candidate, url, config=config)
                if result.error is None:
                    return RouteMatch(name=name, route=result.route)
                logger.debug(
                    "Route %r (%s) rejected %r: %s",
                    name,
                    candidate.__qualname__,
                    url,
                    result.error,
                )
        return None

    def __len__(self) -> int:
        with self._lock:
            return sum(len(types) for names in self._routes.values() for types in names.values())

    def __contains__(self, cls: object) -> bool:
        with self._lock:
            return any(
                cls in types for names in self._routes.values() for types in names.values()
            )


def _check_placeholders(cls: type, pattern: str, fields: tuple[RouteField, ...]) -> None:
    """Warn about placeholders no path field can fill.

    A serde path field may produce any key, so its presence disables
    the check.
    """
    if any(isinstance(rf.annotation, SerdePath) for rf in fields):
        return
    keys = {rf.key for rf in fields if isinstance(rf.annotation, PlainPath)}
    for placeholder in placeholder_names(pattern):
        if placeholder not in keys:
            logger.warning(
                "Placeholder {%s} in %r has no path field on %s",
                placeholder,
                pattern,
                cls.__qualname__,
            )


default_registry = RouteRegistry()


def route(
    name: str,
    pattern: str,
    *,
    group: str = "",
    registry: RouteRegistry | None = None,
) -> Callable[[type], type]:
    """Register the decorated dataclass as route *name* with *pattern*.

    Apply on top of ``@dataclass`` so the registered class is the final
    one::

        @route("settings", "/settings/{tab}", group="admin")
        @dataclass
        class Settings:
            tab: str | None = path()

    Pass *registry* to register somewhere other than the process-wide
    default registry.
    """
    if not isinstance(name, str) or not isinstance(pattern, str):
        msg = "route(): name and pattern must be of type str."
        raise InvalidAnnotationError(msg)

    def decorator(cls: type) -> type:
        target = registry if registry is not None else default_registry
        return target.register(cls, name, pattern, group)

    return decorator


def defined_routes(group: str = "") -> Mapping[str, tuple[type, ...]]:
    """Return name -> route types registered in *group*."""
    return default_registry.defined_routes(group)


def find_route(
    url: str,
    *,
    group: str = "",
    config: RouteConfig = DEFAULT_CONFIG,
) -> RouteMatch | None:
    """Guess which registered route in *group* matches *url*."""
    return default_registry.find(url, group, config=config)
