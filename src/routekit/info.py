"""RouteInfo and RouteMatch frozen dataclasses, plus route accessors."""

from dataclasses import dataclass
from typing import Any

from routekit.errors import UnregisteredRouteError

# Class attribute holding the RouteInfo of a registered route type
ROUTE_ATTR = "__route_info__"


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """Name, pattern, and group attached to a route type by ``@route``.

    Immutable after registration.
    """

    name: str
    pattern: str
    group: str = ""


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful reverse lookup."""

    name: str
    route: Any


def _route_type(obj: object) -> type:
    return obj if isinstance(obj, type) else type(obj)


def is_route(obj: object) -> bool:
    """Return True if *obj* is a registered route type or an instance of one."""
    return isinstance(getattr(_route_type(obj), ROUTE_ATTR, None), RouteInfo)


def route_info(obj: object) -> RouteInfo:
    """Return the ``RouteInfo`` of a route type or instance.

    Raises ``UnregisteredRouteError`` if the type was never registered.
    """
    info = getattr(_route_type(obj), ROUTE_ATTR, None)
    if not isinstance(info, RouteInfo):
        raise UnregisteredRouteError(obj)
    return info


def route_path(obj: object) -> str:
    """Return the URL pattern of a route type or instance."""
    return route_info(obj).pattern


def route_name(obj: object) -> str:
    """Return the registered name of a route type or instance."""
    return route_info(obj).name
