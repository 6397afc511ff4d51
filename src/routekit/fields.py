"""Field annotations — how a dataclass field participates in a URL.

Each route field carries exactly one annotation in its dataclass
``metadata``.  The annotation is a tagged variant:

- ``PlainPath``: the field is a path segment, converted with ``str()``
- ``SerdePath``: custom ``serialize``/``deserialize`` over path groups
- ``PlainQuery``: the field is a query parameter, converted with ``str()``
- ``SerdeQuery``: custom ``serialize``/``deserialize`` over the query

Usage::

    @route("post", "/posts/{slug}")
    @dataclass
    class Post:
        slug: str | None = path()
        page: str = query(default="1")
        draft: bool = query(kind=bool, default=False)
"""

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from routekit.errors import InvalidAnnotationError
from routekit.querystring import QueryParams

# Private metadata key on dataclass fields
ROUTING_KEY = "routekit"

# Supported value kinds: bool uses presence encoding, the rest convert
VALUE_KINDS: frozenset[type] = frozenset({bool, str, int, float})

PathSerializeFn = Callable[[Any], Mapping[str, str]]
PathDeserializeFn = Callable[[dict[str, str]], Any]
QuerySerializeFn = Callable[[Any], Mapping[str, str | list[str]]]
QueryDeserializeFn = Callable[[QueryParams], Any]


@dataclass(frozen=True, slots=True)
class PlainPath:
    """A path segment, read from the named group ``key``."""

    key: str | None = None
    kind: type | None = None
    is_path = True


@dataclass(frozen=True, slots=True)
class SerdePath:
    """Path groups produced and consumed by a function pair."""

    serialize: PathSerializeFn
    deserialize: PathDeserializeFn
    is_path = True


@dataclass(frozen=True, slots=True)
class PlainQuery:
    """A query parameter, read from the first value of ``key``."""

    key: str | None = None
    kind: type | None = None
    is_path = False


@dataclass(frozen=True, slots=True)
class SerdeQuery:
    """Query parameters produced and consumed by a function pair."""

    serialize: QuerySerializeFn
    deserialize: QueryDeserializeFn
    is_path = False


Annotation = PlainPath | SerdePath | PlainQuery | SerdeQuery


@dataclass(frozen=True, slots=True)
class RouteField:
    """An annotated dataclass field, resolved from its metadata."""

    name: str
    annotation: Annotation
    init: bool = True

    @property
    def key(self) -> str:
        """External URL key: the declared key, or the field name."""
        key = getattr(self.annotation, "key", None)
        return key if key is not None else self.name


def _check_plain(factory: str, key: object, kind: object) -> None:
    if key is not None and not isinstance(key, str):
        msg = f"{factory}(): key must be of type str, got {type(key).__name__}."
        raise InvalidAnnotationError(msg)
    if kind is not None and kind not in VALUE_KINDS:
        names = ", ".join(sorted(k.__name__ for k in VALUE_KINDS))
        msg = f"{factory}(): kind must be one of {names}, got {kind!r}."
        raise InvalidAnnotationError(msg)


def _check_serde(factory: str, serialize: object, deserialize: object) -> None:
    if not callable(serialize):
        msg = f"{factory}(): first argument must be a function."
        raise InvalidAnnotationError(msg)
    if not callable(deserialize):
        msg = f"{factory}(): second argument must be a function."
        raise InvalidAnnotationError(msg)


def _field(annotation: Annotation, default: Any, default_factory: Any) -> Any:
    metadata = {ROUTING_KEY: annotation}
    if default_factory is not dataclasses.MISSING:
        if default is not None:
            msg = "Cannot specify both default and default_factory."
            raise InvalidAnnotationError(msg)
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def path(
    key: str | None = None,
    *,
    kind: type | None = None,
    default: Any = None,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare a path field, filled from the ``{key}`` placeholder.

    *key* defaults to the field name.  A field whose default is ``None``
    is required when parsing.

    ``kind=bool`` makes a read-only presence flag: the serializer never
    writes it, and parsing sets it to whether ``{key}`` captured a
    segment, replacing any default.  A pattern that needs ``{key}``
    filled therefore cannot be serialized from such a field.
    """
    _check_plain("path", key, kind)
    return _field(PlainPath(key=key, kind=kind), default, default_factory)


def path_serde(
    serialize: PathSerializeFn,
    deserialize: PathDeserializeFn,
    *,
    default: Any = None,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare a path field backed by a serialize/deserialize pair.

    ``serialize(value)`` returns placeholder -> string entries.
    ``deserialize(groups)`` receives *every* captured path group, so one
    field can span several placeholders.
    """
    _check_serde("path_serde", serialize, deserialize)
    return _field(SerdePath(serialize, deserialize), default, default_factory)


def query(
    key: str | None = None,
    *,
    kind: type | None = None,
    default: Any = None,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare a query field, filled from the ``key`` parameter.

    With ``kind=bool`` the field is a flag: ``True`` encodes as a bare
    ``?key`` and parsing only checks for the key's presence.
    """
    _check_plain("query", key, kind)
    return _field(PlainQuery(key=key, kind=kind), default, default_factory)


def query_serde(
    serialize: QuerySerializeFn,
    deserialize: QueryDeserializeFn,
    *,
    default: Any = None,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare a query field backed by a serialize/deserialize pair.

    ``deserialize`` receives the full ``QueryParams`` of the URL.
    """
    _check_serde("query_serde", serialize, deserialize)
    return _field(SerdeQuery(serialize, deserialize), default, default_factory)


def route_fields(cls: type) -> tuple[RouteField, ...]:
    """Return the annotated fields of dataclass *cls* in declaration order.

    Raises ``InvalidAnnotationError`` if *cls* is not a dataclass.
    """
    if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
        msg = f"{cls!r} is not a dataclass. Apply @dataclass before @route."
        raise InvalidAnnotationError(msg)

    result: list[RouteField] = []
    for f in dataclasses.fields(cls):
        annotation = f.metadata.get(ROUTING_KEY)
        if annotation is None:
            continue
        result.append(RouteField(name=f.name, annotation=annotation, init=f.init))
    return tuple(result)


def fresh_values(cls: type) -> dict[str, Any]:
    """Return the state of a zero-initialized instance of dataclass *cls*.

    Each field maps to its default, a fresh ``default_factory()`` result,
    or ``None`` when the field declares neither.
    """
    values: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if f.default is not dataclasses.MISSING:
            values[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            values[f.name] = f.default_factory()
        else:
            values[f.name] = None
    return values
