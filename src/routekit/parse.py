"""Relative URL -> route instance.

Matches a URL against a route pattern and populates a fresh instance of
the route type from the captured path groups and the query string.

Resolution rules per annotation:

- **PlainPath**: percent-decoded named group; ``kind=bool`` means
  "segment present"
- **SerdePath**: ``deserialize(groups)`` with every captured group
- **PlainQuery**: first value of the key; ``kind=bool`` means "key present"
- **SerdeQuery**: ``deserialize(query)`` with the full ``QueryParams``

A plain field with no source value keeps its default.  A field whose
default is ``None`` is required and its absence is a parse failure.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

from routekit.config import DEFAULT_CONFIG, RouteConfig
from routekit.errors import (
    FieldConversionError,
    MissingPathFieldError,
    MissingQueryFieldError,
    RouteParseError,
)
from routekit.fields import (
    PlainPath,
    PlainQuery,
    RouteField,
    SerdePath,
    SerdeQuery,
    fresh_values,
    route_fields,
)
from routekit.info import route_path
from routekit.pattern import match_pattern
from routekit.querystring import QueryParams


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Outcome of a parse attempt: either ``route`` or ``error`` is set."""

    route: T | None = None
    error: RouteParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _convert(rf: RouteField, raw: str) -> Any:
    """Convert a raw string by the field's declared kind."""
    kind = getattr(rf.annotation, "kind", None)
    if kind is None or kind is str:
        return raw
    try:
        return kind(raw)
    except ValueError as exc:
        return FieldConversionError(rf.name, str(exc))


def _deserialize(rf: RouteField, fn: Any, source: Any) -> Any:
    try:
        return fn(source)
    except Exception as exc:
        return FieldConversionError(rf.name, f"{type(exc).__name__}: {exc}")


def _resolve_field(
    rf: RouteField,
    groups: dict[str, str],
    query: QueryParams,
    fresh: Any,
) -> Any:
    """Return the parsed value for *rf*, or a ``RouteParseError`` instance."""
    match rf.annotation:
        case PlainPath(kind=kind):
            if kind is bool:
                return rf.key in groups
            raw = groups.get(rf.key)
            if raw is None:
                if fresh is not None:
                    return fresh
                return MissingPathFieldError(rf.key)
            return _convert(rf, raw)
        case SerdePath(deserialize=deserialize):
            return _deserialize(rf, deserialize, dict(groups))
        case PlainQuery(kind=kind):
            if kind is bool:
                return rf.key in query
            raw = query.get(rf.key)
            if raw is None:
                if fresh is not None:
                    return fresh
                return MissingQueryFieldError(rf.key)
            return _convert(rf, raw)
        case SerdeQuery(deserialize=deserialize):
            return _deserialize(rf, deserialize, query)
    msg = f"Unknown annotation on field {rf.name!r}: {rf.annotation!r}"
    raise TypeError(msg)


def _build[T](
    cls: type[T], values: dict[str, Any], fields: tuple[RouteField, ...]
) -> ParseResult[T]:
    """Construct *cls* from resolved *values*.

    Init fields go through ``__init__``; annotated non-init fields are
    assigned afterwards so frozen dataclasses work too.  An exception from
    the constructor (e.g. a ``__post_init__`` check) rejects the URL.
    """
    kwargs = {f.name: values[f.name] for f in dataclasses.fields(cls) if f.init}
    try:
        instance = cls(**kwargs)
    except Exception as exc:
        detail = f"Could not construct {cls.__name__}: {type(exc).__name__}: {exc}"
        return ParseResult(error=RouteParseError(detail))
    for rf in fields:
        if not rf.init:
            object.__setattr__(instance, rf.name, values[rf.name])
    return ParseResult(route=instance)


def parse_url[T](
    cls: type[T],
    url: str,
    pattern: str | None = None,
    *,
    config: RouteConfig = DEFAULT_CONFIG,
) -> ParseResult[T]:
    """Try to parse *url* into an instance of *cls*.

    Never raises for an unparseable URL: the failure is returned in
    ``ParseResult.error``.  Raises ``UnregisteredRouteError`` if *pattern*
    is omitted and *cls* is not a registered route.
    """
    if pattern is None:
        pattern = route_path(cls)

    fields = route_fields(cls)
    values = fresh_values(cls)

    m = match_pattern(pattern, url)
    if m is None:
        return ParseResult(error=RouteParseError())

    try:
        query = QueryParams(m.query_string or "", plus_spaces=config.query_plus_spaces)
        groups = {
            name: unquote(raw, errors="strict")
            for name, raw in m.path_params.items()
            if raw is not None
        }
    except UnicodeDecodeError as exc:
        return ParseResult(error=RouteParseError(f"Invalid percent-encoding in URL: {exc}"))

    # Path fields first, then query fields
    ordered = [rf for rf in fields if rf.annotation.is_path]
    ordered += [rf for rf in fields if not rf.annotation.is_path]
    for rf in ordered:
        resolved = _resolve_field(rf, groups, query, values[rf.name])
        if isinstance(resolved, RouteParseError):
            return ParseResult(error=resolved)
        values[rf.name] = resolved

    return _build(cls, values, fields)


def from_url[T](
    cls: type[T],
    url: str,
    pattern: str | None = None,
    *,
    config: RouteConfig = DEFAULT_CONFIG,
) -> T:
    """Parse *url* into an instance of *cls*.

    *pattern* overrides the registered pattern, for callers whose route
    syntax differs (see ``routekit.pattern.translate_pattern``).

    Raises ``RouteParseError`` (or a subclass naming the missing field)
    if the URL cannot be parsed.  Nothing is returned on failure.
    """
    result = parse_url(cls, url, pattern, config=config)
    if result.error is not None:
        raise result.error
    return result.route  # type: ignore[return-value]


def try_from_url[T](
    cls: type[T],
    url: str,
    pattern: str | None = None,
    *,
    config: RouteConfig = DEFAULT_CONFIG,
) -> T | None:
    """Like ``from_url`` but returns ``None`` instead of raising."""
    return parse_url(cls, url, pattern, config=config).route
