"""routekit exception hierarchy.

Shared across the pattern compiler, serializer, parser, and registry so
every module raises and catches the same types.
"""


class RoutingError(Exception):
    """Base for all routekit-specific errors."""


class InvalidAnnotationError(RoutingError, TypeError):
    """Raised when a field annotation factory receives bad arguments.

    Surfaces at class-definition time, so it is effectively a
    programming error caught at import.
    """


class InvalidPatternError(RoutingError, ValueError):
    """Raised when a route pattern cannot be compiled."""


class UnregisteredRouteError(RoutingError, TypeError):
    """Raised when a type that never went through ``@route`` is used as one."""

    def __init__(self, obj: object) -> None:
        cls = obj if isinstance(obj, type) else type(obj)
        self.cls = cls
        super().__init__(
            f"{cls.__qualname__} does not contain a route. Use the @route decorator."
        )


class PatternUnfulfilledError(RoutingError, ValueError):
    """Raised by the serializer when placeholders are left unsubstituted.

    Usually means a required path field is ``None`` or not annotated.
    """

    def __init__(self, pattern: str, placeholders: tuple[str, ...]) -> None:
        self.pattern = pattern
        self.placeholders = placeholders
        names = ", ".join(repr(p) for p in placeholders)
        super().__init__(f"Not all patterns fulfilled in {pattern!r}: missing {names}")


class RouteParseError(RoutingError, ValueError):
    """Raised when a URL cannot be parsed into a route instance.

    The base message covers the case where the URL does not match the
    route pattern at all.  Subclasses narrow down field-level failures.
    """

    def __init__(self, detail: str = "Could not parse URL to route") -> None:
        self.detail = detail
        super().__init__(detail)


class MissingPathFieldError(RouteParseError):
    """A required path field has no captured segment and no default."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"URL is missing path field for {key!r}.")


class MissingQueryFieldError(RouteParseError):
    """A required query field is absent from the query string and has no default."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"URL is missing query field for {key!r}.")


class FieldConversionError(RouteParseError):
    """A captured value could not be converted to the field's value kind."""

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        super().__init__(f"Could not convert field {field!r}: {detail}")
