"""Route pattern compilation, matching, and substitution.

A pattern is a URL path template with ``{name}`` placeholders::

    "/users/{user_id}/posts/{slug}"

Everything outside a placeholder is literal text.  Patterns are compiled
to a regular expression on every call; there is no cache.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal
from urllib.parse import quote

from routekit.errors import InvalidPatternError, PatternUnfulfilledError

PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

# ``re.escape`` turns ``{name}`` into ``\{name\}``
_ESCAPED_PLACEHOLDER = re.compile(r"\\\{([A-Za-z_][A-Za-z0-9_]*)\\\}")

# Reserved group name for the trailing raw query string
QUERY_GROUP = "__query__"

# Placeholder value: one or more characters, never crossing a segment,
# the query string, or the fragment
_SEGMENT = r"[^/?#]+"

_BRACKET_PARAM = re.compile(r"\[([A-Za-z_][A-Za-z0-9_]*)\]")
_TYPED_PARAM = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*):[^{}]*\}")

PatternSyntax = Literal["brackets", "typed"]


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Result of a successful pattern match.

    ``path_params`` maps every placeholder name to its raw (still
    percent-encoded) capture, or ``None`` when the segment was empty.
    ``query_string`` is ``None`` when the URL had no ``?``.
    """

    path_params: dict[str, str | None]
    query_string: str | None


def placeholder_names(pattern: str) -> tuple[str, ...]:
    """Return placeholder names in order of appearance.

    Examples::

        "/users"                 -> ()
        "/users/{id}"            -> ("id",)
        "/t/{type}/{id}/edit"    -> ("type", "id")
    """
    return tuple(PLACEHOLDER.findall(pattern))


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile *pattern* into an anchored regular expression.

    Literal text is escaped first, then each placeholder becomes an
    optional named group.  A missing segment therefore still matches
    and is reported as ``None`` so the parser can fall back to a field
    default.  The raw query string is captured in ``QUERY_GROUP`` and a
    trailing ``#fragment`` is accepted and ignored.

    Raises ``InvalidPatternError`` on duplicate or reserved names.
    """
    names = placeholder_names(pattern)
    seen: set[str] = set()
    for name in names:
        if name == QUERY_GROUP:
            msg = f"Placeholder name {name!r} is reserved in pattern {pattern!r}"
            raise InvalidPatternError(msg)
        if name in seen:
            msg = f"Duplicate placeholder {name!r} in pattern {pattern!r}"
            raise InvalidPatternError(msg)
        seen.add(name)

    body = _ESCAPED_PLACEHOLDER.sub(
        lambda m: f"(?:(?P<{m.group(1)}>{_SEGMENT}))?",
        re.escape(pattern),
    )
    return re.compile(f"{body}(?:\\?(?P<{QUERY_GROUP}>[^#]*))?(?:#.*)?")


def match_pattern(pattern: str, url: str) -> PatternMatch | None:
    """Match *url* against *pattern*.

    Returns ``None`` if the URL does not match the whole pattern.
    Never returns a partial match.
    """
    m = compile_pattern(pattern).fullmatch(url)
    if m is None:
        return None

    groups = m.groupdict()
    query_string = groups.pop(QUERY_GROUP)
    return PatternMatch(path_params=groups, query_string=query_string)


def fill_pattern(
    pattern: str,
    path_params: Mapping[str, str],
    *,
    safe: str = "-_.!~*'()",
) -> str:
    """Substitute *path_params* into *pattern*.

    Every literal ``{key}`` occurrence is replaced by the percent-encoded
    value.  Keys without a placeholder are ignored.

    Raises ``PatternUnfulfilledError`` if any placeholder remains.
    """
    url = pattern
    for key, value in path_params.items():
        url = url.replace(f"{{{key}}}", quote(value, safe=safe))

    remaining = placeholder_names(url)
    if remaining:
        raise PatternUnfulfilledError(pattern, remaining)
    return url


def translate_pattern(native: str, syntax: PatternSyntax = "brackets") -> str:
    """Translate a framework-native route pattern into ``{name}`` syntax.

    ``brackets``: file-system router style, ``/posts/[id]`` -> ``/posts/{id}``.
    ``typed``: converter suffixes are dropped, ``/users/{id:int}`` -> ``/users/{id}``.
    """
    if syntax == "brackets":
        return _BRACKET_PARAM.sub(r"{\1}", native)
    if syntax == "typed":
        return _TYPED_PARAM.sub(r"{\1}", native)
    msg = f"Unknown pattern syntax: {syntax!r}"
    raise InvalidPatternError(msg)
