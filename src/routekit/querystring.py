"""Query string parsing and encoding.

``QueryParams`` implements ``Mapping[str, str]`` over a parsed query
string; ``encode_query`` is its inverse for the serializer.
"""

from collections.abc import Iterator, Mapping, Sequence
from urllib.parse import parse_qs, quote, quote_plus


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as key -> list of values.
        _raw: Raw query string, without the leading ``?``.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    Bare keys (``?happy``) are kept with an empty value.
    Percent-escapes that do not decode as UTF-8 raise ``UnicodeDecodeError``.
    """

    _data: dict[str, list[str]]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: str = "", *, plus_spaces: bool = True) -> None:
        object.__setattr__(self, "_raw", query_string)
        if not plus_spaces:
            query_string = query_string.replace("+", "%2B")
        parsed = parse_qs(query_string, keep_blank_values=True, errors="strict")
        object.__setattr__(self, "_data", parsed)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    @property
    def raw(self) -> str:
        """The query string this mapping was parsed from."""
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))


def encode_query(
    params: Mapping[str, str | Sequence[str]],
    *,
    bare_flags: bool = True,
    plus_spaces: bool = True,
) -> str:
    """Encode *params* as a query string (without the leading ``?``).

    List and tuple values produce repeated keys in order::

        >>> encode_query({"k": ["a", "b"], "q": "hello world"})
        'k=a&k=b&q=hello+world'
        >>> encode_query({"happy": ""})
        'happy'

    With ``bare_flags=False`` an empty value renders as ``happy=``.
    """
    quote_fn = quote_plus if plus_spaces else quote
    parts: list[str] = []
    for key, value in params.items():
        values = [value] if isinstance(value, str) else list(value)
        encoded_key = quote_fn(key, safe="")
        for v in values:
            if v == "" and bare_flags:
                parts.append(encoded_key)
            else:
                parts.append(f"{encoded_key}={quote_fn(v, safe='')}")
    return "&".join(parts)
