"""Tests for routekit.serialize — route instance to relative URL."""

from dataclasses import dataclass

import pytest

from routekit.config import RouteConfig
from routekit.errors import PatternUnfulfilledError, UnregisteredRouteError
from routekit.fields import path, path_serde, query, query_serde
from routekit.registry import RouteRegistry, route
from routekit.serialize import collect_params, to_relative_url

_registry = RouteRegistry()


@dataclass(frozen=True)
class Target:
    type: str
    id: str


def target_to_path(target: Target) -> dict[str, str]:
    return {"target_type": target.type, "target_id": target.id}


def target_from_path(groups: dict[str, str]) -> Target:
    return Target(type=groups["target_type"], id=groups["target_id"])


@route("example", "/example/{name}", registry=_registry)
@dataclass
class Example:
    name: str | None = path()
    happy: bool = query(kind=bool, default=False)
    q: str | None = query()


@route("nested", "/nested/{target_type}/{target_id}", registry=_registry)
@dataclass
class Nested:
    target: Target | None = path_serde(target_to_path, target_from_path)


@route("tagged", "/a/{x}/b", registry=_registry)
@dataclass
class Tagged:
    x: str | None = path()
    k: list[str] | None = query()
    page: int | None = query("p")


@route("overwrite", "/overwrite", registry=_registry)
@dataclass
class Overwrite:
    first: str | None = query_serde(lambda v: {"k": v, "a": "1"}, lambda q: q.get("k"))
    second: str | None = query_serde(lambda v: {"k": v}, lambda q: q.get("k"))


@dataclass
class Unregistered:
    name: str | None = path()


class TestToRelativeUrl:
    def test_path_substitution(self) -> None:
        assert to_relative_url(Example(name="Basic")) == "/example/Basic"

    def test_path_percent_encoded(self) -> None:
        assert to_relative_url(Tagged(x="hello world")) == "/a/hello%20world/b"

    def test_bool_flag_true(self) -> None:
        assert to_relative_url(Example(name="Basic", happy=True)) == "/example/Basic?happy"

    def test_bool_flag_false_omitted(self) -> None:
        assert to_relative_url(Example(name="Basic", happy=False)) == "/example/Basic"

    def test_bool_flag_config(self) -> None:
        config = RouteConfig(bare_flags=False)
        url = to_relative_url(Example(name="Basic", happy=True), config=config)
        assert url == "/example/Basic?happy="

    def test_query_value(self) -> None:
        url = to_relative_url(Example(name="Basic", q="hello world"))
        assert url == "/example/Basic?q=hello+world"

    def test_query_list_repeats_key(self) -> None:
        assert to_relative_url(Tagged(x="1", k=["a", "b"])) == "/a/1/b?k=a&k=b"

    def test_query_uses_str(self) -> None:
        assert to_relative_url(Tagged(x="1", page=3)) == "/a/1/b?p=3"

    def test_none_fields_skipped(self) -> None:
        assert to_relative_url(Tagged(x="1", k=None, page=None)) == "/a/1/b"

    def test_serde_path(self) -> None:
        url = to_relative_url(Nested(target=Target(type="post", id="42")))
        assert url == "/nested/post/42"

    def test_serde_last_writer_wins(self) -> None:
        url = to_relative_url(Overwrite(first="one", second="two"))
        assert url == "/overwrite?k=two&a=1"

    def test_required_path_field_none(self) -> None:
        with pytest.raises(PatternUnfulfilledError) as exc_info:
            to_relative_url(Example())
        assert exc_info.value.placeholders == ("name",)

    def test_explicit_pattern(self) -> None:
        assert to_relative_url(Example(name="x"), "/custom/{name}") == "/custom/x"

    def test_explicit_pattern_unregistered(self) -> None:
        assert to_relative_url(Unregistered(name="x"), "/u/{name}") == "/u/x"

    def test_unregistered_without_pattern(self) -> None:
        with pytest.raises(UnregisteredRouteError):
            to_relative_url(Unregistered(name="x"))

    def test_never_absolute(self) -> None:
        url = to_relative_url(Example(name="https://evil.com"))
        assert url == "/example/https%3A%2F%2Fevil.com"


class TestCollectParams:
    def test_maps(self) -> None:
        path_params, query_params = collect_params(Tagged(x="1", k=["a"], page=2))
        assert path_params == {"x": "1"}
        assert query_params == {"k": ["a"], "p": "2"}

    def test_flag_is_empty_string(self) -> None:
        _, query_params = collect_params(Example(name="n", happy=True))
        assert query_params == {"happy": ""}

    def test_path_flag_omitted(self) -> None:
        @dataclass
        class Preview:
            slug: str | None = path()
            preview: bool = path(kind=bool, default=False)

        path_params, _ = collect_params(Preview(slug="s", preview=True))
        assert path_params == {"slug": "s"}
