"""Blog — typed routes for a small blog front end.

Demonstrates:
- ``path()`` and ``query()`` fields with defaults
- A Boolean flag rendered as ``?preview``
- A composite ``path_serde`` field spanning two placeholders
- Repeated ``?tag=`` keys read back as a list through ``query_serde``
- Route variants sharing one name, resolved by ``registry.find``

Run:
    python routes.py
"""

from dataclasses import dataclass

from routekit import (
    QueryParams,
    RouteRegistry,
    path,
    path_serde,
    query,
    query_serde,
    route,
    to_relative_url,
)

registry = RouteRegistry()


@dataclass(frozen=True)
class Target:
    """What a comment thread is attached to."""

    type: str
    id: str


def target_to_path(target: Target) -> dict[str, str]:
    return {"target_type": target.type, "target_id": target.id}


def target_from_path(groups: dict[str, str]) -> Target:
    return Target(type=groups["target_type"], id=groups["target_id"])


def tags_to_query(tags: list[str]) -> dict[str, list[str]]:
    return {"tag": list(tags)}


def tags_from_query(params: QueryParams) -> list[str]:
    return params.get_list("tag")


@route("post", "/posts/{slug}", registry=registry)
@dataclass
class Post:
    slug: str | None = path()
    preview: bool = query(kind=bool, default=False)


@route("post", "/{year}/posts/{slug}", registry=registry)
@dataclass
class ArchivedPost:
    year: int | None = path(kind=int)
    slug: str | None = path()


@route("search", "/search", registry=registry)
@dataclass
class Search:
    q: str = query(default="")
    page: int = query(kind=int, default=1)
    tags: list[str] = query_serde(tags_to_query, tags_from_query, default_factory=list)


@route("comments", "/comments/{target_type}/{target_id}", registry=registry)
@dataclass
class Comments:
    target: Target | None = path_serde(target_to_path, target_from_path)


if __name__ == "__main__":
    print(to_relative_url(Post(slug="hello world", preview=True)))
    print(to_relative_url(ArchivedPost(year=2024, slug="retro")))
    print(to_relative_url(Search(q="python routing", tags=["web", "url"])))
    print(to_relative_url(Comments(target=Target(type="post", id="42"))))
    print(registry.find("/2024/posts/retro"))
