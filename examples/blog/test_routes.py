"""Tests for the blog example."""

from routekit import from_url, to_relative_url


class TestBlogRoutes:
    def test_post_url(self, example_routes) -> None:
        post = example_routes.Post(slug="hello world", preview=True)
        assert to_relative_url(post) == "/posts/hello%20world?preview"

    def test_post_round_trip(self, example_routes) -> None:
        post = example_routes.Post(slug="hello world", preview=True)
        assert from_url(example_routes.Post, to_relative_url(post)) == post

    def test_archived_year_is_int(self, example_routes) -> None:
        archived = from_url(example_routes.ArchivedPost, "/2024/posts/retro")
        assert archived.year == 2024

    def test_search_tags_repeat(self, example_routes) -> None:
        search = example_routes.Search(q="python routing", tags=["web", "url"])
        assert to_relative_url(search) == "/search?q=python+routing&page=1&tag=web&tag=url"

    def test_search_reads_every_tag(self, example_routes) -> None:
        search = from_url(example_routes.Search, "/search?tag=web&tag=url")
        assert search.tags == ["web", "url"]

    def test_search_round_trip(self, example_routes) -> None:
        search = example_routes.Search(q="python routing", page=2, tags=["web", "url"])
        assert from_url(example_routes.Search, to_relative_url(search)) == search

    def test_search_without_tags(self, example_routes) -> None:
        assert to_relative_url(example_routes.Search(q="rust")) == "/search?q=rust&page=1"
        assert from_url(example_routes.Search, "/search").tags == []

    def test_comments_target(self, example_routes) -> None:
        comments = from_url(example_routes.Comments, "/comments/post/42")
        assert comments.target == example_routes.Target(type="post", id="42")

    def test_find_variant(self, example_routes) -> None:
        match = example_routes.registry.find("/2024/posts/retro")
        assert match is not None
        assert match.name == "post"
        assert match.route == example_routes.ArchivedPost(year=2024, slug="retro")

    def test_find_nothing(self, example_routes) -> None:
        assert example_routes.registry.find("/about") is None
