"""Unit tests for URL builders."""

import pytest

from url_builder.builder import (
    Absolute,
    CrossOrigin,
    Relative,
    absolute,
    cross_origin,
    custom,
    relative,
    root_prefix,
)
from url_builder.query import (
    bool_,
    bracketed_list,
    float_,
    int_,
    list_,
    maybe,
    string,
)


class TestAbsolute:
    """Test suite for absolute URLs."""

    def test_empty(self):
        """Test no segments and no parameters."""
        assert absolute([], []) == "/"

    @pytest.mark.parametrize(
        "segments",
        [["packages"], ["packages", "elm", "core"], ["a", "b", "c", "d"]],
    )
    def test_segments_joined(self, segments):
        """Test segments are joined with slashes after a leading slash."""
        assert absolute(segments, []) == "/" + "/".join(segments)

    def test_search_with_list(self):
        """Test list parameter next to a string parameter."""
        url = absolute(
            ["products"],
            [string("search", "hat"), list_(int_, "sizes", [1, 2, 3])],
        )

        assert url == "/products?search=hat&sizes=1%2C2%2C3"

    def test_search_with_bracketed_list(self):
        """Test bracketed list parameter."""
        url = absolute(
            ["products"],
            [string("search", "hat"), bracketed_list(int_, "sizes", [1, 2, 3])],
        )

        assert url == "/products?search=hat&sizes=%5B1%2C2%2C3%5D"

    def test_bool_and_maybe(self):
        """Test booleans and optional values."""
        assert absolute(["products"], [bool_("discounted", True)]) == (
            "/products?discounted=true"
        )
        assert absolute(["products"], [bool_("discounted", False)]) == (
            "/products?discounted=false"
        )
        assert absolute(["products"], [maybe(float_, "maxprice", None)]) == "/products"
        assert absolute(["products"], [maybe(float_, "maxprice", 9.99)]) == (
            "/products?maxprice=9.99"
        )

    def test_segments_not_encoded(self):
        """Test segments are used verbatim."""
        assert absolute(["a b", "c%2Fd"], []) == "/a b/c%2Fd"

    def test_segment_with_slash_is_not_rejected(self):
        """Test a slash inside a segment passes through."""
        assert absolute(["a/b", "c"], []) == "/a/b/c"


class TestRelative:
    """Test suite for relative URLs."""

    def test_empty(self):
        """Test no segments and no parameters."""
        assert relative([], []) == ""

    def test_segments(self):
        """Test there is no leading slash."""
        assert relative(["blog", "2019"], []) == "blog/2019"

    def test_query_only(self):
        """Test parameters without a path."""
        assert relative([], [int_("page", 2)]) == "?page=2"


class TestCrossOrigin:
    """Test suite for cross-origin URLs."""

    def test_empty_path(self):
        """Test the pre-path is followed by a slash."""
        assert cross_origin("https://example.com", [], []) == "https://example.com/"

    def test_with_port_path_and_query(self):
        """Test pre-path is used verbatim."""
        url = cross_origin(
            "https://example.com:8042",
            ["over", "there"],
            [string("name", "ferret")],
        )

        assert url == "https://example.com:8042/over/there?name=ferret"


class TestCustom:
    """Test suite for custom URLs with fragments."""

    def test_absolute_with_fragment(self):
        """Test fragment is appended after the path."""
        assert custom(Absolute(), ["x"], [], "frag") == "/x#frag"

    def test_no_fragment(self):
        """Test nothing is appended without a fragment."""
        assert custom(Relative(), ["x"], [], None) == "x"
        assert custom(Relative(), ["x"], []) == "x"

    def test_empty_fragment_is_appended(self):
        """Test an empty fragment still adds the hash."""
        assert custom(Absolute(), [], [], "") == "/#"

    def test_fragment_after_query(self):
        """Test order is path, query, fragment."""
        url = custom(
            CrossOrigin("https://example.com"),
            ["packages", "elm", "core"],
            [int_("page", 1)],
            "tutorial",
        )

        assert url == "https://example.com/packages/elm/core?page=1#tutorial"

    @pytest.mark.parametrize(
        ("root", "build"),
        [
            (Absolute(), lambda s, p: absolute(s, p)),
            (Relative(), lambda s, p: relative(s, p)),
            (CrossOrigin("https://a.io"), lambda s, p: cross_origin("https://a.io", s, p)),
        ],
    )
    def test_matches_specific_builders(self, root, build):
        """Test custom without a fragment equals the root-specific builder."""
        segments = ["one", "two"]
        params = [string("q", "x y")]

        assert custom(root, segments, params) == build(segments, params)


class TestRoot:
    """Test suite for root selectors."""

    def test_root_prefix(self):
        """Test prefix for each root kind."""
        assert root_prefix(Absolute()) == "/"
        assert root_prefix(Relative()) == ""
        assert root_prefix(CrossOrigin("https://example.com")) == "https://example.com/"

    def test_roots_are_values(self):
        """Test roots compare and hash by value."""
        assert CrossOrigin("https://a.io") == CrossOrigin("https://a.io")
        assert Absolute() == Absolute()
        assert len({Absolute(), Absolute(), Relative()}) == 2
