"""Tests for roost.routing.params — parameter extraction."""

from roost.routing.params import extract_params, split_wildcard
from roost.routing.route import RouteSpec


class TestExtractParams:
    def test_starts_from_defaults(self) -> None:
        route = RouteSpec("/users/{id}", values={"format": "html"})
        assert extract_params(route, {}) == {"format": "html", "id": None}

    def test_captures_override_defaults(self) -> None:
        route = RouteSpec("/users/{id}", values={"id": "0"})
        assert extract_params(route, {"id": "5"}) == {"id": "5"}

    def test_empty_capture_is_absent(self) -> None:
        route = RouteSpec("/users/{id}", values={"id": "0"})
        assert extract_params(route, {"id": ""}) == {"id": "0"}

    def test_none_capture_is_absent(self) -> None:
        route = RouteSpec("/users/{id}", values={"id": "0"})
        assert extract_params(route, {"id": None}) == {"id": "0"}

    def test_percent_decoding(self) -> None:
        route = RouteSpec("/files/{name}")
        assert extract_params(route, {"name": "a%2Fb%20c"}) == {"name": "a/b c"}

    def test_plus_is_not_a_space(self) -> None:
        route = RouteSpec("/q/{term}")
        assert extract_params(route, {"term": "a+b"}) == {"term": "a+b"}

    def test_positional_keys_ignored(self) -> None:
        route = RouteSpec("/users/{id}")
        assert extract_params(route, {0: "/users/5", "id": "5"}) == {"id": "5"}

    def test_non_string_capture_kept(self) -> None:
        route = RouteSpec("/users/{id}")
        assert extract_params(route, {"id": 5}) == {"id": 5}

    def test_does_not_mutate_route_values(self) -> None:
        route = RouteSpec("/users/{id}")
        extract_params(route, {"id": "5"})
        assert route.values == {"id": None}

    def test_wildcard_split(self) -> None:
        route = RouteSpec("/files", wildcard="path")
        assert extract_params(route, {"path": "a/b/c"}) == {"path": ["a", "b", "c"]}

    def test_wildcard_missing(self) -> None:
        route = RouteSpec("/files", wildcard="path")
        assert extract_params(route, {}) == {"path": []}

    def test_wildcard_encoded_separator_splits(self) -> None:
        route = RouteSpec("/files", wildcard="path")
        assert extract_params(route, {"path": "a%2Fb"}) == {"path": ["a", "b"]}


class TestSplitWildcard:
    def test_empty(self) -> None:
        assert split_wildcard("") == []
        assert split_wildcard(None) == []

    def test_segments(self) -> None:
        assert split_wildcard("a/b%20c") == ["a", "b c"]

    def test_keeps_empty_segments(self) -> None:
        assert split_wildcard("a//b") == ["a", "", "b"]

    def test_sequence_passthrough(self) -> None:
        assert split_wildcard(("a", "b")) == ["a", "b"]
