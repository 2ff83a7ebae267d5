import pytest
from httpx import URL

from authhelper import build_url
from authhelper._utils import parse_url


class TestBuildUrl:
    @pytest.mark.parametrize("params", [None, {}])
    def test_no_params_returns_endpoint(self, params):
        endpoint = "https://api.example.com/items?keep=1"
        assert build_url(endpoint, params) == endpoint

    def test_sets_query_string(self):
        result = build_url("https://api.example.com/items", {"a": "1", "b": "2"})
        assert dict(URL(result).params) == {"a": "1", "b": "2"}
        assert result.startswith("https://api.example.com/items?")

    def test_replaces_existing_query(self):
        result = build_url("https://api.example.com/items?old=1", {"new": "2"})
        assert dict(URL(result).params) == {"new": "2"}

    def test_percent_encodes_values(self):
        result = build_url("https://api.example.com/items", {"q": "a b&c=d"})
        assert "a b&c=d" not in result
        assert URL(result).params["q"] == "a b&c=d"

    def test_spaces_use_percent_encoding(self):
        result = build_url("https://api.example.com/items", {"q": "a b"})
        assert result == "https://api.example.com/items?q=a%20b"

    def test_reserved_characters_are_escaped(self):
        result = build_url("https://api.example.com/items", {"q": "a b&c=d"})
        assert result == "https://api.example.com/items?q=a%20b%26c%3Dd"

    def test_unparseable_endpoint_unchanged(self):
        endpoint = "https://example.com:abc/"
        assert build_url(endpoint, {"a": "1"}) == endpoint


class TestParseUrl:
    def test_valid(self):
        url = parse_url("https://api.example.com:8443/items")
        assert url is not None
        assert url.host == "api.example.com"
        assert url.port == 8443

    @pytest.mark.parametrize(
        "endpoint", ["", "items", "mailto:user@example.com", "https://example.com:abc/"]
    )
    def test_invalid(self, endpoint):
        assert parse_url(endpoint) is None
