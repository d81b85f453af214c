import pytest

from vultus.links.uri import build_query, validate_uri
from vultus.pacts import InvalidUriError


class TestBuildQuery:
    def test_empty(self):
        assert build_query({}) == ""

    def test_keeps_insertion_order(self):
        params = {"s": "64", "d": "retro"}

        assert build_query(params) == "?s=64&d=retro"

    @pytest.mark.parametrize(
        ("value", "escaped"),
        (
            ("a b", "a%20b"),
            ("a&b", "a%26b"),
            ("a=b", "a%3Db"),
            ("a/b", "a%2Fb"),
            ("a+b", "a%2Bb"),
            ("ü", "%C3%BC"),
            ("a-b.c_d~e", "a-b.c_d~e"),
        ),
    )
    def test_escapes_values_as_data(self, value, escaped):
        assert build_query({"d": value}) == f"?d={escaped}"


class TestValidateUri:
    @pytest.mark.parametrize(
        "uri",
        (
            "http://cdn.libravatar.org/avatar/abc",
            "https://seccdn.libravatar.org/avatar/abc?s=32&d=404",
            "http://localhost:8000/avatar/abc",
            "http://[::1]/avatar/abc",
            "https://example.com/avatar/abc?d=http%3A%2F%2Fx",
        ),
    )
    def test_accepts(self, uri):
        assert validate_uri(uri) == uri

    @pytest.mark.parametrize(
        "uri",
        (
            "http://exa mple.com/avatar/",
            "http://example.com/avatar/\n",
            "http://example.com/ävatar/",
            'http://example.com/"avatar"/',
            "http://example.com/%zz",
            "/avatar/abc",
            "cdn.libravatar.org/avatar/abc",
            "http:///avatar/abc",
            "http://example.com:http/avatar/",
            "http://[::1/avatar/",
        ),
    )
    def test_rejects(self, uri):
        with pytest.raises(InvalidUriError):
            validate_uri(uri)
