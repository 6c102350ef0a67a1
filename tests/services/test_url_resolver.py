import pytest

from headproxy.exceptions import InvalidURLError
from headproxy.services.url_resolver import parse_reference, resolve_url


def test_missing_scheme_defaults_to_https():
    assert resolve_url("example.com/page") == "https://example.com/page"


def test_protocol_relative_gets_https():
    assert resolve_url("//cdn.example.com/a.css") == "https://cdn.example.com/a.css"


def test_absolute_url_is_kept():
    assert resolve_url("http://example.com/a?b=1#top") == "http://example.com/a?b=1#top"


def test_surrounding_whitespace_is_ignored():
    assert resolve_url("  example.com  ") == "https://example.com"


@pytest.mark.parametrize("url", ["", "   ", "http://[::1", "https://example.com:abc/", "https://exa mple.com/"])
def test_unparseable_url_raises(url):
    with pytest.raises(InvalidURLError) as exc:
        resolve_url(url)
    assert exc.value.stage == "resolve"
    assert str(exc.value).startswith("headproxy: failed to parse URL")


def test_parse_reference_rejects_bad_escapes_and_control_chars():
    for value in ["/a%zz", "/a%2", "/a\x00b", "/a\nb"]:
        with pytest.raises(ValueError):
            parse_reference(value)


def test_parse_reference_accepts_relative_forms():
    assert parse_reference("../style.css").path == "../style.css"
    assert parse_reference("//cdn.example.com/x").netloc == "cdn.example.com"
    assert parse_reference("/a%20b.css").path == "/a%20b.css"
