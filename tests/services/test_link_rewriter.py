from unittest.mock import Mock

import pytest
from bs4 import ParserRejectedMarkup

from headproxy.exceptions import FragmentParseError, SerializationError
from headproxy.services.link_rewriter import LinkRewriter, resolve_href

BASE = "https://example.com/dir/page"


def test_absolute_path_href_is_resolved():
    out = LinkRewriter().rewrite("https://example.com/page", b'<link href="/style.css">')
    assert 'href="https://example.com/style.css"' in out


@pytest.mark.parametrize("href, expected", [
    ("css/a.css", "https://example.com/dir/css/a.css"),
    ("../up.css", "https://example.com/up.css"),
    ("//cdn.example.com/a.css", "https://cdn.example.com/a.css"),
    ("?v=2", "https://example.com/dir/page?v=2"),
    ("#top", "https://example.com/dir/page#top"),
])
def test_relative_forms_resolve_differently(href, expected):
    assert resolve_href(BASE, href) == expected


def test_absolute_href_is_unchanged():
    out = LinkRewriter().rewrite(BASE, b'<link rel="stylesheet" href="https://cdn.example.com/a.css">')
    assert 'href="https://cdn.example.com/a.css"' in out
    assert resolve_href(BASE, "HTTPS://CDN.example.com/./a.css") is None
    assert resolve_href(BASE, "data:text/css,body{}") is None


def test_invalid_href_is_left_untouched():
    fragment = b'<link href="http://[::1"><link href="/ok.css">'
    out = LinkRewriter().rewrite(BASE, fragment)
    assert 'href="http://[::1"' in out
    assert 'href="https://example.com/ok.css"' in out


def test_only_link_elements_are_rewritten():
    fragment = (
        b'<title>Hi</title>'
        b'<meta property="og:image" content="/img.png">'
        b'<script src="/app.js"></script>'
        b'<link rel="icon">'
    )
    out = LinkRewriter().rewrite(BASE, fragment)
    assert "<title>Hi</title>" in out
    assert 'content="/img.png"' in out
    assert 'src="/app.js"' in out
    assert "<link rel=\"icon\"/>" in out


def test_declared_encoding_is_used():
    fragment = '<title>caf\u00e9</title><link href="a.css">'.encode("latin-1")
    out = LinkRewriter().rewrite(BASE, fragment, "iso-8859-1")
    assert "<title>caf\u00e9</title>" in out


def test_parse_failure_raises_fragment_parse_error():
    def _reject(markup, encoding=None):
        raise ParserRejectedMarkup("bad markup")

    with pytest.raises(FragmentParseError) as exc:
        LinkRewriter(soup_factory=_reject).rewrite(BASE, b"<title>x</title>")
    assert BASE in str(exc.value)


def test_render_failure_raises_serialization_error():
    head = Mock()
    head.find_all.return_value = []
    head.decode_contents.side_effect = RecursionError("maximum recursion depth exceeded")
    soup = Mock(find=Mock(return_value=head))

    with pytest.raises(SerializationError) as exc:
        LinkRewriter(soup_factory=lambda markup, encoding=None: soup).rewrite(BASE, b"<title>x</title>")
    assert exc.value.stage == "rewrite"
