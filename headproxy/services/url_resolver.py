"""Source URL normalization and URL-reference parsing."""
import re
from urllib.parse import SplitResult, urlsplit, urlunsplit

from headproxy.exceptions import InvalidURLError

DEFAULT_SCHEME = "https"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_reference(value: str) -> SplitResult:
    """Split `value` into URL components, raising ValueError when it is not a valid reference.

    urlsplit() alone accepts almost anything, so the checks it skips are made here:
    control characters, malformed percent-escapes, whitespace in the authority
    and non-numeric ports.
    """
    if _CONTROL_CHARS.search(value):
        raise ValueError(f"invalid control character in URL {value!r}")
    if _BAD_PERCENT_ESCAPE.search(value):
        raise ValueError(f"invalid URL escape in {value!r}")
    parts = urlsplit(value)
    if " " in parts.netloc:
        raise ValueError(f"invalid character ' ' in host name {parts.netloc!r}")
    # Accessing .port validates it.
    parts.port
    return parts


def resolve_url(url: str) -> str:
    """Return `url` as an absolute URL, assuming https when no scheme is given.

    A bare "example.com/page" has no scheme and no authority; its first path
    segment is taken as the host.
    """
    try:
        if not url or not url.strip():
            raise ValueError("empty URL")
        parts = parse_reference(url.strip())
        if not parts.scheme and not parts.netloc:
            parts = parse_reference("//" + url.strip())
    except ValueError as e:
        raise InvalidURLError(url, e) from e

    scheme = parts.scheme or DEFAULT_SCHEME
    return urlunsplit((scheme, parts.netloc, parts.path, parts.query, parts.fragment))
