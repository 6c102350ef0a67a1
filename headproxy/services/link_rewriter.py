import logging
from typing import Callable, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from headproxy.exceptions import FragmentParseError, SerializationError
from headproxy.services.url_resolver import parse_reference

logger = logging.getLogger(__name__)


def resolve_href(base_url: str, href: str) -> Optional[str]:
    """Return the absolute form of `href`, or None when the attribute should be left alone.

    None covers both unparseable references and references that are already
    absolute.
    """
    try:
        reference = parse_reference(href)
    except ValueError:
        logger.debug("Ignoring invalid href %r on %s", href, base_url)
        return None
    if reference.scheme:
        return None
    return urljoin(base_url, href)


class LinkRewriter:
    """Rewrite relative link[href] values in a <head> fragment into absolute URLs."""

    def __init__(
        self,
        soup_factory: Optional[Callable[..., BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (
            lambda markup, encoding=None: BeautifulSoup(markup, "html.parser", from_encoding=encoding)
        )

    def rewrite(self, base_url: str, fragment: bytes, encoding: Optional[str] = None) -> str:
        # The fragment is wrapped back into a head element so it parses as one subtree.
        try:
            soup = self._soup_factory(b"<head>" + fragment + b"</head>", encoding)
        except (ParserRejectedMarkup, RecursionError) as e:
            raise FragmentParseError(base_url, e) from e

        head = soup.find("head")
        if head is None:
            raise FragmentParseError(base_url, ValueError("parsed document has no <head> element"))

        rewritten = 0
        for link in head.find_all("link"):
            if self._rewrite_link(base_url, link):
                rewritten += 1
        logger.debug("Rewrote %d link href(s) from %s", rewritten, base_url)

        try:
            return head.decode_contents()
        except (RecursionError, ValueError) as e:
            raise SerializationError(base_url, e) from e

    def _rewrite_link(self, base_url: str, link: Tag) -> bool:
        href = link.get("href")
        if href is None:
            return False
        resolved = resolve_href(base_url, href)
        if resolved is None:
            return False
        link["href"] = resolved
        return True
