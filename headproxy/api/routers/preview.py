import html
from typing import Callable
from urllib.parse import urlsplit

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from headproxy.exceptions import InvalidURLError
from headproxy.services.head_proxy import HeadProxy
from headproxy.services.http_service import declared_charset
from headproxy.services.url_resolver import resolve_url

LINKABLE_SCHEMES = ("http", "https")

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
{head}
</head>
<body>
<p>Previewing {source}</p>
</body>
</html>
"""


def source_markup(url: str) -> str:
    """Name the source page, linking it only when it resolves to an http(s) URL."""
    try:
        absolute_url = resolve_url(url)
    except InvalidURLError:
        return html.escape(url)
    if urlsplit(absolute_url).scheme.lower() not in LINKABLE_SCHEMES:
        return html.escape(url)
    return f'<a href="{html.escape(absolute_url)}">{html.escape(url)}</a>'


def set_page_body(response: HTMLResponse, page: str) -> None:
    """Encode `page` in the charset the response finally declares and frame it."""
    charset = declared_charset(response.headers.get("content-type")) or response.charset
    try:
        body = page.encode(charset, errors="xmlcharrefreplace")
    except LookupError:
        response.headers["content-type"] = f"{response.media_type}; charset={response.charset}"
        body = page.encode(response.charset)
    response.body = body
    response.headers["content-length"] = str(len(body))


def create_preview_router(head_proxy_factory: Callable[[], HeadProxy]):
    """Create a router that renders a host page borrowing the <head> of another page."""
    router = APIRouter(tags=["Preview"])

    @router.get("/preview", response_class=HTMLResponse)
    def preview(url: str, request: Request):
        # Built first so the remote headers overwrite the host page's own entries.
        response = HTMLResponse()
        head = head_proxy_factory().extract_content(response, request, url)
        set_page_body(response, PAGE_TEMPLATE.format(head=head, source=source_markup(url)))
        return response

    return router
