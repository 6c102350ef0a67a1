import logging
from typing import Optional

from headproxy.exceptions import HeadProxyError
from headproxy.services.error_presenter import ErrorPresenter
from headproxy.services.head_extractor import HeadExtractor
from headproxy.services.http_service import HttpService
from headproxy.services.link_rewriter import LinkRewriter
from headproxy.services.url_resolver import resolve_url

logger = logging.getLogger(__name__)


class HeadProxy:
    """Borrow the <head> contents of a remote page for embedding in the host page.

    Pipeline: resolve URL -> fetch -> extract <head> -> rewrite link hrefs.
    Any failure is handed to the ErrorPresenter, so callers always get markup
    back and the host page render never fails because of an embed.
    """

    def __init__(
        self,
        http_service: HttpService,
        head_extractor: Optional[HeadExtractor] = None,
        link_rewriter: Optional[LinkRewriter] = None,
        error_presenter: Optional[ErrorPresenter] = None,
    ):
        self.http_service = http_service
        self.head_extractor = head_extractor or HeadExtractor()
        self.link_rewriter = link_rewriter or LinkRewriter()
        self.error_presenter = error_presenter or ErrorPresenter()

    def extract_content(self, response, request, url: str) -> str:
        """Return the rewritten <head> contents of `url`, or an error notice.

        `request` supplies the headers for the outbound GET; `response` receives
        the remote response headers whatever the outcome of later stages.
        """
        try:
            return self._run(response, request, url)
        except HeadProxyError as e:
            logger.error("[%s] %s", e.stage, e)
            return self.error_presenter.present(e)
        except Exception as e:
            logger.exception("Unexpected error embedding head of %s", url)
            return self.error_presenter.present(e)

    def _run(self, response, request, url: str) -> str:
        absolute_url = resolve_url(url)
        page = self.http_service.fetch(absolute_url, request.headers, response.headers)
        content = self.head_extractor.extract(page.body, absolute_url)
        return self.link_rewriter.rewrite(absolute_url, content, page.encoding)


def extract_content(response, request, url: str, timeout: Optional[float] = None) -> str:
    """Run the pipeline once with default collaborators."""
    return HeadProxy(HttpService(timeout=timeout)).extract_content(response, request, url)
