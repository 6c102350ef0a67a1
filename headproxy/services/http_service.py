import logging
import re
from typing import Callable, Mapping, MutableMapping, Optional

import requests

from headproxy.domain import FetchedPage
from headproxy.exceptions import (
    BodyReadError,
    RequestConstructionError,
    ResponseCloseError,
    TransportError,
)

logger = logging.getLogger(__name__)

# Describe the inbound connection, not the outbound one.
SKIPPED_REQUEST_HEADERS = frozenset({
    "host", "content-length", "accept-encoding",
    "connection", "keep-alive", "proxy-connection", "te", "trailer", "transfer-encoding", "upgrade",
})

# Describe the remote body; the host response frames its own body.
SKIPPED_RESPONSE_HEADERS = frozenset({
    "content-length", "content-encoding", "transfer-encoding", "connection",
})

_CHARSET = re.compile(r"charset=[\"']?([^\"';\s]+)", re.IGNORECASE)


class HttpService:
    """
    Fetches the remote page for one pipeline invocation.

    Takes a session_factory callable for dependency injection; every fetch
    opens its own session so nothing is shared between invocations.
    """

    def __init__(self, session_factory: Callable[[], requests.Session] = requests.Session, timeout: Optional[float] = None):
        self.session_factory = session_factory
        self.timeout = timeout

    def fetch(
        self,
        url: str,
        request_headers: Mapping[str, str],
        response_headers: MutableMapping[str, str],
    ) -> FetchedPage:
        """GET `url` with the inbound request's headers and copy the remote headers onto `response_headers`.

        Header propagation happens before the body is read, so it is kept even
        when reading, closing or any later pipeline stage fails.
        """
        try:
            prepared = requests.Request("GET", url, headers=outbound_headers(request_headers)).prepare()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RequestConstructionError(url, e) from e

        with self.session_factory() as session:
            try:
                resp = session.send(prepared, stream=True, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                raise TransportError(url, e) from e

            copy_response_headers(resp, response_headers)

            try:
                body = resp.content
            except requests.exceptions.RequestException as e:
                self._close_after_failure(resp, url)
                raise BodyReadError(url, e) from e

            try:
                resp.close()
            except OSError as e:
                raise ResponseCloseError(url, e) from e

        logger.info("Fetched %s (status=%s, %d bytes)", url, resp.status_code, len(body))
        return FetchedPage(url, resp.status_code, body, declared_charset(resp.headers.get("Content-Type")))

    def _close_after_failure(self, resp, url: str) -> None:
        # The read error is the one reported.
        try:
            resp.close()
        except OSError:
            logger.warning("Error closing response from %s after failed read", url, exc_info=True)


def outbound_headers(request_headers: Mapping[str, str]) -> dict:
    """Return the inbound request headers as a plain dict, comma-joining repeated names."""
    getlist = getattr(request_headers, "getlist", None)
    headers = {}
    for name in request_headers.keys():
        if name.lower() in SKIPPED_REQUEST_HEADERS or name in headers:
            continue
        values = getlist(name) if getlist is not None else [request_headers[name]]
        headers[name] = ", ".join(values)
    return headers


def copy_response_headers(resp, response_headers: MutableMapping[str, str]) -> None:
    """Overwrite `response_headers` with every header of `resp`, joining repeated values with ','."""
    raw_headers = getattr(getattr(resp, "raw", None), "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        items = [(name, raw_headers.getlist(name)) for name in raw_headers.keys()]
    else:
        items = [(name, [value]) for name, value in resp.headers.items()]

    for name, values in items:
        if name.lower() in SKIPPED_RESPONSE_HEADERS:
            continue
        response_headers[name] = ",".join(values)


def declared_charset(content_type: Optional[str]) -> Optional[str]:
    if not content_type:
        return None
    match = _CHARSET.search(content_type)
    return match.group(1) if match else None
