"""Custom exceptions for the headproxy pipeline.

Every stage raises a subclass of HeadProxyError. Only the pipeline entry
point (HeadProxy.extract_content) turns them into a rendered notice.
"""
from typing import Optional


class HeadProxyError(Exception):
    """Base class for pipeline failures."""

    stage = "pipeline"

    def __init__(self, url: str, message: str, original: Optional[Exception] = None):
        self.url = url
        self.original = original
        super().__init__(f"headproxy: {message}")


class InvalidURLError(HeadProxyError):
    """Raised when the source URL cannot be parsed."""

    stage = "resolve"

    def __init__(self, url: str, original: Exception):
        super().__init__(url, f"failed to parse URL {url}: {original}", original)


class RequestConstructionError(HeadProxyError):
    """Raised when the outbound GET request cannot be built."""

    stage = "fetch"

    def __init__(self, url: str, original: Exception):
        super().__init__(url, f"failed to create http request to URL {url}: {original}", original)


class TransportError(HeadProxyError):
    """Raised when the GET fails due to network/transport errors."""

    stage = "fetch"

    def __init__(self, url: str, original: Exception):
        super().__init__(url, f"failed to GET URL {url}: {original}", original)


class BodyReadError(HeadProxyError):
    stage = "fetch"

    def __init__(self, url: str, original: Exception):
        super().__init__(url, f"failed to read body from URL {url}: {original}", original)


class ResponseCloseError(HeadProxyError):
    stage = "fetch"

    def __init__(self, url: str, original: Exception):
        super().__init__(url, f"failed to close response from URL {url}: {original}", original)


class MissingOpenMarkerError(HeadProxyError):
    """Raised when the payload has no opening <head> tag."""

    stage = "extract"

    def __init__(self, url: str):
        super().__init__(url, f"opening <head> tag not present in payload from URL {url}")


class MissingCloseMarkerError(HeadProxyError):
    """Raised when the payload has no closing </head> tag after the opening one."""

    stage = "extract"

    def __init__(self, url: str):
        super().__init__(url, f"closing </head> tag not present in payload from URL {url}")


class FragmentParseError(HeadProxyError):
    stage = "rewrite"

    def __init__(self, url: str, original: Exception):
        super().__init__(
            url, f"failed to create new document from <head> contents from URL {url}: {original}", original
        )


class SerializationError(HeadProxyError):
    stage = "rewrite"

    def __init__(self, url: str, original: Exception):
        super().__init__(url, f"failed to render <head> contents from URL {url}: {original}", original)
