from headproxy.exceptions import MissingCloseMarkerError, MissingOpenMarkerError

OPEN_MARKER = b"<head>"
CLOSE_MARKER = b"</head>"


class HeadExtractor:
    """Slice the contents of the <head> element out of a raw payload.

    Markers are matched literally (case-sensitive, no attributes) and the first
    occurrence of each wins. No attempt is made to pair nested or repeated
    head regions.
    """

    def extract(self, body: bytes, url: str = "") -> bytes:
        start = body.find(OPEN_MARKER)
        if start == -1:
            raise MissingOpenMarkerError(url)

        content_start = start + len(OPEN_MARKER)
        end = body.find(CLOSE_MARKER, content_start)
        if end == -1:
            raise MissingCloseMarkerError(url)

        return body[content_start:end]
