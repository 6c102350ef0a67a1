from typing import NamedTuple, Optional


class FetchedPage(NamedTuple):
    """Remote payload returned by one fetch. Lives for a single pipeline call."""
    url: str
    status_code: int
    body: bytes
    encoding: Optional[str] = None
