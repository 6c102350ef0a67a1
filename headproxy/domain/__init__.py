"""Domain objects for headproxy - explicit re-exports to satisfy linters."""
from .fetched_page import FetchedPage as FetchedPage

__all__ = ["FetchedPage"]
