"""headproxy - borrow the <head> of a remote page for embedding in another."""
from headproxy.services.head_proxy import HeadProxy, extract_content

__all__ = ["HeadProxy", "extract_content"]
