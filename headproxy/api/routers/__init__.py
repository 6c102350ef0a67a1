"""API router factory functions."""
from .preview import create_preview_router
from .systems import create_systems_router

__all__ = [
    "create_preview_router",
    "create_systems_router",
]
