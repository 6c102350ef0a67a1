from fastapi import FastAPI

from headproxy.api.routers import create_preview_router, create_systems_router
from headproxy.container import ENV, Container


def create_app(container: Container) -> FastAPI:
    """Return the FastAPI app with the preview and system endpoints."""
    app = FastAPI(title="headproxy")
    app.include_router(create_systems_router(ENV))
    app.include_router(create_preview_router(container.head_proxy))
    return app
