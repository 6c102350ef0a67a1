from typing import Optional

from fastapi import APIRouter


def _describe(value) -> Optional[str]:
    return None if value is None else str(value)


def create_systems_router(container_env: dict, service_name: str = "headproxy"):
    router = APIRouter(prefix="/systems", tags=["System"])
    fetch_timeout = container_env.get("HEADPROXY_HTTP_TIMEOUT")

    @router.get("/health")
    def health():
        return {"status": "ok", "service": service_name, "fetch_timeout_seconds": fetch_timeout}

    @router.get("/config")
    def get_config():
        """Effective headproxy settings, with a warning for each risky default."""
        warnings = []
        if fetch_timeout is None:
            warnings.append("HEADPROXY_HTTP_TIMEOUT is unset: a slow remote page stalls every /preview render")
        return {
            "service": service_name,
            "environment": {key: _describe(value) for key, value in container_env.items()},
            "warnings": warnings,
        }

    return router
