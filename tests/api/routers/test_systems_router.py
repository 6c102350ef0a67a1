from headproxy.api.routers.systems import create_systems_router


def _get_endpoint(router, path: str):
    for route in router.routes:
        if getattr(route, "path", None) == path:
            return route.endpoint
    raise AssertionError(f"No route found for {path}")


def test_health_reports_fetch_timeout():
    router = create_systems_router({"HEADPROXY_HTTP_TIMEOUT": 2.5})
    assert _get_endpoint(router, "/systems/health")() == {
        "status": "ok", "service": "headproxy", "fetch_timeout_seconds": 2.5,
    }


def test_config_warns_when_fetch_is_unbounded():
    router = create_systems_router({"HEADPROXY_HTTP_TIMEOUT": None, "HEADPROXY_PORT": 8000})
    body = _get_endpoint(router, "/systems/config")()
    assert body["environment"] == {"HEADPROXY_HTTP_TIMEOUT": None, "HEADPROXY_PORT": "8000"}
    assert len(body["warnings"]) == 1
    assert "HEADPROXY_HTTP_TIMEOUT" in body["warnings"][0]


def test_config_has_no_warnings_with_timeout():
    router = create_systems_router({"HEADPROXY_HTTP_TIMEOUT": 5.0})
    assert _get_endpoint(router, "/systems/config")()["warnings"] == []
