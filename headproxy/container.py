"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from headproxy import config as env
from headproxy.services.error_presenter import ErrorPresenter
from headproxy.services.head_extractor import HeadExtractor
from headproxy.services.head_proxy import HeadProxy
from headproxy.services.http_service import HttpService
from headproxy.services.link_rewriter import LinkRewriter


# Environment variables used by the container (read via `headproxy.config` helpers).
#
# HEADPROXY_HTTP_TIMEOUT (float seconds | optional)
#   Timeout for the outbound fetch. Unset means no timeout: a slow remote host
#   stalls the host page render for as long as it takes to answer.
#
# HEADPROXY_HOST (str, default: "0.0.0.0")
# HEADPROXY_PORT (int, default: 8000)
#   Bind address used by run.py.
#
# LOG_LEVEL (str, default: "INFO")
#   Root log level configured by run.py.
ENV = {
    "HEADPROXY_HTTP_TIMEOUT": env.http_timeout_seconds(),
    "HEADPROXY_HOST": env.server_host(),
    "HEADPROXY_PORT": env.server_port(),
    "LOG_LEVEL": env.log_level(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for headproxy."""

    config = providers.Configuration(default=ENV)

    # Stateless stages can be shared.
    head_extractor = providers.Singleton(HeadExtractor)
    link_rewriter = providers.Singleton(LinkRewriter)
    error_presenter = providers.Singleton(ErrorPresenter)

    # Each fetch opens its own session.
    http_service = providers.Factory(
        HttpService,
        session_factory=providers.Object(requests.Session),
        timeout=config.HEADPROXY_HTTP_TIMEOUT,
    )

    head_proxy = providers.Factory(
        HeadProxy,
        http_service=http_service,
        head_extractor=head_extractor,
        link_rewriter=link_rewriter,
        error_presenter=error_presenter,
    )
