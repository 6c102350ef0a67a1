import logging
from typing import Optional

import uvicorn

from headproxy.api.server import create_app
from headproxy.container import Container

logger = logging.getLogger(__name__)


def main(container: Optional[Container] = None):
    container = container or Container()
    logging.basicConfig(
        level=container.config.LOG_LEVEL() or "INFO",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = container.config.HEADPROXY_HOST() or "0.0.0.0"
    port = container.config.HEADPROXY_PORT() or 8000

    app = create_app(container)
    logger.info("headproxy listening on %s:%s", host, port)
    # Date and Server come from the borrowed page, not uvicorn defaults.
    uvicorn.run(app, host=host, port=port, server_header=False, date_header=False)


if __name__ == '__main__':
    main()
