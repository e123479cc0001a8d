"""Cabinet Dimensions launcher — starts the API server on a free local port."""

from __future__ import annotations

import logging
import socket

import uvicorn

from cabinet_dims.config import settings

logger = logging.getLogger("cabinet_dims.launcher")


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = find_free_port()
    logger.info("Starting %s on http://127.0.0.1:%d", settings.app_name, port)

    uvicorn.run(
        "cabinet_dims.main:app",
        host="127.0.0.1",
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
