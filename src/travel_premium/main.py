"""Application entry point."""

from __future__ import annotations

import uvicorn

from travel_premium.api.app import create_app
from travel_premium.core.container import build_container
from travel_premium.core.logging_setup import configure_logging


def run() -> None:
    """Serve the pricing API."""
    container = build_container()
    configure_logging(container.config.logging)

    app = create_app(container)
    uvicorn.run(
        app,
        host=container.config.server.host,
        port=container.config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
