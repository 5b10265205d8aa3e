"""
Main application entry point.
Configures logging and serves the price app with uvicorn.
"""
import logging
import sys

import uvicorn

from elektron.api.routes import create_app
from elektron.config.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True,
)

logger = logging.getLogger(__name__)

app = create_app()


def main():
    """Run the application."""
    logger.info(
        "Configuration loaded",
        extra={
            "host": settings.host,
            "port": settings.port,
            "log_level": settings.log_level,
            "zone": settings.zone,
            "upstream_base_url": settings.upstream_base_url,
            "font_dir": str(settings.font_dir),
        },
    )
    logger.info(f"Server running on http://localhost:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
