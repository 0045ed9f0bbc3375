"""Entry point for running the chat edge service."""

import logging
import uvicorn

from .config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def main():
    """Run the chat edge service."""
    settings = get_settings()

    logger.info(
        f"Starting chat edge service on {settings.app_host}:{settings.app_port} "
        f"(pages: {settings.asset_store_backend})"
    )

    uvicorn.run(
        "chat_edge_service.api.app:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
