"""Main application entry point.

Serves the NiceGUI chat (``/``) and upload (``/upload``) pages.
The chat backend is reached at API_BASE_URL; environment variables are
loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Registers the pages and starts the NiceGUI server on HOST:PORT
    (default 0.0.0.0:8080).
    """
    from nicegui import ui

    from src.api.config import get_client_config
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page
    from src.ui.upload_page import upload_page  # noqa: F401 - Registers the page

    config = get_client_config()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))

    logger.info(f"Using chat backend at {config.api_base_url}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    ui.run(
        title="Digital Clone",
        host=host,
        port=port,
        reload=False,
        show=False,
        uvicorn_logging_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
