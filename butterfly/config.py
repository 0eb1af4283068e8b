"""
BUTTERFLY CONFIGURATION

Environment-driven settings for the portal app.

Requirements:
• Never hardcode deployment values (use os.getenv)
• The engine never reads DEFAULT_ACTOR, only the app does
"""

import logging
import os

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("BUTTERFLY_LOG_LEVEL", "INFO")
DEFAULT_ACTOR = os.getenv("BUTTERFLY_DEFAULT_ACTOR", "Subscriber")
PAGE_TITLE = os.getenv("BUTTERFLY_PAGE_TITLE", "Butterfly Portal")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Configure root logging once; later calls are no-ops.

    An unknown level name falls back to INFO with a warning.
    """
    level_name = level.strip().upper()

    if isinstance(logging.getLevelName(level_name), int):
        logging.basicConfig(level=level_name, format=LOG_FORMAT)
        return

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logger.warning(f"Unknown BUTTERFLY_LOG_LEVEL '{level}', using INFO")
