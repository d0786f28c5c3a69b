"""Standard-library logging configuration.

Scripts and third-party libraries log through ``logging``; application code
logs through logfire, which is configured separately in
``gatehouse.util.observability``.
"""

import logging
import sys

from gatehouse.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the process.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "test":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Keep client libraries quiet unless debugging
    for noisy in ("httpx", "httpcore", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.DEBUG if settings.debug else logging.WARNING)

    logging.getLogger("gatehouse").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
