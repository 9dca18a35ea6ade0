"""
Logging setup for processes that embed the form validators.
"""
import logging
from typing import Optional

from .settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at %s", settings.log_level.upper())
