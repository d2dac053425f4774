"""One-call wiring of response-kit into a FastAPI application.

Configures JSON logging at the settings' log level, then installs the
envelope exception handlers.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from response_kit.config.settings import ResponseKitSettings
from response_kit.errors.error_handler import register_error_handlers
from response_kit.logging_config import configure_logging

logger = logging.getLogger(__name__)


def setup_app(app: FastAPI, settings: ResponseKitSettings | None = None) -> ResponseKitSettings:
    """Configure logging and error handlers; returns the settings in effect."""
    settings = settings or ResponseKitSettings()
    configure_logging(settings.log_level)
    register_error_handlers(app, settings)
    logger.debug("Envelope error handlers registered")
    return settings
