"""Pydantic Settings for the response helpers.

All environment variables use the RESPONSE_KIT_ prefix.
Example: RESPONSE_KIT_LOG_LEVEL=DEBUG, RESPONSE_KIT_EXPOSE_INTERNAL_ERRORS=true
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ResponseKitSettings(BaseSettings):
    """Envelope and error-handler configuration validated from environment variables."""

    log_level: str = "INFO"

    # Put the exception text into 500 envelopes instead of the generic message
    expose_internal_errors: bool = False

    # Log 4xx service errors at WARNING (5xx are always logged)
    log_client_errors: bool = False

    model_config = {"env_prefix": "RESPONSE_KIT_"}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level
