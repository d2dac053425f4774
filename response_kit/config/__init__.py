"""Configuration module."""

from response_kit.config.settings import ResponseKitSettings

__all__ = ["ResponseKitSettings"]
