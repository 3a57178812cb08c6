"""Configuration modules."""

from rfp_assistant.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
