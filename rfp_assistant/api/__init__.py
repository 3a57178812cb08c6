"""API modules."""

from rfp_assistant.api.app import create_app
from rfp_assistant.api.routes import router

__all__ = ["create_app", "router"]
