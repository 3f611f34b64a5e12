"""Configuration for the Constant Contact SDK."""

from .endpoints import Endpoints
from .settings import Settings, settings

__all__ = ["Endpoints", "Settings", "settings"]
