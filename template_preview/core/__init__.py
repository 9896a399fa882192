"""Core configuration and factory components."""

from template_preview.core.config import Settings, get_settings
from template_preview.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
