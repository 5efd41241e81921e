"""Core configuration and factory components."""

from mailcompose.core.config import Settings, get_settings, reset_settings
from mailcompose.core.factory import TemplateFactory, get_factory

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "TemplateFactory",
    "get_factory",
]
