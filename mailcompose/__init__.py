"""Compose email bodies, alternatives, attachments and embeds from Jinja2 templates."""

from mailcompose.core import Settings, TemplateFactory, get_factory, get_settings
from mailcompose.interfaces import (
    AttachmentConstructionError,
    BaseTemplate,
    ContentType,
    Disposition,
    Encoding,
    RenderLimitError,
    RenderSource,
    TemplateError,
    TemplateErrorKind,
    TemplateExecutionError,
    TemplateMissingError,
)
from mailcompose.message import File, Message, Part
from mailcompose.strategies import HTMLTemplate, TextTemplate

__version__ = "0.1.0"

__all__ = [
    "Message",
    "Part",
    "File",
    "BaseTemplate",
    "HTMLTemplate",
    "TextTemplate",
    "RenderSource",
    "ContentType",
    "Disposition",
    "Encoding",
    "Settings",
    "get_settings",
    "TemplateFactory",
    "get_factory",
    "TemplateError",
    "TemplateErrorKind",
    "TemplateMissingError",
    "TemplateExecutionError",
    "RenderLimitError",
    "AttachmentConstructionError",
]
