"""Abstract base classes for templates and message documents."""

from mailcompose.interfaces.document import (
    BaseDocument,
    ContentType,
    Disposition,
    Encoding,
    WriteFunc,
)
from mailcompose.interfaces.template import (
    AttachmentConstructionError,
    BaseTemplate,
    RenderLimitError,
    RenderSource,
    TemplateError,
    TemplateErrorKind,
    TemplateExecutionError,
    TemplateMissingError,
)

__all__ = [
    "BaseDocument",
    "BaseTemplate",
    "ContentType",
    "Disposition",
    "Encoding",
    "RenderSource",
    "WriteFunc",
    "TemplateError",
    "TemplateErrorKind",
    "TemplateMissingError",
    "TemplateExecutionError",
    "RenderLimitError",
    "AttachmentConstructionError",
]
