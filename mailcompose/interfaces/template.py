"""Template rendering interfaces.

Defines the abstract template handle consumed by the message composer and the
error taxonomy raised while turning a template into message content.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, BinaryIO


class TemplateErrorKind(str, Enum):
    """Stable failure kinds callers can branch on."""

    TEMPLATE_MISSING = "template_missing"
    TEMPLATE_EXECUTION_FAILED = "template_execution_failed"
    ATTACHMENT_CONSTRUCTION_FAILED = "attachment_construction_failed"


class TemplateError(Exception):
    """Base exception for template-to-message-part failures."""

    kind: TemplateErrorKind

    @staticmethod
    def has_kind(exc: BaseException | None, kind: TemplateErrorKind) -> bool:
        """Check whether an exception or any exception in its cause chain has a kind.

        Args:
            exc: The exception to inspect.
            kind: The kind to look for.

        Returns:
            True if ``exc`` or one of its causes is a TemplateError of that kind.
        """
        seen: set[int] = set()
        while exc is not None and id(exc) not in seen:
            seen.add(id(exc))
            if isinstance(exc, TemplateError) and exc.kind is kind:
                return True
            exc = exc.__cause__
        return False


class TemplateMissingError(TemplateError):
    """Raised when no template was supplied. The engine is never invoked."""

    kind = TemplateErrorKind.TEMPLATE_MISSING

    def __init__(self, message: str = "template must not be None") -> None:
        super().__init__(message)


class TemplateExecutionError(TemplateError):
    """Raised when the template engine fails while rendering."""

    kind = TemplateErrorKind.TEMPLATE_EXECUTION_FAILED


class RenderLimitError(TemplateExecutionError):
    """Raised when rendered output exceeds the configured size limit."""


class AttachmentConstructionError(TemplateError):
    """Raised when building an attachment or embed file fails.

    Attributes:
        target: Either ``"attach"`` or ``"embed"``, or None when raised while
            building a file outside of a message operation.
    """

    kind = TemplateErrorKind.ATTACHMENT_CONSTRUCTION_FAILED

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target


class BaseTemplate(ABC):
    """Abstract base class for template handles.

    A template handle is immutable once created; executing it never changes
    it. Concrete implementations wrap a real template engine.

    Example:
        ```python
        class JinjaTemplate(BaseTemplate):
            def execute(self, data, sink):
                for chunk in self._template.generate(**data):
                    sink.write(chunk.encode("utf-8"))
        ```
    """

    @abstractmethod
    def execute(self, data: Any, sink: BinaryIO) -> None:
        """Evaluate the template against data and write the output to sink.

        Args:
            data: An arbitrary value interpreted by the template engine.
            sink: A binary, writable stream receiving the rendered bytes.

        Raises:
            Exception: Any failure of the underlying engine.
        """

    @property
    @abstractmethod
    def escaping(self) -> bool:
        """Return True if the output is escaped for HTML."""

    @property
    def name(self) -> str | None:
        """Return the template name, if the engine knows it."""
        return None


@dataclass(frozen=True)
class RenderSource:
    """A template paired with the data it is rendered against.

    Attributes:
        template: The template handle. None is allowed here and rejected at
            render time.
        data: The value handed to the template engine.
    """

    template: BaseTemplate | None
    data: Any = None
