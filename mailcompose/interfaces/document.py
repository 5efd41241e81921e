"""Message document interfaces.

Defines the content types, transfer encodings and writer signature shared by
message parts, plus the abstract document capability the composer mutates.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, BinaryIO

if TYPE_CHECKING:
    from mailcompose.message.models import File, Part

# Writes content to a binary sink and returns the number of bytes written.
WriteFunc = Callable[[BinaryIO], int]


class ContentType(str, Enum):
    """MIME content types used by message parts."""

    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    APPLICATION_OCTET_STREAM = "application/octet-stream"


class Encoding(str, Enum):
    """Content-Transfer-Encoding values."""

    QUOTED_PRINTABLE = "quoted-printable"
    BASE64 = "base64"
    EIGHT_BIT = "8bit"
    SEVEN_BIT = "7bit"


class Disposition(str, Enum):
    """Content-Disposition values for files."""

    ATTACHMENT = "attachment"
    INLINE = "inline"


class BaseDocument(ABC):
    """Abstract base class for documents whose parts can be composed.

    Implementations own four collections: a single primary body, an ordered
    list of alternative bodies, an ordered list of attachments and an ordered
    list of embeds.
    """

    @abstractmethod
    def set_body_writer(
        self,
        content_type: ContentType | str,
        writer: WriteFunc,
        *opts: Callable[["Part"], Any],
    ) -> None:
        """Replace the primary body with the output of writer."""

    @abstractmethod
    def add_alternative_writer(
        self,
        content_type: ContentType | str,
        writer: WriteFunc,
        *opts: Callable[["Part"], Any],
    ) -> None:
        """Append an alternative body produced by writer."""

    @abstractmethod
    def append_attachment(self, file: "File", *opts: Callable[["File"], Any]) -> None:
        """Append a file to the attachment list."""

    @abstractmethod
    def append_embed(self, file: "File", *opts: Callable[["File"], Any]) -> None:
        """Append a file to the embed list."""
