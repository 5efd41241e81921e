"""Message part and file models.

``Part`` holds a body or alternative body, ``File`` an attachment or embed.
Both carry a writer that reproduces their content on demand, and both are
customized through small option callables applied before they are stored.
"""

import io
import mimetypes
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, BinaryIO

from mailcompose.interfaces.document import ContentType, Disposition, Encoding, WriteFunc


def _empty_writer(sink: BinaryIO) -> int:
    return 0


@dataclass
class Part:
    """A body or alternative body of a message.

    Attributes:
        content_type: MIME type of the part.
        writer: Produces the part content.
        charset: Charset announced for the content.
        encoding: Content-Transfer-Encoding of the part.
        description: Optional Content-Description.
    """

    content_type: str
    writer: WriteFunc = _empty_writer
    charset: str = "UTF-8"
    encoding: Encoding = Encoding.QUOTED_PRINTABLE
    description: str | None = None

    def write_to(self, sink: BinaryIO) -> int:
        """Write the part content to sink and return the byte count."""
        return self.writer(sink)

    def get_content(self) -> bytes:
        """Return the part content."""
        buffer = io.BytesIO()
        self.writer(buffer)
        return buffer.getvalue()

    def set_content(self, content: str | bytes) -> None:
        """Replace the part content with a static string or bytes."""
        if isinstance(content, str):
            content = content.encode(self.charset)
        self.writer = writer_from_bytes(content)

    def set_writer(self, writer: WriteFunc) -> None:
        """Replace the part content with the output of writer."""
        self.writer = writer


@dataclass
class File:
    """An attachment or embedded file of a message.

    Attributes:
        name: File name announced to the recipient.
        writer: Produces the file content.
        content_type: MIME type, guessed from the name when not given.
        encoding: Content-Transfer-Encoding of the file.
        description: Optional Content-Description.
        disposition: Set when the file is stored in a message.
        content_id: Content-ID used to reference embeds from HTML bodies.
        headers: Additional MIME headers.
    """

    name: str
    writer: WriteFunc = _empty_writer
    content_type: str | None = None
    encoding: Encoding = Encoding.BASE64
    description: str | None = None
    disposition: Disposition | None = None
    content_id: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    content_type_guessed: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.content_type is None:
            self.guess_content_type()

    def guess_content_type(self) -> None:
        """Derive the content type from the file name extension."""
        guessed, _ = mimetypes.guess_type(self.name)
        self.content_type = guessed or ContentType.APPLICATION_OCTET_STREAM.value
        self.content_type_guessed = True

    def write_to(self, sink: BinaryIO) -> int:
        """Write the file content to sink and return the byte count."""
        return self.writer(sink)

    def get_content(self) -> bytes:
        """Return the file content."""
        buffer = io.BytesIO()
        self.writer(buffer)
        return buffer.getvalue()


PartOption = Callable[[Part], Any]
FileOption = Callable[[File], Any]


def writer_from_bytes(content: bytes) -> WriteFunc:
    """Return a writer that writes content to its sink on every call."""
    content = bytes(content)

    def write(sink: BinaryIO) -> int:
        sink.write(content)
        return len(content)

    return write


# =============================================================================
# Part Options
# =============================================================================


def with_part_charset(charset: str) -> PartOption:
    """Override the charset of a part."""

    def apply(part: Part) -> None:
        part.charset = charset.upper()

    return apply


def with_part_encoding(encoding: Encoding | str) -> PartOption:
    """Override the Content-Transfer-Encoding of a part."""

    def apply(part: Part) -> None:
        part.encoding = Encoding(encoding)

    return apply


def with_part_content_type(content_type: ContentType | str) -> PartOption:
    """Override the content type of a part."""

    def apply(part: Part) -> None:
        part.content_type = (
            content_type.value if isinstance(content_type, ContentType) else content_type
        )

    return apply


def with_part_description(description: str) -> PartOption:
    """Set the Content-Description of a part."""

    def apply(part: Part) -> None:
        part.description = description

    return apply


# =============================================================================
# File Options
# =============================================================================


def with_file_name(name: str) -> FileOption:
    """Override the announced file name.

    A content type guessed from the previous name is guessed again.
    """

    def apply(file: File) -> None:
        file.name = name
        if file.content_type_guessed:
            file.guess_content_type()

    return apply


def with_file_description(description: str) -> FileOption:
    """Set the Content-Description of a file."""

    def apply(file: File) -> None:
        file.description = description

    return apply


def with_file_content_type(content_type: ContentType | str) -> FileOption:
    """Override the guessed content type of a file."""

    def apply(file: File) -> None:
        file.content_type = (
            content_type.value if isinstance(content_type, ContentType) else content_type
        )
        file.content_type_guessed = False

    return apply


def with_file_encoding(encoding: Encoding | str) -> FileOption:
    """Override the Content-Transfer-Encoding of a file."""

    def apply(file: File) -> None:
        file.encoding = Encoding(encoding)

    return apply


def with_file_content_id(content_id: str) -> FileOption:
    """Set the Content-ID of a file."""

    def apply(file: File) -> None:
        file.content_id = content_id

    return apply


def with_file_header(name: str, value: str) -> FileOption:
    """Add a custom MIME header to a file."""

    def apply(file: File) -> None:
        file.headers[name] = value

    return apply
