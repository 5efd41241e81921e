"""Template-to-message-part pipeline.

Renders a template completely into memory before anything downstream is
built, so a failed render never reaches the message. The rendered bytes are
then wrapped either into a writer for a body part or into a File for an
attachment or embed.
"""

import io
import logging
from typing import Any, BinaryIO

from mailcompose.interfaces.document import WriteFunc
from mailcompose.interfaces.template import (
    AttachmentConstructionError,
    BaseTemplate,
    RenderLimitError,
    RenderSource,
    TemplateError,
    TemplateExecutionError,
    TemplateMissingError,
)
from mailcompose.message.models import File, writer_from_bytes

logger = logging.getLogger(__name__)


class RenderBuffer(io.BytesIO):
    """In-memory buffer for a single render, with an optional size cap.

    Attributes:
        max_size: Maximum number of bytes accepted, or None for no limit.
    """

    def __init__(self, max_size: int | None = None) -> None:
        super().__init__()
        self.max_size = max_size

    def write(self, b) -> int:
        size = memoryview(b).nbytes
        if self.max_size is not None and self.tell() + size > self.max_size:
            raise RenderLimitError(
                f"rendered template exceeds the limit of {self.max_size} bytes"
            )
        return super().write(b)

    def writelines(self, lines) -> None:
        for line in lines:
            self.write(line)


def render(source: RenderSource, max_size: int | None = None) -> bytes:
    """Render a template against its data into bytes.

    Args:
        source: The template and data to render.
        max_size: Optional upper bound for the rendered size in bytes.

    Returns:
        The complete rendered output.

    Raises:
        TemplateMissingError: If the template is None. The engine is not invoked.
        TemplateExecutionError: If the engine fails, including with a
            TemplateError of its own. Partial output is discarded.
        RenderLimitError: If the size cap is exceeded.
    """
    if source.template is None:
        raise TemplateMissingError()

    buffer = RenderBuffer(max_size=max_size)
    try:
        source.template.execute(source.data, buffer)
    except RenderLimitError:
        raise
    except Exception as e:
        raise TemplateExecutionError(f"failed to execute template: {e}") from e

    content = buffer.getvalue()
    logger.debug(f"Rendered template {source.template.name!r}: {len(content)} bytes")
    return content


def writer_from_buffer(buffer: bytes | io.BytesIO) -> WriteFunc:
    """Wrap rendered output into a writer.

    The buffer is snapshotted, so the writer produces identical bytes on
    every call no matter what happens to the buffer afterwards.

    Args:
        buffer: Rendered bytes or the buffer holding them.

    Returns:
        A writer that copies the bytes to its sink and returns the count.
    """
    if isinstance(buffer, io.BytesIO):
        buffer = buffer.getvalue()
    return writer_from_bytes(buffer)


def file_from_reader(name: str, reader: BinaryIO) -> File:
    """Build a File from a binary byte source.

    The source is read completely, so the File does not depend on it later.

    Args:
        name: The file name.
        reader: A binary stream providing the content.

    Returns:
        A File whose writer reproduces the content.

    Raises:
        AttachmentConstructionError: If reading fails or the source is not binary.
    """
    try:
        content = reader.read()
    except Exception as e:
        raise AttachmentConstructionError(f"failed to read content for {name!r}: {e}") from e

    if not isinstance(content, (bytes, bytearray, memoryview)):
        raise AttachmentConstructionError(
            f"content for {name!r} must be bytes, got {type(content).__name__}"
        )

    return File(name=name, writer=writer_from_bytes(bytes(content)))


def file_from_template(
    name: str,
    template: BaseTemplate | None,
    data: Any,
    max_size: int | None = None,
) -> File:
    """Render a template and build a File from its output.

    Args:
        name: The file name.
        template: The template to render.
        data: The value the template is rendered against.
        max_size: Optional upper bound for the rendered size in bytes.

    Returns:
        A fully populated File.

    Raises:
        TemplateMissingError: If the template is None.
        TemplateExecutionError: If rendering fails.
        AttachmentConstructionError: If the File cannot be built.
    """
    try:
        content = render(RenderSource(template, data), max_size=max_size)
    except TemplateError as e:
        e.add_note("failed to build file from template")
        raise

    return file_from_reader(name, io.BytesIO(content))
