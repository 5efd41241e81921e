"""Message document, parts and the template-to-part pipeline."""

from mailcompose.message.models import (
    File,
    FileOption,
    Part,
    PartOption,
    with_file_content_id,
    with_file_content_type,
    with_file_description,
    with_file_encoding,
    with_file_header,
    with_file_name,
    with_part_charset,
    with_part_content_type,
    with_part_description,
    with_part_encoding,
    writer_from_bytes,
)
from mailcompose.message.msg import Message
from mailcompose.message.pipeline import (
    RenderBuffer,
    file_from_reader,
    file_from_template,
    render,
    writer_from_buffer,
)

__all__ = [
    # Document
    "Message",
    "Part",
    "File",
    "PartOption",
    "FileOption",
    # Pipeline
    "RenderBuffer",
    "render",
    "writer_from_buffer",
    "writer_from_bytes",
    "file_from_reader",
    "file_from_template",
    # Options
    "with_part_charset",
    "with_part_content_type",
    "with_part_description",
    "with_part_encoding",
    "with_file_content_id",
    "with_file_content_type",
    "with_file_description",
    "with_file_encoding",
    "with_file_header",
    "with_file_name",
]
