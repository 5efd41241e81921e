"""Email message document.

Owns the primary body, the alternative bodies, the attachments and the
embeds of a message. Parts and files are fully built, options included,
before they are stored, so every mutation is all-or-nothing.
"""

import copy
import io
import logging
from typing import BinaryIO

from mailcompose.core.config import Settings, get_settings
from mailcompose.interfaces.document import BaseDocument, ContentType, Disposition, WriteFunc
from mailcompose.interfaces.template import AttachmentConstructionError
from mailcompose.message.models import File, FileOption, Part, PartOption, writer_from_bytes
from mailcompose.message.pipeline import file_from_reader
from mailcompose.message.templates import ATTACH, EMBED, TemplateComposerMixin

logger = logging.getLogger(__name__)


def _copy_part(part: Part) -> Part:
    return copy.copy(part)


def _copy_file(file: File) -> File:
    duplicate = copy.copy(file)
    duplicate.headers = dict(file.headers)
    return duplicate


class Message(TemplateComposerMixin, BaseDocument):
    """A composable email message.

    Not thread-safe: compose a message from one thread at a time.

    Attributes:
        charset: Charset assigned to new body parts.
        encoding: Content-Transfer-Encoding assigned to new body parts.
        max_render_bytes: Size cap applied to every template render.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize an empty message.

        Args:
            settings: Defaults for charset, encoding and render limit. If None,
                uses global settings.
        """
        settings = settings or get_settings()
        self.charset = settings.charset
        self.encoding = settings.encoding
        self.max_render_bytes = settings.max_render_bytes

        self._body: Part | None = None
        self._alternatives: list[Part] = []
        self._attachments: list[File] = []
        self._embeds: list[File] = []

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def body(self) -> Part | None:
        """Return a copy of the primary body part, if one is set."""
        return _copy_part(self._body) if self._body is not None else None

    @property
    def alternatives(self) -> list[Part]:
        """Return a copy of the alternative body parts in insertion order."""
        return [_copy_part(part) for part in self._alternatives]

    @property
    def parts(self) -> list[Part]:
        """Return copies of the primary body followed by the alternative bodies."""
        body = self.body
        return ([body] if body is not None else []) + self.alternatives

    @property
    def attachments(self) -> list[File]:
        """Return a copy of the attachments in insertion order."""
        return [_copy_file(file) for file in self._attachments]

    @property
    def embeds(self) -> list[File]:
        """Return a copy of the embeds in insertion order."""
        return [_copy_file(file) for file in self._embeds]

    # =========================================================================
    # Bodies
    # =========================================================================

    def set_body_writer(
        self, content_type: ContentType | str, writer: WriteFunc, *opts: PartOption
    ) -> None:
        """Replace the primary body with the output of writer."""
        self._body = self._new_part(content_type, writer, opts)
        logger.debug(f"Primary body set: {self._body.content_type}")

    def set_body_string(
        self, content_type: ContentType | str, content: str, *opts: PartOption
    ) -> None:
        """Replace the primary body with a static string."""
        self.set_body_writer(content_type, writer_from_bytes(content.encode(self.charset)), *opts)

    def add_alternative_writer(
        self, content_type: ContentType | str, writer: WriteFunc, *opts: PartOption
    ) -> None:
        """Append an alternative body produced by writer."""
        part = self._new_part(content_type, writer, opts)
        self._alternatives.append(part)
        logger.debug(
            f"Alternative body added: {part.content_type} "
            f"({len(self._alternatives)} alternatives)"
        )

    def add_alternative_string(
        self, content_type: ContentType | str, content: str, *opts: PartOption
    ) -> None:
        """Append a static string as an alternative body."""
        self.add_alternative_writer(
            content_type, writer_from_bytes(content.encode(self.charset)), *opts
        )

    # =========================================================================
    # Files
    # =========================================================================

    def append_attachment(self, file: File, *opts: FileOption) -> None:
        """Apply options to file and append it to the attachments."""
        self._prepare_file(file, Disposition.ATTACHMENT, opts)
        self._attachments.append(file)
        logger.debug(f"Attachment added: {file.name} ({file.content_type})")

    def append_embed(self, file: File, *opts: FileOption) -> None:
        """Apply options to file and append it to the embeds.

        Embeds without an explicit Content-ID are referenced by their name.
        """
        self._prepare_file(file, Disposition.INLINE, opts)
        if file.content_id is None:
            file.content_id = file.name
        self._embeds.append(file)
        logger.debug(f"Embed added: {file.name} (cid={file.content_id})")

    def attach_reader(self, name: str, reader: BinaryIO, *opts: FileOption) -> None:
        """Attach the content of a binary stream.

        Raises:
            AttachmentConstructionError: If the stream cannot be read.
        """
        self.append_attachment(self._file_from_source(ATTACH, name, reader), *opts)

    def attach_bytes(self, name: str, content: bytes, *opts: FileOption) -> None:
        """Attach static bytes."""
        self.attach_reader(name, io.BytesIO(content), *opts)

    def embed_reader(self, name: str, reader: BinaryIO, *opts: FileOption) -> None:
        """Embed the content of a binary stream.

        Raises:
            AttachmentConstructionError: If the stream cannot be read.
        """
        self.append_embed(self._file_from_source(EMBED, name, reader), *opts)

    def embed_bytes(self, name: str, content: bytes, *opts: FileOption) -> None:
        """Embed static bytes."""
        self.embed_reader(name, io.BytesIO(content), *opts)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _new_part(
        self,
        content_type: ContentType | str,
        writer: WriteFunc,
        opts: tuple[PartOption, ...],
    ) -> Part:
        if isinstance(content_type, ContentType):
            content_type = content_type.value
        part = Part(
            content_type=content_type,
            writer=writer,
            charset=self.charset,
            encoding=self.encoding,
        )
        for opt in opts:
            if opt is not None:
                opt(part)
        return part

    @staticmethod
    def _prepare_file(file: File, disposition: Disposition, opts: tuple[FileOption, ...]) -> None:
        file.disposition = disposition
        for opt in opts:
            if opt is not None:
                opt(file)

    @staticmethod
    def _file_from_source(target: str, name: str, reader: BinaryIO) -> File:
        try:
            return file_from_reader(name, reader)
        except AttachmentConstructionError as e:
            raise AttachmentConstructionError(
                f"failed to {target} file reader: {e}", target=target
            ) from e

    def __repr__(self) -> str:
        body = self._body.content_type if self._body is not None else None
        return (
            f"Message(body={body!r}, alternatives={len(self._alternatives)}, "
            f"attachments={len(self._attachments)}, embeds={len(self._embeds)})"
        )
