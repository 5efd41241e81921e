"""Unit tests for the message document, parts and files."""

import io

import pytest

from mailcompose.interfaces.document import ContentType, Disposition, Encoding
from mailcompose.interfaces.template import AttachmentConstructionError
from mailcompose.message import (
    File,
    Message,
    Part,
    with_file_content_type,
    with_file_description,
    with_file_encoding,
    with_file_header,
    with_file_name,
    with_part_content_type,
    with_part_description,
    with_part_encoding,
    writer_from_bytes,
)


# =============================================================================
# Part Tests
# =============================================================================


class TestPart:
    """Test suite for Part."""

    def test_set_content_string(self):
        """Test that string content is encoded with the part charset."""
        part = Part(content_type="text/plain", charset="UTF-8")
        part.set_content("héllo")

        assert part.get_content() == "héllo".encode("utf-8")

    def test_set_writer(self):
        """Test that a custom writer replaces the content."""
        part = Part(content_type="text/plain")
        part.set_writer(writer_from_bytes(b"custom"))

        sink = io.BytesIO()
        assert part.write_to(sink) == 6
        assert sink.getvalue() == b"custom"

    def test_default_part_is_empty(self):
        """Test that a part without a writer has no content."""
        assert Part(content_type="text/plain").get_content() == b""

    def test_part_options(self):
        """Test that part options update the part."""
        part = Part(content_type="text/plain")
        for opt in (
            with_part_content_type(ContentType.TEXT_HTML),
            with_part_encoding("base64"),
            with_part_description("greeting"),
        ):
            opt(part)

        assert part.content_type == "text/html"
        assert part.encoding is Encoding.BASE64
        assert part.description == "greeting"


# =============================================================================
# File Tests
# =============================================================================


class TestFile:
    """Test suite for File."""

    def test_content_type_guessed_from_name(self):
        """Test that the content type is derived from the file extension."""
        assert File(name="photo.png").content_type == "image/png"
        assert File(name="no_extension").content_type == "application/octet-stream"

    def test_explicit_content_type(self):
        """Test that an explicit content type is kept."""
        assert File(name="data.bin", content_type="text/plain").content_type == "text/plain"

    def test_file_options(self):
        """Test that file options update the file."""
        file = File(name="a.txt", writer=writer_from_bytes(b"abc"))
        for opt in (
            with_file_name("b.txt"),
            with_file_description("renamed"),
            with_file_content_type(ContentType.APPLICATION_OCTET_STREAM),
            with_file_encoding(Encoding.QUOTED_PRINTABLE),
            with_file_header("X-Origin", "tests"),
        ):
            opt(file)

        assert file.name == "b.txt"
        assert file.description == "renamed"
        assert file.content_type == "application/octet-stream"
        assert file.encoding is Encoding.QUOTED_PRINTABLE
        assert file.headers == {"X-Origin": "tests"}
        assert file.get_content() == b"abc"

    def test_rename_guesses_content_type_again(self):
        """Test that renaming a file re-derives a guessed content type."""
        file = File(name="file.txt")
        with_file_name("report.html")(file)

        assert file.content_type == "text/html"

    def test_rename_keeps_explicit_content_type(self):
        """Test that renaming keeps a content type that was set explicitly."""
        explicit = File(name="file.txt", content_type="text/plain")
        with_file_name("report.html")(explicit)

        overridden = File(name="file.txt")
        with_file_content_type("application/json")(overridden)
        with_file_name("report.html")(overridden)

        assert explicit.content_type == "text/plain"
        assert overridden.content_type == "application/json"

    def test_invalid_encoding_option(self):
        """Test that an unknown encoding is rejected."""
        with pytest.raises(ValueError):
            with_file_encoding("uuencode")(File(name="a.txt"))


# =============================================================================
# Message Tests
# =============================================================================


class TestMessage:
    """Test suite for Message static content operations."""

    def test_defaults_from_settings(self, settings):
        """Test that new parts inherit charset and encoding from settings."""
        message = Message(settings.model_copy(update={"encoding": Encoding.EIGHT_BIT}))
        message.set_body_string(ContentType.TEXT_PLAIN, "hi")

        assert message.body.charset == "UTF-8"
        assert message.body.encoding is Encoding.EIGHT_BIT

    def test_empty_message(self, message):
        """Test that a new message has no parts."""
        assert message.body is None
        assert message.parts == []
        assert message.attachments == []
        assert message.embeds == []

    def test_parts_order(self, message):
        """Test that parts lists the body before alternatives."""
        message.add_alternative_string(ContentType.TEXT_HTML, "<p>alt</p>")
        message.set_body_string("text/plain", "body")

        assert [p.get_content() for p in message.parts] == [b"body", b"<p>alt</p>"]

    def test_accessors_return_copies(self, message):
        """Test that mutating returned lists does not change the message."""
        message.attach_bytes("a.txt", b"a")
        message.attachments.clear()
        message.alternatives.append(Part(content_type="text/plain"))

        assert len(message.attachments) == 1
        assert message.alternatives == []

    def test_accessors_return_part_and_file_copies(self, message):
        """Test that mutating returned parts and files does not change the message."""
        message.set_body_string(ContentType.TEXT_PLAIN, "body")
        message.add_alternative_string(ContentType.TEXT_HTML, "<p>alt</p>")
        message.attach_bytes("a.txt", b"a")
        message.embed_bytes("logo.png", b"png")

        message.body.set_content("changed")
        message.parts[1].set_content("changed")
        message.attachments[0].headers["X-Changed"] = "yes"
        message.attachments[0].name = "b.txt"
        message.embeds[0].content_id = "other"

        assert message.body.get_content() == b"body"
        assert message.alternatives[0].get_content() == b"<p>alt</p>"
        assert message.attachments[0].headers == {}
        assert message.attachments[0].name == "a.txt"
        assert message.embeds[0].content_id == "logo.png"

    def test_attach_and_embed_bytes(self, message):
        """Test static attachments and embeds."""
        message.attach_bytes("a.pdf", b"%PDF")
        message.embed_bytes("logo.png", b"\x89PNG")

        assert message.attachments[0].disposition is Disposition.ATTACHMENT
        assert message.attachments[0].content_type == "application/pdf"
        assert message.embeds[0].disposition is Disposition.INLINE
        assert message.embeds[0].content_id == "logo.png"

    def test_attach_reader_failure(self, message):
        """Test that unreadable sources are wrapped and not attached."""
        with pytest.raises(AttachmentConstructionError) as exc_info:
            message.attach_reader("notes.txt", io.StringIO("text"))

        assert exc_info.value.target == "attach"
        assert message.attachments == []

    def test_embed_reader_failure(self, message):
        """Test that unreadable embed sources identify the embed target."""
        with pytest.raises(AttachmentConstructionError) as exc_info:
            message.embed_reader("notes.txt", io.StringIO("text"))

        assert exc_info.value.target == "embed"
        assert message.embeds == []

    def test_failing_file_option_leaves_attachments_unchanged(self, message):
        """Test that an option failure does not append the file."""

        def broken(file):
            raise RuntimeError("bad option")

        with pytest.raises(RuntimeError):
            message.attach_bytes("a.txt", b"a", broken)

        assert message.attachments == []

    def test_repr(self, message):
        """Test the summary representation."""
        message.set_body_string(ContentType.TEXT_PLAIN, "x")

        assert repr(message) == (
            "Message(body='text/plain', alternatives=0, attachments=0, embeds=0)"
        )
