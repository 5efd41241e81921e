"""Template-driven message composition.

Every operation renders its template completely before touching the message,
so a failure leaves bodies, alternatives, attachments and embeds exactly as
they were. HTML operations only accept escaping templates and text
operations only accept raw templates.
"""

from typing import Any

from mailcompose.interfaces.document import ContentType
from mailcompose.interfaces.template import (
    AttachmentConstructionError,
    BaseTemplate,
    RenderSource,
    TemplateError,
)
from mailcompose.message.models import FileOption, PartOption
from mailcompose.message.pipeline import file_from_template, render, writer_from_buffer
from mailcompose.strategies.templates import HTMLTemplate, TextTemplate

ATTACH = "attach"
EMBED = "embed"


def _check_variant(template: BaseTemplate | None, escaping: bool) -> None:
    if template is None:
        return
    if not isinstance(template, BaseTemplate):
        raise TypeError(f"Expected a BaseTemplate, got {type(template).__name__}")
    if template.escaping != escaping:
        expected = "an escaping (HTML)" if escaping else "a raw (text)"
        raise TypeError(f"{expected} template is required, got {type(template).__name__}")


class TemplateComposerMixin:
    """Adds template-based body, alternative, attachment and embed operations.

    Requires the host class to implement BaseDocument and to provide a
    ``max_render_bytes`` attribute.
    """

    max_render_bytes: int | None = None

    # =========================================================================
    # Bodies
    # =========================================================================

    def set_body_text_template(
        self, tpl: TextTemplate | None, data: Any, *opts: PartOption
    ) -> None:
        """Set the body to a rendered raw template with content type text/plain.

        Raises:
            TemplateMissingError: If tpl is None.
            TemplateExecutionError: If rendering fails.
            TypeError: If tpl is an escaping template.
        """
        self._part_from_template(ContentType.TEXT_PLAIN, tpl, data, opts, alternative=False)

    def set_body_html_template(
        self, tpl: HTMLTemplate | None, data: Any, *opts: PartOption
    ) -> None:
        """Set the body to a rendered escaping template with content type text/html.

        Raises:
            TemplateMissingError: If tpl is None.
            TemplateExecutionError: If rendering fails.
            TypeError: If tpl is a raw template.
        """
        self._part_from_template(ContentType.TEXT_HTML, tpl, data, opts, alternative=False)

    def add_alternative_text_template(
        self, tpl: TextTemplate | None, data: Any, *opts: PartOption
    ) -> None:
        """Append a rendered raw template as a text/plain alternative body."""
        self._part_from_template(ContentType.TEXT_PLAIN, tpl, data, opts, alternative=True)

    def add_alternative_html_template(
        self, tpl: HTMLTemplate | None, data: Any, *opts: PartOption
    ) -> None:
        """Append a rendered escaping template as a text/html alternative body."""
        self._part_from_template(ContentType.TEXT_HTML, tpl, data, opts, alternative=True)

    # =========================================================================
    # Files
    # =========================================================================

    def attach_text_template(
        self, name: str, tpl: TextTemplate | None, data: Any, *opts: FileOption
    ) -> None:
        """Attach the output of a raw template as a file.

        Raises:
            AttachmentConstructionError: If the template is missing, fails to
                render or the file cannot be built. The cause is chained.
            TypeError: If tpl is an escaping template.
        """
        self._file_from_template(ATTACH, name, tpl, data, opts, escaping=False)

    def attach_html_template(
        self, name: str, tpl: HTMLTemplate | None, data: Any, *opts: FileOption
    ) -> None:
        """Attach the output of an escaping template as a file.

        Raises:
            AttachmentConstructionError: If the template is missing, fails to
                render or the file cannot be built. The cause is chained.
            TypeError: If tpl is a raw template.
        """
        self._file_from_template(ATTACH, name, tpl, data, opts, escaping=True)

    def embed_text_template(
        self, name: str, tpl: TextTemplate | None, data: Any, *opts: FileOption
    ) -> None:
        """Embed the output of a raw template as an inline file."""
        self._file_from_template(EMBED, name, tpl, data, opts, escaping=False)

    def embed_html_template(
        self, name: str, tpl: HTMLTemplate | None, data: Any, *opts: FileOption
    ) -> None:
        """Embed the output of an escaping template as an inline file."""
        self._file_from_template(EMBED, name, tpl, data, opts, escaping=True)

    # =========================================================================
    # Shared pipeline
    # =========================================================================

    def _part_from_template(
        self,
        content_type: ContentType,
        tpl: BaseTemplate | None,
        data: Any,
        opts: tuple[PartOption, ...],
        alternative: bool,
    ) -> None:
        _check_variant(tpl, escaping=content_type is ContentType.TEXT_HTML)
        content = render(RenderSource(tpl, data), max_size=self.max_render_bytes)

        writer = writer_from_buffer(content)
        if alternative:
            self.add_alternative_writer(content_type, writer, *opts)
        else:
            self.set_body_writer(content_type, writer, *opts)

    def _file_from_template(
        self,
        target: str,
        name: str,
        tpl: BaseTemplate | None,
        data: Any,
        opts: tuple[FileOption, ...],
        escaping: bool,
    ) -> None:
        _check_variant(tpl, escaping=escaping)
        try:
            file = file_from_template(name, tpl, data, max_size=self.max_render_bytes)
        except TemplateError as e:
            raise AttachmentConstructionError(
                f"failed to {target} template: {e}", target=target
            ) from e

        if target == ATTACH:
            self.append_attachment(file, *opts)
        else:
            self.append_embed(file, *opts)

