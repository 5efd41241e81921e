"""Jinja2 template strategies.

Wraps compiled Jinja2 templates as template handles. ``HTMLTemplate`` must be
compiled in an autoescaping environment, ``TextTemplate`` in one without
autoescaping, so the variant a handle claims always matches its output.
"""

import logging
from collections.abc import Mapping
from typing import Any, BinaryIO

import jinja2

from mailcompose.interfaces.template import BaseTemplate

logger = logging.getLogger(__name__)


def _autoescapes(template: jinja2.Template) -> bool:
    autoescape = template.environment.autoescape
    if callable(autoescape):
        return bool(autoescape(template.name))
    return bool(autoescape)


class JinjaTemplate(BaseTemplate):
    """Template handle backed by a compiled ``jinja2.Template``.

    A mapping data value is unpacked into the template context. Any other
    value is exposed to the template as ``data``.

    Attributes:
        charset: Codec used to turn rendered text into bytes.
    """

    _escaping: bool = False

    def __init__(self, template: jinja2.Template, charset: str = "utf-8") -> None:
        """Wrap a compiled template.

        Args:
            template: The compiled Jinja2 template.
            charset: Codec used to encode the rendered output.

        Raises:
            TypeError: If template is not a jinja2.Template.
            ValueError: If the template's autoescaping does not match the variant.
        """
        if not isinstance(template, jinja2.Template):
            raise TypeError(f"Expected jinja2.Template, got {type(template).__name__}")
        if _autoescapes(template) != self._escaping:
            raise ValueError(
                f"{type(self).__name__} requires a template compiled with "
                f"autoescape={self._escaping}"
            )
        self._template = template
        self.charset = charset

    def execute(self, data: Any, sink: BinaryIO) -> None:
        """Render the template against data, streaming encoded chunks to sink.

        Args:
            data: Mapping used as the template context, or any other value
                exposed as ``data``.
            sink: Binary stream receiving the output.

        Raises:
            jinja2.TemplateError: If rendering fails.
        """
        if isinstance(data, Mapping):
            context = dict(data)
        elif data is None:
            context = {}
        else:
            context = {"data": data}

        for chunk in self._template.generate(context):
            sink.write(chunk.encode(self.charset))

    @property
    def escaping(self) -> bool:
        """Return True if the output is HTML-escaped."""
        return self._escaping

    @property
    def name(self) -> str | None:
        """Return the Jinja2 template name, None for string templates."""
        return self._template.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, charset={self.charset!r})"


class TextTemplate(JinjaTemplate):
    """Raw template: rendered values are written unmodified."""

    _escaping = False


class HTMLTemplate(JinjaTemplate):
    """Escaping template: rendered values are HTML-escaped by Jinja2."""

    _escaping = True
