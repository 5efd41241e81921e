"""Template factory for Jinja2 environment instantiation.

The factory builds one escaping and one raw Jinja2 environment from
configuration and hands out template handles compiled in the environment
that matches their variant.
"""

import logging

import jinja2

from mailcompose.core.config import Settings, get_settings
from mailcompose.strategies.templates import HTMLTemplate, JinjaTemplate, TextTemplate

logger = logging.getLogger(__name__)


class TemplateFactory:
    """Factory for creating template handles based on configuration.

    Example:
        ```python
        factory = TemplateFactory(get_settings())

        text = factory.text_from_string("Hello {{ name }}")
        html = factory.get_html_template("welcome.html")
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Library settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._html_environment_cache: jinja2.Environment | None = None
        self._text_environment_cache: jinja2.Environment | None = None

    def get_environment(self, variant: str) -> jinja2.Environment:
        """Get the Jinja2 environment for a template variant.

        Args:
            variant: Either ``"html"`` (escaping) or ``"text"`` (raw).

        Returns:
            A cached Jinja2 environment.

        Raises:
            ValueError: If the variant is unknown.
        """
        match variant:
            case "html":
                if self._html_environment_cache is None:
                    logger.debug("Instantiating escaping Jinja2 environment")
                    self._html_environment_cache = self._build_environment(autoescape=True)
                return self._html_environment_cache
            case "text":
                if self._text_environment_cache is None:
                    logger.debug("Instantiating raw Jinja2 environment")
                    self._text_environment_cache = self._build_environment(autoescape=False)
                return self._text_environment_cache
            case _:
                raise ValueError(
                    f"Unknown template variant: {variant}. "
                    f"Valid options: 'html', 'text'"
                )

    def html_from_string(self, source: str) -> HTMLTemplate:
        """Compile an escaping template from a string."""
        template = self.get_environment("html").from_string(source)
        return HTMLTemplate(template, charset=self._settings.charset)

    def text_from_string(self, source: str) -> TextTemplate:
        """Compile a raw template from a string."""
        template = self.get_environment("text").from_string(source)
        return TextTemplate(template, charset=self._settings.charset)

    def get_html_template(self, name: str) -> HTMLTemplate:
        """Load an escaping template by name from the template directory.

        Raises:
            ValueError: If no template directory is configured.
            jinja2.TemplateNotFound: If the template does not exist.
        """
        return self._load("html", name)

    def get_text_template(self, name: str) -> TextTemplate:
        """Load a raw template by name from the template directory.

        Raises:
            ValueError: If no template directory is configured.
            jinja2.TemplateNotFound: If the template does not exist.
        """
        return self._load("text", name)

    def clear_cache(self) -> None:
        """Clear the cached environments.

        This forces new environments to be created on next access.
        Useful for testing or when settings change.
        """
        self._html_environment_cache = None
        self._text_environment_cache = None
        logger.debug("Template factory cache cleared")

    def _load(self, variant: str, name: str) -> JinjaTemplate:
        if self._settings.template_dir is None:
            raise ValueError("MAILCOMPOSE_TEMPLATE_DIR is required to load templates by name")

        logger.debug(f"Loading {variant} template: {name}")
        template = self.get_environment(variant).get_template(name)
        handle_cls = HTMLTemplate if variant == "html" else TextTemplate
        return handle_cls(template, charset=self._settings.charset)

    def _build_environment(self, autoescape: bool) -> jinja2.Environment:
        loader = None
        if self._settings.template_dir is not None:
            loader = jinja2.FileSystemLoader(self._settings.template_dir)

        undefined = jinja2.StrictUndefined if self._settings.strict_undefined else jinja2.Undefined
        return jinja2.Environment(
            loader=loader,
            autoescape=autoescape,
            undefined=undefined,
            keep_trailing_newline=True,
        )


# Global factory instance
_factory: TemplateFactory | None = None


def get_factory() -> TemplateFactory:
    """Get or create the global TemplateFactory instance.

    Returns:
        The singleton TemplateFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = TemplateFactory()
    return _factory
