"""Library configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access to template and message defaults.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mailcompose.interfaces.document import Encoding

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    ``MAILCOMPOSE_``-prefixed environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAILCOMPOSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Templates
    template_dir: Path | None = Field(
        default=None,
        description="Directory templates are loaded from by name.",
    )
    strict_undefined: bool = Field(
        default=True,
        description="Fail rendering when a template references an undefined value.",
    )
    max_render_bytes: int | None = Field(
        default=None,
        description="Upper bound for a single rendered template. None means unbounded.",
    )

    # Message defaults
    charset: str = Field(
        default="UTF-8",
        description="Charset used to encode rendered output and body parts.",
    )
    encoding: Encoding = Field(
        default=Encoding.QUOTED_PRINTABLE,
        description="Default Content-Transfer-Encoding for body parts.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory for info.log and error.log.",
    )

    @field_validator("template_dir")
    @classmethod
    def resolve_template_dir(cls, v: Path | None) -> Path | None:
        """Resolve the template directory to an absolute path."""
        return v.resolve() if v is not None else None

    @field_validator("max_render_bytes")
    @classmethod
    def check_max_render_bytes(cls, v: int | None) -> int | None:
        """Reject non-positive render limits."""
        if v is not None and v <= 0:
            raise ValueError("max_render_bytes must be a positive integer")
        return v

    @field_validator("charset", "log_level")
    @classmethod
    def normalize_upper(cls, v: str) -> str:
        """Normalize charset and log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.getLogger("mailcompose").setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the global Settings instance so the next access reloads it."""
    global _settings
    _settings = None
