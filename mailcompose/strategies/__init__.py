"""Concrete strategy implementations."""

from mailcompose.strategies.templates import (
    HTMLTemplate,
    JinjaTemplate,
    TextTemplate,
)

__all__ = [
    "JinjaTemplate",
    "HTMLTemplate",
    "TextTemplate",
]
