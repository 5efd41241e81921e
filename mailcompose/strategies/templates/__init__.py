"""Template engine strategies.

Implements escaping and raw template handles on top of Jinja2.
"""

from mailcompose.strategies.templates.jinja import HTMLTemplate, JinjaTemplate, TextTemplate

__all__ = [
    "JinjaTemplate",
    "HTMLTemplate",
    "TextTemplate",
]
