"""Shared fixtures for mailcompose tests."""

from typing import Any, BinaryIO

import pytest

from mailcompose.core.config import Settings
from mailcompose.core.factory import TemplateFactory
from mailcompose.interfaces.template import BaseTemplate
from mailcompose.message import Message


class SpyTemplate(BaseTemplate):
    """Template handle that records every execution.

    Writes ``output`` to the sink, then raises ``error`` if one is given.
    """

    def __init__(
        self,
        output: bytes = b"",
        error: Exception | None = None,
        escaping: bool = False,
    ) -> None:
        self.output = output
        self.error = error
        self._escaping = escaping
        self.calls: list[Any] = []

    def execute(self, data: Any, sink: BinaryIO) -> None:
        self.calls.append(data)
        sink.write(self.output)
        if self.error is not None:
            raise self.error

    @property
    def escaping(self) -> bool:
        return self._escaping


@pytest.fixture
def settings():
    """Settings with strict undefined handling and no render limit."""
    return Settings(strict_undefined=True, max_render_bytes=None, charset="utf-8")


@pytest.fixture
def factory(settings):
    """Template factory bound to the test settings."""
    return TemplateFactory(settings)


@pytest.fixture
def message(settings):
    """An empty message."""
    return Message(settings)


@pytest.fixture
def spy_template():
    """Factory for SpyTemplate instances."""
    return SpyTemplate
