"""Shared test fixtures for the smarttoc test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from smarttoc.config import ClientSettings, LoggingSettings, Settings, TocSettings
from smarttoc.models.context import RenderContext

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI tests (it binds captured stderr)."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def settings() -> Settings:
    """Defaults with a low heading threshold so small documents qualify."""
    return Settings(
        toc=TocSettings(min_headings=2),
        client=ClientSettings(),
        logging=LoggingSettings(),
    )


@pytest.fixture()
def post_context() -> RenderContext:
    return RenderContext(post_type="post", is_singular=True)


@pytest.fixture()
def article() -> str:
    """A short article with an intro paragraph and three headings."""
    return (
        "<p>Opening paragraph.</p>\n"
        '<h1 class="entry-title">Intro</h1>\n'
        "<p>Some text.</p>\n"
        "<h2>Background</h2>\n"
        "<p>More text.</p>\n"
        "<h2>Scope</h2>\n"
        "<p>Final text.</p>"
    )
