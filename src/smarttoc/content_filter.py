"""Content filter entrypoint.

Receives the host application's rendered content plus a RenderContext and
runs the full extract → render → inject pipeline. No knowledge of how the
host stores settings or serves assets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from smarttoc.config import load_settings
from smarttoc.injector import inject
from smarttoc.parser import extract_headings
from smarttoc.renderer import render_toc

if TYPE_CHECKING:
    from smarttoc.config import Settings
    from smarttoc.models.context import RenderContext


class TocContentFilter:
    """Adds a table of contents to eligible content.

    Holds only settings; every ``apply`` call extracts headings with its own
    anchor id scope, so one instance can serve any number of documents.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def is_enabled_for(self, context: RenderContext) -> bool:
        return context.is_singular and context.post_type in self.settings.toc.post_types

    def apply(self, content: str, context: RenderContext) -> str:
        toc = self.settings.toc
        log = structlog.get_logger().bind(post_type=context.post_type)

        if not self.is_enabled_for(context):
            log.debug("toc_skipped", reason="not_enabled")
            return content

        headings = extract_headings(content, hash_length=toc.hash_length)
        if len(headings) < toc.min_headings:
            log.debug(
                "toc_skipped",
                reason="too_few_headings",
                headings=len(headings),
                min_headings=toc.min_headings,
            )
            return content

        toc_markup = render_toc(headings, title=toc.title)
        result = inject(
            content,
            toc_markup,
            toc.position,
            lambda: self.is_enabled_for(context) and len(headings) >= toc.min_headings,
        )

        if result == content:
            log.info("toc_not_inserted", position=toc.position, headings=len(headings))
        else:
            log.info("toc_inserted", position=toc.position, headings=len(headings))
        return result


def add_toc_to_content(
    content: str,
    context: RenderContext,
    settings: Settings | None = None,
) -> str:
    """Filter ``content`` once, loading settings if none are given."""
    return TocContentFilter(settings or load_settings()).apply(content, context)
