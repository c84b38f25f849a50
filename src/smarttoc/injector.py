"""Splice rendered TOC markup into content.

Insertion is best-effort: whenever the TOC cannot be placed (not eligible,
nothing to insert, no heading to anchor on, unknown position) the content is
returned unchanged.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from smarttoc.models.context import Position

if TYPE_CHECKING:
    from collections.abc import Callable

log = structlog.get_logger()

# Located independently of the extractor: any opening heading tag counts
_OPEN_HEADING_RE = re.compile(r"<h[1-6]\b[^<>]*>", re.IGNORECASE)


def insert_before_first_heading(content: str, toc_markup: str) -> str:
    """Insert ``toc_markup`` right before the first opening heading tag."""
    match = _OPEN_HEADING_RE.search(content)
    if match is None:
        return content
    return content[: match.start()] + toc_markup + content[match.start() :]


def inject(
    content: str,
    toc_markup: str,
    position: Position | str,
    predicate: Callable[[], bool],
) -> str:
    """Return ``content`` with ``toc_markup`` inserted at ``position``.

    ``predicate`` decides whether the current content is eligible at all; it
    is only consulted when there is markup to insert.
    """
    if not toc_markup or not predicate():
        return content

    try:
        position = Position(position)
    except ValueError:
        log.warning("unknown_position", position=position)
        return content

    if position is Position.TOP:
        return toc_markup + content
    return insert_before_first_heading(content, toc_markup)
