"""TOC renderer.

Turns a flat, document-ordered sequence of headings into nested ``<ol>``
markup. The hierarchy is never materialised as a tree: a stack of open nested
lists is enough. The root list stands for level 1; level jumps (h1 → h3) open
one list per skipped level so the output stays well formed without
placeholder headings, and drops close one list per level.

The class names and the ``data-target`` attribute are consumed by the
client-side scroll highlighter and must not change.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from smarttoc.config import DEFAULT_TITLE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smarttoc.models.heading import HeadingRecord

TOGGLE_LABEL = "Toggle Table of Contents"
TOGGLE_ICON = "−"

_OPEN_NESTED = "<ol>"
_OPEN_SYNTHETIC = "<li><ol>"
_CLOSE_NESTED = "</ol></li>"
_CLOSE_ITEM = "</li>"


def _header(title: str) -> str:
    return (
        '<div class="smart-toc-header">'
        f'<h3 class="smart-toc-title">{escape(title)}</h3>'
        f'<button class="smart-toc-toggle" aria-label="{TOGGLE_LABEL}">'
        f'<span class="smart-toc-toggle-icon">{TOGGLE_ICON}</span>'
        "</button>"
        "</div>"
    )


def _item(heading: HeadingRecord) -> str:
    anchor_id = escape(heading.id)
    return (
        "<li>"
        f'<a href="#{anchor_id}" class="smart-toc-link" data-target="{anchor_id}">'
        f"{escape(heading.text, quote=False)}"
        "</a>"
    )


def render_list_items(headings: Sequence[HeadingRecord]) -> str:
    """Render the items of the root list, nested according to heading level."""
    parts: list[str] = []
    previous_level = 0
    open_lists: list[int] = []  # level each open nested list holds

    for heading in headings:
        level = heading.level

        if previous_level == 0:
            # First heading: wrap it in one synthetic item per level above it
            for depth in range(2, level + 1):
                parts.append(_OPEN_SYNTHETIC)
                open_lists.append(depth)
        elif level > previous_level:
            parts.append(_OPEN_NESTED)
            open_lists.append(previous_level + 1)
            for depth in range(previous_level + 2, level + 1):
                parts.append(_OPEN_SYNTHETIC)
                open_lists.append(depth)
        elif level < previous_level:
            parts.append(_CLOSE_ITEM)
            while open_lists and open_lists[-1] > level:
                open_lists.pop()
                parts.append(_CLOSE_NESTED)
        else:
            parts.append(_CLOSE_ITEM)

        parts.append(_item(heading))
        previous_level = level

    if previous_level:
        parts.append(_CLOSE_ITEM)
    while open_lists:
        open_lists.pop()
        parts.append(_CLOSE_NESTED)

    return "".join(parts)


def render_toc(headings: Sequence[HeadingRecord], *, title: str = DEFAULT_TITLE) -> str:
    """Render the complete TOC fragment, or ``""`` when there are no headings."""
    if not headings:
        return ""

    return (
        '<div class="smart-toc-container">'
        f"{_header(title)}"
        '<nav class="smart-toc-nav">'
        '<ol class="smart-toc-list">'
        f"{render_list_items(headings)}"
        "</ol>"
        "</nav>"
        "</div>"
    )
