"""Values handed to the client-side presentation layer.

The core never interprets these; it only shapes them the way the script and
stylesheet expect to receive them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from smarttoc.parser import remove_tags

if TYPE_CHECKING:
    from smarttoc.config import Settings


def script_data(settings: Settings) -> dict:
    """Return the settings object exposed to the scroll-highlighting script."""
    return {
        "offset": settings.client.scroll_offset,
        "smoothScroll": settings.client.smooth_scroll,
    }


def inline_style(settings: Settings) -> str:
    """Return a ``<style>`` block for the custom CSS, or ``""`` if none is set."""
    css = remove_tags(settings.client.custom_css).strip()
    if not css:
        return ""
    return f'<style type="text/css">{css}</style>'
