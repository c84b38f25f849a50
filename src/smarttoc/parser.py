"""Heading extractor for rendered HTML content.

Single regex pass that finds ``<h1>``–``<h6>`` elements in document order and
turns each into a HeadingRecord. This is not an HTML parser: it only locates
heading elements, tolerating attributes, mixed-case tags and multi-line
content. Anything it does not recognise is simply not a heading.
"""

from __future__ import annotations

import html
import re

from smarttoc.anchors import DEFAULT_HASH_LENGTH, AnchorRegistry
from smarttoc.models.heading import HeadingRecord

# Inner content never crosses another heading tag.
# Closing tag must repeat the opening digit: <h2>...</h2>
_HEADING_RE = re.compile(
    r"<h([1-6])\b[^<>]*>((?:(?!</?h[1-6]\b).)*?)</h\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
_TAG_RE = re.compile(r"<[^<>]*>")
_WS_RE = re.compile(r"\s+")


def remove_tags(markup: str) -> str:
    """Drop every tag from ``markup``, leaving text and entities untouched."""
    return _TAG_RE.sub("", markup)


def strip_tags(markup: str) -> str:
    """Return the plain text of an inline markup fragment."""
    text = remove_tags(markup)
    text = html.unescape(text)
    return _WS_RE.sub(" ", text).strip()


def extract_headings(
    content: str,
    *,
    hash_length: int = DEFAULT_HASH_LENGTH,
) -> list[HeadingRecord]:
    """Extract every heading from ``content`` in document order.

    Anchor ids are unique within the returned list. Each call starts from an
    empty id registry, so two documents (or two calls on the same document)
    never influence each other's ids. Returns an empty list if no headings
    are found.
    """
    registry = AnchorRegistry(hash_length=hash_length)
    headings: list[HeadingRecord] = []

    for match in _HEADING_RE.finditer(content):
        text = strip_tags(match.group(2))
        headings.append(
            HeadingRecord(
                level=int(match.group(1)),
                text=text,
                id=registry.generate(text),
                raw_match=match.group(0),
                start=match.start(),
            )
        )

    return headings


def count_headings(content: str) -> int:
    """Return the number of headings extract_headings would find."""
    return sum(1 for _ in _HEADING_RE.finditer(content))
