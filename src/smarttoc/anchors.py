"""Anchor id generation for headings.

Ids are URL-fragment safe slugs of the heading text. Headings whose text does
not survive slugification (symbols, emoji, scripts the transliteration table
does not cover) fall back to a short digest of the text. Uniqueness is only
guaranteed against the ``used_ids`` set passed in, which the caller owns and
scopes to a single document.
"""

from __future__ import annotations

import hashlib

from slugify import slugify

HASH_ID_PREFIX = "heading-"
DEFAULT_HASH_LENGTH = 8
MIN_SLUG_LENGTH = 2


def hash_id(text: str, hash_length: int = DEFAULT_HASH_LENGTH) -> str:
    """Return the digest-based id used when a heading has no usable slug."""
    digest = hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
    return HASH_ID_PREFIX + digest[:hash_length]


def generate_anchor_id(
    text: str,
    used_ids: set[str],
    *,
    hash_length: int = DEFAULT_HASH_LENGTH,
) -> str:
    """Return a unique anchor id for ``text`` and record it in ``used_ids``.

    Steps:
      1. Slugify:        "Getting Started!" → "getting-started"
      2. Hash fallback:  slug shorter than 2 chars → "heading-<md5 prefix>"
      3. Deduplicate:    "intro" taken → "intro-1", then "intro-2", ...
    """
    base = slugify(text, separator="-")
    if len(base) < MIN_SLUG_LENGTH:
        base = hash_id(text, hash_length)

    candidate = base
    counter = 1
    while candidate in used_ids:
        candidate = f"{base}-{counter}"
        counter += 1

    used_ids.add(candidate)
    return candidate


class AnchorRegistry:
    """Hands out anchor ids that are unique within one document."""

    def __init__(self, *, hash_length: int = DEFAULT_HASH_LENGTH) -> None:
        self.hash_length = hash_length
        self.used_ids: set[str] = set()

    def generate(self, text: str) -> str:
        return generate_anchor_id(text, self.used_ids, hash_length=self.hash_length)

    def __contains__(self, anchor_id: object) -> bool:
        return anchor_id in self.used_ids

    def __len__(self) -> int:
        return len(self.used_ids)
