from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Position(StrEnum):
    """Where the rendered TOC is spliced into the content."""

    TOP = "top"
    BEFORE_FIRST_HEADING = "before_first_heading"


class RenderContext(BaseModel):
    """What the host application knows about the content being filtered."""

    post_type: str
    is_singular: bool = True  # Archive and listing views never get a TOC
