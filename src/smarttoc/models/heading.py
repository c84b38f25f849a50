from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HeadingRecord(BaseModel):
    """Single heading found in a document, in document order.

    Hierarchy is implied by the order and ``level`` of a sequence of records;
    there are no parent/child links.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1, le=6)
    text: str  # Inner content with tags stripped and entities decoded
    id: str  # Anchor id, unique within one extraction run
    raw_match: str  # Full "<hN ...>...</hN>" span as it appears in the source
    start: int = 0  # Offset of raw_match in the source; diagnostics only
