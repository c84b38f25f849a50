from __future__ import annotations

from smarttoc.models.context import Position, RenderContext
from smarttoc.models.heading import HeadingRecord

__all__ = [
    # heading
    "HeadingRecord",
    # context
    "Position",
    "RenderContext",
]
