"""Adaptive thumbnail layout for order history rows.

Given the inner width of a row, the tile size and the gap between tiles,
decide how many item thumbnails to show before collapsing the rest into a
"+N" badge tile. The badge consumes one of the slots that fit. At least one
thumbnail is always shown, even in a row too narrow for a single tile.

``layout`` is pure. ``ThumbnailStrip`` is the small driver around it that a
view feeds with width-change events from its container.
"""

import math
import os
from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_TILE_PX = int(os.environ.get("THUMBNAIL_TILE_PX", "96"))
DEFAULT_GAP_PX = int(os.environ.get("THUMBNAIL_GAP_PX", "12"))


@dataclass(frozen=True)
class LayoutResult:
    visible_count: int
    show_badge: bool
    remaining_count: int


def layout(item_count: int, width: float, tile: float = DEFAULT_TILE_PX, gap: float = DEFAULT_GAP_PX) -> LayoutResult:
    if not (math.isfinite(tile) and tile > 0):
        raise ValueError(f"tile must be positive, got {tile}")
    if not (math.isfinite(gap) and gap >= 0):
        raise ValueError(f"gap must not be negative, got {gap}")

    # An unmeasurable width lays out like the narrowest row
    if not math.isfinite(width):
        width = 0.0

    item_count = max(0, item_count)
    max_tiles = math.floor((width + gap) / (tile + gap))
    max_visible = max(1, max_tiles)

    if item_count <= max_visible:
        return LayoutResult(visible_count=item_count, show_badge=False, remaining_count=0)

    # Reserve one slot for the "+N" tile
    visible_count = max(1, max_visible - 1)
    return LayoutResult(
        visible_count=visible_count,
        show_badge=True,
        remaining_count=item_count - visible_count,
    )


class ThumbnailStrip:
    """Keeps the current layout of one row of item thumbnails.

    The first measurement computes a layout; every later width change
    recomputes it and replaces the previous result wholesale. Events simply
    supersede each other (last write wins). With no items, width events are
    ignored.
    """

    def __init__(self, item_count: int = 0, tile: float = DEFAULT_TILE_PX, gap: float = DEFAULT_GAP_PX):
        self.tile = tile
        self.gap = gap
        self._item_count = item_count
        self._width: float | None = None
        self.result: LayoutResult | None = None

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def width(self) -> float | None:
        return self._width

    def set_items(self, item_count: int) -> LayoutResult | None:
        """Swap in a new item list, re-laying out against the last known width."""
        self._item_count = item_count
        if item_count <= 0:
            self.result = None
            return None
        if self._width is not None:
            self.result = layout(item_count, self._width, self.tile, self.gap)
        return self.result

    def resize(self, width: float) -> LayoutResult | None:
        self._width = width
        if self._item_count <= 0:
            return None
        self.result = layout(self._item_count, width, self.tile, self.gap)
        logger.debug(
            "Thumbnail layout recalculated",
            width=width,
            item_count=self._item_count,
            visible_count=self.result.visible_count,
        )
        return self.result
