"""Scrollbar column shown next to a partial window."""

from __future__ import annotations

import logging

from pi.listing.styled import STYLE_SCROLLBAR, TextBlock

logger = logging.getLogger(__name__)

THUMB = "\u2589"
TRACK = "\u2502"


def find_scroll_interval(n: int, low: int, high: int, height: int) -> tuple[int, int]:
    """Map the window ``[low, high)`` of *n* entries onto ``[0, height]``.

    Returns the thumb interval ``[slow, shigh)``. The thumb is always at
    least one row tall and never runs past *height*.
    """

    def f(i: int) -> int:
        # Round half away from zero; all operands are non-negative.
        return int(i / n * height + 0.5)

    slow, shigh = f(low), f(high)
    if slow == shigh:
        if shigh == height:
            slow -= 1
        else:
            shigh += 1
    logger.debug(
        "scroll interval n=%d low=%d high=%d height=%d -> [%d, %d)",
        n, low, high, height, slow, shigh,
    )
    return slow, shigh


def render_scrollbar(
    n: int,
    low: int,
    high: int,
    height: int,
    thumb: str = THUMB,
    track: str = TRACK,
) -> TextBlock:
    """Render a one-column block of *height* glyphs."""
    slow, shigh = find_scroll_interval(n, low, high, height)
    b = TextBlock(1)
    for i in range(height):
        if i > 0:
            b.newline()
        b.writes(thumb if slow <= i < shigh else track, STYLE_SCROLLBAR)
    return b
