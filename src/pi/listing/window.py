"""Placing a height-bounded window over the entries of a listing.

The window grows outward from the selected entry, alternating between the
entry below and the entry above, so the selection tends to stay in the
middle of the viewport while the user moves through a long list.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from pi.listing.provider import ListingProvider, RenderedEntry
from pi.listing.scrollbar import THUMB, TRACK, find_scroll_interval, render_scrollbar
from pi.listing.styled import STYLE_SELECTED, Styled, TextBlock, join_styles

logger = logging.getLogger(__name__)


@dataclass
class Window:
    """The visible entries ``[low, high)`` out of *count*."""

    count: int
    low: int = 0
    high: int = 0
    entries: list[RenderedEntry] = field(default_factory=list)
    height: int = 0
    scroll_interval: tuple[int, int] | None = None

    @property
    def size(self) -> int:
        return self.high - self.low

    @property
    def has_scrollbar(self) -> bool:
        return self.scroll_interval is not None


def _keep_leading(entry: RenderedEntry, lines: int) -> Styled:
    return Styled("\n".join(entry.text.split("\n")[:lines]), entry.style)


def _keep_trailing(entry: RenderedEntry, lines: int) -> Styled:
    parts = entry.text.split("\n")
    return Styled("\n".join(parts[len(parts) - lines:]), entry.style)


def compute_window(
    provider: ListingProvider,
    selected: int,
    width: int,
    max_height: int,
) -> Window:
    """Choose and render the entries that fit in *max_height* lines.

    Entries at either edge that do not fit completely are cut line-wise:
    an entry added below keeps its leading lines, an entry added above keeps
    its trailing lines.
    """
    n = provider.count()
    if n == 0:
        return Window(count=0)

    low = 0 if selected == -1 else selected
    high = low
    height = 0
    entries: deque[RenderedEntry] = deque()

    # Extend high first, so that the first entry included is the selected one.
    extend_low = False
    while height < max_height and not (low == 0 and high == n):
        if (extend_low and low > 0) or high == n:
            low -= 1
            entry = provider.render(low, width)
            height += entry.line_count
            if height > max_height:
                entry = _keep_trailing(entry, entry.line_count - (height - max_height))
                height = max_height
            entries.appendleft(entry)
        else:
            entry = provider.render(high, width)
            height += entry.line_count
            if height > max_height:
                entry = _keep_leading(entry, entry.line_count - (height - max_height))
                height = max_height
            entries.append(entry)
            high += 1
        extend_low = not extend_low

    scroll_interval = None
    if low > 0 or high < n - 1:
        scroll_interval = find_scroll_interval(n, low, high, height)

    logger.debug(
        "window n=%d selected=%d max_height=%d -> [%d, %d) height=%d",
        n, selected, max_height, low, high, height,
    )
    return Window(
        count=n,
        low=low,
        high=high,
        entries=list(entries),
        height=height,
        scroll_interval=scroll_interval,
    )


def render_window(
    window: Window,
    selected: int,
    width: int,
    thumb: str = THUMB,
    track: str = TRACK,
) -> TextBlock:
    """Join the window's entries into a block, highlighting *selected*.

    With a scrollbar, entry lines are clipped to ``width - 1`` columns and
    the scrollbar takes the last column.
    """
    b = TextBlock(width)
    for offset, entry in enumerate(window.entries):
        index = window.low + offset
        if offset > 0:
            b.newline()
        style = entry.style
        if index == selected:
            style = join_styles(style, STYLE_SELECTED)
        b.writes(entry.text, style)

    if window.has_scrollbar:
        scrollbar = render_scrollbar(
            window.count, window.low, window.high, window.height, thumb, track
        )
        b.extend_horizontal(scrollbar, width - 1)
    return b
