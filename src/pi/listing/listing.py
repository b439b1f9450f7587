"""Listing mode: a filterable list with a selection cursor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pi.listing.keys import is_printable_input
from pi.listing.provider import ListingProvider, placeholder_for
from pi.listing.settings import ListingSettings
from pi.listing.styled import STYLE_FILTER, STYLE_MODE, STYLE_PLACEHOLDER, TextBlock
from pi.listing.utils import drop_last_grapheme, trim_to_width
from pi.listing.window import compute_window, render_window

logger = logging.getLogger(__name__)

NO_SELECTION = -1


@dataclass
class ListingState:
    selected: int = 0
    filter: str = ""
    # Entries shown by the most recent render; the step for page up/down.
    page_size: int = 0


class Listing:
    """Selection and filter state for one listing mode.

    Created when the mode is entered and dropped when it exits. The
    provider is fixed for the lifetime of the listing.
    """

    def __init__(
        self,
        mode: str,
        provider: ListingProvider,
        settings: ListingSettings | None = None,
    ) -> None:
        self.mode = mode
        self.provider = provider
        self.settings = settings or ListingSettings()
        self.state = ListingState()

        # Called with (key data, ctx) for keys the listing does not handle.
        self.on_fallthrough: Callable[[str, Any], None] | None = None

        self.change_filter("")

    @property
    def selected(self) -> int:
        return self.state.selected

    @property
    def filter(self) -> str:
        return self.state.filter

    @property
    def page_size(self) -> int:
        return self.state.page_size

    # --- Rendering ---

    def mode_line(self, width: int) -> TextBlock:
        """The title, followed by the filter with the cursor after it."""
        title = self.provider.title(self.state.selected)
        b = TextBlock(width)
        b.writes(trim_to_width(title, width), STYLE_MODE)
        b.writes(" ")
        b.writes(self.state.filter, STYLE_FILTER)
        b.dot = b.cursor()
        return b

    def list(self, width: int, max_height: int) -> TextBlock:
        """The visible entries, at most *max_height* lines tall."""
        if self.provider.count() == 0:
            b = TextBlock(width)
            placeholder = placeholder_for(self.provider, self.settings.placeholder)
            b.writes(trim_to_width(placeholder, width), STYLE_PLACEHOLDER)
            return b

        window = compute_window(self.provider, self.state.selected, width, max_height)
        self.state.page_size = window.size
        return render_window(
            window,
            self.state.selected,
            width,
            self.settings.scrollbar_thumb,
            self.settings.scrollbar_track,
        )

    # --- Filtering ---

    def change_filter(self, new_filter: str) -> None:
        self.state.filter = new_filter
        self.state.selected = self.provider.apply_filter(new_filter)
        logger.debug(
            "%s: filter %r selects %d", self.mode, new_filter, self.state.selected
        )

    def append_filter(self, text: str) -> None:
        self.change_filter(self.state.filter + text)

    def backspace(self) -> bool:
        """Drop the last character of the filter.

        Returns ``False`` when the filter is already empty.
        """
        if not self.state.filter:
            return False
        self.change_filter(drop_last_grapheme(self.state.filter))
        return True

    # --- Navigation ---

    def up(self, cycle: bool = False) -> None:
        n = self.provider.count()
        if n == 0:
            return
        self.state.selected -= 1
        if self.state.selected < 0:
            self.state.selected = n - 1 if cycle else 0

    def page_up(self) -> None:
        n = self.provider.count()
        if n == 0:
            return
        self.state.selected = max(self.state.selected - self.state.page_size, 0)

    def down(self, cycle: bool = False) -> None:
        n = self.provider.count()
        if n == 0:
            return
        self.state.selected += 1
        if self.state.selected >= n:
            self.state.selected = 0 if cycle else n - 1

    def page_down(self) -> None:
        n = self.provider.count()
        if n == 0:
            return
        self.state.selected = min(self.state.selected + self.state.page_size, n - 1)

    # --- Acceptance and fallthrough ---

    def accept(self, ctx: Any) -> None:
        if self.state.selected >= 0:
            self.provider.accept(self.state.selected, ctx)

    def handle_filter_key(self, data: str) -> bool:
        if is_printable_input(data):
            self.append_filter(data)
            return True
        return False

    def handle_default(self, data: str, ctx: Any) -> bool:
        """Treat printable input as filter text.

        Anything else is not handled here: ``on_fallthrough`` is invoked so
        the key can be processed again by another mode, and ``False`` is
        returned.
        """
        if self.handle_filter_key(data):
            return True
        if self.on_fallthrough is not None:
            self.on_fallthrough(data, ctx)
        return False
