"""Component adapter: a listing rendered as terminal lines."""

from __future__ import annotations

from typing import Any

from pi.listing.bindings import Dispatcher
from pi.listing.listing import Listing
from pi.listing.styled import ListingTheme


class ListingView:
    """Shows the mode line followed by the listing body.

    Follows the ``render(width) -> list[str]`` / ``handle_input(data)``
    component shape; key input is routed through *dispatcher* in the
    listing's mode.
    """

    def __init__(
        self,
        listing: Listing,
        dispatcher: Dispatcher,
        ctx: Any = None,
        theme: ListingTheme | None = None,
        max_height: int | None = None,
    ) -> None:
        self.listing = listing
        self.dispatcher = dispatcher
        self.ctx = ctx
        self.theme = theme or ListingTheme()
        self.max_height = (
            max_height if max_height is not None else listing.settings.max_height
        )

    def render(self, width: int) -> list[str]:
        lines = self.listing.mode_line(width).to_lines(self.theme)
        lines.extend(self.listing.list(width, self.max_height).to_lines(self.theme))
        return lines

    def invalidate(self) -> None:
        pass

    def handle_input(self, data: str) -> None:
        self.dispatcher.dispatch(self.listing.mode, data, self.ctx)
