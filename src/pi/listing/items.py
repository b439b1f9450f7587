"""A listing provider over a fixed list of items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal

from pi.listing.fuzzy import fuzzy_filter
from pi.listing.listing import NO_SELECTION
from pi.listing.provider import RenderedEntry
from pi.listing.styled import Styled
from pi.listing.utils import trim_to_width

MatchMode = Literal["prefix", "substring", "fuzzy"]


@dataclass
class ListItem:
    value: str
    # Shown instead of value when set; may span several lines.
    label: str | None = None
    style: str = ""


class ItemListProvider:
    """Filters *items* by prefix, substring or fuzzy match.

    After every filter change the first match is selected. Accepting an
    entry calls ``on_accept(item, ctx)``.
    """

    def __init__(
        self,
        items: list[ListItem],
        name: str = "LISTING",
        match: MatchMode = "prefix",
        on_accept: Callable[[ListItem, Any], None] | None = None,
    ) -> None:
        self._items = list(items)
        self._filtered = list(items)
        self._name = name
        self._match = match
        self.on_accept = on_accept

    @property
    def filtered(self) -> list[ListItem]:
        return list(self._filtered)

    def count(self) -> int:
        return len(self._filtered)

    def render(self, index: int, width: int) -> RenderedEntry:
        item = self._filtered[index]
        text = item.label if item.label is not None else item.value
        lines = [trim_to_width(line, width) for line in text.split("\n")]
        return Styled("\n".join(lines), item.style)

    def apply_filter(self, text: str) -> int:
        if self._match == "fuzzy":
            self._filtered = fuzzy_filter(self._items, text, lambda item: item.value)
        elif self._match == "substring":
            needle = text.lower()
            self._filtered = [i for i in self._items if needle in i.value.lower()]
        else:
            self._filtered = [i for i in self._items if i.value.startswith(text)]
        return 0 if self._filtered else NO_SELECTION

    def accept(self, index: int, ctx: Any) -> None:
        if self.on_accept is not None:
            self.on_accept(self._filtered[index], ctx)

    def title(self, selected: int) -> str:
        if selected < 0:
            return f" {self._name} "
        return f" {self._name} ({selected + 1}/{len(self._filtered)}) "
