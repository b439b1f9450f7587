"""The contract between a listing and its source of entries."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pi.listing.styled import Styled

DEFAULT_PLACEHOLDER = "(no result)"

# Entries are plain styled text; a newline makes an entry span several lines.
RenderedEntry = Styled


class ListingProvider(Protocol):
    """A source of entries for a listing mode.

    ``count`` must agree with the most recent ``apply_filter`` call, and
    ``render`` must return the same text for the same ``(index, width)``.
    """

    def count(self) -> int:
        """Number of entries passing the active filter."""
        ...

    def render(self, index: int, width: int) -> RenderedEntry:
        """Render entry *index* for a column budget of *width*."""
        ...

    def apply_filter(self, text: str) -> int:
        """Filter the entries by *text*; return the index to select, or -1."""
        ...

    def accept(self, index: int, ctx: Any) -> None:
        """Choose entry *index*. Side effects belong to the provider."""
        ...

    def title(self, selected: int) -> str:
        """One-line label for the mode line."""
        ...


@runtime_checkable
class Placeholderer(Protocol):
    """Optional capability: text shown when no entry matches."""

    def placeholder(self) -> str: ...


def placeholder_for(provider: object, fallback: str = DEFAULT_PLACEHOLDER) -> str:
    if isinstance(provider, Placeholderer):
        return provider.placeholder()
    return fallback
