"""Tests for the ListingView component."""

from __future__ import annotations

from pi.listing.bindings import BindingTable, Dispatcher, add_listing_default_bindings, listing_builtins
from pi.listing.listing import Listing
from pi.listing.settings import ListingSettings
from pi.listing.styled import plain_theme
from pi.listing.view import ListingView

from .fakes import FakeProvider, numbered


def _view(entries: list[str], max_height: int | None = None) -> ListingView:
    listing = Listing("nav", FakeProvider(entries), ListingSettings(max_height=3))
    table = BindingTable()
    add_listing_default_bindings(table, "nav:", "nav")
    dispatcher = Dispatcher(table, listing_builtins("nav:", lambda ctx: listing))
    return ListingView(listing, dispatcher, theme=plain_theme(), max_height=max_height)


class TestListingView:
    def test_render(self):
        view = _view(numbered(2))
        assert view.render(20) == ["TEST 0 ", "item0", "item1"]

    def test_max_height_from_settings(self):
        view = _view(numbered(10))
        lines = view.render(10)
        assert len(lines) == 4

    def test_explicit_max_height(self):
        view = _view(numbered(10), max_height=5)
        assert len(view.render(10)) == 6

    def test_handle_input(self):
        view = _view(numbered(3))
        view.handle_input("\x1b[B")
        view.handle_input("\x1b[B")
        assert view.listing.selected == 2
        view.handle_input("1")
        assert view.listing.filter == "1"
        assert view.render(20) == ["TEST 0 1", "item1"]
