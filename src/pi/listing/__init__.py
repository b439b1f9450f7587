"""pi-listing: windowed, filterable selection lists for line editors."""

from pi.listing.bindings import (
    START_INSERT,
    BindingTable,
    Builtin,
    Dispatcher,
    add_listing_default_bindings,
    get_default_bindings,
    install_listing_mode,
    listing_builtins,
    set_default_bindings,
)
from pi.listing.fuzzy import FuzzyMatch, fuzzy_filter, fuzzy_match
from pi.listing.items import ItemListProvider, ListItem
from pi.listing.keys import DEFAULT_KEY, Key, KeyId, matches_key, parse_key
from pi.listing.listing import NO_SELECTION, Listing, ListingState
from pi.listing.provider import (
    DEFAULT_PLACEHOLDER,
    ListingProvider,
    Placeholderer,
    RenderedEntry,
    placeholder_for,
)
from pi.listing.scrollbar import find_scroll_interval, render_scrollbar
from pi.listing.settings import (
    ListingSettings,
    deep_merge_settings,
    load_listing_settings,
    save_listing_settings,
)
from pi.listing.styled import ListingTheme, Styled, TextBlock, join_styles, plain_theme
from pi.listing.utils import trim_to_width, visible_width
from pi.listing.view import ListingView
from pi.listing.window import Window, compute_window, render_window

__all__ = [
    # Bindings
    "START_INSERT",
    "BindingTable",
    "Builtin",
    "Dispatcher",
    "add_listing_default_bindings",
    "get_default_bindings",
    "install_listing_mode",
    "listing_builtins",
    "set_default_bindings",
    # Fuzzy
    "FuzzyMatch",
    "fuzzy_filter",
    "fuzzy_match",
    # Item provider
    "ItemListProvider",
    "ListItem",
    # Keys
    "DEFAULT_KEY",
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    # Listing
    "NO_SELECTION",
    "Listing",
    "ListingState",
    # Provider contract
    "DEFAULT_PLACEHOLDER",
    "ListingProvider",
    "Placeholderer",
    "RenderedEntry",
    "placeholder_for",
    # Scrollbar
    "find_scroll_interval",
    "render_scrollbar",
    # Settings
    "ListingSettings",
    "deep_merge_settings",
    "load_listing_settings",
    "save_listing_settings",
    # Styled text
    "ListingTheme",
    "Styled",
    "TextBlock",
    "join_styles",
    "plain_theme",
    # Utilities
    "trim_to_width",
    "visible_width",
    # View
    "ListingView",
    # Window
    "Window",
    "compute_window",
    "render_window",
]
