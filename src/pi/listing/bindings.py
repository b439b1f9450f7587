"""Listing builtins and their default key bindings.

Builtins are named operations (``"completion:up"``, ``"completion:accept"``)
taking the editor context and the raw key data. A :class:`BindingTable`
maps key identifiers to builtin names per mode; it is filled once at
startup and only read afterwards.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from pi.listing.keys import DEFAULT_KEY, Key, KeyId, normalize_key_id, parse_key
from pi.listing.listing import Listing
from pi.listing.settings import ListingSettings

logger = logging.getLogger(__name__)

Builtin = Callable[[Any, str], None]

START_INSERT = "start-insert"


def listing_builtins(prefix: str, get_listing: Callable[[Any], Listing]) -> dict[str, Builtin]:
    """Builtins operating on the listing that *get_listing* finds in ctx."""
    builtins: dict[str, Builtin] = {}

    def add(name: str, fn: Builtin) -> None:
        builtins[prefix + name] = fn

    add("up", lambda ctx, data: get_listing(ctx).up(False))
    add("up-cycle", lambda ctx, data: get_listing(ctx).up(True))
    add("page-up", lambda ctx, data: get_listing(ctx).page_up())
    add("down", lambda ctx, data: get_listing(ctx).down(False))
    add("down-cycle", lambda ctx, data: get_listing(ctx).down(True))
    add("page-down", lambda ctx, data: get_listing(ctx).page_down())
    add("backspace", lambda ctx, data: _backspace(get_listing(ctx), ctx, data))
    add("accept", lambda ctx, data: get_listing(ctx).accept(ctx))
    add("default", lambda ctx, data: get_listing(ctx).handle_default(data, ctx))
    return builtins


def _backspace(listing: Listing, ctx: Any, data: str) -> None:
    # With an empty filter there is nothing left to delete here.
    if not listing.backspace() and listing.on_fallthrough is not None:
        listing.on_fallthrough(data, ctx)


class BindingTable:
    """Key identifier -> builtin name, kept separately for every mode."""

    def __init__(self) -> None:
        self._modes: dict[str, dict[KeyId, str]] = {}

    def _table(self, mode: str) -> dict[KeyId, str]:
        return self._modes.setdefault(mode, {})

    def bind(self, mode: str, key: KeyId, name: str) -> None:
        self._table(mode)[normalize_key_id(key)] = name

    def add_default(self, mode: str, key: KeyId, name: str) -> None:
        """Bind *key* unless the mode already has a binding for it."""
        self._table(mode).setdefault(normalize_key_id(key), name)

    def lookup(self, mode: str, key: KeyId | None) -> str | None:
        """The builtin for *key*, or the mode's default binding."""
        table = self._modes.get(mode, {})
        if key is not None:
            name = table.get(normalize_key_id(key))
            if name is not None:
                return name
        return table.get(DEFAULT_KEY)

    def get_keys(self, mode: str, name: str) -> list[KeyId]:
        return [k for k, v in self._modes.get(mode, {}).items() if v == name]

    def modes(self) -> list[str]:
        return list(self._modes)

    def apply_overrides(self, overrides: dict[str, dict[str, str]]) -> None:
        """Bind every ``mode -> key -> name`` entry, replacing defaults."""
        for mode, table in overrides.items():
            for key, name in table.items():
                self.bind(mode, key, name)


def add_listing_default_bindings(table: BindingTable, prefix: str, mode: str) -> None:
    def add(key: KeyId, name: str) -> None:
        table.add_default(mode, key, prefix + name)

    add(Key.up, "up")
    add(Key.page_up, "page-up")
    add(Key.down, "down")
    add(Key.page_down, "page-down")
    add(Key.tab, "down-cycle")
    add(Key.backspace, "backspace")
    add(Key.enter, "accept")
    add(DEFAULT_KEY, "default")
    table.bind(mode, "ctrl+[", START_INSERT)


class Dispatcher:
    """Runs the builtin bound to a key in the current mode."""

    def __init__(self, table: BindingTable, builtins: dict[str, Builtin] | None = None) -> None:
        self.table = table
        self.builtins: dict[str, Builtin] = dict(builtins or {})

    def register(self, builtins: dict[str, Builtin]) -> None:
        self.builtins.update(builtins)

    def dispatch(self, mode: str, data: str, ctx: Any) -> bool:
        """Handle raw key *data* in *mode*. Returns ``False`` if nothing ran."""
        key = parse_key(data)
        name = self.table.lookup(mode, key)
        if name is None:
            return False
        fn = self.builtins.get(name)
        if fn is None:
            logger.warning("No builtin %r for key %r in mode %s", name, key, mode)
            return False
        fn(ctx, data)
        return True


def install_listing_mode(
    dispatcher: Dispatcher,
    mode: str,
    get_listing: Callable[[Any], Listing],
    settings: ListingSettings | None = None,
    prefix: str | None = None,
) -> None:
    """Register a listing mode: builtins, default keys, configured overrides.

    Builtins are named ``"<mode>:<operation>"`` unless *prefix* is given.
    """
    prefix = f"{mode}:" if prefix is None else prefix
    dispatcher.register(listing_builtins(prefix, get_listing))
    add_listing_default_bindings(dispatcher.table, prefix, mode)
    if settings is not None and mode in settings.keybindings:
        dispatcher.table.apply_overrides({mode: settings.keybindings[mode]})


_global_bindings: BindingTable | None = None


def get_default_bindings() -> BindingTable:
    global _global_bindings
    if _global_bindings is None:
        _global_bindings = BindingTable()
    return _global_bindings


def set_default_bindings(table: BindingTable) -> None:
    global _global_bindings
    _global_bindings = table
