"""Keyboard input parsing for listing modes.

Turns raw terminal input into key identifiers such as ``"up"``,
``"pageDown"``, ``"ctrl+a"`` or ``"x"``, and tells plain printable input
apart from keys with a special meaning.
"""

from __future__ import annotations

KeyId = str

# The default-binding slot: used for any key without a binding of its own.
DEFAULT_KEY: KeyId = "default"


class Key:
    """Named key constants."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


_MODIFIER_ORDER = ("ctrl", "shift", "alt")

# Alternative spellings that name the same terminal input.
_KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "ctrl+[": "escape",
    "ctrl+i": "tab",
    "ctrl+m": "enter",
    "ctrl+h": "backspace",
    "pageup": "pageUp",
    "pagedown": "pageDown",
}

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[3~": "delete",
    "\x1b[4~": "end",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[Z": "shift+tab",
}

# xterm-style modified sequences: CSI 1;<mod><letter> and CSI <n>;<mod>~
_CSI_LETTERS = {"A": "up", "B": "down", "C": "right", "D": "left", "H": "home", "F": "end"}
_CSI_TILDES = {"1": "home", "3": "delete", "4": "end", "5": "pageUp", "6": "pageDown"}


def _modifier_prefix(mod: int) -> str:
    bits = mod - 1
    prefix = ""
    if bits & 4:
        prefix += "ctrl+"
    if bits & 1:
        prefix += "shift+"
    if bits & 2:
        prefix += "alt+"
    return prefix


def _parse_modified_csi(data: str) -> str | None:
    if not data.startswith("\x1b[") or ";" not in data:
        return None
    body = data[2:]
    final = body[-1]
    params = body[:-1].split(";")
    if len(params) != 2 or not all(p.isdigit() for p in params):
        return None
    mod = int(params[1])
    if final in _CSI_LETTERS and params[0] == "1":
        return _modifier_prefix(mod) + _CSI_LETTERS[final]
    if final == "~" and params[0] in _CSI_TILDES:
        return _modifier_prefix(mod) + _CSI_TILDES[params[0]]
    return None


def normalize_key_id(key_id: str) -> str:
    """Canonical spelling of *key_id*: aliases resolved, modifiers ordered."""
    key_id = _KEY_ALIASES.get(key_id, _KEY_ALIASES.get(key_id.lower(), key_id))
    parts = key_id.split("+")
    if len(parts) == 1 or not parts[-1]:
        return key_id
    *mods, key = parts
    ordered = [m for m in _MODIFIER_ORDER if m in {x.lower() for x in mods}]
    if len(key) == 1:
        key = key.lower()
    return _KEY_ALIASES.get("+".join([*ordered, key]), "+".join([*ordered, key]))


def parse_key(data: str) -> KeyId | None:
    """Parse raw terminal input and return its key identifier, or ``None``."""
    if not data:
        return None

    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]

    modified = _parse_modified_csi(data)
    if modified is not None:
        return modified

    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"
    if data == "\x00":
        return "ctrl+space"

    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch in ("\x7f", "\x08"):
            return "alt+backspace"
        if ch in ("\r", "\n"):
            return "alt+enter"
        if ch.isprintable():
            return "alt+" + ch.lower()

    if is_printable_input(data):
        return data

    return None


def matches_key(data: str, key_id: str) -> bool:
    """Return ``True`` if raw input *data* is the key named by *key_id*."""
    parsed = parse_key(data)
    return parsed is not None and parsed == normalize_key_id(key_id)


def is_printable_input(data: str) -> bool:
    """True for plain text input: no control characters, no escape sequences.

    This is what a listing treats as filter input.
    """
    if not data:
        return False
    for ch in data:
        cp = ord(ch)
        if cp < 0x20 or cp == 0x7F or 0x80 <= cp <= 0x9F:
            return False
    return data.isprintable()
