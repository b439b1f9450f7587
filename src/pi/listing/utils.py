"""Terminal text utilities: width measurement, trimming, grapheme editing.

Widths are fixed-width column counts: each grapheme cluster occupies 0, 1
or 2 columns as reported by ``wcwidth``.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# CSI, OSC 8 and APC sequences never take up columns.
_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"
    r"|\x1b\]8;;[^\x07]*\x07"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ, skin tone modifiers, regional indicators
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


def strip_ansi(text: str) -> str:
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    ANSI escape sequences are ignored. Pure printable ASCII takes a fast
    path; other strings are measured per grapheme cluster and cached.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def trim_to_width(text: str, width: int) -> str:
    """Return the longest prefix of *text* that fits in *width* columns.

    Cuts on grapheme boundaries, so a wide character that would straddle
    the limit is dropped entirely.
    """
    if width <= 0:
        return ""
    if visible_width(text) <= width:
        return text

    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = grapheme_width(g)
        if cols + w > width:
            break
        result.append(g)
        cols += w
    return "".join(result)


def pad_to_width(text: str, width: int) -> str:
    """Trim or right-pad *text* with spaces to exactly *width* columns."""
    trimmed = trim_to_width(text, width)
    return trimmed + " " * (width - visible_width(trimmed))


def drop_last_grapheme(text: str) -> str:
    """Remove the final user-perceived character from *text*.

    Multi-codepoint clusters (combining marks, emoji sequences) are removed
    as a unit. Returns *text* unchanged when it is empty.
    """
    if not text:
        return text
    graphemes = list(grapheme.graphemes(text))
    return text[: len(text) - len(graphemes[-1])]
