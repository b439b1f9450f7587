"""Renderer-agnostic styled text blocks.

A style is a space-separated string of tokens such as ``"selected"`` or
``"mode"``. Tokens only acquire a visual meaning when a :class:`TextBlock`
is turned into terminal lines with a :class:`ListingTheme`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from pi.listing.utils import trim_to_width, visible_width

STYLE_MODE = "mode"
STYLE_FILTER = "filter"
STYLE_SELECTED = "selected"
STYLE_SCROLLBAR = "scrollbar"
STYLE_PLACEHOLDER = "placeholder"

_THEME_TOKENS = frozenset(
    {STYLE_MODE, STYLE_FILTER, STYLE_SELECTED, STYLE_SCROLLBAR, STYLE_PLACEHOLDER}
)


def join_styles(*styles: str) -> str:
    """Combine style strings, dropping empty ones and duplicate tokens."""
    tokens: list[str] = []
    for style in styles:
        for token in style.split():
            if token not in tokens:
                tokens.append(token)
    return " ".join(tokens)


@dataclass
class Styled:
    """A piece of text with a style. May span several lines."""

    text: str
    style: str = ""

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + 1

    def with_style(self, style: str) -> Styled:
        return Styled(self.text, join_styles(self.style, style))


def _sgr(code: str) -> Callable[[str], str]:
    return lambda text: f"\x1b[{code}m{text}\x1b[0m"


def _identity(text: str) -> str:
    return text


@dataclass
class ListingTheme:
    """Maps style tokens to styling functions."""

    mode: Callable[[str], str] = field(default=_sgr("1;33"))
    filter: Callable[[str], str] = field(default=_sgr("4"))
    selected: Callable[[str], str] = field(default=_sgr("7"))
    scrollbar: Callable[[str], str] = field(default=_sgr("35"))
    placeholder: Callable[[str], str] = field(default=_sgr("2"))
    extra: dict[str, Callable[[str], str]] = field(default_factory=dict)

    def apply(self, text: str, style: str) -> str:
        for token in style.split():
            fn = self.extra.get(token)
            if fn is None and token in _THEME_TOKENS:
                fn = getattr(self, token)
            if fn is not None:
                text = fn(text)
        return text


def plain_theme() -> ListingTheme:
    """A theme that applies no formatting at all."""
    return ListingTheme(
        mode=_identity,
        filter=_identity,
        selected=_identity,
        scrollbar=_identity,
        placeholder=_identity,
    )


class TextBlock:
    """A block of styled lines with a cursor position (the dot)."""

    def __init__(self, width: int) -> None:
        self.width = width
        self.lines: list[list[Styled]] = [[]]
        self.dot: tuple[int, int] = (0, 0)

    def writes(self, text: str, style: str = "") -> None:
        """Append *text*, starting a new line at every newline character."""
        for i, part in enumerate(text.split("\n")):
            if i > 0:
                self.newline()
            if part:
                self.lines[-1].append(Styled(part, style))

    def newline(self) -> None:
        self.lines.append([])

    def line_width(self, index: int) -> int:
        return sum(visible_width(seg.text) for seg in self.lines[index])

    def cursor(self) -> tuple[int, int]:
        """Return the (line, column) just past the last written text."""
        last = len(self.lines) - 1
        return last, self.line_width(last)

    @property
    def height(self) -> int:
        return len(self.lines)

    def plain_lines(self) -> list[str]:
        return ["".join(seg.text for seg in line) for line in self.lines]

    def clip_line(self, index: int, width: int) -> None:
        """Cut line *index* so it occupies at most *width* columns."""
        clipped: list[Styled] = []
        remaining = width
        for seg in self.lines[index]:
            if remaining <= 0:
                break
            text = trim_to_width(seg.text, remaining)
            if text:
                clipped.append(Styled(text, seg.style))
            remaining -= visible_width(text)
        self.lines[index] = clipped

    def extend_horizontal(self, other: TextBlock, column: int) -> None:
        """Place *other* to the right of this block, starting at *column*.

        Each line is clipped and padded to *column* first, so the two blocks
        never overlap.
        """
        while len(self.lines) < len(other.lines):
            self.newline()
        for i, segments in enumerate(other.lines):
            self.clip_line(i, column)
            pad = column - self.line_width(i)
            if pad > 0:
                self.lines[i].append(Styled(" " * pad))
            self.lines[i].extend(segments)

    def to_lines(self, theme: ListingTheme | None = None) -> list[str]:
        """Render the block into terminal strings using *theme*."""
        theme = theme or ListingTheme()
        return [
            "".join(theme.apply(seg.text, seg.style) for seg in line)
            for line in self.lines
        ]
