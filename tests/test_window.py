"""Tests for pi.listing.window."""

from __future__ import annotations

from pi.listing.scrollbar import THUMB, TRACK
from pi.listing.window import compute_window, render_window

from .fakes import FakeProvider, numbered


def _lines(window) -> int:
    return sum(entry.line_count for entry in window.entries)


class TestComputeWindow:
    """The window grows outward from the selection until it is full."""

    def test_empty_provider(self):
        window = compute_window(FakeProvider([]), -1, 20, 5)
        assert (window.low, window.high) == (0, 0)
        assert window.entries == []
        assert not window.has_scrollbar

    def test_top_of_long_list(self):
        window = compute_window(FakeProvider(numbered(10)), 0, 20, 5)
        assert (window.low, window.high) == (0, 5)
        assert window.height == 5
        assert window.scroll_interval == (0, 3)

    def test_selection_is_centered(self):
        window = compute_window(FakeProvider(numbered(10)), 5, 20, 4)
        assert (window.low, window.high) == (3, 7)
        assert [e.text for e in window.entries] == ["item3", "item4", "item5", "item6"]

    def test_bottom_of_long_list_extends_upward(self):
        window = compute_window(FakeProvider(numbered(10)), 9, 20, 4)
        assert (window.low, window.high) == (6, 10)

    def test_whole_list_fits(self):
        window = compute_window(FakeProvider(numbered(3)), 1, 20, 10)
        assert (window.low, window.high) == (0, 3)
        assert window.height == 3
        assert not window.has_scrollbar

    def test_no_scrollbar_one_short_of_the_end(self):
        # high == count - 1 does not count as "more below".
        window = compute_window(FakeProvider(numbered(10)), 0, 20, 9)
        assert (window.low, window.high) == (0, 9)
        assert not window.has_scrollbar

    def test_scrollbar_two_short_of_the_end(self):
        window = compute_window(FakeProvider(numbered(10)), 0, 20, 8)
        assert (window.low, window.high) == (0, 8)
        assert window.has_scrollbar

    def test_no_selection_seeds_at_first_entry(self):
        window = compute_window(FakeProvider(numbered(10)), -1, 20, 3)
        assert (window.low, window.high) == (0, 3)

    def test_entries_rendered_with_full_width(self):
        provider = FakeProvider(numbered(3))
        compute_window(provider, 0, 33, 10)
        assert {width for _, width in provider.rendered} == {33}

    def test_zero_height(self):
        window = compute_window(FakeProvider(numbered(3)), 1, 20, 0)
        assert window.size == 0
        assert window.entries == []


class TestMultiLineEntries:
    """Entries that do not fit are cut line by line at the edges."""

    def test_tall_single_entry_keeps_leading_lines(self):
        entry = "\n".join(f"l{i}" for i in range(8))
        window = compute_window(FakeProvider([entry]), 0, 20, 3)
        assert window.size == 1
        assert window.entries[0].text == "l0\nl1\nl2"
        assert window.height == 3

    def test_entry_below_keeps_leading_lines(self):
        window = compute_window(FakeProvider(["a", "b1\nb2\nb3"]), 0, 20, 3)
        assert (window.low, window.high) == (0, 2)
        assert [e.text for e in window.entries] == ["a", "b1\nb2"]

    def test_entry_above_keeps_trailing_lines(self):
        window = compute_window(FakeProvider(["a", "b1\nb2\nb3", "c"]), 2, 20, 3)
        assert (window.low, window.high) == (1, 3)
        assert [e.text for e in window.entries] == ["b2\nb3", "c"]

    def test_selection_visible_and_height_bounded(self):
        entries = ["\n".join("x" * (1 + (i * 7) % 4)) for i in range(30)]
        provider = FakeProvider(entries)
        for max_height in range(1, 12):
            for selected in range(len(entries)):
                window = compute_window(provider, selected, 20, max_height)
                assert window.low <= selected < window.high
                assert _lines(window) == window.height <= max_height

    def test_whole_set_shown_when_it_fits(self):
        entries = ["a\nb", "c", "d\ne\nf"]
        for selected in range(3):
            window = compute_window(FakeProvider(entries), selected, 20, 6)
            assert (window.low, window.high) == (0, 3)


class TestRenderWindow:
    """Rendered windows highlight the selection and show a scrollbar."""

    def test_selected_entry_is_styled(self):
        window = compute_window(FakeProvider(numbered(3)), 1, 20, 10)
        b = render_window(window, 1, 20)
        assert b.plain_lines() == ["item0", "item1", "item2"]
        assert b.lines[0][0].style == ""
        assert b.lines[1][0].style == "selected"

    def test_no_selection_is_never_styled(self):
        window = compute_window(FakeProvider(numbered(3)), -1, 20, 10)
        b = render_window(window, -1, 20)
        assert all("selected" not in seg.style for line in b.lines for seg in line)

    def test_scrollbar_in_last_column(self):
        window = compute_window(FakeProvider(numbered(10)), 0, 10, 5)
        b = render_window(window, 0, 10)
        assert b.plain_lines() == [
            "item0    " + THUMB,
            "item1    " + THUMB,
            "item2    " + THUMB,
            "item3    " + TRACK,
            "item4    " + TRACK,
        ]

    def test_scrollbar_column_is_reserved(self):
        provider = FakeProvider(["abcdefghijkl"] * 10)
        window = compute_window(provider, 0, 6, 3)
        b = render_window(window, 0, 6)
        assert b.plain_lines()[0] == "abcde" + THUMB

    def test_multi_line_entry_fully_highlighted(self):
        window = compute_window(FakeProvider(["a1\na2", "b"]), 0, 20, 5)
        b = render_window(window, 0, 20)
        assert b.plain_lines() == ["a1", "a2", "b"]
        assert b.lines[0][0].style == "selected"
        assert b.lines[1][0].style == "selected"
        assert b.lines[2][0].style == ""
