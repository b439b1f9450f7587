"""Tests for pi.listing.scrollbar."""

from __future__ import annotations

from pi.listing.scrollbar import THUMB, TRACK, find_scroll_interval, render_scrollbar


class TestFindScrollInterval:
    """The window is mapped proportionally onto the scrollbar height."""

    def test_top_of_list(self):
        # f(0) = 0, f(5) = round(2.5) = 3
        assert find_scroll_interval(10, 0, 5, 5) == (0, 3)

    def test_middle_of_list(self):
        # f(3) = round(1.2) = 1, f(7) = round(2.8) = 3
        assert find_scroll_interval(10, 3, 7, 4) == (1, 3)

    def test_bottom_of_list(self):
        assert find_scroll_interval(10, 5, 10, 5) == (3, 5)

    def test_degenerate_thumb_grows_downward(self):
        # f(50) = f(51) = 3
        assert find_scroll_interval(100, 50, 51, 5) == (3, 4)

    def test_degenerate_thumb_at_bottom_grows_upward(self):
        # f(99) = f(100) = 5, the full height
        assert find_scroll_interval(100, 99, 100, 5) == (4, 5)

    def test_degenerate_thumb_at_top(self):
        assert find_scroll_interval(100, 0, 1, 5) == (0, 1)

    def test_thumb_never_degenerate_or_out_of_range(self):
        for n in range(1, 25):
            for height in range(1, 8):
                for low in range(n + 1):
                    for high in range(low, n + 1):
                        slow, shigh = find_scroll_interval(n, low, high, height)
                        assert 0 <= slow < shigh <= height, (n, low, high, height)


class TestRenderScrollbar:
    """The scrollbar is a single column of thumb and track glyphs."""

    def test_glyphs(self):
        b = render_scrollbar(10, 0, 5, 5)
        assert b.plain_lines() == [THUMB, THUMB, THUMB, TRACK, TRACK]

    def test_height_matches(self):
        b = render_scrollbar(40, 10, 17, 7)
        assert b.height == 7

    def test_scrollbar_style(self):
        b = render_scrollbar(10, 0, 5, 5)
        assert all(seg.style == "scrollbar" for line in b.lines for seg in line)

    def test_custom_glyphs(self):
        b = render_scrollbar(4, 2, 4, 2, thumb="#", track="|")
        assert b.plain_lines() == ["|", "#"]
