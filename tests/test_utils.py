"""Tests for pi.listing.utils."""

from __future__ import annotations

from pi.listing.utils import (
    drop_last_grapheme,
    pad_to_width,
    trim_to_width,
    visible_width,
)


class TestVisibleWidth:
    def test_ascii(self):
        assert visible_width("hello") == 5

    def test_empty(self):
        assert visible_width("") == 0

    def test_wide_characters(self):
        assert visible_width("日本") == 4

    def test_combining_mark(self):
        assert visible_width("e\u0301") == 1

    def test_ansi_codes_ignored(self):
        assert visible_width("\x1b[7mab\x1b[0m") == 2


class TestTrimToWidth:
    def test_fits(self):
        assert trim_to_width("abc", 5) == "abc"

    def test_cut(self):
        assert trim_to_width("abcdef", 3) == "abc"

    def test_wide_character_not_split(self):
        assert trim_to_width("日本語", 5) == "日本"

    def test_zero_width(self):
        assert trim_to_width("abc", 0) == ""

    def test_pad(self):
        assert pad_to_width("ab", 4) == "ab  "
        assert pad_to_width("日本語", 5) == "日本 "


class TestDropLastGrapheme:
    def test_ascii(self):
        assert drop_last_grapheme("abc") == "ab"

    def test_empty(self):
        assert drop_last_grapheme("") == ""

    def test_combining_sequence(self):
        assert drop_last_grapheme("ae\u0301") == "a"

    def test_flag_sequence(self):
        flag = "\U0001F1FA\U0001F1F8"
        assert drop_last_grapheme("x" + flag) == "x"
