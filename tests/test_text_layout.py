"""Tests for wrapping, justification, truncation and hanging indents."""

from __future__ import annotations

from cv_pdf_engine.layout.text import (
    hanging_indent_lines,
    justify_line,
    truncate_with_ellipsis,
    wrap_text,
)


class TestWrapText:
    def test_breaks_on_word_boundaries(self, fixed_font) -> None:
        # 5pt per character at size 10
        assert wrap_text("aaa bbb ccc", 40, 10, fixed_font) == ["aaa bbb", "ccc"]

    def test_every_line_fits_unless_single_word(self, fixed_font) -> None:
        text = "one two three four five six seven eight nine ten"
        for line in wrap_text(text, 60, 10, fixed_font):
            assert fixed_font.measure(line, 10) <= 60 or " " not in line

    def test_long_word_overflows_on_its_own_line(self, fixed_font) -> None:
        assert wrap_text("a supercalifragilistic b", 20, 10, fixed_font) == [
            "a",
            "supercalifragilistic",
            "b",
        ]

    def test_blank_or_missing_text_gives_no_lines(self, fixed_font) -> None:
        assert wrap_text(None, 100, 10, fixed_font) == []
        assert wrap_text("   \n\t ", 100, 10, fixed_font) == []

    def test_collapses_whitespace(self, fixed_font) -> None:
        assert wrap_text("a   b\n c", 500, 10, fixed_font) == ["a b c"]


class TestJustifyLine:
    def test_pads_gaps_to_fill_width(self, fixed_font) -> None:
        # words are 15pt wide, a space 5pt: 7 spaces spread as 4 + 3
        assert justify_line("a b c", 50, 10, fixed_font) == "a    b   c"

    def test_result_within_one_space_of_width(self, fixed_font) -> None:
        line = "lorem ipsum dolor sit amet"
        for width in (140, 163, 200, 231):
            padded = justify_line(line, width, 10, fixed_font)
            assert abs(fixed_font.measure(padded, 10) - width) <= fixed_font.measure(" ", 10)
            assert padded.split() == line.split()

    def test_single_word_unchanged(self, fixed_font) -> None:
        assert justify_line("word", 100, 10, fixed_font) == "word"

    def test_keeps_at_least_one_space_per_gap(self, fixed_font) -> None:
        assert justify_line("aaaa bbbb", 10, 10, fixed_font) == "aaaa bbbb"


class TestTruncateWithEllipsis:
    def test_short_input_is_returned_unchanged(self, fixed_font) -> None:
        assert truncate_with_ellipsis(["a", "b"], 3, 100, 10, fixed_font) == ["a", "b"]

    def test_caps_lines_and_appends_ellipsis(self, fixed_font) -> None:
        result = truncate_with_ellipsis(["aaaa", "bbbb", "cccc"], 2, 100, 10, fixed_font)
        assert result == ["aaaa", "bbbb..."]

    def test_trims_last_line_to_fit_ellipsis(self, fixed_font) -> None:
        result = truncate_with_ellipsis(["aaaa", "bbbb", "cccc"], 2, 30, 10, fixed_font)
        assert result == ["aaaa", "bbb..."]
        assert fixed_font.measure(result[-1], 10) <= 30


class TestHangingIndentLines:
    def test_indent_is_bullet_width(self, fixed_font) -> None:
        lines, indent = hanging_indent_lines("alpha beta gamma", "• ", 50, 10, fixed_font)
        assert indent == 10
        # body column is 40pt wide
        assert lines == ["alpha", "beta", "gamma"]

    def test_min_body_width_applies(self, fixed_font) -> None:
        lines, _ = hanging_indent_lines("alpha beta gamma", "• ", 20, 10, fixed_font, min_body_width=60)
        assert lines == ["alpha beta", "gamma"]

    def test_empty_body(self, fixed_font) -> None:
        assert hanging_indent_lines("", "• ", 60, 10, fixed_font) == ([], 10)
