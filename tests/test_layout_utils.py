"""Tests for installer_tui.utils.layout_utils – centering and footer glyphs."""

from __future__ import annotations

import pytest
from rich.text import Text

from installer_tui.utils.layout_utils import (
    GRAY,
    HEADER_TEXT,
    LIGHT_CYAN,
    SPINNER_FRAMES,
    StyledLine,
    center_line,
    footer_line,
    header_line,
    spinner_glyph,
    text_length,
)


# ===========================================================================
# center_line – padding
# ===========================================================================

class TestCenterLine:
    @pytest.mark.parametrize("text,width,expected", [
        ("abcd", 10, 3),
        ("abc", 10, 3),   # odd remainder rounds down
        ("abcd", 4, 0),
        ("", 9, 4),
        ("", 0, 0),
    ])
    def test_leading_padding(self, text, width, expected):
        line = center_line(text, width)
        assert line.padding == expected
        assert line.plain == " " * expected + text

    def test_text_is_unmodified(self):
        line = center_line("Welcome", 40)
        assert line.text == "Welcome"
        assert line.plain.lstrip(" ") == "Welcome"

    def test_no_trailing_padding(self):
        line = center_line("abc", 10)
        assert not line.plain.endswith(" ")
        assert len(line.plain) == 6

    def test_narrow_width_clamps_to_zero(self):
        line = center_line("a very long line of text", 5)
        assert line.padding == 0
        assert line.plain == "a very long line of text"

    def test_negative_width_does_not_fail(self):
        assert center_line("abc", -10).padding == 0

    @pytest.mark.parametrize("text,width,expected", [
        ("→ English", 80, 34),    # arrow is 3 bytes
        ("  Français", 80, 34),   # ç is 2 bytes
        ("Installation Complete! 🎉", 80, 26),
    ])
    def test_multibyte_text_measured_in_utf8_bytes(self, text, width, expected):
        assert center_line(text, width).padding == expected

    def test_text_length_counts_bytes(self):
        assert text_length("abc") == 3
        assert text_length("→") == 3
        assert text_length("🚀") == 4

    def test_keeps_style(self):
        line = center_line("x", 3, "magenta", bold=True)
        assert line.color == "magenta"
        assert line.bold is True


# ===========================================================================
# StyledLine – rich conversion
# ===========================================================================

class TestStyledLine:
    def test_to_text_plain_content(self):
        text = StyledLine("hi", padding=2, color="cyan", bold=True).to_text()
        assert isinstance(text, Text)
        assert text.plain == "  hi"

    def test_to_text_style(self):
        text = StyledLine("hi", color="cyan", bold=True).to_text()
        assert text.style.bold is True
        assert text.style.color.name == "cyan"


# ===========================================================================
# Header / footer
# ===========================================================================

class TestHeaderFooter:
    def test_spinner_sequence(self):
        assert [spinner_glyph(i) for i in range(5)] == ["|", "/", "-", "\\", "|"]

    def test_four_frames(self):
        assert len(SPINNER_FRAMES) == 4

    def test_header_uses_full_width(self):
        line = header_line(80)
        assert line.text == HEADER_TEXT
        assert line.padding == 27  # header is 26 bytes in UTF-8
        assert line.color == LIGHT_CYAN
        assert line.bold

    def test_footer_glyph(self):
        line = footer_line(2, 21)
        assert line.text == "-"
        assert line.padding == 10
        assert line.color == GRAY
        assert not line.bold
