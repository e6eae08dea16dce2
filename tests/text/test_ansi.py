import pytest
from tabplot.text.ansi import (
    COLOR_CYCLE,
    RESET,
    Color,
    color_for,
    pad_center,
    pad_start,
    strip_ansi,
    visible_width,
)
from tabplot.text.values import display_value, format_number


class TestVisibleWidth:
    def test_plain_text(self):
        assert visible_width("hello") == 5

    @pytest.mark.parametrize("color", list(Color))
    def test_wrapped_text_counts_only_visible_characters(self, color: Color):
        """Color wrappers never add to the width."""
        assert visible_width(color.wrap("hello")) == visible_width("hello")

    def test_many_embedded_codes(self):
        text = f"{Color.RED.wrap('a')}b{Color.BLUE.wrap('cd')}\x1b[1;31me{RESET}"
        assert visible_width(text) == 5

    def test_empty(self):
        assert visible_width("") == 0
        assert visible_width(Color.GREEN.wrap("")) == 0


class TestPadCenter:
    def test_even_padding(self):
        assert pad_center("ab", 6) == "  ab  "

    def test_odd_remainder_goes_right(self):
        assert pad_center("abc", 6) == " abc  "

    def test_narrower_width_never_truncates(self):
        assert pad_center("abcdef", 3) == "abcdef"
        assert pad_center("abcdef", -4) == "abcdef"

    def test_colored_text_centers_by_visible_width(self):
        padded = pad_center(Color.RED.wrap("ab"), 6)
        assert strip_ansi(padded) == "  ab  "
        assert visible_width(padded) == 6


class TestPadStart:
    def test_right_aligns(self):
        assert pad_start("ab", 4) == "  ab"

    def test_wider_text_unchanged(self):
        assert pad_start("abcdef", 2) == "abcdef"


class TestColors:
    def test_wrap_resets(self):
        assert Color.BLUE.wrap("x") == "\x1b[34mx\x1b[0m"

    def test_cycle_order(self):
        assert COLOR_CYCLE[:3] == (Color.BLUE, Color.GREEN, Color.RED)

    def test_color_for_wraps_around(self):
        assert color_for(0) is Color.BLUE
        assert color_for(len(COLOR_CYCLE)) is Color.BLUE
        assert color_for(len(COLOR_CYCLE) + 1) is Color.GREEN

    def test_from_name(self):
        assert Color.from_name(" Magenta ") is Color.MAGENTA
        with pytest.raises(ValueError):
            Color.from_name("pink")


class TestValues:
    def test_display_value_dates(self):
        from datetime import date, datetime

        assert display_value(datetime(2024, 1, 5)) == "2024-01-05"
        assert display_value(datetime(2024, 1, 5, 13, 30)) == "2024-01-05 13:30:00"
        assert display_value(date(2024, 1, 5)) == "2024-01-05"

    def test_display_value_other(self):
        assert display_value(True) == "true"
        assert display_value(3) == "3"
        assert display_value("abc") == "abc"

    def test_format_number(self):
        assert format_number(3.14159) == "3.14"
        assert format_number(2, 0) == "2"
