"""Tests for hex color text and named presets."""

import re

import pytest

from huepicker.colors import (
    COLORS,
    VALID_HEX_PATTERN,
    format_hex,
    from_rgb,
    is_valid_hex,
    parse_hex,
    resolve_color,
    to_rgb,
)


@pytest.mark.unit
class TestParseHex:
    """parse_hex accepts complete colors and rejects everything else."""

    @pytest.mark.parametrize("text", ["F00", "#F00", "FF0000", "#ff0000", "#Ff0000"])
    def test_accepts_opaque_red(self, text):
        assert to_rgb(parse_hex(text)) == (255, 0, 0, 255)

    def test_accepts_alpha_first(self):
        assert to_rgb(parse_hex("80FF0000")) == (255, 0, 0, 128)
        assert to_rgb(parse_hex("#00123456")) == (0x12, 0x34, 0x56, 0)

    def test_short_form_doubles_nibbles(self):
        assert to_rgb(parse_hex("0F8")) == (0, 255, 136, 255)

    @pytest.mark.parametrize(
        "text",
        ["", "#GGG", "12345", "1234567", "#", "##F00", " F00", "F00 ", "FF00", "FF000000F", "0xF00", "\u0661\u0662\u0663"],
    )
    def test_rejects(self, text):
        assert parse_hex(text) is None
        assert not is_valid_hex(text)

    def test_rejects_non_strings(self):
        assert parse_hex(None) is None
        assert not is_valid_hex(0xFF0000)

    def test_alpha_discarded_when_disallowed(self):
        color = parse_hex("00FF0000", allow_alpha=False)
        assert to_rgb(color) == (255, 0, 0, 255)

    def test_six_digits_opaque_even_when_alpha_allowed(self):
        assert parse_hex("123456").alpha == 1.0


@pytest.mark.unit
class TestFormatHex:
    """format_hex writes upper-case digits without '#'."""

    def test_rgb(self, orange):
        assert format_hex(orange) == "FF8000"

    def test_alpha_first(self):
        assert format_hex(from_rgb(255, 128, 0, 128), include_alpha=True) == "80FF8000"

    def test_opaque_with_alpha(self, orange):
        assert format_hex(orange, include_alpha=True) == "FFFF8000"

    @pytest.mark.parametrize("text", ["00000000", "FFFFFFFF", "7F0A1B2C", "c0ffee42"])
    def test_round_trip(self, text):
        assert format_hex(parse_hex(text), include_alpha=True) == text.upper()

    def test_color_round_trip(self):
        color = from_rgb(12, 200, 99, 10)
        assert parse_hex(format_hex(color, include_alpha=True)) == color

    @pytest.mark.parametrize("channel", range(4))
    def test_every_byte_round_trips(self, channel):
        for byte in range(256):
            rgba = [40, 180, 90, 210]
            rgba[channel] = byte
            text = format_hex(from_rgb(*rgba), include_alpha=True)
            assert to_rgb(parse_hex(text)) == tuple(rgba)

    def test_digit_filter_pattern(self):
        assert re.fullmatch(VALID_HEX_PATTERN, "aB09")
        assert not re.fullmatch(VALID_HEX_PATTERN, "#aB09")


@pytest.mark.unit
class TestPresets:
    """Named presets and resolve_color."""

    def test_names(self):
        names = COLORS.names()
        assert "orange" in names
        assert "transparent" in names
        assert names == sorted(names)

    def test_get_is_case_insensitive(self):
        assert COLORS.get("Orange") == COLORS.ORANGE
        assert COLORS.get(" cyan ") == COLORS.CYAN

    def test_get_unknown(self):
        assert COLORS.get("chartreuse") is None
        assert COLORS.get("names") is None

    def test_resolve_preset(self, orange):
        assert resolve_color("orange") == orange

    def test_resolve_hex(self):
        assert to_rgb(resolve_color("#00F")) == (0, 0, 255, 255)

    def test_resolve_unknown(self):
        assert resolve_color("not-a-color") is None

    def test_resolve_preset_without_alpha(self):
        assert resolve_color("transparent").alpha == 0.0
        assert resolve_color("transparent", allow_alpha=False).alpha == 1.0
