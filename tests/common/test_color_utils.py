from __future__ import annotations

import pytest

from util.color import auto_line_color, normalize_color, parse_hex_color_str, to_u8_rgba


def _approx_tuple(t):
    return tuple(round(v, 6) for v in t)


def test_parse_hex_color_valid_variants() -> None:
    expected = (round(0x11 / 255.0, 6), round(0x22 / 255.0, 6), round(0x33 / 255.0, 6), 1.0)
    assert _approx_tuple(parse_hex_color_str("#112233")) == expected
    assert _approx_tuple(parse_hex_color_str("112233")) == expected
    assert _approx_tuple(parse_hex_color_str("#112233cc"))[3] == round(0xCC / 255.0, 6)


def test_parse_hex_color_invalid() -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str("#123")
    with pytest.raises(ValueError):
        parse_hex_color_str("#zzzzzz")


def test_normalize_color_accepts_01_and_255_ranges() -> None:
    assert normalize_color((0.0, 0.5, 1.0)) == (0.0, 0.5, 1.0, 1.0)
    assert normalize_color((255, 0, 0)) == (1.0, 0.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        normalize_color((1, 2))
    with pytest.raises(ValueError):
        normalize_color(42)


def test_to_u8_and_auto_line_color() -> None:
    assert to_u8_rgba("#FF000080") == (255, 0, 0, 128)
    assert auto_line_color("#FFFFFF") == (0.0, 0.0, 0.0, 1.0)
    assert auto_line_color((0, 0, 0)) == (1.0, 1.0, 1.0, 1.0)
