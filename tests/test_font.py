import string

import pytest

from retroracers.font import (
    COLON,
    FONT_DIGITS,
    FONT_UPPERCASE,
    GLYPH_WIDTH,
    PERIOD,
    SPACE,
    glyph,
)


def test_digit_zero_matches_font_table():
    assert glyph("0") == bytes((0x3E, 0x51, 0x49, 0x45, 0x3E, 0x00))


def test_letter_a_matches_font_table():
    assert glyph("A") == bytes((0x7E, 0x11, 0x11, 0x11, 0x7E, 0x00))


@pytest.mark.parametrize("index, char", list(enumerate(string.digits)))
def test_digits_map_in_order(index, char):
    assert glyph(char) == FONT_DIGITS[index]


@pytest.mark.parametrize("index, char", list(enumerate(string.ascii_uppercase)))
def test_uppercase_map_in_order(index, char):
    assert glyph(char) == FONT_UPPERCASE[index]


def test_punctuation():
    assert glyph(":") == COLON
    assert glyph(".") == PERIOD


@pytest.mark.parametrize("char", ["a", " ", "z", "#", "-"])
def test_unknown_characters_are_blank(char):
    assert glyph(char) == SPACE


@pytest.mark.parametrize("char", string.printable)
def test_every_glyph_has_fixed_width(char):
    assert len(glyph(char)) == GLYPH_WIDTH


@pytest.mark.parametrize("bad", ["", "AB"])
def test_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        glyph(bad)