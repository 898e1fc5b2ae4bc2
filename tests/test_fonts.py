import pytest

from oledkit import font_7x10, font_11x18, font_16x26
from oledkit.fonts import (
    FONT_7X10,
    FONT_11X18,
    FONT_16X26,
    Font,
    TextSize,
    get_string_size,
)

ALL_FONTS = [FONT_7X10, FONT_11X18, FONT_16X26]
PRINTABLE = "".join(chr(code) for code in range(ord(" "), ord("~") + 1))


def test_font_dimensions_match_source():
    assert get_string_size("A", FONT_7X10) == TextSize(length=7, height=10)
    assert get_string_size("A", FONT_11X18) == TextSize(length=11, height=18)
    assert get_string_size("A", FONT_16X26) == TextSize(length=16, height=26)


@pytest.mark.parametrize("font", ALL_FONTS)
def test_font_covers_printable_ascii(font):
    assert font.first_char == ord(" ")
    assert font.last_char == ord("~")
    size = get_string_size(" ~", font)
    assert size == TextSize(length=2 * font.width, height=font.height)
    with pytest.raises(ValueError):
        font.glyph(chr(font.first_char - 1))
    with pytest.raises(ValueError):
        font.glyph(chr(font.last_char + 1))


@pytest.mark.parametrize("font", ALL_FONTS)
def test_every_glyph_has_font_height_rows(font):
    size = get_string_size(PRINTABLE, font)
    assert size.length == len(PRINTABLE) * font.width
    assert size.height == font.height
    for ch in PRINTABLE:
        assert len(font.glyph(ch)) == font.height


def test_space_glyph_is_blank():
    blank_7x10 = FONT_7X10.glyph(" ")
    blank_11x18 = FONT_11X18.glyph(" ")
    blank_16x26 = FONT_16X26.glyph(" ")
    assert len(blank_7x10) == 10 and all(row == 0 for row in blank_7x10)
    assert len(blank_11x18) == 18 and all(row == 0 for row in blank_11x18)
    assert len(blank_16x26) == 26 and all(row == 0 for row in blank_16x26)


def test_glyph_reads_from_the_right_offset():
    index = ord("A") - font_7x10.FIRST_CHAR
    expected = font_7x10.DATA[index * 10:(index + 1) * 10]
    assert FONT_7X10.glyph("A") == expected
    assert FONT_7X10.glyph("A")[0] == 0x1000


def test_glyph_for_last_character():
    assert FONT_11X18.glyph("~") == font_11x18.DATA[-18:]
    assert FONT_16X26.glyph("~") == font_16x26.DATA[-26:]


@pytest.mark.parametrize("ch", ["\x1f", "\x7f", "\u00e9"])
def test_glyph_outside_font_raises(ch):
    with pytest.raises(ValueError):
        FONT_7X10.glyph(ch)


def test_glyph_requires_single_character():
    with pytest.raises(ValueError):
        FONT_7X10.glyph("ab")
    with pytest.raises(ValueError):
        FONT_7X10.glyph("")


def test_string_size_scales_with_length():
    single = FONT_11X18.string_size("o")
    four = FONT_11X18.string_size("oled")
    assert four.length == 4 * single.length
    assert four.height == single.height == FONT_11X18.height


def test_string_size_of_empty_string():
    assert FONT_16X26.string_size("") == TextSize(length=0, height=26)


def test_get_string_size_matches_method():
    for font in ALL_FONTS:
        assert get_string_size("NUVOTON", font) == font.string_size("NUVOTON")


def test_custom_font_last_char():
    font = Font(width=2, height=1, data=(0x8000, 0x4000), first_char=0x41)
    assert font.glyph("B") == (0x4000,)
    with pytest.raises(ValueError):
        font.glyph("C")