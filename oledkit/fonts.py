"""Bitmap fonts for monochrome displays and text size measurement."""

from __future__ import annotations

from dataclasses import dataclass

from . import font_7x10, font_11x18, font_16x26


@dataclass(frozen=True)
class TextSize:
    """Size of a rendered string in pixels."""

    length: int
    height: int


@dataclass(frozen=True)
class Font:
    """A fixed-width bitmap font covering printable ASCII.

    Each glyph is ``height`` rows of 16-bit words; the most significant bit
    of a row is the leftmost pixel and only the top ``width`` bits are used.
    """

    width: int
    height: int
    data: tuple[int, ...]
    first_char: int = 0x20

    @property
    def last_char(self) -> int:
        """Code point of the last character the font holds."""
        return self.first_char + len(self.data) // self.height - 1

    def glyph(self, ch: str) -> tuple[int, ...]:
        """Return the rows of the glyph for a single character."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        code = ord(ch)
        if not self.first_char <= code <= self.last_char:
            raise ValueError(f"character {ch!r} is not in this font")
        start = (code - self.first_char) * self.height
        return self.data[start:start + self.height]

    def string_size(self, text: str) -> TextSize:
        """Return the pixel size of ``text`` drawn in this font."""
        return TextSize(length=self.width * len(text), height=self.height)


FONT_7X10 = Font(font_7x10.WIDTH, font_7x10.HEIGHT, font_7x10.DATA, font_7x10.FIRST_CHAR)
FONT_11X18 = Font(font_11x18.WIDTH, font_11x18.HEIGHT, font_11x18.DATA, font_11x18.FIRST_CHAR)
FONT_16X26 = Font(font_16x26.WIDTH, font_16x26.HEIGHT, font_16x26.DATA, font_16x26.FIRST_CHAR)


def get_string_size(text: str, font: Font) -> TextSize:
    """Return the pixel size of ``text`` drawn in ``font``."""
    return font.string_size(text)