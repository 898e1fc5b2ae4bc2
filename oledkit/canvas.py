"""A 1-bit frame buffer laid out in SSD1306 page order, with drawing primitives."""

from __future__ import annotations

from enum import IntEnum

from .fonts import Font

WIDTH = 128
HEIGHT = 64


class Color(IntEnum):
    """Pixel colour: BLACK clears a pixel, WHITE lights it."""

    BLACK = 0x00
    WHITE = 0x01

    @property
    def inverse(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class CanvasOverflowError(Exception):
    """Raised when a character does not fit at the current cursor."""

    def __init__(self, char: str) -> None:
        super().__init__(f"character {char!r} does not fit on the canvas")
        self.char = char


def _clamp(value: int, limit: int) -> int:
    return min(max(value, 0), limit - 1)


class Canvas:
    """In-memory display image.

    Bytes are grouped in pages of eight rows: byte ``x + (y // 8) * width``
    holds column ``x`` of that page, with bit ``y % 8`` for row ``y``.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0 or height % 8:
            raise ValueError("width must be positive and height a positive multiple of 8")
        self.width = width
        self.height = height
        self._buffer = bytearray(width * height // 8)
        self.cursor_x = 0
        self.cursor_y = 0
        self.inverted = False

    @property
    def buffer(self) -> bytes:
        """A copy of the raw frame buffer."""
        return bytes(self._buffer)

    @property
    def pages(self) -> int:
        return self.height // 8

    def fill(self, color: Color) -> None:
        """Set every pixel to ``color``."""
        value = 0x00 if Color(color) is Color.BLACK else 0xFF
        self._buffer[:] = bytes([value]) * len(self._buffer)

    def toggle_invert(self) -> None:
        """Invert every pixel and swap the meaning of colours for later drawing."""
        self.inverted = not self.inverted
        self._buffer[:] = bytes(b ^ 0xFF for b in self._buffer)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if not self._in_bounds(x, y):
            return
        color = Color(color)
        if self.inverted:
            color = color.inverse
        index = x + (y // 8) * self.width
        mask = 1 << (y % 8)
        if color is Color.WHITE:
            self._buffer[index] |= mask
        else:
            self._buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the stored colour of a pixel."""
        if not self._in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        byte = self._buffer[x + (y // 8) * self.width]
        return Color.WHITE if byte & (1 << (y % 8)) else Color.BLACK

    def goto(self, x: int, y: int) -> None:
        """Move the text cursor."""
        self.cursor_x = x
        self.cursor_y = y

    def putc(self, ch: str, font: Font, color: Color) -> str:
        """Draw one character at the cursor and advance it; return the character."""
        if (
            self.width <= self.cursor_x + font.width
            or self.height <= self.cursor_y + font.height
        ):
            raise CanvasOverflowError(ch)
        color = Color(color)
        background = color.inverse
        for i, row in enumerate(font.glyph(ch)):
            for j in range(font.width):
                lit = (row << j) & 0x8000
                self.draw_pixel(self.cursor_x + j, self.cursor_y + i, color if lit else background)
        self.cursor_x += font.width
        return ch

    def puts(self, text: str, font: Font, color: Color) -> None:
        """Draw a string; raises CanvasOverflowError at the first character that does not fit."""
        for ch in text:
            self.putc(ch, font, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        """Draw a line; endpoints are clamped into the canvas."""
        x0, x1 = _clamp(x0, self.width), _clamp(x1, self.width)
        y0, y1 = _clamp(y0, self.height), _clamp(y1, self.height)

        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx // 2 if dx > dy else -(dy // 2)

        if dx == 0:
            for y in range(min(y0, y1), max(y0, y1) + 1):
                self.draw_pixel(x0, y, color)
            return
        if dy == 0:
            for x in range(min(x0, x1), max(x0, x1) + 1):
                self.draw_pixel(x, y0, color)
            return

        while True:
            self.draw_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = err
            if e2 > -dx:
                err -= dy
                x0 += sx
            if e2 < dy:
                err += dx
                y0 += sy

    def _fit_rectangle(self, x: int, y: int, w: int, h: int) -> tuple[int, int] | None:
        if not self._in_bounds(x, y):
            return None
        if x + w >= self.width:
            w = self.width - x
        if y + h >= self.height:
            h = self.height - y
        return w, h

    def draw_rectangle(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Draw a rectangle outline with its top-left corner at (x, y)."""
        fitted = self._fit_rectangle(x, y, w, h)
        if fitted is None:
            return
        w, h = fitted
        self.draw_line(x, y, x + w, y, color)
        self.draw_line(x, y + h, x + w, y + h, color)
        self.draw_line(x, y, x, y + h, color)
        self.draw_line(x + w, y, x + w, y + h, color)

    def draw_filled_rectangle(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Draw a solid rectangle with its top-left corner at (x, y)."""
        fitted = self._fit_rectangle(x, y, w, h)
        if fitted is None:
            return
        w, h = fitted
        for i in range(h + 1):
            self.draw_line(x, y + i, x + w, y + i, color)

    def draw_triangle(self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int,
                      color: Color) -> None:
        """Draw a triangle outline."""
        self.draw_line(x1, y1, x2, y2, color)
        self.draw_line(x2, y2, x3, y3, color)
        self.draw_line(x3, y3, x1, y1, color)

    def draw_filled_triangle(self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int,
                             color: Color) -> None:
        """Draw a solid triangle by fanning lines from the first edge to the third vertex."""
        deltax = abs(x2 - x1)
        deltay = abs(y2 - y1)
        x, y = x1, y1
        xinc1 = xinc2 = 1 if x2 >= x1 else -1
        yinc1 = yinc2 = 1 if y2 >= y1 else -1

        if deltax >= deltay:
            xinc1 = 0
            yinc2 = 0
            den, num, numadd, numpixels = deltax, deltax // 2, deltay, deltax
        else:
            xinc2 = 0
            yinc1 = 0
            den, num, numadd, numpixels = deltay, deltay // 2, deltax, deltay

        for _ in range(numpixels + 1):
            self.draw_line(x, y, x3, y3, color)
            num += numadd
            if num >= den:
                num -= den
                x += xinc1
                y += yinc1
            x += xinc2
            y += yinc2

    def _circle_points(self, r: int):
        f = 1 - r
        ddf_x = 1
        ddf_y = -2 * r
        x, y = 0, r
        while x < y:
            if f >= 0:
                y -= 1
                ddf_y += 2
                f += ddf_y
            x += 1
            ddf_x += 2
            f += ddf_x
            yield x, y

    def draw_circle(self, x0: int, y0: int, r: int, color: Color) -> None:
        """Draw a circle outline centred at (x0, y0)."""
        self.draw_pixel(x0, y0 + r, color)
        self.draw_pixel(x0, y0 - r, color)
        self.draw_pixel(x0 + r, y0, color)
        self.draw_pixel(x0 - r, y0, color)
        for x, y in self._circle_points(r):
            self.draw_pixel(x0 + x, y0 + y, color)
            self.draw_pixel(x0 - x, y0 + y, color)
            self.draw_pixel(x0 + x, y0 - y, color)
            self.draw_pixel(x0 - x, y0 - y, color)
            self.draw_pixel(x0 + y, y0 + x, color)
            self.draw_pixel(x0 - y, y0 + x, color)
            self.draw_pixel(x0 + y, y0 - x, color)
            self.draw_pixel(x0 - y, y0 - x, color)

    def draw_filled_circle(self, x0: int, y0: int, r: int, color: Color) -> None:
        """Draw a solid circle centred at (x0, y0)."""
        self.draw_pixel(x0, y0 + r, color)
        self.draw_pixel(x0, y0 - r, color)
        self.draw_pixel(x0 + r, y0, color)
        self.draw_pixel(x0 - r, y0, color)
        self.draw_line(x0 - r, y0, x0 + r, y0, color)
        for x, y in self._circle_points(r):
            self.draw_line(x0 - x, y0 + y, x0 + x, y0 + y, color)
            self.draw_line(x0 + x, y0 - y, x0 - x, y0 - y, color)
            self.draw_line(x0 + y, y0 + x, x0 - y, y0 + x, color)
            self.draw_line(x0 + y, y0 - x, x0 - y, y0 - x, color)

    def draw_bitmap(self, x: int, y: int, bitmap: bytes, w: int, h: int, color: Color) -> None:
        """Draw the set bits of a row-major, MSB-first bitmap; rows are padded to whole bytes."""
        byte_width = (w + 7) // 8
        for j in range(h):
            for i in range(w):
                byte = bitmap[j * byte_width + i // 8]
                if byte & (0x80 >> (i & 7)):
                    self.draw_pixel(x + i, y + j, color)

    def page(self, index: int) -> bytes:
        """Return the bytes of one eight-row page."""
        if not 0 <= index < self.pages:
            raise IndexError(f"page {index} is outside the canvas")
        return bytes(self._buffer[self.width * index:self.width * (index + 1)])

    def to_text(self, on: str = "#", off: str = ".") -> str:
        """Render the canvas as lines of text, one character per pixel."""
        return "\n".join(
            "".join(on if self.get_pixel(x, y) is Color.WHITE else off for x in range(self.width))
            for y in range(self.height)
        )