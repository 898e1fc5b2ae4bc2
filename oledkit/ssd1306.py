"""Driver for an SSD1306 128x64 OLED controller reached over I2C."""

from __future__ import annotations

from collections.abc import Iterable

from .canvas import Canvas, Color
from .transport import Transport

I2C_ADDRESS = 0x3C

COMMAND = 0x00
DATA = 0x40

RIGHT_HORIZONTAL_SCROLL = 0x26
LEFT_HORIZONTAL_SCROLL = 0x27
VERTICAL_AND_RIGHT_HORIZONTAL_SCROLL = 0x29
VERTICAL_AND_LEFT_HORIZONTAL_SCROLL = 0x2A
DEACTIVATE_SCROLL = 0x2E
ACTIVATE_SCROLL = 0x2F
SET_VERTICAL_SCROLL_AREA = 0xA3

NORMAL_DISPLAY = 0xA6
INVERT_DISPLAY = 0xA7

INIT_SEQUENCE: tuple[int, ...] = (
    0xAE,        # display off
    0x20, 0x10,  # page addressing mode
    0xB0,        # page start address
    0xC8,        # COM output scan direction
    0x00,        # low column address
    0x10,        # high column address
    0x40,        # start line address
    0x81, 0xFF,  # contrast
    0xA1,        # segment re-map 0 to 127
    0xA6,        # normal display
    0xA8, 0x3F,  # multiplex ratio
    0xA4,        # output follows RAM content
    0xD3, 0x00,  # display offset
    0xD5, 0xF0,  # clock divide ratio / oscillator frequency
    0xD9, 0x22,  # pre-charge period
    0xDA, 0x12,  # COM pins hardware configuration
    0xDB, 0x20,  # VCOMH
    0x8D, 0x14,  # DC-DC enable
    0xAF,        # panel on
)


class SSD1306:
    """An SSD1306 display: a canvas in memory plus the commands that drive the panel."""

    def __init__(self, transport: Transport, canvas: Canvas | None = None,
                 address: int = I2C_ADDRESS) -> None:
        self.transport = transport
        self.canvas = canvas if canvas is not None else Canvas()
        self.address = address
        self.initialized = False

    def write_command(self, command: int) -> None:
        """Send one command byte."""
        self.transport.write(self.address, bytes([COMMAND, command]))

    def write_data(self, data: int) -> None:
        """Send one byte of display data."""
        self.transport.write(self.address, bytes([DATA, data]))

    def write_multi(self, reg: int, data: Iterable[int]) -> None:
        """Send a control byte followed by several bytes in one transaction."""
        self.transport.write(self.address, bytes([reg]) + bytes(data))

    def _commands(self, *commands: int) -> None:
        for command in commands:
            self.write_command(command)

    def init(self) -> bool:
        """Configure the panel, blank it and reset the cursor."""
        self._commands(*INIT_SEQUENCE)
        self.write_command(DEACTIVATE_SCROLL)
        self.canvas.fill(Color.BLACK)
        self.update_screen()
        self.canvas.goto(0, 0)
        self.initialized = True
        return True

    def update_screen(self) -> None:
        """Copy the whole canvas to the panel, one page at a time."""
        for index in range(self.canvas.pages):
            self._commands(0xB0 + index, 0x00, 0x10)
            self.write_multi(DATA, self.canvas.page(index))

    def _scroll_horizontal(self, direction: int, start_row: int, end_row: int) -> None:
        self._commands(direction, 0x00, start_row, 0x00, end_row, 0x00, 0xFF,
                       ACTIVATE_SCROLL)

    def _scroll_diagonal(self, direction: int, start_row: int, end_row: int) -> None:
        self._commands(SET_VERTICAL_SCROLL_AREA, 0x00, self.canvas.height)
        self._commands(direction, 0x00, start_row, 0x00, end_row, 0x01, ACTIVATE_SCROLL)

    def scroll_right(self, start_row: int, end_row: int) -> None:
        """Scroll pages ``start_row`` to ``end_row`` to the right."""
        self._scroll_horizontal(RIGHT_HORIZONTAL_SCROLL, start_row, end_row)

    def scroll_left(self, start_row: int, end_row: int) -> None:
        """Scroll pages ``start_row`` to ``end_row`` to the left."""
        self._scroll_horizontal(LEFT_HORIZONTAL_SCROLL, start_row, end_row)

    def scroll_diag_right(self, start_row: int, end_row: int) -> None:
        """Scroll vertically and to the right."""
        self._scroll_diagonal(VERTICAL_AND_RIGHT_HORIZONTAL_SCROLL, start_row, end_row)

    def scroll_diag_left(self, start_row: int, end_row: int) -> None:
        """Scroll vertically and to the left."""
        self._scroll_diagonal(VERTICAL_AND_LEFT_HORIZONTAL_SCROLL, start_row, end_row)

    def stop_scroll(self) -> None:
        """Stop any active scrolling."""
        self.write_command(DEACTIVATE_SCROLL)

    def invert_display(self, inverted: bool) -> None:
        """Switch the panel between inverted and normal output."""
        self.write_command(INVERT_DISPLAY if inverted else NORMAL_DISPLAY)

    def clear(self) -> None:
        """Blank the canvas and the panel."""
        self.canvas.fill(Color.BLACK)
        self.update_screen()

    def on(self) -> None:
        """Enable the charge pump and turn the panel on."""
        self._commands(0x8D, 0x14, 0xAF)

    def off(self) -> None:
        """Disable the charge pump and turn the panel off."""
        self._commands(0x8D, 0x10, 0xAE)