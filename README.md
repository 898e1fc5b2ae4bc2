# oledkit

oledkit drives SSD1306 128×64 monochrome OLED panels from Python. It keeps
the display's frame buffer in memory and provides drawing primitives and
three bitmap fonts. It also builds the panel's I2C command sequences and
passes them to a transport that you supply.

## Installing

```
pip install oledkit
```

To install with the test dependencies as well:

```
pip install "oledkit[test]"
```

## Modules

### `oledkit.canvas`

`Canvas(width=128, height=64)` is a 1-bit frame buffer laid out in pages of
eight rows. The default size gives a 1024-byte buffer. The height must be a
positive multiple of 8.

- `fill(color)`, `draw_pixel(x, y, color)` and `get_pixel(x, y)` work on
  the pixels. `draw_pixel` ignores coordinates that fall outside the canvas.
  `get_pixel` raises `IndexError` for them.
- `draw_line`, `draw_rectangle`, `draw_filled_rectangle`, `draw_triangle`,
  `draw_filled_triangle`, `draw_circle`, `draw_filled_circle` and
  `draw_bitmap` draw shapes. `draw_line` clamps its endpoints into the
  canvas. `draw_bitmap` takes a row-major bitmap with the most significant
  bit first, each row padded to whole bytes, and draws only the bits that
  are set.
- `goto(x, y)` moves the text cursor.
  - `putc(ch, font, color)` draws one character with its background in the
    opposite colour, advances the cursor and returns the character.
  - `puts(text, font, color)` draws a string.
  - A character raises `CanvasOverflowError` when the cursor plus the font's
    width reaches the canvas width, or the cursor plus the font's height
    reaches the canvas height. Characters drawn before it stay drawn.
- `toggle_invert()` flips every pixel. It also swaps the meaning of
  `Color.BLACK` and `Color.WHITE` for later drawing.
- `page(index)` returns the bytes of one eight-row page. The `buffer`
  property returns a copy of the whole buffer.
- `to_text(on="#", off=".")` renders the canvas as text, one character per
  pixel.

`Color` has two members, `BLACK` and `WHITE`.

### `oledkit.fonts`

`Font` is a fixed-width bitmap font covering printable ASCII from space to
`~`. Three fonts are provided: `FONT_7X10`, `FONT_11X18` and `FONT_16X26`.

- `Font.glyph(ch)` returns the rows of one glyph. It raises `ValueError`
  for characters the font does not hold.
- `Font.string_size(text)` and `get_string_size(text, font)` return a
  `TextSize(length, height)` in pixels.

### `oledkit.transport`

`Transport(send)` sends each I2C write transaction through the callable
`send(address, data)`. It first checks that the address is a 7-bit address
and that there is something to write; otherwise it raises `ValueError`.

`RecordingTransport()` keeps every transaction in its `writes` list instead
of sending it.

- `commands()` returns the command bytes of all recorded command
  transactions, in order.
- `clear()` forgets everything recorded so far.

### `oledkit.ssd1306`

`SSD1306(transport, canvas=None, address=0x3C)` ties a canvas to a
transport.

- `init()` sends the power-up sequence, stops scrolling, blanks the panel
  and resets the cursor.
- `update_screen()` copies the canvas to the panel one page at a time.
- `scroll_right`, `scroll_left`, `scroll_diag_right` and `scroll_diag_left`
  each take a start page and an end page.
- `stop_scroll`, `invert_display(inverted)`, `clear`, `on` and `off`
  control the panel.
- `write_command`, `write_data` and `write_multi` send raw bytes.

## Example

```python
from oledkit.canvas import Color
from oledkit.fonts import FONT_7X10
from oledkit.ssd1306 import SSD1306
from oledkit.transport import RecordingTransport

bus = RecordingTransport()
display = SSD1306(bus)
display.init()

display.canvas.draw_circle(64, 32, 20, Color.WHITE)
display.canvas.goto(0, 0)
display.canvas.puts("Hi", FONT_7X10, Color.WHITE)
display.update_screen()
display.scroll_right(5, 7)

print(bus.commands()[-8:])
```

To drive a real panel, pass `Transport` a function that performs the
write on your I2C bus:

```python
from oledkit.transport import Transport

def send(address: int, data: bytes) -> None:
    ...  # hand address and data to your I2C library

display = SSD1306(Transport(send))
```

## Demo

```
oledkit-demo [--on CHAR] [--off CHAR]
```

The demo runs against a recording transport.

1. It initialises the display.
2. It writes "oled" and "for" in lit pixels in the 11×18 font, and writes
   "NUVOTON" in dark letters on a lit background.
3. It sends the screen to the transport and pauses for three seconds.
4. It starts a right scroll over pages 5 to 7.
5. It prints the frame buffer as text. `--on` and `--off` choose the single
   characters used for lit and dark pixels.

## What it does not do

oledkit contains no I2C bus driver. It only builds the bytes of each
transaction. Sending them to hardware is up to the `send` function you
give to `Transport`. The demo never touches a real panel.