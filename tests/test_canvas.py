import pytest

from oledkit.canvas import Canvas, CanvasOverflowError, Color
from oledkit.fonts import FONT_7X10, FONT_11X18


def lit_pixels(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y) is Color.WHITE
    }


def test_new_canvas_is_black_and_sized_from_display():
    canvas = Canvas()
    assert (canvas.width, canvas.height) == (128, 64)
    assert canvas.buffer == bytes(128 * 64 // 8)
    assert (canvas.cursor_x, canvas.cursor_y) == (0, 0)


def test_invalid_dimensions_raise():
    with pytest.raises(ValueError):
        Canvas(128, 60)
    with pytest.raises(ValueError):
        Canvas(0, 64)


def test_pixel_lands_in_page_byte():
    canvas = Canvas()
    canvas.draw_pixel(3, 10, Color.WHITE)
    assert canvas.page(1)[3] == 0x04
    assert canvas.get_pixel(3, 10) is Color.WHITE
    canvas.draw_pixel(3, 10, Color.BLACK)
    assert canvas.get_pixel(3, 10) is Color.BLACK


@pytest.mark.parametrize("x, y", [(128, 0), (0, 64), (-1, 5), (5, -1)])
def test_out_of_range_pixel_is_ignored(x, y):
    canvas = Canvas()
    canvas.draw_pixel(x, y, Color.WHITE)
    assert canvas.buffer == bytes(1024)


def test_get_pixel_out_of_range_raises():
    with pytest.raises(IndexError):
        Canvas().get_pixel(128, 0)


def test_fill_white_and_black():
    canvas = Canvas()
    canvas.fill(Color.WHITE)
    assert set(canvas.buffer) == {0xFF}
    canvas.fill(Color.BLACK)
    assert set(canvas.buffer) == {0x00}


def test_toggle_invert_flips_buffer_and_drawing():
    canvas = Canvas()
    canvas.draw_pixel(0, 0, Color.WHITE)
    canvas.toggle_invert()
    assert canvas.inverted
    assert canvas.get_pixel(0, 0) is Color.BLACK
    assert canvas.get_pixel(1, 0) is Color.WHITE
    canvas.draw_pixel(5, 5, Color.WHITE)
    assert canvas.get_pixel(5, 5) is Color.BLACK
    canvas.toggle_invert()
    assert not canvas.inverted
    assert canvas.get_pixel(5, 5) is Color.WHITE


def test_horizontal_and_vertical_lines():
    canvas = Canvas()
    canvas.draw_line(10, 5, 2, 5, Color.WHITE)
    assert lit_pixels(canvas) == {(x, 5) for x in range(2, 11)}
    canvas.fill(Color.BLACK)
    canvas.draw_line(7, 20, 7, 12, Color.WHITE)
    assert lit_pixels(canvas) == {(7, y) for y in range(12, 21)}


def test_diagonal_line_hits_both_endpoints_and_is_connected():
    canvas = Canvas()
    canvas.draw_line(0, 0, 20, 7, Color.WHITE)
    pixels = lit_pixels(canvas)
    assert (0, 0) in pixels and (20, 7) in pixels
    assert {x for x, _ in pixels} == set(range(21))


def test_line_is_clamped_to_canvas():
    canvas = Canvas()
    canvas.draw_line(120, 3, 500, 3, Color.WHITE)
    assert lit_pixels(canvas) == {(x, 3) for x in range(120, 128)}


def test_rectangle_outline():
    canvas = Canvas()
    canvas.draw_rectangle(2, 3, 4, 2, Color.WHITE)
    pixels = lit_pixels(canvas)
    assert (2, 3) in pixels and (6, 5) in pixels
    assert (4, 4) not in pixels


def test_rectangle_with_origin_outside_is_ignored():
    canvas = Canvas()
    canvas.draw_rectangle(200, 0, 4, 4, Color.WHITE)
    canvas.draw_filled_rectangle(0, 64, 4, 4, Color.WHITE)
    assert canvas.buffer == bytes(1024)


def test_filled_rectangle_covers_area():
    canvas = Canvas()
    canvas.draw_filled_rectangle(2, 3, 4, 2, Color.WHITE)
    assert lit_pixels(canvas) == {(x, y) for x in range(2, 7) for y in range(3, 6)}


def test_triangle_contains_vertices():
    canvas = Canvas()
    canvas.draw_triangle(1, 1, 30, 5, 10, 40, Color.WHITE)
    pixels = lit_pixels(canvas)
    assert {(1, 1), (30, 5), (10, 40)} <= pixels


def test_filled_triangle_is_superset_of_outline():
    outline = Canvas()
    outline.draw_triangle(1, 1, 30, 5, 10, 40, Color.WHITE)
    filled = Canvas()
    filled.draw_filled_triangle(1, 1, 30, 5, 10, 40, Color.WHITE)
    assert {(1, 1), (30, 5), (10, 40)} <= lit_pixels(filled)
    assert len(lit_pixels(filled)) > len(lit_pixels(outline))


def test_circle_is_symmetric_and_hollow():
    canvas = Canvas()
    canvas.draw_circle(30, 30, 10, Color.WHITE)
    pixels = lit_pixels(canvas)
    assert {(30, 40), (30, 20), (40, 30), (20, 30)} <= pixels
    assert (30, 30) not in pixels
    assert all((60 - x, y) in pixels and (x, 60 - y) in pixels for x, y in pixels)


def test_filled_circle_contains_outline_and_centre():
    outline = Canvas()
    outline.draw_circle(30, 30, 10, Color.WHITE)
    filled = Canvas()
    filled.draw_filled_circle(30, 30, 10, Color.WHITE)
    assert lit_pixels(outline) <= lit_pixels(filled)
    assert filled.get_pixel(30, 30) is Color.WHITE


def test_bitmap_draws_set_bits_only():
    canvas = Canvas()
    canvas.draw_bitmap(4, 2, bytes([0b10100000, 0b01000000]), 3, 2, Color.WHITE)
    assert lit_pixels(canvas) == {(4, 2), (6, 2), (5, 3)}


def test_putc_renders_glyph_and_advances_cursor():
    canvas = Canvas()
    canvas.goto(10, 5)
    assert canvas.putc("A", FONT_7X10, Color.WHITE) == "A"
    assert (canvas.cursor_x, canvas.cursor_y) == (10 + FONT_7X10.width, 5)
    for i, row in enumerate(FONT_7X10.glyph("A")):
        for j in range(FONT_7X10.width):
            lit = bool((row << j) & 0x8000)
            assert (canvas.get_pixel(10 + j, 5 + i) is Color.WHITE) == lit


def test_putc_black_paints_background_white():
    canvas = Canvas()
    canvas.putc(" ", FONT_7X10, Color.BLACK)
    assert lit_pixels(canvas) == {(x, y) for x in range(7) for y in range(10)}


def test_putc_overflow_raises_and_leaves_cursor():
    canvas = Canvas()
    canvas.goto(120, 0)
    with pytest.raises(CanvasOverflowError) as info:
        canvas.putc("x", FONT_11X18, Color.WHITE)
    assert info.value.char == "x"
    assert canvas.cursor_x == 120
    assert canvas.buffer == bytes(1024)


def test_puts_writes_string_and_stops_at_overflow():
    canvas = Canvas()
    canvas.goto(44, 0)
    canvas.puts("oled", FONT_11X18, Color.WHITE)
    assert canvas.cursor_x == 44 + 4 * FONT_11X18.width
    canvas.goto(100, 20)
    with pytest.raises(CanvasOverflowError) as info:
        canvas.puts("abc", FONT_11X18, Color.WHITE)
    assert info.value.char == "c"
    assert canvas.cursor_x == 100 + 2 * FONT_11X18.width


def test_page_bounds():
    canvas = Canvas()
    assert len(canvas.page(7)) == canvas.width
    with pytest.raises(IndexError):
        canvas.page(8)


def test_to_text_shape_and_marks():
    canvas = Canvas(16, 8)
    canvas.draw_pixel(1, 0, Color.WHITE)
    lines = canvas.to_text().split("\n")
    assert len(lines) == 8
    assert all(len(line) == 16 for line in lines)
    assert lines[0].startswith(".#.")
    assert canvas.to_text(on="X", off=" ").count("X") == 1