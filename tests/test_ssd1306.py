import pytest

from oledkit.canvas import Canvas, Color
from oledkit.ssd1306 import INIT_SEQUENCE, SSD1306
from oledkit.transport import RecordingTransport


@pytest.fixture
def link():
    return RecordingTransport()


@pytest.fixture
def display(link):
    return SSD1306(link)


def test_write_command_uses_command_control_byte(display, link):
    display.write_command(0xAE)
    assert link.writes == [(0x3C, b"\x00\xae")]


def test_write_data_uses_data_control_byte(display, link):
    display.write_data(0x5A)
    assert link.writes == [(0x3C, b"\x40\x5a")]


def test_write_multi_prefixes_register(display, link):
    display.write_multi(0x40, [1, 2, 3])
    assert link.writes == [(0x3C, b"\x40\x01\x02\x03")]


def test_write_command_rejects_values_over_a_byte(display):
    with pytest.raises(ValueError):
        display.write_command(0x100)


def test_custom_address_is_used(link):
    display = SSD1306(link, address=0x3D)
    display.write_command(0xAF)
    assert link.writes[0][0] == 0x3D


def test_init_sends_configuration_then_blank_screen(display, link):
    assert display.init() is True
    assert display.initialized
    commands = link.commands()
    assert commands[:len(INIT_SEQUENCE)] == list(INIT_SEQUENCE)
    assert commands[len(INIT_SEQUENCE)] == 0x2E
    data = [payload for _, payload in link.writes if payload[0] == 0x40]
    assert len(data) == 8
    assert all(payload[1:] == bytes(128) for payload in data)


def test_init_sequence_matches_source_order():
    assert INIT_SEQUENCE[0] == 0xAE
    assert INIT_SEQUENCE[-1] == 0xAF
    assert INIT_SEQUENCE[INIT_SEQUENCE.index(0x8D) + 1] == 0x14


def test_init_resets_cursor(display):
    display.canvas.goto(10, 20)
    display.init()
    assert (display.canvas.cursor_x, display.canvas.cursor_y) == (0, 0)


def test_update_screen_sends_each_page(display, link):
    display.canvas.draw_pixel(0, 0, Color.WHITE)
    display.canvas.draw_pixel(5, 63, Color.WHITE)
    display.update_screen()
    assert link.commands() == [c for m in range(8) for c in (0xB0 + m, 0x00, 0x10)]
    pages = [payload[1:] for _, payload in link.writes if payload[0] == 0x40]
    assert pages == [display.canvas.page(m) for m in range(8)]
    assert pages[0][0] == 0x01
    assert pages[7][5] == 0x80


def test_scroll_right_bytes(display, link):
    display.scroll_right(5, 7)
    assert link.commands() == [0x26, 0x00, 5, 0x00, 7, 0x00, 0xFF, 0x2F]


def test_scroll_left_bytes(display, link):
    display.scroll_left(0, 3)
    assert link.commands() == [0x27, 0x00, 0, 0x00, 3, 0x00, 0xFF, 0x2F]


def test_scroll_diag_right_bytes(display, link):
    display.scroll_diag_right(1, 6)
    assert link.commands() == [0xA3, 0x00, 64, 0x29, 0x00, 1, 0x00, 6, 0x01, 0x2F]


def test_scroll_diag_left_bytes(display, link):
    display.scroll_diag_left(2, 4)
    assert link.commands() == [0xA3, 0x00, 64, 0x2A, 0x00, 2, 0x00, 4, 0x01, 0x2F]


def test_scroll_rejects_row_over_a_byte(display):
    with pytest.raises(ValueError):
        display.scroll_right(0, 256)


def test_stop_scroll(display, link):
    display.stop_scroll()
    assert link.commands() == [0x2E]


def test_invert_display(display, link):
    display.invert_display(True)
    display.invert_display(False)
    assert link.commands() == [0xA7, 0xA6]


def test_on_and_off(display, link):
    display.on()
    display.off()
    assert link.commands() == [0x8D, 0x14, 0xAF, 0x8D, 0x10, 0xAE]


def test_clear_blanks_canvas_and_panel(display, link):
    display.canvas.fill(Color.WHITE)
    display.clear()
    assert display.canvas.buffer == bytes(1024)
    pages = [payload[1:] for _, payload in link.writes if payload[0] == 0x40]
    assert pages == [bytes(128)] * 8


def test_uses_given_canvas(link):
    canvas = Canvas()
    display = SSD1306(link, canvas=canvas)
    assert display.canvas is canvas