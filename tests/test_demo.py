from unittest import mock

import pytest

from oledkit.canvas import Color
from oledkit.demo import main, run_demo
from oledkit.ssd1306 import SSD1306
from oledkit.transport import RecordingTransport


@pytest.fixture
def shown():
    link = RecordingTransport()
    display = SSD1306(link)
    with mock.patch("time.sleep") as sleep:
        run_demo(display)
    return display, link, sleep


def test_demo_ends_with_right_scroll(shown):
    _, link, _ = shown
    assert link.commands()[-8:] == [0x26, 0x00, 5, 0x00, 7, 0x00, 0xFF, 0x2F]


def test_demo_pauses_three_seconds(shown):
    _, _, sleep = shown
    sleep.assert_called_once_with(3.0)


def test_demo_initialises_display(shown):
    display, _, _ = shown
    assert display.initialized


def test_demo_cursor_after_last_word(shown):
    display, _, _ = shown
    assert display.canvas.cursor_x == 30 + 7 * 11
    assert display.canvas.cursor_y == 42


def test_demo_dark_text_has_lit_background(shown):
    display, _, _ = shown
    assert display.canvas.get_pixel(30, 42) is Color.WHITE
    assert display.canvas.get_pixel(44, 0) is Color.BLACK


def test_demo_final_frame_sent_matches_canvas(shown):
    display, link, _ = shown
    pages = [payload[1:] for _, payload in link.writes if payload[0] == 0x40]
    assert pages[-8:] == [display.canvas.page(m) for m in range(8)]


def test_main_prints_image(capsys):
    with mock.patch("time.sleep"):
        assert main(["--on", "X", "--off", " "]) == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 64
    assert all(len(line) == 128 for line in lines)
    assert set("".join(lines)) == {"X", " "}


def test_main_rejects_long_pixel_characters():
    with pytest.raises(SystemExit):
        main(["--on", "ab"])