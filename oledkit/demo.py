"""Demo screen: a greeting drawn in the 11x18 font, then a right scroll."""

from __future__ import annotations

import argparse
import time

from .canvas import Color
from .fonts import FONT_11X18
from .ssd1306 import SSD1306
from .transport import RecordingTransport

PAUSE_SECONDS = 3.0


def run_demo(display: SSD1306) -> None:
    """Initialise ``display``, draw the greeting, wait, then start scrolling."""
    display.init()
    canvas = display.canvas
    canvas.goto(44, 0)
    canvas.puts("oled", FONT_11X18, Color.WHITE)
    canvas.goto(54, 16)
    canvas.puts("for", FONT_11X18, Color.WHITE)
    canvas.goto(30, 42)
    canvas.puts("NUVOTON", FONT_11X18, Color.BLACK)
    display.update_screen()
    time.sleep(PAUSE_SECONDS)
    display.scroll_right(5, 7)


def main(argv: list[str] | None = None) -> int:
    """Run the demo against an in-memory display and print the resulting image."""
    parser = argparse.ArgumentParser(description="Render the demo screen as text.")
    parser.add_argument("--on", default="#", help="character for a lit pixel")
    parser.add_argument("--off", default=".", help="character for a dark pixel")
    args = parser.parse_args(argv)
    if len(args.on) != 1 or len(args.off) != 1:
        parser.error("--on and --off take exactly one character each")

    display = SSD1306(RecordingTransport())
    run_demo(display)
    print(display.canvas.to_text(args.on, args.off))
    return 0