"""Frame buffer, bitmap fonts, transports and command driver for SSD1306 OLED displays."""

__version__ = "0.1.0"
__all__ = ["canvas", "fonts", "ssd1306", "transport", "demo"]