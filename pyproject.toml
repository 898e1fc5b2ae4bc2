[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledkit"
version = "0.1.0"
description = "Frame buffer, drawing primitives, bitmap fonts and command driver for SSD1306 128x64 monochrome OLED displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssd1306", "oled", "i2c", "display", "framebuffer", "bitmap-font"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Hardware Drivers",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oledkit-demo = "oledkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["oledkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
