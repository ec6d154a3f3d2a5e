"""Rasterising short runs of text onto white RGBA images."""

from __future__ import annotations

from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

FOREGROUND = (0, 0, 0, 255)
BACKGROUND = (255, 255, 255, 255)

_FONT_CANDIDATES = (
    "TexMaths Symbols",
    "TexMathsSymbols.ttf",
    "DejaVuSans.ttf",
    "DejaVu Sans",
    "LiberationSans-Regular.ttf",
    "FreeSans.ttf",
    "Arial.ttf",
)


@lru_cache(maxsize=32)
def _load_font(font_size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Return the first usable font from the preferred list at the given size."""
    for name in _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, font_size)
        except OSError:
            continue
    return ImageFont.load_default(size=font_size)


def _line_metrics(font, text: str) -> tuple[int, int]:
    """Return the (ascent, descent) of one line set in ``font``."""
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        return ascent, descent
    _, top, _, bottom = font.getbbox(text)
    return max(bottom, 0), 0


def render_text(text: str, font_size: float) -> Image.Image:
    """Lay out ``text`` on one line and draw it black on a white RGBA image.

    The image is as wide as the text's advance and as tall as the font's
    line height (ascent plus descent), both rounded up.
    """
    if font_size <= 0:
        raise ValueError(f"font size must be positive, got {font_size}")

    font = _load_font(float(font_size))
    ascent, descent = _line_metrics(font, text)

    width = int(-(-font.getlength(text) // 1))
    height = ascent + descent
    if width <= 0 or height <= 0:
        raise ValueError(f"text {text!r} has an empty layout ({width}x{height})")

    image = Image.new("RGBA", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    draw.text((0, 0), text, font=font, fill=FOREGROUND)
    return image