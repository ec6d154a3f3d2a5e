"""MathML presentation elements that lay themselves out as RGBA images."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from PIL import Image, ImageDraw

from remml.text_rendering import FOREGROUND, render_text

SCRIPT_FONT_RATIO = 0.7
TRANSPARENT = (0, 0, 0, 0)


def _canvas(width: int, height: int) -> Image.Image:
    """Return a transparent RGBA image, refusing empty sizes."""
    if width <= 0 or height <= 0:
        raise ValueError(f"cannot create an empty image ({width}x{height})")
    return Image.new("RGBA", (width, height), TRANSPARENT)


def _draw(canvas: Image.Image, image: Image.Image, x: int, y: int) -> None:
    """Blend ``image`` over ``canvas`` with its top-left corner at (x, y), clipped."""
    left, top = max(x, 0), max(y, 0)
    right = min(x + image.width, canvas.width)
    bottom = min(y + image.height, canvas.height)
    if right <= left or bottom <= top:
        return
    piece = image.crop((left - x, top - y, right - x, bottom - y))
    canvas.alpha_composite(piece.convert("RGBA"), dest=(left, top))


def _line_width(font_size: float) -> int:
    return max(math.ceil(font_size / 25.0), 0)


def _text_with_baseline(text: str, font_size: float) -> tuple[Image.Image, int]:
    image = render_text(text, font_size)
    return image, image.height // 2


class Render(ABC):
    """Something that can be drawn as an image with a known baseline row."""

    @abstractmethod
    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        """Return the rendered image and the row of its baseline."""

    def render(self, font_size: float) -> Image.Image:
        """Return the rendered image alone."""
        image, _ = self.pixmap_with_baseline(font_size)
        return image


@dataclass(frozen=True)
class Mi(Render):
    """An identifier."""

    identifier: str

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        return _text_with_baseline(self.identifier, font_size)


@dataclass(frozen=True)
class Mn(Render):
    """A number."""

    number: str

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        return _text_with_baseline(self.number, font_size)


@dataclass(frozen=True)
class Mo(Render):
    """An operator."""

    operator: str

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        return _text_with_baseline(self.operator, font_size)


@dataclass(frozen=True)
class Mtext(Render):
    """Free text."""

    text: str

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        return _text_with_baseline(self.text, font_size)


@dataclass(frozen=True)
class Msub(Render):
    """A base with a subscript."""

    base: Render
    subscript: Render

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        base, baseline = self.base.pixmap_with_baseline(font_size)
        subscript, _ = self.subscript.pixmap_with_baseline(font_size * SCRIPT_FONT_RATIO)

        width = base.width + subscript.width
        height = max(base.height, 2 * subscript.height)
        canvas = _canvas(width, height)

        base_y = max(0, subscript.height - base.height // 2)
        subscript_y = base_y + base.height // 2
        _draw(canvas, base, 0, base_y)
        _draw(canvas, subscript, base.width, subscript_y)
        return canvas, baseline + base_y


@dataclass(frozen=True)
class Msup(Render):
    """A base with a superscript."""

    base: Render
    superscript: Render

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        base, baseline = self.base.pixmap_with_baseline(font_size)
        superscript, _ = self.superscript.pixmap_with_baseline(
            font_size * SCRIPT_FONT_RATIO
        )

        width = base.width + superscript.width
        height = max(base.height, 2 * superscript.height)
        base_y = max(0, superscript.height - base.height // 2)
        canvas = _canvas(width, height)

        _draw(canvas, base, 0, base_y)
        _draw(canvas, superscript, base.width, 0)
        return canvas, baseline + base_y


@dataclass(frozen=True)
class Mrow(Render):
    """A horizontal row of elements aligned on a common baseline."""

    children: tuple[Render, ...]

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        if not self.children:
            raise ValueError("a row needs at least one child")
        spacing = max(math.floor(font_size / 10.0), 0)

        rendered = [child.pixmap_with_baseline(font_size) for child in self.children]
        baseline = max(child_baseline for _, child_baseline in rendered)
        below = max(max(image.height - baseline for image, _ in rendered), 0)
        width = sum(image.width for image, _ in rendered) + spacing * (len(rendered) - 1)
        canvas = _canvas(width, baseline + below)

        x = 0
        for image, child_baseline in rendered:
            _draw(canvas, image, x, baseline - child_baseline)
            x += image.width + spacing
        return canvas, baseline


@dataclass(frozen=True)
class Mfrac(Render):
    """A fraction: numerator centred above a bar, denominator below it."""

    numer: Render
    denom: Render

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        line_width = _line_width(font_size)
        numerator, _ = self.numer.pixmap_with_baseline(font_size)
        denominator, _ = self.denom.pixmap_with_baseline(font_size)

        width = max(numerator.width, denominator.width)
        term_height = max(numerator.height, denominator.height)
        canvas = _canvas(width, 2 * term_height + line_width)

        numerator_x = (width - numerator.width) // 2
        denominator_x = (width - denominator.width) // 2
        _draw(canvas, numerator, numerator_x, term_height - numerator.height)
        _draw(canvas, denominator, denominator_x, term_height + line_width)

        if line_width <= 0:
            raise ValueError(f"font size {font_size} gives no fraction bar")
        ImageDraw.Draw(canvas).rectangle(
            [(0, term_height), (width - 1, term_height + line_width - 1)],
            fill=FOREGROUND,
        )
        return canvas, term_height + line_width // 2


@dataclass(frozen=True)
class Mroot(Render):
    """A radical sign over a base; the index is kept but not drawn."""

    base: Render
    index: Render | None = None

    def pixmap_with_baseline(self, font_size: float) -> tuple[Image.Image, int]:
        line_width = _line_width(font_size)
        inner, inner_baseline = self.base.pixmap_with_baseline(font_size)

        width = inner.width + inner.height // 2
        height = inner.height + 2 * line_width
        canvas = _canvas(width, height)
        _draw(canvas, inner, inner.height // 2, line_width)

        half = line_width / 2
        points = [
            (width, half),
            (inner.height / 2, half),
            (inner.height / 4, height - half),
            (height / 9, 2 * (height - line_width) / 3),
            (0, 7 * (height - line_width) / 9),
        ]
        ImageDraw.Draw(canvas).line(points, fill=FOREGROUND, width=line_width)
        return canvas, inner_baseline + line_width


def mrow(children: Iterable[Render]) -> Mrow:
    """Build a row from its children."""
    return Mrow(tuple(children))


def mn(number: str) -> Mn:
    """Build a number element."""
    return Mn(number)


def mi(identifier: str) -> Mi:
    """Build an identifier element."""
    return Mi(identifier)


def mtext(text: str) -> Mtext:
    """Build a text element."""
    return Mtext(text)


def mo(operator: str) -> Mo:
    """Build an operator element."""
    return Mo(operator)


def msub(base: Render, subscript: Render) -> Msub:
    """Build a subscripted element."""
    return Msub(base, subscript)


def msup(base: Render, superscript: Render) -> Msup:
    """Build a superscripted element."""
    return Msup(base, superscript)


def mfrac(numer: Render, denom: Render) -> Mfrac:
    """Build a fraction."""
    return Mfrac(numer, denom)


def mroot(base: Render, index: Render | None) -> Mroot:
    """Build a radical."""
    return Mroot(base, index)