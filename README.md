# remml

Render a small subset of MathML presentation elements to Pillow images.

You build an expression as a tree of elements and render it at a chosen font
size. Every element knows which row of pixels its baseline sits on. Elements
therefore line up when they are placed in a row, raised as a superscript,
lowered as a subscript, stacked in a fraction or put under a radical sign.

## Installation

```
pip install remml
```

It needs Pillow 10.1 or later.

## Elements

All elements are in `remml.elements`. They are frozen dataclasses that derive from
the abstract base class `Render`.

| Function                   | Element  | Meaning                                   |
|----------------------------|----------|-------------------------------------------|
| `mi(identifier)`           | `Mi`     | identifier, such as `x` or `α`            |
| `mn(number)`               | `Mn`     | number                                    |
| `mo(operator)`             | `Mo`     | operator, such as `+` or `=`              |
| `mtext(text)`              | `Mtext`  | plain text                                |
| `mrow(children)`           | `Mrow`   | children set left to right on one baseline |
| `msub(base, subscript)`    | `Msub`   | base with a subscript                     |
| `msup(base, superscript)`  | `Msup`   | base with a superscript                   |
| `mfrac(numer, denom)`      | `Mfrac`  | fraction with a horizontal bar            |
| `mroot(base, index)`       | `Mroot`  | radical sign over `base`                  |

Layout rules:

- Subscripts and superscripts are drawn at 70% of the surrounding font size
  (`SCRIPT_FONT_RATIO`).
- Children of a row are separated by `floor(font_size / 10)` pixels.
- Fraction bars and radical strokes are `ceil(font_size / 25)` pixels thick.
  The numerator and the denominator are centred horizontally.
- For text elements, the baseline is taken as half the height of the text image.
- `Mroot` stores `index` but does not draw it. The result is always a square-root sign.

## Usage

```python
from remml.elements import mfrac, mi, mn, mo, mroot, mrow, msup, mtext

expression = mrow([
    mtext("roots"),
    mo("="),
    mfrac(
        mrow([
            mo("−"), mi("b"), mo("±"),
            mroot(mrow([msup(mi("b"), mn("2")), mo("−"), mn("4"), mi("a"), mi("c")]), None),
        ]),
        mrow([mn("2"), mi("a")]),
    ),
])

image = expression.render(100.0)
image.save("discriminant.png")
```

`render(font_size)` returns an RGBA `PIL.Image.Image`. If you want to place
the result yourself, `pixmap_with_baseline(font_size)` returns a tuple of the
image and its baseline row.

Composite elements are drawn on a transparent canvas. Text is drawn black on white.

## Text

`remml.text_rendering.render_text(text, font_size)` draws `text` on one line,
black on white, into an RGBA image. The width is the advance of the text. The
height is the font's ascent plus descent.

The font is the first one Pillow can load from this list:

1. "TexMaths Symbols"
2. DejaVu Sans
3. Liberation Sans
4. FreeSans
5. Arial

If none of them loads, Pillow's built-in default font is used.

## Errors

`ValueError` is raised in these cases:

- the font size is not positive;
- the text would give an empty image;
- a row has no children;
- a size would produce an empty canvas.

## Limitations

- There is no reader for MathML markup. Expressions are built in Python with the functions above.
- There is no command-line tool.
- Only the elements listed above are supported.

## Running the tests

```
pip install -e ".[test]"
pytest
```