import pytest

from remml.text_rendering import render_text


def test_returns_rgba_image_with_positive_size():
    img = render_text("x", 100.0)
    assert img.mode == "RGBA"
    assert img.width > 0
    assert img.height > 0


def test_background_is_opaque_and_text_is_dark():
    img = render_text("x", 100.0)
    red, green, blue, alpha = img.getextrema()
    assert alpha == (255, 255)
    assert red[1] == 255
    assert red[0] < 128


def test_pixels_are_grey_only():
    img = render_text("a+b", 60.0)
    for r, g, b, a in img.getdata():
        assert r == g == b
        assert a == 255


def test_height_depends_on_font_not_text():
    assert render_text("a", 80.0).height == render_text("b", 80.0).height


def test_longer_text_is_wider():
    assert render_text("xxxx", 50.0).width > render_text("x", 50.0).width


def test_larger_font_gives_larger_image():
    small = render_text("2", 20.0)
    large = render_text("2", 100.0)
    assert large.height > small.height
    assert large.width > small.width


def test_empty_text_raises():
    with pytest.raises(ValueError):
        render_text("", 100.0)


@pytest.mark.parametrize("size", [0.0, -10.0])
def test_non_positive_font_size_raises(size):
    with pytest.raises(ValueError):
        render_text("x", size)


def test_rendering_is_deterministic():
    first = render_text("roots", 40.0)
    second = render_text("roots", 40.0)
    assert first.size == second.size
    assert first.tobytes() == second.tobytes()