import pytest

from tuidiagrams import Canvas, LayoutOverflowError
from tuidiagrams.diagram_components.text import display_width, pad_center, pad_right, truncate


def test_write_returns_next_column_for_wide_glyphs():
    canvas = Canvas(5, 1)

    assert canvas.write(0, 0, "日x") == 3
    assert canvas.get(1, 0) == " "
    assert canvas.render() == "日x"


def test_overwriting_half_of_a_wide_glyph_clears_it():
    canvas = Canvas(3, 1)
    canvas.write(0, 0, "日")
    canvas.set(1, 0, "x")

    assert canvas.render() == " x"


def test_out_of_bounds_write_raises():
    canvas = Canvas(2, 1)

    with pytest.raises(LayoutOverflowError):
        canvas.set(2, 0, "x")
    with pytest.raises(LayoutOverflowError):
        canvas.write(1, 0, "日")


def test_markup_is_emitted_only_on_request():
    canvas = Canvas(4, 1)
    canvas.write(0, 0, "abc")
    canvas.insert_markup(0, 0, "<", position="prefix")
    canvas.insert_markup(2, 0, ">", position="suffix")

    assert canvas.render() == "abc"
    assert canvas.render(include_markup=True) == "<abc>"
    assert canvas.render(trim=False) == "abc "


def test_text_helpers():
    assert display_width("日本") == 4
    assert truncate("日本語", 5) == "日本"
    assert pad_right("ab", 4) == "ab  "
    assert pad_center("ab", 5) == " ab  "
    assert pad_center("abcdef", 3) == "abc"
