from dotlayout.color import Color
from dotlayout.style import LineStyleKind, StyleAttr


def test_simple_style():
    look = StyleAttr.simple()
    assert look.line_color == Color.fast("black")
    assert look.line_width == 2
    assert look.fill_color == Color.fast("white")
    assert look.rounded == 0
    assert look.font_size == 15


def test_debug_styles_fill_colors():
    assert StyleAttr.debug0().fill_color == Color.fast("pink")
    assert StyleAttr.debug1().fill_color == Color.fast("aliceblue")
    assert StyleAttr.debug2().fill_color == Color.fast("white")


def test_debug_styles_use_thin_lines():
    for look in (StyleAttr.debug0(), StyleAttr.debug1(), StyleAttr.debug2()):
        assert look.line_width == 1
        assert look.font_size == 15


def test_styles_are_independent_copies():
    a = StyleAttr.simple()
    b = StyleAttr.simple()
    a.fill_color = Color.fast("olive")
    assert b.fill_color == Color.fast("white")


def test_line_style_kinds_distinct():
    assert len({k for k in LineStyleKind}) == 4
    assert LineStyleKind("dashed") is LineStyleKind.DASHED