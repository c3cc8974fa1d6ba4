import pytest

from dotlayout.color import Color


def test_new_color_formats_rgba():
    assert Color(0x56_FF_00_7F).to_web_color() == "#56ff007f"


def test_named_color():
    assert Color.from_name("coral").to_web_color() == "#ff7f50ff"


def test_short_web_color_gets_opaque_alpha():
    assert Color.from_name("#112233").to_web_color() == "#112233ff"


def test_long_web_color_keeps_alpha():
    assert Color.from_name("#112233FA").to_web_color() == "#112233fa"


@pytest.mark.parametrize("name", ["nosuchcolor", "#zz", "#", "112233", "#1122334455"])
def test_unknown_names_give_none(name):
    assert Color.from_name(name) is None


def test_fast_falls_back_to_black():
    assert Color.fast("nosuchcolor") == Color.fast("black")
    assert Color.fast("nosuchcolor").to_web_color() == "#000000ff"


def test_fast_known_name_matches_from_name():
    assert Color.fast("steelblue") == Color.from_name("steelblue")


def test_transparent():
    assert Color.transparent().to_web_color() == "#00000000"


def test_synonyms_are_equal():
    assert Color.fast("gray") == Color.fast("grey")
    assert Color.fast("aqua") == Color.fast("cyan")