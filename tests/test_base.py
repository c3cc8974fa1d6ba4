import pytest

from dotlayout.base import Direction, Orientation


@pytest.mark.parametrize(
    "direction, down, up",
    [
        (Direction.UP, False, True),
        (Direction.DOWN, True, False),
        (Direction.BOTH, True, True),
        (Direction.NONE, False, False),
    ],
)
def test_direction_predicates(direction, down, up):
    assert direction.is_down() is down
    assert direction.is_up() is up


def test_orientation_predicates():
    assert Orientation.TOP_TO_BOTTOM.is_top_to_bottom() is True
    assert Orientation.TOP_TO_BOTTOM.is_left_right() is False
    assert Orientation.LEFT_TO_RIGHT.is_top_to_bottom() is False
    assert Orientation.LEFT_TO_RIGHT.is_left_right() is True


def test_orientation_flip():
    assert Orientation.TOP_TO_BOTTOM.flip() is Orientation.LEFT_TO_RIGHT
    assert Orientation.LEFT_TO_RIGHT.flip() is Orientation.TOP_TO_BOTTOM


def test_flip_twice_is_identity():
    ttb = Orientation.TOP_TO_BOTTOM
    ltr = Orientation.LEFT_TO_RIGHT
    assert ttb.flip().flip() is ttb
    assert ltr.flip().flip() is ltr
    assert ttb.flip().is_left_right() is True
    assert ltr.flip().is_left_right() is False