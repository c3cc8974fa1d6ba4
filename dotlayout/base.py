"""Enums shared across the layout code: edge directions and graph orientation."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """The direction in which an edge points."""

    UP = "up"
    DOWN = "down"
    BOTH = "both"
    NONE = "none"

    def is_down(self) -> bool:
        """True if the direction includes pointing down."""
        return self in (Direction.BOTH, Direction.DOWN)

    def is_up(self) -> bool:
        """True if the direction includes pointing up."""
        return self in (Direction.BOTH, Direction.UP)


class Orientation(Enum):
    """The direction in which a graph grows."""

    TOP_TO_BOTTOM = "top_to_bottom"
    LEFT_TO_RIGHT = "left_to_right"

    def is_top_to_bottom(self) -> bool:
        return self is Orientation.TOP_TO_BOTTOM

    def is_left_right(self) -> bool:
        return self is not Orientation.TOP_TO_BOTTOM

    def flip(self) -> Orientation:
        """Return the other orientation."""
        if self is Orientation.TOP_TO_BOTTOM:
            return Orientation.LEFT_TO_RIGHT
        return Orientation.TOP_TO_BOTTOM