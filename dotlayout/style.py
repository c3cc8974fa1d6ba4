"""Style information shared by shapes and edges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotlayout.color import Color


class LineStyleKind(Enum):
    NORMAL = "normal"
    DASHED = "dashed"
    DOTTED = "dotted"
    NONE = "none"


@dataclass
class StyleAttr:
    """Line color and width, fill, corner rounding and font size of a shape."""

    line_color: Color
    line_width: int
    fill_color: Optional[Color]
    rounded: int
    font_size: int

    @staticmethod
    def simple() -> StyleAttr:
        return StyleAttr(Color.fast("black"), 2, Color.fast("white"), 0, 15)

    @staticmethod
    def debug0() -> StyleAttr:
        return StyleAttr(Color.fast("black"), 1, Color.fast("pink"), 0, 15)

    @staticmethod
    def debug1() -> StyleAttr:
        return StyleAttr(Color.fast("black"), 1, Color.fast("aliceblue"), 0, 15)

    @staticmethod
    def debug2() -> StyleAttr:
        return StyleAttr(Color.fast("black"), 1, Color.fast("white"), 0, 15)