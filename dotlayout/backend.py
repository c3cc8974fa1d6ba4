"""Drawing interfaces and the SVG rendering backend."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Sequence, Tuple

from dotlayout.color import Color
from dotlayout.geometry import Point, Position
from dotlayout.style import StyleAttr

log = logging.getLogger(__name__)

ClipHandle = int

SVG_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'

SVG_DEFS = (
    "<defs>\n"
    '<marker id="startarrow" markerWidth="10" markerHeight="7"\n'
    'refX="0" refY="3.5" orient="auto">\n'
    '<polygon points="10 0, 10 7, 0 3.5" fill="context-stroke" />\n'
    "</marker>\n"
    '<marker id="endarrow" markerWidth="10" markerHeight="7"\n'
    'refX="10" refY="3.5" orient="auto">\n'
    '<polygon points="0 0, 10 3.5, 0 7" fill="context-stroke" />\n'
    "</marker>\n"
    "\n"
    "</defs>"
)

SVG_FOOTER = "</svg>"

_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&apos;"}


def escape_string(text: str) -> str:
    """Escape the XML special characters in text."""
    return "".join(_ESCAPES.get(c, c) for c in text)


def save_to_file(filename: str, content: str) -> None:
    """Write content to filename, replacing what is there."""
    with open(filename, "w", encoding="utf-8") as f:
        f.write(content)
    log.info("Wrote %s", filename)


def _num(v: float) -> str:
    """Format a number without exponent and without a trailing '.0'."""
    if isinstance(v, int):
        return str(v)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    text = repr(v)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


class Visible(ABC):
    """An element that can be arranged by the layout."""

    @abstractmethod
    def position(self) -> Position:
        """The (mutable) position of the shape."""

    @abstractmethod
    def is_connector(self) -> bool:
        """True if the element is a connector."""

    @abstractmethod
    def transpose(self) -> None:
        """Swap the coordinates of the location and size."""

    @abstractmethod
    def resize(self) -> None:
        """Update the size of the shape."""


class RenderBackend(ABC):
    """A canvas that accepts draw calls."""

    @abstractmethod
    def draw_rect(
        self,
        xy: Point,
        size: Point,
        look: StyleAttr,
        properties: Optional[str] = None,
        clip: Optional[ClipHandle] = None,
    ) -> None:
        """Draw a rectangle whose top-left corner is xy."""

    @abstractmethod
    def draw_line(
        self, start: Point, stop: Point, look: StyleAttr, properties: Optional[str] = None
    ) -> None:
        """Draw a line between start and stop."""

    @abstractmethod
    def draw_circle(
        self, xy: Point, size: Point, look: StyleAttr, properties: Optional[str] = None
    ) -> None:
        """Draw an ellipse centered at xy."""

    @abstractmethod
    def draw_text(self, xy: Point, text: str, look: StyleAttr) -> None:
        """Draw a label."""

    @abstractmethod
    def draw_arrow(
        self,
        path: Sequence[Tuple[Point, Point]],
        dashed: bool,
        head: Tuple[bool, bool],
        look: StyleAttr,
        properties: Optional[str],
        text: str,
    ) -> None:
        """Draw a labelled arrow along a bezier path."""

    @abstractmethod
    def create_clip(self, xy: Point, size: Point, rounded_px: int) -> ClipHandle:
        """Create a clip region that shapes can use."""


class Renderable(ABC):
    """An element that can be drawn on a canvas."""

    @abstractmethod
    def render(self, debug: bool, canvas: RenderBackend) -> None:
        """Render into canvas; extra markers are drawn when debug is set."""

    @abstractmethod
    def get_connector_location(
        self, from_point: Point, force: float, port: Optional[str]
    ) -> Tuple[Point, Point]:
        """Connection point and control point for an arrow coming from from_point."""

    @abstractmethod
    def get_passthrough_path(
        self, from_point: Point, to: Point, force: float
    ) -> Tuple[Point, Point]:
        """Point and entry control point for an arrow passing through the element."""


class SVGWriter(RenderBackend):
    """Collects draw calls and produces an SVG document."""

    def __init__(self) -> None:
        self._content: list[str] = []
        self._view_size = Point.zero()
        self._counter = 0
        self._font_styles: dict[int, Tuple[str, str]] = {}
        self._clip_regions: list[str] = []

    def _grow_window(self, point: Point, size: Point) -> None:
        self._view_size = Point(
            max(self._view_size.x, point.x + size.x + 5.0),
            max(self._view_size.y, point.y + size.y + 5.0),
        )

    def _font_class(self, font_size: int) -> str:
        if font_size not in self._font_styles:
            name = f"a{font_size}"
            impl = f".a{font_size} {{ font-size: {font_size}px; font-family: Times, serif; }}"
            self._font_styles[font_size] = (name, impl)
        return self._font_styles[font_size][0]

    def _styles(self) -> str:
        parts = ["<style>\n"]
        parts.extend(impl + "\n" for _, impl in self._font_styles.values())
        parts.append("</style>\n")
        parts.extend(clip + "\n" for clip in self._clip_regions)
        return "".join(parts)

    def finalize(self) -> str:
        """Return the complete SVG document."""
        w, h = _num(self._view_size.x), _num(self._view_size.y)
        svg_line = (
            f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
            'xmlns="http://www.w3.org/2000/svg">\n'
        )
        return (
            SVG_HEADER
            + svg_line
            + SVG_DEFS
            + self._styles()
            + "".join(self._content)
            + SVG_FOOTER
        )

    def draw_rect(self, xy, size, look, properties=None, clip=None):
        self._grow_window(xy, size)
        clip_option = f'clip-path="url(#C{clip})"' if clip is not None else ""
        props = properties or ""
        fill = look.fill_color or Color.transparent()
        self._content.append(
            f"<g {props}>\n\n"
            f'            <rect x="{_num(xy.x)}" y="{_num(xy.y)}" '
            f'width="{_num(size.x)}" height="{_num(size.y)}" '
            f'fill="{fill.to_web_color()}" \n'
            f'            stroke-width="{look.line_width}" '
            f'stroke="{look.line_color.to_web_color()}" rx="{look.rounded}" '
            f"{clip_option} />\n\n"
            "            </g>\n"
        )

    def draw_circle(self, xy, size, look, properties=None):
        self._grow_window(xy, size)
        fill = look.fill_color or Color.transparent()
        props = properties or ""
        self._content.append(
            f"<g {props}>\n\n"
            f'            <ellipse cx="{_num(xy.x)}" cy="{_num(xy.y)}" '
            f'rx="{_num(size.x / 2.0)}" ry="{_num(size.y / 2.0)}" '
            f'fill="{fill.to_web_color()}" \n'
            f'            stroke-width="{look.line_width}" '
            f'stroke="{look.line_color.to_web_color()}"/>\n\n'
            "            </g>\n"
        )

    def draw_text(self, xy, text, look):
        font_class = self._font_class(look.font_size)
        lines = _lines(text)
        size_y = float((1 + len(lines)) * look.font_size)
        spans = "".join(
            f'<tspan x = "{_num(xy.x)}" dy="1.0em">{escape_string(line)}</tspan>'
            for line in lines
        )
        self._grow_window(xy, Point(10.0, len(text.encode("utf-8")) * 10.0))
        self._content.append(
            '<text dominant-baseline="middle" text-anchor="middle" \n'
            f'            x="{_num(xy.x)}" y="{_num(xy.y - size_y / 2.0)}" '
            f'class="{font_class}">{spans}</text>'
        )

    def draw_arrow(self, path, dashed, head, look, properties, text):
        if len(path) < 2:
            raise ValueError("an arrow path needs at least two points")
        for a, b in path:
            self._grow_window(a, Point.zero())
            self._grow_window(b, Point.zero())

        dash = 'stroke-dasharray="5,5"' if dashed else ""
        start = 'marker-start="url(#startarrow)"' if head[0] else ""
        end = 'marker-end="url(#endarrow)"' if head[1] else ""

        (p0, c0), (p1, c1) = path[0], path[1]
        builder = [
            f"M {_num(p0.x)} {_num(p0.y)} C {_num(c0.x)} {_num(c0.y)}, "
            f"{_num(p1.x)} {_num(p1.y)}, {_num(c1.x)} {_num(c1.y)} "
        ]
        builder.extend(
            f"S {_num(a.x)} {_num(a.y)}, {_num(b.x)} {_num(b.y)} " for a, b in path[2:]
        )

        props = properties or ""
        self._content.append(
            f"<g {props}>\n\n"
            f'            <path id="arrow{self._counter}" d="{"".join(builder)}" '
            f'stroke="{look.line_color.to_web_color()}" '
            f'stroke-width="{look.line_width}" {dash} {start} {end} \n'
            '            fill="transparent" />\n\n'
            "            </g>\n"
        )
        font_class = self._font_class(look.font_size)
        self._content.append(
            f'<text><textPath href="#arrow{self._counter}" startOffset="50%" '
            f'text-anchor="middle" class="{font_class}">{escape_string(text)}'
            "</textPath></text>"
        )
        self._counter += 1

    def draw_line(self, start, stop, look, properties=None):
        props = properties or ""
        self._content.append(
            f"<g {props}>\n\n"
            f'             <line x1="{_num(start.x)}" y1="{_num(start.y)}" '
            f'x2="{_num(stop.x)}" y2="{_num(stop.y)}" '
            f'stroke-width="{look.line_width}"\n'
            f'             stroke="{look.line_color.to_web_color()}" />\n\n'
            "             </g>\n"
        )

    def create_clip(self, xy, size, rounded_px):
        handle = len(self._clip_regions)
        self._clip_regions.append(
            f'<clipPath id="C{handle}"><rect x="{_num(xy.x)}" y="{_num(xy.y)}" '
            f'width="{_num(size.x)}" height="{_num(size.y)}" rx="{rounded_px}" /> '
            "</clipPath>"
        )
        return handle