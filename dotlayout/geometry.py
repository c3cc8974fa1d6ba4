"""Points, shape positions, and intersection helpers for laying out shapes."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Sequence, Tuple

_EPSILON = sys.float_info.epsilon


def _fdiv(a: float, b: float) -> float:
    """Divide with IEEE semantics: division by zero yields inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _text_lines(text: str) -> list[str]:
    """Split text into lines on '\\n', dropping one trailing empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


@dataclass(frozen=True)
class Point:
    """A 2D coordinate or vector."""

    x: float
    y: float

    @staticmethod
    def zero() -> Point:
        return Point(0.0, 0.0)

    @staticmethod
    def splat(s: float) -> Point:
        return Point(s, s)

    def neg(self) -> Point:
        return Point(-self.x, -self.y)

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return self.add(other.neg())

    def distance_to(self, other: Point) -> float:
        d = self.sub(other)
        return math.sqrt(d.x * d.x + d.y * d.y)

    def length(self) -> float:
        return Point.zero().distance_to(self)

    def scale(self, s: float) -> Point:
        return Point(self.x * s, self.y * s)

    def transpose(self) -> Point:
        return Point(self.y, self.x)

    def rotate_around(self, center: Point, angle: float) -> Point:
        return self.sub(center).rotate(angle).add(center)

    def rotate(self, angle: float) -> Point:
        c, s = math.cos(angle), math.sin(angle)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    __add__ = add
    __sub__ = sub
    __neg__ = neg

    def __mul__(self, s: float) -> Point:
        return self.scale(s)

    def __str__(self) -> str:
        return f"(x: {self.x:.3f}, y: {self.y:.3f})"


Segment = Tuple[Point, Point]


def ellipse_line_intersection(a: float, b: float, m: float) -> Point:
    """Intersect a line of slope m through the origin with the ellipse x²/a² + y²/b² = 1.

    Only the (+x, +y) solution is returned; the mirrored one is its negation.
    """
    x = math.sqrt(_fdiv(a * a * b * b, b * b + a * a * m * m))
    return Point(x, m * x)


def get_connection_point_for_circle(
    loc: Point, size: Point, from_point: Point, force: float
) -> Segment:
    """Connection point and control point for an edge entering an ellipse."""
    dx = from_point.x - loc.x
    dy = from_point.y - loc.y
    a = size.x / 2.0
    b = size.y / 2.0

    if dx == 0:
        b = b * math.copysign(1.0, dy)
        return create_vector_of_length(Point(loc.x, loc.y + b), from_point, force)

    v = ellipse_line_intersection(a, b, dy / dx)
    if dx < 0:
        v = v.neg()
    return create_vector_of_length(loc.add(v), from_point, force)


def interpolate(v0: Point, v1: Point, w: float) -> Point:
    """Linear interpolation: w * v0 + (1 - w) * v1."""
    return v0.scale(w).add(v1.scale(1.0 - w))


def normalize_scale_vector(v: Point, s: float) -> Point:
    """Return v rescaled to length s."""
    length = Point.zero().distance_to(v)
    if not length > 0:
        raise ValueError("can't normalize the zero vector")
    return v.scale(s / length)


def create_vector_of_length(from_point: Point, to: Point, s: float) -> Segment:
    """Return (from_point, end) where end lies at distance s towards `to`."""
    if from_point == to:
        return from_point, Point(from_point.x + s, from_point.y)
    t = normalize_scale_vector(to.sub(from_point), s)
    return from_point, t.add(from_point)


def get_connection_point_for_box(
    loc: Point, size: Point, from_point: Point, force: float
) -> Segment:
    """Connection point and control point for an edge entering a box."""
    loc_x, loc_y = loc.x, loc.y
    size_x, size_y = size.x, size.y

    # Use the half of the box closer to the incoming edge.
    if from_point.x > loc_x + size_x / 2.0:
        size_x /= 2.0
        loc_x += size_x / 2.0
    elif from_point.x < loc_x - size_x / 2.0:
        size_x /= 2.0
        loc_x -= size_x / 2.0

    dx = loc_x - from_point.x
    dy = loc_y - from_point.y
    box_x = size_x / 2.0
    box_y = size_y / 2.0

    if dx == 0:
        edge_y = loc_y - box_y if dy > 0 else loc_y + box_y
        return create_vector_of_length(Point(loc_x, edge_y), from_point, force)

    slope_from = dy / dx
    gain_y = box_x * slope_from

    if abs(gain_y) < box_y:
        if dx > 0:
            box_x = -box_x
            gain_y = -gain_y
        return create_vector_of_length(
            Point(loc_x + box_x, loc_y + gain_y), from_point, force
        )

    gain_x = _fdiv(box_y, slope_from)
    if dy > 0:
        box_y = -box_y
        gain_x = -gain_x
    return create_vector_of_length(
        Point(loc_x + gain_x, loc_y + box_y), from_point, force
    )


def get_passthrough_path_invisible(
    size: Point, center: Point, from_point: Point, to: Point, force: float
) -> Segment:
    """Control point for an edge passing through an invisible connector at `center`."""
    ar = center.sub(from_point)
    rb = to.sub(center)

    a_outgoing = normalize_scale_vector(ar.neg(), force)
    b_outgoing = normalize_scale_vector(rb.neg(), force)

    # Nearly opposite directions: bow the middle by turning 90 degrees.
    if a_outgoing.add(b_outgoing).length() < 1.0:
        edge = a_outgoing.rotate(math.radians(90.0))
        return center, edge.add(center)

    total = ar.length() + rb.length()
    a_ratio = ar.length() / total

    # Keep vertical and horizontal edges perfectly straight.
    if center.x == to.x or center.y == to.y:
        a_ratio = 1.0
    elif center.x == from_point.x or center.y == from_point.y:
        a_ratio = 0.0

    res = interpolate(a_outgoing, b_outgoing, 1.0 - a_ratio)
    return center, res.add(center)


def make_size_square(sz: Point) -> Point:
    """Make X and Y equal to the larger of the two."""
    return Point.splat(max(sz.x, sz.y))


def pad_shape_scalar(size: Point, s: float) -> Point:
    """Increase X and Y by s."""
    return Point(size.x + s, size.y + s)


def get_size_for_str(label: str, font_size: int) -> Point:
    """Estimate the bounding box of rendered text."""
    lines = _text_lines(label)
    longest = max((len(line) for line in lines), default=0)
    return Point(float(max(longest, 1)), float(max(len(lines), 1))).scale(
        float(font_size)
    )


def in_range(bounds: Tuple[float, float], x: float) -> bool:
    """True if x lies in the inclusive range bounds[0] .. bounds[1]."""
    return bounds[0] <= x <= bounds[1]


def _approx_eq(x: float, y: float) -> bool:
    if x == 0:
        return abs(y) < _EPSILON
    if y == 0:
        return abs(x) < _EPSILON
    diff = abs(x - y)
    if diff < _EPSILON:
        return True
    return diff / max(abs(x), abs(y)) < _EPSILON


def _le_approx(x: float, y: float) -> bool:
    if x > y:
        return False
    return _approx_eq(x, y)


def do_boxes_intersect(p1: Segment, p2: Segment) -> bool:
    """True if the boxes given as (top-left, bottom-right) intersect."""
    overlap_x = _le_approx(p2[0].x, p1[1].x) and _le_approx(p1[0].x, p2[1].x)
    overlap_y = _le_approx(p2[0].y, p1[1].y) and _le_approx(p1[0].y, p2[1].y)
    return overlap_x and overlap_y


def weighted_median(values: Sequence[float]) -> float:
    """Median as used by the Gansner-North-Vo DAG layout."""
    if not values:
        raise ValueError("array can't be empty")
    ordered = sorted(values)
    n = len(ordered)
    if n == 1:
        return ordered[0]
    if n == 2:
        return (ordered[0] + ordered[1]) / 2.0
    mid = n // 2
    if n % 2 == 1:
        return ordered[mid]
    return (ordered[mid] + ordered[mid - 1]) / 2.0


def segment_rect_intersection(seg: Segment, rect: Segment) -> bool:
    """True if the segment intersects the rect given as (top-left, bottom-right)."""
    (sx0, sy0), (sx1, sy1) = (seg[0].x, seg[0].y), (seg[1].x, seg[1].y)
    (rx0, ry0), (rx1, ry1) = (rect[0].x, rect[0].y), (rect[1].x, rect[1].y)

    if not (rx0 <= rx1 and ry0 <= ry1):
        raise ValueError("the rect is not normalized")

    if sx0 == sx1:
        return rx0 <= sx1 <= rx1

    if (sx0 < rx0 and sx1 < rx0) or (sx0 > rx1 and sx1 > rx1):
        return False
    if (sy0 < ry0 and sy1 < ry0) or (sy0 > ry1 and sy1 > ry1):
        return False

    # Intersect the line y = a x + b with the two vertical sides of the box.
    a = (sy1 - sy0) / (sx1 - sx0)
    b = sy0 - a * sx0
    y0 = a * rx0 + b
    y1 = a * rx1 + b

    above = y0 < ry0 and y1 < ry0
    below = y0 > ry1 and y1 > ry1
    return not (above or below)


class Position:
    """Size, location and center point of a shape.

    `middle` is the absolute middle of the shape, `center` is the delta from
    the middle to the point that edges aim at, and `halo` is the gap around
    the shape, applied symmetrically.
    """

    __slots__ = ("_middle", "_size", "_center", "_halo")

    def __init__(self, middle: Point, size: Point, center: Point, halo: Point):
        self._middle = middle
        self._size = size
        self._center = center
        self._halo = halo

    def __repr__(self) -> str:
        return (
            f"Position(middle={self._middle!r}, size={self._size!r}, "
            f"center={self._center!r}, halo={self._halo!r})"
        )

    def distance_to_left(self, with_halo: bool) -> float:
        return self.center().x - self.bbox(with_halo)[0].x

    def distance_to_right(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[1].x - self.center().x

    def left(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[0].x

    def right(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[1].x

    def top(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[0].y

    def bottom(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[1].y

    def bbox(self, with_halo: bool) -> Segment:
        """Return (top-left, bottom-right) of the shape."""
        size = self.size(with_halo)
        top_left = self._middle.sub(size.scale(0.5))
        return top_left, top_left.add(size)

    def center(self) -> Point:
        """The center point in absolute coordinates."""
        return self._middle.add(self._center)

    def middle(self) -> Point:
        """The middle of the shape (not the center point)."""
        return self._middle

    def size(self, with_halo: bool) -> Point:
        return self._size.add(self._halo) if with_halo else self._size

    def in_x_range(self, bounds: Tuple[float, float], with_halo: bool) -> bool:
        """True if the box fits within the x range `bounds`."""
        return self.left(with_halo) >= bounds[0] and self.right(with_halo) <= bounds[1]

    def set_size(self, size: Point) -> None:
        self._size = size

    def set_new_center_point(self, center: Point) -> None:
        """Set the center point as a delta from the middle."""
        self._center = center
        if not abs(center.x) < self._size.x or not abs(center.y) < self._size.y:
            raise ValueError("center point lies outside the shape")

    def move_to(self, p: Point) -> None:
        """Move the shape so that its center point is at p."""
        self._middle = self._middle.add(p.sub(self.center()))

    def align_to_top(self, y: float) -> None:
        self._middle = Point(self._middle.x, y + self._size.y / 2.0 + self._halo.y / 2.0)

    def align_to_left(self, x: float) -> None:
        self._middle = Point(x + self._size.x / 2.0 + self._halo.x / 2.0, self._middle.y)

    def align_to_right(self, x: float) -> None:
        self._middle = Point(x - self._size.x / 2.0 - self._halo.x / 2.0, self._middle.y)

    def translate(self, d: Point) -> None:
        self._middle = self._middle.add(d)

    def align_x(self, x: float, to_left: bool) -> None:
        """Align the shape's side to x, on the left or the right."""
        half_box = self._size.x / 2.0 + self._halo.x / 2.0
        new_x = x + half_box if to_left else x - half_box
        self._middle = Point(new_x, self._middle.y)

    def set_x(self, x: float) -> None:
        """Align the center point to x."""
        self._middle = Point(x - self._center.x, self._middle.y)

    def set_y(self, y: float) -> None:
        """Align the center point to y."""
        self._middle = Point(self._middle.x, y - self._center.y)

    def transpose(self) -> None:
        self._middle = self._middle.transpose()
        self._size = self._size.transpose()
        self._center = self._center.transpose()
        self._halo = self._halo.transpose()