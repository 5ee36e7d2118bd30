"""Reusable path builder for path-based clip regions."""

from __future__ import annotations

from typing import List, Tuple

from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient
from shapely.ops import unary_union

from .geometry import circle_points, rounded_rect_points
from .types import Circle, Direction, Rect, RoundRectShape, Shape


def shape_polygon(shape: Shape) -> Polygon:
    """Polygon for one closed contour, oriented by its winding direction."""
    if isinstance(shape, Circle):
        polygon = Polygon(circle_points(shape.cx, shape.cy, shape.radius))
    elif isinstance(shape, RoundRectShape):
        polygon = Polygon(rounded_rect_points(shape.rect, shape.rx, shape.ry))
    elif isinstance(shape, Rect):
        polygon = box(shape.left, shape.top, shape.right, shape.bottom)
    else:
        raise TypeError(f"Unsupported path shape: {shape!r}")

    sign = 1.0 if shape.direction is Direction.CCW else -1.0
    return orient(polygon, sign=sign)


class ScratchPath:
    """A single owned path that is rewound, not reallocated, between uses.

    Contours accumulate until ``rewind()`` is called, so every caller that
    builds a new region must rewind first.
    """

    def __init__(self) -> None:
        self._shapes: List[Shape] = []
        self.rewind_count = 0

    def rewind(self) -> "ScratchPath":
        self._shapes.clear()
        self.rewind_count += 1
        return self

    def add_circle(self, cx: float, cy: float, radius: float, direction: Direction = Direction.CCW) -> "ScratchPath":
        self._shapes.append(Circle(cx, cy, radius, direction))
        return self

    def add_rect(self, left: float, top: float, right: float, bottom: float,
                 direction: Direction = Direction.CCW) -> "ScratchPath":
        self._shapes.append(Rect(left, top, right, bottom, direction))
        return self

    def add_round_rect(self, rect: Rect, rx: float, ry: float, direction: Direction = Direction.CCW) -> "ScratchPath":
        self._shapes.append(RoundRectShape(rect, rx, ry, direction))
        return self

    def add_shapes(self, shapes: Tuple[Shape, ...]) -> "ScratchPath":
        self._shapes.extend(shapes)
        return self

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    @property
    def is_empty(self) -> bool:
        return not self._shapes

    def to_region(self) -> BaseGeometry:
        """Compound region covered by every contour of the path."""
        return unary_union([shape_polygon(shape) for shape in self._shapes])
