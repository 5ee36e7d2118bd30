"""Clip specifications for each example panel and the region algebra behind them."""

from __future__ import annotations

from typing import Callable, Dict

from shapely.geometry import Point, Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from .geometry import inset_rect, local_bounds, rounded_rect_points
from .path import shape_polygon
from .types import (
    Circle,
    ClipOp,
    ClipSpec,
    Direction,
    IntersectRect,
    LayoutConstants,
    Rect,
    RoundRect,
    SetRect,
    SubtractPath,
    SubtractRect,
    UnionPath,
)


def _uniform_inset(constants: LayoutConstants, amount: float) -> Rect:
    return inset_rect(local_bounds(constants), amount, amount, amount, amount)


def plain_clip(constants: LayoutConstants) -> ClipSpec:
    """The whole panel."""
    bounds = local_bounds(constants)
    return (SetRect(bounds.left, bounds.top, bounds.right, bounds.bottom),)


def difference_clip(constants: LayoutConstants) -> ClipSpec:
    """A frame: a rectangle at twice the inset minus one at four times the inset."""
    outer = _uniform_inset(constants, 2 * constants.rect_inset)
    inner = _uniform_inset(constants, 4 * constants.rect_inset)
    return (
        SetRect(outer.left, outer.top, outer.right, outer.bottom),
        SubtractRect(inner.left, inner.top, inner.right, inner.bottom),
    )


def circular_clip(constants: LayoutConstants) -> ClipSpec:
    """The panel minus the disc in its bottom-left corner."""
    radius = constants.circle_radius
    disc = Circle(radius, constants.clip_rect_bottom - radius, radius, Direction.CCW)
    return (SubtractPath((disc,)),)


def intersection_clip(constants: LayoutConstants) -> ClipSpec:
    """Full bounds intersected with a rectangle pulled in on the right and bottom."""
    bounds = local_bounds(constants)
    offset = constants.small_rect_offset
    shrunk = inset_rect(bounds, 0.0, 0.0, offset, offset)
    return (
        SetRect(bounds.left, bounds.top, bounds.right, bounds.bottom),
        IntersectRect(shrunk.left, shrunk.top, shrunk.right, shrunk.bottom),
    )


def combined_clip(constants: LayoutConstants) -> ClipSpec:
    """Union of a disc in the top-left corner and a centred vertical bar."""
    radius = constants.circle_radius
    inset = constants.rect_inset
    disc = Circle(
        constants.clip_rect_left + inset + radius,
        constants.clip_rect_top + inset + radius,
        radius,
        Direction.CCW,
    )
    centre_x = constants.clip_rect_left + constants.panel_width / 2
    bar = Rect(
        centre_x - radius,
        constants.clip_rect_top + radius + inset,
        centre_x + radius,
        constants.clip_rect_bottom - inset,
        Direction.CCW,
    )
    return (UnionPath((disc, bar)),)


def rounded_rect_clip(constants: LayoutConstants) -> ClipSpec:
    corner = constants.panel_width / 4
    return (RoundRect(_uniform_inset(constants, constants.rect_inset), corner, corner),)


def outside_clip(constants: LayoutConstants) -> ClipSpec:
    """Clip to a region entirely inside the normally drawn area."""
    outer = _uniform_inset(constants, 2 * constants.rect_inset)
    return (SetRect(outer.left, outer.top, outer.right, outer.bottom),)


BUILDERS: Dict[str, Callable[[LayoutConstants], ClipSpec]] = {
    "plain": plain_clip,
    "difference": difference_clip,
    "circular": circular_clip,
    "intersection": intersection_clip,
    "combined": combined_clip,
    "rounded": rounded_rect_clip,
    "outside": outside_clip,
}


def op_region(op: ClipOp) -> BaseGeometry:
    """Local-space geometry an operation intersects with or removes."""
    if isinstance(op, (SetRect, IntersectRect, SubtractRect)):
        return box(op.left, op.top, op.right, op.bottom)
    if isinstance(op, (SubtractPath, UnionPath)):
        return unary_union([shape_polygon(shape) for shape in op.shapes])
    if isinstance(op, RoundRect):
        return Polygon(rounded_rect_points(op.rect, op.rx, op.ry))
    raise TypeError(f"Unsupported clip operation: {op!r}")


def is_subtractive(op: ClipOp) -> bool:
    return isinstance(op, (SubtractRect, SubtractPath))


def apply_clip_op(region: BaseGeometry, op: ClipOp) -> BaseGeometry:
    """Narrow a region by one operation; no operation ever widens it."""
    geometry = op_region(op)
    if is_subtractive(op):
        return region.difference(geometry)
    return region.intersection(geometry)


def apply_clip_spec(region: BaseGeometry, spec: ClipSpec) -> BaseGeometry:
    """Apply operations left to right against a starting region."""
    for op in spec:
        region = apply_clip_op(region, op)
    return region


def visible_region(spec: ClipSpec, constants: LayoutConstants) -> BaseGeometry:
    """Region left visible inside a panel once its clip has been applied."""
    bounds = local_bounds(constants)
    return apply_clip_spec(box(bounds.left, bounds.top, bounds.right, bounds.bottom), spec)


def region_contains(region: BaseGeometry, x: float, y: float) -> bool:
    return bool(region.contains(Point(x, y)))


def regions_equal(first: BaseGeometry, second: BaseGeometry, tolerance: float = 1e-6) -> bool:
    """Compare two regions by the area of their symmetric difference."""
    if first.is_empty and second.is_empty:
        return True
    return first.symmetric_difference(second).area <= tolerance
