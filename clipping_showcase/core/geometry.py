"""Geometric utilities for the clipping showcase layout."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from .types import GridOrigin, LayoutConstants, Rect

GRID_COLUMNS = 2
CLIPPED_ROWS = 4
TEXT_ROW = 4


def grid_origin(column: int, row: int, constants: LayoutConstants) -> GridOrigin:
    """Translation of the panel at a zero-based column and row."""
    inset = constants.rect_inset
    x = column * (inset + constants.panel_width) + inset
    y = row * (inset + constants.panel_height) + inset
    return GridOrigin(float(x), float(y))


def text_row_origin(constants: LayoutConstants) -> GridOrigin:
    """Origin shared by the translated and skewed text examples."""
    return grid_origin(1, TEXT_ROW, constants)


def reject_row_origin(constants: LayoutConstants) -> GridOrigin:
    """The quick reject panel sits one panel height below the text row."""
    text_origin = grid_origin(0, TEXT_ROW, constants)
    return GridOrigin(text_origin.x, text_origin.y + constants.panel_height)


def panel_bounds(origin: GridOrigin, constants: LayoutConstants) -> Rect:
    """Surface-space bounding box of a panel placed at an origin."""
    return Rect(
        origin.x + constants.clip_rect_left,
        origin.y + constants.clip_rect_top,
        origin.x + constants.clip_rect_right,
        origin.y + constants.clip_rect_bottom,
    )


def local_bounds(constants: LayoutConstants) -> Rect:
    return Rect(
        constants.clip_rect_left,
        constants.clip_rect_top,
        constants.clip_rect_right,
        constants.clip_rect_bottom,
    )


def inset_rect(rect: Rect, left: float, top: float, right: float, bottom: float) -> Rect:
    """Shrink a rectangle by independent amounts on each side."""
    return Rect(rect.left + left, rect.top + top, rect.right - right, rect.bottom - bottom, rect.direction)


def canvas_size(constants: LayoutConstants) -> Tuple[int, int]:
    """Integer surface size large enough for every panel plus a trailing inset."""
    right_edge = grid_origin(GRID_COLUMNS, 0, constants).x
    bottom_edge = reject_row_origin(constants).y + constants.panel_height + constants.rect_inset
    return int(math.ceil(right_edge)), int(math.ceil(bottom_edge))


def translation(dx: float, dy: float) -> np.ndarray:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


def skew(sx: float, sy: float) -> np.ndarray:
    """Shear matrix: x' = x + sx * y, y' = sy * x + y."""
    return np.array([[1.0, sx, 0.0], [sy, 1.0, 0.0], [0.0, 0.0, 1.0]])


def scaling(factor: float) -> np.ndarray:
    return np.array([[factor, 0.0, 0.0], [0.0, factor, 0.0], [0.0, 0.0, 1.0]])


def transform_points(matrix: np.ndarray, points: Sequence[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """Apply an affine matrix to a sequence of points."""
    if not points:
        return []
    array = np.asarray(points, dtype=float)
    homogeneous = np.hstack([array, np.ones((len(array), 1))])
    mapped = homogeneous @ matrix.T
    return [(float(x), float(y)) for x, y in mapped[:, :2]]


def shapely_affine(matrix: np.ndarray) -> List[float]:
    """Coefficients in the order ``shapely.affinity.affine_transform`` expects."""
    return [matrix[0, 0], matrix[0, 1], matrix[1, 0], matrix[1, 1], matrix[0, 2], matrix[1, 2]]


def inverse_affine_coefficients(matrix: np.ndarray) -> Tuple[float, ...]:
    """Output-to-input coefficients for ``Image.transform`` with ``Image.AFFINE``."""
    inverse = np.linalg.inv(matrix)
    return tuple(float(value) for value in inverse[:2, :].ravel())


def rect_corners(rect: Rect) -> List[Tuple[float, float]]:
    return [
        (rect.left, rect.top),
        (rect.right, rect.top),
        (rect.right, rect.bottom),
        (rect.left, rect.bottom),
    ]


def points_bounds(points: Sequence[Tuple[float, float]]) -> Tuple[float, float, float, float]:
    xs = [point[0] for point in points]
    ys = [point[1] for point in points]
    return min(xs), min(ys), max(xs), max(ys)


def circle_points(cx: float, cy: float, radius: float, segments: int = 64) -> List[Tuple[float, float]]:
    """Polygon approximation of a circle, counter-clockwise on screen."""
    points = []
    for index in range(segments):
        angle = -2.0 * math.pi * index / segments
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def rounded_rect_points(rect: Rect, rx: float, ry: float, segments_per_corner: int = 12) -> List[Tuple[float, float]]:
    """Generate points for a rounded rectangle with elliptical corners."""
    rx = max(0.0, min(rx, rect.width / 2))
    ry = max(0.0, min(ry, rect.height / 2))
    if rx == 0.0 or ry == 0.0:
        return rect_corners(rect)

    corners = [
        (rect.left + rx, rect.top + ry, 180, 270),      # Top-left
        (rect.right - rx, rect.top + ry, 270, 360),     # Top-right
        (rect.right - rx, rect.bottom - ry, 0, 90),     # Bottom-right
        (rect.left + rx, rect.bottom - ry, 90, 180),    # Bottom-left
    ]

    points = []
    for cx, cy, angle_start, angle_end in corners:
        for i in range(segments_per_corner + 1):
            t = i / segments_per_corner
            arc_rad = math.radians(angle_start + (angle_end - angle_start) * t)
            points.append((cx + rx * math.cos(arc_rad), cy + ry * math.sin(arc_rad)))
    return points
