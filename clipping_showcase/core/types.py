"""Common data structures for the clipping showcase."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union


@dataclass(frozen=True)
class LayoutConstants:
    """Resolved lengths, in pixels, shared by every panel."""
    clip_rect_left: float
    clip_rect_top: float
    clip_rect_right: float
    clip_rect_bottom: float
    rect_inset: float
    small_rect_offset: float
    circle_radius: float
    text_offset: float
    text_size: float
    stroke_width: float

    def __post_init__(self) -> None:
        positive = {
            "clip_rect_right": self.clip_rect_right,
            "clip_rect_bottom": self.clip_rect_bottom,
            "rect_inset": self.rect_inset,
            "small_rect_offset": self.small_rect_offset,
            "circle_radius": self.circle_radius,
            "text_offset": self.text_offset,
            "text_size": self.text_size,
            "stroke_width": self.stroke_width,
        }
        for name, value in positive.items():
            if not value > 0:
                raise ValueError(f"{name} must be greater than zero, got {value!r}.")
        if self.clip_rect_left < 0 or self.clip_rect_top < 0:
            raise ValueError("Clip rectangle origin must not be negative.")

        largest_inset = max(4 * self.rect_inset, self.small_rect_offset, self.circle_radius)
        if self.panel_width <= 2 * largest_inset or self.panel_height <= 2 * largest_inset:
            raise ValueError(
                f"Panel {self.panel_width}x{self.panel_height} is too small for an inset of {largest_inset}."
            )

    @property
    def panel_width(self) -> float:
        return self.clip_rect_right - self.clip_rect_left

    @property
    def panel_height(self) -> float:
        return self.clip_rect_bottom - self.clip_rect_top


class GridOrigin(NamedTuple):
    """Top-left translation of one panel."""
    x: float
    y: float


class Direction(Enum):
    """Winding direction of a closed path contour."""
    CW = "cw"
    CCW = "ccw"


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float
    direction: Direction = Direction.CCW


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float
    direction: Direction = Direction.CCW

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class RoundRectShape:
    """Rounded rectangle contour with elliptical corners."""
    rect: Rect
    rx: float
    ry: float
    direction: Direction = Direction.CCW


Shape = Union[Circle, Rect, RoundRectShape]


@dataclass(frozen=True)
class SetRect:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class IntersectRect:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class SubtractRect:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class SubtractPath:
    shapes: Tuple[Shape, ...]


@dataclass(frozen=True)
class UnionPath:
    """Union of the shapes as one compound region, then intersected."""
    shapes: Tuple[Shape, ...]


@dataclass(frozen=True)
class RoundRect:
    rect: Rect
    rx: float
    ry: float


ClipOp = Union[SetRect, IntersectRect, SubtractRect, SubtractPath, UnionPath, RoundRect]
ClipSpec = Tuple[ClipOp, ...]


class ContentVariant(Enum):
    CLIPPED_RECTANGLE = "clipped_rectangle"
    TRANSLATED_TEXT = "translated_text"
    SKEWED_TEXT = "skewed_text"
    QUICK_REJECT = "quick_reject"


@dataclass(frozen=True)
class Panel:
    """One example panel: where it goes, how it is clipped, what it draws."""
    name: str
    origin: GridOrigin
    clip: ClipSpec
    content: ContentVariant = ContentVariant.CLIPPED_RECTANGLE
    skew: Optional[Tuple[float, float]] = None


class EdgeType(Enum):
    """Rounding applied by quick reject.

    AA rounds out because edges may be antialiased, BW rounds to the
    nearest pixel boundary.
    """
    AA = "aa"
    BW = "bw"


@dataclass(frozen=True)
class QuickRejectProbe:
    rect: Rect
    edge_type: EdgeType = EdgeType.AA


class Align(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class PaintStyle(Enum):
    FILL = "fill"
    STROKE = "stroke"


@dataclass(frozen=True)
class Paint:
    color: Tuple[int, int, int]
    stroke_width: float = 1.0
    text_size: float = 12.0
    align: Align = Align.LEFT
    style: PaintStyle = PaintStyle.FILL
