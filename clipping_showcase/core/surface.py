"""Pillow-backed drawing surface with a save/restore transform and clip stack."""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np
from PIL import Image, ImageChops, ImageDraw, ImageFont
from shapely import affinity
from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from .geometry import (
    circle_points,
    inverse_affine_coefficients,
    points_bounds,
    rect_corners,
    rounded_rect_points,
    scaling,
    shapely_affine,
    skew,
    transform_points,
    translation,
)
from .path import ScratchPath
from .types import Align, EdgeType, Paint, PaintStyle, Rect

TEXT_ANCHORS = {
    Align.LEFT: "ls",
    Align.CENTER: "ms",
    Align.RIGHT: "rs",
}


class RegionOp(Enum):
    """How a new clip shape combines with the current clip."""
    INTERSECT = "intersect"
    DIFFERENCE = "difference"


class SurfaceStateError(RuntimeError):
    """Raised when restore() is called without a matching save()."""


@dataclass
class _SavedState:
    matrix: np.ndarray
    clip: BaseGeometry


def _polygons(geometry: BaseGeometry) -> List[Polygon]:
    if geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        return [geometry]
    if hasattr(geometry, "geoms"):
        polygons: List[Polygon] = []
        for part in geometry.geoms:
            polygons.extend(_polygons(part))
        return polygons
    # Lines and points left over from degenerate clips cover no area.
    return []


class RasterSurface:
    """Draws into an RGB image through the current transform and clip.

    The clip is kept as a shapely region in surface coordinates. Every draw
    call renders onto a transparent layer and is pasted through a mask
    rasterised from that region. With ``supersample`` above one, drawing
    happens at a higher resolution and ``to_image`` scales the result down.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Tuple[int, int, int] = (255, 255, 255),
        supersample: int = 1,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Surface dimensions must be greater than zero.")

        self.width = int(width)
        self.height = int(height)
        self.supersample = max(int(supersample), 1)
        self._pixel_size = (self.width * self.supersample, self.height * self.supersample)
        self._image = Image.new("RGB", self._pixel_size, background)
        self._matrix = np.identity(3)
        self._clip: BaseGeometry = box(0, 0, self.width, self.height)
        self._stack: List[_SavedState] = []
        self._fonts: Dict[int, ImageFont.ImageFont] = {}

    # State stack

    @property
    def save_count(self) -> int:
        """Number of saved states plus the initial one."""
        return len(self._stack) + 1

    def save(self) -> int:
        count = self.save_count
        self._stack.append(_SavedState(self._matrix.copy(), self._clip))
        return count

    def restore(self) -> None:
        if not self._stack:
            raise SurfaceStateError("restore() called without a matching save().")
        state = self._stack.pop()
        self._matrix = state.matrix
        self._clip = state.clip

    @contextmanager
    def saved(self) -> Iterator["RasterSurface"]:
        """Scope in which transform and clip changes are undone on exit."""
        self.save()
        try:
            yield self
        finally:
            self.restore()

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def translate(self, dx: float, dy: float) -> None:
        self._matrix = self._matrix @ translation(dx, dy)

    def skew(self, sx: float, sy: float) -> None:
        self._matrix = self._matrix @ skew(sx, sy)

    # Clipping

    @property
    def clip_region(self) -> BaseGeometry:
        return self._clip

    def clip_bounds(self) -> Rect:
        if self._clip.is_empty:
            return Rect(0.0, 0.0, 0.0, 0.0)
        left, top, right, bottom = self._clip.bounds
        return Rect(left, top, right, bottom)

    def _clip_geometry(self, local: BaseGeometry, op: RegionOp) -> None:
        device = affinity.affine_transform(local, shapely_affine(self._matrix))
        if op is RegionOp.DIFFERENCE:
            self._clip = self._clip.difference(device)
        else:
            self._clip = self._clip.intersection(device)

    def clip_rect(self, left: float, top: float, right: float, bottom: float,
                  op: RegionOp = RegionOp.INTERSECT) -> None:
        self._clip_geometry(box(left, top, right, bottom), op)

    def clip_out_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        self.clip_rect(left, top, right, bottom, RegionOp.DIFFERENCE)

    def clip_path(self, path: ScratchPath, op: RegionOp = RegionOp.INTERSECT) -> None:
        self._clip_geometry(path.to_region(), op)

    def clip_out_path(self, path: ScratchPath) -> None:
        self.clip_path(path, RegionOp.DIFFERENCE)

    def quick_reject(self, rect: Rect, edge_type: EdgeType = EdgeType.AA) -> bool:
        """True when ``rect`` is certainly outside the current clip.

        The test works on bounding boxes, so a False answer only means the
        rectangle may be visible. Rounding for both edge types is done in
        surface units, not in supersampled pixels.
        """
        if self._clip.is_empty:
            return True

        left, top, right, bottom = points_bounds(transform_points(self._matrix, rect_corners(rect)))
        clip_left, clip_top, clip_right, clip_bottom = self._clip.bounds

        if edge_type is EdgeType.AA:
            clip_left, clip_top = math.floor(clip_left) - 1, math.floor(clip_top) - 1
            clip_right, clip_bottom = math.ceil(clip_right) + 1, math.ceil(clip_bottom) + 1
            left, top = math.floor(left), math.floor(top)
            right, bottom = math.ceil(right), math.ceil(bottom)
        else:
            clip_left, clip_top = round(clip_left), round(clip_top)
            clip_right, clip_bottom = round(clip_right), round(clip_bottom)
            left, top, right, bottom = round(left), round(top), round(right), round(bottom)

        if right <= left or bottom <= top:
            return True
        return left >= clip_right or top >= clip_bottom or right <= clip_left or bottom <= clip_top

    # Drawing

    def _pixel_matrix(self) -> np.ndarray:
        return scaling(self.supersample) @ self._matrix

    def _clip_mask(self) -> Image.Image:
        mask = Image.new("L", self._pixel_size, 0)
        scale = self.supersample
        for polygon in _polygons(self._clip):
            piece = Image.new("L", self._pixel_size, 0)
            draw = ImageDraw.Draw(piece)
            draw.polygon([(x * scale, y * scale) for x, y in polygon.exterior.coords], fill=255)
            for interior in polygon.interiors:
                draw.polygon([(x * scale, y * scale) for x, y in interior.coords], fill=0)
            mask = ImageChops.lighter(mask, piece)
        return mask

    def _composite(self, layer: Image.Image) -> None:
        alpha = ImageChops.multiply(layer.getchannel("A"), self._clip_mask())
        self._image.paste(layer.convert("RGB"), (0, 0), alpha)

    def _new_layer(self) -> Tuple[Image.Image, ImageDraw.ImageDraw]:
        layer = Image.new("RGBA", self._pixel_size, (0, 0, 0, 0))
        return layer, ImageDraw.Draw(layer)

    def _stroke_pixels(self, paint: Paint) -> int:
        return max(1, int(round(paint.stroke_width * self.supersample)))

    def _draw_polygon(self, points: Sequence[Tuple[float, float]], paint: Paint) -> None:
        layer, draw = self._new_layer()
        mapped = transform_points(self._pixel_matrix(), points)
        fill = (*paint.color, 255)
        if paint.style is PaintStyle.STROKE:
            draw.polygon(mapped, outline=fill, width=self._stroke_pixels(paint))
        else:
            draw.polygon(mapped, fill=fill)
        self._composite(layer)

    def draw_color(self, color: Tuple[int, int, int]) -> None:
        """Fill everything inside the current clip."""
        self._image.paste(Image.new("RGB", self._pixel_size, color), (0, 0), self._clip_mask())

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, paint: Paint) -> None:
        layer, draw = self._new_layer()
        mapped = transform_points(self._pixel_matrix(), [(x0, y0), (x1, y1)])
        draw.line(mapped, fill=(*paint.color, 255), width=self._stroke_pixels(paint))
        self._composite(layer)

    def draw_circle(self, cx: float, cy: float, radius: float, paint: Paint) -> None:
        self._draw_polygon(circle_points(cx, cy, radius), paint)

    def draw_rect(self, rect: Rect, paint: Paint) -> None:
        self._draw_polygon(rect_corners(rect), paint)

    def draw_round_rect(self, rect: Rect, rx: float, ry: float, paint: Paint) -> None:
        self._draw_polygon(rounded_rect_points(rect, rx, ry), paint)

    def _font(self, size: float) -> ImageFont.ImageFont:
        pixels = max(1, int(round(size)))
        if pixels not in self._fonts:
            self._fonts[pixels] = ImageFont.load_default(size=pixels)
        return self._fonts[pixels]

    def draw_text(self, text: str, x: float, y: float, paint: Paint) -> None:
        """Draw text whose baseline passes through (x, y), aligned by the paint.

        The text is rendered upright into a tile at output resolution and
        then warped by the current transform.
        """
        if not text:
            return

        scale = self.supersample
        font = self._font(paint.text_size * scale)
        anchor = TEXT_ANCHORS[paint.align]
        left, top, right, bottom = font.getbbox(text, anchor=anchor)
        tile_width = int(math.ceil(right - left))
        tile_height = int(math.ceil(bottom - top))
        if tile_width <= 0 or tile_height <= 0:
            return

        tile = Image.new("RGBA", (tile_width, tile_height), (0, 0, 0, 0))
        ImageDraw.Draw(tile).text((-left, -top), text, font=font, fill=(*paint.color, 255), anchor=anchor)

        tile_to_pixels = (
            self._pixel_matrix()
            @ translation(x + left / scale, y + top / scale)
            @ scaling(1.0 / scale)
        )
        layer = tile.transform(
            self._pixel_size,
            Image.Transform.AFFINE,
            inverse_affine_coefficients(tile_to_pixels),
            resample=Image.Resampling.BICUBIC,
        )
        self._composite(layer)

    def to_image(self) -> Image.Image:
        if self.supersample == 1:
            return self._image.copy()
        return self._image.resize((self.width, self.height), Image.Resampling.LANCZOS)
