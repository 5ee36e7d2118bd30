"""Host-version selection between region-op and clip-out clipping calls."""

from __future__ import annotations

from typing import Tuple

from ..config import MODERN_CLIP_API_LEVEL
from .path import ScratchPath
from .surface import RasterSurface, RegionOp
from .types import (
    ClipSpec,
    IntersectRect,
    RoundRect,
    SetRect,
    Shape,
    SubtractPath,
    SubtractRect,
    UnionPath,
)


class ClipCompat:
    """Clip calls available on hosts with clip-out support."""

    name = "modern"

    def subtract_rect(self, surface: RasterSurface, left: float, top: float, right: float, bottom: float) -> None:
        surface.clip_out_rect(left, top, right, bottom)

    def intersect_rect(self, surface: RasterSurface, left: float, top: float, right: float, bottom: float) -> None:
        surface.clip_rect(left, top, right, bottom)

    def subtract_path(self, surface: RasterSurface, path: ScratchPath) -> None:
        surface.clip_out_path(path)


class LegacyClipCompat(ClipCompat):
    """Older hosts express subtraction and intersection through region ops."""

    name = "legacy"

    def subtract_rect(self, surface: RasterSurface, left: float, top: float, right: float, bottom: float) -> None:
        surface.clip_rect(left, top, right, bottom, RegionOp.DIFFERENCE)

    def intersect_rect(self, surface: RasterSurface, left: float, top: float, right: float, bottom: float) -> None:
        surface.clip_rect(left, top, right, bottom, RegionOp.INTERSECT)

    def subtract_path(self, surface: RasterSurface, path: ScratchPath) -> None:
        surface.clip_path(path, RegionOp.DIFFERENCE)


_MODERN = ClipCompat()
_LEGACY = LegacyClipCompat()


def select_clip_compat(api_level: int) -> ClipCompat:
    """Pick the clipping calls for a host version. Resolve once, not per frame."""
    if api_level < MODERN_CLIP_API_LEVEL:
        return _LEGACY
    return _MODERN


def _load_path(path: ScratchPath, shapes: Tuple[Shape, ...]) -> ScratchPath:
    return path.rewind().add_shapes(shapes)


def apply_clip_spec_to_surface(
    surface: RasterSurface,
    spec: ClipSpec,
    compat: ClipCompat,
    path: ScratchPath,
) -> None:
    """Replay clip operations, in order, in the surface's current coordinates."""
    for op in spec:
        if isinstance(op, SetRect):
            surface.clip_rect(op.left, op.top, op.right, op.bottom)
        elif isinstance(op, IntersectRect):
            compat.intersect_rect(surface, op.left, op.top, op.right, op.bottom)
        elif isinstance(op, SubtractRect):
            compat.subtract_rect(surface, op.left, op.top, op.right, op.bottom)
        elif isinstance(op, SubtractPath):
            compat.subtract_path(surface, _load_path(path, op.shapes))
        elif isinstance(op, UnionPath):
            surface.clip_path(_load_path(path, op.shapes))
        elif isinstance(op, RoundRect):
            surface.clip_path(path.rewind().add_round_rect(op.rect, op.rx, op.ry))
        else:
            raise TypeError(f"Unsupported clip operation: {op!r}")
