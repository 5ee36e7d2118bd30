"""Panel content drawn inside whatever transform and clip are active."""

from __future__ import annotations

from typing import Dict, Optional

from ..config import color_mapping
from .colors import get_color_values
from .geometry import local_bounds
from .surface import RasterSurface
from .types import Align, EdgeType, LayoutConstants, Paint, QuickRejectProbe, Rect


def content_paints(constants: LayoutConstants) -> Dict[str, Paint]:
    """Paints used by the example content, keyed by role."""

    def paint(color: str, align: Align = Align.LEFT) -> Paint:
        return Paint(
            color=get_color_values(color, color_mapping),
            stroke_width=constants.stroke_width,
            text_size=constants.text_size,
            align=align,
        )

    return {
        "background": paint("gray"),
        "line": paint("red"),
        "circle": paint("green"),
        "label": paint("blue", Align.RIGHT),
        "translated": paint("red", Align.LEFT),
        "skewed": paint("dark gray", Align.RIGHT),
        "candidate": paint("dark gray"),
    }


def draw_clipped_rectangle(surface: RasterSurface, constants: LayoutConstants, label: str) -> None:
    """Gray panel with a red diagonal, a green corner circle and a blue label."""
    paints = content_paints(constants)
    bounds = local_bounds(constants)

    surface.clip_rect(bounds.left, bounds.top, bounds.right, bounds.bottom)
    surface.draw_color(paints["background"].color)

    surface.draw_line(bounds.left, bounds.top, bounds.right, bounds.bottom, paints["line"])

    radius = constants.circle_radius
    surface.draw_circle(radius, bounds.bottom - radius, radius, paints["circle"])

    # Right alignment puts the text to the left of its origin.
    surface.draw_text(label, bounds.right, constants.text_offset, paints["label"])


def draw_translated_text(surface: RasterSurface, constants: LayoutConstants, label: str) -> None:
    paints = content_paints(constants)
    surface.draw_text(label, constants.clip_rect_left, constants.clip_rect_top, paints["translated"])


def draw_skewed_text(surface: RasterSurface, constants: LayoutConstants, label: str) -> None:
    paints = content_paints(constants)
    surface.draw_text(label, constants.clip_rect_left, constants.clip_rect_top, paints["skewed"])


def default_reject_candidate(constants: LayoutConstants) -> Rect:
    """Rectangle straddling the bottom-right corner of the panel clip."""
    return Rect(
        constants.clip_rect_right / 2,
        constants.clip_rect_bottom / 2,
        constants.clip_rect_right * 2,
        constants.clip_rect_bottom * 2,
    )


def draw_quick_reject(
    surface: RasterSurface,
    constants: LayoutConstants,
    probe: Optional[QuickRejectProbe] = None,
) -> bool:
    """White when the candidate is rejected, black plus the candidate otherwise.

    Returns the quick reject answer.
    """
    if probe is None:
        probe = QuickRejectProbe(default_reject_candidate(constants), EdgeType.AA)

    candidate = probe.rect
    rejected = surface.quick_reject(candidate, probe.edge_type)
    if rejected:
        surface.draw_color(get_color_values("white", color_mapping))
    else:
        surface.draw_color(get_color_values("black", color_mapping))
        surface.draw_rect(candidate, content_paints(constants)["candidate"])
    return rejected
