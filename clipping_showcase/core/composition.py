"""Panel declarations and the pass that draws them."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from PIL import Image

from ..config import DEFAULT_LABELS, MODERN_CLIP_API_LEVEL
from .clipping import BUILDERS
from .compat import ClipCompat, apply_clip_spec_to_surface, select_clip_compat
from .geometry import canvas_size, grid_origin, reject_row_origin, text_row_origin
from .path import ScratchPath
from .rendering import (
    draw_clipped_rectangle,
    draw_quick_reject,
    draw_skewed_text,
    draw_translated_text,
)
from .surface import RasterSurface
from .types import ContentVariant, GridOrigin, LayoutConstants, Panel

logger = logging.getLogger(__name__)

SKEW_FACTORS = (0.2, 0.3)
MAX_STAGE = 4
DEFAULT_BACKGROUND = (255, 255, 255)

# name, first tutorial stage it appears in, clip builder, content
_DECLARATIONS: List[Tuple[str, int, Optional[str], ContentVariant]] = [
    ("plain", 1, "plain", ContentVariant.CLIPPED_RECTANGLE),
    ("difference", 1, "difference", ContentVariant.CLIPPED_RECTANGLE),
    ("circular", 2, "circular", ContentVariant.CLIPPED_RECTANGLE),
    ("intersection", 2, "intersection", ContentVariant.CLIPPED_RECTANGLE),
    ("combined", 2, "combined", ContentVariant.CLIPPED_RECTANGLE),
    ("rounded", 3, "rounded", ContentVariant.CLIPPED_RECTANGLE),
    ("outside", 3, "outside", ContentVariant.CLIPPED_RECTANGLE),
    ("translated", 3, None, ContentVariant.TRANSLATED_TEXT),
    ("skewed", 3, None, ContentVariant.SKEWED_TEXT),
    ("quick_reject", 4, "plain", ContentVariant.QUICK_REJECT),
]


def _origin_for(index: int, content: ContentVariant, constants: LayoutConstants) -> GridOrigin:
    if content in (ContentVariant.TRANSLATED_TEXT, ContentVariant.SKEWED_TEXT):
        return text_row_origin(constants)
    if content is ContentVariant.QUICK_REJECT:
        return reject_row_origin(constants)
    # Clipped examples fill two columns row by row.
    return grid_origin(index % 2, index // 2, constants)


def build_panels(constants: LayoutConstants, stage: int = MAX_STAGE) -> List[Panel]:
    """Panels shown at a tutorial stage; later stages add to earlier ones."""
    if not 1 <= stage <= MAX_STAGE:
        raise ValueError(f"Stage must be between 1 and {MAX_STAGE}, got {stage}.")

    panels: List[Panel] = []
    for index, (name, first_stage, builder, content) in enumerate(_DECLARATIONS):
        if first_stage > stage:
            continue
        clip = BUILDERS[builder](constants) if builder else ()
        skew = SKEW_FACTORS if content is ContentVariant.SKEWED_TEXT else None
        panels.append(Panel(name, _origin_for(index, content, constants), clip, content, skew))
    return panels


def _draw_content(surface: RasterSurface, panel: Panel, constants: LayoutConstants,
                  labels: Mapping[str, str]) -> None:
    if panel.content is ContentVariant.CLIPPED_RECTANGLE:
        draw_clipped_rectangle(surface, constants, labels["clipping"])
    elif panel.content is ContentVariant.TRANSLATED_TEXT:
        draw_translated_text(surface, constants, labels["translated"])
    elif panel.content is ContentVariant.SKEWED_TEXT:
        draw_skewed_text(surface, constants, labels["skewed"])
    elif panel.content is ContentVariant.QUICK_REJECT:
        rejected = draw_quick_reject(surface, constants)
        logger.debug("Quick reject candidate %s", "rejected" if rejected else "kept")


def compose(
    surface: RasterSurface,
    panels: List[Panel],
    constants: LayoutConstants,
    compat: ClipCompat,
    path: ScratchPath,
    labels: Optional[Mapping[str, str]] = None,
) -> None:
    """Draw each panel inside its own save/restore scope."""
    labels = {**DEFAULT_LABELS, **(labels or {})}
    for panel in panels:
        with surface.saved():
            surface.translate(panel.origin.x, panel.origin.y)
            if panel.skew is not None:
                surface.skew(*panel.skew)
            apply_clip_spec_to_surface(surface, panel.clip, compat, path)
            _draw_content(surface, panel, constants, labels)
        logger.debug("Drew panel %s at (%.1f, %.1f)", panel.name, panel.origin.x, panel.origin.y)


class ClippedView:
    """The showcase view: fixed panels rendered onto any surface.

    The clipping calls for the host version are chosen once, when the view
    is created.
    """

    def __init__(
        self,
        constants: LayoutConstants,
        labels: Optional[Mapping[str, str]] = None,
        api_level: int = MODERN_CLIP_API_LEVEL,
        stage: int = MAX_STAGE,
        background: Tuple[int, int, int] = DEFAULT_BACKGROUND,
    ) -> None:
        self.constants = constants
        self.background = background
        self.labels: Dict[str, str] = {**DEFAULT_LABELS, **(labels or {})}
        self.compat = select_clip_compat(api_level)
        self.panels = build_panels(constants, stage)
        self.path = ScratchPath()

    @property
    def size(self) -> Tuple[int, int]:
        return canvas_size(self.constants)

    def render(self, surface: RasterSurface) -> None:
        surface.draw_color(self.background)
        compose(surface, self.panels, self.constants, self.compat, self.path, self.labels)
        logger.info("Rendered %d panels using %s clip calls", len(self.panels), self.compat.name)

    def render_image(self, supersample: int = 1) -> Image.Image:
        width, height = self.size
        surface = RasterSurface(width, height, supersample=supersample)
        self.render(surface)
        return surface.to_image()
