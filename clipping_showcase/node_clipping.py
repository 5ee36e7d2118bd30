"""Node definition for the clipping showcase."""

from __future__ import annotations

import logging
from typing import Optional

from .categories import icons
from .config import COLORS, DEFAULT_DIMENSIONS, DEFAULT_LABELS, MODERN_CLIP_API_LEVEL, color_mapping
from .core.colors import get_color_values
from .core.composition import MAX_STAGE, ClippedView
from .core.imaging import pil2tensor
from .core.parsing import parse_dimension_overrides, resolve_constants, safe_float

logger = logging.getLogger(__name__)

STAGES = [str(stage) for stage in range(1, MAX_STAGE + 1)]
BACKGROUND_COLORS = COLORS + ["custom"]


def _default_overrides_text() -> str:
    return "\n".join(f"{name}: {value}" for name, value in DEFAULT_DIMENSIONS.items())


class ClippingShowcase:
    """Render the canvas clipping examples as a single image."""

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "stage": (STAGES, {"default": STAGES[-1]}),
                "density": ("FLOAT", {"default": 2.0, "min": 0.5, "max": 8.0, "step": 0.25}),
                "api_level": ("INT", {"default": MODERN_CLIP_API_LEVEL, "min": 1, "max": 99}),
                "supersample": ("INT", {"default": 2, "min": 1, "max": 8}),
            },
            "optional": {
                "dimension_overrides": ("STRING", {"multiline": True, "default": _default_overrides_text()}),
                "clipping_label": ("STRING", {"default": DEFAULT_LABELS["clipping"]}),
                "translated_label": ("STRING", {"default": DEFAULT_LABELS["translated"]}),
                "skewed_label": ("STRING", {"default": DEFAULT_LABELS["skewed"]}),
                "background_color": (BACKGROUND_COLORS, {"default": "white"}),
                "background_color_hex": ("STRING", {"default": "#FFFFFF"}),
            },
        }

    RETURN_TYPES = ("IMAGE", "STRING")
    RETURN_NAMES = ("image", "show_help")
    FUNCTION = "render"
    CATEGORY = icons.get("ClippingShowcase/Examples")

    def render(
        self,
        stage: str,
        density: float,
        api_level: int,
        supersample: int,
        dimension_overrides: Optional[str] = None,
        clipping_label: Optional[str] = None,
        translated_label: Optional[str] = None,
        skewed_label: Optional[str] = None,
        background_color: Optional[str] = None,
        background_color_hex: Optional[str] = None,
    ):
        constants = resolve_constants(
            parse_dimension_overrides(dimension_overrides),
            safe_float(density, default=1.0),
        )
        labels = {
            "clipping": clipping_label or DEFAULT_LABELS["clipping"],
            "translated": translated_label or DEFAULT_LABELS["translated"],
            "skewed": skewed_label or DEFAULT_LABELS["skewed"],
        }

        if background_color == "custom":
            background_color = background_color_hex
        background = get_color_values(background_color, color_mapping, fallback="white")

        view = ClippedView(constants, labels, api_level=int(api_level), stage=int(stage), background=background)
        image = view.render_image(supersample=max(int(supersample), 1))
        logger.info("Clipping showcase rendered at %dx%d", image.width, image.height)

        show_help = "Clipping showcase panels: " + ", ".join(panel.name for panel in view.panels)
        return pil2tensor(image), show_help
