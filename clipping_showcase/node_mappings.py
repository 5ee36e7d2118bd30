"""Node registration for the clipping showcase."""

from .node_clipping import ClippingShowcase

NODE_CLASS_MAPPINGS = {
    "ClippingShowcase": ClippingShowcase,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "ClippingShowcase": "Clipping Showcase",
}
