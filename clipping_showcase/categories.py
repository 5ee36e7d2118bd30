"""Menu categories for the clipping showcase nodes."""

icons = {
    "ClippingShowcase/Examples": "🟥 ClippingShowcase/Examples",
}
