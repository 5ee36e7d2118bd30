"""Layout, clipping and rendering helpers for the clipping showcase."""
