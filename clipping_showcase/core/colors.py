"""Colour helpers for the clipping showcase."""

from __future__ import annotations

from typing import Dict, Optional, Tuple


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Translate a hex colour string into an RGB tuple."""
    value = hex_color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(char * 2 for char in value)
    if len(value) != 6:
        raise ValueError(f"Expected a #rrggbb colour, got {hex_color!r}.")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def get_color_values(
    color: Optional[str],
    mapping: Dict[str, Tuple[int, int, int]],
    fallback: str = "black",
) -> Tuple[int, int, int]:
    """Resolve a colour preset name or a hex value, with a named fallback."""
    if not color:
        color = fallback

    normalised = color.strip().lower()
    if normalised.startswith("#"):
        return hex_to_rgb(normalised)
    return mapping.get(normalised, mapping.get(fallback, (0, 0, 0)))
