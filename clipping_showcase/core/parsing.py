"""Parsing helpers for dimension tables."""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional

from ..config import DEFAULT_DIMENSIONS
from .types import LayoutConstants

SCALED_UNITS = ("dp", "dip", "sp")
_DIMENSION_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*([a-z]*)\s*$")

# Resource names to LayoutConstants fields.
FIELD_NAMES = {
    "clipRectLeft": "clip_rect_left",
    "clipRectTop": "clip_rect_top",
    "clipRectRight": "clip_rect_right",
    "clipRectBottom": "clip_rect_bottom",
    "rectInset": "rect_inset",
    "smallRectOffset": "small_rect_offset",
    "circleRadius": "circle_radius",
    "textOffset": "text_offset",
    "textSize": "text_size",
    "strokeWidth": "stroke_width",
}


def parse_dimension(value: str, density: float = 1.0) -> float:
    """Convert a dimension such as "8dp", "18sp" or "12px" into pixels."""
    match = _DIMENSION_PATTERN.match(str(value).lower())
    if match is None:
        raise ValueError(f"Invalid dimension: {value!r}")

    amount = float(match.group(1))
    unit = match.group(2)
    if unit in SCALED_UNITS:
        return amount * density
    if unit in ("", "px"):
        return amount
    raise ValueError(f"Unknown dimension unit {unit!r} in {value!r}")


def safe_float(value: str, default: float = 1.0) -> float:
    """Parse a float, falling back to a default if needed."""
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def parse_dimension_overrides(text: Optional[str]) -> Dict[str, str]:
    """Parse ``name: value`` lines, skipping comments, unknown names and bad values."""
    overrides: Dict[str, str] = {}
    if not text:
        return overrides

    for raw_line in text.splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        separator = ":" if ":" in line else "="
        if separator not in line:
            continue
        name, value = (part.strip() for part in line.split(separator, 1))
        if name not in FIELD_NAMES or not value:
            continue
        try:
            parse_dimension(value)
        except (TypeError, ValueError):
            continue
        overrides[name] = value
    return overrides


def resolve_constants(overrides: Optional[Mapping[str, str]] = None, density: float = 1.0) -> LayoutConstants:
    """Merge overrides into the default table and resolve it to pixels."""
    table = {**DEFAULT_DIMENSIONS, **(overrides or {})}
    values = {FIELD_NAMES[name]: parse_dimension(table[name], density) for name in FIELD_NAMES}
    return LayoutConstants(**values)
