"""Shared configuration for the clipping showcase."""

COLORS = ["white", "black", "gray", "dark gray", "light gray", "red", "green", "blue"]

color_mapping = {
    "white": (255, 255, 255),
    "black": (0, 0, 0),
    "gray": (136, 136, 136),
    "dark gray": (68, 68, 68),
    "light gray": (204, 204, 204),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
}

# Resource table of named lengths. dp and sp values scale with display density.
DEFAULT_DIMENSIONS = {
    "clipRectLeft": "0dp",
    "clipRectTop": "0dp",
    "clipRectRight": "90dp",
    "clipRectBottom": "90dp",
    "rectInset": "8dp",
    "smallRectOffset": "40dp",
    "circleRadius": "30dp",
    "textOffset": "20dp",
    "textSize": "18sp",
    "strokeWidth": "4dp",
}

DEFAULT_LABELS = {
    "clipping": "Clipping",
    "translated": "Translated",
    "skewed": "Skewed",
}

# First host version with clip-out calls; older hosts use region ops.
MODERN_CLIP_API_LEVEL = 26
