"""Tests for colour resolution."""
import pytest

from clipping_showcase.config import COLORS, color_mapping
from clipping_showcase.core.colors import get_color_values, hex_to_rgb


class TestColors:

    def test_every_preset_resolves(self):
        for name in COLORS:
            assert get_color_values(name, color_mapping) == color_mapping[name]

    def test_hex_values(self):
        assert get_color_values("#102030", color_mapping) == (16, 32, 48)
        assert hex_to_rgb("#fff") == (255, 255, 255)

    def test_fallbacks(self):
        assert get_color_values(None, color_mapping, fallback="white") == (255, 255, 255)
        assert get_color_values("mauve", color_mapping) == (0, 0, 0)

    def test_bad_hex(self):
        with pytest.raises(ValueError):
            hex_to_rgb("#12345")
