"""Tests for the panel declarations and the composition pass."""
import itertools

import numpy as np
import pytest

from clipping_showcase.core.compat import ClipCompat
from clipping_showcase.core.composition import ClippedView, build_panels, compose
from clipping_showcase.core.geometry import canvas_size, panel_bounds
from clipping_showcase.core.path import ScratchPath
from clipping_showcase.core.rendering import draw_quick_reject
from clipping_showcase.core.surface import RasterSurface
from clipping_showcase.core.types import ContentVariant, GridOrigin, QuickRejectProbe, Rect

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (136, 136, 136)
DARK_GRAY = (68, 68, 68)
RED = (255, 0, 0)
GREEN = (0, 255, 0)


class TestBuildPanels:

    @pytest.mark.parametrize("stage,count", [(1, 2), (2, 5), (3, 9), (4, 10)])
    def test_stage_adds_panels(self, constants, stage, count):
        assert len(build_panels(constants, stage)) == count

    @pytest.mark.parametrize("stage", [0, 5])
    def test_invalid_stage(self, constants, stage):
        with pytest.raises(ValueError):
            build_panels(constants, stage)

    def test_origins(self, constants):
        panels = {panel.name: panel for panel in build_panels(constants)}
        assert panels["plain"].origin == GridOrigin(8, 8)
        assert panels["difference"].origin == GridOrigin(106, 8)
        assert panels["outside"].origin == GridOrigin(8, 302)
        assert panels["skewed"].origin == panels["translated"].origin
        assert panels["skewed"].skew == (0.2, 0.3)
        assert panels["translated"].clip == ()
        assert panels["quick_reject"].content is ContentVariant.QUICK_REJECT

    def test_clipped_panels_do_not_overlap(self, constants):
        boxes = [
            panel_bounds(panel.origin, constants)
            for panel in build_panels(constants)
            if panel.content in (ContentVariant.CLIPPED_RECTANGLE, ContentVariant.QUICK_REJECT)
        ]
        for first, second in itertools.combinations(boxes, 2):
            assert (
                first.right <= second.left
                or second.right <= first.left
                or first.bottom <= second.top
                or second.bottom <= first.top
            )


class TestCompose:

    @pytest.mark.parametrize("stage", [1, 2, 3, 4])
    def test_stack_depth_restored(self, constants, stage):
        surface = RasterSurface(*canvas_size(constants))
        compose(surface, build_panels(constants, stage), constants, ClipCompat(), ScratchPath())
        assert surface.save_count == 1
        assert np.array_equal(surface.matrix, np.identity(3))

    def test_no_panels(self, constants):
        surface = RasterSurface(10, 10)
        compose(surface, [], constants, ClipCompat(), ScratchPath())
        assert surface.save_count == 1


class TestClippedView:

    @pytest.fixture
    def image(self, constants):
        return ClippedView(constants).render_image()

    def test_image_size(self, constants, image):
        assert image.size == canvas_size(constants)

    def test_plain_panel_is_gray(self, image):
        assert image.getpixel((88, 58)) == GRAY

    def test_difference_centre_is_cut_out(self, image):
        assert image.getpixel((151, 53)) == WHITE
        assert image.getpixel((172, 58)) == GRAY

    def test_quick_reject_panel_keeps_straddling_candidate(self, image):
        assert image.getpixel((18, 500)) == BLACK
        assert image.getpixel((68, 550)) == DARK_GRAY

    def test_plain_panel_circle_is_green(self, image):
        # local (r, bottom - r) in the panel at (8, 8)
        assert image.getpixel((38, 68)) == GREEN

    def test_plain_panel_diagonal_is_red(self, image):
        assert image.getpixel((88, 88)) == RED

    def test_plain_panel_label_ends_at_right_edge(self, image):
        pixels = np.asarray(image).astype(int)
        band = pixels[8:40, 8:106]
        blue = (band[..., 2] > 200) & (band[..., 0] < 60) & (band[..., 1] < 60)
        assert blue.sum() > 50
        columns = np.nonzero(blue.any(axis=0))[0] + 8
        rows = np.nonzero(blue.any(axis=1))[0] + 8
        assert columns.max() <= 98
        assert columns.max() >= 88
        assert rows.max() <= 8 + 20 + 6

    def test_translated_text_is_red_right_of_origin(self, image):
        pixels = np.asarray(image).astype(int)
        band = pixels[380:410, 106:204]
        red = (band[..., 0] > 200) & (band[..., 1] < 80) & (band[..., 2] < 80)
        assert red.sum() > 20
        assert np.nonzero(red.any(axis=0))[0].min() <= 4

        left_of_origin = pixels[380:410, 60:106]
        assert not ((left_of_origin[..., 0] > 200) & (left_of_origin[..., 1] < 80)).any()

    def test_skewed_text_is_dark_gray_left_of_origin(self, image):
        pixels = np.asarray(image).astype(int)
        band = pixels[355:405, 20:108]
        spread = band.max(axis=2) - band.min(axis=2)
        dark_gray = (band.max(axis=2) < 110) & (spread < 12)
        assert dark_gray.sum() > 20
        columns = np.nonzero(dark_gray.any(axis=0))[0] + 20
        assert columns.max() <= 108

    def test_text_row_has_ink(self, image):
        pixels = np.asarray(image)
        assert (pixels[380:420, 106:204] != 255).any()

    def test_legacy_host_renders_the_same(self, constants, image):
        legacy = ClippedView(constants, api_level=21).render_image()
        assert np.array_equal(np.asarray(legacy), np.asarray(image))

    def test_render_leaves_stack_balanced(self, constants):
        view = ClippedView(constants, stage=2)
        surface = RasterSurface(*view.size)
        view.render(surface)
        assert surface.save_count == 1

    def test_custom_labels(self, constants):
        view = ClippedView(constants, labels={"clipping": "Clip"})
        assert view.labels["clipping"] == "Clip"
        assert view.labels["skewed"] == "Skewed"


class TestQuickRejectContent:

    def test_outside_candidate_takes_white_branch(self, constants):
        surface = RasterSurface(300, 300, background=(10, 20, 30))
        with surface.saved():
            surface.translate(8, 8)
            surface.clip_rect(0, 0, 90, 90)
            rejected = draw_quick_reject(surface, constants, QuickRejectProbe(Rect(91, 91, 180, 180)))
        assert rejected
        image = surface.to_image()
        assert image.getpixel((50, 50)) == WHITE
        assert image.getpixel((150, 150)) == (10, 20, 30)

    def test_straddling_candidate_takes_black_branch(self, constants):
        surface = RasterSurface(300, 300)
        with surface.saved():
            surface.translate(8, 8)
            surface.clip_rect(0, 0, 90, 90)
            rejected = draw_quick_reject(surface, constants)
        assert not rejected
        image = surface.to_image()
        assert image.getpixel((20, 20)) == BLACK
        assert image.getpixel((150, 150)) == WHITE
