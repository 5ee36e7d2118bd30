"""Tests for the clip builders and region algebra."""
import pytest
from shapely.geometry import box

from clipping_showcase.core.clipping import (
    BUILDERS,
    apply_clip_spec,
    combined_clip,
    circular_clip,
    difference_clip,
    intersection_clip,
    outside_clip,
    plain_clip,
    region_contains,
    regions_equal,
    rounded_rect_clip,
    visible_region,
)
from clipping_showcase.core.types import IntersectRect, SetRect, SubtractRect, UnionPath


class TestBuilders:

    def test_plain_is_full_panel(self, constants):
        assert plain_clip(constants) == (SetRect(0, 0, 90, 90),)

    def test_difference_ops(self, constants):
        assert difference_clip(constants) == (
            SetRect(16, 16, 74, 74),
            SubtractRect(32, 32, 58, 58),
        )

    def test_intersection_shrinks_right_and_bottom_only(self, constants):
        assert intersection_clip(constants) == (
            SetRect(0, 0, 90, 90),
            IntersectRect(0, 0, 50, 50),
        )

    def test_combined_is_single_union(self, constants):
        spec = combined_clip(constants)
        assert len(spec) == 1
        assert isinstance(spec[0], UnionPath)
        assert len(spec[0].shapes) == 2

    def test_builders_do_not_share_state(self, constants):
        assert combined_clip(constants) == combined_clip(constants)


class TestVisibleRegions:

    def test_difference_is_a_frame(self, constants):
        region = visible_region(difference_clip(constants), constants)
        assert not region_contains(region, 45, 45)
        inset = 3 * constants.rect_inset
        for x, y in [(inset, inset), (90 - inset, inset), (inset, 90 - inset), (90 - inset, 90 - inset)]:
            assert region_contains(region, x, y)

    def test_intersection_margin(self, constants):
        region = visible_region(intersection_clip(constants), constants)
        offset = constants.small_rect_offset
        assert not region_contains(region, 90 - offset / 2, 90 - offset / 2)
        assert region_contains(region, 45, 45)
        assert region_contains(region, 2, 2)

    def test_circular_excludes_disc(self, constants):
        region = visible_region(circular_clip(constants), constants)
        assert not region_contains(region, 30, 60)
        assert region_contains(region, 80, 10)

    def test_combined_union(self, constants):
        region = visible_region(combined_clip(constants), constants)
        assert region_contains(region, 38, 38)
        assert region_contains(region, 45, 80)
        assert not region_contains(region, 80, 60)
        assert not region_contains(region, 5, 85)

    def test_rounded_corners_cut(self, constants):
        region = visible_region(rounded_rect_clip(constants), constants)
        assert not region_contains(region, 9, 9)
        assert region_contains(region, 45, 45)
        assert region_contains(region, 45, 9)

    def test_outside_clip_double_inset(self, constants):
        region = visible_region(outside_clip(constants), constants)
        assert not region_contains(region, 10, 10)
        assert region_contains(region, 45, 45)
        assert region.bounds == pytest.approx((16, 16, 74, 74))

    @pytest.mark.parametrize("name", sorted(BUILDERS))
    def test_reapplying_changes_nothing(self, constants, name):
        spec = BUILDERS[name](constants)
        once = visible_region(spec, constants)
        twice = apply_clip_spec(once, spec)
        assert regions_equal(once, twice)

    @pytest.mark.parametrize("name", sorted(BUILDERS))
    def test_region_never_grows(self, constants, name):
        full = box(0, 0, 90, 90)
        region = visible_region(BUILDERS[name](constants), constants)
        assert region.area <= full.area
        assert full.covers(region)
