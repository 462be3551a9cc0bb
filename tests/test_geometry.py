"""Tests for pointer position <-> color mapping."""

import math

import pytest
from pydantic import ValidationError

from huepicker.colors import from_rgb, to_hsl, to_rgb
from huepicker.geometry import (
    TRACK_MARKER_Y,
    ChannelUpdate,
    SurfaceMapping,
    color_to_position,
    mapping_for,
    normalize_pointer,
    position_to_update,
)
from huepicker.models import HSVColor, Surface


def apply(surface, x, y, prior):
    return position_to_update(surface, x, y, prior).apply(prior)


@pytest.mark.unit
class TestChannelUpdate:
    """Partial updates only touch the channels they set."""

    def test_channels(self):
        assert ChannelUpdate(saturation=0.25, value=1.0).channels == ("saturation", "value")
        assert ChannelUpdate().channels == ()

    def test_apply_preserves_other_channels(self, muted_blue):
        updated = ChannelUpdate(value=0.1).apply(muted_blue)
        assert updated.value == 0.1
        assert updated.hue == muted_blue.hue
        assert updated.saturation == muted_blue.saturation
        assert updated.alpha == muted_blue.alpha

    def test_values_normalised(self):
        update = ChannelUpdate(hue=-90, saturation=3.0, alpha=-1)
        assert update.hue == 270.0
        assert update.saturation == 1.0
        assert update.alpha == 0.0

    def test_rejects_infinity(self):
        with pytest.raises(ValidationError):
            ChannelUpdate(value=float("inf"))


@pytest.mark.unit
class TestDispatch:
    """Every surface has exactly one mapping."""

    def test_every_surface_has_a_mapping(self):
        for surface in Surface:
            assert isinstance(mapping_for(surface), SurfaceMapping)

    def test_accepts_surface_names(self):
        assert mapping_for("hue_wheel") is mapping_for(Surface.HUE_WHEEL)

    def test_unknown_surface(self):
        with pytest.raises(ValueError):
            mapping_for("triangle")

    def test_tracks_drive_one_channel(self):
        for surface in Surface:
            expected = 1 if surface.is_track else 2
            assert len(mapping_for(surface).channels) == expected


@pytest.mark.unit
class TestSaturationValueArea:
    """x is saturation, y is inverted value."""

    def test_top_right_is_full_color(self):
        color = apply(Surface.HSV_SATURATION_VALUE, 1.0, 0.0, from_rgb(0, 0, 255))
        assert to_rgb(color) == (0, 0, 255, 255)

    def test_bottom_left_is_black(self):
        color = apply(Surface.HSV_SATURATION_VALUE, 0.0, 1.0, from_rgb(0, 0, 255))
        assert color.saturation == 0.0
        assert color.value == 0.0

    def test_y_is_inverted(self):
        color = apply(Surface.HSV_SATURATION_VALUE, 0.25, 0.75, from_rgb(255, 0, 0))
        assert color.saturation == pytest.approx(0.25)
        assert color.value == pytest.approx(0.25)

    def test_marker_position(self):
        color = HSVColor(saturation=0.25, value=0.75)
        assert color_to_position(Surface.HSV_SATURATION_VALUE, color) == pytest.approx((0.25, 0.25))

    def test_out_of_bounds_clamps(self):
        color = apply(Surface.HSV_SATURATION_VALUE, 1.5, -0.5, HSVColor())
        assert color.saturation == 1.0
        assert color.value == 1.0

    def test_hue_survives_a_drag_through_grey(self):
        blue = from_rgb(0, 0, 255)
        white = apply(Surface.HSV_SATURATION_VALUE, 0.0, 0.0, blue)
        assert to_rgb(white) == (255, 255, 255, 255)
        assert white.hue == pytest.approx(240.0)

        back = apply(Surface.HSV_SATURATION_VALUE, 1.0, 0.0, white)
        assert to_rgb(back) == (0, 0, 255, 255)

    def test_alpha_preserved(self, muted_blue):
        assert apply(Surface.HSV_SATURATION_VALUE, 0.5, 0.5, muted_blue).alpha == muted_blue.alpha


@pytest.mark.unit
class TestHueWheel:
    """Hue 0 at 3 o'clock, increasing counter-clockwise on screen."""

    @pytest.mark.parametrize(
        "x, y, hue",
        [(1.0, 0.5, 0.0), (0.5, 0.0, 90.0), (0.0, 0.5, 180.0), (0.5, 1.0, 270.0)],
    )
    def test_rim_hues(self, x, y, hue):
        color = apply(Surface.HUE_WHEEL, x, y, HSVColor(value=1.0))
        assert color.hue == pytest.approx(hue)
        assert color.saturation == pytest.approx(1.0)

    def test_outside_disc_clamps_saturation(self):
        color = apply(Surface.HUE_WHEEL, 2.0, 0.5, HSVColor(value=1.0))
        assert color.hue == pytest.approx(0.0)
        assert color.saturation == 1.0

    def test_half_radius(self):
        color = apply(Surface.HUE_WHEEL, 0.75, 0.5, HSVColor(value=1.0))
        assert color.saturation == pytest.approx(0.5)

    def test_centre_keeps_prior_hue(self):
        color = apply(Surface.HUE_WHEEL, 0.5, 0.5, HSVColor(hue=123.0, saturation=1.0, value=0.4))
        assert color.saturation == 0.0
        assert color.hue == 123.0
        assert color.value == 0.4

    def test_value_untouched(self):
        assert apply(Surface.HUE_WHEEL, 0.1, 0.2, HSVColor(value=0.3)).value == 0.3

    def test_marker_for_hue_90_is_straight_up(self):
        x, y = color_to_position(Surface.HUE_WHEEL, HSVColor(hue=90, saturation=1.0, value=1.0))
        assert x == pytest.approx(0.5)
        assert y == pytest.approx(0.0)

    def test_grey_marker_at_centre(self):
        assert color_to_position(Surface.HUE_WHEEL, HSVColor(hue=45)) == pytest.approx((0.5, 0.5))


@pytest.mark.unit
class TestTracks:
    """One-dimensional sliders."""

    def test_hue_track(self):
        assert apply(Surface.HUE, 0.5, 0.9, HSVColor()).hue == pytest.approx(180.0)

    def test_hue_track_end_wraps_to_zero(self):
        assert apply(Surface.HUE, 1.0, 0.5, HSVColor(hue=100)).hue == 0.0

    def test_track_ignores_y(self, muted_blue):
        assert apply(Surface.VALUE, 0.3, 0.0, muted_blue) == apply(Surface.VALUE, 0.3, 1.0, muted_blue)

    def test_marker_y_is_centre_line(self, muted_blue):
        for surface in Surface:
            if surface.is_track:
                assert color_to_position(surface, muted_blue)[1] == TRACK_MARKER_Y

    def test_rgb_track_keeps_other_channels(self):
        color = apply(Surface.GREEN, 1.0, 0.5, from_rgb(255, 0, 0))
        assert to_rgb(color) == (255, 255, 0, 255)

    def test_rgb_track_grey_result_keeps_hue(self):
        prior = HSVColor(hue=200.0, saturation=0.0, value=0.5)
        color = apply(Surface.BLUE, 0.5, 0.5, prior)
        assert color.saturation == 0.0
        assert color.hue == 200.0

    def test_lightness_track(self):
        color = apply(Surface.LIGHTNESS, 1.0, 0.5, from_rgb(255, 0, 0))
        assert to_rgb(color) == (255, 255, 255, 255)
        assert color.hue == 0.0

    def test_hsl_saturation_track_keeps_lightness(self, muted_blue):
        color = apply(Surface.SATURATION_HSL, 0.1, 0.5, muted_blue)
        assert to_hsl(color).lightness == pytest.approx(to_hsl(muted_blue).lightness)
        assert to_hsl(color).saturation == pytest.approx(0.1)

    def test_alpha_track(self, muted_blue):
        color = apply(Surface.ALPHA, 0.25, 0.5, muted_blue)
        assert color.alpha == 0.25
        assert color.value == muted_blue.value


@pytest.mark.unit
class TestAreas:
    """Rectangles over HSV, HSL and RGB channel pairs."""

    def test_hsl_area_corners(self):
        red = from_rgb(255, 0, 0)
        assert to_rgb(apply(Surface.HSL_SATURATION_LIGHTNESS, 1.0, 0.5, red)) == (255, 0, 0, 255)
        assert to_rgb(apply(Surface.HSL_SATURATION_LIGHTNESS, 0.3, 0.0, red)) == (255, 255, 255, 255)

    def test_hue_saturation_area_keeps_value(self, muted_blue):
        color = apply(Surface.HSV_HUE_SATURATION, 0.5, 0.0, muted_blue)
        assert color.hue == pytest.approx(180.0)
        assert color.saturation == 1.0
        assert color.value == muted_blue.value

    def test_rgb_area_keeps_third_channel(self):
        color = apply(Surface.RGB_RED_GREEN, 1.0, 0.0, from_rgb(0, 0, 51))
        assert to_rgb(color) == (255, 255, 51, 255)

    def test_rgb_area_grey_result_keeps_hue(self):
        prior = HSVColor(hue=300.0, saturation=0.0, value=0.0)
        color = apply(Surface.RGB_BLUE_GREEN, 0.0, 1.0, prior)
        assert color.value == 0.0
        assert color.hue == 300.0


@pytest.mark.unit
class TestIdempotence:
    """Applying a position then reading the marker gives the position back."""

    @pytest.mark.parametrize("surface", list(Surface), ids=lambda s: s.value)
    def test_position_recovered(self, surface, muted_blue):
        x, y = 0.3, 0.6
        color = apply(surface, x, y, muted_blue)
        marker_x, marker_y = color_to_position(surface, color)

        assert marker_x == pytest.approx(x, abs=1e-9)
        if surface.is_track:
            assert marker_y == TRACK_MARKER_Y
        else:
            assert marker_y == pytest.approx(y, abs=1e-9)

    @pytest.mark.parametrize("surface", list(Surface), ids=lambda s: s.value)
    def test_reapplying_marker_is_stable(self, surface, muted_blue):
        color = apply(surface, 0.7, 0.2, muted_blue)
        again = apply(surface, *color_to_position(surface, color), color)
        assert again.hue == pytest.approx(color.hue, abs=1e-6)
        assert again.saturation == pytest.approx(color.saturation, abs=1e-9)
        assert again.value == pytest.approx(color.value, abs=1e-9)
        assert again.alpha == color.alpha


@pytest.mark.unit
class TestNormalizePointer:
    """Local pixels -> normalised coordinates."""

    def test_area_scales_and_clamps(self):
        assert normalize_pointer(Surface.HSV_SATURATION_VALUE, 50, 25, 100, 50) == (0.5, 0.5)
        assert normalize_pointer(Surface.HSV_SATURATION_VALUE, 150, -5, 100, 50) == (1.0, 0.0)

    def test_track_uses_centre_line(self):
        assert normalize_pointer(Surface.HUE, 25, 999, 100, 10) == (0.25, TRACK_MARKER_Y)

    def test_track_ignores_height(self):
        assert normalize_pointer(Surface.ALPHA, 10, 0, 100, 0) == (0.1, TRACK_MARKER_Y)

    def test_wheel_uses_centred_square(self):
        # 200x100 bounds: the wheel is the 100x100 square from x=50
        assert normalize_pointer(Surface.HUE_WHEEL, 150, 50, 200, 100) == (1.0, 0.5)
        assert normalize_pointer(Surface.HUE_WHEEL, 100, 50, 200, 100) == (0.5, 0.5)

    def test_wheel_is_not_clamped(self):
        assert normalize_pointer(Surface.HUE_WHEEL, 200, 50, 100, 100) == (2.0, 0.5)

    @pytest.mark.parametrize(
        "surface, width, height",
        [
            (Surface.HUE_WHEEL, 100, 0),
            (Surface.HUE_WHEEL, 0, 100),
            (Surface.HUE, 0, 10),
            (Surface.HSV_SATURATION_VALUE, 100, 0),
            (Surface.HSV_SATURATION_VALUE, -10, 10),
        ],
    )
    def test_degenerate_bounds(self, surface, width, height):
        assert normalize_pointer(surface, 1, 1, width, height) is None

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_input(self, bad):
        assert normalize_pointer(Surface.HSV_SATURATION_VALUE, bad, 1, 10, 10) is None
        assert normalize_pointer(Surface.HUE_WHEEL, 1, 1, bad, 10) is None
