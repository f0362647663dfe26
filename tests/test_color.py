"""Tests for Color, Maybe and the blending helpers."""

import dataclasses

import pytest

from hue_actions.lights.color import (
    BLUE,
    Color,
    Maybe,
    NAMED_COLORS,
    NOTHING,
    RED,
    YELLOW,
    color_from_name,
    maybe_blend_brightness,
    maybe_blend_color,
    resolve_color,
    round_brightness,
)


class TestColor:

    def test_blend(self):
        c1 = Color(0.3, 0.2)
        c2 = Color(0.2, 0.6)
        assert c1.blend(c2, 0.7) == Color(0.23, 0.48)
        assert c1.blend(c2, 0.0) == c1
        assert c1.blend(c2, 1.0) == c2

    def test_blend_extrapolates(self):
        c1 = Color(0.2, 0.2)
        c2 = Color(0.4, 0.4)
        assert c1.blend(c2, 2.0) == Color(0.6, 0.6)

    def test_quantized_to_four_places(self):
        assert Color(0.4, 0.6) == Color(0.40004, 0.59996)
        assert Color(0.4, 0.6) != Color(0.4001, 0.6)

    def test_coordinates_round_trip(self):
        for x, y in [(0.0, 1.0), (0.675, 0.322), (7.0, 0.2), (0.1234, 0.5678)]:
            c = Color(x, y)
            assert c.x == pytest.approx(x)
            assert c.y == pytest.approx(y)

    def test_str(self):
        assert str(Color(0.4, 0.6)) == "(0.4000, 0.6000)"

    def test_frozen(self):
        c = Color(0.4, 0.6)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.x = 0.5

    def test_brightness_blends_only_when_both_present(self):
        assert Color(0.2, 0.2, 100).blend(Color(0.4, 0.4, 200), 0.5).brightness == 150
        assert Color(0.2, 0.2, 100).blend(Color(0.4, 0.4), 0.5).brightness == 100
        assert Color(0.2, 0.2).blend(Color(0.4, 0.4, 200), 0.5).brightness is None

    def test_with_brightness(self):
        assert RED.with_brightness(42) == Color(0.675, 0.322, 42)


class TestMaybe:

    def test_str(self):
        assert str(Maybe.just(Color(0.4, 0.6))) == "Just (0.4000, 0.6000)"
        assert str(NOTHING) == "Nothing"

    def test_from_optional(self):
        assert Maybe.from_optional(None) == NOTHING
        assert Maybe.from_optional(0) == Maybe.just(0)
        assert Maybe.just(False).valid

    def test_get(self):
        assert Maybe.just(5).get() == 5
        assert NOTHING.get(7) == 7


class TestMaybeBlend:

    def test_both_present(self):
        result = maybe_blend_color(Maybe.just(Color(0.3, 0.2)), Maybe.just(Color(0.2, 0.6)), 0.7)
        assert result == Maybe.just(Color(0.23, 0.48))

    def test_first_held_when_second_missing(self):
        first = Maybe.just(Color(0.3, 0.2))
        assert maybe_blend_color(first, NOTHING, 0.7) == first

    def test_nothing_when_first_missing(self):
        assert maybe_blend_color(NOTHING, Maybe.just(Color(0.3, 0.2)), 0.7) == NOTHING

    def test_brightness(self):
        assert maybe_blend_brightness(Maybe.just(0), Maybe.just(30), 0.5) == Maybe.just(15)
        assert maybe_blend_brightness(Maybe.just(10), NOTHING, 0.5) == Maybe.just(10)
        assert maybe_blend_brightness(NOTHING, Maybe.just(10), 0.5) == NOTHING

    def test_round_brightness_halves_up(self):
        assert round_brightness(14.5) == 15
        assert round_brightness(14.49) == 14


class TestPresets:

    def test_derived_presets(self):
        assert YELLOW == RED.blend(Color(0.4077, 0.5154), 0.5)

    def test_named_colors_read_only(self):
        with pytest.raises(TypeError):
            NAMED_COLORS["red"] = BLUE

    def test_color_from_name(self):
        assert color_from_name(" Red ") == RED
        with pytest.raises(ValueError):
            color_from_name("chartreuse")

    def test_resolve_color(self):
        assert resolve_color(BLUE) is BLUE
        assert resolve_color("blue") == BLUE
        assert resolve_color([0.2, 0.1]) == Color(0.2, 0.1)
        with pytest.raises(ValueError):
            resolve_color([0.2])
        with pytest.raises(ValueError):
            resolve_color(3)
