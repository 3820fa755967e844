"""Tests for the bezier evaluator and presets."""

import math

import pytest

from animation_studio.curves import (
    BezierCurve,
    bezier_y,
    find_preset,
    matching_preset,
    parse_coordinate,
    preset_names,
)


class TestBezierY:
    @pytest.mark.parametrize("p1y, p2y", [(0, 1), (0.1, 1), (-0.55, 1.55), (1.5, -0.5), (0.3, 0.3)])
    def test_endpoints_are_fixed(self, p1y: float, p2y: float):
        assert bezier_y(0, p1y, p2y) == 0
        assert bezier_y(1, p1y, p2y) == 1

    def test_linear_midpoint(self):
        assert bezier_y(0.5, 0, 1) == 0.5

    def test_samples_y_directly_from_progress(self):
        # Uses t itself rather than solving x(t) = progress.
        ease = find_preset("Ease").curve
        assert ease.sample_y(0.5) == pytest.approx(0.5375)

    def test_overshoot_curve_leaves_unit_range(self):
        bounce = find_preset("Bounce").curve
        assert bounce.sample_y(0.1) < 0
        assert bounce.sample_y(0.9) > 1


class TestBezierCurve:
    def test_with_point_clamps_and_keeps_other_point(self):
        curve = BezierCurve(0.25, 0.1, 0.25, 1)
        moved = curve.with_point("p1", 1.4, -2)

        assert moved.as_tuple() == (1.0, -0.5, 0.25, 1)
        assert curve.as_tuple() == (0.25, 0.1, 0.25, 1)

    def test_with_coordinate_clamps_per_axis(self):
        curve = BezierCurve(0, 0, 1, 1)
        assert curve.with_coordinate("y1", 2).y1 == 1.5
        assert curve.with_coordinate("x2", -3).x2 == 0

    def test_unknown_coordinate(self):
        with pytest.raises(KeyError):
            BezierCurve(0, 0, 1, 1).with_coordinate("z1", 0)  # type: ignore[arg-type]

    def test_clamped(self):
        curve = BezierCurve(0.68, -0.6, 0.32, 1.6).clamped()
        assert curve.as_tuple() == (0.68, -0.5, 0.32, 1.5)

    def test_css(self):
        assert BezierCurve(0.25, 0.1, 0.25, 1).css() == "cubic-bezier(0.25, 0.10, 0.25, 1.00)"

    def test_from_values(self):
        assert BezierCurve.from_values((0, 0, 1, 1)) == BezierCurve(0.0, 0.0, 1.0, 1.0)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.42", 0.42),
        ("abc", 0.0),
        ("", 0.0),
        ("1.5abc", 1.5),
        (" -.3", -0.3),
        ("1e-1", 0.1),
        ("-", 0.0),
    ],
)
def test_parse_coordinate(text: str, expected: float):
    assert parse_coordinate(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text, expected",
    [("Infinity", math.inf), ("-Infinity", -math.inf), ("+Infinity1", math.inf), ("infinity", 0.0)],
)
def test_parse_coordinate_infinity(text: str, expected: float):
    assert parse_coordinate(text) == expected


class TestPresets:
    def test_preset_order(self):
        assert preset_names() == (
            "Linear",
            "Ease",
            "Ease In",
            "Ease Out",
            "Ease In Out",
            "Bounce",
            "Elastic",
        )

    def test_lookup_is_case_insensitive(self):
        assert find_preset("linear").curve == BezierCurve(0, 0, 1, 1)

    def test_overshoot_presets_are_verbatim(self):
        assert find_preset("Bounce").curve.as_tuple() == (0.68, -0.55, 0.265, 1.55)
        assert find_preset("Elastic").curve.as_tuple() == (0.68, -0.6, 0.32, 1.6)

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="Available"):
            find_preset("Wobble")

    def test_matching_preset(self):
        assert matching_preset(BezierCurve(0.42, 0, 0.58, 1)).name == "Ease In Out"
        assert matching_preset(BezierCurve(0.1, 0.2, 0.3, 0.4)) is None
