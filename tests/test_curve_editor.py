"""Tests for the interactive curve editor."""

import pytest

from animation_studio.curves import BezierCurve, CurveEditor, GraphGeometry, find_preset

EASE = BezierCurve(0.25, 0.1, 0.25, 1)


@pytest.fixture
def changes() -> list[BezierCurve]:
    return []


@pytest.fixture
def editor(changes: list[BezierCurve]) -> CurveEditor:
    return CurveEditor(EASE, on_change=changes.append)


def test_preset_discards_drag(editor: CurveEditor):
    editor.move_point("p1", 0.1, -0.3)
    assert editor.edited.as_tuple() == (0.1, -0.3, 0.25, 1)

    editor.select_preset("Linear")

    assert editor.edited.as_tuple() == (0, 0, 1, 1)
    assert editor.reference == EASE


def test_preset_is_one_commit(editor: CurveEditor, changes):
    editor.select_preset("Bounce")
    assert changes == [find_preset("Bounce").curve]


def test_drag_moves_only_dragged_point(editor: CurveEditor, changes):
    editor.begin_drag("p2")
    assert editor.drag_to(120, 120)
    editor.end_drag()

    assert editor.edited.as_tuple() == (0.25, 0.1, 0.5, 0.5)
    assert editor.dragging is None
    assert len(changes) == 1


def test_drag_clamps_to_bounds(editor: CurveEditor):
    editor.begin_drag("p1")
    editor.drag_to(-50, -200)
    assert editor.edited.point("p1") == (0.0, 1.5)

    editor.drag_to(500, 500)
    assert editor.edited.point("p1") == (1.0, -0.5)


def test_drag_without_grab_is_ignored(editor: CurveEditor, changes):
    assert not editor.drag_to(120, 120)
    assert editor.edited == EASE
    assert changes == []


class TestNumericEntry:
    def test_unparsable_text_becomes_zero(self, editor: CurveEditor):
        editor.set_coordinate("x1", "abc")
        assert editor.edited.x1 == 0

    def test_value_is_clamped(self, editor: CurveEditor):
        editor.set_coordinate("y1", "2")
        editor.set_coordinate("x2", "-1")
        assert editor.edited.as_tuple() == (0.25, 1.5, 0, 1)

    def test_infinity_is_clamped_to_bounds(self, editor: CurveEditor):
        editor.set_coordinate("x1", "Infinity")
        editor.set_coordinate("y1", "-Infinity")
        assert (editor.edited.x1, editor.edited.y1) == (1, -0.5)

    def test_valid_value(self, editor: CurveEditor):
        editor.set_coordinate("y2", "0.8")
        assert editor.edited.y2 == 0.8


class TestProgressDots:
    def test_hidden_at_endpoints(self, editor: CurveEditor):
        assert editor.progress_dots(0) is None
        assert editor.progress_dots(1) is None

    def test_both_curves_sampled_at_same_progress(self, editor: CurveEditor):
        editor.select_preset("Linear")
        reference_y, edited_y = editor.progress_dots(0.5)

        assert reference_y == pytest.approx(0.5375)
        assert edited_y == 0.5


def test_active_preset(editor: CurveEditor):
    assert editor.active_preset == "Ease"
    editor.move_point("p1", 0.3, 0.3)
    assert editor.active_preset is None
    editor.revert()
    assert editor.active_preset == "Ease"


def test_graph_mapping(editor: CurveEditor):
    assert editor.to_graph(0, 0) == (24, 216)
    assert editor.to_graph(1, 1) == (216, 24)
    assert editor.from_graph(120, 120) == (0.5, 0.5)
    assert editor.path(BezierCurve(0, 0, 1, 1)) == "M 24 216 C 24 216, 216 24, 216 24"


def test_editor_shares_graph_geometry():
    geometry = GraphGeometry(size=120, padding=24)
    editor = CurveEditor(EASE, size=120, padding=24)

    assert geometry.inner_size == 72
    assert geometry.to_graph(0.5, 0.5) == (60, 60)
    assert editor.to_graph(0.5, 0.5) == geometry.to_graph(0.5, 0.5)
    assert editor.from_graph(-50, 500) == (0, -0.5)
