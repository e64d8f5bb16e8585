"""
Tests for chaosgame.model.render
"""
import pytest

from chaosgame import config
from chaosgame.model.engine import generate_sequence
from chaosgame.model.geometry import Point
from chaosgame.model.render import (
    ACTIVE_LINE_STYLE,
    ACTIVE_ORIGIN_STYLE,
    ACTIVE_TARGET_STYLE,
    OUTLINE_STYLE,
    Clear,
    DrawLine,
    DrawMarker,
    RenderMode,
    StrokeOutline,
    execute,
    render_active,
    render_background,
    render_prefix,
    render_settled,
)

from helpers.manual_task import fixed_corners


@pytest.fixture
def sequence(corners, top):
    return generate_sequence(top, 3, corners, fixed_corners([1, 2, 0]))


def _markers(commands):
    return [c for c in commands if isinstance(c, DrawMarker)]


class TestRenderPrefix:
    def test_position_zero_is_background_only(self, sequence, corners):
        for mode in RenderMode:
            assert render_prefix(sequence, 0, mode) == [Clear(), StrokeOutline(corners, OUTLINE_STYLE)]

    def test_starts_with_clear_and_outline(self, sequence):
        commands = render_prefix(sequence, 2)
        assert isinstance(commands[0], Clear)
        assert isinstance(commands[1], StrokeOutline)

    def test_uniform_one_group_per_step(self, sequence):
        commands = render_prefix(sequence, 3, RenderMode.UNIFORM)
        markers = _markers(commands)
        assert len(commands) == 2 + 3
        assert [m.step for m in markers] == [0, 1, 2]
        assert [m.point for m in markers] == [s.target for s in sequence]
        assert all(m.radius == config.PIXEL_RADIUS for m in markers)

    def test_uniform_has_no_lines(self, sequence):
        assert not any(isinstance(c, DrawLine) for c in render_prefix(sequence, 3, RenderMode.UNIFORM))

    def test_groups_in_ascending_order(self, corners, centroid):
        seq = generate_sequence(centroid, 50, corners)
        steps = [c.step for c in render_prefix(seq, 50) if isinstance(c, (DrawMarker, DrawLine))]
        assert steps == sorted(steps)

    def test_highlighted_latest(self, sequence):
        commands = render_prefix(sequence, 2, RenderMode.HIGHLIGHTED_LATEST)
        latest = sequence[1]
        assert commands[-3:] == [
            DrawMarker(latest.origin, config.ACTIVE_ORIGIN_RADIUS, ACTIVE_ORIGIN_STYLE, 1),
            DrawLine(latest.origin, latest.corner, ACTIVE_LINE_STYLE, 1),
            DrawMarker(latest.target, config.ACTIVE_TARGET_RADIUS, ACTIVE_TARGET_STYLE, 1),
        ]

    def test_highlighted_latest_settled_points(self, sequence):
        commands = render_prefix(sequence, 2, RenderMode.HIGHLIGHTED_LATEST)
        settled = commands[2:4]
        assert [m.point for m in settled] == [sequence[0].target, sequence[1].target]
        assert all(m.radius == config.POINT_RADIUS for m in settled)

    def test_only_one_step_highlighted(self, sequence):
        commands = render_prefix(sequence, 3)
        assert sum(isinstance(c, DrawLine) for c in commands) == 1

    def test_idempotent(self, sequence):
        assert render_prefix(sequence, 2) == render_prefix(sequence, 2)

    def test_mode_as_plain_string(self, sequence):
        assert render_prefix(sequence, 3, "uniform") == render_prefix(sequence, 3, RenderMode.UNIFORM)

    @pytest.mark.parametrize("position", [-1, 4])
    def test_out_of_range(self, sequence, position):
        with pytest.raises(ValueError):
            render_prefix(sequence, position)

    def test_prefix_equals_composition(self, sequence, corners):
        mode = RenderMode.HIGHLIGHTED_LATEST
        composed = (
            render_background(corners)
            + render_settled(sequence, 0, 1, mode)
            + render_settled(sequence, 1, 2, mode)
            + render_active(sequence, 2, mode)
        )
        assert composed == render_prefix(sequence, 2, mode)


class TestRenderParts:
    def test_settled_range(self, sequence):
        assert [m.step for m in render_settled(sequence, 1, 3)] == [1, 2]
        assert render_settled(sequence, 2, 2) == []

    def test_settled_reversed_range(self, sequence):
        with pytest.raises(ValueError):
            render_settled(sequence, 2, 1)

    def test_active_uniform_is_empty(self, sequence):
        assert render_active(sequence, 2, RenderMode.UNIFORM) == []

    def test_active_at_zero_is_empty(self, sequence):
        assert render_active(sequence, 0) == []


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append("clear")

    def stroke_outline(self, corners, style):
        self.calls.append("outline")

    def draw_marker(self, point, radius, style):
        self.calls.append(("marker", point))

    def draw_line(self, start, end, style):
        self.calls.append(("line", start, end))


class TestExecute:
    def test_replays_in_order(self, sequence):
        surface = RecordingSurface()
        execute(render_prefix(sequence, 1), surface)
        step = sequence[0]
        assert surface.calls == [
            "clear",
            "outline",
            ("marker", step.target),
            ("marker", step.origin),
            ("line", step.origin, step.corner),
            ("marker", step.target),
        ]

    def test_unknown_command(self):
        with pytest.raises(TypeError):
            execute([Point(1, 1)], RecordingSurface())
