"""
Render Commands
===============
Turns a prefix of a step sequence into drawing commands.

Why is this file needed?
------------------------
1. Decoupling: The model never talks to a graphics API. It produces a list of
   four primitive commands (clear, stroke-outline, draw-marker, draw-line) that
   any `DrawingSurface` can execute (QPainter, SVG, ...).
2. Testability: Command lists are plain, comparable dataclasses.

Rendering modes:
    UNIFORM: every step is a 1x1 mark at its target.
    HIGHLIGHTED_LATEST: every step is a small marker at its target; the latest
        step additionally shows its origin, the line towards the chosen corner
        and an emphasized target.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, Union

from chaosgame import config
from chaosgame.model.engine import StepSequence
from chaosgame.model.geometry import Point, Triangle


class RenderMode(StrEnum):
    UNIFORM = "uniform"
    HIGHLIGHTED_LATEST = "highlighted-latest"


@dataclass(frozen=True)
class Style:
    color: str
    width: float = 1.0
    fill: bool = True


OUTLINE_STYLE = Style(config.OUTLINE_COLOR, config.OUTLINE_WIDTH, fill=False)
PIXEL_STYLE = Style(config.POINT_COLOR)
POINT_STYLE = Style(config.POINT_COLOR)
ACTIVE_ORIGIN_STYLE = Style(config.ACTIVE_ORIGIN_COLOR)
ACTIVE_LINE_STYLE = Style(config.ACTIVE_LINE_COLOR, config.ACTIVE_LINE_WIDTH, fill=False)
ACTIVE_TARGET_STYLE = Style(config.ACTIVE_TARGET_COLOR)


# -------------------------------------------------------------------------------
# Commands
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class Clear:
    """Clear the whole drawing surface."""


@dataclass(frozen=True)
class StrokeOutline:
    """Closed outline through the triangle corners."""
    corners: Triangle
    style: Style


@dataclass(frozen=True)
class DrawMarker:
    point: Point
    radius: float
    style: Style
    step: int


@dataclass(frozen=True)
class DrawLine:
    start: Point
    end: Point
    style: Style
    step: int


RenderCommand = Union[Clear, StrokeOutline, DrawMarker, DrawLine]


class DrawingSurface(Protocol):
    """Anything the render commands can be executed against."""

    def clear(self) -> None: ...

    def stroke_outline(self, corners: Triangle, style: Style) -> None: ...

    def draw_marker(self, point: Point, radius: float, style: Style) -> None: ...

    def draw_line(self, start: Point, end: Point, style: Style) -> None: ...


def execute(commands: Iterable[RenderCommand], surface: DrawingSurface) -> None:
    """Replay render commands, in order, against a drawing surface."""
    for cmd in commands:
        match cmd:
            case Clear():
                surface.clear()
            case StrokeOutline(corners=corners, style=style):
                surface.stroke_outline(corners, style)
            case DrawMarker(point=point, radius=radius, style=style):
                surface.draw_marker(point, radius, style)
            case DrawLine(start=start, end=end, style=style):
                surface.draw_line(start, end, style)
            case _:
                raise TypeError(f"Unknown render command: {cmd!r}")


# -------------------------------------------------------------------------------
# Rendering
# -------------------------------------------------------------------------------

def render_background(corners: Triangle) -> list[RenderCommand]:
    """Clear the surface and draw the static triangle outline."""
    return [Clear(), StrokeOutline(corners, OUTLINE_STYLE)]


def _settled_group(sequence: StepSequence, index: int, mode: RenderMode) -> list[RenderCommand]:
    target = sequence[index].target
    if mode == RenderMode.UNIFORM:
        return [DrawMarker(target, config.PIXEL_RADIUS, PIXEL_STYLE, index)]
    return [DrawMarker(target, config.POINT_RADIUS, POINT_STYLE, index)]


def _active_group(sequence: StepSequence, index: int) -> list[RenderCommand]:
    step = sequence[index]
    return [
        DrawMarker(step.origin, config.ACTIVE_ORIGIN_RADIUS, ACTIVE_ORIGIN_STYLE, index),
        DrawLine(step.origin, step.corner, ACTIVE_LINE_STYLE, index),
        DrawMarker(step.target, config.ACTIVE_TARGET_RADIUS, ACTIVE_TARGET_STYLE, index),
    ]


def _check_range(sequence: StepSequence, position: int) -> None:
    if not 0 <= position <= len(sequence):
        raise ValueError(f"Position {position} out of range [0, {len(sequence)}].")


def render_settled(
    sequence: StepSequence,
    start: int,
    stop: int,
    mode: RenderMode = RenderMode.HIGHLIGHTED_LATEST,
) -> list[RenderCommand]:
    """
    Settled markers of steps `start`..`stop-1`.

    Used to extend an already drawn prefix without redrawing it.

    Raises:
        ValueError: If the range is not within [0, len(sequence)].
    """
    _check_range(sequence, start)
    _check_range(sequence, stop)
    if start > stop:
        raise ValueError(f"Empty step range: start {start} > stop {stop}.")

    commands: list[RenderCommand] = []
    for i in range(start, stop):
        commands.extend(_settled_group(sequence, i, mode))
    return commands


def render_active(
    sequence: StepSequence,
    position: int,
    mode: RenderMode = RenderMode.HIGHLIGHTED_LATEST,
) -> list[RenderCommand]:
    """Extra commands highlighting the latest rendered step (empty in uniform mode)."""
    _check_range(sequence, position)
    if mode == RenderMode.UNIFORM or position == 0:
        return []
    return _active_group(sequence, position - 1)


def render_prefix(
    sequence: StepSequence,
    position: int,
    mode: RenderMode = RenderMode.HIGHLIGHTED_LATEST,
) -> list[RenderCommand]:
    """
    Render the first `position` steps of a sequence.

    Args:
        sequence: The generated steps.
        position: Number of steps to render, 0 <= position <= len(sequence).
        mode: Visual encoding of the steps.

    Returns:
        Clear, outline, then one draw group per step in ascending step order.

    Raises:
        ValueError: If `position` is out of range. Positions are never clamped here.
    """
    _check_range(sequence, position)
    commands = render_background(sequence.corners)
    commands.extend(render_settled(sequence, 0, position, mode))
    commands.extend(render_active(sequence, position, mode))
    return commands
