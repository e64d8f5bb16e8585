"""
Chaos Game Engine
=================
Generates the ordered sequence of chaos game steps for a starting point.

Each step moves the running point halfway towards a corner of the triangle
picked uniformly at random. The whole sequence is generated once per accepted
starting point and never mutated afterwards.

Classes:
    Step: One iteration of the recurrence.
    StepSequence: The immutable, ordered list of steps.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
import logging
from typing import overload

import numpy as np

from chaosgame.model.geometry import Point, Triangle, is_inside_triangle

logger = logging.getLogger(__name__)

# (corners, n) -> n corners, in the order they are applied
CornerSelector = Callable[[Triangle, int], Iterable[Point]]


@dataclass(frozen=True)
class Step:
    """One chaos game iteration: `target` is the midpoint of `origin` and `corner`."""
    origin: Point
    corner: Point
    target: Point


class StepSequence(Sequence[Step]):
    """
    Ordered, fixed-length sequence of steps generated against a triangle.

    Step i's origin equals step i-1's target; step 0's origin is the start point.
    """

    def __init__(self, start: Point, corners: Triangle, steps: Iterable[Step]) -> None:
        self._start = start
        self._corners = corners
        self._steps: tuple[Step, ...] = tuple(steps)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(start={self._start}, n={len(self._steps)})"

    def __len__(self) -> int:
        return len(self._steps)

    @overload
    def __getitem__(self, index: int) -> Step: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Step, ...]: ...

    def __getitem__(self, index):
        return self._steps[index]

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    @property
    def start(self) -> Point:
        """The user-chosen starting point."""
        return self._start

    @property
    def corners(self) -> Triangle:
        """The triangle the sequence was generated against."""
        return self._corners


def random_corners(
    corners: Triangle,
    n: int,
    rng: np.random.Generator | None = None,
) -> list[Point]:
    """
    Draw `n` corners uniformly, independently and with replacement.

    Args:
        corners: The three triangle corners.
        n: Number of corners to draw.
        rng: Random generator to draw from. A fresh, unseeded one is used if omitted.
    """
    if rng is None:
        rng = np.random.default_rng()
    indices = rng.integers(0, len(corners), size=n)
    return [corners[i] for i in indices]


def generate_sequence(
    start: Point,
    n: int,
    corners: Triangle,
    select: CornerSelector = random_corners,
) -> StepSequence:
    """
    Generate the chaos game step sequence from a starting point.

    Args:
        start: Starting point; must lie inside the triangle.
        n: Number of steps to generate.
        corners: The three triangle corners.
        select: Supplies the corner used by each step.

    Returns:
        StepSequence of exactly `n` steps.

    Raises:
        ValueError: If `n` is negative, `start` lies outside the triangle or the
            selector yields a point that is not a corner.
    """
    if n < 0:
        raise ValueError(f"Number of steps must be >= 0, got {n}.")
    if not is_inside_triangle(start, *corners):
        raise ValueError(f"Start point ({start.x}, {start.y}) lies outside the triangle.")

    steps: list[Step] = []
    current = start
    for corner in select(corners, n):
        if len(steps) == n:
            break
        if corner not in corners:
            raise ValueError(f"Selected point {corner} is not a triangle corner.")
        target = current.midpoint(corner)
        steps.append(Step(origin=current, corner=corner, target=target))
        current = target

    if len(steps) != n:
        raise ValueError(f"Corner selector yielded {len(steps)} corners, expected {n}.")

    logger.info(f"Generated {n} steps from ({start.x:.1f}, {start.y:.1f}).")
    return StepSequence(start, corners, steps)
