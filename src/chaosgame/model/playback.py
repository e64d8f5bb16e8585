"""
Playback State (Data Model)
===========================
This module defines the session that owns a generated step sequence and the
controller driving scrubbing and timed playback over it.

Why is this file needed?
------------------------
1. State Management: The sequence, the playback position and the playing flag
   live in one owned `PlaybackSession` that is replaced wholesale whenever a new
   start point is accepted.
2. Scheduling: Timed playback goes through a `RepeatingTask`, so the model does
   not depend on Qt. The GUI plugs in a QTimer backed task.
3. Decoupling: Views read from the controller and are notified through a
   `PlaybackListener`; only the controller mutates the session.

Classes:
    PlaybackState: Empty / Paused / Playing.
    StartResult: Outcome of a start point submission.
    PlaybackSession: Sequence + position + playing flag.
    PlaybackController: Start, pause, scrub and tick logic.
"""
from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
import logging
from typing import Protocol

from chaosgame.model.engine import CornerSelector, StepSequence, generate_sequence, random_corners
from chaosgame.model.geometry import Point, Triangle, is_inside_triangle

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    EMPTY = auto()
    PAUSED = auto()
    PLAYING = auto()

    @property
    def has_sequence(self) -> bool:
        """Playback controls are only usable once a sequence exists."""
        return self is not PlaybackState.EMPTY


class StartResult(Enum):
    GENERATED = auto()
    REJECTED = auto()  # start point outside the triangle
    DECLINED = auto()  # user declined to replace the existing sequence


class RepeatingTask(Protocol):
    """
    A cancellable task calling `callback` at a fixed interval.

    `stop()` must take effect immediately (no further callbacks) and may be
    called any number of times.
    """

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...

    @property
    def is_active(self) -> bool: ...


class PlaybackListener(Protocol):
    def on_sequence_changed(self, sequence: StepSequence) -> None: ...

    def on_position_changed(self, position: int, length: int) -> None: ...

    def on_state_changed(self, state: PlaybackState) -> None: ...


class PlaybackSession:
    """Owns one step sequence and the number of steps currently rendered."""

    def __init__(self, sequence: StepSequence) -> None:
        self.sequence = sequence
        self.position: int = 0
        self.playing: bool = False

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(position={self.position}, "
                f"length={self.length}, playing={self.playing})")

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def at_end(self) -> bool:
        return self.position >= self.length

    def seek(self, position: int) -> None:
        if not 0 <= position <= self.length:
            raise ValueError(f"Position {position} out of range [0, {self.length}].")
        self.position = position

    def advance(self) -> bool:
        """Move one step forward. Returns False if already at the end."""
        if self.at_end:
            return False
        self.position += 1
        return True


class PlaybackController:
    """
    Drives one session at a time.

    The controller is the only writer of the session: scrub requests and timer
    ticks both end up here. Any pending tick is cancelled before the session is
    paused or replaced.
    """

    def __init__(
        self,
        corners: Triangle,
        task: RepeatingTask,
        *,
        max_iterations: int,
        listener: PlaybackListener | None = None,
        select: CornerSelector = random_corners,
    ) -> None:
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}.")
        self.corners = corners
        self.max_iterations = max_iterations
        self.listener = listener
        self._task = task
        self._select = select
        self._session: PlaybackSession | None = None

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    @property
    def session(self) -> PlaybackSession | None:
        return self._session

    @property
    def state(self) -> PlaybackState:
        if self._session is None:
            return PlaybackState.EMPTY
        return PlaybackState.PLAYING if self._session.playing else PlaybackState.PAUSED

    @property
    def position(self) -> int:
        return 0 if self._session is None else self._session.position

    @property
    def length(self) -> int:
        return 0 if self._session is None else self._session.length

    def accepts(self, point: Point) -> bool:
        """Check whether a start point lies inside the triangle."""
        return is_inside_triangle(point, *self.corners)

    # ------------------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------------------

    def submit_start(
        self,
        point: Point,
        n: int,
        confirm: Callable[[], bool] | None = None,
    ) -> StartResult:
        """
        Generate a new sequence from a user chosen start point.

        Args:
            point: The start point.
            n: Requested number of steps; clamped to [1, max_iterations].
            confirm: Asked before an existing sequence is replaced.
                Without it, replacement is refused.

        Returns:
            GENERATED if a new session was created, REJECTED if the point lies
            outside the triangle, DECLINED if replacement was not confirmed.
            The existing state is untouched unless the result is GENERATED.
        """
        if not self.accepts(point):
            logger.info(f"Rejected start point ({point.x:.1f}, {point.y:.1f}): outside the triangle.")
            return StartResult.REJECTED

        if self._session is not None and (confirm is None or not confirm()):
            logger.info("Regeneration declined; keeping the current sequence.")
            return StartResult.DECLINED

        n = max(1, min(n, self.max_iterations))

        # Cancel before the old session goes away so no stale tick can land on it
        self._task.stop()
        sequence = generate_sequence(point, n, self.corners, self._select)
        self._session = PlaybackSession(sequence)

        self._notify_sequence()
        self._notify_position()
        self._notify_state()
        return StartResult.GENERATED

    def play(self) -> None:
        """Start timed playback. No-op if empty or already playing."""
        session = self._session
        if session is None or session.playing:
            return

        if session.at_end:
            session.seek(0)
            self._notify_position()

        session.playing = True
        self._task.start(self._on_tick)
        logger.debug(f"Playback started at step {session.position}/{session.length}.")
        self._notify_state()

    def pause(self) -> None:
        """Stop timed playback. No-op if not playing."""
        session = self._session
        if session is None or not session.playing:
            return
        self._task.stop()
        session.playing = False
        logger.debug(f"Playback paused at step {session.position}/{session.length}.")
        self._notify_state()

    def toggle(self) -> None:
        if self.state is PlaybackState.PLAYING:
            self.pause()
        else:
            self.play()

    def scrub_to(self, position: int) -> None:
        """Jump to a user requested position, clamped to [0, N]."""
        session = self._session
        if session is None:
            return
        position = max(0, min(position, session.length))
        if position == session.position:
            return
        session.seek(position)
        self._notify_position()

    def shutdown(self) -> None:
        """Stop any pending tick. Safe to call repeatedly."""
        self._task.stop()
        if self._session is not None:
            self._session.playing = False

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_tick(self) -> None:
        session = self._session
        if session is None or not session.playing:
            self._task.stop()
            return

        if session.advance():
            self._notify_position()

        if session.at_end:
            self._task.stop()
            session.playing = False
            logger.info(f"Playback reached the last step ({session.length}).")
            self._notify_state()

    def _notify_sequence(self) -> None:
        if self.listener is not None and self._session is not None:
            self.listener.on_sequence_changed(self._session.sequence)

    def _notify_position(self) -> None:
        if self.listener is not None:
            self.listener.on_position_changed(self.position, self.length)

    def _notify_state(self) -> None:
        if self.listener is not None:
            self.listener.on_state_changed(self.state)
