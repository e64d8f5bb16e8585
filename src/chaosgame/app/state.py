from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from chaosgame import config
from chaosgame.app.scheduling import TimerTask
from chaosgame.model.engine import StepSequence
from chaosgame.model.geometry import triangle_corners
from chaosgame.model.playback import PlaybackController, PlaybackState
from chaosgame.model.render import RenderMode


class Store(QObject):
    """Central state store with signals for panel/canvas sync."""
    sequence_changed = Signal(object)
    position_changed = Signal(int, int)
    playback_state_changed = Signal(object)
    controls_enabled_changed = Signal(bool)
    render_mode_changed = Signal(object)

    def __init__(
        self,
        *,
        width: int = config.CANVAS_WIDTH,
        height: int = config.CANVAS_HEIGHT,
        max_iterations: int = config.MAX_ITERATIONS,
        interval_ms: int = config.TICK_INTERVAL_MS,
        render_mode: RenderMode = RenderMode.HIGHLIGHTED_LATEST,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.width = width
        self.height = height
        self._render_mode = render_mode
        self._controls_enabled = False

        self.timer_task = TimerTask(interval_ms, parent=self)
        self.controller = PlaybackController(
            triangle_corners(width, height),
            self.timer_task,
            max_iterations=max_iterations,
            listener=self,
        )

    @property
    def render_mode(self) -> RenderMode:
        return self._render_mode

    def set_render_mode(self, mode: RenderMode) -> None:
        if mode != self._render_mode:
            self._render_mode = mode
            self.render_mode_changed.emit(mode)

    def controls_enabled(self) -> bool:
        return self._controls_enabled

    # ---- PlaybackListener ----

    def on_sequence_changed(self, sequence: StepSequence) -> None:
        self.sequence_changed.emit(sequence)

    def on_position_changed(self, position: int, length: int) -> None:
        self.position_changed.emit(position, length)

    def on_state_changed(self, state: PlaybackState) -> None:
        self.playback_state_changed.emit(state)
        if state.has_sequence != self._controls_enabled:
            self._controls_enabled = state.has_sequence
            self.controls_enabled_changed.emit(self._controls_enabled)
