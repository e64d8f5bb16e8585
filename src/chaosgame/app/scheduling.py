from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer

from chaosgame import config


def clamp_interval(interval_ms: int) -> int:
    """Limit a tick interval to the range offered by the playback controls."""
    return max(1, min(interval_ms, config.MAX_TICK_INTERVAL_MS))


class TimerTask(QObject):
    """QTimer backed `RepeatingTask` running on the Qt event loop."""

    def __init__(self, interval_ms: int = config.TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._callback: Callable[[], None] | None = None

        self._timer = QTimer(self)
        self._timer.setInterval(clamp_interval(interval_ms))
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def interval(self) -> int:
        return self._timer.interval()

    def set_interval(self, interval_ms: int) -> None:
        """Change the tick interval; an active timer keeps running at the new rate."""
        self._timer.setInterval(clamp_interval(interval_ms))

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        # A timeout already queued when stop() ran finds no callback
        if self._callback is not None:
            self._callback()
