from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QHBoxLayout

from chaosgame.app.state import Store
from chaosgame.app.ui.canvas import ChaosCanvas
from chaosgame.app.ui.panels.playback import PlaybackPanel


class WorkArea(QWidget):
    """The main work area with a splitter between the control panel and the canvas."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        h = QHBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        h.addWidget(split, 1)

        self.panel = PlaybackPanel(store, split)

        # Keep the fixed size canvas centered in its half of the splitter
        canvas_holder = QWidget(split)
        holder_layout = QHBoxLayout(canvas_holder)
        self.canvas = ChaosCanvas(store.width, store.height, canvas_holder)
        holder_layout.addWidget(self.canvas, 0, Qt.AlignmentFlag.AlignCenter)

        split.addWidget(self.panel)
        split.addWidget(canvas_holder)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
