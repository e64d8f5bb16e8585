"""
Playback Control Panel
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSlider, QGroupBox, QFormLayout, QSpinBox,
    QComboBox, QStyle,
)

from chaosgame import config
from chaosgame.app.state import Store
from chaosgame.app.ui.panels.base import BasePanel
from chaosgame.model.playback import PlaybackState
from chaosgame.model.render import RenderMode

logger = logging.getLogger(__name__)

MODE_LABELS = {
    RenderMode.HIGHLIGHTED_LATEST: "Highlight latest step",
    RenderMode.UNIFORM: "Uniform dots",
}


class PlaybackPanel(BasePanel):
    """
    Left-side controls: sequence settings, play/pause and the step timeline.

    The timeline and the play button stay disabled until a sequence exists.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        layout = QVBoxLayout(self)

        # --- Sequence Settings ---
        grp_settings = QGroupBox(self.tr("Sequence"))
        form_settings = QFormLayout(grp_settings)

        self.spin_iterations = QSpinBox()
        self.spin_iterations.setRange(1, store.controller.max_iterations)
        self.spin_iterations.setSingleStep(1000)
        self.spin_iterations.setValue(min(config.DEFAULT_ITERATIONS, store.controller.max_iterations))
        self.spin_iterations.setToolTip(self.tr("Number of steps generated for the next start point"))
        form_settings.addRow(self.tr("Iterations:"), self.spin_iterations)

        self.combo_mode = QComboBox()
        for mode, label in MODE_LABELS.items():
            self.combo_mode.addItem(self.tr(label), userData=mode)
        self.combo_mode.setCurrentIndex(self.combo_mode.findData(store.render_mode))
        self.combo_mode.currentIndexChanged.connect(self.on_mode_changed)
        form_settings.addRow(self.tr("Rendering:"), self.combo_mode)

        self.lbl_hint = QLabel(self.tr("Click inside the triangle to pick a starting point."))
        self.lbl_hint.setWordWrap(True)
        form_settings.addRow(self.lbl_hint)

        layout.addWidget(grp_settings)

        # --- Playback ---
        grp_play = QGroupBox(self.tr("Playback"))
        l_play = QVBoxLayout(grp_play)

        self.lbl_position = QLabel(self.tr("Step: -"))
        self.lbl_position.setAlignment(Qt.AlignmentFlag.AlignCenter)
        l_play.addWidget(self.lbl_position)

        hbox_play = QHBoxLayout()

        self.btn_play = QPushButton()
        self.btn_play.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaPlay))
        self.btn_play.clicked.connect(self.on_play_clicked)
        self.btn_play.setEnabled(False)
        hbox_play.addWidget(self.btn_play)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, 0)
        self.slider.setEnabled(False)
        self.slider.valueChanged.connect(self.on_slider_changed)
        hbox_play.addWidget(self.slider)

        self.btn_end = QPushButton()
        self.btn_end.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaSkipForward))
        self.btn_end.setToolTip(self.tr("Show all steps"))
        self.btn_end.clicked.connect(self.on_skip_to_end)
        self.btn_end.setEnabled(False)
        hbox_play.addWidget(self.btn_end)

        l_play.addLayout(hbox_play)

        # Tick interval
        hbox_speed = QHBoxLayout()
        hbox_speed.addWidget(QLabel(self.tr("Step interval:")))
        self.spin_interval = QSpinBox()
        self.spin_interval.setRange(1, config.MAX_TICK_INTERVAL_MS)
        self.spin_interval.setValue(store.timer_task.interval)
        self.spin_interval.setSuffix(" ms")
        self.spin_interval.valueChanged.connect(self.on_interval_changed)
        hbox_speed.addWidget(self.spin_interval)
        hbox_speed.addStretch()
        l_play.addLayout(hbox_speed)

        layout.addWidget(grp_play)
        layout.addStretch()

        # --- Store wiring ---
        self.store.position_changed.connect(self.on_position_changed)
        self.store.playback_state_changed.connect(self.on_state_changed)
        self.store.controls_enabled_changed.connect(self.set_controls_enabled)

    def iterations(self) -> int:
        return self.spin_iterations.value()

    @Slot(bool)
    def set_controls_enabled(self, enabled: bool) -> None:
        self.btn_play.setEnabled(enabled)
        self.btn_end.setEnabled(enabled)
        self.slider.setEnabled(enabled)

    @Slot(int)
    def on_mode_changed(self, index: int) -> None:
        mode = self.combo_mode.itemData(index)
        self.store.set_render_mode(RenderMode(mode))

    @Slot(int)
    def on_interval_changed(self, value: int) -> None:
        self.store.timer_task.set_interval(value)

    @Slot()
    def on_play_clicked(self) -> None:
        self.store.controller.toggle()

    @Slot(int)
    def on_slider_changed(self, value: int) -> None:
        self.store.controller.scrub_to(value)

    @Slot()
    def on_skip_to_end(self) -> None:
        self.store.controller.pause()
        self.store.controller.scrub_to(self.store.controller.length)

    @Slot(int, int)
    def on_position_changed(self, position: int, length: int) -> None:
        self.slider.blockSignals(True)
        try:
            self.slider.setRange(0, length)
            self.slider.setValue(position)
        finally:
            self.slider.blockSignals(False)
        self.lbl_position.setText(self.tr("Step: {position} / {length}").format(position=position, length=length))

    @Slot(object)
    def on_state_changed(self, state: PlaybackState) -> None:
        icon = QStyle.StandardPixmap.SP_MediaPause if state is PlaybackState.PLAYING else QStyle.StandardPixmap.SP_MediaPlay
        self.btn_play.setIcon(self.style().standardIcon(icon))
        # The iteration count only applies to the next generated sequence
        self.spin_iterations.setEnabled(state is not PlaybackState.PLAYING)
