"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the control panel and the
canvas.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects canvas clicks, store signals and global actions
   (Export, Quit) to the playback controller and the dialogs.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QMainWindow, QMessageBox, QFileDialog

from chaosgame.app.application import VISIBLE_APP_NAME
from chaosgame.app.state import Store
from chaosgame.app.ui.workarea import WorkArea
from chaosgame.model.engine import StepSequence
from chaosgame.model.geometry import Point
from chaosgame.model.playback import StartResult
from chaosgame.model.render import RenderMode
from chaosgame.model.svg import export_svg

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)

        # Global store
        self.store = store or Store(parent=self)

        self.work_area = WorkArea(self.store, self)
        self.setCentralWidget(self.work_area)
        self.canvas = self.work_area.canvas
        self.panel = self.work_area.panel

        # --- SIGNAL CONNECTIONS ---
        # 1. Canvas click -> new sequence
        self.canvas.point_clicked.connect(self.on_point_clicked)

        # 2. Store -> canvas
        self.store.sequence_changed.connect(self.on_sequence_changed)
        self.store.position_changed.connect(self.on_position_changed)
        self.store.render_mode_changed.connect(self.on_render_mode_changed)
        self.store.controls_enabled_changed.connect(self.on_controls_enabled_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.statusBar().showMessage(self.tr("Click inside the triangle to start."))

    def _create_actions(self) -> None:
        self.act_export_svg = QAction(self.tr("Export SVG..."), self)
        self.act_export_svg.setShortcut("Ctrl+E")
        self.act_export_svg.setEnabled(False)
        self.act_export_svg.triggered.connect(self.on_export_svg)

        self.act_play = QAction(self.tr("Play / Pause"), self)
        self.act_play.setShortcut("Space")
        self.act_play.triggered.connect(self.on_toggle_play)

        self.act_exit = QAction(self.tr("Quit"), self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_file = self.menuBar().addMenu(self.tr("&File"))
        menu_file.addAction(self.act_export_svg)
        menu_file.addSeparator()
        menu_file.addAction(self.act_exit)

        menu_playback = self.menuBar().addMenu(self.tr("&Playback"))
        menu_playback.addAction(self.act_play)

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    @Slot(float, float)
    def on_point_clicked(self, x: float, y: float) -> None:
        point = Point(x, y)
        result = self.store.controller.submit_start(
            point, self.panel.iterations(), confirm=self._confirm_regenerate
        )

        match result:
            case StartResult.REJECTED:
                QMessageBox.warning(
                    self,
                    self.tr("Outside the triangle"),
                    self.tr("You clicked outside the triangle! Try again."),
                )
            case StartResult.GENERATED:
                self.statusBar().showMessage(
                    self.tr("Generated {n} steps from ({x:.0f}, {y:.0f}).").format(
                        n=self.store.controller.length, x=x, y=y
                    )
                )
            case StartResult.DECLINED:
                self.statusBar().showMessage(self.tr("Kept the current sequence."))

    def _confirm_regenerate(self) -> bool:
        reply = QMessageBox.question(
            self,
            self.tr("Replace sequence?"),
            self.tr("A sequence already exists. Discard it and start from the new point?"),
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    @Slot()
    def on_toggle_play(self) -> None:
        self.store.controller.toggle()

    @Slot(object)
    def on_sequence_changed(self, sequence: StepSequence) -> None:
        self.canvas.show_prefix(sequence, 0, self.store.render_mode)

    @Slot(int, int)
    def on_position_changed(self, position: int, length: int) -> None:
        session = self.store.controller.session
        if session is None:
            return
        self.canvas.show_prefix(session.sequence, position, self.store.render_mode)

    @Slot(object)
    def on_render_mode_changed(self, mode: RenderMode) -> None:
        session = self.store.controller.session
        if session is None:
            return
        self.canvas.show_prefix(session.sequence, session.position, mode)

    @Slot(bool)
    def on_controls_enabled_changed(self, enabled: bool) -> None:
        self.act_export_svg.setEnabled(enabled)

    @Slot()
    def on_export_svg(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Export SVG"),
            "chaos_game.svg",
            self.tr("SVG Image (*.svg);;All Files (*)"),
        )
        if not path:
            return

        try:
            export_svg(
                self.canvas.current_commands(),
                path,
                self.store.width,
                self.store.height,
                title=VISIBLE_APP_NAME,
            )
            self.statusBar().showMessage(self.tr("Exported to {path}").format(path=path))
        except OSError as e:
            logger.exception("Failed to export SVG")
            QMessageBox.critical(self, self.tr("Export Error"), str(e))

    def closeEvent(self, event: QCloseEvent, /) -> None:
        """Stop playback before the window goes away."""
        self.store.controller.shutdown()
        event.accept()
