"""Application bootstrap for CurveDrawer."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QMessageBox, QStatusBar, QToolBar

from .widgets import Canvas, Controls

logger = logging.getLogger(__name__)

TOOL_DEFINITIONS = (
    ("straightLine", "Line", "Line: press on the start point, release on the end point."),
    ("interpolatedCurve", "Curve", "Curve: click control points, drag from the curve to insert, Enter to finish."),
    ("circle", "Circle", "Circle: drag from the center outwards."),
    ("rectangle", "Rectangle", "Rectangle: drag between opposite corners."),
    ("triangle", "Triangle", "Triangle: click the three vertices."),
    ("star", "Star", "Star: drag from the center outwards."),
)


class Main(QMainWindow):
    """Top-level window wiring together the canvas, controls, and chrome."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("CurveDrawer")

        self.canvas = Canvas()
        self.controls = Controls(self.canvas.settings, self.canvas.set_setting)

        self.setCentralWidget(self.canvas)
        self.addDockWidget(Qt.RightDockWidgetArea, self.controls.dock)

        self._tool_actions: dict[str, QAction] = {}
        self._setup_status_bar()
        self._make_toolbar()

        self.canvas.tool_changed.connect(self._on_tool_changed)
        self.canvas.status_changed.connect(self._coord_label.setText)

        self.resize(1200, 800)
        self._on_tool_changed(self.canvas.controller.tool_name)

    # ------------------------------------------------------------------
    # UI scaffolding
    def _setup_status_bar(self) -> None:
        bar = QStatusBar()
        bar.setSizeGripEnabled(False)
        self.setStatusBar(bar)

        self._mode_label = QLabel("Tool: Line")
        self._mode_label.setToolTip("Active tool. Change using the toolbar on the left.")
        bar.addPermanentWidget(self._mode_label)

        self._coord_label = QLabel(self.canvas.controller.status_text())
        self._coord_label.setToolTip("Pointer position in canvas coordinates.")
        bar.addPermanentWidget(self._coord_label)

    def _make_toolbar(self) -> None:
        toolbar = QToolBar("Tools")
        toolbar.setMovable(False)
        toolbar.setIconSize(QSize(24, 24))
        self.addToolBar(Qt.LeftToolBarArea, toolbar)

        action_group = QActionGroup(self)
        action_group.setExclusive(True)

        for name, text, tip in TOOL_DEFINITIONS:
            action = QAction(text, self)
            action.setCheckable(True)
            action.setActionGroup(action_group)
            action.triggered.connect(lambda checked, n=name: self._activate_tool(n, checked))
            action.setToolTip(tip)
            action.setStatusTip(tip)
            toolbar.addAction(action)
            self._tool_actions[name] = action

        toolbar.addSeparator()

        clear_action = QAction("Clear", self)
        clear_action.setToolTip("Remove every point, line, curve and shape.")
        clear_action.setStatusTip("Remove every point, line, curve and shape.")
        clear_action.triggered.connect(self._confirm_clear)
        toolbar.addAction(clear_action)

    # ------------------------------------------------------------------
    # Event handlers
    def _activate_tool(self, name: str, checked: bool) -> None:
        if not checked:
            return
        self.canvas.set_tool(name)

    def _on_tool_changed(self, name: str) -> None:
        text = {tool: label for tool, label, _tip in TOOL_DEFINITIONS}.get(name, name)
        self._mode_label.setText(f"Tool: {text}")
        self.controls.set_curve_settings_visible(name == "interpolatedCurve")
        action = self._tool_actions.get(name)
        if action:
            blocked = action.blockSignals(True)
            action.setChecked(True)
            action.blockSignals(blocked)

    def _confirm_clear(self) -> None:
        answer = QMessageBox.question(
            self,
            "Clear canvas",
            "Are you sure you want to clear the canvas?",
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        if answer == QMessageBox.Yes:
            self.canvas.clear_scene()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="curvedrawer", description="CurveDrawer vector drawing canvas")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args, qt_args = _build_parser().parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    app = QApplication([sys.argv[0], *qt_args])
    window = Main()
    window.show()
    logger.info("CurveDrawer window ready")
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - GUI entry point
    sys.exit(main())
