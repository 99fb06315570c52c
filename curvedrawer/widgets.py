"""Qt widgets for the CurveDrawer UI."""
from __future__ import annotations

from typing import Callable, Dict

from PySide6.QtCore import QSize, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QDockWidget,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from .controller import InteractionController
from .qt_surface import QPainterSurface
from .settings import Settings


class Canvas(QWidget):
    """Drawing surface forwarding pointer events to the interaction controller."""

    status_changed = Signal(str)
    tool_changed = Signal(str)

    def __init__(self, controller: InteractionController | None = None):
        super().__init__()
        self.setObjectName("CurveDrawerCanvas")
        self.setMinimumSize(QSize(640, 480))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)
        self.setToolTip(
            "Canvas: left-click with the active tool.\n"
            "Curve: click control points, click near the curve and drag to insert, Enter to finish."
        )
        self.controller = controller or InteractionController()

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(16)
        self._frame_timer.timeout.connect(self.update)
        self._frame_timer.start()

    # ------------------------------------------------------------------
    # Controller passthroughs
    def settings(self) -> Settings:
        return self.controller.settings

    def set_tool(self, name: str) -> None:
        self.controller.switch_tool(name)
        self.tool_changed.emit(name)
        self.setFocus()
        self.update()

    def set_setting(self, key: str, value) -> None:
        self.controller.update_settings(**{key: value})
        self.update()

    def clear_scene(self) -> None:
        self.controller.clear_scene()
        self.update()

    def _pos(self, event):
        position = event.position()
        return (position.x(), position.y())

    # ------------------------------------------------------------------
    # Qt events
    def paintEvent(self, event):  # pragma: no cover - GUI entry point
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        surface = QPainterSurface(painter, self.rect, background=QColor(15, 17, 26))
        self.controller.render(surface)
        painter.end()

    def mousePressEvent(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        self.controller.pointer_down(self._pos(event))
        self.update()

    def mouseMoveEvent(self, event):  # pragma: no cover - GUI entry point
        self.controller.pointer_move(self._pos(event))
        self.status_changed.emit(self.controller.status_text())

    def mouseReleaseEvent(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        self.controller.pointer_up(self._pos(event))
        self.update()

    def keyPressEvent(self, event):  # pragma: no cover - GUI entry point
        key = event.key()
        if key in (Qt.Key_Return, Qt.Key_Enter):
            self.controller.finish_curve()
            self.update()
        elif key == Qt.Key_Escape:
            # re-selecting the active tool persists an open curve before resetting
            self.controller.switch_tool(self.controller.tool_name)
            self.update()
        else:
            super().keyPressEvent(event)

    def contextMenuEvent(self, event):  # pragma: no cover - GUI entry point
        event.accept()


class Controls:
    """Docked settings panel that feeds the canvas."""

    _DESCRIPTIONS = {
        "stroke_width": "Stroke width for new lines, curves and shapes.",
        "point_size": "Size of the point markers.",
        "snap_distance": "How close the cursor must be to snap onto an existing point.",
        "curve_radius": "Radius of the influence circles drawn around curve control points.",
        "curve_tension": "Catmull-Rom tension. Changes reshape the curve being drawn.",
    }

    # key, label, slider min, slider max, slider scale
    _SLIDERS = (
        ("stroke_width", "Stroke width", 1, 20, 1.0),
        ("point_size", "Point size", 2, 20, 1.0),
        ("snap_distance", "Snap distance", 0, 50, 1.0),
        ("curve_radius", "Influence radius", 10, 200, 1.0),
        ("curve_tension", "Tension", 0, 100, 100.0),
    )

    def __init__(self, get_settings: Callable[[], Settings], set_setting_cb: Callable[[str, object], None]):
        self._get_settings = get_settings
        self._set_setting_cb = set_setting_cb
        self.dock = QDockWidget("Settings")
        self.dock.setObjectName("CurveDrawerSettingsDock")
        self.dock.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)
        host = QWidget()
        layout = QVBoxLayout(host)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        self._value_labels: Dict[str, QLabel] = {}
        self._sliders: Dict[str, QSlider] = {}
        settings = self._get_settings()
        for key, label_text, mn, mx, scale in self._SLIDERS:
            self._add_slider(layout, key, label_text, mn, mx, scale, float(getattr(settings, key)))

        self._color_button = QPushButton("Stroke color")
        self._color_button.setToolTip("Pick the stroke color for new entities.")
        self._color_button.clicked.connect(self._pick_color)
        layout.addWidget(self._color_button)
        self._sync_color_button(settings.stroke_color)

        self._influence_check = QCheckBox("Show influence radius")
        self._influence_check.setToolTip(self._DESCRIPTIONS["curve_radius"])
        self._influence_check.setChecked(settings.show_influence_radius)
        self._influence_check.stateChanged.connect(
            lambda state: self._set_setting_cb("show_influence_radius", bool(state))
        )
        layout.addWidget(self._influence_check)

        layout.addStretch(1)
        self.dock.setWidget(host)

    def _add_slider(
        self, layout: QVBoxLayout, key: str, label_text: str, mn: int, mx: int, scale: float, value: float
    ) -> None:
        label = QLabel(self._format(label_text, value, scale))
        slider = QSlider(Qt.Horizontal)
        slider.setRange(mn, mx)
        slider.setValue(int(round(value * scale)))
        slider.setSingleStep(1)
        slider.valueChanged.connect(
            lambda v, k=key, lbl=label, txt=label_text, s=scale: self._on_value_changed(k, lbl, txt, v, s)
        )
        desc = self._DESCRIPTIONS.get(key, "")
        if desc:
            label.setToolTip(desc)
            slider.setToolTip(desc + " Drag to adjust.")
        layout.addWidget(label)
        layout.addWidget(slider)
        self._value_labels[key] = label
        self._sliders[key] = slider

    def _format(self, label_text: str, value: float, scale: float) -> str:
        if scale == 1.0:
            return f"{label_text}: {value:.0f}"
        return f"{label_text}: {value:.2f}"

    def _on_value_changed(self, key: str, label: QLabel, label_text: str, value: int, scale: float) -> None:
        real = value / scale
        label.setText(self._format(label_text, real, scale))
        self._set_setting_cb(key, real)

    def _pick_color(self) -> None:  # pragma: no cover - GUI entry point
        current = QColor(self._get_settings().stroke_color)
        color = QColorDialog.getColor(current, self.dock, "Stroke color")
        if not color.isValid():
            return
        self._set_setting_cb("stroke_color", color.name())
        self._sync_color_button(color.name())

    def _sync_color_button(self, value: str) -> None:
        self._color_button.setStyleSheet(f"QPushButton {{ border-left: 14px solid {value}; }}")

    def set_curve_settings_visible(self, visible: bool) -> None:
        """Curve-only controls are shown while the curve tool is active."""
        for key in ("curve_radius", "curve_tension"):
            self._value_labels[key].setVisible(visible)
            self._sliders[key].setVisible(visible)
        self._influence_check.setVisible(visible)
