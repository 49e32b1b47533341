# app/widgets/knob.py
"""
Manopola rotativa: arco SVG a 270°, drag verticale, readout + etichetta.

The child widgets are built once. A value change only reloads the SVG
and the readout text, so the hit region (self.dial) and its binding
stay the same for the whole life of the knob.
"""
import logging
import math

from PyQt5.QtWidgets import QApplication, QWidget, QLabel, QVBoxLayout
from PyQt5.QtGui import QPainter, QColor
from PyQt5.QtCore import Qt, QByteArray, pyqtSignal
from PyQt5.QtSvg import QSvgRenderer

from app.drag_tracker import DragTracker
from app.widgets.knob_model import KnobModel, ConfigError
from app.widgets.knob_render import DEFAULT_COLOR, render_knob

log = logging.getLogger(__name__)


def resolve_container(target):
    """QWidget, objectName or None -> parent widget (None if not found)."""
    if target is None or isinstance(target, QWidget):
        return target
    name = str(target)
    for top in QApplication.topLevelWidgets():
        if top.objectName() == name:
            return top
        found = top.findChild(QWidget, name)
        if found is not None:
            return found
    log.warning("knob container %r not found, knob left unparented", name)
    return None


class KnobDial(QWidget):
    """Hit region: paints the SVG and reports left-button presses."""
    pressed = pyqtSignal(float)

    def __init__(self, size, parent=None):
        super().__init__(parent)
        self.setFixedSize(size, size)
        self.setCursor(Qt.SizeVerCursor)
        self.setAttribute(Qt.WA_TranslucentBackground, True)
        self._renderer = QSvgRenderer(self)

    def set_svg(self, svg: str):
        self._renderer.load(QByteArray(svg.encode("utf-8")))
        self.update()

    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            self.pressed.emit(e.screenPos().y())
            e.accept()
        else:
            e.ignore()

    def paintEvent(self, e):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)
        self._renderer.render(p)
        p.end()


class KnobWidget(QWidget):
    valueChanged = pyqtSignal(float)

    def __init__(self, container, label, minv=0, maxv=100, value=None, step=1,
                 units="", size=60, color=DEFAULT_COLOR, on_change=None):
        # validate before touching Qt: a bad config must not leave a child behind
        size_px = int(round(size)) if math.isfinite(size) else 0
        if size_px < 1:
            raise ConfigError(f"size must be at least 1 px, got {size}")
        if not QColor(color).isValid():
            raise ConfigError(f"invalid color {color!r}")
        model = KnobModel(minv, maxv, value, step)

        super().__init__(resolve_container(container))
        self.label, self.units = str(label), units or ""
        self.size_px, self.color = size_px, color
        self.on_change = on_change or (lambda v: None)

        self.model = model
        self.model.redraw = self._refresh
        self.model.on_change = self._changed

        # struttura statica
        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(8)

        self.dial = KnobDial(self.size_px, self)
        self.value_label = QLabel(self)
        self.value_label.setAlignment(Qt.AlignCenter)
        self.value_label.setStyleSheet(
            f"font-family:'Segoe UI', sans-serif; font-size:11px; color:{color}; font-weight:600;")
        self.caption = QLabel(self.label.upper(), self)
        self.caption.setAlignment(Qt.AlignCenter)
        self.caption.setStyleSheet(
            "font-size:10px; color:#888; font-weight:500; letter-spacing:0.5px;")

        lay.addWidget(self.dial, 0, Qt.AlignHCenter)
        lay.addWidget(self.value_label)
        lay.addWidget(self.caption)

        self.tracker = DragTracker(self._on_drag_move, self._on_drag_end, parent=self)
        self.dial.pressed.connect(self._on_press)

        self._refresh()

    # API
    def value(self) -> float: return self.model.value

    def setValue(self, v: float):
        """Programmatic sync: clamped, no on_change, no valueChanged."""
        self.model.set_value(v)

    def is_dragging(self) -> bool: return self.model.is_dragging

    def frame(self):
        return render_knob(self.model, self.label, self.units, self.size_px, self.color)

    def readout(self) -> str: return self.value_label.text()

    def dispose(self):
        """Revoke any active drag (filter + override cursor)."""
        self._on_drag_end()

    # Interni
    def _refresh(self):
        f = self.frame()
        self.dial.set_svg(f.svg)
        self.value_label.setText(f.value_text)

    def _changed(self, v: float):
        self.on_change(v)
        self.valueChanged.emit(v)

    def _on_press(self, y: float):
        self.model.begin_drag(y)
        self.tracker.acquire()

    def _on_drag_move(self, y: float):
        self.model.drag_to(y)

    def _on_drag_end(self):
        self.model.end_drag()
        self.tracker.release()
