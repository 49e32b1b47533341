# app/widgets/toggle_button.py
from PyQt5.QtWidgets import QLabel
from PyQt5.QtCore import Qt, pyqtSignal

OFF_STYLE = ("background:#2a2a30; color:#888; border:1px solid #111;"
             "border-radius:6px; font: bold 13px 'Segoe UI';")
ON_STYLE  = ("background:#2a2a30; color:{accent}; border:1px solid {accent};"
             "border-radius:6px; font: bold 13px 'Segoe UI';")

class ToggleButton(QLabel):
    """Small latching button (e.g. DELTA): click flips, toggled(bool) fires."""
    toggled = pyqtSignal(bool)
    def __init__(self, glyph, size, accent="#00e5ff", parent=None):
        super().__init__(glyph, parent)
        self._accent = accent
        self._checked = False
        self.setAlignment(Qt.AlignCenter)
        self.setCursor(Qt.PointingHandCursor)
        self.setFixedSize(*size)
        self._refresh()
    def isChecked(self): return self._checked
    def setChecked(self, v: bool):
        v = bool(v)
        if v != self._checked:
            self._checked = v
            self._refresh()
            self.toggled.emit(self._checked)
    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            self.setChecked(not self._checked)
    def _refresh(self):
        self.setStyleSheet(ON_STYLE.format(accent=self._accent) if self._checked else OFF_STYLE)
