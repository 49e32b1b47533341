# app/main_app.py
import logging
import sys

from PyQt5.QtWidgets import QApplication, QMainWindow, QWidget

from app.ui_layout import build_ui
from comp.params import CURVE_PARAMS, default_settings
from net.host_link import HostLink

log = logging.getLogger(__name__)


class CompressorPanel(QWidget):
    """
    Strip del compressore: una knob per parametro, curva di trasferimento,
    toggle DELTA. Le modifiche dell'utente vanno all'host via HostLink;
    update_knob() è il percorso di sync dall'esterno (nessuna notifica).
    """
    def __init__(self, host: HostLink, settings=None, parent=None):
        super().__init__(parent)
        self.setObjectName("comp-controls")
        self.host = host
        self.settings = default_settings()
        if settings:
            self.settings.update(settings)

        self.ui = build_ui(self, self.settings)
        self.knobs = self.ui["knobs"]
        self._wire_ui()
        log.info("compressor panel ready (%d knobs)", len(self.knobs))

    # ─────────────────────────── helpers
    def _wire_ui(self):
        for pid, knob in self.knobs.items():
            knob.valueChanged.connect(lambda v, pid=pid: self._on_knob(pid, v))
        self.ui["btn_delta"].toggled.connect(self._on_delta)
        self.ui["curve"].thresholdEdited.connect(self._on_curve_threshold)

    def _redraw_curve(self):
        s = self.settings
        self.ui["curve"].set_params(s["threshold"], s["ratio"], s["knee"])

    def _on_knob(self, pid: str, v: float):
        self.settings[pid] = v
        self.host.send_param(pid, v)
        if pid in CURVE_PARAMS:
            self._redraw_curve()

    def _on_delta(self, on: bool):
        self.settings["delta"] = bool(on)
        self.host.send_param("delta", bool(on))

    def _on_curve_threshold(self, v: float):
        self.settings["threshold"] = v
        self.host.send_param("threshold", v)
        self.update_knob("threshold", v)

    # ─────────────────────────── API
    def update_knob(self, pid: str, value: float):
        knob = self.knobs.get(pid)
        if knob is None:
            return
        knob.setValue(value)
        self.settings[pid] = knob.value()
        if pid in CURVE_PARAMS:
            self._redraw_curve()

    def toggle_delta(self):
        btn = self.ui["btn_delta"]
        btn.setChecked(not btn.isChecked())

    def dispose(self):
        for knob in self.knobs.values():
            knob.dispose()


class MainWindow(QMainWindow):
    def __init__(self, host: HostLink, settings=None):
        super().__init__()
        self.setWindowTitle("Sphere Compressor")
        self.panel = CompressorPanel(host, settings, self)
        self.setCentralWidget(self.panel)

    def closeEvent(self, e):
        self.panel.dispose()
        super().closeEvent(e)


if __name__ == "__main__":
    app = QApplication(sys.argv)
    w = MainWindow(HostLink(dry_run=True)); w.show()
    sys.exit(app.exec_())
