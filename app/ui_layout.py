# app/ui_layout.py
from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QFrame, QLabel
from PyQt5.QtCore import Qt

from app.widgets.knob import KnobWidget
from app.widgets.toggle_button import ToggleButton
from app.widgets.transfer_curve import TransferCurve
from comp.params import PARAMS_BY_ID

# sezioni della strip: (nome, parametri, diametro knob, colore)
SECTIONS = (
    ("thresh", ("threshold",),                   90, "#00e5ff"),
    ("main",   ("ratio", "attack", "release"),   65, "#ffb74d"),  # tempi / ratio
    ("sec",    ("knee", "makeup"),               50, "#aaa"),     # utility
)

CURVE_SIZE  = (360, 220)
DELTA_SIZE  = (36, 28)
PANEL_STYLE = "background:#1e1e22;"

def _section(parent, name):
    box = QFrame(parent)
    box.setObjectName(f"comp-section-{name}")
    lay = QHBoxLayout(box)
    lay.setContentsMargins(10, 6, 10, 6)
    lay.setSpacing(14)
    return box, lay

def build_ui(parent: QWidget, settings: dict):
    """Crea curva, knob e DELTA dentro parent; ritorna il dict dei widget."""
    widgets = {"knobs": {}}
    parent.setStyleSheet(PANEL_STYLE)

    root = QVBoxLayout(parent)
    root.setContentsMargins(12, 12, 12, 12)
    root.setSpacing(10)

    widgets["curve"] = TransferCurve(*CURVE_SIZE, parent=parent)
    widgets["curve"].set_params(settings["threshold"], settings["ratio"], settings["knee"])
    root.addWidget(widgets["curve"], 0, Qt.AlignHCenter)

    strip = QHBoxLayout()
    strip.setSpacing(6)
    root.addLayout(strip)

    for name, ids, size, color in SECTIONS:
        box, lay = _section(parent, name)
        for pid in ids:
            p = PARAMS_BY_ID[pid]
            knob = KnobWidget(box, p.label, minv=p.minv, maxv=p.maxv, value=settings[pid],
                              step=p.step, units=p.units, size=size, color=color)
            knob.setObjectName(f"knob-container-{pid}")
            lay.addWidget(knob, 0, Qt.AlignBottom)
            widgets["knobs"][pid] = knob
        if name == "sec":
            # DELTA vicino ai controlli secondari
            col = QVBoxLayout()
            col.setSpacing(4)
            widgets["btn_delta"] = ToggleButton("Δ", DELTA_SIZE, parent=box)
            widgets["btn_delta"].setChecked(bool(settings.get("delta", False)))
            cap = QLabel("DELTA", box)
            cap.setAlignment(Qt.AlignCenter)
            cap.setStyleSheet("font-size:10px; color:#888; font-weight:500;")
            col.addWidget(widgets["btn_delta"], 0, Qt.AlignHCenter)
            col.addWidget(cap)
            lay.addLayout(col)
        strip.addWidget(box)

    return widgets
