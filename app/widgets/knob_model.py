# app/widgets/knob_model.py
"""
Stato della manopola: valore limitato + macchina a stati del drag.

No Qt here: the widget feeds screen coordinates in and gets
redraw / on_change calls back.
"""
import math
from typing import Callable, Optional

from app.widgets.knob_geometry import clamp, percentage, value_to_angle

SENSITIVITY = 200.0  # pixel di corsa verticale = range completo


class ConfigError(ValueError):
    pass


class KnobModel:
    def __init__(self, minv=0.0, maxv=100.0, value=None, step=1.0,
                 on_change: Optional[Callable[[float], None]] = None):
        minv, maxv, step = float(minv), float(maxv), float(step)
        if not (math.isfinite(minv) and math.isfinite(maxv)):
            raise ConfigError(f"bounds must be finite, got {minv}..{maxv}")
        if not minv < maxv:
            raise ConfigError(f"min must be lower than max, got {minv}..{maxv}")
        if not step > 0:
            raise ConfigError(f"step must be positive, got {step}")
        self.minv, self.maxv, self.step = minv, maxv, step

        v = minv if value is None else float(value)
        if math.isnan(v):
            raise ConfigError("value is NaN")
        self.value = clamp(v, minv, maxv)

        self.on_change = on_change or (lambda v: None)
        self.redraw = lambda: None

        self.is_dragging = False
        self.last_y = 0.0

    # ─────────────────────────── valore
    def percentage(self) -> float:
        return percentage(self.value, self.minv, self.maxv)

    def angle(self) -> float:
        return value_to_angle(self.value, self.minv, self.maxv)

    def set_value(self, v: float) -> bool:
        """Programmatic update: clamps, redraws, never calls on_change."""
        v = clamp(float(v), self.minv, self.maxv)
        changed = v != self.value
        self.value = v
        self.redraw()
        return changed

    # ─────────────────────────── drag
    def begin_drag(self, y: float):
        self.is_dragging = True
        self.last_y = float(y)

    def drag_to(self, y: float) -> bool:
        if not self.is_dragging:
            return False
        y = float(y)
        dy = self.last_y - y  # verso l'alto = positivo
        self.last_y = y

        delta = (dy / SENSITIVITY) * (self.maxv - self.minv)
        v = clamp(self.value + delta, self.minv, self.maxv)
        if v == self.value:
            return False
        self.value = v
        self.redraw()
        self.on_change(self.value)
        return True

    def end_drag(self) -> bool:
        was = self.is_dragging
        self.is_dragging = False
        return was
