# app/widgets/knob_geometry.py
"""
Geometria della manopola (pure functions, no Qt).

Angles are radians measured from +x with y pointing down, like SVG.
The sweep is fixed: 270 degrees, open at the bottom.
"""
import math
from decimal import Context, Decimal, ROUND_HALF_UP

START_ANGLE = -math.pi * 0.75
END_ANGLE   =  math.pi * 0.75
SWEEP       = END_ANGLE - START_ANGLE

_TENTH = Decimal("0.1")
_WIDE  = Context(prec=400)  # any finite float fits at 0.1 resolution

def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))

def percentage(value: float, minv: float, maxv: float) -> float:
    span = maxv - minv
    if span <= 0: return 0.0
    return (value - minv) / span

def value_to_angle(value: float, minv: float, maxv: float) -> float:
    return START_ANGLE + percentage(value, minv, maxv) * SWEEP

def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float):
    return (cx + radius * math.cos(angle),
            cy + radius * math.sin(angle))

def compact_number(v) -> str:
    """1.0 -> '1', 2.5 -> '2.5', shortest round-trip form otherwise."""
    f = float(v)
    if f.is_integer():
        return str(int(f))
    return repr(f)

def describe_arc(cx: float, cy: float, radius: float, start: float, end: float) -> str:
    """SVG path for the arc start->end; drawn from end back to start."""
    sx, sy = polar_to_cartesian(cx, cy, radius, end)
    ex, ey = polar_to_cartesian(cx, cy, radius, start)
    large = "0" if end - start <= math.pi else "1"
    parts = ["M", sx, sy, "A", radius, radius, 0, large, 0, ex, ey]
    return " ".join(p if isinstance(p, str) else compact_number(p) for p in parts)

def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))

def _one_decimal(v: float) -> str:
    # exact binary ties go away from zero: 0.25 -> "0.3"
    return str(Decimal(v).quantize(_TENTH, rounding=ROUND_HALF_UP, context=_WIDE))

def format_value(value: float, step: float) -> str:
    if step < 1:
        return _one_decimal(value)
    if abs(value) < 10 and step % 1 != 0:
        return _one_decimal(value)
    return str(_round_half_up(value))
