# comp/params.py
"""
Parametri del compressore: range, default, passo e unità.

Ranges follow the engine's own limits, except ratio which the panel
caps at 20:1.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CompParam:
    id: str
    label: str
    minv: float
    maxv: float
    default: float
    step: float
    units: str


COMP_PARAMS = (
    CompParam("threshold", "Threshold", -60.0,    0.0, -20.0, 0.1, "dB"),
    CompParam("ratio",     "Ratio",       1.0,   20.0,   4.0, 0.1, ":1"),
    CompParam("attack",    "Attack",      0.1,  500.0,  10.0, 0.1, "ms"),
    CompParam("release",   "Release",    10.0, 3000.0, 100.0, 1.0, "ms"),
    CompParam("knee",      "Knee",        0.0,   24.0,   6.0, 0.1, "dB"),
    CompParam("makeup",    "Gain",      -12.0,   24.0,   0.0, 0.1, "dB"),
)

PARAMS_BY_ID = {p.id: p for p in COMP_PARAMS}

# parametri che cambiano la curva statica
CURVE_PARAMS = ("threshold", "ratio", "knee")


def default_settings() -> dict:
    s = {p.id: p.default for p in COMP_PARAMS}
    s["delta"] = False
    return s
