# app/widgets/knob_render.py
"""
Knob state -> SVG markup + readout text.

render_knob() is pure: same inputs, same KnobFrame. The widget feeds the
SVG to a QSvgRenderer and the two strings to its labels.
"""
from dataclasses import dataclass

from app.widgets.knob_geometry import (
    START_ANGLE, END_ANGLE, compact_number, describe_arc, format_value,
    polar_to_cartesian,
)

TRACK_COLOR = "#1a1a1f"
CAP_TOP     = "#3a3a40"
CAP_BOTTOM  = "#2a2a30"
CAP_STROKE  = "#111"
DEFAULT_COLOR = "#00e5ff"

SVG_TEMPLATE = """<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 {size} {size}">
  <defs>
    <linearGradient id="knobGradient" x1="0%" y1="0%" x2="0%" y2="100%">
      <stop offset="0%" stop-color="{cap_top}" stop-opacity="1"/>
      <stop offset="100%" stop-color="{cap_bottom}" stop-opacity="1"/>
    </linearGradient>
  </defs>
  <path class="track" d="{track}" fill="none" stroke="{track_color}" stroke-width="{stroke}" stroke-linecap="round"/>
  <path class="value" d="{arc}" fill="none" stroke="{color}" stroke-width="{stroke}" stroke-linecap="round" opacity="0.8"/>
  <circle class="cap" cx="{center}" cy="{center}" r="{cap_r}" fill="url(#knobGradient)" stroke="{cap_stroke}" stroke-width="1"/>
  <line class="marker" x1="{mx1}" y1="{my1}" x2="{mx2}" y2="{my2}" stroke="{color}" stroke-width="2" stroke-linecap="round"/>
</svg>
"""


@dataclass(frozen=True)
class KnobFrame:
    svg: str
    value_text: str
    label: str


def readout(value: float, step: float, units: str) -> str:
    text = format_value(value, step)
    return f"{text} {units}" if units else text


def render_svg(angle: float, size: float, color: str) -> str:
    center = size / 2
    radius = size * 0.4
    stroke = size * 0.08
    cap_r  = radius * 0.75

    # marker: dal centro (20%) quasi al bordo del cap
    mx1, my1 = polar_to_cartesian(center, center, cap_r * 0.2, angle)
    mx2, my2 = polar_to_cartesian(center, center, cap_r - 5, angle)

    n = compact_number
    return SVG_TEMPLATE.format(
        size=n(size), center=n(center), cap_r=n(cap_r), stroke=n(stroke),
        track=describe_arc(center, center, radius, START_ANGLE, END_ANGLE),
        arc=describe_arc(center, center, radius, START_ANGLE, angle),
        mx1=n(mx1), my1=n(my1), mx2=n(mx2), my2=n(my2),
        color=color, track_color=TRACK_COLOR,
        cap_top=CAP_TOP, cap_bottom=CAP_BOTTOM, cap_stroke=CAP_STROKE,
    )


def render_knob(model, label: str, units: str = "", size: float = 60,
                color: str = DEFAULT_COLOR) -> KnobFrame:
    return KnobFrame(
        svg=render_svg(model.angle(), size, color),
        value_text=readout(model.value, model.step, units),
        label=label,
    )
