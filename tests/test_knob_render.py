"""Tests for the SVG/readout rendering of a knob."""

import math
import xml.etree.ElementTree as ET

from app.widgets.knob_geometry import END_ANGLE, START_ANGLE, describe_arc
from app.widgets.knob_model import KnobModel
from app.widgets.knob_render import KnobFrame, readout, render_knob

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse(svg: str):
    root = ET.fromstring(svg)
    by_class = {el.get("class"): el for el in root.iter() if el.get("class")}
    return root, by_class


class TestRenderKnob:
    def test_render_is_idempotent(self) -> None:
        m = KnobModel(-60, 0, value=-20, step=0.1)
        a = render_knob(m, "Threshold", "dB", 90, "#00e5ff")
        b = render_knob(m, "Threshold", "dB", 90, "#00e5ff")
        assert a == b
        assert isinstance(a, KnobFrame)

    def test_svg_structure(self) -> None:
        m = KnobModel(0, 100, value=100)
        root, parts = parse(render_knob(m, "Mix", size=60).svg)
        assert root.tag == SVG_NS + "svg"
        assert root.get("width") == "60" and root.get("viewBox") == "0 0 60 60"
        assert set(parts) == {"track", "value", "cap", "marker"}
        assert parts["track"].get("d") == describe_arc(30, 30, 24, START_ANGLE, END_ANGLE)
        assert parts["cap"].get("r") == "18"
        assert parts["track"].get("stroke-width") == "4.8"

    def test_value_arc_follows_value(self) -> None:
        m = KnobModel(0, 100, value=0)
        _, parts = parse(render_knob(m, "Mix").svg)
        empty = parts["value"].get("d")
        assert empty == describe_arc(30, 30, 24, START_ANGLE, START_ANGLE)

        m.set_value(100)
        _, parts = parse(render_knob(m, "Mix").svg)
        assert parts["value"].get("d") == parts["track"].get("d")

    def test_marker_points_along_angle(self) -> None:
        m = KnobModel(0, 100, value=50)  # straight up
        _, parts = parse(render_knob(m, "Mix", size=60, color="#ffb74d").svg)
        line = parts["marker"]
        x1, y1 = float(line.get("x1")), float(line.get("y1"))
        x2, y2 = float(line.get("x2")), float(line.get("y2"))
        assert line.get("stroke") == "#ffb74d"
        # cap radius 18: from 3.6 to 13 px away from the centre
        assert math.isclose(x1, 30 + 3.6, abs_tol=1e-9)
        assert math.isclose(x2, 30 + 13, abs_tol=1e-9)
        assert math.isclose(y1, 30, abs_tol=1e-9) and math.isclose(y2, 30, abs_tol=1e-9)

    def test_readout_and_label(self) -> None:
        m = KnobModel(-60, 0, value=-5, step=0.1)
        f = render_knob(m, "Threshold", "dB", 90)
        assert f.value_text == "-5.0 dB"
        assert f.label == "Threshold"

    def test_readout_without_units(self) -> None:
        assert readout(42.0, 1, "") == "42"
