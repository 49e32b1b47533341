import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication(["tests"])
    yield app


@pytest.fixture
def send_mouse(qapp):
    """Send a synthetic mouse event at local (x, y); screen y equals local y."""
    from PyQt5.QtCore import QEvent, QPointF, Qt
    from PyQt5.QtGui import QMouseEvent
    from PyQt5.QtWidgets import QApplication

    types = {"press": QEvent.MouseButtonPress, "move": QEvent.MouseMove,
             "release": QEvent.MouseButtonRelease}

    def send(kind, widget, y, x=5.0, held=True):
        button = Qt.NoButton if kind == "move" else Qt.LeftButton
        buttons = Qt.LeftButton if held and kind != "release" else Qt.NoButton
        pos = QPointF(x, y)
        ev = QMouseEvent(types[kind], pos, pos, button, buttons, Qt.NoModifier)
        QApplication.sendEvent(widget, ev)

    return send
