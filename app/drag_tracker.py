# app/drag_tracker.py
"""
Tracking del puntatore durante un drag.

A DragTracker installs itself as an application-wide event filter only
between acquire() and release(), so a knob keeps receiving moves after the
pointer leaves its hit region. The override cursor lives for the same span.
release() runs on button-up, on application deactivation, on a move that
arrives without the left button held, and on dispose of the owner.
If the tracker is destroyed mid-drag (owner deleted without dispose) the
cursor is restored from the destroyed signal; Qt drops the dead filter.
"""
import logging
from functools import partial
from typing import Callable

from PyQt5.QtCore import QObject, QEvent, Qt
from PyQt5.QtWidgets import QApplication

log = logging.getLogger(__name__)


def _drop_orphaned(held: list, *_):
    # no reference to the tracker: it is already being torn down
    if held[0] is not None:
        held[0] = None
        QApplication.restoreOverrideCursor()
        log.debug("drag tracking dropped with its owner")


class DragTracker(QObject):
    def __init__(self, on_move: Callable[[float], None], on_release: Callable[[], None],
                 cursor=Qt.SizeVerCursor, parent=None):
        super().__init__(parent)
        self.on_move = on_move
        self.on_release = on_release
        self.cursor = cursor
        self._held = [None]  # app che ha il filtro installato, o None
        self.destroyed.connect(partial(_drop_orphaned, self._held))

    def is_active(self) -> bool:
        return self._held[0] is not None

    def acquire(self):
        if self._held[0] is not None:
            return
        app = QApplication.instance()
        if app is None:
            return
        app.installEventFilter(self)
        QApplication.setOverrideCursor(self.cursor)
        self._held[0] = app
        log.debug("drag tracking acquired by %s", self.parent().objectName() if self.parent() else self)

    def release(self):
        app = self._held[0]
        if app is None:
            return
        self._held[0] = None
        app.removeEventFilter(self)
        QApplication.restoreOverrideCursor()
        log.debug("drag tracking released")

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, *exc):
        self.release()
        return False

    def eventFilter(self, obj, ev):
        if self._held[0] is None:
            return False
        t = ev.type()
        if t == QEvent.MouseMove:
            if not ev.buttons() & Qt.LeftButton:
                # rilascio perso fuori dalla finestra
                self.on_release()
            else:
                self.on_move(ev.screenPos().y())
        elif t == QEvent.MouseButtonRelease and ev.button() == Qt.LeftButton:
            self.on_release()
        elif t == QEvent.ApplicationDeactivate:
            self.on_release()
        return False
