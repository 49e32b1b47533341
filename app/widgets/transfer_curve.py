# app/widgets/transfer_curve.py
from PyQt5.QtWidgets import QWidget
from PyQt5.QtGui import QPainter, QPen, QColor, QPolygonF
from PyQt5.QtCore import Qt, QPointF, pyqtSignal

from comp.gain_computer import FLOOR_DB, transfer_curve

class TransferCurve(QWidget):
    """
    Curva statica ingresso/uscita (dB) del compressore.

    - Asse X = input, asse Y = output, entrambi FLOOR_DB..0
    - Diagonale 1:1 tenue come riferimento
    - Trascinando in orizzontale si sposta la soglia: thresholdEdited(float)
    """
    thresholdEdited = pyqtSignal(float)

    def __init__(self, width=360, height=220, parent=None):
        super().__init__(parent)
        self.setFixedSize(width, height)
        self.setCursor(Qt.SizeHorCursor)

        self.threshold, self.ratio, self.knee = -20.0, 4.0, 6.0
        self._drag = False

        # colori
        self._bg        = QColor(22, 22, 26)
        self._grid      = QColor(255, 255, 255, 22)
        self._unity     = QColor(255, 255, 255, 50)
        self._curve_col = QColor(0, 229, 255)
        self._thr_col   = QColor(255, 183, 77, 200)

    # API
    def set_params(self, threshold: float, ratio: float, knee: float):
        self.threshold, self.ratio, self.knee = float(threshold), float(ratio), float(knee)
        self.update()

    def curve_points(self):
        return transfer_curve(self.threshold, self.ratio, self.knee, points=max(2, self.width()))

    # Mapping
    def _x_from_db(self, db: float) -> float:
        return (db - FLOOR_DB) / -FLOOR_DB * (self.width() - 1)

    def _y_from_db(self, db: float) -> float:
        return (0.0 - db) / -FLOOR_DB * (self.height() - 1)

    def db_from_x(self, x: float) -> float:
        f = max(0.0, min(1.0, x / max(1, self.width() - 1)))
        return FLOOR_DB + f * -FLOOR_DB

    # Mouse
    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            self._drag = True
            self._edit(e.localPos().x())

    def mouseMoveEvent(self, e):
        if self._drag:
            self._edit(e.localPos().x())

    def mouseReleaseEvent(self, e):
        self._drag = False

    def _edit(self, x: float):
        db = self.db_from_x(x)
        if db != self.threshold:
            self.threshold = db
            self.update()
            self.thresholdEdited.emit(db)

    def paintEvent(self, _):
        qp = QPainter(self)
        qp.setRenderHint(QPainter.Antialiasing, True)
        w, h = self.width(), self.height()
        qp.fillRect(self.rect(), self._bg)

        # griglia ogni 12 dB
        qp.setPen(QPen(self._grid, 1))
        db = FLOOR_DB
        while db <= 0.0:
            x, y = self._x_from_db(db), self._y_from_db(db)
            qp.drawLine(QPointF(x, 0), QPointF(x, h - 1))
            qp.drawLine(QPointF(0, y), QPointF(w - 1, y))
            db += 12.0

        qp.setPen(QPen(self._unity, 1, Qt.DashLine))
        qp.drawLine(QPointF(0, h - 1), QPointF(w - 1, 0))

        # soglia
        tx = self._x_from_db(self.threshold)
        qp.setPen(QPen(self._thr_col, 1, Qt.DotLine))
        qp.drawLine(QPointF(tx, 0), QPointF(tx, h - 1))

        xs, ys = self.curve_points()
        poly = QPolygonF([QPointF(self._x_from_db(a), self._y_from_db(b)) for a, b in zip(xs, ys)])
        qp.setPen(QPen(self._curve_col, 2, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
        qp.drawPolyline(poly)

        qp.end()
