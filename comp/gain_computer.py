# comp/gain_computer.py
"""
Gain computer statico (soft knee), vettoriale su numpy.

gain_reduction_db(x) is what the engine subtracts from a level x (dBFS)
before makeup; transfer_curve() samples input -> output for the display.
"""
import numpy as np

FLOOR_DB = -60.0


def gain_reduction_db(input_db, threshold: float, ratio: float, knee: float):
    x = np.asarray(input_db, dtype=np.float64)
    half = knee / 2.0

    over = x - threshold
    if knee > 0.0:
        k = x - threshold + half
        over = np.where(x < threshold + half, (k * k) / (2.0 * knee), over)
    over = np.where(x < threshold - half, 0.0, over)

    return np.maximum(0.0, over * (1.0 - 1.0 / ratio))


def transfer_curve(threshold: float, ratio: float, knee: float,
                   lo: float = FLOOR_DB, hi: float = 0.0, points: int = 121):
    x = np.linspace(lo, hi, int(points))
    return x, x - gain_reduction_db(x, threshold, ratio, knee)
