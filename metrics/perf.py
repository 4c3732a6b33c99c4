from __future__ import annotations
import time
from collections import deque

import numpy as np

from config import FPS_WINDOW


def summarise_seconds(samples):
    """
    Summarise a list of durations in seconds.
    Returns ms stats: mean, p50, p90, p95, max.
    """
    arr = np.array(samples, dtype=np.float64)
    if arr.size == 0:
        return {
            "n": 0,
            "mean_ms": None,
            "p50_ms": None,
            "p90_ms": None,
            "p95_ms": None,
            "max_ms": None,
        }

    return {
        "n": int(arr.size),
        "mean_ms": float(arr.mean() * 1000.0),
        "p50_ms": float(np.percentile(arr, 50) * 1000.0),
        "p90_ms": float(np.percentile(arr, 90) * 1000.0),
        "p95_ms": float(np.percentile(arr, 95) * 1000.0),
        "max_ms": float(arr.max() * 1000.0),
    }


class FpsMeter:
    """
    Redraw rate over the last `window` ticks.
    """
    def __init__(self, window=FPS_WINDOW, clock=time.perf_counter):
        self.clock = clock
        self.stamps = deque(maxlen=window + 1)

    def tick(self):
        self.stamps.append(self.clock())

    def intervals(self):
        return np.diff(np.array(self.stamps, dtype=np.float64))

    def fps(self) -> float:
        if len(self.stamps) < 2:
            return 0.0
        mean = float(self.intervals().mean())
        return 1.0 / mean if mean > 0 else 0.0

    def summary(self):
        return summarise_seconds(self.intervals())
