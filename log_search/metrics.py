from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Dict, Sequence

import numpy as np


def percentile_latencies(latencies_ms: Sequence[float]) -> Dict[str, float]:
    if not latencies_ms:
        return {"p50": 0.0, "p95": 0.0, "p99": 0.0, "avg": 0.0}
    arr = np.array(latencies_ms, dtype=float)
    return {
        "p50": float(np.percentile(arr, 50)),
        "p95": float(np.percentile(arr, 95)),
        "p99": float(np.percentile(arr, 99)),
        "avg": float(arr.mean()),
    }


class LatencyTracker:
    """Rolling window of query latencies, shared by request threads."""

    def __init__(self, maxlen: int = 10000) -> None:
        self._samples: Deque[float] = deque(maxlen=maxlen)
        self._total = 0
        self._lock = threading.Lock()

    def record(self, latency_ms: float) -> None:
        with self._lock:
            self._samples.append(float(latency_ms))
            self._total += 1

    def snapshot(self) -> Dict[str, float]:
        with self._lock:
            samples = list(self._samples)
            total = self._total
        stats: Dict[str, float] = {"queries": total}
        stats.update(percentile_latencies(samples))
        return stats
