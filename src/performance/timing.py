"""Lightweight timing utilities for instrumentation.

Provides:
  - time_block context manager
  - time_function decorator
  - global TimingCollector (thread-safe)

Enable/disable globally via env var PFAMCC_ENABLE_TIMING=0/1 (default 1).
"""
from __future__ import annotations
import functools
import threading
import time
from contextlib import contextmanager
from typing import Callable, Dict, Any, Optional

from utils.settings import get_settings

_lock = threading.Lock()


def _enabled() -> bool:
    return get_settings().enable_timing


class TimingCollector:
    def __init__(self):
        self._data: Dict[str, Dict[str, float]] = {}

    def add(self, key: str, duration: float, items: Optional[int] = None):
        if not _enabled():
            return
        with _lock:
            rec = self._data.setdefault(key, {"time": 0.0, "calls": 0.0, "items": 0.0})
            rec["time"] += float(duration)
            rec["calls"] += 1.0
            if items is not None:
                rec["items"] += float(items)

    def snapshot(self) -> Dict[str, Any]:
        # Shallow copy safe for serialization
        with _lock:
            out = {}
            for k, rec in self._data.items():
                avg = rec["time"] / rec["calls"] if rec["calls"] else 0.0
                rate = rec["items"] / rec["time"] if rec["time"] and rec["items"] else None
                out[k] = {
                    "total_time": round(rec["time"], 6),
                    "calls": int(rec["calls"]),
                    "avg_time": round(avg, 6),
                    **({"total_items": int(rec["items"])} if rec["items"] else {}),
                    **({"items_per_sec": round(rate, 3)} if rate else {}),
                }
            return out

    def clear(self):
        with _lock:
            self._data.clear()


TIMINGS = TimingCollector()


@contextmanager
def time_block(name: str, items: Optional[int] = None):
    if not _enabled():
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        TIMINGS.add(name, time.perf_counter() - start, items=items)


def time_function(name: Optional[str] = None, items_len: bool = False):
    """Decorator to time a function.

    Args:
        name: Logical timing bucket (default: function.__name__).
        items_len: Record ``len(result)`` as the processed item count.
    """
    def deco(fn: Callable):
        bucket = name or fn.__name__

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            if not _enabled():
                return fn(*args, **kwargs)
            start = time.perf_counter()
            result = fn(*args, **kwargs)
            dur = time.perf_counter() - start
            items_val = len(result) if items_len and result is not None else None
            TIMINGS.add(bucket, dur, items=items_val)
            return result
        return wrapper
    return deco


__all__ = ["time_block", "time_function", "TIMINGS", "TimingCollector"]
