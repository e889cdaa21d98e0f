"""
Lightweight timing of engine hot spots (cuts, subtree cloning, layout passes).

Regrowth can make the tree explode within a few moves, so it is useful to see
where the time goes. Recording is off until `profiler.enable()` is called.
"""

import atexit
import time
from dataclasses import dataclass
from functools import wraps
from typing import Dict, List, Tuple


@dataclass
class TimingStats:
    calls: int = 0
    total_time: float = 0.0
    max_time: float = 0.0

    @property
    def avg_ms(self) -> float:
        return (self.total_time / self.calls * 1000) if self.calls else 0.0


class Profiler:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.stats: Dict[str, TimingStats] = {}
        self.enabled = False
        self._report_registered = False

    def enable(self, report_at_exit: bool = True):
        self.enabled = True
        if report_at_exit and not self._report_registered:
            atexit.register(self.print_stats)
            self._report_registered = True

    def disable(self):
        self.enabled = False

    def record(self, name: str, elapsed: float):
        if not self.enabled:
            return
        entry = self.stats.setdefault(name, TimingStats())
        entry.calls += 1
        entry.total_time += elapsed
        entry.max_time = max(entry.max_time, elapsed)

    def summary(self) -> List[Tuple[str, TimingStats]]:
        return sorted(self.stats.items(), key=lambda item: item[1].total_time, reverse=True)

    def print_stats(self):
        if not self.stats:
            return

        print("\n" + "=" * 70)
        print("HYDRA ENGINE TIMINGS")
        print("=" * 70)
        print(f"{'Function':<35} {'Calls':>8} {'Total(s)':>10} {'Avg(ms)':>8} {'Max(ms)':>8}")
        print("-" * 70)
        for name, entry in self.summary():
            print(f"{name:<35} {entry.calls:>8} {entry.total_time:>10.3f} "
                  f"{entry.avg_ms:>8.3f} {entry.max_time * 1000:>8.3f}")
        print("=" * 70)

    def reset(self):
        self.stats.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not profiler.enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            profiler.record(func.__qualname__, time.perf_counter() - start)
    return wrapper


class profile_block:
    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        profiler.record(self.name, time.perf_counter() - self.start)
