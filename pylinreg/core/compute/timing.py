"""
Execution timing for backends.

Section timings end up in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('means'):
            mx, my = x.mean(), y.mean()
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'means': ...}

    With sync_cuda=True, pending CUDA kernels are awaited at every
    boundary so GPU sections measure the work and not the launch.
    """

    def __init__(self, sync_cuda: bool = False):
        self._sync_cuda = sync_cuda
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def _sync(self) -> None:
        if self._sync_cuda:
            import torch
            if torch.cuda.is_available():
                torch.cuda.synchronize()

    def start(self) -> None:
        self._sync()
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        self._sync()
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time a named section; repeated names accumulate."""
        self._sync()
        begin = time.perf_counter()
        try:
            yield
        finally:
            self._sync()
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - begin
            )

    def result(self) -> dict[str, float]:
        """
        Timing results as {'total_seconds': ..., <section>: ...}.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
