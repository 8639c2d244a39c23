"""
Wall-clock timing for benchmark runs.

A Timer measures one overall interval plus any number of named sections
inside it. Sections accumulate, so a loop can charge only the inversion
call of every trial to a single 'inversion' entry.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall interval plus accumulating named sections.

    Usage:
        timer = Timer()
        timer.start()
        for matrix in matrices:
            with timer.section('inversion'):
                matrix.invert()
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'inversion': ...}

    Not thread-safe: each worker thread owns its Timer.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    def _charge(self, name: str, seconds: float) -> None:
        self._sections[name] = self._sections.get(name, 0.0) + seconds

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Add the time spent in the with-block to section `name`.

        The block is charged whether it returns or raises.
        """
        began = time.perf_counter()
        try:
            yield
        finally:
            self._charge(name, time.perf_counter() - began)

    def elapsed(self, name: str) -> float:
        """Seconds charged to a section so far; 0.0 for an unknown name."""
        return self._sections.get(name, 0.0)

    def result(self) -> dict[str, float]:
        """
        Timing dict: 'total_seconds' followed by one entry per section.

        Raises:
            RuntimeError: If stop() has not been called
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a whole with-block.

        with timed() as timer:
            inverse = matrix.get_inverse()
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
