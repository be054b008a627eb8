"""
Execution timing utilities.

Wall-clock timing built on time.perf_counter, used by the loop-order
benchmark to compare multiplication kernels.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating timer with named sections.

    Every run of a section is recorded, so callers can read either the
    accumulated time (result()) or the fastest single run (best()).

    Usage:
        timer = Timer()
        timer.start()

        for _ in range(3):
            with timer.section('ikj'):
                multiply(A, B, order='ikj')

        timer.stop()
        timer.result()   # {'total_seconds': ..., 'ikj': <sum of 3 runs>}
        timer.best('ikj')  # fastest of the 3 runs
    """

    def __init__(self):
        self._runs: dict[str, list[float]] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Args:
            name: Section identifier (used as key in result dict)

        Note:
            Sections can overlap with each other and with the total time.
            The timer does not enforce mutual exclusion.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._runs.setdefault(name, []).append(elapsed)

    def runs(self, name: str) -> tuple[float, ...]:
        """All recorded durations of a section, in call order."""
        return tuple(self._runs.get(name, ()))

    def best(self, name: str) -> float:
        """
        Fastest recorded run of a section.

        Raises:
            KeyError: If the section was never timed
        """
        if name not in self._runs:
            raise KeyError(f"No runs recorded for section {name!r}")
        return min(self._runs[name])

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and the accumulated time of
            every section

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update({name: sum(runs) for name, runs in self._runs.items()})
        return result


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Context manager for simple timing.

    Usage:
        with timed() as timer:
            C = A * B
        print(f"Took {timer.result()['total_seconds']:.3f}s")

    Yields:
        Timer instance
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
