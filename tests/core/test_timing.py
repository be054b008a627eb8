"""
Tests for Timer and timed().
"""

import pytest

from pylinalg.core.compute.timing import Timer, timed


class TestTimer:

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section("work"):
                sum(range(100))
        timer.stop()

        runs = timer.runs("work")
        assert len(runs) == 3
        result = timer.result()
        assert result["work"] == pytest.approx(sum(runs))
        assert result["total_seconds"] >= result["work"]

    def test_best_is_min_run(self):
        timer = Timer()
        for _ in range(2):
            with timer.section("work"):
                pass
        assert timer.best("work") == min(timer.runs("work"))

    def test_best_unknown_section(self):
        with pytest.raises(KeyError):
            Timer().best("missing")

    def test_section_recorded_on_exception(self):
        timer = Timer()
        with pytest.raises(ValueError):
            with timer.section("boom"):
                raise ValueError("fail")
        assert len(timer.runs("boom")) == 1


def test_timed_context_manager():
    with timed() as timer:
        sum(range(10))
    assert timer.result()["total_seconds"] >= 0.0
