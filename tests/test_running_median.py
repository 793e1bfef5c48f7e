# tests/test_running_median.py
"""Tests for the two-heap running median and its benchmark driver."""
import random
import statistics

import pytest

from running_median import RunningMedian, main, run_benchmark


def test_empty_stream_is_zero():
    running = RunningMedian()
    assert len(running) == 0
    assert running.find_median() == 0.0


def test_odd_count_takes_middle():
    running = RunningMedian()
    for num in (5, 1, 9):
        running.add(num)
    assert running.find_median() == 5.0


def test_even_count_averages_middle_pair():
    running = RunningMedian()
    for num in (4, 1, 3, 2):
        running.add(num)
    assert running.find_median() == 2.5


def test_upper_half_holds_extra_element():
    running = RunningMedian()
    for i, num in enumerate([10, -3, 7, 7, 0, 42, -8], start=1):
        running.add(num)
        assert len(running.upper) - len(running.lower) == i % 2
        if running.lower:
            assert -running.lower[0] <= running.upper[0]


def test_duplicates_and_negatives():
    running = RunningMedian()
    for num in (-2, -2, -2, 5):
        running.add(num)
    assert running.find_median() == -2.0


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_matches_statistics_median_on_random_streams(seed):
    rng = random.Random(seed)
    running = RunningMedian()
    seen = []
    for _ in range(300):
        num = rng.randint(-32768, 32767)
        running.add(num)
        seen.append(num)
        assert running.find_median() == pytest.approx(statistics.median(seen))


def test_run_benchmark_reports_median_per_add():
    out = run_benchmark(size=201, seed=3)
    assert out["size"] == 201
    assert len(out["medians"]) == 201
    assert out["median"] == out["medians"][-1]
    assert out["seconds"] >= 0


def test_run_benchmark_empty():
    out = run_benchmark(size=0)
    assert out["medians"] == []
    assert out["median"] == 0.0


def test_run_benchmark_rejects_negative_size():
    with pytest.raises(ValueError):
        run_benchmark(size=-1)


def test_main_reads_size_from_env(monkeypatch, capsys):
    monkeypatch.setenv("MEDIAN_BENCHMARK_SIZE", "11")
    main()
    out = capsys.readouterr().out
    assert out.startswith("Median: ")


def test_main_malformed_size(monkeypatch):
    monkeypatch.setenv("MEDIAN_BENCHMARK_SIZE", "big")
    with pytest.raises(ValueError, match="MEDIAN_BENCHMARK_SIZE"):
        main()
