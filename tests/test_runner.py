import math

import pytest

from geobench.benchmark.runner import deviation_stats, run_benchmark, time_method
from geobench.config.overrides import apply_settings_overrides
from geobench.config.settings import get_settings
from geobench.core.geo import DIST_PER_DEGREE_M, GeoPointPair, pythagorean_distance_m


def _settings(tmp_path, **bench):
    payload = {"sample_size": 2000, "seed": 11, "log_path": str(tmp_path / "distance.log"), **bench}
    return apply_settings_overrides(get_settings(), {"benchmark": payload})


def test_deviation_is_zero_for_identical_series():
    stats = deviation_stats([1.0, 2.0, 3.0], [1.0, 2.0, 3.0], approximation="pythagorean")
    assert stats.std_dev_m == 0.0
    assert stats.max_abs_error_m == 0.0
    assert stats.samples == 3


def test_deviation_counts_a_constant_offset_as_error():
    stats = deviation_stats([2.0, 3.0, 4.0], [1.0, 2.0, 3.0], approximation="pythagorean")
    assert stats.std_dev_m == pytest.approx(1.0)
    assert stats.mean_error_m == pytest.approx(1.0)


def test_deviation_is_root_mean_square():
    stats = deviation_stats([3.0, -4.0], [0.0, 0.0], approximation="pythagorean")
    assert stats.std_dev_m == pytest.approx(math.sqrt((9.0 + 16.0) / 2))
    assert stats.mean_error_m == pytest.approx(-0.5)
    assert stats.max_abs_error_m == pytest.approx(4.0)


def test_deviation_skips_non_finite_samples():
    stats = deviation_stats([float("nan"), 2.0], [1.0, 1.0], approximation="trigonometric")
    assert stats.samples == 1
    assert stats.non_finite == 1
    assert stats.std_dev_m == pytest.approx(1.0)


def test_deviation_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        deviation_stats([1.0], [1.0, 2.0], approximation="pythagorean")


def test_time_method_returns_results_in_dataset_order(monkeypatch):
    ticks = iter([100, 350])
    monkeypatch.setattr("geobench.benchmark.runner.time.perf_counter_ns", lambda: next(ticks))
    pairs = [GeoPointPair(0.0, 0.0, 0.003, 0.004), GeoPointPair(0.0, 0.0, 0.0, 0.01)]

    values, elapsed = time_method(pythagorean_distance_m, pairs, radius_m=6_378_100.0)

    assert elapsed == 250
    assert values == pytest.approx([DIST_PER_DEGREE_M * 0.005, DIST_PER_DEGREE_M * 0.01])


def test_run_benchmark_times_every_method_and_appends_summary(tmp_path):
    settings = _settings(tmp_path)

    result = run_benchmark(settings)

    assert [t.method for t in result.timings] == ["exact", "pythagorean", "trigonometric"]
    assert all(t.samples == 2000 for t in result.timings)
    assert result.sample_size == 2000
    assert result.range_m == pytest.approx(DIST_PER_DEGREE_M * 0.01)
    assert result.accuracy.approximation == "pythagorean"
    assert result.accuracy.non_finite == 0
    # Sub-kilometer window near 31N: error stays within a few meters.
    assert 0.0 < result.accuracy.std_dev_m < 200.0

    assert result.log_written is True
    lines = (tmp_path / "distance.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert "precision 0.010000 deg" in lines[0]
    assert f"standard deviation {result.accuracy.std_dev_m:f} m" in lines[0]


def test_run_benchmark_appends_instead_of_truncating(tmp_path):
    settings = _settings(tmp_path, sample_size=50)
    run_benchmark(settings)
    run_benchmark(settings)
    lines = (tmp_path / "distance.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2


def test_run_benchmark_is_reproducible_with_a_seed(tmp_path):
    settings = _settings(tmp_path, sample_size=300)
    a = run_benchmark(settings, write_log=False)
    b = run_benchmark(settings, write_log=False)
    assert a.accuracy == b.accuracy
    assert not (tmp_path / "distance.log").exists()


def test_run_benchmark_accepts_a_prebuilt_dataset(tmp_path):
    settings = _settings(tmp_path)
    pairs = [GeoPointPair(31.0, 121.0, 31.0, 121.0), GeoPointPair(31.0, 121.0, 31.01, 121.0)]

    result = run_benchmark(settings, pairs=pairs, write_log=False)

    assert result.sample_size == 2
    assert result.accuracy.samples == 2
    assert result.accuracy.max_abs_error_m < 1.0


def test_run_benchmark_trigonometric_skips_nan_samples(tmp_path):
    settings = _settings(tmp_path, approximation="trigonometric")
    pairs = [GeoPointPair(31.0, 121.0, 31.0, 121.005), GeoPointPair(31.003, 121.004, 31.0, 121.0)]

    result = run_benchmark(settings, pairs=pairs, write_log=False)

    assert result.accuracy.non_finite == 1
    assert result.accuracy.samples == 1


def test_run_benchmark_survives_unopenable_log(tmp_path, capsys):
    settings = _settings(
        tmp_path, sample_size=10, log_path=str(tmp_path / "missing-dir" / "distance.log")
    )

    result = run_benchmark(settings)

    assert result.log_written is False
    assert "Failed to open" in capsys.readouterr().out
