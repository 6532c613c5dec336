"""
Benchmark harness.

Runs every distance calculator over one shared dataset, times each pass with
`time.perf_counter_ns`, and compares the chosen approximation to the exact
calculator. Everything is sequential; the dataset is never mutated.
"""

from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timezone
from typing import Sequence

from geobench.benchmark.dataset import generate_pairs
from geobench.benchmark.summary import append_summary, format_summary_line
from geobench.config.settings import Settings
from geobench.core.env import resolve_project_path
from geobench.core.geo import DISTANCE_METHODS, DistanceFn, GeoPoint, GeoPointPair, meters_per_degree
from geobench.domain.models import AccuracyStats, BenchmarkResult, MethodTiming, PointModel

logger = logging.getLogger(__name__)


def time_method(
    fn: DistanceFn, pairs: Sequence[GeoPointPair], *, radius_m: float
) -> tuple[list[float], int]:
    """Apply `fn` to every pair; returns (results, elapsed nanoseconds)."""
    before = time.perf_counter_ns()
    results = [fn(p.lat1, p.lon1, p.lat2, p.lon2, radius_m=radius_m) for p in pairs]
    after = time.perf_counter_ns()
    return results, after - before


def deviation_stats(
    approx: Sequence[float], exact: Sequence[float], *, approximation: str
) -> AccuracyStats:
    """Compare two result series sample by sample.

    The standard deviation is the root mean square of (approx - exact), not a
    centered deviation: a constant offset still counts as error. Samples where
    either side is NaN/inf are skipped and counted in `non_finite`.
    """
    if len(approx) != len(exact):
        raise ValueError("approx and exact must have the same length")

    total_sq = 0.0
    total = 0.0
    max_abs = 0.0
    used = 0
    non_finite = 0
    for a, e in zip(approx, exact):
        diff = a - e
        if not math.isfinite(diff):
            non_finite += 1
            continue
        total_sq += diff * diff
        total += diff
        max_abs = max(max_abs, abs(diff))
        used += 1

    return AccuracyStats(
        approximation=approximation,
        std_dev_m=math.sqrt(total_sq / used) if used else 0.0,
        mean_error_m=total / used if used else 0.0,
        max_abs_error_m=max_abs,
        samples=used,
        non_finite=non_finite,
    )


def run_benchmark(
    settings: Settings,
    *,
    pairs: Sequence[GeoPointPair] | None = None,
    write_log: bool = True,
) -> BenchmarkResult:
    """Generate (or reuse) a dataset, time all calculators and log the summary line."""
    bench = settings.benchmark
    radius_m = settings.geo.earth_radius_m

    if pairs is None:
        base = GeoPoint(lat=bench.base_point.lat, lon=bench.base_point.lon)
        logger.info(
            "Generating %d pairs around (%s, %s) precision=%s seed=%s",
            bench.sample_size,
            base.lat,
            base.lon,
            bench.precision_deg,
            bench.seed,
        )
        pairs = generate_pairs(
            bench.sample_size,
            base=base,
            precision_deg=bench.precision_deg,
            resolution=bench.resolution,
            seed=bench.seed,
        )

    results: dict[str, list[float]] = {}
    timings: list[MethodTiming] = []
    for name, fn in DISTANCE_METHODS.items():
        values, elapsed_ns = time_method(fn, pairs, radius_m=radius_m)
        results[name] = values
        timings.append(MethodTiming(method=name, elapsed_ns=elapsed_ns, samples=len(values)))
        logger.debug("%s: %d ns over %d samples", name, elapsed_ns, len(values))

    accuracy = deviation_stats(
        results[bench.approximation], results["exact"], approximation=bench.approximation
    )
    if accuracy.non_finite:
        logger.warning(
            "%d of %d %s samples were not finite and were left out of the deviation",
            accuracy.non_finite,
            len(pairs),
            bench.approximation,
        )

    range_m = meters_per_degree(radius_m) * bench.precision_deg
    log_path = resolve_project_path(bench.log_path)
    log_written = False
    if write_log:
        log_written = append_summary(
            log_path, format_summary_line(bench.precision_deg, range_m, accuracy.std_dev_m)
        )

    return BenchmarkResult(
        generated_at=datetime.now(timezone.utc),
        sample_size=len(pairs),
        precision_deg=bench.precision_deg,
        range_m=range_m,
        base_point=PointModel(lat=bench.base_point.lat, lon=bench.base_point.lon),
        seed=bench.seed,
        timings=timings,
        accuracy=accuracy,
        log_path=str(log_path),
        log_written=log_written,
    )
