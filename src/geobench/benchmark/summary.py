"""
Run summary: console lines and the append-only `distance.log`.

The log gets one line per run so repeated runs (different precision windows)
accumulate into an accuracy-versus-range table.
"""

from __future__ import annotations

import logging
from pathlib import Path

from geobench.domain.models import AccuracyStats, BenchmarkResult, MethodTiming

logger = logging.getLogger(__name__)

SUMMARY_LOGGER_NAME = "geobench.summary"
SUMMARY_FORMAT = "%(asctime)s %(message)s"
SUMMARY_DATEFMT = "%Y/%m/%d %H:%M:%S"

METHOD_LABELS = {
    "exact": "spherical (law of cosines)",
    "pythagorean": "planar approximation (Pythagorean)",
    "trigonometric": "planar approximation (trigonometric)",
}


def format_timing_line(timing: MethodTiming) -> str:
    label = METHOD_LABELS.get(timing.method, timing.method)
    return f"{label} took {float(timing.elapsed_ns):E} ns"


def format_accuracy_line(accuracy: AccuracyStats) -> str:
    line = (
        f"{accuracy.approximation} vs exact: std_dev={accuracy.std_dev_m:.6f} m "
        f"mean={accuracy.mean_error_m:.6f} m max_abs={accuracy.max_abs_error_m:.6f} m "
        f"samples={accuracy.samples}"
    )
    if accuracy.non_finite:
        line += f" non_finite={accuracy.non_finite}"
    return line


def format_summary_line(precision_deg: float, range_m: float, std_dev_m: float) -> str:
    """The one line written to the log per run."""
    return (
        f"precision {precision_deg:f} deg, search range within {range_m:f} m, "
        f"standard deviation {std_dev_m:f} m"
    )


def append_summary(path: str | Path, line: str) -> bool:
    """Append `line` to the log at `path`, creating the file if needed.

    An unopenable log is reported on the console and skipped; returns whether
    the line was written.
    """
    try:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as e:
        logger.error("Failed to open summary log %s: %s", path, e)
        print(f"Failed to open {path}")
        return False

    handler.setFormatter(logging.Formatter(SUMMARY_FORMAT, datefmt=SUMMARY_DATEFMT))
    summary_logger = logging.getLogger(SUMMARY_LOGGER_NAME)
    summary_logger.setLevel(logging.INFO)
    summary_logger.propagate = False
    summary_logger.addHandler(handler)
    try:
        summary_logger.info(line)
    finally:
        summary_logger.removeHandler(handler)
        handler.close()
    return True


def print_result(result: BenchmarkResult) -> None:
    """Console rendering used by the CLI and scripts."""
    for timing in result.timings:
        print(format_timing_line(timing))
    print(format_accuracy_line(result.accuracy))
    if result.log_written:
        print(f"summary appended to {result.log_path}")
