import logging
import re

from geobench.benchmark.summary import (
    SUMMARY_LOGGER_NAME,
    append_summary,
    format_accuracy_line,
    format_summary_line,
    format_timing_line,
)
from geobench.domain.models import AccuracyStats, MethodTiming


def test_format_summary_line():
    line = format_summary_line(0.01, 1113.194908, 52.5)
    assert line == (
        "precision 0.010000 deg, search range within 1113.194908 m, standard deviation 52.500000 m"
    )


def test_format_timing_line_uses_scientific_notation():
    line = format_timing_line(MethodTiming(method="exact", elapsed_ns=1_234_000_000, samples=10))
    assert line == "spherical (law of cosines) took 1.234000E+09 ns"


def test_format_accuracy_line_mentions_non_finite_only_when_present():
    clean = AccuracyStats(
        approximation="pythagorean", std_dev_m=1.0, mean_error_m=0.5, max_abs_error_m=2.0, samples=3
    )
    dirty = clean.model_copy(update={"approximation": "trigonometric", "non_finite": 4})
    assert "non_finite" not in format_accuracy_line(clean)
    assert format_accuracy_line(dirty).endswith("non_finite=4")


def test_append_summary_creates_then_appends_with_timestamp(tmp_path):
    path = tmp_path / "distance.log"

    assert append_summary(path, "first") is True
    assert append_summary(path, "second") is True

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} first", lines[0])
    assert lines[1].endswith(" second")


def test_append_summary_leaves_no_handler_behind(tmp_path):
    append_summary(tmp_path / "distance.log", "line")
    assert logging.getLogger(SUMMARY_LOGGER_NAME).handlers == []


def test_append_summary_reports_open_failure(tmp_path, capsys):
    path = tmp_path / "nope" / "distance.log"

    assert append_summary(path, "line") is False
    assert f"Failed to open {path}" in capsys.readouterr().out
    assert not path.exists()
