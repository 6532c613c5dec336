"""
Domain models (Pydantic).

These types are the output contract of a benchmark run:
- per-method timing (`MethodTiming`)
- accuracy of the chosen approximation against the exact method (`AccuracyStats`)
- the whole run, including where the summary line went (`BenchmarkResult`)

The CLI prints them as text or dumps them as JSON.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

MethodName = Literal["exact", "pythagorean", "trigonometric"]


class PointModel(BaseModel):
    """Echo of the input coordinates; the calculators take any float as is."""

    lat: float
    lon: float


class MethodTiming(BaseModel):
    """Wall time spent running one calculator over the full dataset."""

    method: MethodName
    elapsed_ns: int = Field(..., ge=0)
    samples: int = Field(..., ge=0)


class AccuracyStats(BaseModel):
    """How far an approximation drifts from the exact calculator.

    `std_dev_m` is sqrt(mean((approx - exact)^2)); it is zero only when every
    compared sample matches exactly.
    """

    approximation: Literal["pythagorean", "trigonometric"]
    std_dev_m: float = Field(..., ge=0)
    mean_error_m: float
    max_abs_error_m: float = Field(..., ge=0)
    samples: int = Field(..., ge=0)
    non_finite: int = Field(0, ge=0)


class BenchmarkResult(BaseModel):
    generated_at: datetime
    sample_size: int
    precision_deg: float
    range_m: float
    base_point: PointModel
    seed: int | None = None
    timings: list[MethodTiming]
    accuracy: AccuracyStats
    log_path: str
    log_written: bool = False


class DistanceReport(BaseModel):
    """All three calculators applied to one pair of points."""

    start: PointModel
    end: PointModel
    distances_m: dict[MethodName, float]
