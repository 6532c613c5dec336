"""
geobench CLI entrypoint.

`run` benchmarks the three distance calculators over a synthetic dataset and
appends a summary line to the log; `distance` evaluates one pair of points.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from geobench.benchmark.runner import run_benchmark
from geobench.benchmark.summary import print_result
from geobench.config.overrides import apply_settings_overrides
from geobench.config.settings import get_settings
from geobench.core.geo import DISTANCE_METHODS
from geobench.core.logging import configure_logging
from geobench.domain.models import DistanceReport, PointModel


def _benchmark_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect explicitly-passed CLI knobs into a settings override payload."""
    bench: dict[str, Any] = {}
    if args.samples is not None:
        bench["sample_size"] = int(args.samples)
    if args.precision is not None:
        bench["precision_deg"] = float(args.precision)
    if args.resolution is not None:
        bench["resolution"] = int(args.resolution)
    if args.seed is not None:
        bench["seed"] = int(args.seed)
    if args.approximation is not None:
        bench["approximation"] = args.approximation
    if args.log_path:
        bench["log_path"] = args.log_path
    if args.base_lat is not None or args.base_lon is not None:
        bench["base_point"] = {
            k: float(v) for k, v in (("lat", args.base_lat), ("lon", args.base_lon)) if v is not None
        }
    return {"benchmark": bench} if bench else {}


def _cmd_run(args: argparse.Namespace) -> int:
    """Handle the `run` subcommand."""
    settings = apply_settings_overrides(get_settings(), _benchmark_overrides(args))

    result = run_benchmark(settings, write_log=not args.no_log)

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    print_result(result)
    return 0


def _cmd_distance(args: argparse.Namespace) -> int:
    """Handle the `distance` subcommand."""
    settings = get_settings()
    radius_m = settings.geo.earth_radius_m
    coords = (float(args.lat1), float(args.lon1), float(args.lat2), float(args.lon2))

    report = DistanceReport(
        start=PointModel(lat=coords[0], lon=coords[1]),
        end=PointModel(lat=coords[2], lon=coords[3]),
        distances_m={name: fn(*coords, radius_m=radius_m) for name, fn in DISTANCE_METHODS.items()},
    )

    if args.json:
        print(json.dumps(report.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    for name, value in report.distances_m.items():
        print(f"{name:>13}: {value:.6f} m")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the geobench CLI."""
    parser = argparse.ArgumentParser(prog="geobench")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Benchmark the distance calculators on synthetic point pairs.")
    run.add_argument("--samples", type=int, default=None, help="Number of point pairs (default from config).")
    run.add_argument("--precision", type=float, default=None, help="Precision window in degrees.")
    run.add_argument("--resolution", type=int, default=None, help="Random offset grid steps per window.")
    run.add_argument("--seed", type=int, default=None, help="Fixed seed for a reproducible dataset.")
    run.add_argument("--base-lat", type=float, default=None)
    run.add_argument("--base-lon", type=float, default=None)
    run.add_argument(
        "--approximation",
        choices=["pythagorean", "trigonometric"],
        default=None,
        help="Which approximation to compare against the exact method.",
    )
    run.add_argument("--log-path", type=str, default=None, help="Summary log file (appended to).")
    run.add_argument("--no-log", action="store_true", help="Skip appending the summary line.")
    run.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    run.set_defaults(func=_cmd_run)

    dist = sub.add_parser("distance", help="Compute one distance with every calculator.")
    dist.add_argument("lat1", type=float)
    dist.add_argument("lon1", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("lon2", type=float)
    dist.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dist.set_defaults(func=_cmd_distance)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geobench.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
