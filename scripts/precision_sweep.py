from __future__ import annotations

import argparse
import random

from geobench.benchmark.runner import run_benchmark
from geobench.benchmark.summary import format_accuracy_line
from geobench.config.overrides import apply_settings_overrides
from geobench.config.settings import get_settings
from geobench.core.logging import configure_logging


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Run the distance benchmark for several precision windows.")
    p.add_argument("--precision", type=float, action="append", default=[], help="Repeatable (degrees).")
    p.add_argument("--samples", type=int, default=200_000)
    p.add_argument("--seed", type=int, default=None, help="Shared by every run; random if omitted.")
    args = p.parse_args(argv)

    configure_logging()
    precisions = args.precision or [0.001, 0.01, 0.1, 1.0]
    seed = args.seed if args.seed is not None else random.randrange(2**31)

    for precision in precisions:
        settings = apply_settings_overrides(
            get_settings(),
            {"benchmark": {"sample_size": args.samples, "precision_deg": precision, "seed": seed}},
        )
        result = run_benchmark(settings)
        print(f"precision={precision:g} range={result.range_m:.1f} m  {format_accuracy_line(result.accuracy)}")

    print("Log:", result.log_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
