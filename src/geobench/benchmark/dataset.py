"""
Synthetic benchmark data.

Every pair is the base point nudged by four independent offsets drawn from
`randrange(resolution) / resolution * precision_deg`, so all coordinates fall in
`[base, base + precision_deg)` on a grid of `resolution` steps.
"""

from __future__ import annotations

import random
import time

from geobench.core.geo import GeoPoint, GeoPointPair


def _offset(rng: random.Random, resolution: int, precision_deg: float) -> float:
    return rng.randrange(resolution) / resolution * precision_deg


def generate_pairs(
    count: int,
    *,
    base: GeoPoint,
    precision_deg: float,
    resolution: int = 1_000_000,
    seed: int | None = None,
) -> list[GeoPointPair]:
    """Generate `count` point pairs around `base`.

    With `seed=None` the generator is seeded from the clock, like an ad-hoc run;
    pass a seed to get the same dataset back.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    if resolution < 1:
        raise ValueError("resolution must be >= 1")

    rng = random.Random(int(time.time()) if seed is None else seed)
    pairs: list[GeoPointPair] = []
    for _ in range(count):
        pairs.append(
            GeoPointPair(
                base.lat + _offset(rng, resolution, precision_deg),
                base.lon + _offset(rng, resolution, precision_deg),
                base.lat + _offset(rng, resolution, precision_deg),
                base.lon + _offset(rng, resolution, precision_deg),
            )
        )
    return pairs
