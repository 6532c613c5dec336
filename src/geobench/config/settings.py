# src/geobench/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geobench/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `GEOBENCH_SAMPLE_SIZE`, `GEOBENCH_LOG_PATH`)
- an external YAML file via `GEOBENCH_CONFIG_PATH`

Design rule:
- Benchmark knobs live in YAML, not hard-coded in the harness.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal
from geobench.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field

ApproximationName = Literal["pythagorean", "trigonometric"]


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geobench.config`."""
    text = resources.files("geobench.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "geobench"
    log_level: str = "INFO"


class GeoSettings(BaseModel):
    earth_radius_m: float = Field(6_378_100.0, gt=0)


class BasePointSettings(BaseModel):
    lat: float = Field(31.0, ge=-90, le=90)
    lon: float = Field(121.0, ge=-180, le=180)


class BenchmarkSettings(BaseModel):
    sample_size: int = Field(3_000_000, ge=1)
    precision_deg: float = Field(0.01, gt=0)
    resolution: int = Field(1_000_000, ge=1)
    base_point: BasePointSettings = Field(default_factory=BasePointSettings)
    seed: int | None = None
    approximation: ApproximationName = "pythagorean"
    log_path: str = "distance.log"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    geo: GeoSettings = Field(default_factory=GeoSettings)
    benchmark: BenchmarkSettings = Field(default_factory=BenchmarkSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small; everything else lives in YAML.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GEOBENCH_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    log_path = os.getenv("GEOBENCH_LOG_PATH")
    if log_path:
        data.setdefault("benchmark", {})["log_path"] = log_path

    sample_size = os.getenv("GEOBENCH_SAMPLE_SIZE")
    if sample_size:
        data.setdefault("benchmark", {})["sample_size"] = sample_size

    seed = os.getenv("GEOBENCH_SEED")
    if seed:
        data.setdefault("benchmark", {})["seed"] = seed

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOBENCH_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
