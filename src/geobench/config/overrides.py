from __future__ import annotations

from typing import Any, Mapping

from geobench.config.settings import Settings

"""
Per-run settings overrides.

The CLI and the precision sweep script tune benchmark knobs for a single run by
passing a nested dict such as `{"benchmark": {"sample_size": 10_000}}`.

Pydantic silently ignores unknown keys, so a misspelt knob would otherwise be a
no-op. Overrides are therefore checked against the known benchmark fields first,
merged onto the current settings, and re-validated (e.g. `sample_size >= 1`).
"""

# Top-level section -> knobs a run may change. `geo` stays fixed so every run
# in one log measures against the same radius.
OVERRIDABLE_KNOBS: dict[str, frozenset[str]] = {
    "app": frozenset({"log_level"}),
    "benchmark": frozenset(
        {
            "sample_size",
            "precision_deg",
            "resolution",
            "base_point",
            "seed",
            "approximation",
            "log_path",
        }
    ),
}


def _check_overrides(overrides: Mapping[str, Any]) -> None:
    for section, knobs in overrides.items():
        if section not in OVERRIDABLE_KNOBS:
            raise ValueError(f"Unknown or fixed settings section: '{section}'")
        if not isinstance(knobs, Mapping):
            raise ValueError(f"Overrides for '{section}' must be a mapping")
        unknown = sorted(set(knobs) - OVERRIDABLE_KNOBS[section])
        if unknown:
            raise ValueError(f"Unknown setting: '{section}.{unknown[0]}'")


def _merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _merge(dict(merged[key]), value)
        else:
            merged[key] = value
    return merged


def apply_settings_overrides(
    settings: Settings, overrides: Mapping[str, Any] | None
) -> Settings:
    """Return a new validated Settings with `overrides` merged in; `settings` is left untouched."""
    if not overrides:
        return settings

    _check_overrides(overrides)
    return Settings.model_validate(_merge(settings.model_dump(mode="python"), overrides))
