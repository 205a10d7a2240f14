"""YAML-backed configuration for engine constants, costs and logging.

Expected file shape (every section optional)::

    constants:
      max_leverage: 5.0
    costs:
      borrow_fee_rate: 0.00035
    logging:
      level: DEBUG
    assets:
      SOL:
        constants:
          call_worst_case_multiplier: 3.0

Resolution order is defaults -> top-level sections -> `assets.<asset>` section.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from option_lab.config.constants import (
    DEFAULT_CONSTANTS,
    DEFAULT_COSTS,
    CostConstants,
    EngineConstants,
)
from option_lab.config.logging import DEFAULT_LOGGING


@dataclass(frozen=True)
class EngineConfig:
    """Resolved configuration for one asset (or the product-wide defaults)."""

    constants: EngineConstants = DEFAULT_CONSTANTS
    costs: CostConstants = DEFAULT_COSTS
    logging: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_LOGGING))


def load_yaml_config(path: str | Path | None) -> dict[str, Any]:
    if path is None:
        return {}

    p = resolve_path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a YAML mapping at the top level.")

    return data


def deep_merge(
    base: Mapping[str, Any],
    updates: Mapping[str, Any],
) -> dict[str, Any]:
    merged: dict[str, Any] = {}

    for key, value in base.items():
        if isinstance(value, Mapping):
            merged[key] = deep_merge(value, {})
        else:
            merged[key] = value

    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value

    return merged


def build_config(
    defaults: Mapping[str, Any],
    yaml_path: str | Path | None,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    config = deep_merge(defaults, load_yaml_config(yaml_path))
    if overrides:
        config = deep_merge(config, overrides)
    return config


def resolve_path(value: str | Path) -> Path:
    if isinstance(value, Path):
        return value
    expanded = os.path.expandvars(os.path.expanduser(str(value)))
    return Path(expanded)


def _dataclass_defaults(instance: Any) -> dict[str, Any]:
    return {f.name: getattr(instance, f.name) for f in fields(instance)}


def _build_section(cls: type, defaults: Any, section: Any, name: str) -> Any:
    if section is None:
        return defaults
    if not isinstance(section, Mapping):
        raise ValueError(f"'{name}' section must be a mapping")

    known = {f.name for f in fields(cls)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown {name} keys: {', '.join(unknown)}")

    return cls(**{**_dataclass_defaults(defaults), **section})


def engine_config_from_mapping(
    config: Mapping[str, Any],
    *,
    asset: str | None = None,
) -> EngineConfig:
    """Build an `EngineConfig` from a parsed mapping, applying asset overrides."""
    resolved: dict[str, Any] = {
        key: config[key] for key in ("constants", "costs", "logging") if key in config
    }

    if asset is not None:
        assets = config.get("assets") or {}
        if not isinstance(assets, Mapping):
            raise ValueError("'assets' section must be a mapping")
        asset_cfg = assets.get(asset)
        if asset_cfg is not None:
            if not isinstance(asset_cfg, Mapping):
                raise ValueError(f"assets.{asset} must be a mapping")
            resolved = deep_merge(resolved, asset_cfg)

    logging_cfg = resolved.get("logging")
    if logging_cfg is not None and not isinstance(logging_cfg, Mapping):
        raise ValueError("'logging' section must be a mapping")

    return EngineConfig(
        constants=_build_section(
            EngineConstants, DEFAULT_CONSTANTS, resolved.get("constants"), "constants"
        ),
        costs=_build_section(CostConstants, DEFAULT_COSTS, resolved.get("costs"), "costs"),
        logging=deep_merge(DEFAULT_LOGGING, logging_cfg or {}),
    )


def load_engine_config(
    path: str | Path | None,
    *,
    asset: str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> EngineConfig:
    """Load engine configuration from YAML, optionally for one asset id."""
    config = build_config({}, path, overrides)
    return engine_config_from_mapping(config, asset=asset)
