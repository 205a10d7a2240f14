"""Engine constants, YAML configuration and logging setup."""

from .constants import (
    CALL_WORST_CASE_MULTIPLIER,
    CONTRACT_MULTIPLIER,
    DEFAULT_CONSTANTS,
    DEFAULT_COSTS,
    MAX_LEVERAGE,
    SECONDS_PER_YEAR,
    CostConstants,
    EngineConstants,
)
from .loading import (
    EngineConfig,
    build_config,
    deep_merge,
    engine_config_from_mapping,
    load_engine_config,
    load_yaml_config,
)
from .logging import DEFAULT_LOGGING, setup_logging_from_config

__all__ = [
    "SECONDS_PER_YEAR",
    "CONTRACT_MULTIPLIER",
    "MAX_LEVERAGE",
    "CALL_WORST_CASE_MULTIPLIER",
    "EngineConstants",
    "CostConstants",
    "DEFAULT_CONSTANTS",
    "DEFAULT_COSTS",
    "EngineConfig",
    "load_yaml_config",
    "deep_merge",
    "build_config",
    "engine_config_from_mapping",
    "load_engine_config",
    "DEFAULT_LOGGING",
    "setup_logging_from_config",
]
