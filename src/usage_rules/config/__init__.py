"""Configuration loading and management."""

from usage_rules.config.loader import (
    apply_env_overrides,
    find_config_files,
    load_config,
    merge_configs,
)
from usage_rules.config.schema import SettingsConfig, UsageRulesConfig

__all__ = [
    # Loader functions
    "apply_env_overrides",
    "find_config_files",
    "load_config",
    "merge_configs",
    # Schema classes
    "SettingsConfig",
    "UsageRulesConfig",
]
