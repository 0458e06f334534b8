"""Configuration loader with merge logic and precedence handling."""

import copy
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from usage_rules.config.defaults import (
    DEFAULT_CONFIG,
    PROJECT_CONFIG_FILENAME,
    USER_CONFIG_PATH,
)
from usage_rules.config.schema import UsageRulesConfig
from usage_rules.utils.paths import expand_path

_TRUTHY = {"1", "true", "yes", "on"}


def find_config_files() -> list[Path]:
    """Find configuration files in standard locations.

    Searches for configuration files in order of precedence (lowest to highest):
    1. Project config (./usage-rules.yaml in current directory)
    2. User config (~/.config/usage-rules/config.yaml)

    Returns:
        List of Path objects for existing config files, ordered from lowest
        to highest precedence (so later configs override earlier ones)
    """
    config_files = []

    project_config = Path.cwd() / PROJECT_CONFIG_FILENAME
    if project_config.exists():
        config_files.append(project_config)

    user_config = expand_path(USER_CONFIG_PATH)
    if user_config.exists():
        config_files.append(user_config)

    return config_files


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Relative paths in ``settings.deps_dirs`` and ``dependencies`` are made
    absolute against the directory holding the file, so that merging configs
    from different locations keeps each path pointing where its author meant.

    Args:
        file_path: Path to the YAML file

    Returns:
        Dictionary containing the parsed YAML content

    Raises:
        yaml.YAMLError: If the file contains invalid YAML
        FileNotFoundError: If the file doesn't exist
    """
    with open(file_path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f)

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config file must contain a mapping: {file_path}")

    return _anchor_paths(content, Path(file_path).resolve().parent)


def _anchor_paths(config: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Resolve relative paths in a raw config dict against base_dir."""
    result = copy.deepcopy(config)

    settings = result.get("settings")
    if isinstance(settings, dict) and isinstance(settings.get("deps_dirs"), list):
        settings["deps_dirs"] = [
            _anchor(d, base_dir) if isinstance(d, str) else d
            for d in settings["deps_dirs"]
        ]

    dependencies = result.get("dependencies")
    if isinstance(dependencies, dict):
        result["dependencies"] = {
            name: _anchor(path, base_dir) if isinstance(path, str) else path
            for name, path in dependencies.items()
        }

    return result


def _anchor(path: str, base_dir: Path) -> str:
    expanded = Path(path).expanduser()
    if expanded.is_absolute():
        return str(expanded)
    return str(base_dir / expanded)


def merge_configs(configs: list[dict[str, Any]]) -> dict[str, Any]:
    """Deep merge multiple configuration dictionaries.

    Merges configs from lowest to highest precedence, where later configs
    override earlier ones. For nested dictionaries, performs a recursive
    deep merge. For lists, the later config completely replaces the earlier one.

    Args:
        configs: List of configuration dictionaries in order from lowest to
                highest precedence

    Returns:
        Merged configuration dictionary
    """
    result: dict[str, Any] = {}

    for config in configs:
        result = _deep_merge(result, config)

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to configuration.

    Supports the following environment variables:
    - USAGE_RULES_FILENAME: Override settings.rules_filename
    - USAGE_RULES_DEPS_DIRS: Override settings.deps_dirs (comma-separated)
    - USAGE_RULES_INCLUDE_INSTALLED: Override settings.include_installed

    Args:
        config: Configuration dictionary to apply overrides to

    Returns:
        Configuration dictionary with environment overrides applied
    """
    result = config.copy()
    result["settings"] = dict(result.get("settings") or {})

    if rules_filename := os.getenv("USAGE_RULES_FILENAME"):
        result["settings"]["rules_filename"] = rules_filename

    if deps_dirs := os.getenv("USAGE_RULES_DEPS_DIRS"):
        result["settings"]["deps_dirs"] = [
            d.strip() for d in deps_dirs.split(",") if d.strip()
        ]

    include_installed = os.getenv("USAGE_RULES_INCLUDE_INSTALLED")
    if include_installed is not None and include_installed.strip():
        result["settings"]["include_installed"] = (
            include_installed.strip().lower() in _TRUTHY
        )

    return result


def load_config(config_path: Optional[Path] = None) -> UsageRulesConfig:
    """Load and merge configuration from all sources.

    Configuration precedence (lowest to highest):
    1. Built-in defaults
    2. Project config (./usage-rules.yaml)
    3. User config (~/.config/usage-rules/config.yaml)
    4. Environment variables
    5. Explicitly provided config_path (if given)
    6. CLI flags (handled by caller)

    Args:
        config_path: Optional explicit path to a config file, merged on top
                    of everything else

    Returns:
        Validated UsageRulesConfig instance

    Raises:
        ValidationError: If the merged configuration is invalid
        yaml.YAMLError: If a config file contains invalid YAML
        FileNotFoundError: If config_path is provided but doesn't exist
    """
    configs_to_merge = [copy.deepcopy(DEFAULT_CONFIG)]

    for config_file in find_config_files():
        try:
            configs_to_merge.append(load_yaml_file(config_file))
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error loading {config_file}: {e}") from e

    merged_config = merge_configs(configs_to_merge)
    merged_config = apply_env_overrides(merged_config)

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        merged_config = _deep_merge(merged_config, load_yaml_file(config_path))

    return UsageRulesConfig(**merged_config)
