"""Resolve a project's dependencies to directories.

This module provides functionality to:
- Read explicit name -> path entries from configuration
- Treat each sub-directory of a deps directory as a dependency
- Map installed Python distributions to their package directories
- Combine all of the above into one ordered mapping
"""

import importlib.metadata
import re
from pathlib import Path
from typing import Protocol

from usage_rules.config.schema import UsageRulesConfig
from usage_rules.utils.paths import expand_path


class DependencyResolver(Protocol):
    """Abstract interface for listing a project's dependencies."""

    def list(self) -> dict[str, Path]:
        """Return dependency names mapped to their directories.

        Insertion order is significant: it decides the order blocks are
        merged and listed in.
        """
        ...


def normalize_distribution_name(name: str) -> str:
    """Normalize a distribution name (PEP 503), using underscores."""
    return re.sub(r"[-_.]+", "_", name).lower()


def resolve_config_dependencies(config: UsageRulesConfig) -> dict[str, Path]:
    """Resolve the explicit ``dependencies`` entries of a config.

    Args:
        config: Loaded configuration

    Returns:
        Mapping in config order; paths expanded against the working directory
        when still relative
    """
    return {name: expand_path(path) for name, path in config.dependencies.items()}


def resolve_deps_dir(deps_dir: Path) -> dict[str, Path]:
    """List the sub-directories of a deps directory as dependencies.

    Hidden directories are skipped. A missing deps directory resolves to an
    empty mapping.

    Args:
        deps_dir: Directory holding one sub-directory per dependency

    Returns:
        Mapping of directory name to path, sorted by name
    """
    deps_dir = expand_path(deps_dir)
    if not deps_dir.is_dir():
        return {}

    return {
        child.name: child
        for child in sorted(deps_dir.iterdir(), key=lambda p: p.name)
        if child.is_dir() and not child.name.startswith(".")
    }


def resolve_installed_distributions() -> dict[str, Path]:
    """Map installed Python distributions to their top-level package directory.

    Distributions that only install modules (no package directory) are
    skipped. When a distribution provides several packages, the first in
    alphabetical order is used.

    Returns:
        Mapping of normalized distribution name to package directory, sorted
        by name
    """
    packages_by_dist: dict[str, list[str]] = {}
    for package, dist_names in importlib.metadata.packages_distributions().items():
        for dist_name in dist_names:
            packages_by_dist.setdefault(normalize_distribution_name(dist_name), []).append(
                package
            )

    resolved: dict[str, Path] = {}
    for dist in importlib.metadata.distributions():
        dist_name = dist.metadata["Name"]
        if not dist_name:
            continue

        name = normalize_distribution_name(dist_name)
        if name in resolved:
            continue

        for package in sorted(packages_by_dist.get(name, [])):
            candidate = Path(dist.locate_file(package))
            if candidate.is_dir():
                resolved[name] = candidate
                break

    return dict(sorted(resolved.items()))


class ConfigDependencyResolver:
    """Resolve dependencies from a loaded configuration.

    Sources are consulted in order, and the first source to claim a name
    wins:
    1. Explicit ``dependencies`` entries (config order)
    2. Sub-directories of each ``settings.deps_dirs`` entry (sorted)
    3. Installed distributions, when ``settings.include_installed`` is set
    """

    def __init__(self, config: UsageRulesConfig):
        self.config = config

    def list(self) -> dict[str, Path]:
        resolved = dict(resolve_config_dependencies(self.config))

        for deps_dir in self.config.settings.deps_dirs:
            for name, path in resolve_deps_dir(Path(deps_dir)).items():
                resolved.setdefault(name, path)

        if self.config.settings.include_installed:
            for name, path in resolve_installed_distributions().items():
                resolved.setdefault(name, path)

        return resolved


class StaticDependencyResolver:
    """Resolver over a fixed mapping, for callers that already know the paths."""

    def __init__(self, dependencies: dict[str, Path]):
        self.dependencies = dict(dependencies)

    def list(self) -> dict[str, Path]:
        return {name: Path(path) for name, path in self.dependencies.items()}
