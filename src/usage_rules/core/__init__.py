"""Core dependency models, resolution and scanning."""

from usage_rules.core.dependency import RULES_FILENAME, Dependency
from usage_rules.core.resolver import (
    ConfigDependencyResolver,
    DependencyResolver,
    StaticDependencyResolver,
)
from usage_rules.core.scanner import scan

__all__ = [
    "RULES_FILENAME",
    "Dependency",
    "DependencyResolver",
    "ConfigDependencyResolver",
    "StaticDependencyResolver",
    "scan",
]
