"""Shared pytest fixtures for usage-rules tests."""

from pathlib import Path
from typing import Optional

import pytest


def make_dependency(root: Path, name: str, rules: Optional[str] = None) -> Path:
    """Create a dependency directory, with a usage-rules.md if rules is given."""
    dep_dir = root / name
    dep_dir.mkdir(parents=True)
    (dep_dir / "README.md").write_text(f"# {name}\n")
    if rules is not None:
        (dep_dir / "usage-rules.md").write_text(rules)
    return dep_dir


@pytest.fixture
def deps_dir(tmp_path):
    """Provide a deps directory with a mix of dependencies.

    - bar: has usage rules
    - baz: no usage rules
    - foo: has usage rules
    """
    root = tmp_path / "deps"
    root.mkdir()
    make_dependency(root, "bar", "Prefer bar.query/2 over raw SQL.")
    make_dependency(root, "baz")
    make_dependency(root, "foo", "Use foo carefully.")
    return root


@pytest.fixture
def dependency_map(deps_dir):
    """Provide a name -> path mapping over the deps directory, foo first."""
    return {
        "foo": deps_dir / "foo",
        "bar": deps_dir / "bar",
        "baz": deps_dir / "baz",
    }


@pytest.fixture
def minimal_config_dict():
    """Provide a minimal valid configuration dictionary."""
    return {
        "version": "1.0",
        "settings": {
            "rules_filename": "usage-rules.md",
            "deps_dirs": ["deps"],
            "include_installed": False,
        },
        "dependencies": {},
    }


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty working directory with an empty home."""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    home_dir = tmp_path / "home"
    home_dir.mkdir()

    monkeypatch.chdir(work_dir)
    monkeypatch.setenv("HOME", str(home_dir))
    for var in (
        "USAGE_RULES_FILENAME",
        "USAGE_RULES_DEPS_DIRS",
        "USAGE_RULES_INCLUDE_INSTALLED",
    ):
        monkeypatch.delenv(var, raising=False)

    return {"work_dir": work_dir, "home_dir": home_dir}


@pytest.fixture
def make_dep():
    """Provide the dependency directory factory."""
    return make_dependency
