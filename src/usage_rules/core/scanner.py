"""Find dependencies that ship a usage-rules file."""

from collections.abc import Collection, Mapping
from pathlib import Path
from typing import Optional

from usage_rules.core.dependency import RULES_FILENAME, Dependency


def scan(
    dependencies: Mapping[str, Path],
    only: Optional[Collection[str]] = None,
    rules_filename: str = RULES_FILENAME,
) -> list[Dependency]:
    """Return the dependencies whose directory holds a usage-rules file.

    Order follows ``dependencies``. When ``only`` is given, other names are
    dropped before the filesystem is checked, and requested names without a
    rules file are silently left out.

    Args:
        dependencies: Mapping of dependency name to directory
        only: Optional names to restrict the scan to
        rules_filename: Name of the rules file to look for

    Returns:
        Dependencies that have a rules file
    """
    found = []

    for name, path in dependencies.items():
        if only is not None and name not in only:
            continue

        dependency = Dependency(name=name, path=Path(path), rules_filename=rules_filename)
        if dependency.has_rules():
            found.append(dependency)

    return found
