"""Usage-rules task orchestration.

Ties resolution, scanning, merging and classification together for the three
modes of the command:

- combine: merge the rules of named packages into a target file
- all: merge the rules of every dependency that has them
- list: report which dependencies have rules, optionally with their status
  against a target file

Tasks never write to disk directly; they stage writes in a FileStore and
leave committing them to the caller.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from usage_rules.compose.merger import build_wrapper, merge
from usage_rules.compose.status import Status, classify
from usage_rules.core.dependency import RULES_FILENAME, Dependency
from usage_rules.core.resolver import DependencyResolver
from usage_rules.core.scanner import scan
from usage_rules.store.protocols import FileStore

USAGE = """Usage:
  usage-rules <file> <packages...>
    Combine specific packages' usage rules into the target file

  usage-rules <file> --all
    Gather usage rules from all dependencies into the target file

  usage-rules [file] --list
    List packages with usage rules (optionally check status against file)"""


class UsageError(ValueError):
    """Raised when the requested combination of arguments is invalid."""


class Mode(str, Enum):
    """What the command should do."""

    COMBINE = "combine"
    ALL = "all"
    LIST = "list"


def select_mode(
    file: Optional[str],
    packages: Sequence[str],
    all_packages: bool = False,
    list_packages: bool = False,
) -> Mode:
    """Validate command arguments and pick the mode to run.

    Args:
        file: Target file, if given
        packages: Explicit package names
        all_packages: Whether --all was given
        list_packages: Whether --list was given

    Returns:
        The selected Mode. --all wins over --list when both are given.

    Raises:
        UsageError: If the arguments conflict or select nothing
    """
    if (all_packages or list_packages) and packages:
        raise UsageError("Cannot specify packages when using --all or --list options")

    if not packages and not all_packages and not list_packages:
        raise UsageError(USAGE)

    if all_packages and file is None:
        raise UsageError("--all option requires a file to write to")

    if all_packages:
        return Mode.ALL
    if list_packages:
        return Mode.LIST
    return Mode.COMBINE


@dataclass
class MergeResult:
    """Outcome of a combine or all run.

    Attributes:
        target: File the rules were merged into
        dependencies: Dependencies whose rules were merged, in merge order
        notices: Messages for the user
        changed: Whether new content was staged for ``target``
        created: Whether ``target`` did not exist before
    """

    target: Path
    dependencies: list[Dependency] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)
    changed: bool = False
    created: bool = False


@dataclass
class ListEntry:
    """One dependency in list output; status is None without a target file."""

    name: str
    status: Optional[Status] = None


@dataclass
class ListResult:
    """Outcome of a list run."""

    entries: list[ListEntry] = field(default_factory=list)
    target: Optional[Path] = None
    notices: list[str] = field(default_factory=list)


def combine_packages(
    resolver: DependencyResolver,
    store: FileStore,
    target: Path,
    packages: Sequence[str],
    rules_filename: str = RULES_FILENAME,
) -> MergeResult:
    """Merge the usage rules of the named packages into ``target``.

    Packages that are unknown or ship no rules file are skipped silently.
    """
    dependencies = scan(resolver.list(), only=set(packages), rules_filename=rules_filename)
    return write_usage_rules(store, target, dependencies)


def gather_all(
    resolver: DependencyResolver,
    store: FileStore,
    target: Path,
    rules_filename: str = RULES_FILENAME,
) -> MergeResult:
    """Merge the usage rules of every dependency that has them into ``target``."""
    dependencies = scan(resolver.list(), rules_filename=rules_filename)

    notices = [f"Found {len(dependencies)} dependencies with usage rules"]
    notices.extend(f"Including usage rules for: {dep.name}" for dep in dependencies)

    result = write_usage_rules(store, target, dependencies)
    result.notices = notices + result.notices
    return result


def write_usage_rules(
    store: FileStore, target: Path, dependencies: Sequence[Dependency]
) -> MergeResult:
    """Stage the merged usage rules of ``dependencies`` into ``target``.

    A missing target is created holding just the wrapper region; an existing
    one is updated in place. Nothing is staged when there are no dependencies
    or the content would not change.

    Raises:
        OSError: If a rules file or the existing target cannot be read
        UnicodeDecodeError: If a rules file or the target is not valid text
    """
    result = MergeResult(target=target, dependencies=list(dependencies))
    if not dependencies:
        return result

    blocks = [(dep.name, dep.read_rules()) for dep in dependencies]
    current = store.read(target)

    if current is None:
        new_content = build_wrapper(blocks)
        result.created = True
    else:
        new_content = merge(current, blocks)

    if new_content != current:
        store.write(target, new_content)
        result.changed = True

    return result


def list_dependencies(
    resolver: DependencyResolver,
    store: FileStore,
    target: Optional[Path] = None,
    rules_filename: str = RULES_FILENAME,
) -> ListResult:
    """List dependencies that have usage rules.

    With a target file each dependency is classified against the file's
    current content. Nothing is written.
    """
    dependencies = scan(resolver.list(), rules_filename=rules_filename)
    result = ListResult(target=target)

    if not dependencies:
        result.notices.append(f"No packages found with {rules_filename} files")
        return result

    if target is None:
        result.entries = [ListEntry(name=dep.name) for dep in dependencies]
        return result

    content = read_current_content(store, target)
    result.entries = [
        ListEntry(name=dep.name, status=classify(dep.name, dep.read_rules(), content))
        for dep in dependencies
    ]
    return result


def read_current_content(store: FileStore, path: Path) -> str:
    """Read a target file for status checks.

    Falls back to a raw read when the normal read fails, and to an empty
    string when the file is missing or unreadable either way.
    """
    if not store.exists(path):
        return ""

    try:
        content = store.read(path)
    except (OSError, UnicodeDecodeError):
        content = None

    if content is None:
        content = store.read_raw(path)

    return content if content is not None else ""
