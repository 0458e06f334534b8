"""CLI application entry point."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from usage_rules.config.loader import load_config
from usage_rules.config.schema import UsageRulesConfig
from usage_rules.core.resolver import ConfigDependencyResolver
from usage_rules.store.local import LocalFileStore
from usage_rules.tasks import (
    ListResult,
    MergeResult,
    Mode,
    UsageError,
    combine_packages,
    gather_all,
    list_dependencies,
    select_mode,
)
from usage_rules.utils.output import (
    console,
    print_diff,
    print_error,
    print_has_rules,
    print_info,
    print_status,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="usage-rules",
    help="Combine the usage rules shipped by dependencies into a single file",
    add_completion=False,
)


def load_settings(config: Optional[Path]) -> UsageRulesConfig:
    """Load configuration, reporting failures and exiting on error."""
    try:
        return load_config(config)
    except ValidationError as e:
        print_error("Configuration validation failed:")
        console.print(e)
        raise typer.Exit(1)
    except (yaml.YAMLError, OSError, ValueError) as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(1)


def report_merge(result: MergeResult, store: LocalFileStore, dry_run: bool) -> None:
    """Print the outcome of a combine/all run and commit staged writes."""
    for notice in result.notices:
        print_info(notice)

    if not result.dependencies:
        print_warning("No usage rules found, nothing to write")
        return

    if not result.changed:
        print_success(f"{result.target} is already up to date")
        return

    if dry_run:
        print_warning("DRY RUN MODE - No changes will be made")
        print_diff(store.diff(result.target))
        return

    store.flush()
    action = "Created" if result.created else "Updated"
    print_success(
        f"{action} {result.target} with usage rules for "
        f"{len(result.dependencies)} package(s)"
    )


def report_list(result: ListResult) -> None:
    """Print the outcome of a list run."""
    for notice in result.notices:
        print_info(notice)

    for entry in result.entries:
        if entry.status is None:
            print_has_rules(entry.name)
        else:
            print_status(entry.name, entry.status)


@app.command()
def main(
    file: Optional[str] = typer.Argument(
        None,
        help="File to write usage rules into (or check against with --list)",
    ),
    packages: Optional[list[str]] = typer.Argument(
        None,
        help="Packages whose usage rules should be combined",
    ),
    all_packages: bool = typer.Option(
        False,
        "--all",
        help="Gather usage rules from all dependencies that have them",
    ),
    list_packages: bool = typer.Option(
        False,
        "--list",
        help="List dependencies with usage rules; with a file, show their status",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (overrides default search)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show the changes that would be made without writing them",
    ),
):
    """Combine the package rules for the provided packages into the provided
    file, or list/gather all dependencies.

    Examples:

        usage-rules rules.md ash ash_postgres phoenix

        usage-rules rules.md --all

        usage-rules --list

        usage-rules rules.md --list
    """
    packages = packages or []

    try:
        mode = select_mode(file, packages, all_packages, list_packages)
    except UsageError as e:
        print_error(str(e))
        raise typer.Exit(1)

    cfg = load_settings(config)
    resolver = ConfigDependencyResolver(cfg)
    store = LocalFileStore()
    rules_filename = cfg.settings.rules_filename
    target = Path(file) if file is not None else None

    try:
        if mode is Mode.LIST:
            report_list(list_dependencies(resolver, store, target, rules_filename))
        elif mode is Mode.ALL:
            result = gather_all(resolver, store, target, rules_filename)
            report_merge(result, store, dry_run)
        else:
            result = combine_packages(resolver, store, target, packages, rules_filename)
            found = {dep.name for dep in result.dependencies}
            skipped = [name for name in packages if name not in found]
            if skipped:
                print_info(f"No usage rules found for: {', '.join(skipped)}")
            report_merge(result, store, dry_run)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Failed to update usage rules: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
