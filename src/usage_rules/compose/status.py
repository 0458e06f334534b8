"""Classify whether a dependency's rules in a file are current."""

from enum import Enum

from usage_rules.compose.markers import end_marker, split_region, start_marker


class Status(str, Enum):
    """Status of a dependency's block within a target file."""

    PRESENT = "present"
    STALE = "stale"
    MISSING = "missing"


def expected_block_body(name: str, rules: str) -> str:
    """Return the text expected between a dependency's markers."""
    return f"\n## {name} usage\n{rules}\n"


def classify(name: str, rule_content: str, file_content: str) -> Status:
    """Compare a dependency's current rules against the copy in a file.

    Whitespace surrounding the enclosed text is ignored, so a block whose
    rules only differ in leading or trailing blank lines is still present.

    Args:
        name: Dependency name
        rule_content: Current text of the dependency's usage-rules file
        file_content: Current text of the target file

    Returns:
        PRESENT if the block matches, STALE if it differs, MISSING if the
        file holds no block for ``name``
    """
    region = split_region(file_content, start_marker(name), end_marker(name))
    if region is None:
        return Status.MISSING

    _, current, _ = region
    if current.strip() == expected_block_body(name, rule_content).strip():
        return Status.PRESENT
    return Status.STALE
