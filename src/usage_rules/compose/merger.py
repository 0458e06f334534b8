"""Merge dependency usage-rules blocks into target file content.

Each dependency gets a block delimited by its own marker comments, and all
blocks live inside a single ``package-rules`` wrapper region:

    <-- package-rules-start -->
    <-- foo-start -->
    ## foo usage
    ...
    <-- foo-end -->
    <-- package-rules-end -->

Merging is literal string splicing. Existing blocks are replaced in place,
new blocks are appended to the end of the wrapper, and everything outside the
wrapper is left byte-for-byte as it was.
"""

from collections.abc import Sequence

from usage_rules.compose.markers import (
    WRAPPER_END,
    WRAPPER_START,
    end_marker,
    split_region,
    start_marker,
)


def build_block(name: str, rules: str) -> str:
    """Build the delimited block for one dependency.

    Args:
        name: Dependency name
        rules: Raw usage-rules text (not trimmed)

    Returns:
        Block text, start marker through end marker
    """
    return f"{start_marker(name)}\n## {name} usage\n{rules}\n{end_marker(name)}"


def build_wrapper(blocks: Sequence[tuple[str, str]]) -> str:
    """Build a complete wrapper region holding the given blocks."""
    body = "\n".join(build_block(name, rules) for name, rules in blocks)
    return f"{WRAPPER_START}{body}{WRAPPER_END}"


def merge(current_content: str, blocks: Sequence[tuple[str, str]]) -> str:
    """Merge dependency blocks into existing file content.

    Args:
        current_content: Current text of the target file ("" for a new file)
        blocks: Ordered (name, raw rules text) pairs

    Returns:
        Updated file content. Returns ``current_content`` unchanged when
        ``blocks`` is empty.
    """
    if not blocks:
        return current_content

    wrapper = split_region(current_content, WRAPPER_START, WRAPPER_END)

    if wrapper is None:
        # First run against this file: append a fresh wrapper
        if not current_content:
            return build_wrapper(blocks)
        return current_content + "\n" + build_wrapper(blocks)

    prelude, body, postlude = wrapper

    for name, rules in blocks:
        body = _upsert_block(body, name, rules)

    return prelude + WRAPPER_START + body + WRAPPER_END + postlude


def _upsert_block(body: str, name: str, rules: str) -> str:
    """Replace a dependency's block inside the wrapper body, or append it."""
    block = build_block(name, rules)
    existing = split_region(body, start_marker(name) + "\n", "\n" + end_marker(name))

    if existing is None:
        return body + "\n" + block

    before, _, after = existing
    return before + block + after
