"""Marker strings and region splitting for managed blocks."""

from typing import Optional

WRAPPER_NAME = "package-rules"


def start_marker(name: str) -> str:
    """Return the start marker comment for a block name."""
    return f"<-- {name}-start -->"


def end_marker(name: str) -> str:
    """Return the end marker comment for a block name."""
    return f"<-- {name}-end -->"


WRAPPER_START = start_marker(WRAPPER_NAME) + "\n"
WRAPPER_END = "\n" + end_marker(WRAPPER_NAME)


def split_region(
    content: str, start: str, end: str
) -> Optional[tuple[str, str, str]]:
    """Split content into (prelude, body, postlude) around a marker pair.

    Marker occurrences are scanned left to right without overlap. The region
    is only found when the content holds exactly one ``start`` followed by
    exactly one ``end``; any other arrangement (missing, repeated or reversed
    markers) returns None.

    Args:
        content: Text to search
        start: Literal start marker
        end: Literal end marker

    Returns:
        Tuple of the text before ``start``, between the markers and after
        ``end``, or None when the markers do not delimit a single region
    """
    hits: list[tuple[int, str]] = []
    pos = 0

    while True:
        start_at = content.find(start, pos)
        end_at = content.find(end, pos)
        candidates = [(i, m) for i, m in ((start_at, start), (end_at, end)) if i != -1]
        if not candidates:
            break

        # Leftmost wins; on a tie prefer the longer marker
        at, marker = min(candidates, key=lambda c: (c[0], -len(c[1])))
        hits.append((at, marker))
        if len(hits) > 2:
            return None
        pos = at + len(marker)

    if len(hits) != 2:
        return None

    (first_at, first), (second_at, second) = hits
    if first != start or second != end:
        return None

    return (
        content[:first_at],
        content[first_at + len(start) : second_at],
        content[second_at + len(end) :],
    )
