"""Usage-rules block merging and status classification."""

from usage_rules.compose.markers import (
    WRAPPER_END,
    WRAPPER_START,
    end_marker,
    split_region,
    start_marker,
)
from usage_rules.compose.merger import build_block, build_wrapper, merge
from usage_rules.compose.status import Status, classify

__all__ = [
    "WRAPPER_START",
    "WRAPPER_END",
    "start_marker",
    "end_marker",
    "split_region",
    "build_block",
    "build_wrapper",
    "merge",
    "Status",
    "classify",
]
