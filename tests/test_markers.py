"""Tests for marker strings and region splitting."""

from usage_rules.compose.markers import (
    WRAPPER_END,
    WRAPPER_START,
    end_marker,
    split_region,
    start_marker,
)


class TestMarkers:
    """Test marker construction."""

    def test_start_and_end_markers(self):
        """Test markers use the arrow comment format."""
        assert start_marker("foo") == "<-- foo-start -->"
        assert end_marker("foo") == "<-- foo-end -->"

    def test_wrapper_markers_carry_newlines(self):
        """Test wrapper markers include their separating newlines."""
        assert WRAPPER_START == "<-- package-rules-start -->\n"
        assert WRAPPER_END == "\n<-- package-rules-end -->"


class TestSplitRegion:
    """Test splitting content into prelude, body and postlude."""

    def test_single_region(self):
        """Test a single well-ordered marker pair is found."""
        result = split_region("before[S]inside[E]after", "[S]", "[E]")
        assert result == ("before", "inside", "after")

    def test_region_at_edges(self):
        """Test markers at the very start and end of the content."""
        assert split_region("[S][E]", "[S]", "[E]") == ("", "", "")

    def test_no_markers(self):
        """Test content without markers is not split."""
        assert split_region("plain text", "[S]", "[E]") is None

    def test_empty_content(self):
        """Test empty content is not split."""
        assert split_region("", "[S]", "[E]") is None

    def test_start_without_end(self):
        """Test a lone start marker is not a region."""
        assert split_region("a[S]b", "[S]", "[E]") is None

    def test_end_before_start(self):
        """Test reversed markers are not a region."""
        assert split_region("a[E]b[S]c", "[S]", "[E]") is None

    def test_duplicate_regions(self):
        """Test two marker pairs are not treated as one region."""
        assert split_region("[S]a[E][S]b[E]", "[S]", "[E]") is None

    def test_repeated_start(self):
        """Test two start markers and no end is not a region."""
        assert split_region("[S]a[S]b", "[S]", "[E]") is None

    def test_markers_are_literal(self):
        """Test markers are matched literally, not as patterns."""
        content = "x<-- a.b-start -->y<-- a.b-end -->z"
        assert split_region(content, start_marker("a.b"), end_marker("a.b")) == (
            "x",
            "y",
            "z",
        )
        assert split_region(content, start_marker("aXb"), end_marker("aXb")) is None

    def test_markers_do_not_overlap(self):
        """Test a newline shared by both markers is only consumed once."""
        content = "<-- x-start -->\n<-- x-end -->"
        assert split_region(content, "<-- x-start -->\n", "\n<-- x-end -->") is None

    def test_separate_newlines_are_split(self):
        """Test an empty body between newline-carrying markers is found."""
        content = "<-- x-start -->\n\n<-- x-end -->"
        assert split_region(content, "<-- x-start -->\n", "\n<-- x-end -->") == (
            "",
            "",
            "",
        )
