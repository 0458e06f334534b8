"""Tests for finding dependencies with usage rules."""

from usage_rules.core.dependency import Dependency
from usage_rules.core.scanner import scan


class TestScan:
    """Test dependency scanning."""

    def test_only_dependencies_with_rules(self, dependency_map):
        """Test dependencies without a rules file are left out."""
        result = scan(dependency_map)

        assert [dep.name for dep in result] == ["foo", "bar"]

    def test_preserves_caller_order(self, deps_dir):
        """Test results follow the mapping's insertion order."""
        mapping = {"bar": deps_dir / "bar", "foo": deps_dir / "foo"}

        assert [dep.name for dep in scan(mapping)] == ["bar", "foo"]

    def test_filter_by_name(self, dependency_map):
        """Test only requested names are returned."""
        result = scan(dependency_map, only={"bar"})

        assert [dep.name for dep in result] == ["bar"]
        assert result[0].path == dependency_map["bar"]

    def test_filter_drops_names_without_rules(self, dependency_map):
        """Test requested names without rules are silently dropped."""
        result = scan(dependency_map, only={"baz", "foo", "unknown"})

        assert [dep.name for dep in result] == ["foo"]

    def test_empty_filter_returns_nothing(self, dependency_map):
        """Test an empty filter selects no dependencies."""
        assert scan(dependency_map, only=set()) == []

    def test_empty_mapping(self):
        """Test scanning no dependencies."""
        assert scan({}) == []

    def test_missing_directory(self, tmp_path):
        """Test a dependency whose directory is gone is skipped."""
        assert scan({"gone": tmp_path / "gone"}) == []

    def test_directory_named_like_rules_file(self, tmp_path, make_dep):
        """Test a directory called usage-rules.md does not count."""
        dep_dir = make_dep(tmp_path, "odd")
        (dep_dir / "usage-rules.md").mkdir()

        assert scan({"odd": dep_dir}) == []

    def test_custom_rules_filename(self, tmp_path, make_dep):
        """Test scanning for a differently named rules file."""
        dep_dir = make_dep(tmp_path, "custom")
        (dep_dir / "AGENTS.md").write_text("custom rules")

        result = scan({"custom": dep_dir}, rules_filename="AGENTS.md")

        assert result == [Dependency("custom", dep_dir, "AGENTS.md")]
        assert result[0].read_rules() == "custom rules"

    def test_accepts_string_paths(self, deps_dir):
        """Test paths given as strings are converted."""
        result = scan({"foo": str(deps_dir / "foo")})

        assert result[0].rules_path == deps_dir / "foo" / "usage-rules.md"


class TestDependency:
    """Test the dependency model."""

    def test_read_rules_is_raw(self, tmp_path, make_dep):
        """Test rules text is returned without trimming."""
        dep_dir = make_dep(tmp_path, "raw", "\n  spaced rules  \n\n")

        dependency = Dependency("raw", dep_dir)

        assert dependency.has_rules()
        assert dependency.read_rules() == "\n  spaced rules  \n\n"

    def test_read_rules_keeps_line_endings(self, tmp_path):
        """Test CRLF and CR line endings survive the read."""
        dep_dir = tmp_path / "foo"
        dep_dir.mkdir()
        (dep_dir / "usage-rules.md").write_bytes(b"line1\r\nline2\rline3")

        assert Dependency("foo", dep_dir).read_rules() == "line1\r\nline2\rline3"
