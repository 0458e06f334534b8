"""Dependency model."""

from dataclasses import dataclass
from pathlib import Path

RULES_FILENAME = "usage-rules.md"


@dataclass(frozen=True)
class Dependency:
    """A project dependency with a usage-rules file.

    Attributes:
        name: Dependency name as reported by the resolver
        path: Root directory of the dependency
        rules_filename: Name of the rules file inside ``path``
    """

    name: str
    path: Path
    rules_filename: str = RULES_FILENAME

    @property
    def rules_path(self) -> Path:
        """Path to the dependency's usage-rules file."""
        return self.path / self.rules_filename

    def has_rules(self) -> bool:
        """Check whether the dependency ships a usage-rules file."""
        return self.rules_path.is_file()

    def read_rules(self) -> str:
        """Read the raw usage-rules text.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        with open(self.rules_path, encoding="utf-8", newline="") as f:
            return f.read()
