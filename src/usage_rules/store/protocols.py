"""Abstract interface for reading and writing target files."""

from pathlib import Path
from typing import Optional, Protocol


class FileStore(Protocol):
    """Abstract interface for the files usage rules are merged into."""

    def exists(self, path: Path) -> bool:
        """Check whether a file exists, counting staged writes."""
        ...

    def read(self, path: Path) -> Optional[str]:
        """Read a file's current content.

        Args:
            path: File to read

        Returns:
            The content, or None if the file does not exist

        Raises:
            OSError: If the file exists but cannot be read
            UnicodeDecodeError: If the file is not valid text
        """
        ...

    def read_raw(self, path: Path) -> Optional[str]:
        """Read a file's bytes directly, decoding leniently.

        Returns:
            The content, or None if the file cannot be read at all
        """
        ...

    def write(self, path: Path, content: str) -> None:
        """Create or replace a file's content.

        Args:
            path: File to write
            content: Complete new content
        """
        ...
