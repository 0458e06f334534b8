"""Local filesystem store with staged writes.

Writes are held in memory until :meth:`LocalFileStore.flush` is called, and
reads see staged content before anything on disk. A task can therefore compute
all of its changes first, then either commit them or show them as a diff.
"""

import difflib
import os
import tempfile
from pathlib import Path
from typing import Optional

from usage_rules.utils.paths import ensure_dir


class LocalFileStore:
    """File store backed by the local filesystem."""

    def __init__(self, encoding: str = "utf-8"):
        """Initialize the store.

        Args:
            encoding: Text encoding for reads and writes
        """
        self.encoding = encoding
        self._pending: dict[Path, str] = {}

    def exists(self, path: Path) -> bool:
        """Check whether a file exists on disk or has a staged write."""
        return Path(path) in self._pending or Path(path).is_file()

    def read(self, path: Path) -> Optional[str]:
        """Read a file, preferring staged content over disk.

        Args:
            path: File to read

        Returns:
            File content, or None if the file does not exist

        Raises:
            OSError: If the file exists but cannot be read
            UnicodeDecodeError: If the file is not valid text
        """
        path = Path(path)
        if path in self._pending:
            return self._pending[path]
        if not path.is_file():
            return None
        return self._read_disk(path)

    def _read_disk(self, path: Path) -> str:
        with open(path, encoding=self.encoding, newline="") as f:
            return f.read()

    def read_raw(self, path: Path) -> Optional[str]:
        """Read a file's bytes from disk, replacing undecodable sequences.

        Returns:
            Decoded content, or None if the file cannot be read
        """
        try:
            return Path(path).read_bytes().decode(self.encoding, errors="replace")
        except OSError:
            return None

    def write(self, path: Path, content: str) -> None:
        """Stage new content for a file."""
        self._pending[Path(path)] = content

    @property
    def pending(self) -> dict[Path, str]:
        """Staged writes keyed by path."""
        return dict(self._pending)

    def diff(self, path: Path) -> str:
        """Return a unified diff between disk and the staged content."""
        path = Path(path)
        if path not in self._pending:
            return ""

        before = self._read_disk(path) if path.is_file() else ""
        after = self._pending[path]

        return "".join(
            difflib.unified_diff(
                before.splitlines(keepends=True),
                after.splitlines(keepends=True),
                fromfile=f"a/{path.name}",
                tofile=f"b/{path.name}",
            )
        )

    def flush(self) -> list[Path]:
        """Write all staged files to disk atomically.

        Returns:
            Paths that were written
        """
        written = []

        for path, content in self._pending.items():
            _atomic_write(path, content, self.encoding)
            written.append(path)

        self._pending.clear()
        return written


def _atomic_write(path: Path, content: str, encoding: str) -> None:
    """Write content via a temp file in the same directory and rename it."""
    ensure_dir(path.parent)

    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )

    try:
        # newline="" keeps line endings exactly as merged
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        else:
            # mkstemp creates 0600; new files follow the umask instead
            os.chmod(tmp_path, 0o666 & ~_current_umask())

        os.replace(tmp_path, path)
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def _current_umask() -> int:
    """Return the process umask without changing it."""
    mask = os.umask(0)
    os.umask(mask)
    return mask
