"""Target file storage."""

from usage_rules.store.local import LocalFileStore
from usage_rules.store.protocols import FileStore

__all__ = ["FileStore", "LocalFileStore"]
