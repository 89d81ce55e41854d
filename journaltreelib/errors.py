"""Exceptions raised by JournalTreeLib.

Every insert either fully succeeds or raises one of these before touching
the tree, so callers can report the problem and retry.
"""

from typing import Any


class JournalTreeError(Exception):
    """Base class for all JournalTreeLib errors."""
    pass


class ParentNotFoundError(JournalTreeError, LookupError):
    """Raised when a general-tree insert names a parent id that doesn't exist."""

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__(f"No node with parent id {parent_id!r} exists in the general tree")


class InvalidKeyError(JournalTreeError, ValueError):
    """Raised when a BST key is not a finite number."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"BST key must be a finite number, got {key!r}")


class DuplicateKeyError(JournalTreeError, ValueError):
    """Raised when a BST key is already present in the tree."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Duplicate key {key!r}: use a unique key for the BST")


class EntryValidationError(JournalTreeError, ValueError):
    """Raised when a journal entry is missing a required field."""
    pass
