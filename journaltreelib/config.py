"""Configuration system for JournalTreeLib.

This module defines how callers pick a traversal and how trees are rendered
as text, along with the session-level configuration bundle.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalStrategy(Enum):
    """How to walk a tree.

    DEPTH_FIRST applies to the general tree; the rest apply to the BST.
    """
    DEPTH_FIRST = "dfs"           # General tree, node before children
    IN_ORDER = "in_order"         # Left, node, right (ascending keys)
    PRE_ORDER = "pre_order"       # Node, left, right
    POST_ORDER = "post_order"     # Left, right, node
    INDENTED = "indented"         # Pre-order with depth and side for rendering

    @property
    def is_binary(self) -> bool:
        """True for strategies that only make sense on a BST."""
        return self is not TraversalStrategy.DEPTH_FIRST


class Side(str, Enum):
    """Position of a BST node relative to its parent."""
    ROOT = "root"
    LEFT = "L"
    RIGHT = "R"

    def __str__(self) -> str:
        return self.value


@dataclass
class RenderConfig:
    """Configuration for plain-text tree rendering."""

    indent: str = "  "                 # One indentation step
    max_general_indent: int = 8        # Indentation cap for the general tree
    max_binary_indent: int = 10        # Indentation cap for the BST

    def indent_for(self, depth: int, cap: int) -> str:
        """Return the indentation prefix for a node at ``depth``."""
        return self.indent * min(depth, cap)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if self.max_general_indent < 0:
            errors.append("max_general_indent cannot be negative")
        if self.max_binary_indent < 0:
            errors.append("max_binary_indent cannot be negative")
        return errors


@dataclass
class TreeConfig:
    """Complete configuration for a journal session.

    ``identify`` overrides how the general tree reads an entry's identifier;
    leave it as None to use the ``id`` key or attribute.
    """

    render: RenderConfig = field(default_factory=RenderConfig)
    identify: Optional[Callable[[Any], str]] = None

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = list(self.render.validate())
        if self.identify is not None and not callable(self.identify):
            errors.append("identify must be callable")
        return errors
