"""Node types for JournalTreeLib.

Nodes are plain data containers. A parent owns its children outright and
no node keeps a reference back to its parent, so depth and side are always
computed top-down by the traversers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

E = TypeVar("E")


class TreeNode(ABC, Generic[E]):
    """Abstract base class for nodes in both tree kinds.

    Holds an opaque entry payload. The tree never interprets the entry,
    except for the general tree reading its identifier during parent lookup.
    """

    def __init__(self, entry: E):
        self.entry = entry

    @abstractmethod
    def children(self) -> List["TreeNode[E]"]:
        """Return present children in visiting order."""
        pass

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children()

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight structural information about this node."""
        pass


class GeneralNode(TreeNode[E]):
    """Node of an N-ary tree.

    Children keep their insertion order and are never reordered.
    """

    def __init__(self, entry: E):
        super().__init__(entry)
        self._children: List["GeneralNode[E]"] = []

    def add_child(self, child: "GeneralNode[E]") -> None:
        """Append a child node. O(1) amortized."""
        self._children.append(child)

    def children(self) -> List["GeneralNode[E]"]:
        return list(self._children)

    @property
    def child_count(self) -> int:
        return len(self._children)

    def metadata(self) -> Dict[str, Any]:
        return {
            'type': 'general',
            'children': len(self._children),
        }

    def __repr__(self) -> str:
        return f"GeneralNode(entry={self.entry!r}, children={len(self._children)})"


class BinaryNode(TreeNode[E]):
    """Node of a binary search tree, ordered by ``key``."""

    def __init__(self, key: float, entry: E):
        super().__init__(entry)
        self.key = key
        self.left: Optional["BinaryNode[E]"] = None
        self.right: Optional["BinaryNode[E]"] = None

    def children(self) -> List["BinaryNode[E]"]:
        return [child for child in (self.left, self.right) if child is not None]

    def metadata(self) -> Dict[str, Any]:
        return {
            'type': 'binary',
            'key': self.key,
            'left': self.left.key if self.left is not None else None,
            'right': self.right.key if self.right is not None else None,
        }

    def __repr__(self) -> str:
        return f"BinaryNode(key={self.key!r})"
