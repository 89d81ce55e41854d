"""Binary search tree of journal entries, keyed by number."""

import logging
import math
import numbers
from typing import Any, Generic, List, Optional

from ..errors import DuplicateKeyError, InvalidKeyError
from .node import BinaryNode, E
from .traverser import (
    IndentedNode,
    IndentedTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
)

logger = logging.getLogger(__name__)


def is_valid_key(key: Any) -> bool:
    """Check that ``key`` is a finite real number (booleans excluded)."""
    if isinstance(key, bool) or not isinstance(key, numbers.Real):
        return False
    # Ints of any size are finite; isfinite would overflow converting huge ones
    if isinstance(key, numbers.Integral):
        return True
    return math.isfinite(key)


class BinarySearchTree(Generic[E]):
    """Unbalanced BST with unique keys.

    Smaller keys go left, greater keys go right and equal keys are rejected.
    Inserts are O(log n) on average and O(n) for sorted input; no
    rebalancing is performed.
    """

    def __init__(self):
        self.root: Optional[BinaryNode[E]] = None
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, key: float, entry: E) -> BinaryNode[E]:
        """Insert an entry under ``key`` and return its new node.

        Raises:
            InvalidKeyError: If key is not a finite number
            DuplicateKeyError: If key is already in the tree
        """
        if not is_valid_key(key):
            raise InvalidKeyError(key)

        if self.root is None:
            self.root = BinaryNode(key, entry)
            self.size += 1
            logger.debug("BST root set to key %r", key)
            return self.root

        current = self.root
        while True:
            if key == current.key:
                raise DuplicateKeyError(key)
            if key < current.key:
                if current.left is None:
                    current.left = BinaryNode(key, entry)
                    self.size += 1
                    logger.debug("Inserted key %r left of %r", key, current.key)
                    return current.left
                current = current.left
            else:
                if current.right is None:
                    current.right = BinaryNode(key, entry)
                    self.size += 1
                    logger.debug("Inserted key %r right of %r", key, current.key)
                    return current.right
                current = current.right

    def find(self, key: Any) -> Optional[BinaryNode[E]]:
        """Return the node holding ``key``, or None."""
        if not is_valid_key(key):
            return None
        current = self.root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def in_order(self) -> List[BinaryNode[E]]:
        """Nodes in ascending key order."""
        return list(InOrderTraverser().traverse(self.root))

    def pre_order(self) -> List[BinaryNode[E]]:
        """Nodes as node, left subtree, right subtree."""
        return list(PreOrderTraverser().traverse(self.root))

    def post_order(self) -> List[BinaryNode[E]]:
        """Nodes as left subtree, right subtree, node."""
        return list(PostOrderTraverser().traverse(self.root))

    def as_indented(self) -> List[IndentedNode]:
        """Pre-order nodes with their depth and side, for rendering."""
        return list(IndentedTraverser().traverse(self.root))

    def __repr__(self) -> str:
        return f"BinarySearchTree(size={self.size})"
