"""General (N-ary) tree of journal entries.

Entries hang under an explicit parent, located by identifier, or under the
root by default. Think of replies to replies in a discussion thread.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Generic, List, Optional, Tuple

from ..errors import ParentNotFoundError
from .node import E, GeneralNode
from .traverser import DepthFirstTraverser

logger = logging.getLogger(__name__)


def default_identifier(entry: Any) -> Any:
    """Read an entry's identifier from its ``id`` key or attribute."""
    if isinstance(entry, Mapping):
        return entry.get('id')
    return getattr(entry, 'id', None)


class GeneralTree(Generic[E]):
    """N-ary tree with a single root.

    Insertion only appends, so the structure can never contain a cycle and
    every node stays reachable from the root.
    """

    def __init__(self, identify: Optional[Callable[[E], Any]] = None):
        """Initialize an empty tree.

        Args:
            identify: Returns the identifier of an entry; used when looking
                up a parent. Defaults to default_identifier.
        """
        self.root: Optional[GeneralNode[E]] = None
        self.size = 0
        self._identify = identify or default_identifier
        self._traverser = DepthFirstTraverser()

    def __len__(self) -> int:
        return self.size

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, entry: E, parent_id: Optional[str] = None) -> GeneralNode[E]:
        """Insert an entry and return its new node.

        - Empty tree: the node becomes the root and parent_id is ignored.
        - parent_id given: the node is appended under the matching node.
        - No parent_id: the node is appended under the root.

        Looking up a parent is O(n) since there is no id index.

        Raises:
            ParentNotFoundError: If no node has an identifier equal to parent_id
        """
        if self.root is None:
            node = GeneralNode(entry)
            self.root = node
            self.size += 1
            logger.debug("General tree root set to %r", self._identify(entry))
            return node

        if parent_id:
            parent = self.find_by_id(parent_id)
            if parent is None:
                raise ParentNotFoundError(parent_id)
        else:
            parent = self.root

        node = GeneralNode(entry)
        parent.add_child(node)
        self.size += 1
        logger.debug("Inserted %r under %r", self._identify(entry), self._identify(parent.entry))
        return node

    def find_by_id(self, node_id: Any) -> Optional[GeneralNode[E]]:
        """Return the first node, in pre-order, whose entry has ``node_id``.

        Returns None if nothing matches or the tree is empty.
        """
        for node, _ in self._traverser.traverse(self.root):
            if self._identify(node.entry) == node_id:
                return node
        return None

    def dfs(self) -> List[Tuple[GeneralNode[E], int]]:
        """Return every node paired with its depth, in pre-order.

        The list is built eagerly so callers get a stable count.
        """
        return list(self._traverser.traverse(self.root))

    def __repr__(self) -> str:
        return f"GeneralTree(size={self.size})"
