"""Data collection strategies for JournalTreeLib.

DataCollectors define what information to extract from nodes during traversal.
This allows the same traversal to feed a listing of keys, a list of entries,
or anything a caller needs.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from .general import default_identifier
from .node import BinaryNode, TreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Depth of the node (root is 0)

        Returns:
            Collected data (type depends on collector)
        """
        pass


class FullNodeCollector(DataCollector):
    """Returns the node itself."""

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class EntryCollector(DataCollector):
    """Returns the entry payload stored in each node."""

    def collect(self, node: TreeNode, depth: int) -> Any:
        return node.entry


class MetadataCollector(DataCollector):
    """Returns structural metadata from each node.

    Useful for showing child counts or a BST node's neighbour keys
    without touching the entry.
    """

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        return node.metadata()


class KeyCollector(DataCollector):
    """Returns BST keys. Nodes without a key yield None."""

    def collect(self, node: TreeNode, depth: int) -> Optional[float]:
        if isinstance(node, BinaryNode):
            return node.key
        return None


class IdentifierCollector(DataCollector):
    """Returns the identifier of each node's entry.

    Uses the same lookup the general tree uses for parent ids unless another
    ``identify`` callable is supplied.
    """

    def __init__(self, identify: Optional[Callable[[Any], Any]] = None):
        self._identify = identify or default_identifier

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self._identify(node.entry)


class CustomCollector(DataCollector):
    """Wraps a user-supplied ``func(node, depth)``."""

    def __init__(self, func: Callable[[TreeNode, int], Any]):
        self.func = func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.func(node, depth)
