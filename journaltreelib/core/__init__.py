"""Core data structures for JournalTreeLib.

This package contains the node types, the two trees and the traversal and
collection strategies they are built on.
"""

from .node import TreeNode, GeneralNode, BinaryNode
from .traverser import (
    TreeTraverser,
    DepthFirstTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    IndentedTraverser,
    IndentedNode,
    create_traverser,
    parse_strategy,
)
from .collector import (
    DataCollector,
    FullNodeCollector,
    EntryCollector,
    MetadataCollector,
    KeyCollector,
    IdentifierCollector,
    CustomCollector,
)
from .general import GeneralTree, default_identifier
from .binary import BinarySearchTree, is_valid_key

__all__ = [
    "TreeNode",
    "GeneralNode",
    "BinaryNode",
    "TreeTraverser",
    "DepthFirstTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "IndentedTraverser",
    "IndentedNode",
    "create_traverser",
    "parse_strategy",
    "DataCollector",
    "FullNodeCollector",
    "EntryCollector",
    "MetadataCollector",
    "KeyCollector",
    "IdentifierCollector",
    "CustomCollector",
    "GeneralTree",
    "default_identifier",
    "BinarySearchTree",
    "is_valid_key",
]
