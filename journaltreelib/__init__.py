"""JournalTreeLib - journal entries kept in classic tree structures.

JournalTreeLib stores diary entries in two independent trees:

━━━━━━━━━━━━━━━━━━━━━━━━━━
General (N-ary) tree:
    from journaltreelib import GeneralTree
    tree.insert(entry, parent_id)   # threads of replies

Binary search tree:
    from journaltreelib import BinarySearchTree
    bst.insert(key, entry)          # ordered by numeric key
━━━━━━━━━━━━━━━━━━━━━━━━━━

JournalSession bundles one of each with validation, rendering and an
operation log.
"""

__version__ = "0.1.0"

from .config import TraversalStrategy, Side, RenderConfig, TreeConfig
from .errors import (
    JournalTreeError,
    ParentNotFoundError,
    InvalidKeyError,
    DuplicateKeyError,
    EntryValidationError,
)
from .core import (
    TreeNode,
    GeneralNode,
    BinaryNode,
    GeneralTree,
    BinarySearchTree,
    IndentedNode,
    create_traverser,
    DataCollector,
    FullNodeCollector,
    EntryCollector,
    MetadataCollector,
    KeyCollector,
    IdentifierCollector,
    CustomCollector,
)
from .api import (
    traverse_tree,
    collect_tree_data,
    collect_keys,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    tree_height,
    get_tree_stats,
)
from .journal import JournalEntry, build_entry, new_entry_id, now_stamp
from .render import render_general, render_binary, format_traversal, TRAVERSAL_LABELS
from .session import JournalSession, Operation

__all__ = [
    "__version__",
    # Config
    "TraversalStrategy",
    "Side",
    "RenderConfig",
    "TreeConfig",
    # Errors
    "JournalTreeError",
    "ParentNotFoundError",
    "InvalidKeyError",
    "DuplicateKeyError",
    "EntryValidationError",
    # Core
    "TreeNode",
    "GeneralNode",
    "BinaryNode",
    "GeneralTree",
    "BinarySearchTree",
    "IndentedNode",
    "create_traverser",
    "DataCollector",
    "FullNodeCollector",
    "EntryCollector",
    "MetadataCollector",
    "KeyCollector",
    "IdentifierCollector",
    "CustomCollector",
    # API
    "traverse_tree",
    "collect_tree_data",
    "collect_keys",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "tree_height",
    "get_tree_stats",
    # Journal
    "JournalEntry",
    "build_entry",
    "new_entry_id",
    "now_stamp",
    "render_general",
    "render_binary",
    "format_traversal",
    "TRAVERSAL_LABELS",
    "JournalSession",
    "Operation",
]
