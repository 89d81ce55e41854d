"""High-level API for JournalTreeLib.

This module provides simple, functional interfaces over both tree kinds.
These functions wrap the traversers and collectors for ease of use in
simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import TraversalStrategy
from .core.binary import BinarySearchTree
from .core.collector import DataCollector, FullNodeCollector, KeyCollector
from .core.general import GeneralTree
from .core.node import TreeNode
from .core.traverser import create_traverser, parse_strategy

Tree = Union[GeneralTree, BinarySearchTree]
StrategyLike = Union[TraversalStrategy, str, None]


def traverse_tree(tree: Tree, strategy: StrategyLike = None) -> List[TreeNode]:
    """Return the nodes of a tree in traversal order.

    Args:
        tree: A GeneralTree or BinarySearchTree
        strategy: Traversal strategy; defaults to DFS for a general tree
            and in-order for a BST

    Returns:
        List of nodes

    Example:
        >>> bst = BinarySearchTree()
        >>> for key in (50, 25, 75):
        ...     bst.insert(key, {'id': str(key)})
        >>> [n.key for n in traverse_tree(bst, 'pre_order')]
        [50, 25, 75]
    """
    return [node for node, _ in _walk(tree, strategy)]


def collect_tree_data(
    tree: Tree,
    strategy: StrategyLike = None,
    collector: Optional[DataCollector] = None,
) -> List[Tuple[TreeNode, Any]]:
    """Traverse a tree and collect data from each node.

    Args:
        tree: A GeneralTree or BinarySearchTree
        strategy: Traversal strategy (see traverse_tree)
        collector: What to extract from each node; defaults to the node itself

    Returns:
        List of (node, collected_data) tuples
    """
    collector = collector or FullNodeCollector()
    return [(node, collector.collect(node, depth)) for node, depth in _walk(tree, strategy)]


def collect_keys(tree: BinarySearchTree, strategy: StrategyLike = TraversalStrategy.IN_ORDER) -> List[float]:
    """Return BST keys in the given traversal order."""
    return [key for _, key in collect_tree_data(tree, strategy, KeyCollector())]


def count_nodes(tree: Tree) -> int:
    """Count the nodes reachable from the root.

    Always matches ``tree.size`` since nodes are never removed.
    """
    count = 0
    for _ in _walk(tree, None):
        count += 1
    return count


def find_nodes(
    tree: Tree,
    predicate: Callable[[TreeNode], bool],
    strategy: StrategyLike = None,
) -> List[TreeNode]:
    """Return the nodes that match a predicate, in traversal order.

    Example:
        >>> happy = find_nodes(tree, lambda n: n.entry['mood'] == 'Joy')
    """
    return [node for node in traverse_tree(tree, strategy) if predicate(node)]


def get_leaf_nodes(tree: Tree, strategy: StrategyLike = None) -> List[TreeNode]:
    """Return nodes without children."""
    return find_nodes(tree, lambda node: node.is_leaf(), strategy)


def tree_height(tree: Tree) -> int:
    """Number of levels in the tree (0 when empty, 1 for a lone root)."""
    height = 0
    for _, depth in _walk(tree, None):
        height = max(height, depth + 1)
    return height


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with tree statistics. A BST also reports its smallest
        and largest keys (None when empty).

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for node, depth in _walk(tree, None):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    if isinstance(tree, BinarySearchTree):
        keys = collect_keys(tree)
        stats['min_key'] = keys[0] if keys else None
        stats['max_key'] = keys[-1] if keys else None

    return stats


# Helper functions

def _resolve_strategy(tree: Tree, strategy: StrategyLike) -> TraversalStrategy:
    """Pick the default strategy for a tree and check compatibility.

    Raises:
        ValueError: If the strategy doesn't apply to this kind of tree
    """
    if isinstance(tree, GeneralTree):
        resolved = parse_strategy(strategy) if strategy is not None else TraversalStrategy.DEPTH_FIRST
        if resolved.is_binary:
            raise ValueError(f"Strategy {resolved.value!r} only applies to a binary search tree")
        return resolved

    if isinstance(tree, BinarySearchTree):
        resolved = parse_strategy(strategy) if strategy is not None else TraversalStrategy.IN_ORDER
        if not resolved.is_binary:
            raise ValueError(f"Strategy {resolved.value!r} only applies to a general tree")
        return resolved

    raise TypeError(f"Expected GeneralTree or BinarySearchTree, got {type(tree).__name__}")


def _walk(tree: Tree, strategy: StrategyLike) -> Iterator[Tuple[TreeNode, int]]:
    """Yield (node, depth) pairs for any supported tree and strategy."""
    resolved = _resolve_strategy(tree, strategy)

    if resolved is TraversalStrategy.DEPTH_FIRST:
        yield from create_traverser(resolved).traverse(tree.root)
        return

    # Binary traversers don't track depth; take it from the indented walk
    indented = tree.as_indented()
    if resolved is TraversalStrategy.INDENTED:
        for item in indented:
            yield (item.node, item.depth)
        return

    depths = {id(item.node): item.depth for item in indented}
    for node in create_traverser(resolved).traverse(tree.root):
        yield (node, depths[id(node)])
