"""Tree traversal strategies for JournalTreeLib.

Traversers implement the algorithms for walking the two tree kinds. All of
them use an explicit stack instead of recursion, so very deep (degenerate)
trees don't hit the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, NamedTuple, Optional, Tuple, Union

from ..config import Side, TraversalStrategy
from .node import BinaryNode, GeneralNode


class IndentedNode(NamedTuple):
    """A BST node annotated for rendering."""
    node: BinaryNode
    depth: int
    side: Side


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Subclasses yield every node reachable from ``root`` exactly once and
    never modify the tree. An absent root yields nothing.
    """

    strategy: TraversalStrategy

    @abstractmethod
    def traverse(self, root: Optional[Any]) -> Iterator[Any]:
        """Traverse the tree starting from root."""
        pass


class DepthFirstTraverser(TreeTraverser):
    """Pre-order traversal of a general tree.

    Yields ``(node, depth)`` with the root at depth 0. Children are visited
    in insertion order.
    """

    strategy = TraversalStrategy.DEPTH_FIRST

    def traverse(self, root: Optional[GeneralNode]) -> Iterator[Tuple[GeneralNode, int]]:
        if root is None:
            return
        stack: List[Tuple[GeneralNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            # Push in reverse so the first child is popped first
            for child in reversed(node.children()):
                stack.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """In-order (left, node, right) traversal of a BST.

    On a valid BST this yields nodes in ascending key order.
    """

    strategy = TraversalStrategy.IN_ORDER

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[BinaryNode]:
        stack: List[BinaryNode] = []
        current = root

        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right


class PreOrderTraverser(TreeTraverser):
    """Pre-order (node, left, right) traversal of a BST."""

    strategy = TraversalStrategy.PRE_ORDER

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[BinaryNode]:
        if root is None:
            return
        stack: List[BinaryNode] = [root]

        while stack:
            node = stack.pop()
            yield node
            # Right first so left comes off the stack first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


class PostOrderTraverser(TreeTraverser):
    """Post-order (left, right, node) traversal of a BST.

    Each stack entry carries a visited flag: a node is first pushed as
    pending, then re-pushed as visited above its children, and only emitted
    once it comes off the stack in the visited state.
    """

    strategy = TraversalStrategy.POST_ORDER

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[BinaryNode]:
        if root is None:
            return
        stack: List[Tuple[BinaryNode, bool]] = [(root, False)]

        while stack:
            node, visited = stack.pop()
            if visited:
                yield node
                continue

            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))


class IndentedTraverser(TreeTraverser):
    """Render-oriented pre-order traversal of a BST.

    Yields IndentedNode tuples in node, left, right order. ``depth`` counts
    edges from the root and ``side`` says which child slot of its parent the
    node occupies.
    """

    strategy = TraversalStrategy.INDENTED

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[IndentedNode]:
        if root is None:
            return
        stack: List[IndentedNode] = [IndentedNode(root, 0, Side.ROOT)]

        while stack:
            item = stack.pop()
            yield item
            node, depth = item.node, item.depth
            if node.right is not None:
                stack.append(IndentedNode(node.right, depth + 1, Side.RIGHT))
            if node.left is not None:
                stack.append(IndentedNode(node.left, depth + 1, Side.LEFT))


_STRATEGY_ALIASES = {
    'dfs': TraversalStrategy.DEPTH_FIRST,
    'depth_first': TraversalStrategy.DEPTH_FIRST,
    'in_order': TraversalStrategy.IN_ORDER,
    'inorder': TraversalStrategy.IN_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'indented': TraversalStrategy.INDENTED,
}

_TRAVERSERS = {
    TraversalStrategy.DEPTH_FIRST: DepthFirstTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.INDENTED: IndentedTraverser,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower().replace('-', '_') if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy name or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()
