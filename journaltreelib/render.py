"""Plain-text rendering of journal trees."""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .config import RenderConfig, TraversalStrategy
from .core.binary import BinarySearchTree
from .core.general import GeneralTree
from .core.node import BinaryNode

TRAVERSAL_LABELS = {
    TraversalStrategy.IN_ORDER: "IN-ORDER (left, node, right)",
    TraversalStrategy.PRE_ORDER: "PRE-ORDER (node, left, right)",
    TraversalStrategy.POST_ORDER: "POST-ORDER (left, right, node)",
}


def entry_field(entry: Any, name: str, default: str = "") -> Any:
    """Read a field from a mapping or an attribute-style entry."""
    if isinstance(entry, Mapping):
        return entry.get(name, default)
    return getattr(entry, name, default)


def render_general(tree: GeneralTree, config: Optional[RenderConfig] = None) -> str:
    """Render the general tree, one pre-order line per entry.

    Indentation follows depth, capped at ``config.max_general_indent``.
    An empty tree renders as an empty string.
    """
    config = config or RenderConfig()
    lines: List[str] = []

    for node, depth in tree.dfs():
        entry = node.entry
        prefix = config.indent_for(depth, config.max_general_indent)
        lines.append(
            f"{prefix}{entry_field(entry, 'title')} "
            f"[{entry_field(entry, 'created_at')} · {entry_field(entry, 'mood')}] "
            f"id={entry_field(entry, 'id')} depth={depth} children={node.child_count}"
        )

    return "\n".join(lines)


def render_binary(tree: BinarySearchTree, config: Optional[RenderConfig] = None) -> str:
    """Render the BST from its indented traversal.

    Each line shows the key, the side relative to the parent, the depth and
    the keys of both children (``null`` when absent).
    """
    config = config or RenderConfig()
    lines: List[str] = []

    for node, depth, side in tree.as_indented():
        prefix = config.indent_for(depth, config.max_binary_indent)
        left = node.left.key if node.left is not None else "null"
        right = node.right.key if node.right is not None else "null"
        lines.append(
            f"{prefix}[{side}] key={node.key} depth={depth} "
            f"{entry_field(node.entry, 'title')} (left: {left}, right: {right})"
        )

    return "\n".join(lines)


def format_traversal(label: str, nodes: Iterable[BinaryNode]) -> str:
    """Summarize a traversal as its label, key list and count."""
    keys = [node.key for node in nodes]
    return f"{label}\nkeys: [{', '.join(str(key) for key in keys)}]\ncount: {len(keys)}"
