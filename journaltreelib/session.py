"""Journal session: one general tree and one BST owned by the caller.

A session replaces process-wide tree singletons. Each instance holds its own
trees and operation log, so several can coexist.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .config import TraversalStrategy, TreeConfig
from .core.binary import BinarySearchTree
from .core.general import GeneralTree
from .core.node import BinaryNode, GeneralNode
from .core.traverser import parse_strategy
from .errors import DuplicateKeyError, JournalTreeError
from .journal import JournalEntry, build_entry, now_stamp
from .render import TRAVERSAL_LABELS, format_traversal, render_binary, render_general

logger = logging.getLogger(__name__)


@dataclass
class Operation:
    """One line of the session's operation log."""
    message: str
    timestamp: str = field(default_factory=now_stamp)


class JournalSession:
    """Holds the trees of one journaling session.

    Example:
        >>> session = JournalSession()
        >>> root = session.add_general("Day one", "Started a diary.")
        >>> session.add_general("Reply", "A thread!", parent_id=root.entry.id)
        >>> print(session.render_general())
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create a session with empty trees.

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or TreeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.operations: List[Operation] = []
        self._new_trees()

    def _new_trees(self) -> None:
        self.general: GeneralTree[JournalEntry] = GeneralTree(identify=self.config.identify)
        self.binary: BinarySearchTree[JournalEntry] = BinarySearchTree()

    def _record(self, message: str) -> None:
        # Newest first
        self.operations.insert(0, Operation(message))
        logger.info(message)

    def add_general(
        self,
        title: str,
        content: str,
        mood: str = "",
        parent_id: Optional[str] = None,
    ) -> GeneralNode[JournalEntry]:
        """Build an entry and insert it into the general tree.

        Raises:
            EntryValidationError: If title or content is empty
            ParentNotFoundError: If parent_id matches no entry
        """
        parent_id = (parent_id or "").strip() or None
        try:
            entry = build_entry(title, content, mood, prefix="g")
            node = self.general.insert(entry, parent_id)
        except JournalTreeError as err:
            logger.warning("General tree insert rejected: %s", err)
            raise

        placement = f"as child of {parent_id}" if parent_id else "at root/child of root"
        self._record(f"GeneralTree.insert(): added {entry.title!r} (id={entry.id}) {placement}")
        return node

    def add_binary(
        self,
        key: float,
        title: str,
        content: str,
        mood: str = "",
    ) -> BinaryNode[JournalEntry]:
        """Build an entry and insert it into the BST under ``key``.

        Raises:
            EntryValidationError: If title or content is empty
            InvalidKeyError: If key is not a finite number
            DuplicateKeyError: If key is already present
        """
        try:
            entry = build_entry(title, content, mood, prefix="b")
            node = self.binary.insert(key, entry)
        except JournalTreeError as err:
            logger.warning("BST insert rejected: %s", err)
            raise

        self._record(f"BST.insert(): added {entry.title!r} with key={key}")
        return node

    def traversal(self, strategy: Union[TraversalStrategy, str]) -> str:
        """Run an in/pre/post-order traversal and return its listing.

        Raises:
            ValueError: If strategy is not one of the three listings
        """
        resolved = parse_strategy(strategy)
        if resolved not in TRAVERSAL_LABELS:
            raise ValueError(f"No traversal listing for strategy {resolved.value!r}")

        nodes = {
            TraversalStrategy.IN_ORDER: self.binary.in_order,
            TraversalStrategy.PRE_ORDER: self.binary.pre_order,
            TraversalStrategy.POST_ORDER: self.binary.post_order,
        }[resolved]()
        self._record(f"BST.{resolved.value}(): {len(nodes)} nodes visited")
        return format_traversal(TRAVERSAL_LABELS[resolved], nodes)

    def render_general(self) -> str:
        self._record("GeneralTree.dfs(): general tree rendered")
        return render_general(self.general, self.config.render)

    def render_binary(self) -> str:
        self._record("BST.as_indented(): binary tree rendered")
        return render_binary(self.binary, self.config.render)

    def badges(self) -> Dict[str, str]:
        """Node counts for both trees, ready for display."""
        return {
            'general': f"General: {self.general.size} nodes",
            'binary': f"Binary: {self.binary.size} nodes",
        }

    def seed(self) -> None:
        """Load sample entries into both trees.

        The general tree gets a root with two replies, the first of which
        has a reply of its own. The BST gets keys 50, 25, 75, 10 and 60.
        Sample keys are checked first, so a rejected seed changes neither tree.

        Raises:
            DuplicateKeyError: If the BST already holds one of the sample keys
        """
        samples = [
            (50, "Key 50", "Root node of the BST.", "Calm"),
            (25, "Key 25", "Goes left of 50.", "Curious"),
            (75, "Key 75", "Goes right of 50.", "Joy"),
            (10, "Key 10", "Goes deeper on the left.", "Tired"),
            (60, "Key 60", "Left of 75 (because 60 < 75).", "Inspired"),
        ]
        for key, _, _, _ in samples:
            if key in self.binary:
                logger.warning("Seed rejected: key %r already in the BST", key)
                raise DuplicateKeyError(key)

        root = self.general.insert(build_entry(
            "Root: the diary begins", "Today I start my diary as a general tree.", "Calm"))
        first = self.general.insert(build_entry(
            "Reply 1", "What if every entry could have replies?", "Curious"), root.entry.id)
        self.general.insert(build_entry(
            "Reply to reply 1", "That makes a child of a child!", "Inspired"), first.entry.id)
        self.general.insert(build_entry(
            "Reply 2", "Another parallel thread under the root.", "Joy"), root.entry.id)

        for key, title, content, mood in samples:
            self.binary.insert(key, build_entry(title, content, mood, prefix="b"))

        self._record("Seed: sample entries loaded into the general tree and the BST")

    def reset(self) -> None:
        """Discard both trees and the operation log."""
        self._new_trees()
        self.operations.clear()
        logger.info("Session reset")
