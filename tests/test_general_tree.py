"""Tests for the general (N-ary) tree.

Covers insertion policy, lookup by identifier and the depth-annotated
pre-order traversal.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from journaltreelib import GeneralTree, JournalEntry, ParentNotFoundError


def entry(entry_id: str) -> dict:
    return {
        'id': entry_id,
        'title': f"Title {entry_id}",
        'mood': "",
        'content': f"Content {entry_id}",
        'created_at': "01/01/2026, 09:00",
    }


def build_thread() -> GeneralTree:
    """Create a small thread.

    Structure:
    root
    ├── childA
    │   └── grandchild
    └── childB
    """
    tree = GeneralTree()
    tree.insert(entry("root"))
    tree.insert(entry("childA"), "root")
    tree.insert(entry("childB"), "root")
    tree.insert(entry("grandchild"), "childA")
    return tree


class TestInsert:
    """Insertion policy."""

    def test_is_empty(self):
        tree = GeneralTree()
        assert tree.is_empty()

        tree.insert(entry("root"))
        assert not tree.is_empty()

        with pytest.raises(ParentNotFoundError):
            tree.insert(entry("x"), "missing")
        assert not tree.is_empty()

    def test_first_insert_becomes_root(self):
        tree = GeneralTree()
        node = tree.insert(entry("root"))

        assert tree.root is node
        assert tree.size == 1
        assert node.children() == []

    def test_parent_id_ignored_on_empty_tree(self):
        tree = GeneralTree()
        node = tree.insert(entry("root"), "does-not-exist")

        assert tree.root is node
        assert tree.size == 1

    def test_default_attach_point_is_root(self):
        tree = GeneralTree()
        tree.insert(entry("root"))
        tree.insert(entry("a"))
        tree.insert(entry("b"))
        tree.insert(entry("c"), "a")
        tree.insert(entry("d"))

        root_children = [child.entry['id'] for child in tree.root.children()]
        assert root_children == ["a", "b", "d"]

    def test_insert_under_named_parent(self):
        tree = build_thread()
        child_a = tree.find_by_id("childA")

        assert [c.entry['id'] for c in child_a.children()] == ["grandchild"]

    def test_empty_parent_id_means_root(self):
        tree = GeneralTree()
        tree.insert(entry("root"))
        node = tree.insert(entry("a"), "")

        assert tree.root.children() == [node]

    def test_missing_parent_raises_and_leaves_tree_unchanged(self):
        tree = build_thread()
        before = [(n.entry['id'], d) for n, d in tree.dfs()]

        with pytest.raises(ParentNotFoundError) as exc_info:
            tree.insert(entry("orphan"), "missing-id")

        assert exc_info.value.parent_id == "missing-id"
        assert tree.size == 4
        assert [(n.entry['id'], d) for n, d in tree.dfs()] == before

    def test_not_found_is_a_lookup_error(self):
        tree = build_thread()
        with pytest.raises(LookupError):
            tree.insert(entry("x"), "nope")

    def test_size_matches_successful_inserts(self):
        tree = GeneralTree()
        successes = 0
        for i in range(20):
            parent = f"n{i // 3}" if i else None
            tree.insert(entry(f"n{i}"), parent)
            successes += 1
            with pytest.raises(ParentNotFoundError):
                tree.insert(entry("bad"), "no-such-node")

        assert tree.size == successes
        assert len(tree) == successes

    def test_children_keep_insertion_order(self):
        tree = GeneralTree()
        tree.insert(entry("root"))
        for name in ["z", "a", "m"]:
            tree.insert(entry(name), "root")

        assert [c.entry['id'] for c in tree.root.children()] == ["z", "a", "m"]


class TestFindById:
    """Lookup by entry identifier."""

    def test_empty_tree(self):
        assert GeneralTree().find_by_id("anything") is None

    def test_finds_nested_node(self):
        tree = build_thread()
        node = tree.find_by_id("grandchild")

        assert node is not None
        assert node.entry['id'] == "grandchild"

    def test_missing_id(self):
        assert build_thread().find_by_id("missing") is None

    def test_returns_first_match_in_preorder(self):
        tree = GeneralTree()
        tree.insert(entry("root"))
        tree.insert(entry("a"), "root")
        tree.insert(entry("b"), "root")
        first_dup = tree.insert({'id': "dup", 'tag': 1}, "a")
        tree.insert({'id': "dup", 'tag': 2}, "b")

        assert tree.find_by_id("dup") is first_dup

    def test_attribute_style_entries(self):
        tree = GeneralTree()
        tree.insert(JournalEntry(id="g_1", title="Root", content="First"))
        tree.insert(JournalEntry(id="g_2", title="Reply", content="Second"), "g_1")

        assert tree.find_by_id("g_2").entry.title == "Reply"

    def test_custom_identifier(self):
        tree = GeneralTree(identify=lambda e: e[0])
        tree.insert(("r", "root payload"))
        tree.insert(("c", "child payload"), "r")

        assert tree.find_by_id("c").entry == ("c", "child payload")


class TestDepthFirst:
    """Depth-annotated pre-order traversal."""

    def test_empty_tree(self):
        assert GeneralTree().dfs() == []

    def test_preorder_with_depths(self):
        tree = build_thread()
        result = [(node.entry['id'], depth) for node, depth in tree.dfs()]

        assert result == [
            ("root", 0),
            ("childA", 1),
            ("grandchild", 2),
            ("childB", 1),
        ]

    def test_every_node_visited_once(self):
        tree = GeneralTree()
        tree.insert(entry("n0"))
        for i in range(1, 50):
            tree.insert(entry(f"n{i}"), f"n{(i - 1) // 2}")

        ids = [node.entry['id'] for node, _ in tree.dfs()]
        assert len(ids) == tree.size == 50
        assert len(set(ids)) == 50

    def test_dfs_is_repeatable(self):
        tree = build_thread()
        assert tree.dfs() == tree.dfs()

    def test_deep_chain_does_not_recurse(self):
        tree = GeneralTree()
        tree.insert(entry("n0"))
        for i in range(1, 1500):
            tree.insert(entry(f"n{i}"), f"n{i - 1}")

        items = tree.dfs()
        assert len(items) == 1500
        assert items[-1][0].entry["id"] == "n1499"
        assert items[-1][1] == 1499


@pytest.mark.slow
class TestStress:
    """Scale checks, excluded from the default run."""

    def test_wide_and_deep_tree(self):
        tree = GeneralTree()
        tree.insert(entry("n0"))
        for i in range(1, 3000):
            tree.insert(entry(f"n{i}"), f"n{(i - 1) // 2}")

        items = tree.dfs()
        assert len(items) == tree.size == 3000
        assert len({node.entry["id"] for node, _ in items}) == 3000
        assert max(depth for _, depth in items) == 11
