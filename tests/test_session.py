"""Tests for JournalSession."""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from journaltreelib import (
    DuplicateKeyError,
    EntryValidationError,
    InvalidKeyError,
    JournalSession,
    ParentNotFoundError,
    RenderConfig,
    TreeConfig,
)


@pytest.fixture
def session():
    return JournalSession()


@pytest.fixture
def seeded():
    session = JournalSession()
    session.seed()
    return session


class TestAdd:

    def test_add_general_root_and_reply(self, session):
        root = session.add_general("Day one", "Started a diary.", "Calm")
        reply = session.add_general("Reply", "A thread!", parent_id=root.entry.id)

        assert session.general.size == 2
        assert session.general.root is root
        assert root.children() == [reply]
        assert root.entry.id.startswith("g_")

    def test_blank_parent_id_attaches_to_root(self, session):
        root = session.add_general("Root", "Body")
        child = session.add_general("Child", "Body", parent_id="   ")

        assert root.children() == [child]

    def test_missing_parent(self, session):
        session.add_general("Root", "Body")

        with pytest.raises(ParentNotFoundError):
            session.add_general("Orphan", "Body", parent_id="g_missing")
        assert session.general.size == 1

    def test_invalid_entry_is_not_inserted(self, session):
        with pytest.raises(EntryValidationError):
            session.add_general("", "Body")
        with pytest.raises(EntryValidationError):
            session.add_binary(5, "Title", "")

        assert session.general.size == 0
        assert session.binary.size == 0
        assert session.operations == []

    def test_add_binary(self, session):
        node = session.add_binary(42, "Answer", "Body", "Curious")

        assert session.binary.root is node
        assert node.entry.id.startswith("b_")
        assert node.entry.mood == "Curious"

    def test_add_binary_errors(self, session):
        session.add_binary(1, "One", "Body")

        with pytest.raises(DuplicateKeyError):
            session.add_binary(1, "Again", "Body")
        with pytest.raises(InvalidKeyError):
            session.add_binary(float("nan"), "NaN", "Body")
        assert session.binary.size == 1

    def test_rejections_are_logged(self, session, caplog):
        session.add_binary(1, "One", "Body")
        with caplog.at_level(logging.WARNING, logger="journaltreelib.session"):
            with pytest.raises(DuplicateKeyError):
                session.add_binary(1, "Again", "Body")

        assert "BST insert rejected" in caplog.text


class TestSeed:

    def test_seed_general(self, seeded):
        titles = [(node.entry.title, depth) for node, depth in seeded.general.dfs()]

        assert titles == [
            ("Root: the diary begins", 0),
            ("Reply 1", 1),
            ("Reply to reply 1", 2),
            ("Reply 2", 1),
        ]

    def test_seed_binary(self, seeded):
        assert [n.key for n in seeded.binary.in_order()] == [10, 25, 50, 60, 75]
        assert all(n.entry.id.startswith("b_") for n in seeded.binary.in_order())

    def test_seed_twice_rejects_duplicate_keys(self, seeded):
        operations = len(seeded.operations)

        with pytest.raises(DuplicateKeyError):
            seeded.seed()

        assert seeded.general.size == 4
        assert seeded.binary.size == 5
        assert len(seeded.operations) == operations

    def test_seed_rejected_when_any_sample_key_present(self, session):
        session.add_binary(60, "Sixty", "Already here.")

        with pytest.raises(DuplicateKeyError) as exc_info:
            session.seed()

        assert exc_info.value.key == 60
        assert session.general.size == 0
        assert session.binary.size == 1

    def test_badges(self, seeded):
        assert seeded.badges() == {'general': "General: 4 nodes", 'binary': "Binary: 5 nodes"}


class TestListings:

    def test_traversal_listings(self, seeded):
        assert seeded.traversal("in_order").splitlines()[1:] == ["keys: [10, 25, 50, 60, 75]", "count: 5"]
        assert seeded.traversal("pre_order").splitlines()[1] == "keys: [50, 25, 10, 75, 60]"
        assert seeded.traversal("post_order").splitlines()[1] == "keys: [10, 25, 60, 75, 50]"

    def test_traversal_label(self, seeded):
        assert seeded.traversal("post_order").splitlines()[0] == "POST-ORDER (left, right, node)"

    def test_traversal_without_listing(self, seeded):
        with pytest.raises(ValueError):
            seeded.traversal("indented")
        with pytest.raises(ValueError):
            seeded.traversal("dfs")

    def test_render(self, seeded):
        general = seeded.render_general().splitlines()
        binary = seeded.render_binary().splitlines()

        assert len(general) == 4
        assert general[2].startswith("    Reply to reply 1")
        assert [line.strip().split()[0] for line in binary] == ["[root]", "[L]", "[L]", "[R]", "[L]"]

    def test_render_uses_session_config(self):
        session = JournalSession(TreeConfig(render=RenderConfig(indent="..")))
        session.seed()

        assert session.render_binary().splitlines()[1].startswith("..[L]")


class TestLifecycle:

    def test_operations_newest_first(self, session):
        session.add_general("Root", "Body")
        session.add_binary(3, "Three", "Body")

        messages = [op.message for op in session.operations]
        assert messages[0].startswith("BST.insert()")
        assert messages[1].startswith("GeneralTree.insert()")
        assert all(op.timestamp for op in session.operations)

    def test_reset(self, seeded):
        old_general = seeded.general
        seeded.reset()

        assert seeded.general is not old_general
        assert seeded.general.size == 0
        assert seeded.binary.size == 0
        assert seeded.operations == []

    def test_sessions_are_independent(self):
        first = JournalSession()
        second = JournalSession()
        first.seed()

        assert second.general.size == 0
        assert second.binary.size == 0

    def test_invalid_config(self):
        with pytest.raises(ValueError, match="Invalid configuration"):
            JournalSession(TreeConfig(render=RenderConfig(max_general_indent=-1)))

    def test_custom_identify(self):
        session = JournalSession(TreeConfig(identify=lambda entry: entry.title))
        session.add_general("Root", "Body")
        session.add_general("Child", "Body", parent_id="Root")

        assert session.general.find_by_id("Child") is not None
