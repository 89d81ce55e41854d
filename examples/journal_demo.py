#!/usr/bin/env python3
"""
Journal demo: both trees side by side.

This example demonstrates:
- Seeding a session with sample entries
- Replying to an entry by id in the general tree
- Rejected inserts (missing parent, duplicate key, bad key)
- In-order, pre-order and post-order listings
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from journaltreelib import JournalSession, JournalTreeError, get_tree_stats


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    session = JournalSession()
    session.seed()

    root_id = session.general.root.entry.id
    session.add_general("Late reply", "Answering the very first entry.", "Calm", parent_id=root_id)

    for attempt in (
        lambda: session.add_general("Lost", "Nobody to reply to.", parent_id="g_missing"),
        lambda: session.add_binary(50, "Again", "Key 50 is taken."),
        lambda: session.add_binary(float("inf"), "Infinity", "Not a usable key."),
    ):
        try:
            attempt()
        except JournalTreeError as err:
            print(f"[REJECTED] {err}")

    print("\n=== General tree (DFS) ===")
    print(session.render_general())

    print("\n=== Binary search tree ===")
    print(session.render_binary())

    for strategy in ("in_order", "pre_order", "post_order"):
        print()
        print(session.traversal(strategy))

    stats = get_tree_stats(session.binary)
    print(f"\nBST: {stats['total_nodes']} nodes, height {stats['max_depth'] + 1}, "
          f"keys {stats['min_key']}..{stats['max_key']}")
    print(" | ".join(session.badges().values()))


if __name__ == "__main__":
    main()
