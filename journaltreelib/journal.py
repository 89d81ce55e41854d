"""Journal entry records.

The trees treat entries as opaque payloads; this module is where an entry
actually gets its fields, its identifier and its timestamp.
"""

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from .errors import EntryValidationError

TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M"


def new_entry_id(prefix: str) -> str:
    """Return a unique identifier such as ``g_1b4e28ba-2fa1-...``."""
    return f"{prefix}_{uuid.uuid4()}"


def now_stamp(moment: Optional[datetime] = None) -> str:
    """Format a timestamp (default: now) as ``dd/mm/YYYY, HH:MM``."""
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


@dataclass
class JournalEntry:
    """A single diary entry."""

    id: str
    title: str
    content: str
    mood: str = ""
    created_at: str = field(default_factory=now_stamp)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_entry(
    title: str,
    content: str,
    mood: str = "",
    prefix: str = "g",
    created_at: Optional[str] = None,
) -> JournalEntry:
    """Create an entry from raw form input.

    Surrounding whitespace is trimmed from every field. Mood may be empty.

    Raises:
        EntryValidationError: If title or content is empty
    """
    title = (title or "").strip()
    content = (content or "").strip()
    mood = (mood or "").strip()

    if not title:
        raise EntryValidationError("Title is required")
    if not content:
        raise EntryValidationError("Content is required")

    return JournalEntry(
        id=new_entry_id(prefix),
        title=title,
        content=content,
        mood=mood,
        created_at=created_at or now_stamp(),
    )
