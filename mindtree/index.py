"""The identifier-to-topic index shared by every topic of one sheet."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from .ids import CENTER_KEY, LAST_KEY, ROOT_KEY, SENTINEL_KEYS, IdSource, new_id

if TYPE_CHECKING:
    from .models import Topic

logger = logging.getLogger(__name__)


class ResourceIndex:
    """Maps topic identifiers to topics for a single sheet.

    Content topics live in an insertion-ordered map. The bookkeeping entries
    (sheet root, central topic, last-focused topic, auto-numbering counter)
    are kept as separate attributes so a title scan never has to tell them
    apart from real topics. ``get`` still resolves the sentinel key strings.
    """

    def __init__(self, id_source: IdSource = new_id):
        self.id_source = id_source
        self.root: Optional[Topic] = None
        self.center: Optional[Topic] = None
        self.last: Optional[Topic] = None
        self._counter = 0
        self._topics: dict[str, Topic] = {}

    def new_id(self) -> str:
        """Allocate an identifier that is not yet in use and is not a sentinel."""
        topic_id = self.id_source()
        while topic_id in SENTINEL_KEYS or topic_id in self._topics:
            logger.debug("id source returned unusable id %r, retrying", topic_id)
            topic_id = self.id_source()
        return topic_id

    def get(self, key: str) -> Optional[Topic]:
        """Resolve a content id or sentinel key, or return None."""
        if key == CENTER_KEY:
            return self.center
        if key == LAST_KEY:
            return self.last
        if key == ROOT_KEY:
            return self.root
        return self._topics.get(key)

    def register(self, topic: Topic) -> None:
        self._topics[topic.id] = topic

    def unregister(self, topic_id: str) -> Optional[Topic]:
        return self._topics.pop(topic_id, None)

    def focus(self, topic: Topic) -> None:
        """Make ``topic`` the last-focused topic."""
        self.last = topic

    def next_number(self) -> int:
        """Advance the sheet-wide auto-numbering counter."""
        self._counter += 1
        return self._counter

    @property
    def counter(self) -> int:
        return self._counter

    def items(self) -> Iterator[tuple[str, Topic]]:
        """Content (id, topic) pairs in registration order."""
        yield from list(self._topics.items())

    def __contains__(self, key: object) -> bool:
        return key in self._topics

    def __len__(self) -> int:
        return len(self._topics)

    def __repr__(self) -> str:
        center = self.center.title if self.center is not None else None
        return f"ResourceIndex({center!r}, {len(self)} topics)"
