"""Topic tree model for a mind-map sheet."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from .config import get_config
from .ids import CENTER_KEY, LAST_KEY, SENTINEL_KEYS
from .index import ResourceIndex

logger = logging.getLogger(__name__)


class StructureClass(Enum):
    """Layout style of a sheet, stored on the central topic."""
    MAP = "org.xmind.ui.map"
    MAP_CLOCKWISE = "org.xmind.ui.map.clockwise"
    MAP_ANTICLOCKWISE = "org.xmind.ui.map.anticlockwise"
    MAP_UNBALANCED = "org.xmind.ui.map.unbalanced"
    LOGIC_LEFT = "org.xmind.ui.logic.left"
    LOGIC_RIGHT = "org.xmind.ui.logic.right"
    ORG_CHART_DOWN = "org.xmind.ui.org-chart.down"
    ORG_CHART_UP = "org.xmind.ui.org-chart.up"
    TREE_LEFT = "org.xmind.ui.tree.left"
    TREE_RIGHT = "org.xmind.ui.tree.right"
    FISHBONE_LEFT_HEADED = "org.xmind.ui.fishbone.leftHeaded"
    FISHBONE_RIGHT_HEADED = "org.xmind.ui.fishbone.rightHeaded"
    TIMELINE_HORIZONTAL = "org.xmind.ui.timeline.horizontal"
    TIMELINE_VERTICAL = "org.xmind.ui.timeline.vertical"
    SPREADSHEET = "org.xmind.ui.spreadsheet"
    BRACE_RIGHT = "org.xmind.ui.brace.right"


class AddMode(Enum):
    """Where ``Topic.add`` places the new topic relative to the acting one."""
    SUB = "sub"
    BEFORE = "before"
    AFTER = "after"
    PARENT = "parent"


@dataclass(eq=False)
class Topic:
    """A single topic node in a sheet.

    Topics form a tree via ``children``; ``parent`` is a plain back-reference
    kept in sync by every structural operation. All topics of one sheet share
    one ``ResourceIndex``. A topic built directly (not through ``new_sheet``
    or ``add``) has no index and is inert: navigation and mutation return it
    unchanged until it is attached to a sheet.

    Failed lookups never raise. They fall back to the last-focused topic (or
    None for parent lookups), so calls can be chained safely.
    """
    id: str = ""
    title: str = ""
    structure_class: Optional[StructureClass] = None

    # Tree structure
    children: list[Topic] = field(default_factory=list)
    parent: Optional[Topic] = field(default=None, repr=False)

    _index: Optional[ResourceIndex] = field(default=None, repr=False)

    @property
    def index(self) -> Optional[ResourceIndex]:
        return self._index

    @property
    def sheet(self) -> Optional[Topic]:
        """The document-root topic of this topic's sheet."""
        if self._index is None:
            return None
        return self._index.root

    # --- navigation ---

    def on(self, topic_id: str = CENTER_KEY) -> Topic:
        """Move the cursor to ``topic_id`` and return that topic.

        Args:
            topic_id: Content id or sentinel key. Defaults to the central topic.

        Returns:
            The resolved topic, or the last-focused topic if the id is unknown.
        """
        if self._index is None:
            return self

        topic = self._index.get(topic_id)
        if topic is not None:
            self._index.focus(topic)
            return topic

        logger.debug("on: unknown id %r, staying on last-focused topic", topic_id)
        return self._index.last

    def on_title(self, title: str) -> Topic:
        """Move the cursor to the topic titled ``title`` (empty: the center)."""
        return self.on(self.cid(title))

    def get_parent(self, topic_id: Optional[str] = None) -> Optional[Topic]:
        """Return this topic's parent, or the parent of ``topic_id`` if given.

        Returns None for the sheet root, for inert topics and for unknown ids.
        """
        if topic_id is None:
            return self.parent
        if self._index is None:
            return None

        topic = self._index.get(topic_id)
        if topic is None:
            return None
        return topic.parent

    # --- insertion ---

    def add(self, title: str = "", mode: Union[AddMode, str] = AddMode.SUB) -> Topic:
        """Insert a new topic relative to this one.

        Args:
            title: Title of the new topic. Empty titles are numbered
                automatically across the whole sheet ("Topic 1", "Topic 2"...).
            mode: SUB appends a child, BEFORE/AFTER insert a sibling, PARENT
                wraps this topic in a new parent. The central topic only
                accepts children, so any mode acts as SUB there.

        Returns:
            This topic, except for PARENT mode, which returns the topic that
            now carries this topic's former title.

        Raises:
            ValueError: If ``mode`` is not an AddMode value. The mode is checked
                before anything else, so this applies to inert topics too.
        """
        mode = AddMode(mode)

        if self.parent is None or self._index is None:
            logger.debug("add: %r has no parent, nothing inserted", self.title)
            return self

        index = self._index
        if not title:
            prefix = get_config().topics.auto_title_prefix
            title = f"{prefix} {index.next_number()}"

        topic = Topic(id=index.new_id(), title=title, parent=self, _index=index)
        index.register(topic)

        if mode is AddMode.SUB or self is index.center:
            self.children.append(topic)
            logger.debug("add: %s under %s", topic.id, self.id)
            return self

        if mode is AddMode.PARENT:
            self.title, topic.title = topic.title, self.title
            topic.children = self.children
            self.children = [topic]
            for child in topic.children:
                child.parent = topic
            logger.debug("add: %s wraps the children of %s", topic.id, self.id)
            return topic

        parent = self.parent
        topic.parent = parent
        if not parent.children:
            parent.children.append(topic)
            return self

        siblings = parent.children
        siblings.append(topic)
        if mode is AddMode.BEFORE:
            for i in range(len(siblings) - 1, 0, -1):
                siblings[i], siblings[i - 1] = siblings[i - 1], siblings[i]
                if siblings[i] is self:
                    break
        else:
            for i in range(len(siblings) - 1, 0, -1):
                if siblings[i - 1] is self:
                    break
                siblings[i], siblings[i - 1] = siblings[i - 1], siblings[i]

        logger.debug("add: %s %s %s", topic.id, mode.value, self.id)
        return self

    def attach(self, subtree: Topic) -> Topic:
        """Append an externally built topic tree as a child of this topic.

        Every topic in ``subtree`` is linked to this sheet and registered,
        getting a fresh id if it has none or its id is already taken. The
        subtree must be acyclic.
        """
        if self.parent is None or self._index is None:
            logger.debug("attach: %r has no parent, nothing attached", self.title)
            return self

        self.children.append(subtree)
        self._adopt(subtree)
        subtree.graft()
        return self

    def graft(self) -> None:
        """Link and register every descendant of this topic with its sheet."""
        if self._index is None:
            return
        for child in self.children:
            self._adopt(child)
            child.graft()

    def _adopt(self, child: Topic) -> None:
        if (
            not child.id
            or child.id in SENTINEL_KEYS
            or self._index.get(child.id) not in (None, child)
        ):
            child.id = self._index.new_id()
        self._index.register(child)
        child.parent = self
        child._index = self._index

    # --- removal ---

    def remove(self, title: str) -> Topic:
        """Remove the topic titled ``title`` and its subtree."""
        return self.remove_by_id(self.cid(title))

    def remove_by_id(self, topic_id: str) -> Topic:
        """Remove the topic ``topic_id`` and its subtree from the sheet.

        The central topic is never removed. After a successful removal the
        cursor is reset to the central topic, which is returned; otherwise
        this topic is returned unchanged.
        """
        if self._index is None:
            return self

        index = self._index
        if topic_id == CENTER_KEY or (
            index.center is not None and topic_id == index.center.id
        ):
            logger.debug("remove_by_id: refusing to remove the central topic")
            return self

        parent = self.get_parent(topic_id)
        if parent is None or not parent.children:
            return self

        siblings = parent.children
        kept = 0
        for child in siblings:
            if child.id != topic_id:
                siblings[kept] = child
                kept += 1
            else:
                index.unregister(child.id)
                child.remove_children()
                child.parent = None
                child._index = None

        if kept == len(siblings):
            return self

        del siblings[kept:]
        logger.debug("remove_by_id: removed %s from %s", topic_id, parent.id)
        return self.on(CENTER_KEY)

    def remove_children(self) -> None:
        """Unregister every descendant and clear this topic's children.

        This topic itself stays registered. The removed topics become inert.
        """
        for child in self.children:
            if self._index is not None:
                self._index.unregister(child.id)
            child.remove_children()
            child.parent = None
            child._index = None
        self.children.clear()

    # --- lookup ---

    def cid(self, title: str) -> str:
        """Return the id of a topic titled ``title``.

        An empty title, or the central topic's title, gives the center key.
        With duplicate titles the earliest-registered topic wins; callers
        should only rely on getting *a* match. No match gives the
        last-focused key.
        """
        if not title:
            return CENTER_KEY

        if self._index is not None:
            center = self._index.center
            if center is not None and center.title == title:
                return CENTER_KEY
            for topic_id, topic in self._index.items():
                if topic is not center and topic.title == title:
                    return topic_id
        return LAST_KEY

    def cids(self, title: str) -> list[str]:
        """Return the ids of all topics titled ``title``.

        Falls back to ``[CENTER_KEY]`` for an empty title and ``[LAST_KEY]``
        when nothing matches.
        """
        if not title:
            return [CENTER_KEY]

        found = []
        if self._index is not None:
            center = self._index.center
            if center is not None and center.title == title:
                found.append(CENTER_KEY)
            for topic_id, topic in self._index.items():
                if topic is not center and topic.title == title:
                    found.append(topic_id)
        return found or [LAST_KEY]

    # --- sheet ---

    def update_sheet(
        self,
        sheet_title: str,
        central_title: str,
        structure_class: Union[StructureClass, str, None] = None,
    ) -> None:
        """Rename the sheet and its central topic; callable on any topic.

        Raises:
            ValueError: If ``structure_class`` is not a StructureClass value.
                Nothing is renamed in that case.
        """
        if structure_class is not None:
            structure_class = StructureClass(structure_class)
        if self._index is None or self._index.root is None:
            return

        self._index.root.title = sheet_title
        center = self._index.center
        center.title = central_title
        if structure_class is not None:
            center.structure_class = structure_class

    # --- traversal ---

    def _lineage(self) -> Iterator[Topic]:
        """Yield this topic and its ancestors, stopping below the sheet root."""
        sheet = self.sheet
        node = self
        while node is not None and node is not sheet:
            yield node
            node = node.parent

    @property
    def depth(self) -> int:
        """Distance from the central topic (or the top of an inert tree)."""
        return max(sum(1 for _ in self._lineage()) - 1, 0)

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    @property
    def path(self) -> list[str]:
        """List of topic titles from the central topic to this one."""
        return list(reversed([node.title for node in self._lineage()]))

    def walk(self) -> Iterator[Topic]:
        """Yield this topic and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def walk_levels(self) -> Iterator[Topic]:
        """Yield this topic and all descendants level by level."""
        queue = deque([self])
        while queue:
            topic = queue.popleft()
            yield topic
            queue.extend(topic.children)

    def count(self) -> int:
        """Total number of descendants (including self)."""
        return sum(1 for _ in self.walk())

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        child_count = len(self.children)
        suffix = f" ({child_count} children)" if child_count else ""
        return f"Topic({self.title!r}{suffix})"
