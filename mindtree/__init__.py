"""mindtree: build the topic tree of a mind-map sheet in memory.

Every topic of a sheet shares one index, so any topic can navigate to,
insert around, or remove any other topic by id or title.

Usage:
    import mindtree
    from mindtree import AddMode

    center = mindtree.new_sheet("Sheet 1", "Plan")
    center.add("Research").add("Build")

    research = center.on_title("Research")
    research.add("Sources")                  # child
    research.add("Budget", AddMode.BEFORE)   # sibling before
    research.add("Scope", AddMode.PARENT)    # wrap in a new parent

    for topic in center.walk():
        print("  " * topic.depth + topic.title)

    center.remove("Build")                   # also resets the cursor
"""

__version__ = "0.1.0"

from .config import Config, get_config, reset_config
from .ids import CENTER_KEY, COUNTER_KEY, LAST_KEY, ROOT_KEY, TOPIC_ID_LEN, new_id
from .index import ResourceIndex
from .models import AddMode, StructureClass, Topic
from .sheet import new_sheet

__all__ = [
    "new_sheet",
    "Topic",
    "AddMode",
    "StructureClass",
    "ResourceIndex",
    "new_id",
    "TOPIC_ID_LEN",
    "ROOT_KEY",
    "CENTER_KEY",
    "LAST_KEY",
    "COUNTER_KEY",
    "Config",
    "get_config",
    "reset_config",
]
