"""Topic identifiers and the reserved sentinel keys."""

from __future__ import annotations

import uuid
from typing import Callable

# Content identifiers are uuid4 hex strings
TOPIC_ID_LEN = 32

# Sentinel keys share the key space with content ids but never their length
ROOT_KEY = "root"
CENTER_KEY = ""
LAST_KEY = "last"
COUNTER_KEY = "incr"

SENTINEL_KEYS = frozenset({ROOT_KEY, CENTER_KEY, LAST_KEY, COUNTER_KEY})

IdSource = Callable[[], str]


def new_id() -> str:
    """Return a fresh content identifier of length ``TOPIC_ID_LEN``."""
    return uuid.uuid4().hex
