"""Create sheets: the document root, its central topic and their shared index."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import get_config
from .ids import IdSource, new_id
from .index import ResourceIndex
from .models import StructureClass, Topic

logger = logging.getLogger(__name__)


def new_sheet(
    sheet_title: str,
    central_title: str,
    structure_class: Union[StructureClass, str, None] = None,
    *,
    id_source: Optional[IdSource] = None,
) -> Topic:
    """Create a sheet and return its central topic.

    Args:
        sheet_title: Title of the sheet (the document root).
        central_title: Title of the central topic.
        structure_class: Layout style. Defaults to the configured
            ``sheet.structure_class`` (logic-right unless overridden).
        id_source: Callable producing unique topic ids. Defaults to
            ``ids.new_id``.

    Returns:
        The central topic, focused. All further editing starts from it.

    Raises:
        ValueError: If ``structure_class`` is not a known StructureClass value.
    """
    if structure_class is None:
        structure_class = _default_structure_class()
    else:
        structure_class = StructureClass(structure_class)

    index = ResourceIndex(id_source or new_id)
    sheet = Topic(id=index.new_id(), title=sheet_title, _index=index)
    center = Topic(
        id=index.new_id(),
        title=central_title,
        structure_class=structure_class,
        parent=sheet,
        _index=index,
    )
    sheet.children.append(center)

    index.root = sheet
    index.center = center
    index.register(center)
    index.focus(center)

    logger.debug("new_sheet: %r with central topic %s", sheet_title, center.id)
    return center


def _default_structure_class() -> StructureClass:
    configured = get_config().sheet.structure_class
    try:
        return StructureClass(configured)
    except ValueError:
        logger.warning(
            "Unknown structure class %r in config, using %s",
            configured,
            StructureClass.LOGIC_RIGHT.value,
        )
        return StructureClass.LOGIC_RIGHT
