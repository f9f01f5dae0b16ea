from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterator, Optional

from gedcom_relation.core.exceptions import EntityBuildError
from gedcom_relation.dates import parse_change_datetime
from gedcom_relation.loader.segmenter import GEDCOMNode
from gedcom_relation.loader.tags import GedcomTag, Tag


def _iter_children(node: GEDCOMNode) -> Iterator[GEDCOMNode]:
    return iter(node.children)


def _first_child_value(node: GEDCOMNode, tag: Tag) -> Optional[str]:
    return node.first_value(tag)


def _resolve_pointer(node: GEDCOMNode, person_ids: Dict[str, int]) -> Optional[int]:
    """Map a HUSB/WIFE/CHIL value such as '@I3@' to an accepted person id."""
    if not node.value:
        return None
    return person_ids.get(node.value)


def change_node_to_datetime(node: GEDCOMNode) -> datetime:
    """
    Read the creation timestamp out of a CHAN sub-tree:

        1 CHAN
        2 DATE 15 APR 2020
        3 TIME 16:19:21

    Raises:
        EntityBuildError: if DATE or TIME is missing, empty, or unparseable.
    """
    date_node = node.find_first(GedcomTag.DATE)
    if date_node is None:
        raise EntityBuildError("CHAN has no DATE")
    if not date_node.value:
        raise EntityBuildError("CHAN DATE has no value")

    time_node = date_node.find_first(GedcomTag.TIME)
    if time_node is None:
        raise EntityBuildError("CHAN DATE has no TIME")
    if not time_node.value:
        raise EntityBuildError("CHAN TIME has no value")

    try:
        return parse_change_datetime(date_node.value, time_node.value)
    except ValueError as exc:
        raise EntityBuildError(
            f"CHAN has invalid date/time {date_node.value!r} {time_node.value!r}"
        ) from exc
