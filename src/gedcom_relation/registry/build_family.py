from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from gedcom_relation.core.exceptions import EntityBuildError
from gedcom_relation.loader.segmenter import GEDCOMNode
from gedcom_relation.loader.tags import GedcomTag
from gedcom_relation.logging import get_logger
from gedcom_relation.registry.entities import Family
from gedcom_relation.registry.utils import (
    _iter_children,
    _resolve_pointer,
    change_node_to_datetime,
)

log = get_logger(__name__)


def build_family(
    node: GEDCOMNode,
    family_id: int,
    person_ids: Dict[str, int],
) -> Tuple[Family, List[int]]:
    """
    Build a Family from a FAM record.

    HUSB / WIFE / CHIL values are resolved through ``person_ids`` (pointer ->
    accepted person id). Pointers to unknown or dropped persons are skipped.

    PURE FUNCTION:
      - does not create Child join rows; returns the resolved child person
        ids in CHIL order so the caller can emit rows once the family is kept

    Raises:
        EntityBuildError: when the record is not FAM, or has no usable CHAN
        timestamp, father or mother.
    """
    if node.tag != GedcomTag.FAMILY:
        raise EntityBuildError(f"Expected FAM node, got {node!r}")

    date_created: Optional[datetime] = None
    father_id: Optional[int] = None
    mother_id: Optional[int] = None
    child_ids: List[int] = []

    for child in _iter_children(node):
        if child.tag == GedcomTag.CHANGE:
            try:
                date_created = change_node_to_datetime(child)
            except EntityBuildError as exc:
                log.debug("Line %d: %s", child.lineno, exc)

        elif child.tag == GedcomTag.HUSBAND:
            resolved = _resolve_pointer(child, person_ids)
            if resolved is not None:
                father_id = resolved

        elif child.tag == GedcomTag.WIFE:
            resolved = _resolve_pointer(child, person_ids)
            if resolved is not None:
                mother_id = resolved

        elif child.tag == GedcomTag.CHILD:
            resolved = _resolve_pointer(child, person_ids)
            if resolved is not None:
                child_ids.append(resolved)
            else:
                log.debug("Line %d: CHIL %r does not match a person", child.lineno, child.value)

    label = node.pointer or f"at line {node.lineno}"
    if date_created is None:
        raise EntityBuildError(f"Family {label} has no creation timestamp")
    if father_id is None:
        raise EntityBuildError(f"Family {label} has no father")
    if mother_id is None:
        raise EntityBuildError(f"Family {label} has no mother")

    family = Family(
        id=family_id,
        date_created=date_created,
        father_id=father_id,
        mother_id=mother_id,
    )
    return family, child_ids
