from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from gedcom_relation.core.exceptions import EntityBuildError
from gedcom_relation.dates import parse_date_detail
from gedcom_relation.loader.segmenter import GEDCOMNode
from gedcom_relation.loader.tags import GedcomTag, is_custom
from gedcom_relation.logging import get_logger
from gedcom_relation.registry.entities import BirthFact, Gender, NameFact, Person, Place
from gedcom_relation.registry.utils import (
    _first_child_value,
    _iter_children,
    change_node_to_datetime,
)

log = get_logger(__name__)

PREFERRED_MARKER = "_PRIM"


def build_name(node: GEDCOMNode) -> NameFact:
    """NAME -> NameFact from its GIVN / SURN children."""
    return NameFact(
        given_names=_first_child_value(node, GedcomTag.GIVEN_NAME),
        surnames=_first_child_value(node, GedcomTag.SURNAME),
    )


def build_birth(node: GEDCOMNode) -> BirthFact:
    """
    BIRT -> BirthFact.

    A DATE that is not a single ``D MON YYYY`` day is left out rather than
    failing the fact. Later DATE / PLAC children override earlier ones.
    """
    date_detail = None
    place = None
    preferred = False

    for child in _iter_children(node):
        if child.tag == GedcomTag.DATE:
            if child.value is not None:
                parsed = parse_date_detail(child.value)
                if parsed is not None:
                    date_detail = parsed
                else:
                    log.debug("Line %d: unsupported birth date %r", child.lineno, child.value)
        elif child.tag == GedcomTag.PLACE:
            if child.value is not None:
                place = Place(child.value)
        elif is_custom(child.tag, PREFERRED_MARKER):
            if child.value == "Y":
                preferred = True

    return BirthFact(date_detail=date_detail, place=place, preferred=preferred)


def build_person(node: GEDCOMNode, person_id: int) -> Person:
    """
    Build a Person from an INDI record.

    PURE FUNCTION:
      - no registry access
      - the id is handed in by the caller, never derived from the pointer

    Raises:
        EntityBuildError: when the record is not INDI, or has no usable
        CHAN timestamp or SEX line.
    """
    if node.tag != GedcomTag.INDIVIDUAL:
        raise EntityBuildError(f"Expected INDI node, got {node!r}")

    date_created: Optional[datetime] = None
    gender: Optional[Gender] = None
    names: List[NameFact] = []
    facts: List[BirthFact] = []

    for child in _iter_children(node):
        if child.tag == GedcomTag.NAME:
            names.append(build_name(child))
        elif child.tag == GedcomTag.BIRTH:
            facts.append(build_birth(child))
        elif child.tag == GedcomTag.SEX:
            gender = Gender.from_code(child.value)
        elif child.tag == GedcomTag.CHANGE:
            try:
                date_created = change_node_to_datetime(child)
            except EntityBuildError as exc:
                log.debug("Line %d: %s", child.lineno, exc)

    if date_created is None:
        raise EntityBuildError(f"Person {node.pointer} has no creation timestamp")
    if gender is None:
        raise EntityBuildError(f"Person {node.pointer} has no gender")

    return Person(
        id=person_id,
        date_created=date_created,
        gender=gender,
        names=tuple(names),
        facts=tuple(facts),
    )
