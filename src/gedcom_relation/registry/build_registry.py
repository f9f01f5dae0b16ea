from __future__ import annotations

from typing import Dict, Optional

from gedcom_relation.core.exceptions import EntityBuildError
from gedcom_relation.identity import IdSeeds
from gedcom_relation.loader.tags import GedcomTag
from gedcom_relation.loader.tree_builder import GEDCOMTree
from gedcom_relation.logging import get_logger
from gedcom_relation.registry.build_family import build_family
from gedcom_relation.registry.build_individual import build_person
from gedcom_relation.registry.entities import Child, RelationDocument

log = get_logger(__name__)


# ----------------------------------------------------------------------
# Registry builder
# ----------------------------------------------------------------------

def build_registry(tree: GEDCOMTree, seeds: Optional[IdSeeds] = None) -> RelationDocument:
    """
    Map a parsed tree onto Persons, Families and Child join rows.

    Records are visited once, in document order:
      - INDI with a pointer -> Person; pointer registered for later FAMs
      - FAM                 -> Family + one Child row per resolved CHIL
      - anything else       -> ignored

    A record missing a mandatory field is dropped whole (logged at DEBUG);
    the id counters only advance for accepted records, so ids stay dense.
    A FAM can only reference INDI records that appear before it.
    """
    seeds = seeds or IdSeeds()
    person_seq, family_seq, child_seq = seeds.sequences()

    document = RelationDocument()
    person_ids: Dict[str, int] = {}
    dropped = 0

    for node in tree.records:
        if node.tag == GedcomTag.INDIVIDUAL:
            if not node.pointer:
                log.debug("Line %d: INDI without pointer skipped", node.lineno)
                continue
            try:
                person = build_person(node, person_seq.peek())
            except EntityBuildError as exc:
                dropped += 1
                log.debug("Line %d: person dropped: %s", node.lineno, exc)
                continue

            person_seq.claim()
            person_ids[node.pointer] = person.id
            document.add_person(person)

        elif node.tag == GedcomTag.FAMILY:
            try:
                family, child_person_ids = build_family(node, family_seq.peek(), person_ids)
            except EntityBuildError as exc:
                dropped += 1
                log.debug("Line %d: family dropped: %s", node.lineno, exc)
                continue

            family_seq.claim()
            rows = [
                Child(id=child_seq.claim(), child_id=person_id, family_id=family.id)
                for person_id in child_person_ids
            ]
            document.add_family(family, rows)

    counts = document.counts()
    log.info(
        "Mapped %d persons, %d families, %d child rows (%d records dropped)",
        counts["persons"],
        counts["families"],
        counts["children"],
        dropped,
    )
    return document
