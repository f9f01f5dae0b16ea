# src/gedcom_relation/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .segmenter import GEDCOMNode, segment_lines
from .tags import Tag, parse_tag, tag_code
from .tokenizer import GedcomLine


@dataclass
class GEDCOMTree:
    """
    High-level wrapper around the forest of top-level GEDCOMNode records.

    This structure is the canonical representation of a parsed GEDCOM
    document for the relational mapper and the CLI.

    Attributes:
        records:
            Root GEDCOMNode instances in document order (HEAD, SUBM, INDI,
            FAM, ..., TRLR).
    """

    records: List[GEDCOMNode]

    # Internal indexes, built lazily
    _pointer_index: Dict[str, GEDCOMNode] = field(
        default_factory=dict, init=False, repr=False
    )
    _tag_index: Dict[Tag, List[GEDCOMNode]] = field(
        default_factory=dict, init=False, repr=False
    )
    _indexes_built: bool = field(default=False, init=False, repr=False)

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:  # pragma: no cover - trivial wrapper
        return len(self.records)

    def __iter__(self) -> Iterator[GEDCOMNode]:  # pragma: no cover - simple
        return iter(self.records)

    def iter_nodes(self) -> Iterator[GEDCOMNode]:
        """
        Iterate over every node in the tree (depth-first), including roots
        and all descendants.
        """
        for root in self.records:
            yield from root.iter_subtree()

    # ------------------------------------------------------------------ #
    # Index construction
    # ------------------------------------------------------------------ #

    def _build_indexes(self) -> None:
        """Build pointer and tag indexes from the current records."""
        pointer_index: Dict[str, GEDCOMNode] = {}
        tag_index: Dict[Tag, List[GEDCOMNode]] = {}

        for node in self.iter_nodes():
            if node.pointer:
                pointer_index.setdefault(node.pointer, node)
            tag_index.setdefault(node.tag, []).append(node)

        self._pointer_index = pointer_index
        self._tag_index = tag_index
        self._indexes_built = True

    def _ensure_indexes(self) -> None:
        if not self._indexes_built:
            self._build_indexes()

    # ------------------------------------------------------------------ #
    # Public query API
    # ------------------------------------------------------------------ #

    def find_by_pointer(self, pointer: str) -> Optional[GEDCOMNode]:
        """
        Return the node that defines the given @XREF@ label, if any.

        Args:
            pointer: e.g. '@I1@', '@F5@', etc.
        """
        if not pointer:
            return None
        self._ensure_indexes()
        return self._pointer_index.get(pointer)

    def find_records_by_tag(self, tag: Union[str, Tag]) -> List[GEDCOMNode]:
        """
        Return all level-0 records with the given tag.

        Args:
            tag: a Tag, or its code ('INDI', 'fam', '_PLAC'); codes are
                classified the same way the parser does it.
        """
        if not tag:
            return []
        if isinstance(tag, str):
            tag = parse_tag(tag)
        self._ensure_indexes()
        return [n for n in self._tag_index.get(tag, []) if n.level == 0]

    def all_tags(self) -> List[str]:
        """Return the distinct codes found among the top-level records."""
        return sorted({tag_code(rec.tag) for rec in self.records})

    def line_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GEDCOMTree records={len(self.records)}>"


def build_tree(lines: Iterable[GedcomLine]) -> GEDCOMTree:
    """
    Build a GEDCOMTree from parsed lines.

        lines -> GEDCOMTree(records=[GEDCOMNode, ...])
    """
    return GEDCOMTree(records=segment_lines(lines))
