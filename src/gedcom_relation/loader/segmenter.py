# src/gedcom_relation/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from gedcom_relation.logging import get_logger

from .tags import Tag, tag_code
from .tokenizer import GedcomLine

log = get_logger(__name__)


@dataclass
class GEDCOMNode:
    """
    A hierarchical GEDCOM tree node produced from the flat line sequence.

    Attributes:
        level: GEDCOM level number (0 for records, >0 for substructures).
        tag: GedcomTag member or CustomTag.
        value: The line value, if any (free text or a pointer like "@I3@").
        pointer: Cross-reference label this line defines, e.g. "@I1@".
        lineno: Line number in the original document (for debugging).
        children: Nested GEDCOMNode list ordered as they appeared.
    """

    level: int
    tag: Tag
    value: Optional[str] = None
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["GEDCOMNode"] = field(default_factory=list)

    @classmethod
    def from_line(cls, line: GedcomLine) -> "GEDCOMNode":
        return cls(
            level=line.level,
            tag=line.tag,
            value=line.value,
            pointer=line.pointer,
            lineno=line.lineno,
        )

    # ---------- Helper / Mixin Methods ----------

    def add_child(self, child: "GEDCOMNode") -> None:
        self.children.append(child)

    def find_children(self, tag: Tag) -> List["GEDCOMNode"]:
        """Return all direct children of this node with a given tag."""
        return [c for c in self.children if c.tag == tag]

    def find_first(self, tag: Tag) -> Optional["GEDCOMNode"]:
        """Return the first direct child with this tag, or None."""
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def first_value(self, tag: Tag) -> Optional[str]:
        """Value of the first direct child with this tag, or None."""
        child = self.find_first(tag)
        return child.value if child is not None else None

    def iter_subtree(self) -> Iterator["GEDCOMNode"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def to_line(self) -> GedcomLine:
        """The line record this node was built from (children dropped)."""
        return GedcomLine(
            level=self.level,
            tag=self.tag,
            pointer=self.pointer,
            value=self.value,
            lineno=self.lineno,
        )

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GEDCOMNode {self.level}{ptr} {tag_code(self.tag)}: {self.value!r}>"


# ---------- SEGMENTER IMPLEMENTATION ----------

def segment_lines(lines: Iterable[GedcomLine]) -> List[GEDCOMNode]:
    """
    Convert a flat, pre-order sequence of GedcomLines into a forest.

    Single forward pass over an explicit stack of open ancestors:
        - pop every ancestor whose level is >= the current line's level,
        - attach the line to the new top of stack, or start a new root
          when the stack is empty,
        - push the line so deeper lines can attach to it.

    The pass never fails. A line that skips levels (e.g. 3 directly after
    1) is attached to the nearest shallower ancestor and logged.

    Returns:
        The root nodes (normally the level-0 records) in document order.
    """
    roots: List[GEDCOMNode] = []
    stack: List[GEDCOMNode] = []

    for line in lines:
        node = GEDCOMNode.from_line(line)

        while stack and stack[-1].level >= node.level:
            stack.pop()

        if stack:
            parent = stack[-1]
            if node.level != parent.level + 1:
                log.debug(
                    "Line %d: level %d under level %d parent %r",
                    node.lineno,
                    node.level,
                    parent.level,
                    parent,
                )
            parent.add_child(node)
        else:
            if node.level != 0:
                log.debug("Line %d: level %d line starts a new root", node.lineno, node.level)
            roots.append(node)

        stack.append(node)

    return roots


def flatten_nodes(nodes: Iterable[GEDCOMNode]) -> List[GedcomLine]:
    """Re-flatten a forest in pre-order back into GedcomLines."""
    return [n.to_line() for root in nodes for n in root.iter_subtree()]
