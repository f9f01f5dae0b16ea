# src/gedcom_relation/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_relation.loader import (
        GedcomLine,
        GedcomSyntaxError,
        GedcomTag,
        CustomTag,
        GEDCOMNode,
        GEDCOMTree,
        parse_tag,
        parse_line,
        parse_gedcom,
        tokenize_file,
        segment_lines,
        build_tree,
    )
"""

from __future__ import annotations

from .segmenter import GEDCOMNode, flatten_nodes, segment_lines
from .tags import CustomTag, GedcomTag, Tag, UnknownTagError, parse_tag, tag_code
from .tokenizer import GedcomLine, GedcomSyntaxError, parse_gedcom, parse_line, tokenize_file
from .tree_builder import GEDCOMTree, build_tree


__all__ = [
    "CustomTag",
    "GEDCOMNode",
    "GEDCOMTree",
    "GedcomLine",
    "GedcomSyntaxError",
    "GedcomTag",
    "Tag",
    "UnknownTagError",
    "build_tree",
    "flatten_nodes",
    "parse_gedcom",
    "parse_line",
    "parse_tag",
    "segment_lines",
    "tag_code",
    "tokenize_file",
]
