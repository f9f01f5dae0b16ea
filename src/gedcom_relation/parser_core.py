"""
parser_core.py
Central conversion engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from gedcom_relation.config import get_config
from gedcom_relation.exporter import serialize_document
from gedcom_relation.identity import IdSeeds
from gedcom_relation.loader.tokenizer import GedcomLine, parse_gedcom, tokenize_file
from gedcom_relation.loader.tree_builder import GEDCOMTree, build_tree
from gedcom_relation.logging import get_logger
from gedcom_relation.registry import RelationDocument, build_registry


class GEDCOMParser:
    """
    High-level converter:
      - loads / parses text into lines
      - builds the record tree
      - maps the tree onto a RelationDocument
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger(__name__)
        self.seeds = IdSeeds.from_config(getattr(self.cfg, "ids", None))

        self.lines: List[GedcomLine] = []
        self.tree: Optional[GEDCOMTree] = None
        self.document: Optional[RelationDocument] = None

    # ---------------------------------------------------------
    # Load input
    # ---------------------------------------------------------
    def load_file(self, path: Union[str, Path]) -> None:
        """Parse a GEDCOM file into line records."""
        self.log.info("Parsing GEDCOM input: %s", path)
        self.lines = tokenize_file(path)
        self.log.debug("Line count = %d", len(self.lines))

    def parse_text(self, text: str) -> None:
        """Parse GEDCOM text already in memory."""
        self.lines = parse_gedcom(text)
        self.log.debug("Line count = %d", len(self.lines))

    # ---------------------------------------------------------
    # Build tree + map entities
    # ---------------------------------------------------------
    def convert(self) -> RelationDocument:
        """Turn the loaded lines into a RelationDocument."""
        self.tree = build_tree(self.lines)
        self.log.debug(
            "Tree built: %d records, tags=%s", len(self.tree.records), self.tree.all_tags()
        )
        self.document = build_registry(self.tree, self.seeds)
        return self.document

    def run(self, input_path: Union[str, Path]) -> RelationDocument:
        """
        Full conversion sequence for a file.
        Returns: RelationDocument
        """
        self.load_file(input_path)
        self.log.info("Running conversion...")
        document = self.convert()
        self.log.info("Conversion completed.")
        return document


def gedcom_to_relation_json(text: str) -> str:
    """
    Convert GEDCOM text to compact relational JSON.

    Raises:
        GedcomSyntaxError: if any line is malformed; no partial output.
    """
    parser = GEDCOMParser()
    parser.parse_text(text)
    return serialize_document(parser.convert())
