"""
json_exporter.py
Relational JSON exporter for RelationDocument objects.

Output contract:
- the seven top-level collections are always present
- keys sorted at every level, so the same document always gives the same bytes
- compact ``,`` / ``:`` separators unless an indent is requested
- non-ASCII text (accented names, places) written as-is
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from gedcom_relation.logging import get_logger
from gedcom_relation.registry.entities import RelationDocument

log = get_logger(__name__)

COMPACT_SEPARATORS = (",", ":")


def build_document_dict(document: RelationDocument) -> Dict[str, Any]:
    """Convert the document into a JSON-safe dict (PascalCase keys)."""
    return document.to_dict()


def serialize_document(document: RelationDocument, indent: Optional[int] = None) -> str:
    """
    Serialize a RelationDocument to a JSON string.

    With ``indent=None`` (the default) the output is a single compact line.
    """
    return json.dumps(
        build_document_dict(document),
        sort_keys=True,
        ensure_ascii=False,
        indent=indent,
        separators=COMPACT_SEPARATORS if indent is None else None,
    )


def export_document_json(
    document: RelationDocument,
    output_path: str | Path,
    indent: Optional[int] = None,
) -> Path:
    """Write the serialized document to ``output_path``, creating parent dirs."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    counts = document.counts()
    log.info(
        "Exporting relation JSON to: %s (Persons=%d, Familys=%d, Childs=%d)",
        output_path,
        counts["persons"],
        counts["families"],
        counts["children"],
    )

    json_str = serialize_document(document, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
    return output_path
