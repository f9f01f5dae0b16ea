"""
Exporter package.

Re-exports the JSON serialization entry points used by the pipeline and CLI.
"""

from __future__ import annotations

from .json_exporter import build_document_dict, export_document_json, serialize_document

__all__ = ["build_document_dict", "export_document_json", "serialize_document"]
