# src/gedcom_relation/utils/__init__.py

from .pathing import (
    json_output_path,
    mock_file_path,
    project_root,
    resolve_project_path,
)

__all__ = [
    "json_output_path",
    "mock_file_path",
    "project_root",
    "resolve_project_path",
]
