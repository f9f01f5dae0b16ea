# src/gedcom_relation/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

# <root>/src/gedcom_relation/utils/pathing.py -> parents[3] is <root>
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

JSON_SUFFIX = ".json"


def project_root() -> Path:
    """
    Return the absolute path to the checkout root (the directory holding
    src/, tests/, config/ and mock_files/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("mock_files/one_node.ged")
        resolve_project_path(Path("config") / "gedcom_relation.yml")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Absolute path to a fixture under the top-level mock_files/ directory."""
    return resolve_project_path(Path("mock_files") / filename)


def json_output_path(gedcom_path: Union[str, Path], out_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Where the JSON for ``gedcom_path`` goes: same stem, ``.json`` suffix, in
    ``out_dir`` when given, else next to the input.
    """
    src = Path(gedcom_path)
    target_dir = Path(out_dir) if out_dir is not None else src.parent
    return target_dir / (src.stem + JSON_SUFFIX)
