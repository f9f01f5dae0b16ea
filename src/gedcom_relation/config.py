# src/gedcom_relation/config.py

import os
from pathlib import Path

import yaml

from gedcom_relation.utils.pathing import resolve_project_path

CONFIG_ENV_VAR = "GEDCOM_RELATION_CONFIG"
CONFIG_PATH = resolve_project_path(Path("config") / "gedcom_relation.yml")

DEFAULT_IDS = {
    "person_seed": 1,
    "family_seed": 10_000_001,
    "child_seed": 20_000_001,
}


class GPConfig:
    def __init__(self, data):
        self.paths = data.get("paths") or {}
        self.logging = data.get("logging") or {}
        self.ids = {**DEFAULT_IDS, **(data.get("ids") or {})}
        self.debug = bool(data.get("debug", False))


def config_path() -> Path:
    """The YAML file in use: $GEDCOM_RELATION_CONFIG, else config/gedcom_relation.yml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_PATH


def load_config(path=None) -> 'GPConfig':
    path = Path(path) if path is not None else config_path()

    # No file is not an error; every section has a usable default.
    if not path.exists():
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    return GPConfig(data)


_config_cache = None


def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config_cache
    _config_cache = None
