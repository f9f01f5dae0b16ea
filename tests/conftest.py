import logging
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = str(PROJECT_ROOT / "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)


class _RecordList(logging.Handler):
    def __init__(self, level):
        super().__init__(level)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture(autouse=True)
def _shipped_config(monkeypatch):
    """Run every test against config/gedcom_relation.yml, not a user override."""
    monkeypatch.delenv("GEDCOM_RELATION_CONFIG", raising=False)


@pytest.fixture
def mock_text():
    """Read a mock_files/ fixture as text, line endings untouched."""
    from gedcom_relation.utils import mock_file_path

    def _read(name):
        with mock_file_path(name).open("r", encoding="utf-8", newline="") as f:
            return f.read()

    return _read


@pytest.fixture
def console_records():
    """Records at the console's default threshold (WARNING) under the base logger."""
    from gedcom_relation.logging import BASE_LOGGER_NAME, get_logger

    get_logger()
    base = logging.getLogger(BASE_LOGGER_NAME)
    handler = _RecordList(logging.WARNING)
    base.addHandler(handler)
    yield handler.records
    base.removeHandler(handler)
