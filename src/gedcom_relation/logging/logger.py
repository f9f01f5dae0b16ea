"""
Centralized logging configuration for gedcom-relation.

Key behaviors
-------------
* Single entry point via ``get_logger`` so every module shares one set of
  handlers and one format.
* Master log file (default: ``logs/gedcom_relation.log``) plus one log file
  per module that asks for a logger.
* Console output on stderr; the CLI can raise or lower its level at runtime
  (``--verbose``) without touching the file handlers.
* Optional size-based rotation, switched on by ``logging.rotate`` in
  ``config/gedcom_relation.yml``.
"""

from __future__ import annotations

import logging
import sys
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from gedcom_relation.config import get_config
from gedcom_relation.utils.pathing import project_root

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = project_root()
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
BASE_LOGGER_NAME = "gedcom_relation"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_logger_cache: Dict[str, Logger] = {}
_console_handler: Optional[StreamHandler] = None
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Path = DEFAULT_LOG_DIR
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _resolve_log_dir() -> Path:
    """Pick the log directory from config and make sure it exists."""
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or DEFAULT_LOG_DIR)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(path: Path, level: int) -> logging.Handler:
    if _rotate_logs:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(_formatter())
    return handler


def _configure_base_logger() -> Logger:
    """Attach the master file and console handlers to the base logger once."""
    global _base_configured, _effective_level, _log_dir, _rotate_logs, _console_handler

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    master_name = cfg.logging.get("file") or f"{BASE_LOGGER_NAME}.log"

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    configured = getattr(logging, level_name, logging.INFO)
    _effective_level = logging.DEBUG if cfg.debug else configured

    _log_dir = _resolve_log_dir()
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False
    base_logger.addHandler(_file_handler(_log_dir / master_name, _effective_level))

    # stdout carries converted JSON, so the console log goes to stderr.
    _console_handler = StreamHandler(sys.stderr)
    _console_handler.setLevel(logging.DEBUG if cfg.debug else logging.WARNING)
    _console_handler.setFormatter(_formatter())
    base_logger.addHandler(_console_handler)

    _base_configured = True
    return base_logger


def _has_module_handler(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    path = _log_dir / f"{module_name.replace('.', '_')}.log"
    handler = _file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    * ``gedcom_relation.*`` loggers propagate to the base console + master log.
    * Each module also gets its own file: ``logs/<module>.log``.
    * ``debug: true`` in the config forces DEBUG everywhere.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME

    cached = _logger_cache.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if not _has_module_handler(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_console_level(level: int) -> None:
    """Change how much reaches the console (the CLI's ``--verbose``)."""
    _configure_base_logger()
    if _console_handler is not None:
        _console_handler.setLevel(level)
    if level < _effective_level:
        for logger in [logging.getLogger(BASE_LOGGER_NAME), *_logger_cache.values()]:
            logger.setLevel(level)
