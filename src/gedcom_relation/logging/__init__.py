"""
Logging package for ``gedcom_relation``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import BASE_LOGGER_NAME, get_logger, set_console_level

__all__ = [
    "BASE_LOGGER_NAME",
    "get_logger",
    "set_console_level",
]
