# src/gedcom_relation/dates/__init__.py

from .normalizer import (
    format_date_created,
    format_date_detail,
    parse_change_datetime,
    parse_date_detail,
)

__all__ = [
    "format_date_created",
    "format_date_detail",
    "parse_change_datetime",
    "parse_date_detail",
]
