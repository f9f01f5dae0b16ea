# src/gedcom_relation/dates/normalizer.py

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

MONTH_NAMES = {
    "JANUARY": 1,
    "FEBRUARY": 2,
    "MARCH": 3,
    "APRIL": 4,
    "MAY": 5,
    "JUNE": 6,
    "JULY": 7,
    "AUGUST": 8,
    "SEPTEMBER": 9,
    "OCTOBER": 10,
    "NOVEMBER": 11,
    "DECEMBER": 12,
}

# Output spelling, e.g. 1 -> "Jan". Fixed English; no locale lookup.
MONTH_ABBREVIATIONS = {num: code.title() for code, num in MONTHS.items()}

# CHAN TIME value; the DATE half goes through the month tables above.
CHANGE_TIME_FORMAT = "%H:%M:%S"


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

def _parse_year(token: str) -> Optional[int]:
    if token.isdigit() and 1 <= len(token) <= 4:
        return int(token)
    return None


def _parse_day(token: str) -> Optional[int]:
    if token.isdigit() and 1 <= len(token) <= 2:
        return int(token)
    return None


def _parse_month(token: str) -> Optional[int]:
    """'Jan', 'JAN' or 'January' in any case."""
    key = token.upper()
    return MONTHS.get(key) or MONTH_NAMES.get(key)


def _parse_day_month_year(raw: str) -> Optional[date]:
    tokens = raw.split()
    if len(tokens) != 3:
        return None

    day_token, mon_token, year_token = tokens
    day = _parse_day(day_token)
    mon = _parse_month(mon_token)
    year = _parse_year(year_token)

    if day is None or mon is None or year is None:
        return None

    try:
        return date(year, mon, day)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_date_detail(raw: Optional[str]) -> Optional[date]:
    """
    Parse a birth DATE value in ``D MON YYYY`` form.

        '1 Jan 1990'      -> date(1990, 1, 1)
        '01 JAN 1990'     -> date(1990, 1, 1)
        '1 January 1990'  -> date(1990, 1, 1)
        'JAN 1990'        -> None   (partial dates are not modeled)
        'ABT 1990'        -> None   (qualified dates are not modeled)
        '31 FEB 1990'     -> None   (no such calendar day)

    Returns None for anything that is not exactly one calendar day.
    """
    if raw is None:
        return None
    return _parse_day_month_year(raw)


def format_date_detail(value: date) -> str:
    """Render a birth date as ``D Mon YYYY``: no day padding, English month."""
    return f"{value.day} {MONTH_ABBREVIATIONS[value.month]} {value.year:04d}"


def parse_change_datetime(date_text: str, time_text: str) -> datetime:
    """
    Combine a CHAN DATE value and its TIME value into a naive datetime.

        ('15 APR 2020', '16:19:21') -> datetime(2020, 4, 15, 16, 19, 21)

    Raises:
        ValueError: if either part does not match ``D MON YYYY`` / ``HH:MM:SS``.
    """
    day = _parse_day_month_year(date_text)
    if day is None:
        raise ValueError(f"invalid change date {date_text!r}")

    clock = datetime.strptime(time_text.strip(), CHANGE_TIME_FORMAT).time()
    return datetime.combine(day, clock)


def format_date_created(value: datetime) -> str:
    """``YYYY-MM-DDTHH:MM:SS`` with no fractional seconds or zone."""
    return value.isoformat(timespec="seconds")


__all__ = [
    "CHANGE_TIME_FORMAT",
    "MONTHS",
    "MONTH_NAMES",
    "format_date_created",
    "format_date_detail",
    "parse_change_datetime",
    "parse_date_detail",
]
