"""
Field normalizers for dates and amounts.

Both functions are total: anything they cannot read comes back as the
empty date ("") or a zero amount, and the caller decides whether that
makes the row unusable.
"""

import math
import re
from datetime import date
from typing import Optional

# Day-first, matching Singapore statement exports
_DMY_RE = re.compile(r"(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})")
_YMD_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_TEXT_MONTH_RE = re.compile(r"(\d{1,2})\s+([A-Za-z]{3})\s+(\d{4})")

MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_CURRENCY_RE = re.compile(r"S\$|SGD|[$€£¥₹]", re.IGNORECASE)
_NOISE_RE = re.compile(r"[,\"'\s]")
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def _iso(year: int, month: int, day: int) -> str:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return ""


def parse_date(value: str) -> str:
    """
    Parse a statement date into YYYY-MM-DD.

    Tries D/M/YYYY (or D-M-YYYY), then YYYY-MM-DD, then D MMM YYYY.
    Returns "" when no pattern matches or the match is not a real date.
    """
    if not value:
        return ""

    cleaned = str(value).strip().replace('"', "")

    match = _DMY_RE.search(cleaned)
    if match:
        day, month, year = match.groups()
        return _iso(int(year), int(month), int(day))

    match = _YMD_RE.search(cleaned)
    if match:
        year, month, day = match.groups()
        return _iso(int(year), int(month), int(day))

    match = _TEXT_MONTH_RE.search(cleaned)
    if match:
        day, month_name, year = match.groups()
        month = MONTHS.get(month_name.lower())
        if month is None:
            return ""
        return _iso(int(year), month, int(day))

    return ""


def _to_float(text: str) -> Optional[float]:
    if not _DECIMAL_RE.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def parse_amount(value: str) -> float:
    """
    Parse an amount string into a signed float.

    Handles currency symbols, thousands separators, accounting-style
    parentheses and CR/DR markers. Unparsable input gives 0.0.
    """
    if not value:
        return 0.0

    cleaned = _NOISE_RE.sub("", _CURRENCY_RE.sub("", str(value)))
    if not cleaned:
        return 0.0

    # Parentheses take priority over CR/DR
    if cleaned.startswith("(") and cleaned.endswith(")"):
        number = _to_float(cleaned[1:-1])
        return (-abs(number) or 0.0) if number is not None else 0.0

    lowered = cleaned.lower()
    if "cr" in lowered:
        number = _to_float(lowered.replace("cr", ""))
        return abs(number) if number is not None else 0.0
    if "dr" in lowered:
        number = _to_float(lowered.replace("dr", ""))
        return (-abs(number) or 0.0) if number is not None else 0.0

    number = _to_float(cleaned)
    return number if number is not None else 0.0
