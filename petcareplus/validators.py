"""
PetCarePlus Backend: Validation Utilities
===========================================

Pure helpers shared by the login flow, the resource services and the CSV
export. None of them raise; callers decide which error to report.
"""

import math
import re
from typing import Any, Optional

# One "@", something before it, a dotted domain after; no whitespace anywhere.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_CSV_SPECIAL = re.compile(r'[",\n]')


def validate_email(email: Any) -> bool:
    """True iff `email` is a non-empty string of the shape local@domain.tld."""
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def to_int(value: Any) -> Optional[int]:
    """
    Coerce a JSON value or path segment to an integer key.

    Accepts ints and numeric strings whose value is integral ("42", " 7 ",
    "3.0", "1e3"). Returns None for anything else: non-integral numbers,
    blank strings, booleans, None, and non-numeric text. Callers must check
    for None before using the result.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value.is_integer() else None
    if isinstance(value, str):
        s = value.strip()
        # int()/float() would otherwise accept digit separators ("1_000")
        if not s or "_" in s:
            return None
        try:
            return int(s)
        except ValueError:
            pass
        try:
            number = float(s)
        except ValueError:
            return None
        if math.isfinite(number) and number.is_integer():
            return int(number)
    return None


def is_blank(value: Any) -> bool:
    """A required field counts as missing when absent or whitespace-only."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def to_csv_value(value: Any) -> str:
    """
    Render one CSV field.

    None becomes the empty string. Values containing a comma, double quote
    or newline are wrapped in double quotes with inner quotes doubled;
    everything else is returned as str(value).
    """
    if value is None:
        return ""
    s = str(value)
    if _CSV_SPECIAL.search(s):
        return '"' + s.replace('"', '""') + '"'
    return s
