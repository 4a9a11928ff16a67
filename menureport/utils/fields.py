"""
Field parsers shared by the loaders.

Each parser raises FieldError with the offending text; the caller adds
file and line context.
"""

import math
import re
from datetime import date, datetime

from menureport.errors import FieldError

_INTEGER = re.compile(r"[+-]?[0-9]+")
_COMPACT_DATE = re.compile(r"[0-9]{8}")


def parse_int(text: str, field: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise FieldError(f"invalid {field} {text!r}: not an integer")
    return int(text)


def parse_float(text: str, field: str) -> float:
    if text != text.strip():
        raise FieldError(f"invalid {field} {text!r}: surrounding whitespace")
    try:
        value = float(text)
    except ValueError:
        raise FieldError(f"invalid {field} {text!r}: not a number")
    if not math.isfinite(value):
        raise FieldError(f"invalid {field} {text!r}: not a finite number")
    return value


def parse_compact_date(text: str) -> date:
    """Parse a YYYYMMDD date such as '20150101'."""
    if not _COMPACT_DATE.fullmatch(text):
        raise FieldError(f"invalid date {text!r}: expected YYYYMMDD")
    try:
        return datetime.strptime(text, "%Y%m%d").date()
    except ValueError as e:
        raise FieldError(f"invalid date {text!r}: {e}")
