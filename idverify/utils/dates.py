"""
Date-of-birth parsing helpers.

Identity cards print birth dates in a handful of shapes; these helpers turn
the matched text into a ``date`` so impossible dates can be rejected.
"""

from datetime import date, datetime
from typing import Any

_NUMERIC_FORMATS = (
    "%d.%m.%Y",
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%d.%m.%y",
    "%d/%m/%y",
    "%d-%m-%y",
)
_MONTH_NAME_FORMATS = ("%d %B %Y", "%d %b %Y", "%d %B %y", "%d %b %y")


def parse_birth_date(date_value: Any) -> date | None:
    """
    Parse a birth date string using the shapes printed on ID cards.

    Args:
      date_value: Raw date value; expected to be a string such as
        ``"01.02.1990"``, ``"1/2/1990"`` or ``"12 March 1990"``.

    Returns:
      A ``date`` if parsing succeeds, otherwise None.
    """
    if not isinstance(date_value, str):
        return None
    cleaned = " ".join(date_value.strip().rstrip(".").split())
    cleaned = cleaned.replace(". ", " ")
    for fmt in _NUMERIC_FORMATS + _MONTH_NAME_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    return None


def is_birth_date(date_value: Any) -> bool:
    return parse_birth_date(date_value) is not None


def format_birth_date(date_value: Any) -> str | None:
    """Return the ISO form (YYYY-MM-DD) of a parseable birth date, else None."""
    parsed = parse_birth_date(date_value)
    return parsed.isoformat() if parsed else None
