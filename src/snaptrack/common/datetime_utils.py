from __future__ import annotations

import re
from datetime import date

from ..core.exceptions import ValidationError

_ISO_LIKE_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


def parse_session_date(value) -> date:
    """Parse an attendance date into a canonical ``date``.

    Accepts ``YYYY-MM-DD`` as well as the non-padded ``YYYY-M-D`` form so both
    spellings of the same day map to one ledger key.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError("Date must be a string in YYYY-MM-DD format")

    match = _ISO_LIKE_DATE.match(value.strip())
    if not match:
        raise ValidationError("Date must be in YYYY-MM-DD format")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise ValidationError(f"Invalid calendar date: {value}")


def format_session_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")
