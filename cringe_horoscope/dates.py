# cringe_horoscope/dates.py
from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from cringe_horoscope.models import InvalidInputError, require_day

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_DAY_OFFSETS = {"yesterday": -1, "today": 0, "tomorrow": 1}


def validate_date_string(value: Any) -> str:
    """Accept only real calendar dates in YYYY-MM-DD form."""
    text = value if isinstance(value, str) else ""
    if not _DATE_RE.match(text):
        raise InvalidInputError(f"Invalid date format: {value!r}. Expected YYYY-MM-DD")
    try:
        datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        raise InvalidInputError(f"Invalid calendar date: {value!r}") from None
    return text


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def resolve_date(day: str, today: Optional[date] = None) -> str:
    """Map yesterday/today/tomorrow onto a UTC calendar date string."""
    key = require_day(day)
    base = today or utc_today()
    return (base + timedelta(days=_DAY_OFFSETS[key])).isoformat()
