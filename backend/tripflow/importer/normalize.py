"""
Value normalisers for dates, times and numbers found in broker manifests.

Brokers send dates as ISO, US slash dates, two-digit years and
date-times; times as 24h or 12h with AM/PM.  Each normaliser returns
``None`` when it cannot make sense of the input rather than raising.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time

DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%m/%d/%y",
    "%m-%d-%Y",
    "%m-%d-%y",
    "%Y/%m/%d",
    "%d-%b-%Y",
    "%d %b %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%Y%m%d",
)

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})(?::(\d{2}))?(\s*[AaPp]\.?[Mm]\.?)?")
_DATE_TIME_SPLIT_RE = re.compile(r"[T\s]+")
_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def parse_date(value: str | None) -> date | None:
    """
    Parse a manifest date.

    Accepts any of DATE_FORMATS, optionally followed by a time part
    (``2024-01-05 10:30``, ``1/5/2024 9:00 AM``, ``2024-01-05T10:30:00``).
    """
    if not value:
        return None
    text = value.strip()
    if not text:
        return None

    candidates = [text]
    head = _DATE_TIME_SPLIT_RE.split(text, maxsplit=1)[0]
    if head != text:
        candidates.append(head)

    for candidate in candidates:
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(candidate, fmt).date()
            except ValueError:
                continue
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_time(value: str | None) -> time | None:
    """
    Find the first ``H:MM[:SS][ AM|PM]`` in a value.

    12-hour values are converted: ``12:xx AM`` is midnight, ``1-11 PM``
    add twelve hours.  Out-of-range hours or minutes yield None.
    """
    if not value:
        return None
    match = _TIME_RE.search(value)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)
    meridiem = (match.group(4) or "").replace(".", "").strip().upper()

    if meridiem:
        if not 1 <= hours <= 12:
            return None
        if meridiem == "PM" and hours < 12:
            hours += 12
        elif meridiem == "AM" and hours == 12:
            hours = 0

    try:
        return time(hours, minutes, seconds)
    except ValueError:
        return None


def parse_number(value: str | None) -> float | None:
    """
    Leading-number parse: ``"12.5 mi"`` → 12.5, ``"abc"`` → None.

    Thousands separators are dropped before parsing.
    """
    if value is None:
        return None
    match = _NUMBER_RE.match(str(value).replace(",", ""))
    if not match:
        return None
    return float(match.group(1))
