#!/usr/bin/env python3
"""
Pure formatting helpers for a single UserRecord:
- full name (title + first + last)
- postal address on one line
- date of birth / registration date with a token template (MM, DD, YYYY, YY, M, D)
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from dateutil.parser import isoparse

from .config import DEFAULT_DATE_FORMAT
from .models import FormatOptions, UserRecord

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"

_UNPADDED_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})((?:[T ].*)?)$")


def get_full_name(user: UserRecord) -> str:
    if user.name is None:
        raise ValueError("user record has no 'name' block")
    name = user.name
    return f"{name.title} {name.first} {name.last}".strip()


def get_formatted_address(user: UserRecord) -> str:
    if user.location is None:
        raise ValueError("user record has no 'location' block")
    loc = user.location
    # str() keeps a numeric postcode as plain digits (no grouping, no padding).
    return f"{loc.street.number} {loc.street.name}, {loc.city}, {loc.state}, {loc.country}, {loc.postcode}".strip()


def _parse_utc(value: str) -> Optional[datetime]:
    # ISO-8601 only: "1990" is 1990-01-01, "1990-05" is 1990-05-01. Missing parts never come from today.
    try:
        parsed = isoparse(_pad_date(value))
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        # Offsets of 24h or more only fail here, so the conversion stays inside the try.
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError, TypeError) as exc:
        logger.debug("could not parse date %r: %s", value, exc)
        return None


def _pad_date(value: str) -> str:
    # "1990-2-3T00:00:00Z" -> "1990-02-03T00:00:00Z"; the year must always be explicit.
    match = _UNPADDED_DATE.match(value)
    if match is None:
        return value
    year, month, day, rest = match.groups()
    return f"{year}-{int(month):02d}-{int(day):02d}{rest}"


def _date_tokens(dt: datetime) -> List[Tuple[str, str]]:
    # Longer tokens first: "YYYY" before "YY", "MM"/"DD" before "M"/"D".
    return [
        ("MM", f"{dt.month:02d}"),
        ("DD", f"{dt.day:02d}"),
        ("YYYY", str(dt.year)),
        ("YY", f"{dt.year % 100:02d}"),
        ("M", str(dt.month)),
        ("D", str(dt.day)),
    ]


def format_date(value: str, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Render an ISO-8601 timestamp with a token template, reading the calendar
    date in UTC. Each token is replaced once (first occurrence), in the order
    MM, DD, YYYY, YY, M, D; anything else in the template is kept as-is.

    Returns "Invalid Date" when the value cannot be parsed.
    """
    if not value:
        return INVALID_DATE
    dt = _parse_utc(value)
    if dt is None:
        return INVALID_DATE

    formatted = date_format or DEFAULT_DATE_FORMAT
    for token, replacement in _date_tokens(dt):
        formatted = formatted.replace(token, replacement, 1)
    return formatted


def format_date_of_birth(user: UserRecord, options: Optional[FormatOptions] = None) -> str:
    if user.dob is None:
        return INVALID_DATE
    return format_date(user.dob.date, (options or FormatOptions()).date_format)


def format_registered_date(user: UserRecord, options: Optional[FormatOptions] = None) -> str:
    if user.registered is None:
        return INVALID_DATE
    return format_date(user.registered.date, (options or FormatOptions()).date_format)
