#!/usr/bin/env python3
"""
fields.py
---------
One validator per recognized preamble field.

Each validator takes the trimmed raw value of a `key: value` line and
either returns the typed value or raises FieldValidationError carrying a
single ErrorKind. Validators are pure: no shared state, no I/O.

Formats:
    - eip: unsigned 64-bit integer, ASCII digits only
    - title / description: at most 44 / 140 characters
    - discussions-to / resolution: absolute URL
    - status / type / category: exact accepted spelling
    - created / last-call-deadline / review-period-end: YYYY-MM-DD
    - updated: YYYY-MM-DD or a comma list of them
    - requires / replaces / superseded-by: non-decreasing comma list of numbers
    - author: comma list of "Name <email>" or "Name (@handle)"

Comma lists share one spacing rule: no whitespace before a comma, exactly
one space after it.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date, datetime
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

# --- Local imports ---
from eipv.core.exceptions import FieldValidationError
from eipv.models.enums import Category, EipType, Status
from eipv.models.preamble import Author
from eipv.validators.errors import ErrorKind


TITLE_MAX_LEN = 44
DESCRIPTION_MAX_LEN = 140

_U64_MAX = 2**64 - 1
_DIGITS = re.compile(r"^[0-9]+$")
_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_DATE_FORMAT = "%Y-%m-%d"

_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
# Schemes whose URLs are meaningless without a host
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

# Practical email shape (the WHATWG "valid email address" grammar)
_EMAIL = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*$"
)
_HANDLE = re.compile(r"^@[A-Za-z0-9]+(-[A-Za-z0-9]+)*$")


# ----- Shared helpers -----
def _parse_u64(raw: str) -> Optional[int]:
    if not _DIGITS.match(raw):
        return None
    number = int(raw)
    return number if number <= _U64_MAX else None


def _parse_date(raw: str) -> Optional[date]:
    if not _DATE.match(raw):
        return None
    try:
        return datetime.strptime(raw, _DATE_FORMAT).date()
    except ValueError:
        return None


def _is_absolute_url(raw: str) -> bool:
    if not raw or any(c.isspace() for c in raw):
        return False
    try:
        parts = urlsplit(raw)
    except ValueError:
        return False
    if not parts.scheme or not _URL_SCHEME.match(parts.scheme):
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def split_list(raw: str) -> List[str]:
    """
    Split a comma-separated value after checking its spacing.

    Every element followed by a comma must not end in whitespace, and
    every element after a comma must start with exactly one space.

    Args:
        raw: Trimmed field value

    Returns:
        Elements with the separating space removed

    Raises:
        FieldValidationError: EXTRA_WHITESPACE_BEFORE_COMMA or
            MISSING_SPACE_AFTER_COMMA

    Examples:
        >>> split_list("1, 2, 3")
        ['1', '2', '3']
        >>> split_list("Alice (@alice)")
        ['Alice (@alice)']
    """
    parts = raw.split(",")
    last = len(parts) - 1

    for i, part in enumerate(parts):
        if i < last and part != part.rstrip():
            raise FieldValidationError(ErrorKind.EXTRA_WHITESPACE_BEFORE_COMMA)
        if i > 0 and (not part.startswith(" ") or part[1:2].isspace()):
            raise FieldValidationError(ErrorKind.MISSING_SPACE_AFTER_COMMA)

    return [part[1:] if i > 0 else part for i, part in enumerate(parts)]


def _eip_list(raw: str) -> List[int]:
    numbers: List[int] = []
    for element in split_list(raw):
        number = _parse_u64(element)
        if number is None:
            raise FieldValidationError(ErrorKind.MALFORMED_EIP_NUMBER)
        if numbers and number < numbers[-1]:
            raise FieldValidationError(ErrorKind.OUT_OF_ORDER_EIPS)
        numbers.append(number)
    return numbers


def _delimited(
    raw: str, open_char: str, close_char: str, unmatched: ErrorKind
) -> Optional[Tuple[int, int]]:
    """Locate an open/close pair; None if neither is present."""
    start, end = raw.find(open_char), raw.find(close_char)
    if start == -1 and end == -1:
        return None
    if start == -1 or end == -1 or end < start:
        raise FieldValidationError(unmatched)
    return start, end


def parse_author(raw: str) -> Author:
    """
    Validate a single author entry.

    Accepted forms:
        Name <email@example.com>
        Name (@handle)

    Checks, in order: delimiter pairing, email and handle together,
    neither present, text after the closing delimiter, then the shape of
    the email or handle itself.

    Raises:
        FieldValidationError: With the matching author ErrorKind
    """
    email_span = _delimited(raw, "<", ">", ErrorKind.UNMATCHED_EMAIL_DELIMITER)
    handle_span = _delimited(raw, "(", ")", ErrorKind.UNMATCHED_HANDLE_DELIMITER)

    if email_span and handle_span:
        raise FieldValidationError(ErrorKind.AUTHOR_HAS_EMAIL_AND_HANDLE)

    if email_span:
        start, end = email_span
        if raw[end + 1:]:
            raise FieldValidationError(ErrorKind.TRAILING_INFO_AFTER_EMAIL)
        email = raw[start + 1:end]
        if not _EMAIL.match(email):
            raise FieldValidationError(ErrorKind.MALFORMED_EMAIL)
        return Author(name=raw[:start].strip(), email=email)

    if handle_span:
        start, end = handle_span
        if raw[end + 1:]:
            raise FieldValidationError(ErrorKind.TRAILING_INFO_AFTER_HANDLE)
        handle = raw[start + 1:end]
        if not _HANDLE.match(handle):
            raise FieldValidationError(ErrorKind.MALFORMED_HANDLE)
        return Author(name=raw[:start].strip(), handle=handle)

    raise FieldValidationError(ErrorKind.AUTHOR_HAS_NO_CONTACT_DETAILS)


# ----- Field validators -----
def eip(raw: str) -> int:
    number = _parse_u64(raw)
    if number is None:
        raise FieldValidationError(ErrorKind.MALFORMED_EIP_NUMBER)
    return number


def title(raw: str) -> str:
    if len(raw) > TITLE_MAX_LEN:
        raise FieldValidationError(ErrorKind.TITLE_EXCEEDS_MAX_LENGTH)
    return raw


def description(raw: str) -> str:
    if len(raw) > DESCRIPTION_MAX_LEN:
        raise FieldValidationError(ErrorKind.DESCRIPTION_EXCEEDS_MAX_LENGTH)
    return raw


def author(raw: str) -> List[Author]:
    """Author list in declaration order; never empty."""
    return [parse_author(element) for element in split_list(raw)]


def discussions_to(raw: str) -> str:
    if not _is_absolute_url(raw):
        raise FieldValidationError(ErrorKind.MALFORMED_DISCUSSIONS_TO)
    return raw


def resolution(raw: str) -> str:
    if not _is_absolute_url(raw):
        raise FieldValidationError(ErrorKind.MALFORMED_RESOLUTION)
    return raw


def status(raw: str) -> Status:
    value = Status.lookup(raw)
    if value is None:
        raise FieldValidationError(ErrorKind.UNKNOWN_STATUS)
    return value


def type_(raw: str) -> EipType:
    value = EipType.lookup(raw)
    if value is None:
        raise FieldValidationError(ErrorKind.UNKNOWN_TYPE)
    return value


def category(raw: str) -> Category:
    value = Category.lookup(raw)
    if value is None:
        raise FieldValidationError(ErrorKind.UNKNOWN_CATEGORY)
    return value


def created(raw: str) -> date:
    value = _parse_date(raw)
    if value is None:
        raise FieldValidationError(ErrorKind.MALFORMED_CREATED)
    return value


def last_call_deadline(raw: str) -> date:
    value = _parse_date(raw)
    if value is None:
        raise FieldValidationError(ErrorKind.MALFORMED_LAST_CALL_DEADLINE)
    return value


def review_period_end(raw: str) -> date:
    value = _parse_date(raw)
    if value is None:
        raise FieldValidationError(ErrorKind.MALFORMED_REVIEW_PERIOD_END)
    return value


def updated(raw: str) -> List[date]:
    """A single date or a comma list of dates, always returned as a list."""
    dates = []
    for element in split_list(raw):
        value = _parse_date(element)
        if value is None:
            raise FieldValidationError(ErrorKind.MALFORMED_UPDATED)
        dates.append(value)
    return dates


def requires(raw: str) -> List[int]:
    return _eip_list(raw)


def replaces(raw: str) -> List[int]:
    return _eip_list(raw)


def superseded_by(raw: str) -> List[int]:
    return _eip_list(raw)
