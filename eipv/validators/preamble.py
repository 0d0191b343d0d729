#!/usr/bin/env python3
"""
preamble.py
-----------
Preamble parser: the `---` delimited `key: value` block at the top of an EIP.

Parsing runs in three stages:
    1. Block extraction. The document must start with a `---` line and
       contain a closing `---` line. Either failure aborts immediately
       with that single error; nothing else is checked.
    2. Line checks. Every non-empty line is split at its first colon,
       checked for whitespace problems and dispatched to the field
       validator for its key. Problems accumulate; no line stops the parse.
    3. Presence checks. Required keys that never appeared are reported,
       plus category when the type is Standards Track.

Every non-structural error passes through the suppression context before
it is recorded. The document is valid iff nothing survives the filter.

Expected format:
    ---
    eip: 1559
    title: Fee market change for ETH 1.0 chain
    author: Vitalik Buterin (@vbuterin), Eric Conner (@econoar)
    discussions-to: https://ethereum-magicians.org/t/eip-1559/2626
    status: Final
    type: Standards Track
    category: Core
    created: 2019-04-13
    requires: 2718, 2930
    ---

    ## Simple Summary
    ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

# --- Local imports ---
from eipv.core.exceptions import FieldValidationError, PreambleValidationError
from eipv.models.preamble import Preamble
from eipv.validators import fields
from eipv.validators.context import SuppressionContext
from eipv.validators.errors import ErrorKind, PreambleIssue

logger = logging.getLogger(__name__)


DELIMITER = "---"
_END_DELIMITER = re.compile(r"^---(?:\n|\Z)", re.MULTILINE)

# Preamble key -> (Preamble attribute, validator)
FIELD_VALIDATORS: Dict[str, Tuple[str, Callable[[str], object]]] = {
    "eip": ("eip", fields.eip),
    "title": ("title", fields.title),
    "description": ("description", fields.description),
    "author": ("author", fields.author),
    "discussions-to": ("discussions_to", fields.discussions_to),
    "status": ("status", fields.status),
    "last-call-deadline": ("last_call_deadline", fields.last_call_deadline),
    "review-period-end": ("review_period_end", fields.review_period_end),
    "resolution": ("resolution", fields.resolution),
    "type": ("type_", fields.type_),
    "category": ("category", fields.category),
    "created": ("created", fields.created),
    "updated": ("updated", fields.updated),
    "requires": ("requires", fields.requires),
    "replaces": ("replaces", fields.replaces),
    "superseded-by": ("superseded_by", fields.superseded_by),
}

# Checked in this order after all lines are processed
REQUIRED_FIELDS: List[Tuple[str, ErrorKind]] = [
    ("eip", ErrorKind.MISSING_EIP_FIELD),
    ("title", ErrorKind.MISSING_TITLE_FIELD),
    ("author", ErrorKind.MISSING_AUTHOR_FIELD),
    ("discussions_to", ErrorKind.MISSING_DISCUSSIONS_TO_FIELD),
    ("status", ErrorKind.MISSING_STATUS_FIELD),
]


def split_preamble(text: str) -> Tuple[str, str, int]:
    """
    Separate the preamble block from the body.

    Args:
        text: Newline-normalized document text

    Returns:
        Tuple of (block, body, first_block_line)
        - block: text between the delimiter lines
        - body: everything after the closing delimiter line, untouched
        - first_block_line: 1-based document line of the block's first line

    Raises:
        PreambleValidationError: START_DELIMITER_MISSING or
            END_DELIMITER_MISSING (never suppressed)

    Examples:
        >>> split_preamble("---\\neip: 1\\n---\\nBody")
        ('eip: 1\\n', 'Body', 2)
    """
    start = DELIMITER + "\n"
    if not (text.startswith(start) or text == DELIMITER):
        raise PreambleValidationError(
            [PreambleIssue(ErrorKind.START_DELIMITER_MISSING, 1)]
        )

    rest = text[len(start):]
    match = _END_DELIMITER.search(rest)
    if match is None:
        raise PreambleValidationError([PreambleIssue(ErrorKind.END_DELIMITER_MISSING)])

    return rest[:match.start()], rest[match.end():], 2


def _record(
    issues: List[PreambleIssue],
    ctx: SuppressionContext,
    kind: ErrorKind,
    line_number: Optional[int] = None,
) -> None:
    if ctx.should_ignore(kind):
        logger.debug("suppressed %s (line %s)", kind.token, line_number)
        return
    issues.append(PreambleIssue(kind, line_number))


def _insert(
    preamble: Preamble,
    name: str,
    validator: Callable[[str], object],
    raw: str,
    line_number: int,
    issues: List[PreambleIssue],
    ctx: SuppressionContext,
) -> None:
    """Run a field validator and store its value or its error."""
    try:
        value = validator(raw)
    except FieldValidationError as e:
        preamble.set_invalid(name)
        _record(issues, ctx, e.kind, line_number)
    else:
        preamble.set_valid(name, value)


def _check_line_shape(
    key: str,
    value: str,
    line_number: int,
    issues: List[PreambleIssue],
    ctx: SuppressionContext,
) -> None:
    """Whitespace rules around the key and after the colon."""
    if key[:1].isspace():
        _record(issues, ctx, ErrorKind.LEADING_WHITESPACE, line_number)
    # trailing or internal
    if any(c.isspace() for c in key.lstrip()):
        _record(issues, ctx, ErrorKind.EXTRA_WHITESPACE, line_number)

    if not value:
        return
    if not value.strip():
        _record(issues, ctx, ErrorKind.TRAILING_WHITESPACE, line_number)
        return

    if not value.startswith(" "):
        _record(issues, ctx, ErrorKind.MISSING_SPACE_AFTER_COLON, line_number)
    elif value[1].isspace():
        _record(issues, ctx, ErrorKind.EXTRA_WHITESPACE, line_number)

    if value != value.rstrip():
        _record(issues, ctx, ErrorKind.TRAILING_WHITESPACE, line_number)


def _check_presence(
    preamble: Preamble, issues: List[PreambleIssue], ctx: SuppressionContext
) -> None:
    for name, kind in REQUIRED_FIELDS:
        if not preamble.is_present(name):
            _record(issues, ctx, kind)

    if preamble.type_ is not None:
        if preamble.type_.requires_category and not preamble.is_present("category"):
            _record(issues, ctx, ErrorKind.MISSING_CATEGORY_FIELD)
    elif not preamble.is_present("type_"):
        _record(issues, ctx, ErrorKind.MISSING_TYPE_FIELD)


def parse_preamble(
    text: str, ctx: Optional[SuppressionContext] = None
) -> Tuple[Preamble, str]:
    """
    Parse and validate the preamble of a document.

    Args:
        text: Newline-normalized document text
        ctx: Suppression context (defaults to suppressing nothing)

    Returns:
        Tuple of (preamble, body)

    Raises:
        PreambleValidationError: With every surfaced issue, in block line
            order followed by presence-check order
    """
    ctx = ctx if ctx is not None else SuppressionContext()
    block, body, first_line = split_preamble(text)

    preamble = Preamble()
    issues: List[PreambleIssue] = []

    for offset, line in enumerate(block.split("\n")):
        line_number = first_line + offset
        if not line:
            continue

        key, sep, value = line.partition(":")
        if not sep:
            _record(issues, ctx, ErrorKind.MALFORMED_FIELD, line_number)
            continue

        _check_line_shape(key, value, line_number, issues, ctx)

        target = FIELD_VALIDATORS.get(key.strip())
        if target is None:
            _record(issues, ctx, ErrorKind.UNKNOWN_PREAMBLE_FIELD, line_number)
            continue

        name, validator = target
        _insert(preamble, name, validator, value.strip(), line_number, issues, ctx)

    _check_presence(preamble, issues, ctx)

    if issues:
        logger.debug("preamble rejected with %d issue(s)", len(issues))
        raise PreambleValidationError(issues)

    return preamble, body
