#!/usr/bin/env python3
"""
errors.py
---------
Closed taxonomy of preamble validation failures.

Every failure the parser or a field validator can report is one member of
ErrorKind. Members carry no instance data: equality and hashing are by
member only, which is what lets the suppression context work as a plain
set. Each member's value doubles as its suppression token (the string
accepted by `eipv --ignore`), and `message` is its fixed human-readable
text. The two delimiter kinds abort the parse and are not accepted as
tokens.

Positional detail lives outside the kind, in PreambleIssue.

Usage:
    from eipv.validators.errors import ErrorKind

    ErrorKind.from_token("title_max_length")
    ErrorKind.TITLE_EXCEEDS_MAX_LENGTH.message
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

# --- Local imports ---
from eipv.core.exceptions import UnknownSuppressionTokenError


class ErrorKind(str, Enum):
    """Every way a preamble can fail validation."""

    # ---- Block structure ----
    START_DELIMITER_MISSING = "start_delimiter_missing"
    END_DELIMITER_MISSING = "end_delimiter_missing"

    # ---- Line shape ----
    MALFORMED_FIELD = "malformed_field"
    MISSING_SPACE_AFTER_COLON = "missing_space_after_colon"
    LEADING_WHITESPACE = "leading_whitespace"
    EXTRA_WHITESPACE = "extra_whitespace"
    TRAILING_WHITESPACE = "trailing_whitespace"
    UNKNOWN_PREAMBLE_FIELD = "unknown_preamble_field"

    # ---- Missing required fields ----
    MISSING_EIP_FIELD = "missing_eip"
    MISSING_TITLE_FIELD = "missing_title"
    MISSING_AUTHOR_FIELD = "missing_author"
    MISSING_DISCUSSIONS_TO_FIELD = "missing_discussions_to"
    MISSING_STATUS_FIELD = "missing_status"
    MISSING_TYPE_FIELD = "missing_type"
    MISSING_CATEGORY_FIELD = "missing_category"

    # ---- Field values ----
    MALFORMED_EIP_NUMBER = "malformed_eip_number"
    TITLE_EXCEEDS_MAX_LENGTH = "title_max_length"
    DESCRIPTION_EXCEEDS_MAX_LENGTH = "description_max_length"
    MALFORMED_DISCUSSIONS_TO = "malformed_discussions_to"
    MALFORMED_RESOLUTION = "malformed_resolution"
    UNKNOWN_STATUS = "unknown_status"
    UNKNOWN_TYPE = "unknown_type"
    UNKNOWN_CATEGORY = "unknown_category"
    MALFORMED_LAST_CALL_DEADLINE = "malformed_last_call_deadline"
    MALFORMED_REVIEW_PERIOD_END = "malformed_review_period_end"
    MALFORMED_CREATED = "malformed_created"
    MALFORMED_UPDATED = "malformed_updated"

    # ---- Comma-separated lists ----
    MISSING_SPACE_AFTER_COMMA = "missing_space_after_comma"
    EXTRA_WHITESPACE_BEFORE_COMMA = "extra_whitespace_before_comma"
    OUT_OF_ORDER_EIPS = "out_of_order_eips"

    # ---- Authors ----
    UNMATCHED_EMAIL_DELIMITER = "unmatched_email_delimiter"
    UNMATCHED_HANDLE_DELIMITER = "unmatched_handle_delimiter"
    AUTHOR_HAS_EMAIL_AND_HANDLE = "author_email_and_handle"
    AUTHOR_HAS_NO_CONTACT_DETAILS = "author_no_contact_details"
    TRAILING_INFO_AFTER_EMAIL = "trailing_info_after_email"
    TRAILING_INFO_AFTER_HANDLE = "trailing_info_after_handle"
    MALFORMED_EMAIL = "malformed_email"
    MALFORMED_HANDLE = "malformed_handle"

    @property
    def message(self) -> str:
        """Canonical human-readable text for this kind."""
        return _MESSAGES[self]

    @property
    def token(self) -> str:
        """Suppression token accepted by --ignore."""
        return self.value

    @property
    def is_structural(self) -> bool:
        """Delimiter failures abort the parse and have no suppression token."""
        return self in (
            ErrorKind.START_DELIMITER_MISSING,
            ErrorKind.END_DELIMITER_MISSING,
        )

    @classmethod
    def tokens(cls) -> List[str]:
        """All accepted suppression tokens, in declaration order."""
        return [kind.value for kind in cls if not kind.is_structural]

    @classmethod
    def from_token(cls, token: str) -> ErrorKind:
        """
        Resolve a suppression token to its error kind.

        Args:
            token: Token as typed on the command line (surrounding
                whitespace is ignored)

        Returns:
            The matching ErrorKind

        Raises:
            UnknownSuppressionTokenError: If no suppressible kind uses
                this token
        """
        try:
            kind = cls(token.strip())
        except ValueError:
            raise UnknownSuppressionTokenError(token) from None
        if kind.is_structural:
            raise UnknownSuppressionTokenError(token)
        return kind


_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.START_DELIMITER_MISSING: "missing initial '---' in preamble",
    ErrorKind.END_DELIMITER_MISSING: "missing trailing '---' in preamble",
    ErrorKind.MALFORMED_FIELD: "malformed field",
    ErrorKind.MISSING_SPACE_AFTER_COLON: "missing a `space` between colon and value",
    ErrorKind.LEADING_WHITESPACE: "leading whitespace",
    ErrorKind.EXTRA_WHITESPACE: "extra whitespace",
    ErrorKind.TRAILING_WHITESPACE: "trailing whitespace",
    ErrorKind.UNKNOWN_PREAMBLE_FIELD: "unknown preamble field",
    ErrorKind.MISSING_EIP_FIELD: "missing EIP field in preamble",
    ErrorKind.MISSING_TITLE_FIELD: "missing title field in preamble",
    ErrorKind.MISSING_AUTHOR_FIELD: "missing author field in preamble",
    ErrorKind.MISSING_DISCUSSIONS_TO_FIELD: "missing discussions-to field in preamble",
    ErrorKind.MISSING_STATUS_FIELD: "missing status field in preamble",
    ErrorKind.MISSING_TYPE_FIELD: "missing type field in preamble",
    ErrorKind.MISSING_CATEGORY_FIELD: "missing category field in preamble",
    ErrorKind.MALFORMED_EIP_NUMBER: "EIP should be an unsigned integer",
    ErrorKind.TITLE_EXCEEDS_MAX_LENGTH: "title exceeds max length of 44 characters",
    ErrorKind.DESCRIPTION_EXCEEDS_MAX_LENGTH: "description exceeds max length of 140 characters",
    ErrorKind.MALFORMED_DISCUSSIONS_TO: "discussions-to must be a URL",
    ErrorKind.MALFORMED_RESOLUTION: "resolution must be a URL",
    ErrorKind.UNKNOWN_STATUS: "unknown status",
    ErrorKind.UNKNOWN_TYPE: "unknown type",
    ErrorKind.UNKNOWN_CATEGORY: "unknown category",
    ErrorKind.MALFORMED_LAST_CALL_DEADLINE: "malformed last-call-deadline date",
    ErrorKind.MALFORMED_REVIEW_PERIOD_END: "malformed review-period-end date",
    ErrorKind.MALFORMED_CREATED: "malformed created date",
    ErrorKind.MALFORMED_UPDATED: "malformed updated date",
    ErrorKind.MISSING_SPACE_AFTER_COMMA: (
        "comma-separated values must have a single space following each comma"
    ),
    ErrorKind.EXTRA_WHITESPACE_BEFORE_COMMA: (
        "comma-separated values must not have spaces before a comma"
    ),
    ErrorKind.OUT_OF_ORDER_EIPS: "numbers must be in ascending order",
    ErrorKind.UNMATCHED_EMAIL_DELIMITER: "unmatched email delimiter",
    ErrorKind.UNMATCHED_HANDLE_DELIMITER: "unmatched handle delimiter",
    ErrorKind.AUTHOR_HAS_EMAIL_AND_HANDLE: "author can't include both an email and handle",
    ErrorKind.AUTHOR_HAS_NO_CONTACT_DETAILS: "author has no contact details",
    ErrorKind.TRAILING_INFO_AFTER_EMAIL: "trailing information after email",
    ErrorKind.TRAILING_INFO_AFTER_HANDLE: "trailing information after handle",
    ErrorKind.MALFORMED_EMAIL: "malformed email",
    ErrorKind.MALFORMED_HANDLE: "malformed handle",
}


@dataclass(frozen=True)
class PreambleIssue:
    """
    An error kind plus where it was found.

    line_number is 1-based within the whole document; None for
    presence-check failures, which have no line.
    """

    kind: ErrorKind
    line_number: Optional[int] = None

    @property
    def message(self) -> str:
        return self.kind.message

    def __str__(self) -> str:
        if self.line_number is None:
            return self.kind.message
        return f"line {self.line_number}: {self.kind.message}"
