#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the eipv project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in different subsystems.

Exception Hierarchy:
    Exception (built-in)
    └── EipvError - Base for all eipv errors
        ├── ValidationError - Document validation failures
        │   ├── FieldValidationError - A single preamble value failed its validator
        │   └── PreambleValidationError - A document failed with one or more errors
        ├── ConfigurationError - Invalid run configuration
        │   └── UnknownSuppressionTokenError - Unrecognized --ignore token
        └── DocumentReadError - Document could not be loaded from disk

Usage:
    from eipv.core.exceptions import PreambleValidationError

    try:
        doc = EipDocument.from_text(text, ctx)
    except PreambleValidationError as e:
        for issue in e.issues:
            print(issue.kind.message)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from eipv.validators.errors import ErrorKind, PreambleIssue


class EipvError(Exception):
    """
    Base exception for all eipv errors.

    Catch this to handle any failure raised by the package, or catch
    specific subclasses for more granular error handling.
    """

    pass


class ValidationError(EipvError):
    """
    Exception for document validation failures.

    Parent of the field-level and document-level validation errors.
    Never raised directly.
    """

    pass


class FieldValidationError(ValidationError):
    """
    Exception raised by a field validator when a raw value is rejected.

    Carries exactly one error kind and no positional data; the preamble
    parser attaches the line number when it records the failure.

    Attributes:
        kind: The ErrorKind describing the failure

    Examples:
        >>> raise FieldValidationError(ErrorKind.MALFORMED_EIP_NUMBER)
    """

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.message)


class PreambleValidationError(ValidationError):
    """
    Exception for documents that failed preamble validation.

    Raised once per document with every surfaced issue, in the order the
    parser found them (block line order, then presence checks).

    Attributes:
        issues: Ordered list of PreambleIssue

    Examples:
        >>> try:
        ...     EipDocument.from_text("no preamble")
        ... except PreambleValidationError as e:
        ...     e.kinds
        [<ErrorKind.START_DELIMITER_MISSING: 'start_delimiter_missing'>]
    """

    def __init__(self, issues: Sequence[PreambleIssue]) -> None:
        self.issues: List[PreambleIssue] = list(issues)
        summary = "; ".join(issue.kind.message for issue in self.issues)
        super().__init__(summary or "invalid preamble")

    @property
    def kinds(self) -> List[ErrorKind]:
        """Error kinds without positional data, in order."""
        return [issue.kind for issue in self.issues]


class ConfigurationError(EipvError):
    """
    Exception for invalid run configuration.

    Raised while building the suppression context or loading a config
    file, always before any document is processed.

    Examples:
        >>> raise ConfigurationError("Config file must contain a mapping")
    """

    pass


class UnknownSuppressionTokenError(ConfigurationError):
    """
    Exception for an unrecognized error-kind token in an ignore list.

    Attributes:
        token: The token that could not be resolved

    Examples:
        >>> raise UnknownSuppressionTokenError("title_lenght")
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unknown validator: '{token}'")


class DocumentReadError(EipvError):
    """
    Exception for documents that cannot be read from disk.

    Raised when a file is missing, unreadable or not valid UTF-8.

    Examples:
        >>> raise DocumentReadError("Cannot read eip-1.md: permission denied")
    """

    pass
