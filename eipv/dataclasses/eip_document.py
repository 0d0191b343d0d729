#!/usr/bin/env python3
"""
eip_document.py
-------------------
Dataclass representing a validated EIP document.

An EipDocument only exists for documents whose preamble passed
validation (after suppression). Invalid documents surface as a
PreambleValidationError carrying every issue instead of a partial
document.

Usage:
    >>> doc = EipDocument.from_file(Path("EIPS/eip-1559.md"))
    >>> doc.preamble.status
    <Status.FINAL: 'Final'>
    >>> doc.body.startswith("## Simple Summary")
    True
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# --- Local imports ---
from eipv.core.exceptions import DocumentReadError
from eipv.models.preamble import Preamble
from eipv.validators.context import SuppressionContext
from eipv.validators.preamble import parse_preamble

logger = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    """Convert CRLF (and stray CR) line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass
class EipDocument:
    """
    A proposal whose preamble validated successfully.

    Attributes:
        preamble: Typed preamble fields
        body: Text after the closing delimiter line, untouched
        file_path: Source file path if loaded from file
    """

    preamble: Preamble
    body: str
    file_path: Optional[Path] = None

    # ---- Construction Methods ----
    @classmethod
    def from_text(
        cls, text: str, ctx: Optional[SuppressionContext] = None
    ) -> EipDocument:
        """
        Validate already-loaded document text.

        Args:
            text: Newline-normalized document text
            ctx: Suppression context (defaults to suppressing nothing)

        Returns:
            Validated EipDocument

        Raises:
            PreambleValidationError: If any unsuppressed issue was found
        """
        preamble, body = parse_preamble(text, ctx)
        return cls(preamble=preamble, body=body)

    @classmethod
    def from_file(
        cls, file_path: Path, ctx: Optional[SuppressionContext] = None
    ) -> EipDocument:
        """
        Read, newline-normalize and validate a document file.

        Args:
            file_path: Path to the .md file
            ctx: Suppression context (defaults to suppressing nothing)

        Returns:
            Validated EipDocument

        Raises:
            DocumentReadError: If the file can't be read as UTF-8
            PreambleValidationError: If any unsuppressed issue was found
        """
        file_path = Path(file_path)
        text = read_document(file_path)
        logger.debug("validating %s", file_path)

        doc = cls.from_text(text, ctx)
        doc.file_path = file_path
        return doc

    @property
    def eip(self) -> Optional[int]:
        return self.preamble.eip

    @property
    def title(self) -> Optional[str]:
        return self.preamble.title

    def __str__(self) -> str:
        return f"EIP-{self.preamble.eip}: {self.preamble.title}"


def read_document(file_path: Path) -> str:
    """
    Load a document from disk as newline-normalized text.

    Raises:
        DocumentReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return normalize_newlines(Path(file_path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"Cannot read {file_path}: {e}") from e
