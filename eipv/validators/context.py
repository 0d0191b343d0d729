#!/usr/bin/env python3
"""
context.py
----------
Suppression context for a validation run.

Holds the error kinds to ignore and the file names to skip. Built once
during setup (from CLI flags or a config file) and only read afterwards,
so a single instance can be shared by every document in the run.

Usage:
    from eipv.validators.context import SuppressionContext

    ctx = SuppressionContext.from_options(
        ignore="title_max_length,missing_discussions_to",
        skip="eip-20.md",
    )
    ctx.should_ignore(ErrorKind.TITLE_EXCEEDS_MAX_LENGTH)  # True
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import FrozenSet, Iterable, List, Optional, Set, Union

# --- Local imports ---
from eipv.core.cli_utils import split_csv
from eipv.validators.errors import ErrorKind


class SuppressionContext:
    """
    Error kinds to ignore and file names to skip.

    There is no removal operation: a context only grows during setup.
    """

    def __init__(self) -> None:
        self._ignored: Set[ErrorKind] = set()
        self._skipped: Set[str] = set()

    @classmethod
    def from_options(
        cls,
        ignore: Optional[Union[str, Iterable[str]]] = None,
        skip: Optional[Union[str, Iterable[str]]] = None,
    ) -> SuppressionContext:
        """
        Build a context from comma-separated tokens and file names.

        Args:
            ignore: Suppression tokens, e.g. "title_max_length,missing_type"
            skip: File names to skip, e.g. "eip-20.md, eip-721.md"

        Returns:
            Populated SuppressionContext

        Raises:
            UnknownSuppressionTokenError: On the first unrecognized token
        """
        ctx = cls()
        for token in split_csv(ignore):
            ctx.ignore(ErrorKind.from_token(token))
        for file_name in split_csv(skip):
            ctx.skip(file_name)
        return ctx

    def ignore(self, kind: ErrorKind) -> None:
        """Stop surfacing errors of this kind. Idempotent."""
        self._ignored.add(kind)

    def skip(self, file_name: str) -> None:
        """Exclude a file name from the run. Idempotent."""
        self._skipped.add(file_name)

    def should_ignore(self, kind: ErrorKind) -> bool:
        return kind in self._ignored

    def should_skip(self, file_name: str) -> bool:
        return file_name in self._skipped

    def filter(self, kinds: Iterable[ErrorKind]) -> List[ErrorKind]:
        """Drop ignored kinds, keeping their order."""
        return [kind for kind in kinds if kind not in self._ignored]

    @property
    def ignored(self) -> FrozenSet[ErrorKind]:
        return frozenset(self._ignored)

    @property
    def skipped(self) -> FrozenSet[str]:
        return frozenset(self._skipped)

    def __repr__(self) -> str:
        ignored = sorted(kind.token for kind in self._ignored)
        return f"SuppressionContext(ignored={ignored}, skipped={sorted(self._skipped)})"
