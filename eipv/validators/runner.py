#!/usr/bin/env python3
"""
runner.py
---------
Corpus-level validation of EIP files.

Walks a single file or every `.md` file directly inside a directory,
validates each one independently and aggregates the outcome:
- per-file surfaced issues
- valid / invalid / skipped counts
- status, type and category counts over valid documents

Files named in the suppression context's skip list are counted as
skipped and never read.

Usage:
    from eipv.validators.runner import EipValidator, format_eip_report

    validator = EipValidator(Path("EIPS"), ctx)
    report = validator.validate_all()
    print(format_eip_report(report))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# --- Local imports ---
from eipv.core.exceptions import DocumentReadError, PreambleValidationError
from eipv.core.logging_manager import EipvLogger, safe_logger
from eipv.core.paths import EIP_SUFFIX
from eipv.dataclasses.eip_document import EipDocument
from eipv.models.enums import Category, EipType, Status
from eipv.validators.context import SuppressionContext
from eipv.validators.errors import PreambleIssue


@dataclass
class EipValidationReport:
    """Complete validation report for one run."""

    files_checked: int = 0
    valid: int = 0
    invalid: int = 0
    skipped: int = 0
    issues: Dict[str, List[PreambleIssue]] = field(default_factory=dict)
    read_errors: Dict[str, str] = field(default_factory=dict)
    statuses: Counter = field(default_factory=Counter)
    types: Counter = field(default_factory=Counter)
    categories: Counter = field(default_factory=Counter)

    def add_valid(self, doc: EipDocument) -> None:
        """Count a valid document and its classification."""
        self.valid += 1
        preamble = doc.preamble
        if preamble.status is not None:
            self.statuses[preamble.status] += 1
        if preamble.type_ is not None:
            self.types[preamble.type_] += 1
        if preamble.category is not None:
            self.categories[preamble.category] += 1

    def add_invalid(self, file_name: str, issues: List[PreambleIssue]) -> None:
        self.invalid += 1
        self.issues[file_name] = list(issues)

    def add_read_error(self, file_name: str, message: str) -> None:
        self.invalid += 1
        self.read_errors[file_name] = message

    @property
    def total_errors(self) -> int:
        return sum(len(file_issues) for file_issues in self.issues.values()) + len(
            self.read_errors
        )

    @property
    def has_errors(self) -> bool:
        return self.invalid > 0

    @property
    def is_healthy(self) -> bool:
        """Check if every checked file is valid."""
        return not self.has_errors


class EipValidator:
    """Validates a file or directory of EIP documents."""

    def __init__(
        self,
        path: Path,
        ctx: Optional[SuppressionContext] = None,
        logger: Optional[EipvLogger] = None,
    ):
        """
        Initialize the validator.

        Args:
            path: A single EIP file or a directory of them
            ctx: Suppression context shared by every document
            logger: Optional logger instance
        """
        self.path = Path(path)
        self.ctx = ctx if ctx is not None else SuppressionContext()
        self.logger = logger

    def discover_files(self) -> List[Path]:
        """
        List the documents this run covers.

        Returns:
            [path] for a file, sorted `.md` files for a directory

        Raises:
            DocumentReadError: If the path doesn't exist
        """
        if self.path.is_file():
            return [self.path]
        if self.path.is_dir():
            return sorted(
                p for p in self.path.iterdir() if p.is_file() and p.suffix == EIP_SUFFIX
            )
        raise DocumentReadError(f"No such file or directory: {self.path}")

    def _validate(self, file_path: Path) -> Tuple[Optional[EipDocument], List[PreambleIssue]]:
        try:
            return EipDocument.from_file(file_path, self.ctx), []
        except PreambleValidationError as e:
            return None, e.issues

    def validate_file(self, file_path: Path) -> List[PreambleIssue]:
        """
        Validate a single file, ignoring the skip list.

        Args:
            file_path: Path to the EIP file

        Returns:
            Surfaced issues; empty if the document is valid

        Raises:
            DocumentReadError: If the file can't be read
        """
        _, issues = self._validate(file_path)
        return issues

    def validate_all(self) -> EipValidationReport:
        """
        Validate every discovered document.

        Returns:
            Complete validation report
        """
        log = safe_logger(self.logger)
        report = EipValidationReport()

        for file_path in self.discover_files():
            name = file_path.name
            if self.ctx.should_skip(name):
                report.skipped += 1
                log.log_debug("Skipped file", {"file": name})
                continue

            report.files_checked += 1
            try:
                doc, issues = self._validate(file_path)
            except DocumentReadError as e:
                log.log_warning(str(e))
                report.add_read_error(name, str(e))
                continue

            if doc is not None:
                report.add_valid(doc)
                log.log_debug("Valid document", {"file": name})
            else:
                report.add_invalid(name, issues)
                log.log_debug(
                    "Invalid document",
                    {"file": name, "errors": [issue.kind.token for issue in issues]},
                )

        log.log_operation(
            "validate",
            {
                "path": str(self.path),
                "files_checked": report.files_checked,
                "valid": report.valid,
                "invalid": report.invalid,
                "skipped": report.skipped,
                "ignored": sorted(kind.token for kind in self.ctx.ignored),
            },
        )
        return report


def _counts_line(counter: Counter, members) -> str:
    return ", ".join(f"{m.name.lower()}: {counter.get(m, 0)}" for m in members)


def format_eip_report(report: EipValidationReport) -> str:
    """
    Format a validation report as readable text.

    One `file:line:<TAB>message` line per surfaced error (the line number
    is omitted for presence checks), then the aggregate counts.

    Args:
        report: Validation report to format

    Returns:
        Formatted report string
    """
    lines = []

    for file_name, file_issues in report.issues.items():
        for issue in file_issues:
            if issue.line_number is None:
                lines.append(f"{file_name}:\t{issue.message}")
            else:
                lines.append(f"{file_name}:{issue.line_number}:\t{issue.message}")

    for file_name, message in report.read_errors.items():
        lines.append(f"{file_name}:\t{message}")

    lines.append("")
    lines.append(_counts_line(report.statuses, Status))
    lines.append(_counts_line(report.types, EipType))
    lines.append(_counts_line(report.categories, Category))

    summary = f"valid: {report.valid}, invalid: {report.invalid}"
    if report.skipped:
        summary += f", skipped: {report.skipped}"
    lines.append(summary)

    return "\n".join(lines)
