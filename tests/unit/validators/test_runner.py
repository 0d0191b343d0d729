"""
Tests for EipValidator and the text report.
"""
import pytest
from pathlib import Path
from unittest.mock import MagicMock

from eipv.core.exceptions import DocumentReadError
from eipv.core.logging_manager import EipvLogger
from eipv.models.enums import Category, EipType, Status
from eipv.validators.context import SuppressionContext
from eipv.validators.errors import ErrorKind, PreambleIssue
from eipv.validators.runner import EipValidationReport, EipValidator, format_eip_report


class TestEipValidator:
    """Tests for directory and file validation."""

    def test_discover_files_only_markdown(self, eip_dir):
        names = [p.name for p in EipValidator(eip_dir).discover_files()]
        assert names == ["eip-1559.md", "eip-2228.md", "eip-9999.md"]

    def test_discover_single_file(self, eip_dir):
        path = eip_dir / "eip-1559.md"
        assert EipValidator(path).discover_files() == [path]

    def test_discover_missing_path(self, tmp_path):
        with pytest.raises(DocumentReadError):
            EipValidator(tmp_path / "nope").discover_files()

    def test_validate_all(self, eip_dir):
        report = EipValidator(eip_dir).validate_all()

        assert report.files_checked == 3
        assert report.valid == 2
        assert report.invalid == 1
        assert report.skipped == 0
        assert not report.is_healthy
        assert report.issues == {
            "eip-9999.md": [
                PreambleIssue(ErrorKind.TITLE_EXCEEDS_MAX_LENGTH, 3),
                PreambleIssue(ErrorKind.UNKNOWN_STATUS, 6),
            ]
        }
        assert report.total_errors == 2

    def test_counts_cover_valid_documents_only(self, eip_dir):
        report = EipValidator(eip_dir).validate_all()
        assert report.statuses == {Status.FINAL: 2}
        assert report.types == {EipType.STANDARDS: 1, EipType.INFORMATIONAL: 1}
        assert report.categories == {Category.CORE: 1}

    def test_skip(self, eip_dir):
        ctx = SuppressionContext.from_options(skip="eip-9999.md")
        report = EipValidator(eip_dir, ctx).validate_all()
        assert report.skipped == 1
        assert report.files_checked == 2
        assert report.is_healthy

    def test_ignore(self, eip_dir):
        ctx = SuppressionContext.from_options(ignore="title_max_length,unknown_status")
        report = EipValidator(eip_dir, ctx).validate_all()
        assert report.valid == 3
        # status was rejected, so it isn't counted
        assert report.statuses == {Status.FINAL: 2}

    def test_unreadable_file_is_invalid(self, eip_dir):
        (eip_dir / "eip-0.md").write_bytes(b"\xff\xfe")
        report = EipValidator(eip_dir).validate_all()
        assert report.invalid == 2
        assert "eip-0.md" in report.read_errors

    def test_validate_file(self, eip_dir):
        validator = EipValidator(eip_dir)
        assert validator.validate_file(eip_dir / "eip-1559.md") == []
        kinds = [i.kind for i in validator.validate_file(eip_dir / "eip-9999.md")]
        assert kinds == [ErrorKind.TITLE_EXCEEDS_MAX_LENGTH, ErrorKind.UNKNOWN_STATUS]

    def test_logs_one_operation(self, eip_dir):
        logger = MagicMock(spec=EipvLogger)
        EipValidator(eip_dir, logger=logger).validate_all()

        logger.log_operation.assert_called_once()
        operation, details = logger.log_operation.call_args[0]
        assert operation == "validate"
        assert details["valid"] == 2
        assert details["invalid"] == 1


class TestFormatEipReport:
    """Tests for the text report."""

    def test_format(self, eip_dir):
        output = format_eip_report(EipValidator(eip_dir).validate_all())
        lines = output.split("\n")

        assert lines[0] == "eip-9999.md:3:\ttitle exceeds max length of 44 characters"
        assert lines[1] == "eip-9999.md:6:\tunknown status"
        assert lines[2] == ""
        assert lines[3].startswith("draft: 0, last_call: 0, accepted: 0, final: 2")
        assert lines[4] == "standards: 1, informational: 1, meta: 0"
        assert lines[5] == "core: 1, networking: 0, interface: 0, erc: 0"
        assert lines[-1] == "valid: 2, invalid: 1"

    def test_presence_errors_have_no_line(self):
        report = EipValidationReport()
        report.add_invalid("eip-1.md", [PreambleIssue(ErrorKind.MISSING_TYPE_FIELD)])
        assert "eip-1.md:\tmissing type field in preamble" in format_eip_report(report)

    def test_skipped_shown_when_nonzero(self):
        report = EipValidationReport(skipped=2)
        assert format_eip_report(report).endswith("valid: 0, invalid: 0, skipped: 2")
