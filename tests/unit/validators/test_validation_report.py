"""Unit tests for the validation report."""

from cab_billing.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)


class TestValidationIssue:
    """Test ValidationIssue formatting."""

    def test_str_without_context(self):
        issue = ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field="company_name",
            message="Company is required",
            value=None,
        )
        assert str(issue) == "[ERROR] company_name: Company is required"

    def test_str_with_context(self):
        issue = ValidationIssue(
            severity=ValidationSeverity.WARNING,
            field="slot",
            message="Unknown slot",
            value="12hr",
            context={"row": 3, "entry_id": "ENT-1"},
        )
        assert str(issue) == "[WARNING] slot: Unknown slot (row=3, entry_id=ENT-1)"


class TestValidationReport:
    """Test ValidationReport behaviour."""

    def test_empty_report(self):
        report = ValidationReport()

        assert report.is_valid()
        assert not report.has_errors()
        assert report.summary() == "No issues found"
        assert report.format() == "Validation successful - no issues found"

    def test_counts(self):
        report = ValidationReport()
        report.add_error("odometer_end", "Odometer end cannot be less", 90)
        report.add_warning("slot", "Unknown slot", "12hr")
        report.add_warning("end_time", "Invalid time", "25:00")
        report.add_info("start_time", "Start time missing", None)

        assert report.error_count == 1
        assert report.warning_count == 2
        assert report.info_count == 1
        assert not report.is_valid()
        assert report.has_errors()

    def test_warnings_do_not_invalidate(self):
        report = ValidationReport()
        report.add_warning("slot", "Unknown slot", "12hr")

        assert report.is_valid()

    def test_summary(self):
        report = ValidationReport()
        report.add_error("odometer_end", "Odometer end cannot be less", 90)
        report.add_info("start_time", "Start time missing", None)

        assert report.summary() == "1 error(s), 1 info message(s)"

    def test_get_issues_by_minimum_severity(self):
        report = ValidationReport()
        report.add_info("start_time", "missing", None)
        report.add_warning("slot", "unknown", "12hr")
        report.add_error("company_name", "required", None)

        assert len(report.get_issues(ValidationSeverity.INFO)) == 3
        assert len(report.get_issues(ValidationSeverity.WARNING)) == 2
        assert [i.field for i in report.get_issues(ValidationSeverity.ERROR)] == [
            "company_name"
        ]
        assert len(report.get_errors()) == 1
        assert len(report.get_warnings()) == 1

    def test_merge(self):
        first = ValidationReport()
        first.add_error("company_name", "required", None)
        second = ValidationReport()
        second.add_warning("slot", "unknown", "12hr")

        first.merge(second)

        assert first.error_count == 1
        assert first.warning_count == 1

    def test_format_groups_by_severity(self):
        report = ValidationReport()
        report.add_info("start_time", "missing", None)
        report.add_error("company_name", "required", None, {"row": 1})

        output = report.format()

        assert output.startswith("Validation Report - 1 error(s), 1 info message(s)")
        assert output.index("ERRORS:") < output.index("INFO:")
        assert "[ERROR] company_name: required (row=1)" in output
