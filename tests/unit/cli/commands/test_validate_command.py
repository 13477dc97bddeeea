"""Unit tests for the validate command."""

import pytest
from click.testing import CliRunner

from cab_billing.cli.commands.validate import validate_entries


class TestValidateCommand:
    """Test suite for the validate command."""

    @pytest.fixture
    def runner(self):
        """Create a Click CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def broken_csv(self, tmp_path):
        path = tmp_path / "broken.csv"
        path.write_text(
            "entry_id,entry_date,company_name,slot,start_time,end_time,"
            "odometer_start,odometer_end\n"
            "ENT-1,2026-02-10,Acme Corp,4hr,09:00,14:00,100,90\n"
            "ENT-2,2026-02-11,Acme Corp,12hr,09:00,25:00,100,150\n"
        )
        return path

    def test_clean_entries(self, runner, mock_env, entries_csv):
        result = runner.invoke(validate_entries, ["--entries", str(entries_csv)])

        assert result.exit_code == 0
        assert f"Validating entries in {entries_csv}..." in result.output
        assert "Entries checked:  5" in result.output
        assert "Errors:           0" in result.output
        assert "Info:             8" in result.output
        assert "INFOS" not in result.output
        assert "Validation passed! No issues found." in result.output

    def test_info_severity(self, runner, mock_env, entries_csv):
        result = runner.invoke(
            validate_entries, ["--entries", str(entries_csv), "--severity", "info"]
        )

        assert result.exit_code == 0
        assert "INFOS (8):" in result.output
        assert "odometer_start" in result.output

    def test_errors_fail(self, runner, mock_env, broken_csv):
        result = runner.invoke(validate_entries, ["--entries", str(broken_csv)])

        assert result.exit_code == 2
        assert "ERRORS (1):" in result.output
        assert "Odometer end cannot be less than odometer start" in result.output
        assert "row=1, entry_id=ENT-1" in result.output
        assert "WARNINGS (2):" in result.output
        assert "Validation failed with 1 error(s)" in result.output

    def test_error_severity_hides_warnings(self, runner, mock_env, broken_csv):
        result = runner.invoke(
            validate_entries, ["--entries", str(broken_csv), "--severity", "ERROR"]
        )

        assert "ERRORS (1):" in result.output
        assert "WARNINGS" not in result.output

    def test_warnings_only(self, runner, mock_env, tmp_path):
        path = tmp_path / "entries.csv"
        path.write_text(
            "entry_id,entry_date,company_name,slot,start_time,end_time,"
            "odometer_start,odometer_end\n"
            "ENT-1,2026-02-10,Acme Corp,12hr,09:00,14:00,100,150\n"
        )

        result = runner.invoke(validate_entries, ["--entries", str(path)])

        assert result.exit_code == 0
        assert "Validation completed with 1 warning(s)" in result.output

    def test_many_issues_are_truncated(self, runner, mock_env, tmp_path):
        rows = [f"ENT-{i},2026-02-10,Acme Corp,12hr" for i in range(25)]
        path = tmp_path / "entries.csv"
        path.write_text("entry_id,entry_date,company_name,slot\n" + "\n".join(rows))

        result = runner.invoke(validate_entries, ["--entries", str(path)])

        assert "WARNINGS (25):" in result.output
        assert "... and 5 more" in result.output

    def test_entries_file_from_config(self, runner, mock_env, monkeypatch, entries_csv):
        monkeypatch.setenv("ENTRIES_FILE", str(entries_csv))

        result = runner.invoke(validate_entries, [])

        assert result.exit_code == 0
        assert str(entries_csv) in result.output

    def test_no_entries_file(self, runner, mock_env):
        result = runner.invoke(validate_entries, [])

        assert result.exit_code == 1
        assert "No entries file given" in result.output

    def test_invalid_severity(self, runner, mock_env, entries_csv):
        result = runner.invoke(
            validate_entries, ["--entries", str(entries_csv), "--severity", "fatal"]
        )

        assert result.exit_code == 2
        assert "Invalid value" in result.output
