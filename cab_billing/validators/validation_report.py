"""Validation report for collecting and formatting entry validation issues."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """Represents a single validation issue.

    Attributes:
        severity: The severity level of the issue
        field: The entry field that has the issue
        message: Human-readable description of the issue
        value: The value that caused the issue
        context: Optional context information (e.g., entry_id, row)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Collects validation issues found in ride entries.

    Errors make an entry invalid. Warnings and info messages point at data
    that billing will treat as absent, such as an unparseable end time.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("odometer_end", "Odometer end below start", 90)
        >>> report.add_info("start_time", "Start time missing", None)
        >>> report.is_valid()
        False
        >>> report.summary()
        '1 error(s), 1 info message(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        """Number of error-level issues."""
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of warning-level issues."""
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        """Number of info-level issues."""
        return self._count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Returns:
            True if no errors are present, False otherwise
        """
        return self.error_count == 0

    def has_errors(self) -> bool:
        return self.error_count > 0

    def add_issue(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an issue of any severity to the report.

        Args:
            severity: Severity of the issue
            field: The entry field with the issue
            message: Human-readable description
            value: The offending value
            context: Optional context information
        """
        self.issues.append(
            ValidationIssue(
                severity=severity,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def add_error(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.add_issue(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.add_issue(ValidationSeverity.WARNING, field, message, value, context)

    def add_info(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.add_issue(ValidationSeverity.INFO, field, message, value, context)

    def get_issues(self, min_severity: ValidationSeverity) -> List[ValidationIssue]:
        """Get issues at or above a severity level.

        Args:
            min_severity: Lowest severity to include

        Returns:
            Matching issues in the order they were added
        """
        return [issue for issue in self.issues if issue.severity >= min_severity]

    def get_errors(self) -> List[ValidationIssue]:
        return [
            issue for issue in self.issues if issue.severity == ValidationSeverity.ERROR
        ]

    def get_warnings(self) -> List[ValidationIssue]:
        return [
            issue
            for issue in self.issues
            if issue.severity == ValidationSeverity.WARNING
        ]

    def merge(self, other: "ValidationReport") -> None:
        """Merge another validation report into this one."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Get a summary with counts of errors, warnings, and info messages."""
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count > 0:
            parts.append(f"{self.info_count} info message(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)

    def format(self) -> str:
        """Format the validation report for display.

        Returns:
            Formatted string with all issues grouped by severity
        """
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]

        for severity, title in (
            (ValidationSeverity.ERROR, "ERRORS"),
            (ValidationSeverity.WARNING, "WARNINGS"),
            (ValidationSeverity.INFO, "INFO"),
        ):
            matching = [issue for issue in self.issues if issue.severity == severity]
            if matching:
                lines.append(f"\n{title}:")
                for issue in matching:
                    lines.append(f"  - {issue}")

        return "\n".join(lines)
