"""Validation layer for ride entry data quality."""

from cab_billing.validators.entry_validator import EntryValidator
from cab_billing.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "EntryValidator",
    "ValidationReport",
    "ValidationIssue",
    "ValidationSeverity",
]
