"""Validator for ride entry records.

This module provides the checks the entry forms apply before an entry is
saved. It works on raw records (as typed into a form or read from a
spreadsheet) because the billing models deliberately turn invalid values
into "absent", which would hide them from validation.

Validation never changes billing: an entry with an unparseable end time is
still billed, just without time overage.
"""

from typing import Any, Dict, List, Mapping, Optional

from cab_billing.calculators.time_utils import parse_time_to_minutes
from cab_billing.calculators.usage_calculator import SLOT_LIMITS
from cab_billing.utils.numbers import to_number
from cab_billing.validators.validation_report import ValidationReport


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class EntryValidator:
    """Validates ride entry records.

    Checks:
    - Company and entry date are present (error)
    - Odometer readings are valid non-negative numbers (error)
    - Odometer end is not below odometer start (error)
    - Start/end times parse as 24-hour or 12-hour times (warning)
    - Slot is known, otherwise no overage is billed (warning)
    - Times and odometer readings are recorded (info)

    Example:
        >>> validator = EntryValidator()
        >>> report = validator.validate_record(
        ...     {"company_name": "Acme Corp", "entry_date": "2026-02-10",
        ...      "odometer_start": "100", "odometer_end": "90"}
        ... )
        >>> report.has_errors()
        True
    """

    def validate_record(
        self, record: Mapping[str, Any], row_number: Optional[int] = None
    ) -> ValidationReport:
        """Validate a single entry record.

        Args:
            record: Raw entry fields
            row_number: Optional row number for context in messages

        Returns:
            ValidationReport with any issues found
        """
        report = ValidationReport()
        context: Dict[str, Any] = {}
        if row_number is not None:
            context["row"] = row_number
        if not _is_blank(record.get("entry_id")):
            context["entry_id"] = record.get("entry_id")
        ctx = context or None

        self._validate_required(record, report, ctx)
        self._validate_odometer(record, report, ctx)
        self._validate_times(record, report, ctx)
        self._validate_slot(record, report, ctx)

        return report

    def validate_records(self, records: List[Mapping[str, Any]]) -> ValidationReport:
        """Validate multiple entry records.

        Rows are numbered from 1 in the order given.

        Returns:
            ValidationReport with all issues found across all records
        """
        report = ValidationReport()
        for index, record in enumerate(records, start=1):
            report.merge(self.validate_record(record, row_number=index))
        return report

    def _validate_required(
        self,
        record: Mapping[str, Any],
        report: ValidationReport,
        context: Optional[Dict[str, Any]],
    ) -> None:
        for field, label in (("company_name", "Company"), ("entry_date", "Entry date")):
            value = record.get(field)
            if _is_blank(value):
                report.add_error(field, f"{label} is required", value, context)

    def _validate_odometer(
        self,
        record: Mapping[str, Any],
        report: ValidationReport,
        context: Optional[Dict[str, Any]],
    ) -> None:
        readings = {}
        for field, label in (
            ("odometer_start", "Odometer start"),
            ("odometer_end", "Odometer end"),
        ):
            raw = record.get(field)
            if _is_blank(raw):
                report.add_info(
                    field,
                    f"{label} not recorded, distance overage cannot be billed",
                    raw,
                    context,
                )
                continue

            value = to_number(raw)
            if value is None or value < 0:
                report.add_error(field, f"{label} must be a valid number", raw, context)
                continue
            readings[field] = value

        start = readings.get("odometer_start")
        end = readings.get("odometer_end")
        if start is not None and end is not None and end < start:
            report.add_error(
                "odometer_end",
                "Odometer end cannot be less than odometer start",
                record.get("odometer_end"),
                context,
            )

    def _validate_times(
        self,
        record: Mapping[str, Any],
        report: ValidationReport,
        context: Optional[Dict[str, Any]],
    ) -> None:
        for field, label in (("start_time", "Start time"), ("end_time", "End time")):
            raw = record.get(field)
            if _is_blank(raw):
                report.add_info(
                    field,
                    f"{label} not recorded, time overage cannot be billed",
                    raw,
                    context,
                )
            elif parse_time_to_minutes(raw) is None:
                report.add_warning(
                    field,
                    f"{label} is not a valid time (use HH:MM or h:mm AM/PM)",
                    raw,
                    context,
                )

    def _validate_slot(
        self,
        record: Mapping[str, Any],
        report: ValidationReport,
        context: Optional[Dict[str, Any]],
    ) -> None:
        slot = record.get("slot")
        if _is_blank(slot) or slot not in SLOT_LIMITS:
            known = ", ".join(SLOT_LIMITS)
            report.add_warning(
                "slot",
                f"Unknown slot, no overage will be billed (known slots: {known})",
                slot,
                context,
            )
