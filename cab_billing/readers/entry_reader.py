"""Ride entry reader for CSV exports.

This module reads ride entries exported from the entries screen into
validated RideEntry objects.
"""

import datetime as dt
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from cab_billing.models.entry import RideEntry
from cab_billing.readers.csv_rows import read_csv_rows

logger = logging.getLogger(__name__)


class EntryReader:
    """Reader for ride entries stored as CSV.

    The expected file format is one header row followed by one row per
    entry. Column names are the RideEntry field names, for example:

    ```
    entry_id,entry_date,company_id,company_name,cab_type,slot,start_time,...
    ENT-2401,2026-02-10,CMP-001,Acme Corp,SUV,4hr,09:00,...
    ```

    Unknown columns are ignored. Rows without a date or company, or with an
    unreadable date, are skipped with a warning. Invalid numbers and times
    are kept as absent values, as billing expects.

    Example:
        >>> reader = EntryReader()
        >>> entries = reader.read_entries("entries.csv")
        >>> entries[0].company_name
        'Acme Corp'
    """

    DATE_FORMATS = [
        "%Y-%m-%d",  # ISO format: 2026-02-10
        "%d.%m.%Y",  # 10.02.2026
        "%d/%m/%Y",  # 10/02/2026
    ]

    def read_records(self, path: Union[str, Path]) -> List[Dict[str, Optional[str]]]:
        """Read raw entry records without model validation.

        Args:
            path: Path to the entries CSV

        Returns:
            One dictionary per row with blank cells as None
        """
        return read_csv_rows(path)

    def read_entries(self, path: Union[str, Path]) -> List[RideEntry]:
        """Read and parse ride entries.

        Args:
            path: Path to the entries CSV

        Returns:
            List of validated RideEntry objects

        Raises:
            FileNotFoundError: If the file does not exist
        """
        records = self.read_records(path)

        entries = []
        for row_number, record in enumerate(records, start=1):
            entry = self.parse_record(record, row_number)
            if entry:
                entries.append(entry)

        logger.info(
            f"Successfully parsed {len(entries)} of {len(records)} entries from {path}"
        )
        return entries

    def parse_record(
        self, record: Dict[str, Any], row_number: Optional[int] = None
    ) -> Optional[RideEntry]:
        """Parse a single record into a RideEntry.

        Args:
            record: Raw entry fields
            row_number: Optional row number for log messages

        Returns:
            RideEntry if the record is usable, None if it should be skipped
        """
        where = f"row {row_number}" if row_number is not None else "record"

        date_str = record.get("entry_date")
        if not date_str:
            logger.warning(f"Skipping {where} without entry_date")
            return None

        try:
            entry_date = self._parse_date(str(date_str))
        except ValueError as e:
            logger.warning(f"Skipping {where} with invalid date '{date_str}': {e}")
            return None

        try:
            return RideEntry(
                **{
                    **record,
                    "entry_date": entry_date,
                    "billed": self._parse_flag(record.get("billed")),
                }
            )
        except ValidationError as e:
            logger.warning(f"Skipping {where}, validation error: {e}")
            return None

    def _parse_date(self, date_str: str) -> dt.date:
        """Parse date string in multiple formats.

        Raises:
            ValueError: If date format is not recognized or invalid
        """
        date_str = date_str.strip()

        for fmt in self.DATE_FORMATS:
            try:
                return dt.datetime.strptime(date_str, fmt).date()
            except ValueError:
                continue

        raise ValueError(f"Invalid date format: {date_str}")

    def _parse_flag(self, value: Any) -> bool:
        """Interpret spreadsheet booleans such as TRUE, yes or 1."""
        if value is None:
            return False
        return str(value).strip().lower() in {"true", "yes", "y", "1"}
