"""Shared CSV loading for entry and pricing readers."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)


def read_csv_rows(path: Union[str, Path]) -> List[Dict[str, Optional[str]]]:
    """Read a CSV file into a list of row dictionaries.

    All cells are read as text. Column names and cells are stripped, and
    blank cells become None.

    Args:
        path: Path to the CSV file (header row first)

    Returns:
        One dictionary per data row

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        logger.info(f"No data found in {path}")
        return []

    df.columns = [str(column).strip() for column in df.columns]

    rows = []
    for row in df.to_dict(orient="records"):
        cleaned = {}
        for key, value in row.items():
            text = str(value).strip() if value is not None else ""
            cleaned[key] = text or None
        rows.append(cleaned)

    logger.debug(f"Read {len(rows)} rows from {path}")
    return rows
