"""Pricing reader for CSV price lists."""

import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from cab_billing.models.pricing import PricingRule
from cab_billing.readers.csv_rows import read_csv_rows

logger = logging.getLogger(__name__)


class PricingReader:
    """Reader for company pricing stored as CSV.

    Expected columns:

    ```
    company_id,cab_type,slot,rate,extra_per_hour,extra_per_km
    CMP-001,SUV,4hr,1200,150,10
    ```

    Rows that fail validation are skipped with a warning.

    Example:
        >>> rules = PricingReader().read_pricing("pricing.csv")
        >>> rules[0].rate
        Decimal('1200')
    """

    def read_pricing(self, path: Union[str, Path]) -> List[PricingRule]:
        """Read and validate pricing rules.

        Args:
            path: Path to the pricing CSV

        Returns:
            List of PricingRule objects in file order

        Raises:
            FileNotFoundError: If the file does not exist
        """
        rules = []
        for row_number, row in enumerate(read_csv_rows(path), start=1):
            fields = {
                key: value
                for key, value in row.items()
                if key in PricingRule.model_fields
            }
            try:
                rules.append(PricingRule(**fields))
            except ValidationError as e:
                logger.warning(f"Skipping pricing row {row_number}: {e}")

        logger.info(f"Loaded {len(rules)} pricing rules from {path}")
        return rules
