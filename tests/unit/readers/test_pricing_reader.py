"""Unit tests for the pricing reader."""

import logging
from decimal import Decimal

import pytest

from cab_billing.readers.pricing_reader import PricingReader


class TestPricingReader:
    """Test reading pricing rules from CSV."""

    def test_reads_sample(self, pricing_csv):
        rules = PricingReader().read_pricing(pricing_csv)

        assert len(rules) == 3
        assert rules[0].company_id == "CMP-001"
        assert rules[0].cab_type == "SUV"
        assert rules[0].slot == "4hr"
        assert rules[0].rate == Decimal("1200")
        assert rules[0].extra_per_hour == Decimal("150")
        assert rules[0].extra_per_km == Decimal("10")

    def test_skips_invalid_rows(self, tmp_path, caplog):
        path = tmp_path / "pricing.csv"
        path.write_text(
            "company_id,cab_type,slot,rate,extra_per_hour,extra_per_km,notes\n"
            "CMP-001,SUV,4hr,1200,,,weekday\n"
            "CMP-001,SUV,8hr,,150,10,\n"
            ",Sedan,4hr,800,100,9,\n"
            "CMP-002,Sedan,4hr,abc,100,9,\n"
        )

        with caplog.at_level(logging.WARNING):
            rules = PricingReader().read_pricing(path)

        assert len(rules) == 1
        assert rules[0].extra_per_hour == Decimal("0")
        assert "Skipping pricing row 2" in caplog.text
        assert "Skipping pricing row 3" in caplog.text
        assert "Skipping pricing row 4" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PricingReader().read_pricing(tmp_path / "missing.csv")
