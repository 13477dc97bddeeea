"""Unit tests for the pricing model."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from cab_billing.models.pricing import PricingRule


class TestPricingRule:
    """Test suite for PricingRule."""

    def test_valid_rule(self):
        rule = PricingRule(
            company_id="CMP-001",
            cab_type="SUV",
            slot="4hr",
            rate="1200",
            extra_per_hour="150",
            extra_per_km=10,
        )

        assert rule.rate == Decimal("1200")
        assert rule.extra_per_hour == Decimal("150")
        assert rule.extra_per_km == Decimal("10")

    def test_overage_prices_default_to_zero(self):
        rule = PricingRule(
            company_id="CMP-001", cab_type="SUV", slot="4hr", rate=1200, extra_per_km=""
        )

        assert rule.extra_per_hour == Decimal("0")
        assert rule.extra_per_km == Decimal("0")

    def test_keys_are_stripped(self):
        rule = PricingRule(company_id=" CMP-001 ", cab_type="SUV ", slot=" 8hr", rate=1)

        assert rule.company_id == "CMP-001"
        assert rule.cab_type == "SUV"
        assert rule.slot == "8hr"

    @pytest.mark.parametrize("rate", [None, "", "  "])
    def test_rate_required(self, rate):
        with pytest.raises(ValidationError, match="rate is required"):
            PricingRule(company_id="CMP-001", cab_type="SUV", slot="4hr", rate=rate)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            PricingRule(company_id="CMP-001", cab_type="SUV", slot="4hr", rate=-1)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="Cannot convert"):
            PricingRule(company_id="CMP-001", cab_type="SUV", slot="4hr", rate="abc")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            PricingRule(company_id="CMP-001", cab_type="SUV", slot="4hr", rate="inf")

    def test_blank_key_rejected(self):
        with pytest.raises(ValidationError):
            PricingRule(company_id="  ", cab_type="SUV", slot="4hr", rate=1200)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PricingRule(
                company_id="CMP-001", cab_type="SUV", slot="4hr", rate=1200, gst=18
            )
