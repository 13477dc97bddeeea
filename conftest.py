"""
Global pytest configuration and fixtures.
"""
import os
from typing import Dict

import pytest

from cab_billing.config import CabBillingConfig, reload_config
from cab_billing.config.logging_config import reset_logging

ENTRY_COLUMNS = [
    "entry_id",
    "entry_date",
    "company_id",
    "company_name",
    "vehicle_number",
    "cab_type",
    "slot",
    "start_time",
    "end_time",
    "odometer_start",
    "odometer_end",
    "rate",
    "tolls",
    "billed",
]


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "ENVIRONMENT": "testing",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
        "TAX_RATE": "0.18",
        "CURRENCY_SYMBOL": "₹",
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key in ("ENTRIES_FILE", "PRICING_FILE"):
        monkeypatch.delenv(key, raising=False)
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import cab_billing.config.settings
    cab_billing.config.settings._config = None

    yield test_env_vars

    cab_billing.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> CabBillingConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def sample_entry_rows():
    """Entry rows as exported from the entries screen."""
    return [
        ENTRY_COLUMNS,
        # 5h / 50km on a 4hr slot, priced from the pricing file
        ["ENT-2401", "2026-02-10", "CMP-001", "Acme Corp", "TN 09 AB 1234", "SUV",
         "4hr", "09:00", "14:00", "1000", "1050", "", "50", ""],
        # Exactly at the 8hr limit, no odometer, manual rate
        ["ENT-2402", "2026-02-03", "CMP-001", "Acme Corp", "TN 10 CD 5678", "Sedan",
         "8hr", "8:00 AM", "4:00 PM", "", "", "2000", "0", ""],
        # Already invoiced
        ["ENT-2403", "2026-02-15", "CMP-001", "Acme Corp", "TN 10 CD 5678", "Sedan",
         "4hr", "10:00", "12:00", "", "", "900", "", "TRUE"],
        # Other month
        ["ENT-2404", "2026-03-01", "CMP-001", "Acme Corp", "TN 09 AB 1234", "SUV",
         "4hr", "09:00", "13:00", "", "", "", "", ""],
        # Other company
        ["ENT-2405", "2026-02-11", "CMP-002", "Globex", "TN 22 EF 9012", "Sedan",
         "4hr", "09:00", "13:00", "", "", "", "", ""],
    ]


@pytest.fixture
def sample_pricing_rows():
    """Pricing rows per company, cab type and slot."""
    return [
        ["company_id", "cab_type", "slot", "rate", "extra_per_hour", "extra_per_km"],
        ["CMP-001", "SUV", "4hr", "1200", "150", "10"],
        ["CMP-001", "Sedan", "8hr", "1800", "120", "8"],
        ["CMP-002", "Sedan", "4hr", "800", "100", "9"],
    ]


def _write_csv(path, rows):
    path.write_text("\n".join(",".join(row) for row in rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def entries_csv(tmp_path, sample_entry_rows):
    """Entries CSV written to a temporary directory."""
    return _write_csv(tmp_path / "entries.csv", sample_entry_rows)


@pytest.fixture
def pricing_csv(tmp_path, sample_pricing_rows):
    """Pricing CSV written to a temporary directory."""
    return _write_csv(tmp_path / "pricing.csv", sample_pricing_rows)


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Reset root logging after each test (CLI runs configure it)."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    for file in ["coverage.xml", ".coverage"]:
        if os.path.exists(file):
            os.remove(file)


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "cli: mark test as exercising the command-line interface"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
