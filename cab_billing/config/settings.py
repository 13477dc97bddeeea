"""
Configuration management for the cab billing system.
"""

from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CabBillingConfig(BaseSettings):
    """Configuration settings for the cab billing system."""

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Invoicing Configuration
    tax_rate: Decimal = Field(default=Decimal("0.18"), alias="TAX_RATE")
    currency_symbol: str = Field(default="₹", alias="CURRENCY_SYMBOL")

    # Data Sources
    entries_file: Optional[str] = Field(default=None, alias="ENTRIES_FILE")
    pricing_file: Optional[str] = Field(default=None, alias="PRICING_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("tax_rate")
    @classmethod
    def validate_tax_rate(cls, v):
        """Ensure tax rate is a fraction between 0 and 1."""
        if v < 0 or v > 1:
            raise ValueError("Tax rate must be between 0 and 1 (e.g. 0.18 for 18%)")
        return v


def load_config(env_file: Optional[str] = None) -> CabBillingConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return CabBillingConfig()


# Global configuration instance
_config: Optional[CabBillingConfig] = None


def get_config() -> CabBillingConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> CabBillingConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
