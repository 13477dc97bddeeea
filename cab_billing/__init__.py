"""Corporate cab billing: slot-based entry billing and monthly invoicing."""

__version__ = "1.0.0"
