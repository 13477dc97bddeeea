"""Base model for all data models in the cab billing system.

This module provides a base Pydantic model with common configuration
and helper methods for serialization/deserialization.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Arbitrary types support for dates, times, decimals

    Example:
        >>> class Vehicle(BaseDataModel):
        ...     vehicle_number: str
        ...     cab_type: str
        >>> vehicle = Vehicle(vehicle_number="TN 09 AB 1234", cab_type="SUV")
        >>> vehicle.model_dump()
        {'vehicle_number': 'TN 09 AB 1234', 'cab_type': 'SUV'}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal, date, time
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # Unknown fields are rejected unless a model opts out
        extra="forbid",
        frozen=False,
    )
