"""
Domain models and value objects.

Contains the temperature value types: Temperature, CheckedTemperature and
their serializable records.
"""

from simmer.core.domain.checked import (
    BelowAbsoluteZeroError,
    BoundTooHighError,
    BoundTooLowError,
    Bounds,
    CheckedTemperature,
    DivisionByZeroError,
    NotFiniteError,
    OutOfBoundsError,
    TemperatureValidationError,
)
from simmer.core.domain.records import CheckedTemperatureRecord, TemperatureRecord
from simmer.core.domain.temperature import Scale, Temperature

__all__ = [
    # Temperature
    "Scale",
    "Temperature",
    # CheckedTemperature
    "Bounds",
    "CheckedTemperature",
    # Errors
    "TemperatureValidationError",
    "NotFiniteError",
    "BelowAbsoluteZeroError",
    "OutOfBoundsError",
    "BoundTooLowError",
    "BoundTooHighError",
    "DivisionByZeroError",
    # Records
    "TemperatureRecord",
    "CheckedTemperatureRecord",
]
