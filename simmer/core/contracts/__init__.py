"""
Contract Validation Module

Модуль для валидации и сериализации температур по JSON контрактам.
"""

from .validators import (
    CheckedTemperatureValidator,
    ContractValidator,
    SchemaLoader,
    TemperatureValidator,
    dump_checked_temperature,
    dump_temperature,
    load_checked_temperature,
    load_temperature,
    validate_checked_temperature,
    validate_temperature,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TemperatureValidator",
    "CheckedTemperatureValidator",
    # Validation
    "validate_temperature",
    "validate_checked_temperature",
    # Serialization
    "dump_temperature",
    "load_temperature",
    "dump_checked_temperature",
    "load_checked_temperature",
]
