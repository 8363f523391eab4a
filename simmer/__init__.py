"""
simmer — temperature values that keep their unit

Wrap a float in a Temperature to keep its scale (Fahrenheit, Celsius, Kelvin),
convert between scales, do arithmetic, and unwrap the bare number with
float() when the unit is no longer needed.

CheckedTemperature adds an absolute-zero guarantee (and optional bounds) on
top of Temperature; it is exported only when SETTINGS.checked_enabled is set.

    >>> from simmer import Temperature
    >>> ice = Temperature.fahrenheit(32.0)
    >>> print(f"water freezes at {ice.to_celsius()}")
    water freezes at 0 °C
"""

from simmer.core.config import PRECISION, SETTINGS, Precision, SimmerConfig
from simmer.core.domain.temperature import Scale, Temperature
from simmer.core.rendering import TextSink, format_number

__version__ = "0.3.0"

__all__ = [
    # Config
    "PRECISION",
    "SETTINGS",
    "Precision",
    "SimmerConfig",
    # Temperature
    "Scale",
    "Temperature",
    # Rendering
    "TextSink",
    "format_number",
]

if SETTINGS.checked_enabled:
    from simmer.core.domain.checked import (
        BelowAbsoluteZeroError,
        BoundTooHighError,
        BoundTooLowError,
        CheckedTemperature,
        DivisionByZeroError,
        NotFiniteError,
        OutOfBoundsError,
        TemperatureValidationError,
    )

    __all__ += [
        "CheckedTemperature",
        "TemperatureValidationError",
        "NotFiniteError",
        "BelowAbsoluteZeroError",
        "OutOfBoundsError",
        "BoundTooLowError",
        "BoundTooHighError",
        "DivisionByZeroError",
    ]
