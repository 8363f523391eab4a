"""
Core math modules для simmer

Float-примитивы, на которых построены конверсии и проверки температур.
"""

from simmer.core.math.numerical_safeguards import (
    # Scale constants
    ABSOLUTE_ZERO_K,
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_SCALE,
    KELVIN_OFFSET,
    # NaN/Inf checks
    is_nan,
    is_valid_float,
    # Division
    ieee_divide,
    # Precision limits
    is_within,
    precision_limits,
)

__all__ = [
    # Scale constants
    "ABSOLUTE_ZERO_K",
    "FAHRENHEIT_OFFSET",
    "FAHRENHEIT_SCALE",
    "KELVIN_OFFSET",
    # NaN/Inf checks
    "is_nan",
    "is_valid_float",
    # Division
    "ieee_divide",
    # Precision limits
    "is_within",
    "precision_limits",
]
