"""
Records — Сериализуемые модели температур

Immutable Pydantic модели для обмена температурами в виде dict/JSON.
Соответствуют схемам temperature.json и checked_temperature.json.

Границы CheckedTemperatureRecord задаются в шкале самой записи;
None означает отсутствие границы.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field, FiniteFloat, model_validator

from simmer.core.domain.checked import CheckedTemperature
from simmer.core.domain.temperature import Scale, Temperature


# =============================================================================
# TEMPERATURE RECORD
# =============================================================================


class TemperatureRecord(BaseModel):
    """
    Запись unchecked температуры.

    Immutable модель (frozen=True). Как и Temperature, допускает NaN/Inf.
    """

    scale: Scale = Field(..., description="Шкала (fahrenheit/celsius/kelvin)")
    value: float = Field(..., description="Значение в шкале записи")

    model_config = {"frozen": True, "use_enum_values": True}

    @classmethod
    def from_temperature(cls, temperature: Temperature) -> "TemperatureRecord":
        return cls(scale=temperature.scale, value=float(temperature.value))

    def to_temperature(self) -> Temperature:
        return Temperature(self.scale, self.value)


# =============================================================================
# CHECKED TEMPERATURE RECORD
# =============================================================================


class CheckedTemperatureRecord(BaseModel):
    """
    Запись CheckedTemperature с необязательными границами.

    Конечность значений проверяется моделью, абсолютный ноль и границы —
    при восстановлении через to_checked().
    """

    scale: Scale = Field(..., description="Шкала (fahrenheit/celsius/kelvin)")
    value: FiniteFloat = Field(..., description="Значение в шкале записи")
    lower_bound: Optional[FiniteFloat] = Field(
        default=None, description="Нижняя граница в шкале записи"
    )
    upper_bound: Optional[FiniteFloat] = Field(
        default=None, description="Верхняя граница в шкале записи"
    )

    model_config = {"frozen": True, "use_enum_values": True}

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "CheckedTemperatureRecord":
        """Нижняя граница не выше верхней"""
        if (
            self.lower_bound is not None
            and self.upper_bound is not None
            and self.lower_bound > self.upper_bound
        ):
            raise ValueError(
                f"lower_bound {self.lower_bound} exceeds upper_bound {self.upper_bound}"
            )
        return self

    @classmethod
    def from_checked(cls, checked: CheckedTemperature) -> "CheckedTemperatureRecord":
        lower, upper = checked.get_bounds()
        return cls(
            scale=checked.scale,
            value=float(checked.value),
            lower_bound=_finite_or_none(float(lower)),
            upper_bound=_finite_or_none(float(upper)),
        )

    def to_checked(self) -> CheckedTemperature:
        """
        Восстановление CheckedTemperature.

        Raises:
            TemperatureValidationError: Если значение или границы невалидны
        """
        checked = CheckedTemperature(Temperature(self.scale, self.value))
        if self.lower_bound is not None:
            checked = checked.with_lower_bound(self.lower_bound)
        if self.upper_bound is not None:
            checked = checked.with_upper_bound(self.upper_bound)
        return checked


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None
