"""
Config — Build-wide настройки simmer

Две оси конфигурации, общие для всей библиотеки:
- precision: ширина float для всех payload и всего форматирования (f32 / f64)
- checked_enabled: экспортируется ли CheckedTemperature из пакета

Настройки фиксируются один раз при импорте (SETTINGS) и не меняются в рантайме.
Смешивать точности внутри одной сборки ЗАПРЕЩЕНО.
"""

from enum import Enum
from typing import Final, Union

import numpy as np
from pydantic import BaseModel, Field


# =============================================================================
# PRECISION
# =============================================================================


class Precision(str, Enum):
    """Ширина floating point для payload температур"""

    F32 = "f32"
    F64 = "f64"

    @property
    def dtype(self) -> type:
        """numpy dtype, соответствующий точности"""
        if self is Precision.F32:
            return np.float32
        return np.float64

    @property
    def min(self) -> float:
        """Минимальное конечное значение"""
        return float(np.finfo(self.dtype).min)

    @property
    def max(self) -> float:
        """Максимальное конечное значение"""
        return float(np.finfo(self.dtype).max)

    def coerce(self, value: Union[float, int]) -> float:
        """
        Приведение числа к выбранной точности.

        F64 отдаёт обычный Python float (IEEE double), F32 отдаёт np.float32,
        чтобы вся последующая арифметика шла в 32 битах.

        Args:
            value: Исходное число

        Returns:
            Число выбранной точности
        """
        if self is Precision.F32:
            return np.float32(value)
        return float(value)


# =============================================================================
# LIBRARY CONFIG
# =============================================================================


class SimmerConfig(BaseModel):
    """
    Конфигурация библиотеки.

    Immutable модель (frozen=True): конфигурация задаётся на всю сборку.
    """

    precision: Precision = Field(
        default=Precision.F64, description="Ширина float для всех температур"
    )
    checked_enabled: bool = Field(
        default=True, description="Включает CheckedTemperature в публичном API"
    )

    model_config = {"frozen": True}


# Build-wide настройки. Для f32-сборки: SimmerConfig(precision=Precision.F32)
SETTINGS: Final[SimmerConfig] = SimmerConfig()

PRECISION: Final[Precision] = SETTINGS.precision
