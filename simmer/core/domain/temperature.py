"""
Temperature — Температура с единицей измерения

Единственный допустимый способ хранить температуру вместе со шкалой:
- Fahrenheit (°F)
- Celsius (°C)
- Kelvin (K)

Temperature — "unchecked" быстрый путь: конструирование никогда не падает,
принимаются любые float, включая значения ниже абсолютного нуля, NaN и Inf.
Проверка физической корректности — ответственность CheckedTemperature.

ФОРМУЛЫ (хаб — Celsius, число формул линейно по числу шкал):
    K = C + 273.15
    C = K - 273.15
    C = (F - 32) / 1.8
    F = C * 1.8 + 32

СРАВНЕНИЕ:
    Равенство и порядок — по значению, нормализованному в Kelvin, без epsilon.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Union

from simmer.core.config import PRECISION
from simmer.core.math.numerical_safeguards import (
    ABSOLUTE_ZERO_K,
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_SCALE,
    KELVIN_OFFSET,
    ieee_divide,
    is_nan,
    is_valid_float,
)
from simmer.core.rendering import (
    TextSink,
    format_number,
    render_debug,
    render_display,
    write_display,
)


# =============================================================================
# ENUMS
# =============================================================================


class Scale(str, Enum):
    """Температурная шкала"""

    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        """Обозначение единицы: °F, °C или K"""
        return _SYMBOLS[self]


_SYMBOLS = {
    Scale.FAHRENHEIT: "°F",
    Scale.CELSIUS: "°C",
    Scale.KELVIN: "K",
}


# =============================================================================
# HUB-КОНВЕРТЕРЫ
# =============================================================================


def _to_celsius(scale: Scale, value: float) -> float:
    if scale is Scale.FAHRENHEIT:
        return (value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE
    if scale is Scale.KELVIN:
        return value - KELVIN_OFFSET
    return value


def _from_celsius(scale: Scale, celsius: float) -> float:
    if scale is Scale.FAHRENHEIT:
        return celsius * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET
    if scale is Scale.KELVIN:
        return celsius + KELVIN_OFFSET
    return celsius


# =============================================================================
# TEMPERATURE
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class Temperature:
    """
    Значение температуры в одной из трёх шкал.

    Immutable (frozen=True): все операции возвращают новый экземпляр.
    Payload приводится к build-wide точности (f32/f64) при создании.

    Examples:
        >>> ice = Temperature.fahrenheit(32.0)
        >>> str(ice.to_celsius())
        '0 °C'
        >>> float(Temperature.celsius(0.0).to_kelvin())
        273.15
    """

    scale: Scale
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "scale", Scale(self.scale))
        object.__setattr__(self, "value", PRECISION.coerce(self.value))

    # -------------------------------------------------------------------------
    # Конструкторы по шкалам
    # -------------------------------------------------------------------------

    @classmethod
    def fahrenheit(cls, value: float) -> "Temperature":
        """Температура в Fahrenheit"""
        return cls(Scale.FAHRENHEIT, value)

    @classmethod
    def celsius(cls, value: float) -> "Temperature":
        """Температура в Celsius"""
        return cls(Scale.CELSIUS, value)

    @classmethod
    def kelvin(cls, value: float) -> "Temperature":
        """Температура в Kelvin"""
        return cls(Scale.KELVIN, value)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_scale(self, scale: Scale) -> "Temperature":
        """
        Конверсия в заданную шкалу.

        Конверсия в собственную шкалу возвращает self без вычислений.

        Args:
            scale: Целевая шкала

        Returns:
            Temperature в целевой шкале
        """
        scale = Scale(scale)
        if scale is self.scale:
            return self
        return Temperature(scale, _from_celsius(scale, _to_celsius(self.scale, self.value)))

    def to_fahrenheit(self) -> "Temperature":
        """
        Конверсия в Fahrenheit.

        Examples:
            >>> float(Temperature.celsius(100.0).to_fahrenheit())
            212.0
        """
        return self.to_scale(Scale.FAHRENHEIT)

    def to_celsius(self) -> "Temperature":
        """Конверсия в Celsius"""
        return self.to_scale(Scale.CELSIUS)

    def to_kelvin(self) -> "Temperature":
        """Конверсия в Kelvin"""
        return self.to_scale(Scale.KELVIN)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_finite(self) -> bool:
        return is_valid_float(self.value)

    def is_nan(self) -> bool:
        return is_nan(self.value)

    def is_below_absolute_zero(self) -> bool:
        """True если значение в Kelvin строго меньше 0 (NaN — False)"""
        return self.to_kelvin().value < ABSOLUTE_ZERO_K

    # -------------------------------------------------------------------------
    # Арифметика: шкала левого операнда побеждает
    # -------------------------------------------------------------------------

    def __add__(self, other: "Temperature") -> "Temperature":
        if not isinstance(other, Temperature):
            return NotImplemented
        rhs = other.to_scale(self.scale)
        return Temperature(self.scale, self.value + rhs.value)

    def __sub__(self, other: "Temperature") -> "Temperature":
        if not isinstance(other, Temperature):
            return NotImplemented
        rhs = other.to_scale(self.scale)
        return Temperature(self.scale, self.value - rhs.value)

    def __mul__(self, factor: Union[float, int]) -> "Temperature":
        if isinstance(factor, Temperature):
            return NotImplemented
        return Temperature(self.scale, self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Union[float, int]) -> "Temperature":
        # x / 0 → ±inf или NaN, без исключения
        if isinstance(divisor, Temperature):
            return NotImplemented
        return Temperature(self.scale, ieee_divide(self.value, divisor))

    # -------------------------------------------------------------------------
    # Сравнение по Kelvin
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self.to_kelvin().value == other.to_kelvin().value

    def __lt__(self, other: "Temperature") -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self.to_kelvin().value < other.to_kelvin().value

    def __hash__(self) -> int:
        return hash(float(self.to_kelvin().value))

    # -------------------------------------------------------------------------
    # Проекции и вывод
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return render_display(self)

    def __repr__(self) -> str:
        return render_debug(self)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return f"{format(float(self.value), format_spec)} {self.scale.symbol}"

    def write_to(self, sink: TextSink, digits: Optional[int] = None) -> None:
        """
        Вывод "<число> <символ>" в sink без сборки итоговой строки.

        Args:
            sink: Любой объект с методом write(str)
            digits: Знаков после точки (None — кратчайшее представление)
        """
        write_display(self, sink, digits)

    def format_value(self, digits: Optional[int] = None) -> str:
        """Только число, без символа шкалы"""
        return format_number(self.value, digits)
