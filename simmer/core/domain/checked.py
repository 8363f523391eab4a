"""
CheckedTemperature — Температура, которая не может быть невалидной

Validating decorator над Temperature:
- Значение всегда конечное (не NaN, не Inf)
- Значение в Kelvin всегда >= 0 (абсолютный ноль)
- Значение всегда внутри пользовательских границ (по умолчанию [-inf, +inf])

Инвариант проверяется при создании и после КАЖДОЙ операции, заменяющей
внутреннее значение. Все операции возвращают новый экземпляр; при ошибке
исходный экземпляр не меняется.

Границы хранятся нормализованными в Kelvin, поэтому конверсия шкалы не меняет
множество допустимых физических температур.

ВНИМАНИЕ: из-за float значение "чуть ниже" 0 K на величину меньше ULP может
быть представлено как 0.0 K.
"""

import logging
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Optional, Tuple, Union

from simmer.core.math.numerical_safeguards import (
    ABSOLUTE_ZERO_K,
    is_nan,
    is_valid_float,
    is_within,
    precision_limits,
)
from simmer.core.rendering import TextSink, render_display, write_debug, write_display
from simmer.core.domain.temperature import Scale, Temperature

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TemperatureValidationError(ValueError):
    """Базовая ошибка валидации CheckedTemperature"""


class NotFiniteError(TemperatureValidationError):
    """Значение NaN или ±Inf"""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Temperature value {value} is not finite (NaN/Inf are not allowed)")


class BelowAbsoluteZeroError(TemperatureValidationError):
    """Значение ниже абсолютного нуля"""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"The given temperature, {value}, was below absolute zero")


class OutOfBoundsError(TemperatureValidationError):
    """Значение вне пользовательских границ"""

    def __init__(self, value: float, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"The given temperature, {value}, was out of bounds ({reason})")


class BoundTooLowError(TemperatureValidationError):
    """Граница ниже допустимой"""

    def __init__(self, bound: float):
        self.bound = bound
        super().__init__(f"Given bound, {bound}, was too low")


class BoundTooHighError(TemperatureValidationError):
    """Граница выше допустимой"""

    def __init__(self, bound: float):
        self.bound = bound
        super().__init__(f"Given bound, {bound}, was too high")


class DivisionByZeroError(TemperatureValidationError):
    """Деление CheckedTemperature на ноль"""

    def __init__(self) -> None:
        super().__init__("Division by zero is not allowed")


# =============================================================================
# BOUNDS
# =============================================================================


@dataclass(frozen=True)
class Bounds:
    """
    Границы [lower_k, upper_k] в Kelvin.

    По умолчанию [-inf, +inf] — ограничивает только абсолютный ноль.

    Raises:
        BoundTooHighError: Если граница NaN или lower_k > upper_k
    """

    lower_k: float = float("-inf")
    upper_k: float = float("inf")

    def __post_init__(self) -> None:
        for bound in (self.lower_k, self.upper_k):
            if is_nan(bound):
                raise BoundTooHighError(bound)
        if self.lower_k > self.upper_k:
            raise BoundTooHighError(self.lower_k)

    def contains(self, kelvin: float) -> bool:
        return is_within(kelvin, self.lower_k, self.upper_k)

    def in_scale(self, scale: Scale) -> Tuple[Temperature, Temperature]:
        """Границы как (lower, upper) в заданной шкале"""
        return (
            Temperature.kelvin(self.lower_k).to_scale(scale),
            Temperature.kelvin(self.upper_k).to_scale(scale),
        )


def _bound_to_kelvin(scale: Scale, value: float) -> float:
    """
    Проверка границы в пределах точности и перевод в Kelvin.

    Raises:
        BoundTooLowError: Если value < MIN точности
        BoundTooHighError: Если value > MAX точности или NaN
    """
    float_min, float_max = precision_limits()

    if is_nan(value):
        raise BoundTooHighError(value)
    if value < float_min:
        raise BoundTooLowError(value)
    if value > float_max:
        raise BoundTooHighError(value)

    return Temperature(scale, value).to_kelvin().value


# =============================================================================
# CHECKED TEMPERATURE
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class CheckedTemperature:
    """
    Температура с гарантией физической корректности.

    Args:
        temperature: Проверяемая температура
        bounds: Границы в Kelvin (default: без ограничений)

    Raises:
        NotFiniteError: Если значение NaN/Inf
        BelowAbsoluteZeroError: Если значение ниже 0 K
        OutOfBoundsError: Если значение вне границ

    Examples:
        >>> ice = CheckedTemperature(Temperature.fahrenheit(32.0))
        >>> str(ice.to_celsius())
        '0 °C'
        >>> CheckedTemperature(Temperature.kelvin(-1.0))
        Traceback (most recent call last):
            ...
        simmer.core.domain.checked.BelowAbsoluteZeroError: ...
    """

    temperature: Temperature
    bounds: Bounds = field(default_factory=Bounds)

    def __post_init__(self) -> None:
        _check(self.temperature, self.bounds)

    # -------------------------------------------------------------------------
    # Конструкторы по шкалам
    # -------------------------------------------------------------------------

    @classmethod
    def fahrenheit(cls, value: float) -> "CheckedTemperature":
        return cls(Temperature.fahrenheit(value))

    @classmethod
    def celsius(cls, value: float) -> "CheckedTemperature":
        return cls(Temperature.celsius(value))

    @classmethod
    def kelvin(cls, value: float) -> "CheckedTemperature":
        return cls(Temperature.kelvin(value))

    # -------------------------------------------------------------------------
    # Доступ к значению
    # -------------------------------------------------------------------------

    @property
    def unchecked(self) -> Temperature:
        """Внутренняя (unchecked) Temperature"""
        return self.temperature

    @property
    def scale(self) -> Scale:
        return self.temperature.scale

    @property
    def value(self) -> float:
        return self.temperature.value

    def __float__(self) -> float:
        return float(self.temperature)

    # -------------------------------------------------------------------------
    # Замена значения
    # -------------------------------------------------------------------------

    def replace(self, temperature: Temperature) -> "CheckedTemperature":
        """
        Новая CheckedTemperature с другим значением и теми же границами.

        Raises:
            TemperatureValidationError: Если новое значение невалидно
        """
        return CheckedTemperature(temperature, self.bounds)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_scale(self, scale: Scale) -> "CheckedTemperature":
        """
        Конверсия с повторной проверкой.

        Для валидного значения конверсия сохраняет инвариант, но результат
        всё равно проверяется и ошибка пробрасывается вызывающему.
        """
        return self.replace(self.temperature.to_scale(scale))

    def to_fahrenheit(self) -> "CheckedTemperature":
        return self.to_scale(Scale.FAHRENHEIT)

    def to_celsius(self) -> "CheckedTemperature":
        return self.to_scale(Scale.CELSIUS)

    def to_kelvin(self) -> "CheckedTemperature":
        return self.to_scale(Scale.KELVIN)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Union[Temperature, "CheckedTemperature"]) -> "CheckedTemperature":
        """
        Сложение: other конвертируется в шкалу self, payload складываются.

        Raises:
            TemperatureValidationError: Если результат невалиден
        """
        return self.replace(self.temperature + _unwrap(other))

    def sub(self, other: Union[Temperature, "CheckedTemperature"]) -> "CheckedTemperature":
        """
        Вычитание: other конвертируется в шкалу self, payload вычитаются.

        Вычитание ровно до 0 K допустимо, ниже — BelowAbsoluteZeroError.
        """
        return self.replace(self.temperature - _unwrap(other))

    def mul(self, factor: Union[float, int]) -> "CheckedTemperature":
        return self.replace(self.temperature * factor)

    def div(self, divisor: Union[float, int]) -> "CheckedTemperature":
        """
        Деление на число.

        Raises:
            DivisionByZeroError: Если divisor == 0
        """
        if divisor == 0:
            raise DivisionByZeroError()
        return self.replace(self.temperature / divisor)

    def __add__(self, other: object) -> "CheckedTemperature":
        if not isinstance(other, (Temperature, CheckedTemperature)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "CheckedTemperature":
        if not isinstance(other, (Temperature, CheckedTemperature)):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: object) -> "CheckedTemperature":
        if isinstance(factor, (Temperature, CheckedTemperature)):
            return NotImplemented
        return self.mul(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "CheckedTemperature":
        if isinstance(divisor, (Temperature, CheckedTemperature)):
            return NotImplemented
        return self.div(divisor)

    # -------------------------------------------------------------------------
    # Границы (в текущей шкале)
    # -------------------------------------------------------------------------

    def with_lower_bound(self, bound: float) -> "CheckedTemperature":
        """
        Новая нижняя граница в текущей шкале.

        Raises:
            BoundTooHighError: Если bound выше верхней границы
            BoundTooLowError: Если bound ниже MIN точности
            OutOfBoundsError: Если текущее значение ниже bound
        """
        lower_k = _bound_to_kelvin(self.scale, bound)
        if lower_k > self.bounds.upper_k:
            raise BoundTooHighError(bound)
        return CheckedTemperature(self.temperature, Bounds(lower_k, self.bounds.upper_k))

    def with_upper_bound(self, bound: float) -> "CheckedTemperature":
        """
        Новая верхняя граница в текущей шкале.

        Raises:
            BoundTooLowError: Если bound ниже нижней границы
            BoundTooHighError: Если bound выше MAX точности
            OutOfBoundsError: Если текущее значение выше bound
        """
        upper_k = _bound_to_kelvin(self.scale, bound)
        if upper_k < self.bounds.lower_k:
            raise BoundTooLowError(bound)
        return CheckedTemperature(self.temperature, Bounds(self.bounds.lower_k, upper_k))

    def with_bounds(self, lower: float, upper: float) -> "CheckedTemperature":
        """
        Обе границы сразу, в текущей шкале.

        Examples:
            >>> thermostat = CheckedTemperature.fahrenheit(68.5).with_bounds(68.0, 72.0)
            >>> thermostat.replace(Temperature.fahrenheit(65.0))
            Traceback (most recent call last):
                ...
            simmer.core.domain.checked.OutOfBoundsError: ...
        """
        lower_k = _bound_to_kelvin(self.scale, lower)
        upper_k = _bound_to_kelvin(self.scale, upper)
        if lower_k > upper_k:
            raise BoundTooHighError(lower)
        return CheckedTemperature(self.temperature, Bounds(lower_k, upper_k))

    def get_bounds(self) -> Tuple[Temperature, Temperature]:
        """Границы (lower, upper) как unchecked Temperature в текущей шкале"""
        return self.bounds.in_scale(self.scale)

    # -------------------------------------------------------------------------
    # Сравнение (по внутренней Temperature)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CheckedTemperature):
            return self.temperature == other.temperature
        if isinstance(other, Temperature):
            return self.temperature == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (Temperature, CheckedTemperature)):
            return self.temperature < _unwrap(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.temperature)

    # -------------------------------------------------------------------------
    # Вывод
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return render_display(self.temperature)

    def __repr__(self) -> str:
        return f"CheckedTemperature({self.temperature!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self.temperature, format_spec)

    def write_to(self, sink: TextSink, digits: Optional[int] = None) -> None:
        """Sink-вывод, идентичный Temperature.write_to"""
        write_display(self.temperature, sink, digits)

    def write_debug_to(self, sink: TextSink, digits: Optional[int] = None) -> None:
        """Sink-версия repr()"""
        sink.write("CheckedTemperature(")
        write_debug(self.temperature, sink, digits)
        sink.write(")")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _unwrap(other: Union[Temperature, CheckedTemperature]) -> Temperature:
    if isinstance(other, CheckedTemperature):
        return other.temperature
    return other


def _check(temperature: Temperature, bounds: Bounds) -> None:
    """
    Проверка инварианта CheckedTemperature.

    Порядок: конечность (payload и форма в Kelvin) → абсолютный ноль → границы.
    """
    if not isinstance(temperature, Temperature):
        raise TypeError(
            f"CheckedTemperature wraps a Temperature, got {type(temperature).__name__}"
        )

    if not is_valid_float(temperature.value):
        logger.debug("Rejected non-finite temperature %r", temperature)
        raise NotFiniteError(temperature.value)

    kelvin = temperature.to_kelvin().value

    if not is_valid_float(kelvin):
        logger.debug("Rejected temperature with non-finite Kelvin form %r", temperature)
        raise NotFiniteError(kelvin)

    if kelvin < ABSOLUTE_ZERO_K:
        logger.debug("Rejected temperature below absolute zero: %r", temperature)
        raise BelowAbsoluteZeroError(temperature.value)

    if not bounds.contains(kelvin):
        reason = "too high" if kelvin > bounds.upper_k else "too low"
        logger.debug("Rejected out-of-bounds temperature %r (%s)", temperature, reason)
        raise OutOfBoundsError(temperature.value, reason)
