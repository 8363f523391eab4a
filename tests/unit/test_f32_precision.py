"""
Тесты для f32-сборки

Проверяет:
1. Payload и результаты конверсий остаются np.float32
2. Опорные точки и равенство в 32 битах
3. Кратчайшее f32-представление при выводе
4. Пределы границ CheckedTemperature по f32
"""

from typing import Iterator

import numpy as np
import pytest

from simmer import (
    BoundTooHighError,
    BoundTooLowError,
    CheckedTemperature,
    NotFiniteError,
    Temperature,
)
from simmer.core import config, rendering
from simmer.core.config import Precision
from simmer.core.domain import temperature as temperature_module
from simmer.core.math import numerical_safeguards


@pytest.fixture(autouse=True)
def f32_build(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Подмена build-wide точности на F32 во всех модулях, читающих PRECISION"""
    for module in (config, numerical_safeguards, rendering, temperature_module):
        monkeypatch.setattr(module, "PRECISION", Precision.F32)
    yield


# =============================================================================
# PAYLOAD
# =============================================================================


class TestF32Payload:
    """Тесты f32 payload"""

    def test_construction_coerces(self) -> None:
        """Payload приводится к np.float32"""
        assert isinstance(Temperature.celsius(21.5).value, np.float32)
        assert isinstance(CheckedTemperature.kelvin(1.0).value, np.float32)

    @pytest.mark.parametrize(
        "scale, value", [("fahrenheit", 98.6), ("celsius", 37.0), ("kelvin", 310.15)]
    )
    def test_conversions_stay_f32(self, scale: str, value: float) -> None:
        """Результаты конверсий — np.float32"""
        temperature = Temperature(scale, value)
        for converted in (
            temperature.to_fahrenheit(),
            temperature.to_celsius(),
            temperature.to_kelvin(),
        ):
            assert isinstance(converted.value, np.float32)

    def test_arithmetic_stays_f32(self) -> None:
        """Арифметика остаётся в 32 битах"""
        total = Temperature.celsius(10.0) + Temperature.kelvin(283.15)
        assert isinstance(total.value, np.float32)
        assert isinstance((total * 2).value, np.float32)
        assert isinstance((total / 3).value, np.float32)

    def test_division_by_zero(self) -> None:
        """IEEE деление на ноль в f32"""
        result = Temperature.celsius(1.0) / 0
        assert isinstance(result.value, np.float32)
        assert result.value == np.inf


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


class TestF32Conversions:
    """Тесты опорных точек в f32"""

    def test_fixed_points(self) -> None:
        """Точки замерзания и кипения воды"""
        assert Temperature.celsius(0.0).to_fahrenheit().value == 32.0
        assert Temperature.fahrenheit(32.0).to_celsius().value == 0.0
        assert Temperature.celsius(100.0).to_fahrenheit().value == pytest.approx(212.0, rel=1e-6)

    def test_kelvin_offset_at_f32(self) -> None:
        """0 °C равно 273.15 K, округлённому до f32"""
        kelvin = Temperature.celsius(0.0).to_kelvin()
        assert kelvin.value == np.float32(273.15)
        assert Temperature.fahrenheit(32.0) == Temperature.kelvin(273.15)

    def test_checked_absolute_zero(self) -> None:
        """Абсолютный ноль в f32 остаётся валидным"""
        assert CheckedTemperature.kelvin(0.0).to_kelvin().value == 0.0


# =============================================================================
# ВЫВОД
# =============================================================================


class TestF32Rendering:
    """Тесты форматирования в f32"""

    def test_shortest_f32_text(self) -> None:
        """Кратчайшее представление, восстанавливающее f32"""
        assert str(Temperature.fahrenheit(4.06)) == "4.06 °F"
        assert str(Temperature.celsius(0.0).to_kelvin()) == "273.15 K"

    def test_fixed_digits(self) -> None:
        """Фиксированное количество знаков"""
        assert Temperature.celsius(42.13).format_value(digits=2) == "42.13"

    def test_repr(self) -> None:
        """Debug-представление"""
        assert repr(Temperature.fahrenheit(4.06)) == "Temperature.fahrenheit(4.06)"


# =============================================================================
# ГРАНИЦЫ
# =============================================================================


class TestF32Bounds:
    """Тесты пределов границ по f32"""

    def test_bound_above_f32_max(self) -> None:
        """Граница выше f32 MAX отклоняется"""
        with pytest.raises(BoundTooHighError):
            CheckedTemperature.kelvin(1.0).with_upper_bound(1.0e39)

    def test_bound_below_f32_min(self) -> None:
        """Граница ниже f32 MIN отклоняется"""
        with pytest.raises(BoundTooLowError):
            CheckedTemperature.kelvin(1.0).with_lower_bound(-1.0e39)

    def test_bound_within_f32_range(self) -> None:
        """Граница в пределах f32 допустима"""
        checked = CheckedTemperature.kelvin(1.0).with_upper_bound(3.0e38)
        assert checked.get_bounds()[1].value == pytest.approx(3.0e38, rel=1e-6)

    def test_payload_overflow_rejected(self) -> None:
        """Значение вне диапазона f32 превращается в Inf и отклоняется"""
        with np.errstate(over="ignore"), pytest.raises(NotFiniteError):
            CheckedTemperature.kelvin(1.0e39)
