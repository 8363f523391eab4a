"""
Тесты для Config

Проверяет:
1. Приведение к точности F32/F64
2. Пределы конечных значений
3. Build-wide настройки по умолчанию и их неизменяемость
4. Экспорт CheckedTemperature в зависимости от checked_enabled
"""

import importlib
from typing import Iterator

import numpy as np
import pytest
from pydantic import ValidationError

import simmer
from simmer.core import config
from simmer.core.config import PRECISION, SETTINGS, Precision, SimmerConfig

CHECKED_EXPORTS = [
    "CheckedTemperature",
    "TemperatureValidationError",
    "NotFiniteError",
    "BelowAbsoluteZeroError",
    "OutOfBoundsError",
    "BoundTooLowError",
    "BoundTooHighError",
    "DivisionByZeroError",
]


@pytest.fixture
def unchecked_build(monkeypatch: pytest.MonkeyPatch) -> Iterator[object]:
    """Пакет simmer, импортированный с checked_enabled=False"""
    monkeypatch.setattr(config, "SETTINGS", SimmerConfig(checked_enabled=False))
    for name in CHECKED_EXPORTS:
        monkeypatch.delattr(simmer, name)
    yield importlib.reload(simmer)
    monkeypatch.undo()
    importlib.reload(simmer)


class TestPrecision:
    """Тесты Precision"""

    def test_f64_coerces_to_python_float(self) -> None:
        """F64 отдаёт обычный float"""
        value = Precision.F64.coerce(1)
        assert type(value) is float
        assert value == 1.0

    def test_f32_coerces_to_float32(self) -> None:
        """F32 отдаёт np.float32 и теряет точность f64"""
        value = Precision.F32.coerce(0.1)
        assert isinstance(value, np.float32)
        assert float(value) != 0.1
        assert float(value) == pytest.approx(0.1)

    def test_f32_arithmetic_stays_f32(self) -> None:
        """Арифметика f32 с Python float остаётся f32 (numpy >= 2)"""
        value = (Precision.F32.coerce(212.0) - 32.0) / 1.8 + 273.15
        assert isinstance(value, np.float32)
        assert value == pytest.approx(373.15, rel=1e-6)

    def test_limits(self) -> None:
        """Пределы соответствуют numpy.finfo"""
        assert Precision.F32.max == float(np.finfo(np.float32).max)
        assert Precision.F32.min == -Precision.F32.max
        assert Precision.F64.max == float(np.finfo(np.float64).max)

    def test_dtype(self) -> None:
        """numpy dtype точности"""
        assert Precision.F32.dtype is np.float32
        assert Precision.F64.dtype is np.float64

    def test_from_string(self) -> None:
        """Точность задаётся строкой"""
        assert Precision("f32") is Precision.F32


class TestSimmerConfig:
    """Тесты SimmerConfig"""

    def test_defaults(self) -> None:
        """По умолчанию f64 и CheckedTemperature включён"""
        assert SETTINGS.precision is Precision.F64
        assert SETTINGS.checked_enabled is True
        assert PRECISION is SETTINGS.precision

    def test_custom(self) -> None:
        """Пользовательская конфигурация"""
        config = SimmerConfig(precision="f32", checked_enabled=False)
        assert config.precision is Precision.F32
        assert config.checked_enabled is False

    def test_frozen(self) -> None:
        """Конфигурация неизменяема"""
        with pytest.raises(ValidationError):
            SETTINGS.precision = Precision.F32  # type: ignore[misc]

    def test_invalid_precision(self) -> None:
        """Неизвестная точность отклоняется"""
        with pytest.raises(ValidationError):
            SimmerConfig(precision="f16")

    def test_checked_exported_when_enabled(self) -> None:
        """CheckedTemperature экспортируется при checked_enabled"""
        assert "CheckedTemperature" in simmer.__all__
        assert hasattr(simmer, "CheckedTemperature")

    def test_checked_hidden_when_disabled(self, unchecked_build) -> None:
        """При checked_enabled=False экспортируется только unchecked API"""
        assert unchecked_build.SETTINGS.checked_enabled is False
        for name in CHECKED_EXPORTS:
            assert name not in unchecked_build.__all__
            assert not hasattr(unchecked_build, name)
        assert "Temperature" in unchecked_build.__all__
        assert str(unchecked_build.Temperature.celsius(0.0)) == "0 °C"

    def test_checked_type_still_importable_from_domain(self, unchecked_build) -> None:
        """Контракты продолжают видеть CheckedTemperature через simmer.core.domain"""
        from simmer.core.domain import CheckedTemperature

        assert CheckedTemperature.kelvin(0.0).value == 0.0
