"""
Rendering — Текстовое представление температур

Два пути вывода с одинаковым результатом:
- render_display / render_debug: строят и возвращают str (str(), repr(), format())
- write_display / write_debug: пишут куски текста прямо в sink, не собирая
  итоговую строку (для окружений, где нежелательна аллокация буфера)

Sink — любой объект с методом write(str): io.StringIO, sys.stdout, файл,
UART-обёртка и т.п.

Формат числа:
- digits=None: кратчайший текст, однозначно восстанавливающий float выбранной
  точности ("32", "273.15", "4.06")
- digits=N: ровно N знаков после точки ("0.00000", "42.13000")
"""

import io
from typing import TYPE_CHECKING, Any, Optional, Protocol

import numpy as np

from simmer.core.config import PRECISION

if TYPE_CHECKING:
    from simmer.core.domain.temperature import Temperature


class TextSink(Protocol):
    """Приёмник текста для sink-рендеринга"""

    def write(self, text: str) -> Any: ...


# =============================================================================
# ЧИСЛА
# =============================================================================


def format_number(value: float, digits: Optional[int] = None) -> str:
    """
    Форматирование payload температуры.

    Args:
        value: Число (приводится к build-wide точности)
        digits: Количество знаков после точки (None — кратчайшее представление)

    Returns:
        Текст числа без экспоненты

    Raises:
        ValueError: Если digits отрицательный

    Examples:
        >>> format_number(32.0)
        '32'
        >>> format_number(273.15)
        '273.15'
        >>> format_number(42.13, digits=5)
        '42.13000'
        >>> format_number(float("nan"))
        'nan'
    """
    value = PRECISION.coerce(value)

    if digits is None:
        return np.format_float_positional(value, trim="-")

    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")

    return np.format_float_positional(
        value, precision=digits, unique=False, fractional=True, trim="k"
    )


# =============================================================================
# SINK-РЕНДЕРИНГ
# =============================================================================


def write_display(
    temperature: "Temperature", sink: TextSink, digits: Optional[int] = None
) -> None:
    """
    Запись "<число> <символ>" в sink, например "32 °F".

    Args:
        temperature: Температура для вывода
        sink: Приёмник текста
        digits: Знаков после точки (None — кратчайшее представление)
    """
    sink.write(format_number(temperature.value, digits))
    sink.write(" ")
    sink.write(temperature.scale.symbol)


def write_debug(
    temperature: "Temperature", sink: TextSink, digits: Optional[int] = None
) -> None:
    """
    Запись отладочного вида в sink, например "Temperature.celsius(0)".
    """
    sink.write("Temperature.")
    sink.write(temperature.scale.value)
    sink.write("(")
    sink.write(format_number(temperature.value, digits))
    sink.write(")")


# =============================================================================
# СТРОКОВЫЙ РЕНДЕРИНГ
# =============================================================================


def render_display(temperature: "Temperature", digits: Optional[int] = None) -> str:
    """Строковая версия write_display"""
    buffer = io.StringIO()
    write_display(temperature, buffer, digits)
    return buffer.getvalue()


def render_debug(temperature: "Temperature", digits: Optional[int] = None) -> str:
    """Строковая версия write_debug"""
    buffer = io.StringIO()
    write_debug(temperature, buffer, digits)
    return buffer.getvalue()
