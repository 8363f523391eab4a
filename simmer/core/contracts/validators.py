"""
JSON Schema Contract Validators

Модуль для валидации сериализованных температур согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (поставляются внутри пакета, contracts/schema/):
- temperature.json
- checked_temperature.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from simmer.core.domain.checked import CheckedTemperature
from simmer.core.domain.records import CheckedTemperatureRecord, TemperatureRecord
from simmer.core.domain.temperature import Temperature


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'temperature')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class TemperatureValidator(ContractValidator):
    """Валидатор для temperature контракта"""

    def __init__(self):
        super().__init__("temperature")


class CheckedTemperatureValidator(ContractValidator):
    """Валидатор для checked_temperature контракта"""

    def __init__(self):
        super().__init__("checked_temperature")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_temperature(data: Dict[str, Any]) -> None:
    """
    Валидация temperature данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TemperatureValidator().validate(data)


def validate_checked_temperature(data: Dict[str, Any]) -> None:
    """
    Валидация checked_temperature данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CheckedTemperatureValidator().validate(data)


# =============================================================================
# SERIALIZATION
# =============================================================================


def dump_temperature(temperature: Temperature) -> Dict[str, Any]:
    """
    Temperature → dict, соответствующий temperature.json.

    Examples:
        >>> dump_temperature(Temperature.celsius(21.5))
        {'scale': 'celsius', 'value': 21.5}
    """
    data = TemperatureRecord.from_temperature(temperature).model_dump()
    validate_temperature(data)
    return data


def load_temperature(data: Dict[str, Any]) -> Temperature:
    """
    dict → Temperature.

    Raises:
        ValidationError: Если данные не соответствуют temperature.json
    """
    validate_temperature(data)
    return TemperatureRecord.model_validate(data).to_temperature()


def dump_checked_temperature(checked: CheckedTemperature) -> Dict[str, Any]:
    """CheckedTemperature → dict, соответствующий checked_temperature.json"""
    data = CheckedTemperatureRecord.from_checked(checked).model_dump()
    validate_checked_temperature(data)
    return data


def load_checked_temperature(data: Dict[str, Any]) -> CheckedTemperature:
    """
    dict → CheckedTemperature.

    Raises:
        ValidationError: Если данные не соответствуют checked_temperature.json
        pydantic.ValidationError: Если значения не конечны или границы перепутаны
        TemperatureValidationError: Если значение вне границ или ниже 0 K
    """
    validate_checked_temperature(data)
    return CheckedTemperatureRecord.model_validate(data).to_checked()
