"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам,
затем строит immutable Pydantic модели.

Схемы:
- block.json (Block, Header, Extrinsic, RuntimeCall)
- genesis.json (GenesisConfig)

Транспорт и хранение блоков не входят в runtime: контракты фиксируют только
порядок extrinsic и связку (caller, call).
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.block import Block
from src.core.domain.genesis import GenesisConfig


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'block')

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

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

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

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class BlockValidator(ContractValidator):
    """Валидатор для block контракта."""

    def __init__(self):
        super().__init__("block")


class GenesisValidator(ContractValidator):
    """Валидатор для genesis контракта."""

    def __init__(self):
        super().__init__("genesis")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_block(data: Dict[str, Any]) -> None:
    """
    Валидация block данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BlockValidator().validate(data)


def validate_genesis(data: Dict[str, Any]) -> None:
    """
    Валидация genesis данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GenesisValidator().validate(data)


def parse_block(data: Dict[str, Any]) -> Block:
    """
    Валидация по схеме и построение Block.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если данные не проходят валидацию модели
    """
    validate_block(data)
    return Block.model_validate(data)


def parse_genesis(data: Dict[str, Any]) -> GenesisConfig:
    """
    Валидация по схеме и построение GenesisConfig.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если данные не проходят валидацию модели
    """
    validate_genesis(data)
    return GenesisConfig.model_validate(data)
