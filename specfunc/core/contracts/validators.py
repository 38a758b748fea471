"""
JSON Schema Contract Validators

Валидация сериализованных результатов вычислителей (SFResult.to_contract())
против JSON Schema контракта sf_result.json.

Контракт фиксирует форму, которую видит внешний потребитель:
- val: float (для DOMAIN_ERROR/OVERFLOW/UNDERFLOW — sentinel 0.0)
- status: одно из значений SFStatus
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from specfunc.core.domain.status import SFResult

SF_RESULT_SCHEMA: str = "sf_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов контрактов.

    По умолчанию читает каталог schema/, поставляемый вместе с пакетом.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-validation схемы (с кэшированием).

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=1)
def packaged_loader() -> SchemaLoader:
    """Загрузчик схем пакета; создаётся при первом обращении."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or packaged_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class SFResultValidator(ContractValidator):
    """
    Валидатор контракта sf_result.

    Принимает как уже сериализованный dict, так и SFResult.
    """

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(SF_RESULT_SCHEMA, loader)

    def validate_result(self, result: SFResult) -> Dict[str, Any]:
        """
        Сериализация SFResult и проверка против контракта.

        Returns:
            Проверенный dict (результат to_contract())

        Raises:
            ValidationError: Если результат нарушает контракт
                (например, OVERFLOW с ненулевым val)
        """
        data = result.to_contract()
        self.validate(data)
        return data


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_sf_result(data: Dict[str, Any] | SFResult) -> None:
    """
    Валидация сериализованного SFResult.

    Args:
        data: dict из SFResult.to_contract() либо сам SFResult

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validator = SFResultValidator()
    if isinstance(data, SFResult):
        validator.validate_result(data)
    else:
        validator.validate(data)
