"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных результатов.
"""

from .validators import (
    SF_RESULT_SCHEMA,
    ContractValidator,
    SchemaLoader,
    SFResultValidator,
    packaged_loader,
    validate_sf_result,
)

__all__ = [
    # Constants
    "SF_RESULT_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SFResultValidator",
    # Functions
    "packaged_loader",
    "validate_sf_result",
]
