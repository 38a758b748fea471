"""
Status — Модель статусов и результатов вычислений

Каждое вычисление специальной функции возвращает пару (значение, статус):
- SFStatus — закрытый набор кодов результата
- SFResult — immutable Pydantic модель (tagged result)
- Исключения для строгого режима (raise_for_status)
- SpecFuncWarning — категория диагностик quick-форм

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. При статусе != SUCCESS значение — документированный sentinel:
   0.0 для OVERFLOW/UNDERFLOW/DOMAIN_ERROR,
   best-effort отношение continued fraction для MAX_ITER
2. Value-формы никогда не бросают исключений для численных сбоев
3. Ни одна ошибка не подавляется без подстановки sentinel
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SFStatus(str, Enum):
    """Код результата вычисления."""

    SUCCESS = "SUCCESS"
    DOMAIN_ERROR = "DOMAIN_ERROR"
    OVERFLOW = "OVERFLOW"
    UNDERFLOW = "UNDERFLOW"
    MAX_ITER = "MAX_ITER"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SpecFuncError(Exception):
    """
    Базовое исключение строгого режима.

    Бросается только из SFResult.raise_for_status(); value-формы
    возвращают статус, а не исключение.
    """

    def __init__(self, message: str, result: "SFResult"):
        super().__init__(message)
        self.result = result


class SFDomainError(SpecFuncError):
    """Аргумент вне области определения (например, N < 0)."""
    pass


class SFOverflowError(SpecFuncError):
    """Результат превышает DBL_MAX (sentinel 0.0)."""
    pass


class SFUnderflowError(SpecFuncError):
    """Результат меньше DBL_MIN (sentinel 0.0)."""
    pass


class SFMaxIterError(SpecFuncError):
    """Continued fraction не сошлась за max_iter шагов."""
    pass


class SpecFuncWarning(RuntimeWarning):
    """Диагностика quick-форм при статусе != SUCCESS."""
    pass


_STATUS_EXCEPTIONS: Dict[SFStatus, type] = {
    SFStatus.DOMAIN_ERROR: SFDomainError,
    SFStatus.OVERFLOW: SFOverflowError,
    SFStatus.UNDERFLOW: SFUnderflowError,
    SFStatus.MAX_ITER: SFMaxIterError,
}


# =============================================================================
# RESULT MODEL
# =============================================================================


class SFResult(BaseModel):
    """
    Результат вычисления специальной функции.

    Immutable модель (frozen=True):
    - val: вычисленное значение или sentinel
    - status: код результата

    Examples:
        >>> SFResult(val=1.0).is_success
        True
        >>> SFResult(val=0.0, status=SFStatus.OVERFLOW).is_success
        False
    """

    val: float = Field(..., description="Значение функции или sentinel")
    status: SFStatus = Field(default=SFStatus.SUCCESS, description="Код результата")

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return self.status == SFStatus.SUCCESS

    def raise_for_status(self) -> "SFResult":
        """
        Строгий режим: исключение при статусе != SUCCESS.

        Returns:
            self при SUCCESS

        Raises:
            SFDomainError, SFOverflowError, SFUnderflowError, SFMaxIterError
        """
        if self.is_success:
            return self

        exc_class = _STATUS_EXCEPTIONS[self.status]
        raise exc_class(
            f"Special function evaluation failed: status={self.status.value}, "
            f"val={self.val!r}",
            self,
        )

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в payload контракта sf_result."""
        return {"val": self.val, "status": self.status.value}


# Общие sentinel-результаты
def success(val: float) -> SFResult:
    return SFResult(val=val, status=SFStatus.SUCCESS)


def failure(status: SFStatus, val: float = 0.0) -> SFResult:
    return SFResult(val=val, status=status)
