"""
Domain models: статусы, результаты и исключения вычислений.
"""

from specfunc.core.domain.status import (
    SFDomainError,
    SFMaxIterError,
    SFOverflowError,
    SFResult,
    SFStatus,
    SFUnderflowError,
    SpecFuncError,
    SpecFuncWarning,
    failure,
    success,
)

__all__ = [
    # Types
    "SFStatus",
    "SFResult",
    # Exceptions
    "SpecFuncError",
    "SFDomainError",
    "SFOverflowError",
    "SFUnderflowError",
    "SFMaxIterError",
    # Warnings
    "SpecFuncWarning",
    # Constructors
    "success",
    "failure",
]
