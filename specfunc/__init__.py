"""
specfunc — exponential family of special functions.

Value forms (*_e) return SFResult (value + status); quick forms live in
specfunc.exp and return a bare float with a SpecFuncWarning on failure.
"""

from specfunc.core.domain import SFResult, SFStatus, SpecFuncError, SpecFuncWarning
from specfunc.exp import (
    exp_e,
    exp_sgn_e,
    expm1_e,
    exprel_2_e,
    exprel_e,
    exprel_n_e,
)

__version__ = "0.1.0"

__all__ = [
    "SFResult",
    "SFStatus",
    "SpecFuncError",
    "SpecFuncWarning",
    "exp_e",
    "exp_sgn_e",
    "expm1_e",
    "exprel_e",
    "exprel_2_e",
    "exprel_n_e",
]
