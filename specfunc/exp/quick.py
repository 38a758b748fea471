"""
Quick forms — удобные обёртки, возвращающие только float

Каждая quick-форма вызывает соответствующую value-форму (*_e) и при
статусе != SUCCESS выдаёт SpecFuncWarning, после чего возвращает
sentinel/best-effort значение. Вызывающий код принимает пониженную
надёжность результата.
"""

import warnings

from specfunc.core.domain.status import SFResult, SpecFuncWarning
from specfunc.exp.elementary import exp_e, exp_sgn_e, expm1_e
from specfunc.exp.exprel import exprel_2_e, exprel_e
from specfunc.exp.exprel_n import exprel_n_e


def _value_or_warn(name: str, result: SFResult) -> float:
    if not result.is_success:
        warnings.warn(
            f"{name}: {result.status.value} (returned {result.val!r})",
            SpecFuncWarning,
            stacklevel=3,
        )
    return result.val


def exp(x: float) -> float:
    return _value_or_warn("exp", exp_e(x))


def exp_sgn(x: float, sgn: float) -> float:
    return _value_or_warn("exp_sgn", exp_sgn_e(x, sgn))


def expm1(x: float) -> float:
    return _value_or_warn("expm1", expm1_e(x))


def exprel(x: float) -> float:
    return _value_or_warn("exprel", exprel_e(x))


def exprel_2(x: float) -> float:
    return _value_or_warn("exprel_2", exprel_2_e(x))


def exprel_n(n_order: int, x: float) -> float:
    """
    exprel_N(x) как float.

    Examples:
        >>> exprel_n(3, 0.0)
        1.0
    """
    return _value_or_warn("exprel_n", exprel_n_e(n_order, x))
