"""
Gamma — log-factorial и log-gamma для асимптотических режимов exprel_N

Вспомогательные функции, которые потребляет dispatcher exprel_N
в режимах x > N:
- lnfact_e(n) = ln(n!)
- lngamma_e(x) = ln Γ(x) для x > 0

Для n ≤ FACT_EXACT_MAX ln(n!) вычисляется из точного целого факториала,
выше — через math.lgamma.
"""

import math
from typing import Final

from specfunc.core.domain.status import SFResult, SFStatus, failure, success
from specfunc.core.math.numerical_safeguards import is_nan

# Наибольшее n, для которого n! представим в double
FACT_EXACT_MAX: Final[int] = 170


def _require_int(n: int, name: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be int, got {type(n).__name__}")


def lnfact_e(n: int) -> SFResult:
    """
    Натуральный логарифм факториала.

    Args:
        n: Целое n >= 0

    Returns:
        SFResult(ln(n!)), DOMAIN_ERROR с 0.0 при n < 0

    Raises:
        TypeError: если n не int

    Examples:
        >>> lnfact_e(0).val
        0.0
        >>> abs(lnfact_e(5).val - math.log(120.0)) < 1e-15
        True
    """
    _require_int(n, "n")

    if n < 0:
        return failure(SFStatus.DOMAIN_ERROR)

    if n <= FACT_EXACT_MAX:
        return success(math.log(math.factorial(n)))

    return success(math.lgamma(n + 1.0))


def lngamma_e(x: float) -> SFResult:
    """
    Натуральный логарифм Γ(x) для x > 0.

    Для целого x = n: ln Γ(n) = ln((n-1)!).

    Args:
        x: Аргумент (x > 0)

    Returns:
        SFResult(ln Γ(x)), DOMAIN_ERROR с 0.0 при x <= 0 или NaN
    """
    if is_nan(x) or x <= 0:
        return failure(SFStatus.DOMAIN_ERROR)

    if isinstance(x, int) and not isinstance(x, bool):
        return lnfact_e(x - 1)

    return success(math.lgamma(x))
