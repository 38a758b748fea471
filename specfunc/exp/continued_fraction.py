"""
Continued Fraction — exprel_N(x) через цепную дробь

Abramowitz & Stegun 4.2.41.

Вычисление прямой рекурсией по подходящим дробям A_n / B_n:
    A_n = b_n A_{n-1} + a_n A_{n-2}
    B_n = b_n B_{n-1} + a_n B_{n-2}

Частные числители/знаменатели (n >= 3):
    a_n = ((n-1)/2) x          для нечётного n
    a_n = -(N + n/2 - 1) x     для чётного n
    b_n = N + n - 1

Стартовые: a_1 = 1, b_1 = 1, a_2 = -x, b_2 = N + 1.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Состояние рекурсии (CFState) immutable, обновляется через replace
2. При |A_n| или |B_n| > recur_big все шесть аккумуляторов делятся
   на recur_big — отношение A_n / B_n не меняется
3. Критерий сходимости: |fn_old - fn| < rel_tol * |fn| (без деления;
   нулевая подходящая дробь не считается сошедшейся)
4. Не более max_iter шагов; при исчерпании — последнее отношение и MAX_ITER
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Final

from specfunc.core.domain.status import SFResult, SFStatus, failure, success
from specfunc.core.math.numerical_safeguards import DBL_EPSILON, SQRT_DBL_MAX

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

CF_MAX_ITER_DEFAULT: Final[int] = 5000

# Относительный допуск сходимости: 10 * DBL_EPSILON
CF_REL_TOL_DEFAULT: Final[float] = 10.0 * DBL_EPSILON


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ContinuedFractionConfig:
    """Конфигурация рекурсии continued fraction.

    - max_iter: предел числа шагов (включая два стартовых)
    - rel_tol: относительный допуск |fn_old - fn| < rel_tol * |fn|
    - recur_big: порог масштабирования аккумуляторов
    """

    max_iter: int = CF_MAX_ITER_DEFAULT
    rel_tol: float = CF_REL_TOL_DEFAULT
    recur_big: float = SQRT_DBL_MAX

    def __post_init__(self):
        if self.max_iter < 2:
            raise ValueError(f"max_iter must be >= 2, got {self.max_iter}")
        if self.rel_tol <= 0:
            raise ValueError(f"rel_tol must be positive, got {self.rel_tol}")
        if self.recur_big <= 1.0:
            raise ValueError(f"recur_big must be > 1, got {self.recur_big}")


# =============================================================================
# STATE
# =============================================================================


@dataclass(frozen=True)
class CFState:
    """Скользящее состояние рекурсии на шаге n.

    (a_nm2, b_nm2): A_{n-2}, B_{n-2}
    (a_nm1, b_nm1): A_{n-1}, B_{n-1}
    (a_n, b_n):     A_n, B_n
    fn:             текущая подходящая дробь A_n / B_n
    """

    a_nm2: float
    b_nm2: float
    a_nm1: float
    b_nm1: float
    a_n: float
    b_n: float
    n: int
    fn: float = 0.0

    @property
    def ratio(self) -> float:
        """A_n / B_n; при B_n == 0 — бесконечность со знаком A_n."""
        if self.b_n == 0.0:
            return math.copysign(math.inf, self.a_n)
        return self.a_n / self.b_n


def _advance(state: CFState, an: float, bn: float) -> CFState:
    """Сдвиг окна и новая пара (A_n, B_n) для частных членов an, bn."""
    a_new = bn * state.a_n + an * state.a_nm1
    b_new = bn * state.b_n + an * state.b_nm1
    return replace(
        state,
        a_nm2=state.a_nm1,
        b_nm2=state.b_nm1,
        a_nm1=state.a_n,
        b_nm1=state.b_n,
        a_n=a_new,
        b_n=b_new,
        n=state.n + 1,
    )


def _rescale(state: CFState, recur_big: float) -> CFState:
    if abs(state.a_n) <= recur_big and abs(state.b_n) <= recur_big:
        return state

    return replace(
        state,
        a_nm2=state.a_nm2 / recur_big,
        b_nm2=state.b_nm2 / recur_big,
        a_nm1=state.a_nm1 / recur_big,
        b_nm1=state.b_nm1 / recur_big,
        a_n=state.a_n / recur_big,
        b_n=state.b_n / recur_big,
    )


# =============================================================================
# RECURRENCE
# =============================================================================


def cf_partial_terms(n_order: int, x: float, n: int) -> tuple[float, float]:
    """
    Частные числитель и знаменатель (a_n, b_n) для n >= 3.

    Examples:
        >>> cf_partial_terms(3, 2.0, 3)
        (2.0, 5)
        >>> cf_partial_terms(3, 2.0, 4)
        (-8.0, 6)
    """
    if n % 2 == 1:
        an = ((n - 1) // 2) * x
    else:
        an = -(n_order + (n // 2) - 1) * x
    bn = n_order + n - 1
    return (an, bn)


def cf_initial_state(n_order: int, x: float) -> CFState:
    """
    Состояние после двух стартовых подходящих дробей (n = 2).

    A_{-1} = 1, B_{-1} = 0, A_0 = 0, B_0 = 1
    A_1 = b_1 A_0 + a_1 A_{-1} = 1,    B_1 = 1
    A_2 = N + 1,                        B_2 = N + 1 - x
    """
    state = CFState(a_nm2=0.0, b_nm2=0.0, a_nm1=1.0, b_nm1=0.0, a_n=0.0, b_n=1.0, n=0)
    state = _advance(state, 1.0, 1.0)
    state = _advance(state, -x, float(n_order + 1))
    return replace(state, fn=state.ratio)


def cf_step(
    state: CFState,
    n_order: int,
    x: float,
    recur_big: float = SQRT_DBL_MAX,
) -> CFState:
    """
    Один шаг рекурсии: новые A_n, B_n, масштабирование и fn.

    Args:
        state: Состояние на шаге n - 1
        n_order: Порядок N
        x: Аргумент
        recur_big: Порог масштабирования

    Returns:
        Новое состояние на шаге n (исходное не изменяется)
    """
    an, bn = cf_partial_terms(n_order, x, state.n + 1)
    stepped = _rescale(_advance(state, an, bn), recur_big)
    return replace(stepped, fn=stepped.ratio)


def exprel_n_cf(
    n_order: int,
    x: float,
    config: ContinuedFractionConfig | None = None,
) -> SFResult:
    """
    exprel_N(x) через continued fraction.

    Применим для -10N < x <= N; вне этого диапазона dispatcher
    использует асимптотики.

    Args:
        n_order: Порядок N >= 0
        x: Аргумент
        config: Конфигурация рекурсии (default: ContinuedFractionConfig())

    Returns:
        SFResult(fn, SUCCESS) при сходимости;
        SFResult(fn, MAX_ITER) — best-effort отношение при исчерпании max_iter;
        DOMAIN_ERROR с 0.0 при N < 0
    """
    if n_order < 0:
        return failure(SFStatus.DOMAIN_ERROR)

    cfg = config or ContinuedFractionConfig()

    state = cf_initial_state(n_order, x)
    converged = False

    while state.n < cfg.max_iter:
        old_fn = state.fn
        state = cf_step(state, n_order, x, cfg.recur_big)
        if abs(old_fn - state.fn) < cfg.rel_tol * abs(state.fn):
            converged = True
            break

    if converged:
        return success(state.fn)

    logger.debug(
        "exprel_n_cf did not converge: N=%d x=%r n=%d fn=%r",
        n_order,
        x,
        state.n,
        state.fn,
    )
    return failure(SFStatus.MAX_ITER, val=state.fn)
