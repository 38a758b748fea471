"""
Общие fixtures для unit-тестов.
"""

import math

import pytest


def _exprel_n_reference(n_order: int, x: float) -> float:
    """
    Независимая оценка exprel_N(x) для проверки вычислителей.

    x >= -N: степенной ряд Σ x^k N! / (N+k)! (члены по модулю не растут).
    x < -N:  exprel_N(x) = e^x N! / x^N - (N/x) Σ_k (N-1)...(N-k) / x^k,
             члены суммы убывают геометрически.
    """
    if x >= -n_order:
        total = 1.0
        term = 1.0
        k = 1
        while abs(term) > 1e-18 * abs(total):
            term *= x / (n_order + k)
            total += term
            k += 1
        return total

    tail = 1.0
    term = 1.0
    for k in range(1, n_order):
        term *= (n_order - k) / x
        tail += term
    lead = (-1.0) ** n_order * math.exp(x + math.lgamma(n_order + 1.0) - n_order * math.log(-x))
    return lead - n_order / x * tail


@pytest.fixture
def exprel_n_reference():
    """Эталонная функция exprel_N(x)."""
    return _exprel_n_reference
