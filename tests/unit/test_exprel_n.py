"""
Тесты для dispatcher exprel_N(x)

Проверяемые инварианты:
1. Фиксированный порядок режимов, ровно одна ветка на (N, x)
2. exprel_N(0) == 1.0 для всех N >= 0
3. N < 0 → DOMAIN_ERROR, 0.0
4. Делегирование N = 0, 1, 2 в exp/exprel/exprel_2
5. Непрерывность на границах ±10N, N, 12N и Taylor-пороге
6. Асимптотика x > 12N: exprel_N(x) x^N / N! ≈ e^x
7. Монотонное возрастание по x
8. OVERFLOW с sentinel 0.0 для больших x
"""

import math

import pytest

from specfunc.core.domain import SFStatus
from specfunc.core.math.numerical_safeguards import ROOT3_DBL_EPSILON, relative_difference
from specfunc.exp.continued_fraction import ContinuedFractionConfig
from specfunc.exp.elementary import exp_e
from specfunc.exp.exprel import exprel_2_e, exprel_e
from specfunc.exp.exprel_n import ExprelRegime, exprel_n_e, select_regime


# =============================================================================
# ТЕСТЫ: Выбор режима
# =============================================================================


class TestSelectRegime:
    """Тесты select_regime."""

    @pytest.mark.parametrize(
        "n_order, x, regime",
        [
            (-1, 1.0, ExprelRegime.DOMAIN),
            (3, math.nan, ExprelRegime.DOMAIN),
            (3, 0.0, ExprelRegime.UNITY),
            (3, -0.0, ExprelRegime.UNITY),
            (10, 1e-5, ExprelRegime.TAYLOR),
            (10, -1e-5, ExprelRegime.TAYLOR),
            (1, 1e-6, ExprelRegime.TAYLOR),
            (0, 1e-6, ExprelRegime.EXP),
            (0, 2.0, ExprelRegime.EXP),
            (1, 2.0, ExprelRegime.EXPREL_1),
            (2, 2.0, ExprelRegime.EXPREL_2),
            (3, 37.0, ExprelRegime.LARGE_POSITIVE),
            (3, 36.0, ExprelRegime.POSITIVE_ASYMPTOTIC),
            (3, 3.5, ExprelRegime.POSITIVE_ASYMPTOTIC),
            (3, 3.0, ExprelRegime.CONTINUED_FRACTION),
            (3, -29.0, ExprelRegime.CONTINUED_FRACTION),
            (3, -30.0, ExprelRegime.LARGE_NEGATIVE),
            (3, -1e6, ExprelRegime.LARGE_NEGATIVE),
        ],
    )
    def test_regime_table(self, n_order, x, regime) -> None:
        assert select_regime(n_order, x) == regime

    def test_taylor_runs_before_low_order_delegation(self) -> None:
        """Taylor-ветка проверяется раньше N == 1/2."""
        x = 0.5 * ROOT3_DBL_EPSILON
        assert select_regime(1, x) == ExprelRegime.TAYLOR
        assert select_regime(2, x) == ExprelRegime.TAYLOR

    def test_non_integer_order_rejected(self) -> None:
        with pytest.raises(TypeError, match="n_order must be int"):
            select_regime(2.0, 1.0)

        with pytest.raises(TypeError, match="n_order must be int"):
            exprel_n_e(True, 1.0)


# =============================================================================
# ТЕСТЫ: Фиксированная точка и домен
# =============================================================================


class TestFixedPointAndDomain:
    """exprel_N(0) = 1, N < 0 → DOMAIN_ERROR."""

    @pytest.mark.parametrize("n_order", [0, 1, 2, 3, 7, 50, 100])
    def test_zero_is_fixed_point(self, n_order) -> None:
        result = exprel_n_e(n_order, 0.0)
        assert result.status == SFStatus.SUCCESS
        assert result.val == 1.0

    @pytest.mark.parametrize("n_order", [-1, -5])
    @pytest.mark.parametrize("x", [0.0, 1.0, -3.0, 1e6, math.inf])
    def test_negative_order_is_domain_error(self, n_order, x) -> None:
        result = exprel_n_e(n_order, x)
        assert result.status == SFStatus.DOMAIN_ERROR
        assert result.val == 0.0

    def test_nan_is_domain_error(self) -> None:
        result = exprel_n_e(5, math.nan)
        assert result.status == SFStatus.DOMAIN_ERROR
        assert result.val == 0.0


# =============================================================================
# ТЕСТЫ: Делегирование
# =============================================================================


class TestDelegation:
    """N = 0, 1, 2 делегируются в элементарные вычислители."""

    @pytest.mark.parametrize("x", [-3.0, 0.5, 2.5, 700.0])
    def test_order_zero_is_exp(self, x) -> None:
        assert exprel_n_e(0, x).val == exp_e(x).val

    def test_order_zero_overflow(self) -> None:
        result = exprel_n_e(0, 1000.0)
        assert result.status == SFStatus.OVERFLOW
        assert result.val == 0.0

    def test_order_one(self) -> None:
        """exprel_1(1) = e - 1."""
        assert exprel_n_e(1, 1.0).val == exprel_e(1.0).val
        assert exprel_n_e(1, 1.0).val == pytest.approx(1.718281828459045, rel=1e-14)

    def test_order_two(self) -> None:
        """exprel_2(1) = 2 (e - 2)."""
        assert exprel_n_e(2, 1.0).val == exprel_2_e(1.0).val
        assert exprel_n_e(2, 1.0).val == pytest.approx(2.0 * (math.e - 2.0), rel=1e-14)

    def test_taylor_agrees_with_exprel(self) -> None:
        x = 1e-6
        assert exprel_n_e(1, x).val == pytest.approx(exprel_e(x).val, rel=1e-15)


# =============================================================================
# ТЕСТЫ: Точность по режимам
# =============================================================================


class TestAccuracy:
    """Сравнение с независимым эталоном."""

    @pytest.mark.parametrize(
        "n_order, x",
        [
            (3, -100.0),
            (3, -2.0),
            (3, 1.5),
            (3, 6.0),
            (5, 75.0),
            (5, -75.0),
            (10, 25.0),
            (10, 130.0),
            (20, -5.0),
            (200, 300.0),
        ],
    )
    def test_matches_reference(self, n_order, x, exprel_n_reference) -> None:
        result = exprel_n_e(n_order, x)
        assert result.is_success
        assert result.val == pytest.approx(exprel_n_reference(n_order, x), rel=1e-9)

    @pytest.mark.parametrize("n_order, x", [(3, 100.0), (10, 200.0), (25, 400.0)])
    def test_large_positive_round_trip(self, n_order, x) -> None:
        """exprel_N(x) x^N / N! ≈ e^x при x > 12N."""
        assert select_regime(n_order, x) == ExprelRegime.LARGE_POSITIVE

        result = exprel_n_e(n_order, x)
        recovered = result.val * x**n_order / math.factorial(n_order)
        assert recovered == pytest.approx(math.exp(x), rel=1e-12)

    def test_taylor_region_value(self) -> None:
        n_order = 10
        x = 2e-5
        expected = 1.0 + x / 11.0 * (1.0 + x / 12.0)
        assert exprel_n_e(n_order, x).val == expected

    def test_large_negative_tends_to_zero(self) -> None:
        """x → -inf: exprel_N(x) ~ -N/x."""
        result = exprel_n_e(4, -1e8)
        assert result.is_success
        assert result.val == pytest.approx(4e-8, rel=1e-7)

        assert exprel_n_e(4, -math.inf).val == 0.0
        assert exprel_n_e(4, -math.inf).is_success


# =============================================================================
# ТЕСТЫ: Непрерывность на границах режимов
# =============================================================================


def _straddle(boundary: float) -> tuple[float, float]:
    below = math.nextafter(boundary, -math.inf)
    above = math.nextafter(boundary, math.inf)
    return below, above


class TestContinuity:
    """На границах режимов нет скачков."""

    @pytest.mark.parametrize("n_order", [3, 5, 10, 20])
    @pytest.mark.parametrize("factor", [-10.0, 1.0, 12.0])
    def test_boundaries_in_x(self, n_order, factor) -> None:
        boundary = factor * n_order
        below, above = _straddle(boundary)

        # Граница принадлежит нижнему режиму (x <= boundary)
        assert select_regime(n_order, boundary) == select_regime(n_order, below)
        assert select_regime(n_order, boundary) != select_regime(n_order, above)

        values = [exprel_n_e(n_order, x) for x in (below, boundary, above)]
        assert all(result.is_success for result in values)
        assert relative_difference(values[0].val, values[2].val) < 1e-6
        assert relative_difference(values[1].val, values[2].val) < 1e-6

    @pytest.mark.parametrize("n_order", [3, 5, 10, 20])
    @pytest.mark.parametrize("sign", [-1.0, 1.0])
    def test_taylor_threshold(self, n_order, sign) -> None:
        threshold = sign * ROOT3_DBL_EPSILON * n_order
        inside = math.nextafter(threshold, 0.0)

        assert select_regime(n_order, inside) == ExprelRegime.TAYLOR
        assert select_regime(n_order, threshold) == ExprelRegime.CONTINUED_FRACTION

        inner = exprel_n_e(n_order, inside).val
        outer = exprel_n_e(n_order, threshold).val
        assert relative_difference(inner, outer) < 1e-6


# =============================================================================
# ТЕСТЫ: Монотонность
# =============================================================================


class TestMonotonicity:
    """exprel_N(x) возрастает по x."""

    @pytest.mark.parametrize("n_order", [3, 7])
    def test_increasing(self, n_order) -> None:
        xs = [-80.0 + 0.5 * i for i in range(361)]
        values = [exprel_n_e(n_order, x) for x in xs]

        assert all(result.is_success for result in values)
        for left, right in zip(values, values[1:]):
            assert right.val > left.val


# =============================================================================
# ТЕСТЫ: Переполнение и конфигурация
# =============================================================================


class TestOverflowAndConfig:
    """OVERFLOW в асимптотических режимах, проброс cf_config."""

    def test_large_positive_overflow(self) -> None:
        result = exprel_n_e(3, 800.0)
        assert result.status == SFStatus.OVERFLOW
        assert result.val == 0.0

    def test_positive_asymptotic_overflow(self) -> None:
        """lnpre >= LOG_DBL_MAX - 5 → OVERFLOW."""
        assert select_regime(100, 1100.0) == ExprelRegime.POSITIVE_ASYMPTOTIC

        result = exprel_n_e(100, 1100.0)
        assert result.status == SFStatus.OVERFLOW
        assert result.val == 0.0

    def test_positive_infinity_overflow(self) -> None:
        result = exprel_n_e(5, math.inf)
        assert result.status == SFStatus.OVERFLOW
        assert result.val == 0.0

    def test_cf_config_forwarded(self) -> None:
        result = exprel_n_e(50, -400.0, cf_config=ContinuedFractionConfig(max_iter=2))
        assert result.status == SFStatus.MAX_ITER
        assert result.val == 51.0 / 451.0

    @pytest.mark.parametrize("n_order", [3, 10, 100])
    def test_cf_range_converges(self, n_order) -> None:
        """Весь диапазон -10N < x <= N сходится с настройками по умолчанию."""
        for i in range(1, 23):
            x = -10.0 * n_order + i * (11.0 * n_order) / 22.0
            result = exprel_n_e(n_order, x)
            assert result.status == SFStatus.SUCCESS, (n_order, x)

    @pytest.mark.parametrize("n_order", [3, 4, 5, 6, 7, 8, 9, 10, 100])
    def test_integer_sweep_converges(self, n_order) -> None:
        """Целые x на всём диапазоне -10N < x <= N дают SUCCESS."""
        for x in range(-10 * n_order + 1, n_order + 1):
            result = exprel_n_e(n_order, float(x))
            assert result.status == SFStatus.SUCCESS, (n_order, x)

    @pytest.mark.parametrize("n_order, x", [(3, -20.0), (4, -30.0), (5, -42.0), (6, -56.0)])
    def test_zero_convergent_points(self, n_order, x, exprel_n_reference) -> None:
        """x = -(N+1)(N+2) обнуляет третью подходящую дробь."""
        assert select_regime(n_order, x) == ExprelRegime.CONTINUED_FRACTION

        result = exprel_n_e(n_order, x)
        assert result.status == SFStatus.SUCCESS
        assert result.val == pytest.approx(exprel_n_reference(n_order, x), rel=1e-9)
