"""
Тесты для модуля Combinatorics

Проверяет:
1. factorial, binomial и их границы int64
2. binomial_mod (теорема Люка) против binomial % p
3. fibonacci (включая отрицательные индексы) и fibonacci_mod
4. power_sum и geometric_mod
"""

import pytest

from numtheory64.core.contracts import INT64_MAX, INT64_MIN, PreconditionViolation
from numtheory64.core.math.combinatorics import (
    FACTORIAL_MAX_N,
    FIBONACCI_MAX_N,
    binomial,
    binomial_mod,
    factorial,
    fibonacci,
    fibonacci_mod,
    geometric_mod,
    power_sum,
)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19)


# =============================================================================
# ТЕСТЫ FACTORIAL & BINOMIAL
# =============================================================================


class TestFactorial:
    """Тесты для factorial"""

    def test_values(self) -> None:
        """0! = 1, 5! = 120, 20! — максимум в int64"""
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(FACTORIAL_MAX_N) == 2_432_902_008_176_640_000
        assert factorial(FACTORIAL_MAX_N) <= INT64_MAX

    def test_out_of_range(self) -> None:
        """21! не помещается в int64"""
        with pytest.raises(PreconditionViolation, match="factorial"):
            factorial(21)
        with pytest.raises(PreconditionViolation):
            factorial(-1)


class TestBinomial:
    """Тесты для binomial / binomial_mod"""

    def test_values(self) -> None:
        """Базовые значения"""
        assert binomial(4, 2) == 6
        assert binomial(0, 0) == 1
        assert binomial(5, 7) == 0
        assert binomial(60, 30) == 118_264_581_564_861_424

    def test_pascal_rule(self) -> None:
        """C(n, k) = C(n-1, k-1) + C(n-1, k) для n < 61"""
        for n in range(1, 61):
            for k in range(1, n):
                assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)

    def test_overflow_rejected(self) -> None:
        """Результат вне int64"""
        with pytest.raises(PreconditionViolation, match="overflows"):
            binomial(100, 50)

    def test_lucas_against_binomial(self) -> None:
        """binomial_mod(n, k, p) == binomial(n, k) % p"""
        for p in SMALL_PRIMES + (1_000_000_007,):
            for n in range(0, 61):
                for k in range(0, n + 2):
                    assert binomial_mod(n, k, p) == binomial(n, k) % p

    def test_lucas_large_arguments(self) -> None:
        """C(p + 1, 1) == 1, C(2p, p) == 2, C(p^2, p) == 0 (mod p)"""
        p = 1_000_000_007
        assert binomial_mod(p + 1, 1, p) == 1
        assert binomial_mod(2 * p, p, p) == 2
        assert binomial_mod(p * p, p, p) == 0
        assert binomial_mod(p * p, 1, p) == 0

    def test_composite_modulus_rejected(self) -> None:
        """Модуль обязан быть простым"""
        with pytest.raises(PreconditionViolation, match="prime modulus"):
            binomial_mod(10, 3, 6)


# =============================================================================
# ТЕСТЫ FIBONACCI
# =============================================================================


class TestFibonacci:
    """Тесты для fibonacci / fibonacci_mod"""

    def test_values(self) -> None:
        """Документированные значения и граница"""
        assert fibonacci(0) == 0
        assert fibonacci(1) == 1
        assert fibonacci(10) == 55
        assert fibonacci(-10) == -55
        assert fibonacci(-9) == 34
        assert fibonacci(FIBONACCI_MAX_N) == 7_540_113_804_746_346_429

    def test_recurrence(self) -> None:
        """F(n+2) = F(n) + F(n+1) для n в [-50, 50)"""
        for n in range(-50, 50):
            assert fibonacci(n + 2) == fibonacci(n) + fibonacci(n + 1)

    def test_out_of_range(self) -> None:
        """|n| > 92"""
        with pytest.raises(PreconditionViolation):
            fibonacci(93)
        with pytest.raises(PreconditionViolation):
            fibonacci(-93)

    def test_mod_against_exact(self) -> None:
        """fibonacci_mod(n, m) == fibonacci(n) % m"""
        for m in range(2, 20):
            for n in range(-50, 50):
                assert fibonacci_mod(n, m) == fibonacci(n) % m

    def test_mod_pisano_period(self) -> None:
        """Период Пизано для 10 равен 60"""
        n = 10**18
        assert fibonacci_mod(n, 10) == fibonacci(n % 60) % 10
        assert fibonacci_mod(n + 60, 10) == fibonacci_mod(n, 10)

    def test_mod_large_modulus(self) -> None:
        """Модуль около 2^63"""
        for n in (0, 1, 50, 92):
            assert fibonacci_mod(n, INT64_MAX) == fibonacci(n) % INT64_MAX

    def test_mod_int64_extremes(self) -> None:
        """n = INT64_MIN и INT64_MAX через период Пизано (60 для m = 10)"""
        assert fibonacci_mod(INT64_MIN, 10) == -fibonacci(2**63 % 60) % 10
        assert fibonacci_mod(INT64_MAX, 10) == fibonacci(INT64_MAX % 60) % 10
        assert fibonacci_mod(INT64_MIN + 1, 10) == fibonacci(INT64_MAX % 60) % 10
        assert fibonacci_mod(INT64_MIN, 2) == fibonacci(2**63 % 3) % 2

    def test_mod_invalid_modulus(self) -> None:
        """m < 2"""
        with pytest.raises(PreconditionViolation):
            fibonacci_mod(5, 1)
        with pytest.raises(PreconditionViolation):
            fibonacci_mod(5, 0)


# =============================================================================
# ТЕСТЫ СУММ
# =============================================================================


class TestSums:
    """Тесты для power_sum / geometric_mod"""

    def test_power_sum(self) -> None:
        """Формулы Фаульхабера для k <= 3"""
        for k in range(4):
            for n in range(31):
                assert power_sum(k, n) == sum(i**k for i in range(1, n + 1))

    def test_power_sum_unsupported_degree(self) -> None:
        """k > 3 не реализован"""
        with pytest.raises(PreconditionViolation, match="0 <= k <= 3"):
            power_sum(4, 10)

    def test_geometric_against_exact(self) -> None:
        """1 + a + ... + a^n mod m при m = 2^63 - 1"""
        m = INT64_MAX
        for a in range(15):
            for n in range(15):
                assert geometric_mod(a, n, m) == sum(a**i for i in range(n + 1)) % m

    def test_geometric_non_invertible_ratio(self) -> None:
        """gcd(a - 1, m) != 1: деление на a - 1 невозможно"""
        for m in (4, 6, 12, 1000):
            for a in range(m):
                for n in range(10):
                    assert geometric_mod(a, n, m) == sum(a**i for i in range(n + 1)) % m

    def test_geometric_modulus_one(self) -> None:
        """По модулю 1 всё равно 0"""
        assert geometric_mod(0, 5, 1) == 0
