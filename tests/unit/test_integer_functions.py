"""
Тесты для модуля Integer Functions

Проверяет:
1. Целочисленные logi / sqrti / cbrti / power_of
2. is_square / is_cube / is_square_free / count_square_free
3. primitive_root (существование и наименьший корень)
4. function_power с обнаружением цикла
"""

import pytest

from numtheory64.core.contracts import (
    INT64_MAX,
    NoSolutionError,
    PreconditionViolation,
)
from numtheory64.core.math.integer_functions import (
    cbrti,
    count_square_free,
    function_power,
    is_cube,
    is_square,
    is_square_free,
    logi,
    power_of,
    primitive_root,
    sqrti,
)
from numtheory64.core.math.sieve import PrimeCache


def naive_square_free(n: int) -> bool:
    d = 2
    while d * d <= n:
        if n % (d * d) == 0:
            return False
        d += 1
    return True


# =============================================================================
# ТЕСТЫ ЦЕЛОЧИСЛЕННЫХ КОРНЕЙ
# =============================================================================


class TestIntegerRoots:
    """Тесты для logi, sqrti, cbrti, power_of"""

    def test_logi(self) -> None:
        """floor(log_b(n))"""
        assert logi(1, 2) == 0
        assert logi(999, 10) == 2
        assert logi(1000, 10) == 3
        assert logi(INT64_MAX, 2) == 62
        with pytest.raises(PreconditionViolation):
            logi(0, 10)
        with pytest.raises(PreconditionViolation, match="base"):
            logi(10, 1)

    def test_sqrti(self) -> None:
        """floor(sqrt(a)) точно, в том числе около 2^63"""
        assert sqrti(0) == 0
        assert sqrti(15) == 3
        assert sqrti(16) == 4
        assert sqrti(INT64_MAX) == 3_037_000_499
        with pytest.raises(PreconditionViolation):
            sqrti(-1)

    def test_cbrti(self) -> None:
        """floor(cbrt(a)) точно, в том числе около 2^63"""
        assert cbrti(0) == 0
        assert cbrti(26) == 2
        assert cbrti(27) == 3
        assert cbrti(INT64_MAX) == 2_097_151
        for r in (10, 1_000, 2_097_151):
            assert cbrti(r**3) == r
            assert cbrti(r**3 - 1) == r - 1

    def test_power_of(self) -> None:
        """Кратность p в n"""
        assert power_of(48, 2) == 4
        assert power_of(48, 3) == 1
        assert power_of(7, 3) == 0
        assert power_of(2**62, 2) == 62


# =============================================================================
# ТЕСТЫ КВАДРАТОВ И БЕСКВАДРАТНОСТИ
# =============================================================================


class TestSquares:
    """Тесты для is_square, is_cube, is_square_free"""

    def test_is_square(self) -> None:
        """Полные квадраты; отрицательные — нет"""
        squares = {i * i for i in range(39)}
        assert [n for n in range(-10, 1500) if is_square(n)] == sorted(squares)
        assert is_square(3_037_000_499**2)
        assert not is_square(3_037_000_499**2 - 1)

    def test_is_cube(self) -> None:
        """Полные кубы"""
        assert [n for n in range(1500) if is_cube(n)] == [i**3 for i in range(12)]
        assert is_cube(2_097_151**3)

    def test_square_free_below_100(self) -> None:
        """Бесквадратные числа < 100"""
        assert [n for n in range(1, 100) if is_square_free(n)] == [
            1, 2, 3, 5, 6, 7, 10, 11, 13, 14, 15, 17, 19, 21, 22, 23, 26, 29,
            30, 31, 33, 34, 35, 37, 38, 39, 41, 42, 43, 46, 47, 51, 53, 55,
            57, 58, 59, 61, 62, 65, 66, 67, 69, 70, 71, 73, 74, 77, 78, 79,
            82, 83, 85, 86, 87, 89, 91, 93, 94, 95, 97,
        ]

    def test_square_free_against_definition(self) -> None:
        """Сравнение с перебором делителей-квадратов для n < 10^4"""
        cache = PrimeCache()
        for n in range(1, 10_000):
            assert is_square_free(n, cache) == naive_square_free(n)

    def test_square_free_large(self) -> None:
        """Остаток после пробного деления — квадрат большого простого"""
        p = 1_000_003
        assert not is_square_free(3 * p * p)
        assert is_square_free(1_000_000_007 * 1_000_000_009)
        with pytest.raises(PreconditionViolation):
            is_square_free(0)


class TestCountSquareFree:
    """Тесты для count_square_free"""

    def test_small_values(self) -> None:
        """Совпадение с перечислением для n <= 500"""
        running = 0
        for n in range(0, 501):
            if n >= 1 and naive_square_free(n):
                running += 1
            assert count_square_free(n) == running

    def test_known_values(self) -> None:
        """Q(10^k) (OEIS A071172)"""
        assert count_square_free(9_999) == 6083
        assert count_square_free(1_000_000) == 607_926
        assert count_square_free(100_000_000) == 60_792_694

    def test_explicit_cache(self) -> None:
        """cache= используется для простых <= sqrt(n)"""
        cache = PrimeCache()
        assert count_square_free(10_000, cache) == 6083
        assert cache.limit == 100


# =============================================================================
# ТЕСТЫ ПЕРВООБРАЗНОГО КОРНЯ
# =============================================================================


class TestPrimitiveRoot:
    """Тесты для primitive_root"""

    def test_smallest_roots(self) -> None:
        """Наименьший первообразный корень для n = 2..20 (OEIS A046145)"""
        expected = {
            2: 1, 3: 2, 4: 3, 5: 2, 6: 5, 7: 3, 9: 2, 10: 3, 11: 2,
            13: 2, 14: 3, 17: 3, 18: 5, 19: 2,
        }
        for n, root in expected.items():
            assert primitive_root(n) == root

    def test_no_root(self) -> None:
        """Корня нет для n вне {1, 2, 4, p^k, 2p^k}"""
        for n in (8, 12, 15, 16, 20, 21, 24):
            with pytest.raises(NoSolutionError, match="no primitive root"):
                primitive_root(n)

    def test_large_prime(self) -> None:
        """primitive_root(10^9 + 7) == 5"""
        assert primitive_root(1_000_000_007) == 5

    def test_invalid_modulus(self) -> None:
        """n <= 1 — нарушение контракта"""
        with pytest.raises(PreconditionViolation):
            primitive_root(1)
        with pytest.raises(PreconditionViolation):
            primitive_root(-7)


# =============================================================================
# ТЕСТЫ FUNCTION_POWER
# =============================================================================


class TestFunctionPower:
    """Тесты для function_power"""

    def test_cycle_of_five(self) -> None:
        """(a + 1) mod 5"""
        assert function_power(lambda a: (a + 1) % 5, 10, 0) == 0
        assert function_power(lambda a: (a + 1) % 5, 123_456_789_123_456_789, 0) == 4

    def test_zero_iterations(self) -> None:
        """f^0(x0) == x0"""
        assert function_power(lambda a: a + 1, 0, 42) == 42

    def test_no_cycle(self) -> None:
        """Без повторов — обычная итерация"""
        assert function_power(lambda a: a + 1, 1000, 0) == 1000

    def test_cycle_with_tail(self) -> None:
        """Предпериод перед циклом: x -> x^2 mod 1000"""

        def f(a: int) -> int:
            return a * a % 1000

        x = 3
        naive = [x]
        for _ in range(300):
            x = f(x)
            naive.append(x)

        for n in range(301):
            assert function_power(f, n, 3) == naive[n]

    def test_negative_count_rejected(self) -> None:
        """n < 0"""
        with pytest.raises(PreconditionViolation):
            function_power(lambda a: a, -1, 0)
