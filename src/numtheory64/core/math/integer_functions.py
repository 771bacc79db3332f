"""
Integer functions — целочисленные корни, бесквадратность, первообразные корни

- logi, sqrti, cbrti: точные целые floor-значения (без ошибок округления float)
- power_of: кратность простого в n
- is_square, is_cube, is_square_free, count_square_free
- primitive_root: наименьший первообразный корень по модулю n
- function_power: f(f(...f(x0)...)) с обнаружением цикла по Бренту
"""

import math
from typing import Callable, Optional, TypeVar

from numtheory64.core.contracts.errors import NoSolutionError
from numtheory64.core.contracts.validators import (
    require,
    validate_int64,
    validate_non_negative,
    validate_positive,
)
from numtheory64.core.math.factorize import factor
from numtheory64.core.math.modular import _powmod, gcd
from numtheory64.core.math.multiplicative import phi
from numtheory64.core.math.sieve import PrimeCache, get_default_cache

T = TypeVar("T")


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ЛОГАРИФМ И КОРНИ
# =============================================================================


def logi(n: int, b: int) -> int:
    """floor(log_b(n)) для n > 0, b > 1."""
    validate_positive(n, "n")
    require(b > 1, f"base must be > 1, got {b}")

    r = 0
    while n >= b:
        r += 1
        n //= b
    return r


def sqrti(a: int) -> int:
    """floor(sqrt(a)) для a >= 0."""
    validate_non_negative(a, "a")
    return math.isqrt(a)


def cbrti(a: int) -> int:
    """
    floor(cbrt(a)) для a >= 0.

    Приближение через float уточняется целочисленно, так что результат
    точен и для a около 2^63.
    """
    validate_non_negative(a, "a")
    r = int(round(a ** (1.0 / 3.0)))
    while r * r * r > a:
        r -= 1
    while (r + 1) * (r + 1) * (r + 1) <= a:
        r += 1
    return r


def power_of(n: int, p: int) -> int:
    """Наибольшее k такое, что p^k делит n (n > 0, p > 1)."""
    validate_positive(n, "n")
    require(p > 1, f"p must be > 1, got {p}")

    r = 0
    while n % p == 0:
        r += 1
        n //= p
    return r


# =============================================================================
# КВАДРАТЫ, КУБЫ, БЕСКВАДРАТНОСТЬ
# =============================================================================


def is_square(n: int) -> bool:
    """Является ли n полным квадратом (OEIS A000290); отрицательные — нет."""
    validate_int64(n, "n")
    if n < 0:
        return False
    r = math.isqrt(n)
    return r * r == n


def is_cube(n: int) -> bool:
    """Является ли n >= 0 полным кубом (OEIS A000578)."""
    r = cbrti(n)
    return r * r * r == n


def is_square_free(n: int, cache: Optional[PrimeCache] = None) -> bool:
    """
    Не делится ли n > 0 ни на один квадрат, кроме 1 (OEIS A005117).

    Пробное деление на простые <= cbrt(n); остаток имеет не более двух
    простых множителей, поэтому он бесквадратен, если не является
    полным квадратом. O(n^(1/3+eps)).
    """
    validate_positive(n, "n")
    if cache is None:
        cache = get_default_cache()

    for p in cache.primes(cbrti(n)):
        if p * p * p > n:
            break
        if n % p == 0:
            n //= p
            if n % p == 0:
                return False
    return n == 1 or not is_square(n)


def count_square_free(n: int, cache: Optional[PrimeCache] = None) -> int:
    """
    Количество бесквадратных чисел <= n (OEIS A013928 со сдвигом).

    Включение-исключение по квадратам простых <= sqrt(n). O(n^(1/2+eps)).
    """
    validate_int64(n, "n")
    if n < 1:
        return 0
    if cache is None:
        cache = get_default_cache()
    ps = cache.primes(math.isqrt(n))

    def count(m: int, start: int) -> int:
        r = m
        for i in range(start, len(ps)):
            q = m // ps[i] // ps[i]
            if q == 0:
                break
            r -= count(q, i + 1)
        return r

    return count(n, 0)


# =============================================================================
# ПЕРВООБРАЗНЫЙ КОРЕНЬ
# =============================================================================


def _has_primitive_root(n: int) -> bool:
    # корень существует для 1, 2, 4, p^k и 2p^k (p нечётное простое)
    if n in (1, 2, 4):
        return True
    if n % 2 == 0:
        n //= 2
        if n % 2 == 0:
            return False
    return len(factor(n)) == 1


def primitive_root(n: int) -> int:
    """
    Наименьший первообразный корень по модулю n.

    Raises:
        PreconditionViolation: n <= 1
        NoSolutionError: первообразного корня не существует

    Examples:
        >>> primitive_root(7)
        3
    """
    validate_int64(n, "n")
    require(n > 1, f"primitive_root requires a modulus > 1, got {n}")
    if n == 2:
        return 1
    if not _has_primitive_root(n):
        raise NoSolutionError(f"no primitive root modulo {n}")

    order = phi(n)
    prime_factors = [p for p, _ in factor(order)]

    for x in range(2, n):
        if gcd(x, n) != 1:
            continue
        if all(_powmod(x, order // q, n) != 1 for q in prime_factors):
            return x

    raise NoSolutionError(f"no primitive root modulo {n}")


# =============================================================================
# ИТЕРАЦИЯ ФУНКЦИИ
# =============================================================================


def function_power(f: Callable[[T], T], n: int, x0: T) -> T:
    """
    f, применённая n раз к x0.

    Использует обнаружение цикла по Бренту: как только значение
    повторяется, целые циклы пропускаются, так что n может быть огромным
    при коротком периоде.

    Examples:
        >>> function_power(lambda a: (a + 1) % 5, 123456789123456789, 0)
        4
    """
    validate_non_negative(n, "n")

    x = x0
    y = x
    safe = 0
    i = 0
    while i < n:
        if i != 0 and x == y:
            # x повторил контрольную точку: пропускаем целые циклы
            length = i - safe
            i += (n - i) // length * length
            while i < n:
                x = f(x)
                i += 1
            return x

        if i >= 2 * safe:
            safe = i
            y = x

        x = f(x)
        i += 1

    return x
