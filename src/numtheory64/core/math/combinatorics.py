"""
Combinatorics — комбинаторные функции в диапазоне int64

Все функции, результат которых может не поместиться в int64
(factorial, binomial, fibonacci), проверяют это заранее и бросают
PreconditionViolation. Модульные варианты (binomial_mod, fibonacci_mod,
geometric_mod) работают через примитивы modular без переполнений.
"""

from typing import Final

from numtheory64.core.contracts.errors import PreconditionViolation
from numtheory64.core.contracts.validators import (
    INT64_MAX,
    require,
    validate_int64,
    validate_modulus,
    validate_non_negative,
    validate_residue,
)
from numtheory64.core.math.modular import (
    _addmod,
    _invmod,
    _mulmod,
    _powmod,
    _submod,
)
from numtheory64.core.math.primality import is_prime

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

# 20! < 2^63 < 21!
FACTORIAL_MAX_N: Final[int] = 20

# |F(92)| < 2^63 < F(93)
FIBONACCI_MAX_N: Final[int] = 92


# =============================================================================
# FACTORIAL & BINOMIAL
# =============================================================================


def factorial(n: int) -> int:
    """
    n! для 0 <= n <= 20.

    Raises:
        PreconditionViolation: n вне [0, 20]
    """
    validate_int64(n, "n")
    require(
        0 <= n <= FACTORIAL_MAX_N,
        f"factorial requires 0 <= n <= {FACTORIAL_MAX_N}, got {n}",
    )
    r = 1
    for i in range(2, n + 1):
        r *= i
    return r


def binomial(n: int, k: int) -> int:
    """
    Биномиальный коэффициент C(n, k); 0 при k > n.

    Промежуточные значения проверяются на выход за int64.

    Raises:
        PreconditionViolation: n < 0, k < 0 или результат вне int64
    """
    validate_non_negative(n, "n")
    validate_non_negative(k, "k")
    if k > n:
        return 0

    # симметрия
    if n - k < k:
        k = n - k

    r = 1
    for i in range(1, k + 1):
        require(
            r <= INT64_MAX // (n + 1 - i),
            f"binomial({n}, {k}) overflows int64",
        )
        r = r * (n + 1 - i) // i
    return r


def binomial_mod(n: int, k: int, p: int) -> int:
    """
    C(n, k) mod p для простого p по теореме Люка.

    Raises:
        PreconditionViolation: p не простое, n < 0 или k < 0
    """
    validate_non_negative(n, "n")
    validate_non_negative(k, "k")
    require(is_prime(p), f"binomial_mod requires a prime modulus, got {p}")
    if k > n:
        return 0

    numerator = 1
    denominator = 1
    while k > 0:
        a, b = n % p, k % p
        n //= p
        k //= p
        if b > a:
            return 0
        if a - b < b:
            b = a - b
        for i in range(1, b + 1):
            numerator = _mulmod(numerator, a + 1 - i, p)
            denominator = _mulmod(denominator, i, p)

    return _mulmod(numerator, _invmod(denominator, p), p)


# =============================================================================
# FIBONACCI
# =============================================================================


def fibonacci(n: int) -> int:
    """
    n-е число Фибоначчи: F(0) = 0, F(1) = 1, F(n+2) = F(n) + F(n+1).

    Для отрицательных n: F(-n) = (-1)^(n+1) F(n).

    Raises:
        PreconditionViolation: n вне [-92, 92]

    Examples:
        >>> fibonacci(10)
        55
        >>> fibonacci(-10)
        -55
    """
    validate_int64(n, "n")
    require(
        -FIBONACCI_MAX_N <= n <= FIBONACCI_MAX_N,
        f"fibonacci requires -{FIBONACCI_MAX_N} <= n <= {FIBONACCI_MAX_N}, got {n}",
    )
    if n < 0:
        return -fibonacci(-n) if n % 2 == 0 else fibonacci(-n)

    # удвоение: F(2k) = F(k)(2F(k+1) - F(k)), F(2k+1) = F(k)^2 + F(k+1)^2
    a, b = 0, 1
    for bit in bin(n)[2:]:
        c = a * (2 * b - a)
        d = a * a + b * b
        a, b = (d, c + d) if bit == "1" else (c, d)
    return a


def fibonacci_mod(n: int, m: int) -> int:
    """
    F(n) mod m в [0, m) для любого n в int64 и m >= 2.

    Raises:
        PreconditionViolation: m < 2
    """
    validate_int64(n, "n")
    validate_modulus(m, "m")
    require(m >= 2, f"fibonacci_mod requires m >= 2, got {m}")

    if m == 2:
        # период Пизано для 2 равен 3
        return 0 if n % 3 == 0 else 1

    if n < 0:
        # F(-n) = (-1)^(n+1) F(n); -n может равняться 2^63
        r = _fibonacci_mod(-n, m)
        return (m - r) % m if n % 2 == 0 else r

    return _fibonacci_mod(n, m)


def _fibonacci_mod(n: int, m: int) -> int:
    # n >= 0, m >= 2
    a, b = 0, 1
    for bit in bin(n)[2:]:
        c = _mulmod(a, _submod(_addmod(b, b, m), a, m), m)
        d = _addmod(_mulmod(a, a, m), _mulmod(b, b, m), m)
        a, b = (d, _addmod(c, d, m)) if bit == "1" else (c, d)
    return a


# =============================================================================
# СУММЫ
# =============================================================================


def power_sum(k: int, n: int) -> int:
    """
    1^k + 2^k + ... + n^k по формуле Фаульхабера, k <= 3.

    Общий случай требует чисел Бернулли (не целых), поэтому не реализован.

    Raises:
        PreconditionViolation: k вне [0, 3] или n < 0
    """
    validate_non_negative(n, "n")
    if k == 0:
        return n
    if k == 1:
        return n * (n + 1) // 2
    if k == 2:
        return n * (n + 1) * (2 * n + 1) // 6
    if k == 3:
        return n * n * (n + 1) * (n + 1) // 4
    raise PreconditionViolation(f"power_sum is implemented for 0 <= k <= 3, got {k}")


def geometric_mod(a: int, n: int, m: int) -> int:
    """
    1 + a + a^2 + ... + a^n mod m без деления на a - 1.

    Деление проблематично при gcd(a - 1, m) != 1, поэтому сумма
    собирается удвоением: S(2k+1) = (1 + a) * S_{a^2}(k).
    a = 0 допустимо (0^0 = 1).

    Raises:
        PreconditionViolation: невалидные m, a или n < 0
    """
    validate_modulus(m)
    validate_residue(a, m, "a")
    validate_non_negative(n, "n")

    one = 1 % m
    factor = one
    total = 0

    while n > 0 and a != 0:
        if n % 2 == 0:
            total = _addmod(total, _mulmod(factor, _powmod(a, n, m), m), m)
            n -= 1

        factor = _mulmod(_addmod(one, a, m), factor, m)
        a = _mulmod(a, a, m)
        n //= 2

    return _addmod(total, factor, m)
