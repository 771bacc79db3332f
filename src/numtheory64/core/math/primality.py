"""
Primality — детерминированный тест простоты для 64-битных чисел

Схема:
1. Пробное деление на простые < 53
2. n < 53^2 → результат уже точен
3. Иначе детерминированный Miller-Rabin с фиксированным набором
   оснований, выбираемым по величине n

Наборы оснований и пороги взяты из опубликованных результатов
(Wojciech Izykowski, "Deterministic variants of the Miller-Rabin primality
test", http://miller-rabin.appspot.com). Прохождение всех SPRP-проверок
выбранного набора доказывает простоту в соответствующем диапазоне,
поэтому значения нельзя «упрощать» или пересчитывать.
"""

from typing import Final

from numtheory64.core.contracts.validators import (
    UINT64_MAX,
    require,
    validate_int64,
)
from numtheory64.core.math.modular import _mulmod, _powmod

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Простые, используемые для пробного деления
SMALL_PRIMES: Final[tuple[int, ...]] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
)

# Все составные n < TRIAL_DIVISION_BOUND имеют делитель < 53
TRIAL_DIVISION_BOUND: Final[int] = 53 * 53

# Наибольшее простое число, помещающееся в 63 бита
LARGEST_PRIME_63: Final[int] = 9223372036854775783

# (верхняя граница, основания): набор применим для всех n < границы
MILLER_RABIN_WITNESSES: Final[tuple[tuple[int, tuple[int, ...]], ...]] = (
    (291_831, (126_401_071_349_994_536,)),
    (1_050_535_501, (336_781_006_125, 9_639_812_373_923_155)),
    (273_919_523_041, (15, 7_363_882_082, 992_620_450_144_556)),
    (47_636_622_961_201, (2, 2_570_940, 211_991_001, 3_749_873_356)),
    (
        3_770_579_582_154_547,
        (2, 880_937, 2_570_940, 610_386_380, 4_130_785_767),
    ),
    (
        585_226_005_592_931_977,
        (
            2,
            123_635_709_730_000,
            9_233_062_284_813_009,
            43_835_965_440_333_360,
            761_179_012_939_631_437,
            1_263_739_024_124_850_375,
        ),
    ),
    # все n < 2^64
    (
        UINT64_MAX + 1,
        (2, 325, 9_375, 28_178, 450_775, 9_780_504, 1_795_265_022),
    ),
)


# =============================================================================
# STRONG PROBABLE PRIME
# =============================================================================


def is_sprp(a: int, n: int) -> bool:
    """
    Является ли n сильно вероятно простым по основанию a.

    n - 1 = d * 2^s, d нечётно. Для a mod n в {0, 1, n-1} результат
    всегда True (прямое обобщение определения на a >= n - 1).

    Args:
        a: Основание >= 0
        n: Нечётное n >= 3

    Returns:
        True если a^d == 1 или a^(d*2^r) == n-1 для некоторого 0 <= r < s

    Raises:
        PreconditionViolation: a < 0 или n не нечётное >= 3
    """
    require(a >= 0, f"base must be non-negative, got {a}")
    require(n > 1 and n % 2 == 1, f"n must be odd and >= 3, got {n}")
    return _is_sprp(a, n)


def _is_sprp(a: int, n: int) -> bool:
    a %= n
    if a == 0 or a == 1 or a == n - 1:
        return True

    s = ((n - 1) & -(n - 1)).bit_length() - 1
    d = (n - 1) >> s

    a = _powmod(a, d, n)
    if a == 1 or a == n - 1:
        return True

    for _ in range(s - 1):
        a = _mulmod(a, a, n)
        if a == n - 1:
            return True

    return False


# =============================================================================
# ТЕСТЫ ПРОСТОТЫ
# =============================================================================


def is_prime_miller_rabin(n: int) -> bool:
    """
    Детерминированный Miller-Rabin для нечётных n без малых делителей.

    Вызывать после пробного деления: для n, делящегося на основание,
    SPRP-проверка тривиально истинна.

    Raises:
        PreconditionViolation: n не нечётное >= 3 или n > 2^64 - 1
    """
    require(n > 1 and n % 2 == 1, f"n must be odd and >= 3, got {n}")
    require(n <= UINT64_MAX, f"n exceeds the 64-bit range, got {n}")
    return _is_prime_miller_rabin(n)


def _is_prime_miller_rabin(n: int) -> bool:
    for bound, bases in MILLER_RABIN_WITNESSES:
        if n < bound:
            return all(_is_sprp(a, n) for a in bases)
    raise AssertionError("unreachable: witness table covers all 64-bit values")


def is_prime(n: int) -> bool:
    """
    Проверка простоты n.

    Отрицательные n, 0 и 1 — не простые.

    Args:
        n: Целое в диапазоне [-2^63, 2^64 - 1]

    Returns:
        True если n простое

    Raises:
        PreconditionViolation: n вне поддерживаемого диапазона

    Examples:
        >>> is_prime(1_000_000_007)
        True
        >>> is_prime(1_000_000_007 * 1_000_000_009)
        False
    """
    require(
        isinstance(n, int) and not isinstance(n, bool),
        f"n must be an integer, got {n!r}",
    )
    require(n <= UINT64_MAX, f"n exceeds the 64-bit range, got {n}")
    return _is_prime(n)


def _is_prime(n: int) -> bool:
    if n < 53:
        return n in SMALL_PRIMES

    for p in SMALL_PRIMES:
        if n % p == 0:
            return False

    if n < TRIAL_DIVISION_BOUND:
        return True

    return _is_prime_miller_rabin(n)


def next_prime(n: int) -> int:
    """
    Наименьшее простое > n.

    Перебирает нечётные кандидаты; подходит для отдельных значений,
    не для перечисления подряд идущих простых (для этого есть PrimeCache).

    Raises:
        PreconditionViolation: n >= LARGEST_PRIME_63 (результат вне int64)

    Examples:
        >>> next_prime(13)
        17
    """
    validate_int64(n, "n")
    require(
        n < LARGEST_PRIME_63,
        f"next_prime is undefined for n >= {LARGEST_PRIME_63}, got {n}",
    )
    if n < 2:
        return 2

    n = (n + 1) | 1
    while not _is_prime(n):
        n += 2
    return n
