"""
Factorize — разложение 64-битных чисел на простые множители

Алгоритм factor(n):
1. Пробное деление на простые < 53 (каждое деление даёт запись (p, 1))
2. Остаток m >= 53^2: пока запись составная (Miller-Rabin), ищем
   делитель Pollard-rho с константами c = 1, 2, 3, ...; частное
   остаётся на месте, делитель добавляется в конец списка
3. Нормализация: сортировка и слияние повторов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Произведение p^e результата == n (проверяется перед возвратом)
2. Pollard-rho вызывается только для заведомо составных кофакторов
3. Число констант ограничено config.rho_max_constants →
   FactorizationExhausted вместо бесконечного цикла
"""

import logging
from typing import Optional

from numtheory64.core.config import DEFAULT_CONFIG, NumberTheoryConfig
from numtheory64.core.contracts.errors import FactorizationExhausted
from numtheory64.core.contracts.validators import require, validate_positive
from numtheory64.core.domain.factorization import Factorization
from numtheory64.core.math.primality import (
    SMALL_PRIMES,
    TRIAL_DIVISION_BOUND,
    _is_prime_miller_rabin,
)
from numtheory64.rho.state_machine import PollardRhoMachine, RhoState

logger = logging.getLogger(__name__)


# =============================================================================
# POLLARD-RHO
# =============================================================================


def find_factor(n: int, x0: int, c: int) -> int:
    """
    Одна попытка Pollard-rho с константой c.

    Returns:
        Нетривиальный (не обязательно простой) делитель n, либо само n,
        если для этой константы делитель не найден — тогда следует
        повторить с другим c.

    Raises:
        PreconditionViolation: n <= 0, x0 вне [0, n) или c вне (0, n)

    Examples:
        >>> find_factor(8051, 2, 1)
        97
    """
    return PollardRhoMachine(n, x0, c).run().divisor


def _split(m: int, config: NumberTheoryConfig) -> int:
    x0 = config.rho_start % m
    for c in range(1, config.rho_max_constants + 1):
        result = PollardRhoMachine(m, x0, c).run()
        if result.state == RhoState.FOUND:
            return result.divisor
        logger.debug(
            "pollard-rho: constant c=%d exhausted for %d after %d iterations",
            c,
            m,
            result.iterations,
        )

    logger.warning(
        "pollard-rho: no divisor of %d after %d constants",
        m,
        config.rho_max_constants,
    )
    raise FactorizationExhausted(
        f"no divisor of composite {m} found with constants "
        f"c = 1..{config.rho_max_constants}"
    )


# =============================================================================
# FACTOR
# =============================================================================


def factor(n: int, config: Optional[NumberTheoryConfig] = None) -> Factorization:
    """
    Разложение n > 0 на простые множители.

    Args:
        n: Число для разложения, 0 < n <= INT64_MAX
        config: Конфигурация Pollard-rho (rho_start, rho_max_constants)

    Returns:
        Factorization с возрастающими простыми; factor(1) — пустое

    Raises:
        PreconditionViolation: n <= 0
        FactorizationExhausted: исчерпан лимит констант Pollard-rho

    Examples:
        >>> factor(2**4 * 3 * 5**2 * 7) == [(2, 4), (3, 1), (5, 2), (7, 1)]
        True
    """
    validate_positive(n, "n")
    config = config or DEFAULT_CONFIG

    m = n
    entries: list[list[int]] = []

    for p in SMALL_PRIMES:
        if p * p > m:
            break
        while m % p == 0:
            m //= p
            entries.append([p, 1])

    if m > 1:
        entries.append([m, 1])

    if m >= TRIAL_DIVISION_BOUND:
        # малые делители уже сняты, повторное пробное деление не нужно
        i = len(entries) - 1
        while i < len(entries):
            while not _is_prime_miller_rabin(entries[i][0]):
                d = _split(entries[i][0], config)
                entries[i][0] //= d
                entries.append([d, 1])
            i += 1

    result = Factorization.normalized(entries)
    require(result.value == n, f"factorization of {n} does not multiply back: {result}")
    return result


# =============================================================================
# DIVISORS
# =============================================================================


def divisors(n: int, config: Optional[NumberTheoryConfig] = None) -> list[int]:
    """
    Все делители n > 0 в порядке возрастания.

    Список строится из factor(n): для каждого p^e уже найденные делители
    умножаются на p, p^2, ..., p^e. Длина равна prod(e_i + 1).

    Examples:
        >>> divisors(12)
        [1, 2, 3, 4, 6, 12]
    """
    fs = factor(n, config)
    count = fs.divisor_count

    d = [1]
    for p, e in fs:
        old_count = len(d)
        for _ in range(e * old_count):
            d.append(p * d[-old_count])

    require(len(d) == count, f"expected {count} divisors of {n}, got {len(d)}")
    d.sort()
    return d
