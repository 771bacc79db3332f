"""
Prime Sieve & Cache — решето с колесом 6k±1 и саморасширяющийся кэш

Кроме 2 и 3 все простые имеют вид 6k±1, поэтому решето хранит два
битовых массива:
- b5[k] представляет 6k + 5
- b7[k] представляет 6k + 7

Составные вычёркиваются только простыми <= sqrt(n). Память ~ n/3 бит
(numpy bool-массивы), время O(n log log n).

Кэш (PrimeCache):
- стартует пустым с limit = 1
- запрос выше limit перестраивает кэш до max(b, limit * growth_factor)
- никогда не уменьшается; reset() возвращает в начальное состояние
- ответы — срезы текущего снимка кэша

ИНВАРИАНТЫ:
1. Кэш отсортирован и без повторов
2. Состояние кэша влияет только на скорость, не на результат
"""

import logging
import math
from bisect import bisect_left, bisect_right
from typing import Optional

import numpy as np

from numtheory64.core.config import DEFAULT_CONFIG, NumberTheoryConfig
from numtheory64.core.contracts.validators import (
    validate_int64,
    validate_non_negative,
)

logger = logging.getLogger(__name__)


# =============================================================================
# РЕШЕТО ЭРАТОСФЕНА С КОЛЕСОМ 6k±1
# =============================================================================


def calculate_primes(n: int) -> list[int]:
    """
    Все простые <= n.

    Отрицательные n трактуются как 0 (пустой результат).

    Args:
        n: Верхняя граница (включительно)

    Returns:
        Отсортированный список простых <= n

    Examples:
        >>> calculate_primes(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    validate_int64(n, "n")
    if n < 0:
        n = 0

    size = n // 6 + 1
    b5 = np.zeros(size, dtype=bool)
    b7 = np.zeros(size, dtype=bool)

    # наибольшее представленное число: 6*(size-1) + 7
    limit = math.isqrt(6 * (size - 1) + 7)

    for k in range(n // 6):
        if not b5[k]:
            p = 6 * k + 5
            if p > limit:
                break
            # p*(p+2) ≡ 5 (mod 6), p*p ≡ 1 (mod 6)
            b5[(p * (p + 2) - 5) // 6 :: p] = True
            b7[(p * p - 7) // 6 :: p] = True

        if not b7[k]:
            p = 6 * k + 7
            if p > limit:
                break
            # p*(p+4) ≡ 5 (mod 6), p*p ≡ 1 (mod 6)
            b5[(p * (p + 4) - 5) // 6 :: p] = True
            b7[(p * p - 7) // 6 :: p] = True

    candidates = np.concatenate(
        (np.flatnonzero(~b5) * 6 + 5, np.flatnonzero(~b7) * 6 + 7)
    )
    candidates.sort()

    primes = [2, 3] + candidates.tolist()

    # массивы могли покрыть чуть больше n
    while primes and primes[-1] > n:
        primes.pop()

    return primes


# =============================================================================
# PRIME CACHE
# =============================================================================


class PrimeCache:
    """
    Мемоизированный кэш простых чисел с ростом по требованию.

    Один экземпляр разделяется потребителями (factorize, multiplicative,
    integer_functions) через явный параметр cache=. Потокобезопасность не
    обеспечивается: для параллельного чтения прогрейте кэш заранее.
    """

    def __init__(self, config: Optional[NumberTheoryConfig] = None):
        """
        Args:
            config: Конфигурация (используется cache_growth_factor)
        """
        self.config = config or DEFAULT_CONFIG
        self._primes: tuple[int, ...] = ()
        self._limit = 1

    @property
    def limit(self) -> int:
        """Текущая граница: кэш содержит все простые <= limit."""
        return self._limit

    def __len__(self) -> int:
        return len(self._primes)

    def reset(self) -> None:
        """Сброс в начальное состояние (limit = 1, пустой кэш)."""
        logger.debug("prime cache reset (limit was %d)", self._limit)
        self._primes = ()
        self._limit = 1

    def _ensure(self, b: int) -> None:
        if b <= self._limit:
            return

        new_limit = max(b, int(self._limit * self.config.cache_growth_factor))
        self._primes = tuple(calculate_primes(new_limit))
        logger.debug(
            "prime cache regenerated: limit %d -> %d (%d primes)",
            self._limit,
            new_limit,
            len(self._primes),
        )
        self._limit = new_limit

    def primes(self, a: int, b: Optional[int] = None) -> tuple[int, ...]:
        """
        Простые в [a, b]; с одним аргументом — простые в [0, a].

        Returns:
            Отсортированный кортеж (срез снимка кэша)

        Examples:
            >>> PrimeCache().primes(3, 19)
            (3, 5, 7, 11, 13, 17, 19)
        """
        if b is None:
            a, b = 0, a
        validate_int64(a, "a")
        validate_int64(b, "b")

        self._ensure(b)
        snapshot = self._primes
        lo = bisect_left(snapshot, a)
        hi = bisect_right(snapshot, b)
        return snapshot[lo:hi]

    def primes_upto(self, n: int) -> tuple[int, ...]:
        """Алиас для primes(0, n)."""
        return self.primes(0, n)

    def count_primes(self, n: int) -> int:
        """
        pi(n) — количество простых <= n без полного перечисления.

        Рекурсия Лежандра phi(v, p) = phi(v, p') - (phi(v // p, p') - pi(p - 1))
        вычисляется таблично: аргументы рекурсии — только значения n // k,
        их не больше 2*sqrt(n). Для каждого простого p <= sqrt(n) из кэша
        все значения v >= p^2 обновляются одной векторной операцией numpy.
        Время O(n^(3/4)), память O(sqrt(n)); кэш растёт только до sqrt(n).

        Examples:
            >>> PrimeCache().count_primes(100)
            25
        """
        validate_non_negative(n, "n")
        if n < 2:
            return 0

        r = math.isqrt(n)
        ps = self.primes(0, r)

        # small[v] = S(v) для v <= r; large[k] = S(n // k) для k <= r,
        # где S(v): количество v' в [2, v], простых или без делителей <= p
        small = np.arange(-1, r, dtype=np.int64)
        small[0] = 0
        k = np.arange(0, r + 1, dtype=np.int64)
        large = np.empty(r + 1, dtype=np.int64)
        large[1:] = n // k[1:] - 1
        large[0] = 0

        for p in ps:
            p2 = p * p
            if p2 > n:
                break
            below = small[p - 1]

            kmax = min(r, n // p2)
            ks = k[1 : kmax + 1]
            kp = ks * p
            inner = kp <= r
            sub = np.empty(kmax, dtype=np.int64)
            sub[inner] = large[kp[inner]]
            sub[~inner] = small[n // kp[~inner]]
            large[1 : kmax + 1] -= sub - below

            if p2 <= r:
                vs = k[p2 : r + 1]
                small[p2 : r + 1] -= small[vs // p] - below

        return int(large[1])


# =============================================================================
# ОБЩИЙ ЭКЗЕМПЛЯР
# =============================================================================

_DEFAULT_CACHE = PrimeCache()


def get_default_cache() -> PrimeCache:
    """Общий для процесса PrimeCache (используется, если cache=None)."""
    return _DEFAULT_CACHE


def primes(a: int, b: Optional[int] = None, cache: Optional[PrimeCache] = None) -> tuple[int, ...]:
    """primes(a, b) / primes(n) на общем или переданном кэше."""
    return (cache if cache is not None else _DEFAULT_CACHE).primes(a, b)


def count_primes(n: int, cache: Optional[PrimeCache] = None) -> int:
    """count_primes(n) на общем или переданном кэше."""
    return (cache if cache is not None else _DEFAULT_CACHE).count_primes(n)
