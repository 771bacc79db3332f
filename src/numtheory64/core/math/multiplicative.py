"""
Multiplicative Functions — табличные мультипликативные функции

Функция F мультипликативна, если F(1) = neutral и
F(n) = combine(F(p1^e1), F(p2^e2), ...) по разложению n.

MultiplicativeFunction параметризуется:
- evaluator f(p, e) — значение на степени простого
- combine — операция объединения (по умолчанию умножение)
- neutral — нейтральный элемент (по умолчанию 1)

Таблица значений строится решетом: для каждого p^e <= limit значение
f(p, e) объединяется во все n*p^e с n, взаимно простым с p. Таблица
только растёт (считаются лишь новые индексы) и ограничена
config.table_limit; выше предела F(n) считается через factor(n).

Стандартные экземпляры: tau, sigma, sigma2, phi, carmichael, rad, mu,
omega, big_omega, gcd_derivative. derivative(n) — арифметическая
производная (не мультипликативна, считается напрямую из разложения).
"""

import logging
import operator
from typing import Callable, Optional

from numtheory64.core.config import DEFAULT_CONFIG, NumberTheoryConfig
from numtheory64.core.contracts.validators import (
    validate_int64,
    validate_non_negative,
    validate_positive,
)
from numtheory64.core.math.factorize import factor
from numtheory64.core.math.modular import lcm
from numtheory64.core.math.sieve import PrimeCache, get_default_cache

logger = logging.getLogger(__name__)

Evaluator = Callable[[int, int], int]
Combiner = Callable[[int, int], int]


# =============================================================================
# ENGINE
# =============================================================================


class MultiplicativeFunction:
    """
    Мультипликативная функция с кэшированной таблицей значений.

    Экземпляр создаётся один раз на функцию и переиспользуется; таблица
    разделяется всеми вызовами. Потокобезопасность не обеспечивается.
    """

    def __init__(
        self,
        evaluator: Evaluator,
        combine: Combiner = operator.mul,
        neutral: int = 1,
        *,
        name: str = "f",
        cache: Optional[PrimeCache] = None,
        config: Optional[NumberTheoryConfig] = None,
    ):
        """
        Args:
            evaluator: f(p, e) для простого p и e >= 1
            combine: ассоциативная и коммутативная операция объединения
            neutral: значение F(1)
            name: имя для логов и repr
            cache: кэш простых (по умолчанию общий)
            config: конфигурация (table_limit)
        """
        self.evaluator = evaluator
        self.combine = combine
        self.neutral = neutral
        self.name = name
        self.config = config or DEFAULT_CONFIG
        self._cache = cache
        self._table: list[int] = []

    def __repr__(self) -> str:
        return f"MultiplicativeFunction({self.name!r}, table_size={len(self._table)})"

    @property
    def cache(self) -> PrimeCache:
        return self._cache if self._cache is not None else get_default_cache()

    @property
    def table_size(self) -> int:
        """Количество индексов в таблице (значения для n < table_size)."""
        return len(self._table)

    def reset(self) -> None:
        """Сброс таблицы."""
        self._table = []

    def make_table(self, limit: int) -> None:
        """
        Таблица значений для всех n <= limit (но не выше table_limit).

        Уже посчитанные значения переиспользуются: решето проходит только
        по новым индексам [table_size, limit].
        """
        validate_non_negative(limit, "limit")
        limit = min(limit, self.config.table_limit)

        table = self._table
        old_size = len(table)
        if limit < old_size:
            return

        table.extend([self.neutral] * (limit + 1 - old_size))
        f = self.evaluator
        combine = self.combine

        for p in self.cache.primes(limit):
            q, e = p, 1
            while q <= limit:
                a = f(p, e)
                start = max(q, (old_size + q - 1) // q * q)
                for k in range(start, limit + 1, q):
                    # p^e || k
                    if (k // q) % p != 0:
                        table[k] = combine(table[k], a)
                q *= p
                e += 1

        logger.debug(
            "%s: table extended %d -> %d entries", self.name, old_size, len(table)
        )

    def evaluate(self, n: int) -> int:
        """
        F(n) для n > 0.

        n внутри table_limit: таблица при необходимости расширяется
        (минимум вдвое) и значение берётся из неё; иначе — свёртка f
        по factor(n).

        Raises:
            PreconditionViolation: n <= 0
        """
        validate_positive(n, "n")
        table = self._table

        if n < len(table):
            return table[n]

        table_limit = self.config.table_limit
        if n <= table_limit:
            self.make_table(min(table_limit, max(n, 2 * len(table))))
            return self._table[n]

        r = self.neutral
        for p, e in factor(n, self.config):
            r = self.combine(r, self.evaluator(p, e))
        return r

    __call__ = evaluate


# =============================================================================
# СТАНДАРТНЫЕ ФУНКЦИИ
# =============================================================================


def _carmichael_prime_power(p: int, e: int) -> int:
    if p == 2 and e > 2:
        return 2 ** (e - 2)
    return p ** (e - 1) * (p - 1)


# число делителей, sigma_0
tau = MultiplicativeFunction(lambda p, e: e + 1, name="tau")

# сумма делителей, sigma_1
sigma = MultiplicativeFunction(
    lambda p, e: (p ** (e + 1) - 1) // (p - 1), name="sigma"
)

# сумма квадратов делителей, sigma_2
sigma2 = MultiplicativeFunction(
    lambda p, e: (p ** (2 * e + 2) - 1) // (p * p - 1), name="sigma2"
)

# функция Эйлера
phi = MultiplicativeFunction(lambda p, e: p ** (e - 1) * (p - 1), name="phi")

# функция Кармайкла (приведённая функция Эйлера)
carmichael = MultiplicativeFunction(_carmichael_prime_power, lcm, name="carmichael")

# радикал
rad = MultiplicativeFunction(lambda p, e: p, name="rad")

# функция Мёбиуса
mu = MultiplicativeFunction(lambda p, e: -1 if e == 1 else 0, name="mu")

# число различных простых делителей
omega = MultiplicativeFunction(lambda p, e: 1, operator.add, 0, name="omega")

# число простых делителей с кратностью
big_omega = MultiplicativeFunction(lambda p, e: e, operator.add, 0, name="big_omega")

# gcd(n, n'); равно 1 тогда и только тогда, когда n бесквадратное
gcd_derivative = MultiplicativeFunction(
    lambda p, e: p**e if e % p == 0 else p ** (e - 1), name="gcd_derivative"
)

STANDARD_FUNCTIONS: tuple[MultiplicativeFunction, ...] = (
    tau,
    sigma,
    sigma2,
    phi,
    carmichael,
    rad,
    mu,
    omega,
    big_omega,
    gcd_derivative,
)


def reset_tables() -> None:
    """Сброс таблиц всех стандартных функций."""
    for fn in STANDARD_FUNCTIONS:
        fn.reset()


# =============================================================================
# АРИФМЕТИЧЕСКАЯ ПРОИЗВОДНАЯ
# =============================================================================


def derivative(n: int) -> int:
    """
    Арифметическая производная n' (p' = 1, (ab)' = a'b + ab').

    derivative(0) == 0, derivative(-n) == -derivative(n).

    Examples:
        >>> derivative(12)
        16
    """
    validate_int64(n, "n")
    if n == 0:
        return 0
    if n < 0:
        return -derivative(-n)

    return sum(n // p * e for p, e in factor(n))
