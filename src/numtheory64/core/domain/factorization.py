"""
Factorization — разложение на простые множители

Упорядоченная последовательность PrimePower(prime, exponent):
- простые строго возрастают, без повторов
- показатели >= 1
- произведение prime^exponent восстанавливает исходное число
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Sequence

from numtheory64.core.contracts.validators import require
from numtheory64.core.math.primality import is_prime


class PrimePower(NamedTuple):
    """Степень простого p^e."""

    prime: int
    exponent: int


@dataclass(frozen=True, eq=False)
class Factorization:
    """
    Нормализованное разложение.

    Сравнивается с любой последовательностью пар (prime, exponent):
        >>> Factorization.normalized([(3, 1), (2, 2), (2, 2)]) == [(2, 4), (3, 1)]
        True
    """

    factors: tuple[PrimePower, ...] = ()

    def __post_init__(self) -> None:
        previous = 1
        for p, e in self.factors:
            require(p > previous, f"factors must be strictly ascending, got {self.factors}")
            require(e >= 1, f"exponents must be >= 1, got {self.factors}")
            previous = p

    @classmethod
    def normalized(cls, pairs: Iterable[Sequence[int]]) -> "Factorization":
        """
        Сортировка по простому и слияние повторов (показатели суммируются).
        """
        merged: dict[int, int] = {}
        for p, e in pairs:
            merged[p] = merged.get(p, 0) + e
        return cls(tuple(PrimePower(p, merged[p]) for p in sorted(merged)))

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[PrimePower]:
        return iter(self.factors)

    def __len__(self) -> int:
        return len(self.factors)

    def __getitem__(self, index: int) -> PrimePower:
        return self.factors[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Factorization):
            return self.factors == other.factors
        try:
            return self.factors == tuple(tuple(f) for f in other)
        except TypeError:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.factors)

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    @property
    def value(self) -> int:
        """Произведение p^e (обратное преобразование, в основном для проверок)."""
        r = 1
        for p, e in self.factors:
            r *= p**e
        return r

    @property
    def divisor_count(self) -> int:
        """tau(n) = prod(e_i + 1)."""
        r = 1
        for _, e in self.factors:
            r *= e + 1
        return r

    def all_prime(self) -> bool:
        """Все ли множители простые."""
        return all(is_prime(p) for p, _ in self.factors)

    def __str__(self) -> str:
        if not self.factors:
            return "1"
        return "".join(
            f"({p})" if e == 1 else f"({p})^{e}" for p, e in self.factors
        )
