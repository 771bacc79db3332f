"""
IntMod — класс вычетов [x] = x + nZ

Immutable Pydantic модель пары (x, n) с инвариантом 0 <= x < n, n > 0.
Арифметика (+, -, *, /, **) между двумя классами требует равных модулей;
целое число предварительно приводится к тому же модулю.

Дополнительно:
- & / combine() — китайская теорема об остатках (модуль lcm(n1, n2))
- jacobi(a, n) — символ Якоби
- sqrt_mod(a) — квадратный корень по простому модулю (алгоритм Чиполлы)
"""

import random
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ValidationInfo, field_validator, model_validator

from numtheory64.core.config import DEFAULT_CONFIG, NumberTheoryConfig
from numtheory64.core.contracts.errors import NoSolutionError
from numtheory64.core.contracts.validators import (
    require,
    validate_int64,
    validate_modulus,
)
from numtheory64.core.math.modular import (
    _addmod,
    _invmod,
    _mulmod,
    _powmod,
    _submod,
    euclid,
    gcd,
)
from numtheory64.core.math.primality import is_prime


# =============================================================================
# СИМВОЛ ЯКОБИ
# =============================================================================


def jacobi(a: int, n: int) -> int:
    """
    Символ Якоби (a/n) для нечётного n > 0.

    Returns:
        -1, 0 или 1

    Raises:
        PreconditionViolation: n не положительное нечётное

    Examples:
        >>> jacobi(2, 7)
        1
        >>> jacobi(3, 7)
        -1
    """
    validate_int64(a, "a")
    require(n > 0 and n % 2 == 1, f"jacobi requires odd n > 0, got {n}")

    a %= n
    if n == 1:
        return 1

    r = 1
    while True:
        if a == 0:
            return 0
        if a == 1:
            return r

        if a & 1 == 0:
            if n % 8 == 3 or n % 8 == 5:
                r = -r
            a //= 2
        else:
            # квадратичный закон взаимности
            if a % 4 == 3 and n % 4 == 3:
                r = -r
            a, n = n % a, a


# =============================================================================
# INTMOD MODEL
# =============================================================================


class IntMod(BaseModel):
    """
    Класс вычетов по модулю n.

    Immutable модель (frozen=True). Несовпадение модулей в бинарной
    операции — нарушение контракта (PreconditionViolation).
    Сравнение == с другим IntMod сравнивает и вычет, и модуль.

    Строгий режим: x и n только int (не str, не float, не bool).
    """

    x: int
    n: int

    model_config = {"frozen": True, "strict": True}

    @field_validator("x", "n", mode="before")
    @classmethod
    def validate_integer(cls, v: int, info: ValidationInfo) -> int:
        """Нечисловые и нецелые значения — нарушение контракта."""
        validate_int64(v, info.field_name)
        return v

    def __init__(self, x: int, n: int) -> None:
        super().__init__(x=x, n=n)

    @model_validator(mode="after")
    def validate_invariant(self) -> "IntMod":
        """Проверка 0 <= x < n, n > 0."""
        validate_modulus(self.n, "n")
        require(
            0 <= self.x < self.n,
            f"residue must satisfy 0 <= x < {self.n}, got {self.x}",
        )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def make(cls, x: int, n: int) -> "IntMod":
        """
        Класс произвольного целого x по модулю n (с приведением).

        Examples:
            >>> IntMod.make(-1, 7)
            IntMod(x=6, n=7)
        """
        validate_modulus(n, "n")
        validate_int64(x, "x")
        return cls._of(x % n, n)

    @classmethod
    def _of(cls, x: int, n: int) -> "IntMod":
        # x уже в [0, n)
        return cls.model_construct(x=x, n=n)

    def _coerce(self, other: Union["IntMod", int]) -> Optional["IntMod"]:
        if isinstance(other, IntMod):
            require(
                other.n == self.n,
                f"moduli mismatch: {self.n} != {other.n}",
            )
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return IntMod.make(other, self.n)
        return None

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "IntMod":
        if self.x == 0:
            return self
        return IntMod._of(self.n - self.x, self.n)

    def inverse(self) -> "IntMod":
        """
        Мультипликативный обратный.

        Raises:
            ArithmeticImpossible: gcd(x, n) != 1
        """
        return IntMod._of(_invmod(self.x, self.n), self.n)

    def __add__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return IntMod._of(_addmod(self.x, b.x, self.n), self.n)

    __radd__ = __add__

    def __sub__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return IntMod._of(_submod(self.x, b.x, self.n), self.n)

    def __rsub__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return IntMod._of(_submod(b.x, self.x, self.n), self.n)

    def __mul__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return IntMod._of(_mulmod(self.x, b.x, self.n), self.n)

    __rmul__ = __mul__

    def __truediv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return IntMod._of(_mulmod(self.x, _invmod(b.x, self.n), self.n), self.n)

    def __rtruediv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return b / self

    def __pow__(self, e: int) -> "IntMod":
        validate_int64(e, "e")
        return IntMod._of(_powmod(self.x, e, self.n), self.n)

    # -------------------------------------------------------------------------
    # Китайская теорема об остатках
    # -------------------------------------------------------------------------

    def compatible(self, other: "IntMod") -> bool:
        """Совместимы ли сравнения: gcd(n1, n2) делит x1 - x2."""
        return (self.x - other.x) % gcd(self.n, other.n) == 0

    def combine(self, other: "IntMod") -> "IntMod":
        """
        Объединение x1 mod n1 и x2 mod n2 в класс по модулю lcm(n1, n2).

        Raises:
            NoSolutionError: сравнения несовместимы
            PreconditionViolation: lcm(n1, n2) вне диапазона int64

        Examples:
            >>> IntMod(2, 3) & IntMod(3, 5)
            IntMod(x=8, n=15)
        """
        d, y, _ = euclid(self.n, other.n)
        if (self.x - other.x) % d != 0:
            raise NoSolutionError(
                f"no solution: ({self.x} % {self.n}) & ({other.x} % {other.n})"
            )
        n = self.n // d * other.n
        validate_modulus(n, "lcm")
        # промежуточное значение может выйти за int64, приводим сразу
        x = (self.x - (self.x - other.x) // d * y * self.n) % n
        return IntMod._of(x, n)

    def __and__(self, other):
        if not isinstance(other, IntMod):
            return NotImplemented
        return self.combine(other)

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if isinstance(other, IntMod):
            return self.x == other.x and self.n == other.n
        if isinstance(other, int) and not isinstance(other, bool):
            return self.x == other % self.n
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.n))

    def __int__(self) -> int:
        return self.x

    def __str__(self) -> str:
        return f"[{self.x}]"

    def jacobi(self) -> int:
        """Символ Якоби (x/n); n должен быть нечётным."""
        return jacobi(self.x, self.n)

    def sqrt(self, config: Optional[NumberTheoryConfig] = None) -> "IntMod":
        """Алиас для sqrt_mod(self)."""
        return sqrt_mod(self, config)


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ (ЧИПОЛЛА)
# =============================================================================


@dataclass(frozen=True)
class _QuadraticElement:
    """Элемент a + b*sqrt(omega) расширения F_p[sqrt(omega)]."""

    a: IntMod
    b: IntMod
    omega: IntMod

    def __mul__(self, other: "_QuadraticElement") -> "_QuadraticElement":
        return _QuadraticElement(
            self.a * other.a + self.b * other.b * self.omega,
            self.a * other.b + self.b * other.a,
            self.omega,
        )

    def __pow__(self, e: int) -> "_QuadraticElement":
        result = _QuadraticElement(IntMod._of(1, self.a.n), IntMod._of(0, self.a.n), self.omega)
        base = self
        while e:
            if e & 1:
                result = result * base
            e >>= 1
            base = base * base
        return result


def sqrt_mod(a: IntMod, config: Optional[NumberTheoryConfig] = None) -> IntMod:
    """
    Квадратный корень по простому модулю (алгоритм Чиполлы).

    - n == 2: корень — сам элемент
    - n ≡ 3 (mod 4): a^((n+1)/4)
    - иначе: случайный поиск z с (z^2 - a / n) == -1 и возведение
      z + sqrt(z^2 - a) в степень (n+1)/2 в квадратичном расширении

    Поиск z детерминирован (seed = config.sqrt_seed и модуль), а из двух
    корней r и n - r возвращается меньший.

    Raises:
        PreconditionViolation: модуль не простой или a — не квадратичный вычет

    Examples:
        >>> sqrt_mod(IntMod(2, 7))
        IntMod(x=3, n=7)
    """
    config = config or DEFAULT_CONFIG
    n = a.n
    require(is_prime(n), f"sqrt_mod requires a prime modulus, got {n}")

    if n == 2:
        return a

    require(
        jacobi(a.x, n) == 1,
        f"{a.x} is not a quadratic residue modulo {n}",
    )

    if n % 4 == 3:
        root = a ** ((n + 1) // 4)
    else:
        rng = random.Random(config.sqrt_seed ^ n)
        while True:
            z = IntMod._of(rng.randrange(n), n)
            omega = z * z - a
            if jacobi(omega.x, n) == -1:
                break
        b = _QuadraticElement(z, IntMod._of(1, n), omega) ** ((n + 1) // 2)
        require(b.b.x == 0, "Cipolla exponentiation left an imaginary part")
        root = b.a

    other = -root
    return root if root.x <= other.x else other
