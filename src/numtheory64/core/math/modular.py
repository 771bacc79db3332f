"""
Modular Arithmetic — операции по модулю без переполнений

Все операции предполагают, что аргументы уже приведены в [0, m).
Сложение и вычитание используют ветвление по сравнению вместо
«сложить и взять остаток», умножение — двоичное «удвоить и прибавить»
через addmod, поэтому промежуточные значения никогда не выходят за m
(и, следовательно, за диапазон int64).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в [0, m)
2. Промежуточные значения < 2m <= 2^64
3. Обращение необратимого элемента → ArithmeticImpossible
4. Публичные функции проверяют контракт, приватные (_addmod, ...) — нет
"""

import math

from numtheory64.core.contracts.errors import ArithmeticImpossible
from numtheory64.core.contracts.validators import (
    require,
    validate_int64,
    validate_modulus,
    validate_residue,
)

# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ (без проверок, для горячих циклов)
# =============================================================================


def _addmod(a: int, b: int, m: int) -> int:
    if b < m - a:
        return a + b
    return a + b - m


def _submod(a: int, b: int, m: int) -> int:
    if a >= b:
        return a - b
    return a - b + m


def _mulmod(a: int, b: int, m: int) -> int:
    # a: меньший множитель: число итераций = число битов a
    if a > b:
        a, b = b, a
    r = 0
    while a:
        if a & 1:
            r = r + b if b < m - r else r + b - m
        a >>= 1
        b = b + b if b < m - b else b + b - m
    return r


def _invmod(a: int, m: int) -> int:
    a0, a1 = m, a
    b0, b1 = 0, 1
    while a1 > 1:
        q = a0 // a1
        a0, a1 = a1, a0 - q * a1
        b0, b1 = b1, b0 - q * b1
    if a1 == 0 and m > 1:
        raise ArithmeticImpossible(f"{a} is not invertible modulo {m} (gcd = {a0})")
    if b1 < 0:
        b1 += m
    return b1 % m


def _powmod(a: int, b: int, m: int) -> int:
    if b < 0:
        a = _invmod(a, m)
        b = -b
    r = 1 % m
    while b:
        if b & 1:
            r = _mulmod(r, a, m)
        b >>= 1
        a = _mulmod(a, a, m)
    return r


# =============================================================================
# ПУБЛИЧНЫЕ ОПЕРАЦИИ
# =============================================================================


def addmod(a: int, b: int, m: int) -> int:
    """
    (a + b) mod m без переполнения.

    Возвращает a+b, если b < m-a, иначе a+b-m.

    Args:
        a, b: Вычеты в [0, m)
        m: Модуль > 0

    Raises:
        PreconditionViolation: если m <= 0 или a, b вне [0, m)

    Examples:
        >>> addmod(5, 4, 7)
        2
    """
    validate_modulus(m)
    validate_residue(a, m, "a")
    validate_residue(b, m, "b")
    return _addmod(a, b, m)


def submod(a: int, b: int, m: int) -> int:
    """
    (a - b) mod m без переполнения.

    Examples:
        >>> submod(2, 5, 7)
        4
    """
    validate_modulus(m)
    validate_residue(a, m, "a")
    validate_residue(b, m, "b")
    return _submod(a, b, m)


def negmod(a: int, m: int) -> int:
    """(-a) mod m; negmod(0, m) == 0."""
    validate_modulus(m)
    validate_residue(a, m, "a")
    return 0 if a == 0 else m - a


def mulmod(a: int, b: int, m: int) -> int:
    """
    (a * b) mod m двоичным методом «удвоить и прибавить».

    O(log min(a, b)) сложений по модулю; промежуточное произведение
    никогда не строится, поэтому результат корректен для любого m < 2^63.

    Examples:
        >>> mulmod(3, 5, 7)
        1
    """
    validate_modulus(m)
    validate_residue(a, m, "a")
    validate_residue(b, m, "b")
    return _mulmod(a, b, m)


def powmod(a: int, b: int, m: int) -> int:
    """
    a^b mod m бинарным возведением в степень.

    При b < 0 сначала вычисляется invmod(a, m).

    Args:
        a: Основание в [0, m)
        b: Показатель (любого знака, int64)
        m: Модуль > 0

    Returns:
        a^b mod m в [0, m)

    Raises:
        PreconditionViolation: невалидные a или m
        ArithmeticImpossible: b < 0 и gcd(a, m) != 1

    Examples:
        >>> powmod(2, 10, 1000)
        24
        >>> powmod(3, -1, 7)
        5
    """
    validate_modulus(m)
    validate_residue(a, m, "a")
    validate_int64(b, "b")
    return _powmod(a, b, m)


def invmod(a: int, m: int) -> int:
    """
    Обратный элемент a^-1 mod m (расширенный алгоритм Евклида).

    Raises:
        PreconditionViolation: невалидные a или m
        ArithmeticImpossible: gcd(a, m) != 1

    Examples:
        >>> invmod(3, 7)
        5
    """
    validate_modulus(m)
    validate_residue(a, m, "a")
    return _invmod(a, m)


def euclid(a: int, b: int) -> tuple[int, int, int]:
    """
    Расширенный алгоритм Евклида.

    Returns:
        (g, x, y) такие, что x*a + y*b == g == gcd(a, b) >= 0

    Raises:
        PreconditionViolation: если a == 0 или b == 0

    Examples:
        >>> euclid(240, 46)
        (2, -9, 47)
    """
    validate_int64(a, "a")
    validate_int64(b, "b")
    require(a != 0 and b != 0, f"euclid requires non-zero arguments, got ({a}, {b})")

    a0, x0, y0 = a, 1, 0
    a1, x1, y1 = b, 0, 1
    while a1 != 0:
        # усечение к нулю, как в целочисленном делении C
        q = abs(a0) // abs(a1)
        if (a0 < 0) != (a1 < 0):
            q = -q
        a0, a1 = a1, a0 - q * a1
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1

    if a0 < 0:
        return (-a0, -x0, -y0)
    return (a0, x0, y0)


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель; знаки игнорируются, результат >= 0.

    Соглашение: gcd(0, x) == abs(x) == gcd(x, 0).
    """
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное; знаки игнорируются, результат >= 0.

    Соглашение: lcm(0, x) == 0 == lcm(x, 0).
    """
    if a == 0 or b == 0:
        return 0
    return abs(a // math.gcd(a, b) * b)
