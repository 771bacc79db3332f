"""
Precondition validators

Проверки вызываются только в публичных точках входа. Все функции
возвращают None и бросают PreconditionViolation при нарушении.

Диапазоны соответствуют 64-битной арифметике: Python int не
переполняется, но контракт операций задан для int64.
"""

from typing import Final

from .errors import PreconditionViolation

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

INT64_MAX: Final[int] = (1 << 63) - 1
INT64_MIN: Final[int] = -(1 << 63)
UINT64_MAX: Final[int] = (1 << 64) - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require(condition: bool, message: str) -> None:
    """
    Общая проверка контракта.

    Raises:
        PreconditionViolation: если condition ложно
    """
    if not condition:
        raise PreconditionViolation(message)


def validate_int64(value: int, name: str) -> None:
    """
    Валидация, что значение — целое в диапазоне int64.

    Raises:
        PreconditionViolation: если value не int или вне [INT64_MIN, INT64_MAX]
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise PreconditionViolation(f"{name} must be an integer, got {value!r}")
    if value < INT64_MIN or value > INT64_MAX:
        raise PreconditionViolation(f"{name} out of int64 range, got {value}")


def validate_modulus(m: int, name: str = "m") -> None:
    """
    Валидация модуля: 0 < m <= INT64_MAX.

    Raises:
        PreconditionViolation: если модуль не положителен или не int64
    """
    validate_int64(m, name)
    if m <= 0:
        raise PreconditionViolation(f"{name} must be a positive modulus, got {m}")


def validate_residue(a: int, m: int, name: str = "a") -> None:
    """
    Валидация вычета: 0 <= a < m.

    Модуль должен быть проверен заранее через validate_modulus.
    """
    if not isinstance(a, int) or isinstance(a, bool):
        raise PreconditionViolation(f"{name} must be an integer, got {a!r}")
    if a < 0 or a >= m:
        raise PreconditionViolation(f"{name} must satisfy 0 <= {name} < {m}, got {a}")


def validate_positive(n: int, name: str = "n") -> None:
    """Валидация n > 0 (в диапазоне int64)."""
    validate_int64(n, name)
    if n <= 0:
        raise PreconditionViolation(f"{name} must be positive, got {n}")


def validate_non_negative(n: int, name: str = "n") -> None:
    """Валидация n >= 0 (в диапазоне int64)."""
    validate_int64(n, name)
    if n < 0:
        raise PreconditionViolation(f"{name} must be non-negative, got {n}")
