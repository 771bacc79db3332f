"""
Contracts — исключения и проверки предусловий.

Публичные точки входа проверяют аргументы один раз; внутренние циклы
(_addmod, _mulmod, ...) предусловия не перепроверяют.
"""

from .errors import (
    ArithmeticImpossible,
    FactorizationExhausted,
    NoSolutionError,
    NumberTheoryError,
    PreconditionViolation,
)
from .validators import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    require,
    validate_int64,
    validate_modulus,
    validate_non_negative,
    validate_positive,
    validate_residue,
)

__all__ = [
    # Exceptions
    "NumberTheoryError",
    "PreconditionViolation",
    "NoSolutionError",
    "ArithmeticImpossible",
    "FactorizationExhausted",
    # Range constants
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    # Validators
    "require",
    "validate_int64",
    "validate_modulus",
    "validate_non_negative",
    "validate_positive",
    "validate_residue",
]
