"""
Domain value types.

Contains the congruence class IntMod (with CRT and modular square roots)
and the Factorization / PrimePower value objects.
"""

from numtheory64.core.domain.congruence import IntMod, jacobi, sqrt_mod
from numtheory64.core.domain.factorization import Factorization, PrimePower

__all__ = [
    # Congruence classes
    "IntMod",
    "jacobi",
    "sqrt_mod",
    # Factorization
    "Factorization",
    "PrimePower",
]
