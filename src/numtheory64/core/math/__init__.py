"""
Core math modules для numtheory64

Базовые примитивы без зависимостей от domain: модульная арифметика,
тест простоты, решето и кэш простых.

factorize, multiplicative, combinatorics и integer_functions зависят от
domain/rho и импортируются напрямую (или через пакет numtheory64).
"""

# Modular arithmetic
from numtheory64.core.math.modular import (
    addmod,
    euclid,
    gcd,
    invmod,
    lcm,
    mulmod,
    negmod,
    powmod,
    submod,
)

# Primality
from numtheory64.core.math.primality import (
    LARGEST_PRIME_63,
    MILLER_RABIN_WITNESSES,
    SMALL_PRIMES,
    TRIAL_DIVISION_BOUND,
    is_prime,
    is_prime_miller_rabin,
    is_sprp,
    next_prime,
)

# Prime sieve & cache
from numtheory64.core.math.sieve import (
    PrimeCache,
    calculate_primes,
    count_primes,
    get_default_cache,
    primes,
)

__all__ = [
    # Modular: Functions
    "addmod",
    "submod",
    "negmod",
    "mulmod",
    "powmod",
    "invmod",
    "euclid",
    "gcd",
    "lcm",
    # Primality: Constants
    "LARGEST_PRIME_63",
    "MILLER_RABIN_WITNESSES",
    "SMALL_PRIMES",
    "TRIAL_DIVISION_BOUND",
    # Primality: Functions
    "is_prime",
    "is_prime_miller_rabin",
    "is_sprp",
    "next_prime",
    # Sieve: Types
    "PrimeCache",
    # Sieve: Functions
    "calculate_primes",
    "count_primes",
    "get_default_cache",
    "primes",
]
