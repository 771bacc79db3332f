"""
numtheory64 — теория чисел для 64-битных целых.

Модульная арифметика без переполнений, детерминированный тест простоты,
факторизация Pollard-rho, саморасширяющийся кэш простых чисел и
табличные мультипликативные функции.
"""

__version__ = "0.1.0"

# Contracts
from numtheory64.core.contracts import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    ArithmeticImpossible,
    FactorizationExhausted,
    NoSolutionError,
    NumberTheoryError,
    PreconditionViolation,
)

# Config
from numtheory64.core.config import DEFAULT_CONFIG, NumberTheoryConfig

# Modular arithmetic, primality, sieve
from numtheory64.core.math import (
    PrimeCache,
    addmod,
    calculate_primes,
    count_primes,
    euclid,
    gcd,
    get_default_cache,
    invmod,
    is_prime,
    is_prime_miller_rabin,
    is_sprp,
    lcm,
    mulmod,
    negmod,
    next_prime,
    powmod,
    primes,
    submod,
)

# Domain
from numtheory64.core.domain import Factorization, IntMod, PrimePower, jacobi, sqrt_mod

# Factorization
from numtheory64.core.math.factorize import divisors, factor, find_factor

# Multiplicative functions
from numtheory64.core.math.multiplicative import (
    STANDARD_FUNCTIONS,
    MultiplicativeFunction,
    big_omega,
    carmichael,
    derivative,
    gcd_derivative,
    mu,
    omega,
    phi,
    rad,
    reset_tables,
    sigma,
    sigma2,
    tau,
)

# Combinatorics
from numtheory64.core.math.combinatorics import (
    binomial,
    binomial_mod,
    factorial,
    fibonacci,
    fibonacci_mod,
    geometric_mod,
    power_sum,
)

# Integer functions
from numtheory64.core.math.integer_functions import (
    cbrti,
    count_square_free,
    function_power,
    is_cube,
    is_square,
    is_square_free,
    logi,
    power_of,
    primitive_root,
    sqrti,
)

__all__ = [
    # Exceptions
    "NumberTheoryError",
    "PreconditionViolation",
    "NoSolutionError",
    "ArithmeticImpossible",
    "FactorizationExhausted",
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    # Config
    "NumberTheoryConfig",
    "DEFAULT_CONFIG",
    # Modular
    "addmod",
    "submod",
    "negmod",
    "mulmod",
    "powmod",
    "invmod",
    "euclid",
    "gcd",
    "lcm",
    # Primality
    "is_sprp",
    "is_prime_miller_rabin",
    "is_prime",
    "next_prime",
    # Sieve
    "PrimeCache",
    "calculate_primes",
    "get_default_cache",
    "primes",
    "count_primes",
    # Congruence classes
    "IntMod",
    "jacobi",
    "sqrt_mod",
    # Factorization
    "Factorization",
    "PrimePower",
    "find_factor",
    "factor",
    "divisors",
    # Multiplicative functions
    "MultiplicativeFunction",
    "STANDARD_FUNCTIONS",
    "tau",
    "sigma",
    "sigma2",
    "phi",
    "carmichael",
    "rad",
    "mu",
    "omega",
    "big_omega",
    "gcd_derivative",
    "reset_tables",
    "derivative",
    # Combinatorics
    "factorial",
    "binomial",
    "binomial_mod",
    "fibonacci",
    "fibonacci_mod",
    "power_sum",
    "geometric_mod",
    # Integer functions
    "logi",
    "sqrti",
    "cbrti",
    "power_of",
    "is_square",
    "is_cube",
    "is_square_free",
    "count_square_free",
    "primitive_root",
    "function_power",
]
