"""
Core number-theory primitives, value types and contracts.

Nothing in this package performs I/O; all state lives in explicit cache
objects (PrimeCache, MultiplicativeFunction tables).
"""
