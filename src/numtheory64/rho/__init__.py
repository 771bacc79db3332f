"""Pollard-rho — машина состояний одной попытки поиска делителя.

- RUNNING: итерации x -> x^2 + c внутри текущего прогона
- FOUND: найден нетривиальный делитель
- EXHAUSTED_CONSTANT: цикл замкнулся (gcd == n), нужна другая константа c
"""

from .state_machine import (
    PollardRhoMachine,
    RhoAttemptResult,
    RhoState,
)

__all__ = [
    "PollardRhoMachine",
    "RhoAttemptResult",
    "RhoState",
]
