"""Pollard-rho State Machine — одна попытка с фиксированной константой c.

Последовательность x_{i+1} = x_i^2 + c (mod n), старт x_0.
Обнаружение цикла по Бренту:
- прогон длины L сравнивает каждый x с контрольной точкой y через gcd(x - y, n)
- по окончании прогона без успеха: L := 2L, y := x
- gcd == n означает, что цикл замкнулся по модулю n целиком: для этой
  константы делителя нет

Переходы:
    RUNNING --gcd в (1, n)--> FOUND
    RUNNING --gcd == n------> EXHAUSTED_CONSTANT
    RUNNING --конец прогона-> RUNNING (L удвоен, y обновлён)
"""

from dataclasses import dataclass
from enum import Enum

from numtheory64.core.contracts.validators import require, validate_positive
from numtheory64.core.math.modular import _addmod, _mulmod, gcd


class RhoState(str, Enum):
    """Состояние попытки Pollard-rho."""

    RUNNING = "RUNNING"
    FOUND = "FOUND"
    EXHAUSTED_CONSTANT = "EXHAUSTED_CONSTANT"


@dataclass(frozen=True)
class RhoAttemptResult:
    """Результат попытки Pollard-rho."""

    state: RhoState
    divisor: int  # нетривиальный делитель или n при EXHAUSTED_CONSTANT
    constant: int
    iterations: int
    run_length: int


class PollardRhoMachine:
    """Машина состояний одной попытки Pollard-rho.

    Вызывать только для n, заведомо составных: для простого n каждая
    попытка заканчивается в EXHAUSTED_CONSTANT.
    """

    def __init__(self, n: int, x0: int, c: int):
        """
        Args:
            n: модуль (число, которое раскладываем), n > 0
            x0: стартовая точка в [0, n)
            c: константа возмущения, 0 < c < n
        """
        validate_positive(n, "n")
        require(0 <= x0 < n, f"x0 must satisfy 0 <= x0 < {n}, got {x0}")
        require(0 < c < n, f"c must satisfy 0 < c < {n}, got {c}")

        self.n = n
        self.c = c
        self.state = RhoState.RUNNING
        self.divisor = 1

        self.x = x0
        self.y = x0  # контрольная точка текущего прогона
        self.run_length = 1
        self.iterations = 0
        self._position = 0  # шаг внутри текущего прогона

    def step(self) -> RhoState:
        """Один шаг последовательности; возвращает новое состояние."""
        if self.state != RhoState.RUNNING:
            return self.state

        n = self.n
        self.x = _addmod(_mulmod(self.x, self.x, n), self.c, n)
        self.iterations += 1

        d = gcd(self.x - self.y, n)
        if d != 1:
            self.divisor = d
            self.state = RhoState.FOUND if d != n else RhoState.EXHAUSTED_CONSTANT
            return self.state

        self._position += 1
        if self._position == self.run_length:
            # новый прогон
            self.run_length *= 2
            self.y = self.x
            self._position = 0

        return self.state

    def run(self) -> RhoAttemptResult:
        """Итерировать до FOUND или EXHAUSTED_CONSTANT."""
        while self.step() == RhoState.RUNNING:
            pass

        return RhoAttemptResult(
            state=self.state,
            divisor=self.divisor,
            constant=self.c,
            iterations=self.iterations,
            run_length=self.run_length,
        )
