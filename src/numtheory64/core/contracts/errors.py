"""
Таксономия ошибок.

1. PreconditionViolation — нарушение контракта вызывающей стороной
   (невалидный модуль, несовпадающие модули, выход за диапазон int64).
   Фатальна, не восстанавливается.
2. NoSolutionError — легитимное отсутствие решения (несовместимые
   сравнения в CRT, нет первообразного корня).
3. ArithmeticImpossible — обратный элемент для gcd(a, m) != 1.

PreconditionViolation намеренно не наследует ValueError: pydantic
превращает ValueError из валидаторов в ValidationError, а нарушение
контракта должно всплывать как есть.
"""


class NumberTheoryError(Exception):
    """Базовый класс всех ошибок пакета."""


class PreconditionViolation(NumberTheoryError):
    """
    Нарушение предусловия публичной операции.

    Сигнализирует об ошибке вызывающего кода; перехватывать и продолжать
    вычисления не предполагается.
    """


class NoSolutionError(NumberTheoryError):
    """
    Задача корректна, но решения нет.

    Например: (x1 mod n1) & (x2 mod n2) при x1 - x2, не делящемся на
    gcd(n1, n2), или primitive_root(8).
    """


class ArithmeticImpossible(NumberTheoryError, ArithmeticError):
    """Запрошен обратный элемент для необратимого вычета (gcd != 1)."""


class FactorizationExhausted(NumberTheoryError):
    """
    Pollard-rho не нашёл делитель ни для одной из разрешённых констант c.

    Возможно только если составной кофактор на самом деле простой
    (ошибка теста простоты) или предел rho_max_constants слишком мал.
    """
