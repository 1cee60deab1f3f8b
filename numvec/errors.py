# numvec/errors.py
"""
Исключения пакета numvec.

Численные вырождения (деление на ноль при нулевой норме) исключений
не бросают: результат – inf/nan, как в самой арифметике float.
"""


class NumvecError(Exception):
    """Базовое исключение пакета."""


class BoundsError(NumvecError, IndexError):
    """Индекс элемента вне диапазона [0, N)."""


class DimensionMismatchError(NumvecError, TypeError):
    """Операнды имеют разную размерность (или операция не определена для N)."""


class ScalarTypeMismatchError(NumvecError, TypeError):
    """Операнды параметризованы разными скалярными типами."""
