# numvec/operators.py
# ---------------------------------------------------------------
# Сравнение чисел с допуском и округление:
# - допуск для типа (машинный эпсилон × 100),
# - симметричное сравнение is_equal,
# - округление «вверх» до N знаков,
# - перевод радианы <-> градусы.
# На is_equal построено равенство векторов и кватернионов.
# ---------------------------------------------------------------

import math
import numbers

import numpy as np

PRECISION_FACTOR = 100


def scalar_type(dtype) -> np.dtype:
    """Привести dtype к np.dtype; допускаются только целые и float."""
    dt = np.dtype(dtype)
    if dt.kind not in "iuf":
        raise TypeError(f"Arithmetic scalar type expected, got {dt}")
    return dt


def is_exact(dtype) -> bool:
    return np.dtype(dtype).kind in "iub"


def as_scalar(dtype: np.dtype, value):
    """
    Привести `value` к скаляру типа `dtype`.

    Возвращает None, если значение не подходит: не число или дробное
    значение для целого типа (в таких случаях оператор отдаёт NotImplemented).
    """
    if not isinstance(value, numbers.Real):
        return None
    if is_exact(dtype) and not isinstance(value, numbers.Integral):
        return None
    return dtype.type(value)


def precision_boundary(dtype=float):
    """Допуск сравнения для типа: eps × 100. Для целых типов не используется (0)."""
    dt = scalar_type(dtype)
    if is_exact(dt):
        return dt.type(0)
    return dt.type(np.finfo(dt).eps * PRECISION_FACTOR)


def is_equal(lhs, rhs, epsilon=None) -> bool:
    """
    Равенство двух скаляров.

    Тип сравнения – np.result_type(lhs, rhs). Для целых типов точное
    сравнение, для float – симметричная полоса допуска:
        lhs <= rhs + epsilon and rhs <= lhs + epsilon
    """
    dt = np.result_type(lhs, rhs)
    if is_exact(dt):
        return bool(lhs == rhs)
    if epsilon is None:
        epsilon = precision_boundary(dt)
    return bool(lhs <= rhs + epsilon and rhs <= lhs + epsilon)


def round(num, number_of_decimals: int):
    """
    Округление до `number_of_decimals` знаков через ceil.

    Внимание: это округление в сторону +inf, а не к ближайшему:
    round(2.491, 2) == 2.5.
    """
    if number_of_decimals < 0:
        raise ValueError(f"number_of_decimals must be non-negative, got {number_of_decimals}")
    powered = 10.0 ** number_of_decimals
    return np.result_type(num).type(np.ceil(num * powered) / powered)


def to_degrees(radians: float) -> float:
    return math.degrees(radians)


def to_radians(degrees: float) -> float:
    return math.radians(degrees)
