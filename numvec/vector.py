# numvec/vector.py
"""
N‑мерный вектор фиксированного размера на базе NumPy.

Скалярный тип и размерность – часть типа:

    Vec3 = NumVector[float, 3]
    a = Vec3(8, 10.5, 10.1)

NumVector[dtype, N] возвращает закешированный подкласс, поэтому векторы
разной размерности (или разного скалярного типа) – разные типы, и
операции над ними отклоняются исключением ещё до вычислений.
"""

import functools
import operator
from typing import Iterable, Iterator, Tuple

import numpy as np

from numvec.errors import BoundsError, DimensionMismatchError, ScalarTypeMismatchError
from numvec.operators import as_scalar, is_equal, is_exact, scalar_type
from numvec.utils.logger import logger


@functools.lru_cache(maxsize=None)
def _vector_class(dtype: np.dtype, size: int) -> type:
    name = f"NumVector[{dtype.name}, {size}]"
    cls = type(name, (NumVector,), {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "dtype": dtype,
        "size": size,
    })
    logger.debug(f"[NumVector] Created type {name}")
    return cls


def vector_type(dtype, size: int) -> type:
    """Тип вектора со скалярным типом `dtype` и размерностью `size`."""
    n = operator.index(size)
    if n < 1:
        raise ValueError(f"Vector size must be positive, got {n}")
    return _vector_class(scalar_type(dtype), n)


def _require_same(lhs, rhs, op: str) -> None:
    """Оба операнда – векторы одного конкретного типа."""
    if not isinstance(lhs, NumVector) or not isinstance(rhs, NumVector):
        raise TypeError(
            f"{op} expects vectors, got {type(lhs).__name__} and {type(rhs).__name__}"
        )
    if lhs.size != rhs.size:
        raise DimensionMismatchError(
            f"{op}: dimension mismatch {type(lhs).__name__} vs {type(rhs).__name__}"
        )
    if lhs.dtype != rhs.dtype:
        raise ScalarTypeMismatchError(
            f"{op}: scalar type mismatch {type(lhs).__name__} vs {type(rhs).__name__}"
        )


class NumVector:
    """Вектор из ровно `size` элементов типа `dtype`."""

    __slots__ = ("_v",)

    # numpy‑скаляры слева (np.float64(2) * v) отдают операцию нашему __rmul__
    __array_ufunc__ = None

    dtype: np.dtype = None
    size: int = 0

    def __class_getitem__(cls, params):
        dtype, size = params
        return vector_type(dtype, size)

    def __init__(self, *values):
        if self.dtype is None:
            raise TypeError("NumVector must be parameterized: NumVector[dtype, size]")
        if len(values) > self.size:
            raise ValueError(
                f"{type(self).__name__} takes at most {self.size} values, got {len(values)}"
            )
        # недостающие элементы – нули
        self._v = np.zeros(self.size, dtype=self.dtype)
        self._v[:len(values)] = values

    @classmethod
    def from_iterable(cls, values: Iterable) -> "NumVector":
        return cls(*values)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "NumVector":
        obj = cls.__new__(cls)
        obj._v = np.array(array, dtype=cls.dtype)
        return obj

    def astype(self, dtype) -> "NumVector":
        """Тот же вектор с другим скалярным типом."""
        return vector_type(dtype, self.size)._wrap(self._v)

    def copy(self) -> "NumVector":
        return self._wrap(self._v)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self._wrap(self._v)

    def __reduce__(self):
        return _rebuild_vector, (self.dtype.str, self.size, self.to_tuple())

    # -----------------------------------------------------------------
    # доступ к элементам (оба способа проверяют границы)
    # -----------------------------------------------------------------
    def _check_index(self, index) -> int:
        i = operator.index(index)
        if not 0 <= i < self.size:
            raise BoundsError(f"index {i} out of range for {type(self).__name__}")
        return i

    def at(self, index):
        return self._v[self._check_index(index)]

    def set(self, index, value) -> None:
        self._v[self._check_index(index)] = value

    __getitem__ = at
    __setitem__ = set

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        """Элементы по порядку индексов (копии‑скаляры; менять через v[i] = x)."""
        return iter(self._v)

    def fill(self, value) -> None:
        """Заполнить весь вектор значением `value`."""
        self._v.fill(value)

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, NumVector):
            return NotImplemented
        if other.size != self.size:
            raise DimensionMismatchError(
                f"==: dimension mismatch {type(self).__name__} vs {type(other).__name__}"
            )
        return all(is_equal(a, b) for a, b in zip(self._v, other._v))

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    __hash__ = None

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "NumVector") -> "NumVector":
        if not isinstance(other, NumVector):
            return NotImplemented
        _require_same(self, other, "+")
        return self._wrap(self._v + other._v)

    def __sub__(self, other: "NumVector") -> "NumVector":
        if not isinstance(other, NumVector):
            return NotImplemented
        _require_same(self, other, "-")
        return self._wrap(self._v - other._v)

    def __neg__(self) -> "NumVector":
        return self._wrap(-self._v)

    def __mul__(self, scalar) -> "NumVector":
        s = as_scalar(self.dtype, scalar)
        if s is None:
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return self._wrap(self._v * s)

    __rmul__ = __mul__

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def norm(self):
        """Евклидова норма; для целых типов – с усечением, как sqrt в T."""
        with np.errstate(over="ignore"):
            return self.dtype.type(np.sqrt(np.sum(self._v * self._v)))

    def as_np(self) -> np.ndarray:
        """Копия ndarray с элементами."""
        return self._v.copy()

    def to_tuple(self) -> Tuple:
        return tuple(self._v.tolist())

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        return "[ " + "".join(f"{e} " for e in self._v) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(str, self._v.tolist()))})"


def _rebuild_vector(dtype: str, size: int, values: tuple) -> NumVector:
    return vector_type(dtype, size)(*values)


def vector(*values, dtype=None) -> NumVector:
    """
    Вектор из перечисленных значений; размерность = число значений.

    Без `dtype` тип выводится из значений: vector(1, 2) – int64,
    vector(1, 2.5) – float64.
    """
    if not values:
        raise ValueError("vector() needs at least one value")
    if dtype is None:
        dtype = np.result_type(*values)
    return vector_type(dtype, len(values))(*values)


# ---------------------------------------------------------------
# свободные функции: скалярное/векторное произведение, угол
# ---------------------------------------------------------------
@functools.singledispatch
def dot(lhs, rhs):
    """Скалярное произведение (для кватернионов – см. numvec.quaternion)."""
    raise TypeError(f"dot() is not defined for {type(lhs).__name__}")


@dot.register
def _dot_vectors(lhs: NumVector, rhs):
    _require_same(lhs, rhs, "dot")
    return lhs.dtype.type(np.dot(lhs._v, rhs._v))


def cross(lhs: NumVector, rhs: NumVector) -> NumVector:
    """Векторное произведение; определено только для N = 3."""
    _require_same(lhs, rhs, "cross")
    if lhs.size != 3:
        raise DimensionMismatchError(
            f"cross product is defined only for 3-element vectors, got {type(lhs).__name__}"
        )
    return lhs._wrap(np.cross(lhs._v, rhs._v))


def angle(lhs: NumVector, rhs: NumVector) -> float:
    """
    Угол между векторами в радианах, [0, pi].

    dot и нормы считаются в типе T: для целых векторов нормы усечены,
    а косинус – целочисленное деление (с отбрасыванием дробной части).
    Для нулевого вектора, как и при выходе косинуса за [-1, 1] из‑за
    погрешности float, результат nan (без исключения).
    """
    _require_same(lhs, rhs, "angle")
    denominator = lhs.norm() * rhs.norm()
    if denominator == 0:
        logger.debug(f"[NumVector] angle() with zero-norm operand: {lhs} {rhs}")
    with np.errstate(divide="ignore", invalid="ignore"):
        cosine = np.true_divide(dot(lhs, rhs), denominator)
        if is_exact(lhs.dtype):
            cosine = np.trunc(cosine)
        return float(np.arccos(cosine))
