# numvec/quaternion.py
# ---------------------------------------------------------------
# Кватернионы (a, i, j, k) поверх NumVector:
# - четыре способа конструирования,
# - сложение/вычитание/умножение на скаляр через векторную арифметику,
# - произведение Гамильтона,
# - норма, нормализация, сопряжение, обратный кватернион,
# - создание из оси/угла и вращение 3‑D вектора.
# ---------------------------------------------------------------

import functools
import math
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from numvec.errors import DimensionMismatchError, ScalarTypeMismatchError
from numvec.operators import as_scalar, is_equal, is_exact, scalar_type
from numvec.utils.logger import logger
from numvec.vector import NumVector, cross, dot, vector_type


@dataclass(frozen=True)
class ImagPart:
    """
    Мнимая часть кватерниона в порядке (i, j, k).
    В NumVector переводится через as_vector().
    """
    i: object
    j: object
    k: object
    dtype: np.dtype = field(default=np.dtype(np.float64), repr=False, compare=False)

    def as_vector(self) -> NumVector:
        return vector_type(self.dtype, 3)(self.i, self.j, self.k)


def quaternion_type(dtype) -> type:
    """Тип кватерниона со скалярным типом `dtype` (float64 – сам Quaternion)."""
    return _quaternion_class(scalar_type(dtype))


@functools.lru_cache(maxsize=None)
def _quaternion_class(dtype: np.dtype) -> type:
    if dtype == Quaternion.dtype:
        return Quaternion
    name = f"Quaternion[{dtype.name}]"
    cls = type(name, (Quaternion,), {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "dtype": dtype,
    })
    logger.debug(f"[Quaternion] Created type {name}")
    return cls


class Quaternion:
    """
    Кватернион q = a + b·i + c·j + d·k.

    Конструкторы:
        1. Quaternion(a=0, i=0, j=0, k=0)
        2. Quaternion(a, vec3)   – вещественная часть + мнимый вектор
        3. Quaternion(vec3)      – вещественная часть 0
        4. Quaternion(vec4)      – (a, i, j, k)
    Без явного параметра скалярный тип берётся из переданного вектора,
    иначе float64. Для других типов: Quaternion[int](1, 2, 3, 4).
    """

    __slots__ = ("_a", "_i", "_j", "_k")

    __array_ufunc__ = None

    dtype: np.dtype = np.dtype(np.float64)

    def __class_getitem__(cls, dtype):
        return quaternion_type(dtype)

    def __new__(cls, *args):
        if cls is Quaternion and args and isinstance(args[-1], NumVector):
            cls = quaternion_type(args[-1].dtype)
        return super().__new__(cls)

    def __init__(self, *args):
        if len(args) > 4:
            raise TypeError(f"Quaternion takes at most 4 coefficients, got {len(args)}")
        if args and isinstance(args[-1], NumVector):
            coeffs = self._coeffs_from_vector(args[:-1], args[-1])
        else:
            coeffs = args + (0,) * (4 - len(args))
        t = self.dtype.type
        self._a, self._i, self._j, self._k = (t(c) for c in coeffs)

    @staticmethod
    def _coeffs_from_vector(head: tuple, vec: NumVector) -> tuple:
        if len(head) > 1:
            raise TypeError("Quaternion(a, vec3) takes one real coefficient before the vector")
        if vec.size == 3:
            real = head[0] if head else 0
            return (real,) + vec.to_tuple()
        if vec.size == 4 and not head:
            return vec.to_tuple()
        raise DimensionMismatchError(
            f"Quaternion cannot be built from {'a scalar and ' if head else ''}{type(vec).__name__}"
        )

    @classmethod
    def from_axis_angle(cls, axis, angle: float) -> "Quaternion":
        """Версор вращения на `angle` радиан вокруг оси `axis` (3 элемента)."""
        if is_exact(cls.dtype):
            raise TypeError(f"{cls.__name__} cannot represent a rotation, use a floating scalar type")
        axis = vector_type(cls.dtype, 3).from_iterable(axis)
        n = axis.norm()
        if n == 0:
            logger.debug("[Quaternion] from_axis_angle() with zero axis")
        with np.errstate(divide="ignore", invalid="ignore"):
            scale = cls.dtype.type(math.sin(angle / 2.0)) / n
        return cls(math.cos(angle / 2.0), axis * scale)

    # -----------------------------------------------------------------
    # доступ к частям и коэффициентам
    # -----------------------------------------------------------------
    def as_vector(self) -> NumVector:
        """Кватернион как вектор (a, i, j, k)."""
        return vector_type(self.dtype, 4)(self._a, self._i, self._j, self._k)

    def real(self):
        return self._a

    def imag(self) -> ImagPart:
        return ImagPart(self._i, self._j, self._k, self.dtype)

    def q0(self):
        """Для q = q0 + qi·i + qj·j + qk·k вернуть q0."""
        return self._a

    def qi(self):
        """Для q = q0 + qi·i + qj·j + qk·k вернуть qi."""
        return self._i

    def qj(self):
        """Для q = q0 + qi·i + qj·j + qk·k вернуть qj."""
        return self._j

    def qk(self):
        """Для q = q0 + qi·i + qj·j + qk·k вернуть qk."""
        return self._k

    def to_tuple(self) -> Tuple:
        return (self._a.item(), self._i.item(), self._j.item(), self._k.item())

    def __reduce__(self):
        return _rebuild_quaternion, (self.dtype.str, self.to_tuple())

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (is_equal(self._a, other._a) and is_equal(self._i, other._i)
                and is_equal(self._j, other._j) and is_equal(self._k, other._k))

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    __hash__ = None

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def __add__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return type(self)(self.as_vector() + other.as_vector())

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return type(self)(self.as_vector() - other.as_vector())

    def __neg__(self) -> "Quaternion":
        return type(self)(-self._a, -self._i, -self._j, -self._k)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return hamilton_product(self, other)
        if as_scalar(self.dtype, other) is None:
            return NotImplemented
        return type(self)(self.as_vector() * other)

    def __rmul__(self, scalar):
        if as_scalar(self.dtype, scalar) is None:
            return NotImplemented
        return self * scalar

    def _reciprocal(self, value):
        """1 / value в типе T: для целых – целочисленное деление."""
        if value == 0:
            logger.debug(f"[Quaternion] reciprocal of zero for {self!r}")
        if is_exact(self.dtype):
            return self.dtype.type(1 // int(value))
        with np.errstate(divide="ignore"):
            return self.dtype.type(1) / value

    # -----------------------------------------------------------------
    # норма, сопряжение, обратный
    # -----------------------------------------------------------------
    def norm(self):
        """Евклидова норма в 4‑мерном пространстве."""
        return self.as_vector().norm()

    def normalized(self) -> "Quaternion":
        """Нормализованный кватернион (версор)."""
        return self * self._reciprocal(self.norm())

    def is_versor(self) -> bool:
        return is_equal(self.norm(), self.dtype.type(1))

    def conjugate(self) -> "Quaternion":
        """(q0, qi, qj, qk) -> (q0, -qi, -qj, -qk)."""
        return type(self)(self._a, -self._i, -self._j, -self._k)

    def inverse(self) -> "Quaternion":
        # сумма квадратов = q * conjugate(q)
        squared_sum = self._a * self._a + self._i * self._i + self._j * self._j + self._k * self._k
        return self.conjugate() * self._reciprocal(squared_sum)

    def rotate(self, vec: NumVector) -> NumVector:
        """Повернуть 3‑D вектор: q * v * q^-1."""
        pure = type(self)(vec.astype(self.dtype))
        return (self * pure * self.inverse()).imag().as_vector()

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        return f"[{self._a} , {self._i}i, {self._j}j, {self._k}k]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(str, self.to_tuple()))})"


def _rebuild_quaternion(dtype: str, coeffs: tuple) -> Quaternion:
    return quaternion_type(dtype)(*coeffs)


def hamilton_product(lhs: Quaternion, rhs: Quaternion) -> Quaternion:
    """
    Произведение Гамильтона lhs * rhs.

    Для кватернионов вращения q1 * q2 – это вращение q2, затем q1.
    """
    if type(lhs) is not type(rhs):
        raise ScalarTypeMismatchError(
            f"*: scalar type mismatch {type(lhs).__name__} vs {type(rhs).__name__}"
        )
    li, ri = lhs.imag().as_vector(), rhs.imag().as_vector()
    real_part = lhs.real() * rhs.real() - dot(li, ri)
    imag_part = ri * lhs.real() + li * rhs.real() + cross(li, ri)
    return type(lhs)(real_part, imag_part)


@dot.register
def _dot_quaternions(lhs: Quaternion, rhs):
    """Скалярное произведение кватернионов, завёрнутое в кватернион (a, 0, 0, 0)."""
    if not isinstance(rhs, Quaternion):
        raise TypeError(f"dot() expects two quaternions, got {type(rhs).__name__}")
    return type(lhs)(dot(lhs.as_vector(), rhs.as_vector()))
