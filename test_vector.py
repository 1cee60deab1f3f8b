# -*- coding: utf-8 -*-
import copy
import math
import pickle
import warnings

import numpy as np
import pytest

from numvec import (
    BoundsError, DimensionMismatchError, NumVector, ScalarTypeMismatchError,
    angle, cross, dot, round, to_degrees, vector,
)

Vec3d = NumVector[float, 3]
Vec3i = NumVector[int, 3]


def test_vector_types_are_cached():
    assert NumVector[float, 3] is Vec3d
    assert NumVector[np.float64, 3] is Vec3d
    assert NumVector[float, 4] is not Vec3d
    assert Vec3i.dtype == np.dtype(np.int64)
    assert Vec3i.size == 3


def test_vector_type_validation():
    with pytest.raises(TypeError):
        NumVector[bool, 3]
    with pytest.raises(ValueError):
        NumVector[float, 0]
    with pytest.raises(TypeError):
        NumVector(1, 2, 3)


def test_construction():
    assert Vec3d().to_tuple() == (0.0, 0.0, 0.0)
    # недостающие элементы – нули
    assert Vec3i(-4, -9).to_tuple() == (-4, -9, 0)
    assert Vec3i.from_iterable(range(3)).to_tuple() == (0, 1, 2)
    with pytest.raises(ValueError):
        Vec3i(1, 2, 3, 4)


def test_vector_helper_infers_type():
    assert type(vector(1, 2)) is NumVector[int, 2]
    assert type(vector(1, 2.5)) is NumVector[float, 2]
    assert type(vector(1, 2, dtype=np.float32)) is NumVector[np.float32, 2]
    with pytest.raises(ValueError):
        vector()


def test_iteration_and_fill():
    c = NumVector[int, 7](5, 5, 5, 5, 5, 5, 5)
    for e in c:
        assert e == 5
    assert list(c) == list(c)
    assert len(c) == 7

    x = Vec3i()
    for e in x:
        assert e == 0
    x.fill(10)
    assert x == Vec3i(10, 10, 10)

    for idx, e in enumerate(x):
        x[idx] = e + idx
    assert x == Vec3i(10, 11, 12)
    # элементы при обходе – копии, вектор не меняется
    for e in x:
        e += 100
    assert x == Vec3i(10, 11, 12)


def test_element_access_is_bounds_checked():
    v = Vec3d(1, 2, 3)
    assert v[0] == 1.0
    assert v.at(2) == 3.0
    v[1] = 7
    v.set(2, 8)
    assert v.to_tuple() == (1.0, 7.0, 8.0)
    for bad in (3, -1, 100):
        with pytest.raises(BoundsError):
            v[bad]
        with pytest.raises(BoundsError):
            v.at(bad)
        with pytest.raises(IndexError):
            v[bad] = 0
    with pytest.raises(TypeError):
        v[1.0]


def test_basic_operations():
    a = Vec3d(8, 10.5, 10.1)
    b = Vec3d(1, 4, 8)

    assert -a == Vec3d(-8, -10.5, -10.1)
    assert a + b == Vec3d(9, 14.5, 18.1)
    assert a - b == Vec3d(7, 6.5, 2.1)
    assert b - a == Vec3d(-7, -6.5, -2.1)
    assert a * 3.0 == Vec3d(24, 31.5, 30.3)
    assert 3.0 * a == Vec3d(24, 31.5, 30.3)
    assert np.float64(3.0) * a == Vec3d(24, 31.5, 30.3)
    # исходные векторы не меняются
    assert a.to_tuple() == (8.0, 10.5, 10.1)


def test_integer_vector_rejects_fractional_scalar():
    v = Vec3i(1, 2, 3)
    assert v * 2 == Vec3i(2, 4, 6)
    with pytest.raises(TypeError):
        v * 2.5
    with pytest.raises(TypeError):
        v * v


def test_equality_is_tolerant():
    assert Vec3d(0.1 + 0.2, 0, 0) == Vec3d(0.3, 0, 0)
    assert Vec3d(0.1, 0, 0) != Vec3d(0.2, 0, 0)
    assert Vec3i(1, 2, 3) == Vec3d(1, 2, 3)
    assert (Vec3i(1, 2, 3) == (1, 2, 3)) is False


def test_mismatched_operands_are_rejected():
    v2 = NumVector[float, 2](1, 2)
    v3 = Vec3d(1, 2, 3)
    with pytest.raises(DimensionMismatchError):
        v2 + v3
    with pytest.raises(DimensionMismatchError):
        v3 - v2
    with pytest.raises(DimensionMismatchError):
        dot(v2, v3)
    with pytest.raises(DimensionMismatchError):
        v2 == v3
    with pytest.raises(ScalarTypeMismatchError):
        Vec3i(1, 2, 3) + v3
    # оба исключения – TypeError
    with pytest.raises(TypeError):
        v2 + v3


def test_norm():
    v1 = Vec3i(1, 2, 2)
    assert v1.norm() == 3
    assert isinstance(v1.norm(), np.integer)
    assert v1.norm() == Vec3i(1, -2, 2).norm() == Vec3i(-1, -2, -2).norm()
    # целый тип: sqrt(2) усекается
    assert NumVector[int, 2](1, 1).norm() == 1
    assert vector(3.0, 4.0).norm() == 5.0
    assert Vec3d().norm() == 0.0


def test_dot():
    assert dot(Vec3i(1, 2, 3), Vec3i(4, -5, 6)) == 12
    assert dot(Vec3i(-4, -9), Vec3i(-1, 2)) == -14
    assert dot(Vec3i(6, -1, 3), Vec3i(4, 18, -2)) == 0
    with pytest.raises(TypeError):
        dot(1, 2)


def test_cross():
    x = Vec3i(-1, 2, 5)
    y = Vec3i(4, 0, -3)
    assert cross(x, y) == Vec3i(-6, 17, -8)
    assert cross(x, y) != cross(y, x)

    u = Vec3i(0, 2, 1)
    v = Vec3i(3, -1, 0)
    assert cross(u, v) == Vec3i(1, 3, -6)
    assert cross(v, u) == Vec3i(-1, -3, 6)

    with pytest.raises(DimensionMismatchError):
        cross(vector(1.0, 2.0), vector(3.0, 4.0))


def test_angle():
    a = NumVector[float, 2](1, -2)
    b = NumVector[float, 2](-2, 1)
    assert round(angle(a, b), 2) == 2.50
    assert math.floor(to_degrees(angle(a, b))) == 143
    assert isinstance(angle(a, b), float)
    # для целых векторов нормы усечены: |(1, -2)| = 2, cos = -4 / 4
    assert angle(a.astype(int), b.astype(int)) == math.pi

    assert angle(vector(1.0, 0.0), vector(0.0, 1.0)) == pytest.approx(math.pi / 2)
    assert angle(vector(1.0, 0.0), vector(1.0, 0.0)) == 0.0
    assert angle(vector(1.0, 0.0), vector(-3.0, 0.0)) == pytest.approx(math.pi)


def test_angle_with_zero_vector_is_nan_without_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isnan(angle(Vec3d(), Vec3d(1, 2, 3)))
        assert math.isnan(angle(Vec3i(), Vec3i(1, 2, 3)))


def test_angle_of_integer_vectors_truncates():
    # 24 // 25 == 0
    assert angle(NumVector[int, 2](3, 4), NumVector[int, 2](4, 3)) == pytest.approx(math.pi / 2)
    # |(1, 1)| == 1
    assert angle(NumVector[int, 2](1, 1), NumVector[int, 2](1, 0)) == 0.0
    # -24 / 25 усекается к нулю, а не вниз
    assert angle(NumVector[int, 2](-3, -4), NumVector[int, 2](4, 3)) == pytest.approx(math.pi / 2)


A = [Vec3d(0.1, -2.5, 3.3), Vec3d(8, 10.5, 10.1), Vec3d(0, 0, 0)]
B = [Vec3d(1.7, 4.0, -8.25), Vec3d(1, 4, 8), Vec3d(-1.5, 0.25, 2)]


@pytest.mark.parametrize("a, b", list(zip(A, B)))
def test_algebraic_properties(a, b):
    assert a + b == b + a
    assert (a + b) - b == a
    assert 2.5 * a == a * 2.5
    assert dot(a, b) == dot(b, a)
    assert cross(a, b) == -cross(b, a)


def test_text_rendering():
    assert str(Vec3i(1, 2, 3)) == "[ 1 2 3 ]"
    assert str(vector(8.0, 10.5)) == "[ 8.0 10.5 ]"
    assert repr(Vec3i(1, 2, 3)) == "NumVector[int64, 3](1, 2, 3)"


def test_copies_are_independent():
    a = Vec3d(1, 2, 3)
    for b in (copy.copy(a), copy.deepcopy(a), a.copy(), pickle.loads(pickle.dumps(a))):
        assert type(b) is Vec3d
        assert b == a
        b[0] = 99
        assert a[0] == 1.0


def test_astype_and_as_np():
    v = Vec3d(1.9, -2.9, 3)
    assert v.astype(int).to_tuple() == (1, -2, 3)
    arr = v.as_np()
    arr[0] = 100
    assert v[0] == 1.9
    assert np.allclose(v.as_np(), [1.9, -2.9, 3.0])
