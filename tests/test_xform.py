import math
import numpy as np
import pytest
from yapspace.xform import *
from yapspace.errors import (DegenerateGeometryError, MatrixDimensionsError,
                             MatrixIndexError)
from yapspace.vector import Vector, XAXIS, YAXIS, ZAXIS
## unit tests for yapspace xform.py

A3 = [[2,0,1],
      [1,3,2],
      [1,1,2]]

A4 = [[1,2,0,1],
      [0,1,3,2],
      [4,0,1,0],
      [1,1,1,5]]

def _allclose(m,a):
    return np.allclose(np.array(m.m),np.array(a),atol=1e-9)


class TestMatrix:
    """unit tests for general matrix operations"""

    def test_create(self):
        m = Matrix(2,3,[1,2,3,4,5,6])
        n = Matrix(2,3,[[1,2,3],[4,5,6]])
        assert m.m == n.m
        assert m.rows == 2 and m.cols == 3
        assert Matrix(3).m == [[0.0]*3]*3
        assert Identity(2).m == [[1.0,0.0],[0.0,1.0]]
        assert fromrows(A3).m == [[float(x) for x in r] for r in A3]
        with pytest.raises(MatrixDimensionsError):
            Matrix(2,2,[1,2,3])
        with pytest.raises(MatrixDimensionsError):
            Matrix(0,2)

    def test_get_set(self):
        m = Matrix(2,3)
        m.set(1,2,5)
        assert m.get(1,2) == 5.0
        assert m.getrow(1) == [0.0,0.0,5.0]
        assert m.getcol(2) == [0.0,5.0]
        with pytest.raises(MatrixIndexError):
            m.get(2,0)
        with pytest.raises(IndexError):
            m.set(0,3,1.0)
        with pytest.raises(ValueError):
            m.set(0,0,'x')
        # rows handed out are copies
        r = m.getrow(1)
        r[0] = 99
        assert m.get(1,0) == 0.0

    def test_structure(self):
        m = Matrix(2,3,[1,2,3,4,5,6])
        assert m.transpose().m == [[1,4],[2,5],[3,6]]
        assert m.swaprows(0,1).m == [[4,5,6],[1,2,3]]
        assert m.swapcols(0,2).m == [[3,2,1],[6,5,4]]
        assert m.scale(2).m == [[2,4,6],[8,10,12]]
        # structural operations don't touch the original
        assert m.m == [[1,2,3],[4,5,6]]

    def test_arithmetic(self):
        a = fromrows(A3)
        assert a.add(a).m == a.scale(2).m
        assert a.sub(a).m == Matrix(3).m
        assert a.trace() == 7.0
        assert a.mul(Identity(3)).m == a.m
        assert _allclose(a.mul(a),np.array(A3).dot(np.array(A3)))
        assert _allclose(a.pow(3),np.linalg.matrix_power(np.array(A3),3))
        assert a.pow(0).m == Identity(3).m
        assert a.mul(2.0).m == a.scale(2.0).m
        assert a.mul(Vector(1,0,0)) == Vector(2,1,1)
        with pytest.raises(MatrixDimensionsError):
            Matrix(2,3).mul(Matrix(2,3))
        with pytest.raises(MatrixDimensionsError):
            Matrix(2,3).add(Matrix(3,2))
        with pytest.raises(ValueError):
            a.mul('foo')

    def test_determinant(self):
        assert Matrix(1,1,[4]).determinant() == 4.0
        assert Matrix(2,2,[1,2,3,4]).determinant() == -2.0
        assert math.isclose(fromrows(A3).determinant(),6.0)
        assert math.isclose(fromrows(A4).determinant(),
                            np.linalg.det(np.array(A4)))
        with pytest.raises(MatrixDimensionsError):
            Matrix(2,3).determinant()

    def test_cofactors(self):
        m = Matrix(2,2,[1,2,3,4])
        assert m.cofactors().m == [[4,-3],[-2,1]]
        assert m.adjugate().m == [[4,-2],[-3,1]]

    def test_inverse(self):
        for a in (A3,A4):
            m = fromrows(a)
            assert _allclose(m.inverse(),np.linalg.inv(np.array(a)))
            assert m.mul(m.inverse()).close(Identity(m.rows))
        with pytest.raises(DegenerateGeometryError):
            Matrix(2,2,[1,2,2,4]).inverse()
        with pytest.raises(MatrixDimensionsError):
            Matrix(2,3).inverse()


class TestRotation:
    """unit tests for transformation matrix factories"""

    def test_axis_rotations(self):
        for a in (0.3,1.2,-2.5):
            assert Rotation(XAXIS,a).close(RotationX(a))
            assert Rotation(YAXIS,a).close(RotationY(a))
            assert Rotation(ZAXIS,a).close(RotationZ(a))
            assert Rotation(ZAXIS,a,inverse=True).close(RotationZ(-a))

    def test_orthonormal(self):
        r = Rotation(Vector(1,2,3),0.77)
        assert r.mul(r.transpose()).close(Identity(3))
        assert math.isclose(r.determinant(),1.0)
        assert r.inverse().close(r.transpose())

    def test_compose_inverse(self):
        v = Vector(1.5,-2,0.25)
        for theta in (0.1,math.pi/3,2.0):
            m = product(RotationX(theta),RotationX(-theta))
            assert v.transform(m) == v
            assert m.close(Identity(3))

    def test_column_rotation(self):
        assert RotationZ(math.pi/2).mul(XAXIS) == YAXIS
        assert RotationX(math.pi/2).mul(YAXIS) == ZAXIS
        assert RotationY(math.pi/2).mul(ZAXIS) == XAXIS

    def test_scale(self):
        assert Scale(2).m == [[2,0,0],[0,2,0],[0,0,2]]
        assert Scale(1,2,3).mul(Vector(1,1,1)) == Vector(1,2,3)

    def test_bad_rotation(self):
        with pytest.raises(DegenerateGeometryError):
            Rotation(Vector(0,0,0),1.0)
        with pytest.raises(ValueError):
            product()
