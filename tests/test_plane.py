import math

import pytest

from yapspace.errors import ConstructionError, DegenerateGeometryError
from yapspace.plane import Plane, Slab
from yapspace.space import Space
from yapspace.vector import Vector


class TestPlane:
    """unit tests for planes"""

    def test_point_normal(self):
        p = Plane((0,0,1),(0,0,2))
        assert p.depth() == 2.0
        assert math.isclose(p.signeddistance((5,5,3)),2.0)
        assert math.isclose(p.signeddistance((5,5,-1)),-2.0)
        assert math.isclose(p.distance((5,5,-1)),2.0)
        assert p.contains((7,-1,1))
        assert not p.contains((7,-1,1.01))

    def test_space(self):
        p = Plane((1,2,3),(0,1,0))
        assert isinstance(p,Space)
        assert p.volume() == 0.0
        assert p.surfacearea() == math.inf
        assert p.center() == Vector(1,2,3)

    def test_general_form(self):
        p = Plane.fromgeneral(0,0,1,5)
        assert p.contains((1,2,5))
        assert p.coefficients() == (0.0,0.0,1.0,5.0)
        q = Plane.fromgeneral(1,1,0,2)
        assert q.contains((2,0,0)) and q.contains((0,2,-9))
        with pytest.raises(ConstructionError):
            Plane.fromgeneral(0,0,0,1)

    def test_from_points(self):
        p = Plane.frompoints((0,0,0),(1,0,0),(0,1,0))
        assert p.normal == Vector(0,0,1)
        q = Plane.frompointvectors((0,0,0),(1,0,0),(0,1,0))
        assert q.normal == p.normal
        with pytest.raises(ConstructionError):
            Plane.frompoints((0,0,0),(1,1,1),(2,2,2))
        with pytest.raises(ConstructionError):
            Plane((0,0,0),(0,0,0))

    def test_project(self):
        p = Plane.fromgeneral(0,0,3,15)
        assert p.project((1,2,7)) == Vector(1,2,5)
        assert p.contains(p.project((-4,9,-2)))

    def test_transform(self):
        p = Plane((0,0,5),(0,0,1))
        p.translate(Vector(0,0,1))
        assert p.contains((0,0,6))
        p.translate(1,0,0)
        assert p.contains((0,0,6))
        p.scale(2)
        assert p.contains((3,3,12))


class TestSlab:
    """unit tests for slabs"""

    def test_create(self):
        s = Slab((0,0,2),0,4)
        assert s.mindepth == 0.0 and s.maxdepth == 4.0
        with pytest.raises(ConstructionError):
            Slab((0,0,1),3,1)
        with pytest.raises(ValueError):
            Slab((0,0,1),3,1)

    def test_thickness(self):
        assert math.isclose(Slab((0,0,2),0,4).thickness(),2.0)
        assert math.isclose(Slab((1,0,0),-1,1).thickness(),2.0)
        with pytest.raises(DegenerateGeometryError):
            Slab((0,0,0),0,1).thickness()

    def test_contains(self):
        s = Slab((0,0,2),0,4)
        assert s.contains((0,0,1))
        assert s.contains((10,-3,0))
        assert s.contains((0,0,2))
        assert not s.contains((0,0,2.1))
        assert not s.contains((0,0,-0.1))
        with pytest.raises(DegenerateGeometryError):
            Slab((0,0,0),0,1).contains((0,0,0))

    def test_factories(self):
        s = Slab.frompointnormal((0,0,1),(0,0,1),3)
        assert s.contains((0,0,4))
        assert not s.contains((0,0,4.5))
        t = Slab.frompoints((0,0,3),(5,5,-1),(0,0,1))
        assert t.mindepth == -1.0 and t.maxdepth == 3.0
        with pytest.raises(ConstructionError):
            Slab.frompointnormal((0,0,0),(0,0,1),-1)

    def test_depths(self):
        s = Slab((0,0,1),0,4)
        s.push(2)
        assert (s.mindepth,s.maxdepth) == (2.0,6.0)
        s.pull(2)
        assert (s.mindepth,s.maxdepth) == (0.0,4.0)
        with pytest.raises(ConstructionError):
            s.setmindepth(5)
        with pytest.raises(ConstructionError):
            s.setmaxdepth(-1)
        s.setmaxdepth(1).setmindepth(0.5)
        assert (s.mindepth,s.maxdepth) == (0.5,1.0)

    def test_planes(self):
        s = Slab((0,1,0),-2,3)
        assert s.minplane().contains((4,-2,4))
        assert s.maxplane().contains((4,3,4))
        assert s.center() == Vector(0,0.5,0)

    def test_transform(self):
        s = Slab((0,0,1),0,1)
        s.translate(0,0,1)
        assert (s.mindepth,s.maxdepth) == (1.0,2.0)
        s.scale(-2)
        assert (s.mindepth,s.maxdepth) == (-4.0,-2.0)
        assert s.contains((0,0,-3))
        assert s.volume() == math.inf
        assert s.surfacearea() == math.inf
