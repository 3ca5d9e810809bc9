import math

import pytest

from yapspace.errors import ConstructionError, DegenerateGeometryError, VertexIndexError
from yapspace.path import BezierPath, CirclePath, LinearPath, Ray
from yapspace.vector import Vector, ZAXIS


class TestRay:
    """unit tests for rays"""

    def _ray(self):
        return Ray((0,0,0),(3,0,0))

    def test_points(self):
        r = self._ray()
        assert r.point(2/3) == Vector(2,0,0)
        assert r.point(-1) == Vector(-3,0,0)
        assert r.origin() == Vector(0,0,0)
        assert r.end() == Vector(3,0,0)
        assert math.isclose(r.length(),3.0)

    def test_sampling(self):
        r = self._ray()
        assert r.points(0) == []
        assert r.points(1) == [Vector(1.5,0,0)]
        assert r.points(2) == [Vector(0,0,0),Vector(3,0,0)]
        assert r.points(3) == [Vector(0,0,0),Vector(1.5,0,0),Vector(3,0,0)]
        assert r.points(4) == [Vector(i,0,0) for i in range(4)]
        with pytest.raises(ValueError):
            r.points(-1)

    def test_contains(self):
        r = Ray((1,1,1),(2,2,2))
        assert r.contains((2,2,2))
        assert r.contains((1,1,1))
        assert r.contains((3,3,3))
        assert not r.contains((4,4,4))
        assert not r.contains((0,0,0))
        assert not r.contains((2,2,2.5))

    def test_intervals(self):
        r = self._ray()
        assert list(r.intervals(1.0)) == [Vector(i,0,0) for i in range(4)]
        pts = list(r.intervals(0.7))
        assert len(pts) == 5
        assert pts[-1] == Vector(2.8,0,0)
        with pytest.raises(ValueError):
            r.intervals(0)

    def test_intervals_reach_end(self):
        pts = list(Ray((0,0,0),(0.3,0,0)).intervals(0.1))
        assert len(pts) == 4
        assert pts[-1] == Vector(0.3,0,0)

    def test_intervals_single_use(self):
        it = self._ray().intervals(1.0)
        assert len(list(it)) == 4
        assert list(it) == []

    def test_zero_length_intervals(self):
        r = Ray((1,2,3),(0,0,0))
        assert list(r.intervals(0.5)) == [Vector(1,2,3)]

    def test_blockintervals(self):
        cells = list(Ray((0.5,0.5,0.5),(3,0,0)).blockintervals())
        assert cells == [(0,0,0),(1,0,0),(2,0,0),(3,0,0)]
        cells = list(Ray((0,0,0),(3,3,3)).blockintervals())
        assert cells == [(i,i,i) for i in range(4)]
        cells = list(Ray((0,0,0),(-1.5,0.2,0.2)).blockintervals())
        assert cells == [(0,0,0),(-1,0,0),(-2,0,0)]

    def test_blockintervals_connected(self):
        cells = list(Ray((0.2,0.3,0.1),(4,2,-3)).blockintervals())
        assert cells[0] == (0,0,0)
        assert cells[-1] == (4,2,-3)
        assert len(cells) == 5
        for a, b in zip(cells,cells[1:]):
            assert max(abs(a[i]-b[i]) for i in range(3)) == 1

    def test_length(self):
        r = self._ray()
        r.setlength(6)
        assert r.end() == Vector(6,0,0)
        r.normalize()
        assert math.isclose(r.length(),1.0)
        with pytest.raises(DegenerateGeometryError):
            Ray((0,0,0),(0,0,0)).normalize()

    def test_transform(self):
        r = self._ray()
        r.translate(0,1,0)
        assert r.origin() == Vector(0,1,0)
        r.scalecentric(2)
        assert r.origin() == Vector(-1.5,1,0)
        assert r.end() == Vector(4.5,1,0)
        b = Ray.between((1,1,1),(2,3,4))
        assert b.direction == Vector(1,2,3)


class TestLinearPath:
    """unit tests for polyline paths"""

    def _path(self):
        return LinearPath([(0,0,0),(1,0,0),(1,1,0)])

    def test_points(self):
        p = self._path()
        assert math.isclose(p.length(),2.0)
        assert p.point(0) == Vector(0,0,0)
        assert p.point(0.25) == Vector(0.5,0,0)
        assert p.point(0.5) == Vector(1,0,0)
        assert p.point(0.75) == Vector(1,0.5,0)
        assert p.point(1) == Vector(1,1,0)
        assert p.points(5) == [Vector(0,0,0),Vector(0.5,0,0),Vector(1,0,0),
                               Vector(1,0.5,0),Vector(1,1,0)]

    def test_uneven_segments(self):
        p = LinearPath([(0,0,0),(3,0,0),(3,1,0)])
        assert p.point(0.5) == Vector(2,0,0)
        assert p.point(0.875) == Vector(3,0.5,0)

    def test_parameter_range(self):
        p = self._path()
        with pytest.raises(ValueError):
            p.point(1.1)
        with pytest.raises(ValueError):
            p.point(-0.1)

    def test_degenerate(self):
        with pytest.raises(ConstructionError):
            LinearPath([])
        p = LinearPath([(1,2,3)])
        assert p.point(0.3) == Vector(1,2,3)
        assert p.length() == 0.0
        q = LinearPath([(0,0,0),(0,0,0),(2,0,0)])
        assert q.point(0.5) == Vector(1,0,0)

    def test_controls(self):
        p = self._path()
        assert p.controlcount() == 3
        assert p.control(2) == Vector(1,1,0)
        with pytest.raises(VertexIndexError):
            p.control(3)
        p.translate(0,0,1)
        assert p.point(0.5) == Vector(1,0,1)
        p.scale(2)
        assert math.isclose(p.length(),4.0)


class TestBezierPath:
    """unit tests for Bézier paths"""

    def test_points(self):
        b = BezierPath([(0,0,0),(1,2,0),(2,0,0)])
        assert b.point(0) == Vector(0,0,0)
        assert b.point(1) == Vector(2,0,0)
        assert b.point(0.5) == Vector(1,1,0)
        assert b.derivative(0) == Vector(2,4,0)
        with pytest.raises(ValueError):
            b.point(2)

    def test_cubic(self):
        ctl = [Vector(0,0,0),Vector(1,3,0),Vector(3,3,1),Vector(4,0,2)]
        b = BezierPath(ctl)
        t = 0.3
        s = 1 - t
        expect = ctl[0].scale(s**3).add(ctl[1].scale(3*s*s*t)) \
                       .add(ctl[2].scale(3*s*t*t)).add(ctl[3].scale(t**3))
        assert b.point(t) == expect

    def test_length(self):
        line = BezierPath([(0,0,0),(1,0,0),(3,0,0)])
        assert math.isclose(line.length(),3.0,abs_tol=1e-9)
        curve = BezierPath([(0,0,0),(1,2,0),(2,0,0)])
        assert 2.0 < curve.length() < curve.chordlength()
        assert BezierPath([(1,1,1)]).length() == 0.0


class TestCirclePath:
    """unit tests for circular paths"""

    def _circle(self):
        return CirclePath((0,0,0),2,ZAXIS)

    def test_points(self):
        c = self._circle()
        assert c.origin() == Vector(0,2,0)
        assert c.point(0.25) == Vector(-2,0,0)
        assert c.point(0.5) == Vector(0,-2,0)
        assert c.end() == c.origin()
        assert c.point(1.25) == c.point(0.25)

    def test_on_circle(self):
        c = CirclePath((1,2,3),3,(1,1,1))
        n = Vector(1,1,1)
        for p in c.points(17):
            assert math.isclose(p.distance(c.center()),3.0)
            assert math.isclose(p.sub(c.center()).dot(n),0.0,abs_tol=1e-9)

    def test_length(self):
        assert math.isclose(self._circle().length(),4*math.pi)

    def test_bad(self):
        with pytest.raises(ConstructionError):
            CirclePath((0,0,0),-1,ZAXIS)
        with pytest.raises(ConstructionError):
            CirclePath((0,0,0),1,(0,0,0))
