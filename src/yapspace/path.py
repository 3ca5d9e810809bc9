## rays and parametric paths for yapspace

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""rays and parametric paths for **yapspace**

====================
OVERVIEW
====================

A path maps a parameter ``t`` to a point in space.  ``t=0`` is the
path's origin and ``t=1`` is its end.  Every path can be sampled with
``points(n)``, which returns ``n`` points at equal parameter steps
from origin to end.

Ray
===

An origin and a direction.  The end of the ray is ``origin +
direction``, so the direction's length is the length of the ray.
``point(t)`` accepts any ``t``, extrapolating past either end.

A ray can also be walked at a fixed step with ``intervals(step)``, or
through the integer grid cells it crosses with ``blockintervals()``.
Both return generators, which are single-use.

LinearPath
==========

A polyline through a list of control points.  ``t`` is proportional
to distance travelled along the polyline, so ``point(0.5)`` is half
way along its total length.

BezierPath
==========

A Bézier curve of any degree, evaluated with De Casteljau's
algorithm.  Its length is found by numerical integration of the
curve's speed.

CirclePath
==========

A full circle given by center, radius and normal.  The circle starts
at ``center + radius * normalize(ortho(normal))`` and runs
counterclockwise about the normal as ``t`` goes from 0 to 1.  ``t``
wraps, so ``point(1.25) == point(0.25)``.

"""

import logging
from abc import ABC, abstractmethod
from bisect import bisect_right
from math import *

import mpmath as mpm

import yapspace.grid as grid
import yapspace.tolerance as tol
import yapspace.vectors as vectors
import yapspace.xform as xform
from yapspace.errors import ConstructionError, VertexIndexError
from yapspace.space import Transformable, _delta
from yapspace.vector import Vector, VectorAccumulator, vect

logger = logging.getLogger(__name__)


def _checkparam(t):
    if not tol.isgoodnum(t) or t < 0 or t > 1:
        raise ValueError('bad path parameter, must be in [0,1]: {}'.format(t))
    return t


class Path(ABC):

    @abstractmethod
    def point(self,t):
        pass

    @abstractmethod
    def length(self):
        pass

    def origin(self):
        return self.point(0.0)

    def end(self):
        return self.point(1.0)

    def midpoint(self):
        return self.point(0.5)

    def points(self,n):
        """ ``n`` points evenly spaced in ``t`` from origin to end """
        if not isinstance(n,int) or n < 0:
            raise ValueError('bad sample count: {}'.format(n))
        if n == 0:
            return []
        if n == 1:
            return [self.midpoint()]
        if n == 2:
            return [self.origin(),self.end()]
        if n == 3:
            return [self.origin(),self.midpoint(),self.end()]
        return [self.point(i/(n-1)) for i in range(n)]


class Ray(Path,Transformable):

    def __init__(self,origin,direction):
        self._origin = vect(origin)
        self._dir = vect(direction)

    @classmethod
    def between(cls,a,b):
        """ ray from ``a`` ending at ``b`` """
        a = vect(a)
        return cls(a,vect(b).sub(a))

    def __repr__(self):
        return "Ray({},{})".format(self._origin,self._dir)

    @property
    def direction(self):
        return self._dir

    def origin(self):
        return self._origin

    def end(self):
        return self._origin.add(self._dir)

    def point(self,t):
        if not tol.isgoodnum(t):
            raise ValueError('bad ray parameter: {}'.format(t))
        return self._origin.add(self._dir.scale(t))

    def length(self):
        return self._dir.length()

    def center(self):
        return self.midpoint()

    def setorigin(self,p):
        self._origin = vect(p)
        return self

    def setdirection(self,d):
        self._dir = vect(d)
        return self

    def setlength(self,l):
        self._dir = self._dir.setlength(l)
        return self

    def normalize(self):
        self._dir = self._dir.normalize()
        return self

    def contains(self,p):
        """ is ``p`` on the segment from origin to end """
        w = vect(p).sub(self._origin)
        l2 = self._dir.lengthsquared()
        if tol.iszero(l2):
            return w.isnull()
        if not vectors.multiples(w,self._dir):
            return False
        return tol.within(w.dot(self._dir)/l2,0.0,1.0)

    def intervals(self,step):
        """ generate ``floor(length/step) + 1`` points starting at the
        origin and ``step`` apart along the ray.  The quotient is taken
        within tolerance, so a length that is a multiple of ``step``
        ends on the end point """
        if not tol.isgoodnum(step) or step <= 0:
            raise ValueError('bad interval step: {}'.format(step))
        return self._walk(step)

    def _walk(self,step):
        l = self.length()
        if tol.iszero(l):
            logger.debug("interval walk along zero-length ray %s", self)
            yield self._origin
            return
        delta = self._dir.scale(step/l)
        acc = VectorAccumulator(self._origin)
        for i in range(int(floor(l/step + tol.getepsilon()))+1):
            yield acc.value()
            acc.iadd(delta)

    def blockintervals(self):
        """ generate the integer grid cells crossed by the ray, from
        the origin's cell to the end's cell, as a 3D Bresenham walk """
        x, y, z = grid.cell(self._origin)
        x1, y1, z1 = grid.cell(self.end())
        dx = abs(x1 - x)
        dy = abs(y1 - y)
        dz = abs(z1 - z)
        sx = 1 if x1 > x else -1
        sy = 1 if y1 > y else -1
        sz = 1 if z1 > z else -1

        yield (x,y,z)
        if dx >= dy and dx >= dz:
            e1 = 2*dy - dx
            e2 = 2*dz - dx
            for i in range(dx):
                if e1 >= 0:
                    y += sy
                    e1 -= 2*dx
                if e2 >= 0:
                    z += sz
                    e2 -= 2*dx
                e1 += 2*dy
                e2 += 2*dz
                x += sx
                yield (x,y,z)
        elif dy >= dx and dy >= dz:
            e1 = 2*dx - dy
            e2 = 2*dz - dy
            for i in range(dy):
                if e1 >= 0:
                    x += sx
                    e1 -= 2*dy
                if e2 >= 0:
                    z += sz
                    e2 -= 2*dy
                e1 += 2*dx
                e2 += 2*dz
                y += sy
                yield (x,y,z)
        else:
            e1 = 2*dy - dz
            e2 = 2*dx - dz
            for i in range(dz):
                if e1 >= 0:
                    y += sy
                    e1 -= 2*dz
                if e2 >= 0:
                    x += sx
                    e2 -= 2*dz
                e1 += 2*dy
                e2 += 2*dx
                z += sz
                yield (x,y,z)

    def translate(self,dx,dy=None,dz=None):
        self._origin = self._origin.add(_delta(dx,dy,dz))
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._origin = self._origin.scale(factor)
        self._dir = self._dir.scale(factor)
        return self


class _ControlPointPath(Path,Transformable):
    """path defined by an ordered list of control points"""

    def __init__(self,points):
        points = [vect(p) for p in points]
        if not points:
            raise ConstructionError('path needs at least one control point')
        self._points = points
        self._update()

    def _update(self):
        pass

    def __repr__(self):
        return "{}({})".format(type(self).__name__,self._points)

    def controlcount(self):
        return len(self._points)

    def control(self,i):
        if not isinstance(i,int) or i < 0 or i >= len(self._points):
            raise VertexIndexError('bad control point index: {}'.format(i))
        return self._points[i]

    def controls(self):
        return list(self._points)

    def origin(self):
        return self._points[0]

    def end(self):
        return self._points[-1]

    def translate(self,dx,dy=None,dz=None):
        d = _delta(dx,dy,dz)
        self._points = [p.add(d) for p in self._points]
        self._update()
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._points = [p.scale(factor) for p in self._points]
        self._update()
        return self

    def center(self):
        return vectors.average(self._points)


class LinearPath(_ControlPointPath):

    def _update(self):
        cum = [0.0]
        for a, b in zip(self._points,self._points[1:]):
            cum.append(cum[-1] + a.distance(b))
        self._cumulative = cum

    def length(self):
        return self._cumulative[-1]

    def point(self,t):
        _checkparam(t)
        total = self.length()
        if len(self._points) == 1 or tol.iszero(total):
            return self._points[0]
        target = t*total
        cum = self._cumulative
        i = min(bisect_right(cum,target),len(cum)-1)
        a = self._points[i-1]
        b = self._points[i]
        seg = cum[i] - cum[i-1]
        if tol.iszero(seg):
            return b
        return a.midpoint(b,min(1.0,max(0.0,(target - cum[i-1])/seg)))


def _casteljau(points,t):
    pts = list(points)
    while len(pts) > 1:
        pts = [a.midpoint(b,t) for a, b in zip(pts,pts[1:])]
    return pts[0]


class BezierPath(_ControlPointPath):

    def point(self,t):
        return _casteljau(self._points,_checkparam(t))

    def derivative(self,t):
        """ tangent vector ``dB/dt`` """
        _checkparam(t)
        n = len(self._points) - 1
        if n == 0:
            return Vector(0,0,0)
        diffs = [b.sub(a).scale(n) for a, b in zip(self._points,self._points[1:])]
        return _casteljau(diffs,t)

    def chordlength(self):
        """ length of the control polygon, an upper bound on length() """
        return sum(a.distance(b) for a, b in zip(self._points,self._points[1:]))

    def length(self):
        if len(self._points) < 2:
            return 0.0
        speed = lambda t: self.derivative(float(t)).length()
        return float(mpm.quad(speed,[0,0.5,1]))


class CirclePath(Path,Transformable):

    def __init__(self,center,radius,normal):
        self._center = vect(center)
        if not tol.isgoodnum(radius) or radius < 0:
            raise ConstructionError('bad circle radius: {}'.format(radius))
        normal = vect(normal)
        if normal.isnull():
            raise ConstructionError('circle normal has zero length')
        self._r = float(radius)
        self._normal = normal

    def __repr__(self):
        return "CirclePath({},{},{})".format(self._center,self._r,self._normal)

    def center(self):
        return self._center

    @property
    def radius(self):
        return self._r

    @property
    def normal(self):
        return self._normal

    def _start(self):
        return vectors.ortho(self._normal).normalize().scale(self._r)

    def point(self,t):
        if not tol.isgoodnum(t):
            raise ValueError('bad circle parameter: {}'.format(t))
        angle = (t % 1.0)*2.0*pi
        return self._center.add(xform.Rotation(self._normal,angle).mul(self._start()))

    def length(self):
        return 2.0*pi*self._r

    def translate(self,dx,dy=None,dz=None):
        self._center = self._center.add(_delta(dx,dy,dz))
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._center = self._center.scale(factor)
        self._r *= abs(factor)
        return self
