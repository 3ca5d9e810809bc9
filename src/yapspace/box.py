## axis-aligned and oriented boxes for yapspace

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

"""boxes for **yapspace**

================
AxisAlignedBox
================

An ``AxisAlignedBox`` is stored as a center and non-negative half
extents along x, y and z.  The minimum and maximum corners are
derived.  Build one from two arbitrary corners with
``AxisAlignedBox.frompoints(a, b)``: ::

   box = AxisAlignedBox.frompoints(point(0,0,0), point(2,2,2))
   box.volume()   # 8.0

================
OrientedBox
================

An ``OrientedBox`` adds a 3x3 orientation matrix whose *rows* are the
box's local x, y and z axes expressed in world coordinates.  A point
in box-local coordinates maps to world coordinates as
``center + local x M``.  After every rotation the rows are
re-orthonormalized so that rounding error can't shear or stretch the
box.

"""

import logging
from enum import Enum
from math import *

import yapspace.tolerance as tol
import yapspace.vectors as vectors
import yapspace.xform as xform
from yapspace.errors import ConstructionError
from yapspace.plane import Slab
from yapspace.space import Space, Transformable, _delta
from yapspace.vector import Vector, vect

logger = logging.getLogger(__name__)


class Side(Enum):
    """the six faces of an axis-aligned box"""
    NEGATIVE_X = (-1,0,0)
    POSITIVE_X = (1,0,0)
    NEGATIVE_Y = (0,-1,0)
    POSITIVE_Y = (0,1,0)
    NEGATIVE_Z = (0,0,-1)
    POSITIVE_Z = (0,0,1)

    @property
    def normal(self):
        return Vector(*self.value)


def _extents(d):
    d = vect(d)
    if d.x < 0 or d.y < 0 or d.z < 0:
        raise ConstructionError('negative half extents: {}'.format(d))
    return d


class AxisAlignedBox(Space,Transformable):
    """box with faces perpendicular to the coordinate axes"""

    def __init__(self,center,halfextents):
        self._center = vect(center)
        self._d = _extents(halfextents)

    @classmethod
    def fromcenter(cls,center,halfextents):
        return cls(center,halfextents)

    @classmethod
    def frompoints(cls,a,b):
        """ box with ``a`` and ``b`` as opposite corners, in any order """
        a = vect(a)
        b = vect(b)
        lo = vectors.vmin([a,b])
        hi = vectors.vmax([a,b])
        return cls(lo.add(hi).scale(0.5),hi.sub(lo).scale(0.5))

    @classmethod
    def frompointset(cls,points):
        """ smallest box containing every point in ``points`` """
        lo, hi = vectors.minmax(points)
        return cls.frompoints(lo,hi)

    def __repr__(self):
        return "AxisAlignedBox({},{})".format(self._center,self._d)

    def copy(self):
        return AxisAlignedBox(self._center,self._d)

    def __eq__(self,other):
        if not isinstance(other,AxisAlignedBox):
            return NotImplemented
        return self._center.close(other._center) and self._d.close(other._d)

    __hash__ = None

    ## accessors
    ## ---------

    def center(self):
        return self._center

    @property
    def halfextents(self):
        return self._d

    def min(self):
        return self._center.sub(self._d)

    def max(self):
        return self._center.add(self._d)

    def size(self):
        return self._d.scale(2.0)

    def corners(self):
        """ the eight corners, x varying fastest """
        lo = self.min()
        hi = self.max()
        return [Vector(x,y,z)
                for z in (lo.z,hi.z)
                for y in (lo.y,hi.y)
                for x in (lo.x,hi.x)]

    def volume(self):
        d = self._d
        return 8.0*d.x*d.y*d.z

    def surfacearea(self):
        s = self.size()
        return 2.0*(s.x*s.y + s.x*s.z + s.y*s.z)

    def iscube(self):
        d = self._d
        return tol.close(d.x,d.y) and tol.close(d.y,d.z)

    def contains(self,p):
        p = vect(p)
        lo = self.min()
        hi = self.max()
        return tol.within(p.x,lo.x,hi.x) and \
            tol.within(p.y,lo.y,hi.y) and \
            tol.within(p.z,lo.z,hi.z)

    def closestside(self,p):
        """ the face whose plane ``p`` is nearest to, relative to the
        box's proportions; ties go to x, then y, then z """
        rel = vect(p).sub(self._center)
        best = None
        bestr = -1.0
        for i, sides in enumerate(((Side.NEGATIVE_X,Side.POSITIVE_X),
                                   (Side.NEGATIVE_Y,Side.POSITIVE_Y),
                                   (Side.NEGATIVE_Z,Side.POSITIVE_Z))):
            off = rel[i]
            d = self._d[i]
            if tol.iszero(d):
                r = inf if not tol.iszero(off) else 0.0
            else:
                r = abs(off)/d
            if r > bestr:
                bestr = r
                best = sides[1] if off >= 0 else sides[0]
        return best

    def union(self,other):
        """ smallest box containing this box and ``other`` """
        return AxisAlignedBox.frompointset([self.min(),self.max(),
                                            other.min(),other.max()])

    ## mutators
    ## --------

    def setcenter(self,c):
        self._center = vect(c)
        return self

    def setdimensions(self,x,y=None,z=None):
        """ set the full size along each axis, keeping the center """
        self._d = _extents(_delta(x,y,z).scale(0.5))
        return self

    def grow(self,x,y=None,z=None):
        """ move the maximum faces by ``(x,y,z)``.  The minimum faces
        stay put unless a maximum face is pushed past them, in which
        case the box flips to the other side of the minimum face. """
        g = _delta(x,y,z)
        lo = self.min()
        newhi = self.max().add(g)
        b = AxisAlignedBox.frompoints(lo,newhi)
        self._center = b._center
        self._d = b._d
        return self

    def translate(self,dx,dy=None,dz=None):
        self._center = self._center.add(_delta(dx,dy,dz))
        return self

    def scale(self,x,y=None,z=None):
        """ scale about the origin, uniformly or per axis """
        if y is None and z is None:
            y = z = x
        for f in (x,y,z):
            if not tol.isgoodnum(f):
                raise ValueError('bad scale factor: {}'.format(f))
        c = self._center
        d = self._d
        self._center = Vector(c.x*x,c.y*y,c.z*z)
        self._d = Vector(d.x*abs(x),d.y*abs(y),d.z*abs(z))
        return self


class OrientedBox(Space,Transformable):
    """box with arbitrary orientation"""

    def __init__(self,center,halfextents,matrix=None):
        self._center = vect(center)
        self._d = _extents(halfextents)
        if matrix is None:
            matrix = xform.Identity(3)
        if not isinstance(matrix,xform.Matrix) or matrix.rows != 3 or matrix.cols != 3:
            raise ConstructionError('bad orientation matrix: {}'.format(matrix))
        self._m = matrix.copy()

    @classmethod
    def frombox(cls,box):
        """ oriented box equal to an axis-aligned box """
        return cls(box.center(),box.halfextents)

    @classmethod
    def fromaxes(cls,center,halfextents,u,v,w):
        """ oriented box with local axes ``u``, ``v`` and ``w`` """
        rows = [list(a) for a in vectors.orthonormalize([u,v,w])]
        return cls(center,halfextents,xform.fromrows(rows))

    def __repr__(self):
        return "OrientedBox({},{},{})".format(self._center,self._d,self._m)

    def center(self):
        return self._center

    @property
    def halfextents(self):
        return self._d

    @property
    def matrix(self):
        return self._m.copy()

    def size(self):
        return self._d.scale(2.0)

    def _axis(self,i):
        return Vector(*self._m.getrow(i))

    def axisx(self):
        return self._axis(0)

    def axisy(self):
        return self._axis(1)

    def axisz(self):
        return self._axis(2)

    def _slab(self,i):
        axis = self._axis(i)
        d = axis.dot(self._center)
        return Slab(axis,d - self._d[i],d + self._d[i])

    def slabx(self):
        return self._slab(0)

    def slaby(self):
        return self._slab(1)

    def slabz(self):
        return self._slab(2)

    def slabs(self):
        return [self._slab(i) for i in range(3)]

    def min(self):
        return self._center.sub(self._d.transform(self._m))

    def max(self):
        return self._center.add(self._d.transform(self._m))

    def boundaries(self):
        """ smallest axis-aligned box containing this box """
        d = self._d
        e = [sum(abs(self._m.get(i,j))*d[i] for i in range(3))
             for j in range(3)]
        return AxisAlignedBox(self._center,Vector(*e))

    def volume(self):
        d = self._d
        return 8.0*d.x*d.y*d.z

    def surfacearea(self):
        d = self._d
        return 8.0*(d.x*d.y + d.x*d.z + d.y*d.z)

    def tolocal(self,p):
        """ box-local coordinates of world point ``p`` """
        return vect(p).sub(self._center).transform(self._m.inverse())

    def contains(self,p):
        local = self.tolocal(p)
        return all(tol.lessequal(abs(local[i]),self._d[i]) for i in range(3))

    ## mutators
    ## --------

    def transform(self,m):
        """ compose the orientation with ``m``, then re-orthonormalize """
        if not isinstance(m,xform.Matrix) or m.rows != 3 or m.cols != 3:
            raise ValueError('bad matrix passed to transform, must be 3x3: {}'.format(m))
        prod = self._m.mul(m)
        rows = vectors.orthonormalize([Vector(*prod.getrow(i)) for i in range(3)])
        fixed = xform.fromrows([list(r) for r in rows])
        if not fixed.close(prod):
            logger.debug("re-orthonormalized oriented box axes: %s", prod)
        self._m = fixed
        return self

    def rotatex(self,angle):
        return self.transform(xform.RotationX(angle))

    def rotatey(self,angle):
        return self.transform(xform.RotationY(angle))

    def rotatez(self,angle):
        return self.transform(xform.RotationZ(angle))

    def rotate(self,axis,angle):
        return self.transform(xform.Rotation(axis,angle))

    def translate(self,dx,dy=None,dz=None):
        self._center = self._center.add(_delta(dx,dy,dz))
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._center = self._center.scale(factor)
        self._d = self._d.scale(abs(factor))
        return self
