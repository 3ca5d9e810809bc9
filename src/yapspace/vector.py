## three dimensional vectors for yapspace

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

"""three dimensional vectors for **yapspace**

====================
OVERVIEW
====================

A ``Vector`` is an immutable ``(x, y, z)`` triple that serves as both
point and direction.  Every arithmetic method returns a new
``Vector``; nothing ever changes a vector in place, so a vector handed
out by a shape can never be used to corrupt that shape.

When a long chain of arithmetic would allocate too many intermediate
vectors, use a ``VectorAccumulator``.  Its methods are all prefixed
with ``i`` (``iadd``, ``iscale``, ...), change the accumulator in
place and return it, and ``value()`` turns the result back into a
``Vector``: ::

   acc = VectorAccumulator(p)
   acc.isub(q).iscale(0.5).iadd(q)
   mid = acc.value()

yaw and pitch
=============

``yaw`` and ``pitch`` are measured in radians.  Yaw is the rotation
about the y axis, with yaw 0 pointing along +z and positive yaw
turning towards -x.  Pitch is the elevation out of the x-z plane, with
positive pitch pointing towards -y.

"""

import logging
from dataclasses import dataclass
from math import *

import yapspace.tolerance as tol
import yapspace.xform as xform
from yapspace.errors import DegenerateGeometryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Vector:
    """immutable 3D vector"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        for name in ('x','y','z'):
            c = getattr(self,name)
            if not tol.isgoodnum(c):
                raise ValueError('bad coordinate passed to Vector: {}'.format(c))
            object.__setattr__(self,name,float(c))

    @classmethod
    def fromypr(cls,length,yaw,pitch):
        """make a vector from a length, a yaw and a pitch (radians)

        At a pitch of +/- 90 degrees the x-z component vanishes and the
        result is a pure y vector, computed directly.
        """
        xz = cos(pitch)
        if tol.iszero(xz):
            logger.debug("pitch singularity in fromypr, pitch=%g", pitch)
            return cls(0.0, -length if pitch >= 0 else length, 0.0)
        xz *= length
        return cls(sin(-yaw)*xz, -tan(pitch)*xz, cos(yaw)*xz)

    def __repr__(self):
        return "Vector({},{},{})".format(self.x,self.y,self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __getitem__(self,i):
        return (self.x,self.y,self.z)[i]

    ## equality is tolerant, so vectors can't be hashed
    def __eq__(self,other):
        if not isinstance(other,Vector):
            return NotImplemented
        return self.close(other)

    __hash__ = None

    def __add__(self,other):
        return self.add(other)

    def __sub__(self,other):
        return self.sub(other)

    def __mul__(self,k):
        if isinstance(k,Vector):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __truediv__(self,k):
        return self.divide(k)

    def __neg__(self):
        return self.negate()

    def tolist(self):
        return [self.x,self.y,self.z]

    ## arithmetic
    ## ----------

    def add(self,v):
        return Vector(self.x+v.x,self.y+v.y,self.z+v.z)

    def sub(self,v):
        return Vector(self.x-v.x,self.y-v.y,self.z-v.z)

    def scale(self,k):
        return Vector(self.x*k,self.y*k,self.z*k)

    def divide(self,k):
        if k == 0:
            raise DegenerateGeometryError('division of vector by zero: {}'.format(k))
        return Vector(self.x/k,self.y/k,self.z/k)

    def negate(self):
        return Vector(-self.x,-self.y,-self.z)

    def dot(self,v):
        return self.x*v.x + self.y*v.y + self.z*v.z

    def cross(self,v):
        return Vector(self.y*v.z - self.z*v.y,
                      self.z*v.x - self.x*v.z,
                      self.x*v.y - self.y*v.x)

    def lengthsquared(self):
        return self.x*self.x + self.y*self.y + self.z*self.z

    def length(self):
        return sqrt(self.lengthsquared())

    def normalize(self):
        """unit vector pointing the same way, raises
        ``DegenerateGeometryError`` for a zero-length vector"""
        l = self.length()
        if tol.iszero(l):
            raise DegenerateGeometryError('cannot normalize zero-length vector: {}'.format(self))
        return Vector(self.x/l,self.y/l,self.z/l)

    def setlength(self,l):
        return self.normalize().scale(l)

    def distancesquared(self,v):
        return self.sub(v).lengthsquared()

    def distance(self,v):
        return sqrt(self.distancesquared(v))

    def angle(self,v):
        """angle between two vectors in radians, in the range [0, pi]"""
        l = self.length()*v.length()
        if tol.iszero(l):
            raise DegenerateGeometryError('angle undefined for zero-length vector')
        c = self.dot(v)/l
        return acos(max(-1.0,min(1.0,c)))

    def midpoint(self,v,t=0.5):
        """point at parameter ``t`` on the segment from self to ``v``"""
        if not tol.isgoodnum(t) or t < 0 or t > 1:
            raise ValueError('bad parameter passed to midpoint: {}'.format(t))
        return Vector(self.x + (v.x-self.x)*t,
                      self.y + (v.y-self.y)*t,
                      self.z + (v.z-self.z)*t)

    ## transformation
    ## --------------

    def transform(self,m):
        """row vector times 3x3 matrix, ``self x m``"""
        if m.rows != 3 or m.cols != 3:
            raise ValueError('bad matrix passed to transform, must be 3x3: {}'.format(m))
        return Vector(self.x*m.get(0,0) + self.y*m.get(1,0) + self.z*m.get(2,0),
                      self.x*m.get(0,1) + self.y*m.get(1,1) + self.z*m.get(2,1),
                      self.x*m.get(0,2) + self.y*m.get(1,2) + self.z*m.get(2,2))

    def rotatex(self,angle):
        return self.transform(xform.RotationX(angle))

    def rotatey(self,angle):
        return self.transform(xform.RotationY(angle))

    def rotatez(self,angle):
        return self.transform(xform.RotationZ(angle))

    def rotate(self,axis,angle):
        return self.transform(xform.Rotation(axis,angle))

    ## derived quantities and predicates
    ## ---------------------------------

    @property
    def yaw(self):
        return -atan2(self.x,self.z)

    @property
    def pitch(self):
        return atan2(-self.y,hypot(self.x,self.z))

    def isnull(self):
        return tol.iszero(self.length())

    def close(self,v):
        return tol.iszero(self.distance(v))

    def ismultipleof(self,v):
        from yapspace.vectors import multiples
        return multiples(self,v)


ZERO = Vector(0,0,0)
ONE = Vector(1,1,1)
XAXIS = Vector(1,0,0)
YAXIS = Vector(0,1,0)
ZAXIS = Vector(0,0,1)


def vect(a=None,b=None,c=None):
    """Convenience function for making a ``Vector`` from a vector, a
    sequence of three numbers, or three numbers
    """
    if isinstance(a,Vector):
        return a
    if tol.isgoodnum(a) and tol.isgoodnum(b) and tol.isgoodnum(c):
        return Vector(a,b,c)
    if isinstance(a,(tuple,list)) and len(a) == 3:
        return Vector(a[0],a[1],a[2])
    raise ValueError('bad thing passed to vect: {}'.format(a))


class VectorAccumulator:
    """mutable vector for in-place arithmetic chains

    Every ``i``-method changes the accumulator and returns it.
    """

    def __init__(self,v=ZERO):
        v = vect(v)
        self.x = v.x
        self.y = v.y
        self.z = v.z

    def __repr__(self):
        return "VectorAccumulator({},{},{})".format(self.x,self.y,self.z)

    def iadd(self,v):
        self.x += v.x
        self.y += v.y
        self.z += v.z
        return self

    def isub(self,v):
        self.x -= v.x
        self.y -= v.y
        self.z -= v.z
        return self

    def iscale(self,k):
        self.x *= k
        self.y *= k
        self.z *= k
        return self

    def idivide(self,k):
        if k == 0:
            raise DegenerateGeometryError('division of vector by zero: {}'.format(k))
        return self.iscale(1.0/k)

    def inormalize(self):
        l = sqrt(self.x*self.x + self.y*self.y + self.z*self.z)
        if tol.iszero(l):
            raise DegenerateGeometryError('cannot normalize zero-length vector')
        return self.iscale(1.0/l)

    def value(self):
        return Vector(self.x,self.y,self.z)
