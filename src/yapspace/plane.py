## planes and slabs for yapspace

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

"""planes and slabs for **yapspace**

=====
Plane
=====

A ``Plane`` is stored as a point on the plane and a normal.  The
normal need not be unit length, but it may not be zero.  The
equivalent general form is ``ax + by + cz = d`` where ``(a,b,c)`` is
the normal and ``d`` is the *depth*, ``normal . point``.

The signed distance of a point is positive on the side the normal
points towards.

====
Slab
====

A ``Slab`` is the infinite region between two parallel planes that
share a normal, stored as the normal and the minimum and maximum
depth, ``dmin <= dmax``.  Depths are in units of the normal, so for a
non-unit normal the thickness is ``(dmax - dmin) / |normal|``.

"""

import logging
from math import *

import yapspace.tolerance as tol
from yapspace.errors import ConstructionError, DegenerateGeometryError
from yapspace.space import Space, Transformable, _delta
from yapspace.vector import Vector, vect

logger = logging.getLogger(__name__)


class Plane(Space,Transformable):
    """infinite plane through ``point`` with normal ``normal``"""

    def __init__(self,point,normal):
        point = vect(point)
        normal = vect(normal)
        if normal.isnull():
            raise ConstructionError('zero-length plane normal: {}'.format(normal))
        self._point = point
        self._normal = normal

    @classmethod
    def fromgeneral(cls,a,b,c,d):
        """ plane ``ax + by + cz = d`` """
        n = Vector(a,b,c)
        l2 = n.lengthsquared()
        if tol.iszero(l2):
            raise ConstructionError('zero-length plane normal: {}'.format(n))
        return cls(n.scale(d/l2),n)

    @classmethod
    def frompoints(cls,a,b,c):
        """ plane through three points, normal ``(b-a) x (c-a)`` """
        a = vect(a)
        n = vect(b).sub(a).cross(vect(c).sub(a))
        if n.isnull():
            raise ConstructionError('collinear points do not define a plane')
        return cls(a,n)

    @classmethod
    def frompointvectors(cls,p,t,r):
        """ plane through ``p`` spanned by ``t`` and ``r`` """
        return cls(p,vect(t).cross(vect(r)))

    def __repr__(self):
        return "Plane({},{})".format(self._point,self._normal)

    @property
    def point(self):
        return self._point

    @property
    def normal(self):
        return self._normal

    def depth(self):
        return self._normal.dot(self._point)

    def coefficients(self):
        """ return ``(a, b, c, d)`` of the general form """
        n = self._normal
        return (n.x,n.y,n.z,self.depth())

    def volume(self):
        return 0.0

    def surfacearea(self):
        return inf

    def center(self):
        return self._point

    def signeddistance(self,p):
        return (self._normal.dot(vect(p)) - self.depth())/self._normal.length()

    def distance(self,p):
        return abs(self.signeddistance(p))

    def contains(self,p):
        return tol.iszero(self.signeddistance(p))

    def project(self,p):
        """ closest point on the plane to ``p`` """
        p = vect(p)
        return p.sub(self._normal.normalize().scale(self.signeddistance(p)))

    def translate(self,dx,dy=None,dz=None):
        self._point = self._point.add(_delta(dx,dy,dz))
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._point = self._point.scale(factor)
        return self


class Slab(Space,Transformable):
    """region between the planes ``n.p = dmin`` and ``n.p = dmax``"""

    def __init__(self,normal,dmin,dmax):
        normal = vect(normal)
        if not (tol.isgoodnum(dmin) and tol.isgoodnum(dmax)):
            raise ConstructionError('bad slab depths: {}, {}'.format(dmin,dmax))
        if dmin > dmax:
            raise ConstructionError('slab dmin > dmax: {} > {}'.format(dmin,dmax))
        self._normal = normal
        self._dmin = float(dmin)
        self._dmax = float(dmax)

    @classmethod
    def fromnormal(cls,normal,dmin,dmax):
        return cls(normal,dmin,dmax)

    @classmethod
    def frompointnormal(cls,p,normal,thickness):
        """ slab whose min plane passes through ``p``, extending
        ``thickness`` along the normal """
        normal = vect(normal)
        if not tol.isgoodnum(thickness) or thickness < 0:
            raise ConstructionError('bad slab thickness: {}'.format(thickness))
        d = normal.dot(vect(p))
        return cls(normal,d,d + thickness*normal.length())

    @classmethod
    def frompoints(cls,a,b,normal):
        """ thinnest slab with the given normal containing ``a`` and ``b`` """
        normal = vect(normal)
        da = normal.dot(vect(a))
        db = normal.dot(vect(b))
        return cls(normal,min(da,db),max(da,db))

    def __repr__(self):
        return "Slab({},{},{})".format(self._normal,self._dmin,self._dmax)

    @property
    def normal(self):
        return self._normal

    @property
    def mindepth(self):
        return self._dmin

    @property
    def maxdepth(self):
        return self._dmax

    def setnormal(self,n):
        self._normal = vect(n)
        return self

    def setmindepth(self,d):
        if not tol.isgoodnum(d) or d > self._dmax:
            raise ConstructionError('bad min depth {} for max depth {}'.format(d,self._dmax))
        self._dmin = float(d)
        return self

    def setmaxdepth(self,d):
        if not tol.isgoodnum(d) or d < self._dmin:
            raise ConstructionError('bad max depth {} for min depth {}'.format(d,self._dmin))
        self._dmax = float(d)
        return self

    def push(self,depth):
        """ move both planes by ``depth`` along the normal """
        self._dmin += depth
        self._dmax += depth
        return self

    def pull(self,depth):
        return self.push(-depth)

    def minplane(self):
        n = self._normal
        return Plane.fromgeneral(n.x,n.y,n.z,self._dmin)

    def maxplane(self):
        n = self._normal
        return Plane.fromgeneral(n.x,n.y,n.z,self._dmax)

    def _normallength(self):
        l = self._normal.length()
        if tol.iszero(l):
            raise DegenerateGeometryError('slab has zero-length normal')
        return l

    def thickness(self):
        return (self._dmax - self._dmin)/self._normallength()

    def volume(self):
        return inf

    def surfacearea(self):
        return inf

    def center(self):
        """ the point on the mid plane closest to the origin """
        l = self._normallength()
        return self._normal.scale((self._dmin + self._dmax)/(2.0*l*l))

    def contains(self,p):
        l = self._normallength()
        d = self._normal.dot(vect(p))
        return tol.greaterequal((d - self._dmin)/l,0.0) and \
            tol.lessequal((d - self._dmax)/l,0.0)

    def translate(self,dx,dy=None,dz=None):
        return self.push(self._normal.dot(_delta(dx,dy,dz)))

    def scale(self,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        a = self._dmin*factor
        b = self._dmax*factor
        if a > b:
            logger.debug("negative scale %g swaps slab boundaries", factor)
        self._dmin = min(a,b)
        self._dmax = max(a,b)
        return self
