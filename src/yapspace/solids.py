## spheres, tetrahedra, cones and cylinders for yapspace

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

"""simple solids for **yapspace**

=========
Sphere
=========

center and radius.

============
Tetrahedron
============

Four vertices ``A``, ``B``, ``C``, ``D``.  The faces are taken in the
order ``(A,B,C)``, ``(B,C,D)``, ``(C,D,A)``, ``(D,A,B)``; a face whose
winding would make its normal point into the solid has its last two
vertices swapped, so every face normal points outward and a point is
inside when it is on or behind all four face planes.

======
Cone
======

An apex, an axis vector running from the apex to the center of the
base (its length is the height), and a base radius.

=============
AxisCylinder
=============

A circular cylinder whose axis is parallel to one of the coordinate
axes, described by the center of its base disk, a radius and a
height.  The top disk is ``height`` units along the positive axis
direction.

"""

from enum import Enum
from math import *

import yapspace.tolerance as tol
import yapspace.vectors as vectors
from yapspace.box import AxisAlignedBox
from yapspace.errors import ConstructionError, VertexIndexError
from yapspace.path import CirclePath
from yapspace.polygon import Triangle
from yapspace.space import Space, Transformable, _delta
from yapspace.vector import Vector, vect


def _checkpositive(x,name):
    if not tol.isgoodnum(x) or x < 0:
        raise ConstructionError('bad {}: {}'.format(name,x))
    return float(x)


class Sphere(Space,Transformable):

    def __init__(self,center,radius):
        self._center = vect(center)
        self._r = _checkpositive(radius,'sphere radius')

    def __repr__(self):
        return "Sphere({},{})".format(self._center,self._r)

    def center(self):
        return self._center

    @property
    def radius(self):
        return self._r

    def setradius(self,r):
        self._r = _checkpositive(r,'sphere radius')
        return self

    def volume(self):
        return 4.0/3.0*pi*self._r**3

    def surfacearea(self):
        return 4.0*pi*self._r**2

    def contains(self,p):
        return tol.lessequal(self._center.distancesquared(vect(p)),self._r*self._r)

    def boundaries(self):
        r = self._r
        return AxisAlignedBox(self._center,Vector(r,r,r))

    def circle(self,normal):
        """ the great circle of the sphere perpendicular to ``normal`` """
        return CirclePath(self._center,self._r,normal)

    def translate(self,dx,dy=None,dz=None):
        self._center = self._center.add(_delta(dx,dy,dz))
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._center = self._center.scale(factor)
        self._r *= abs(factor)
        return self


_FACES = ((0,1,2),(1,2,3),(2,3,0),(3,0,1))

class Tetrahedron(Space,Transformable):

    def __init__(self,a,b,c,d):
        self._vertices = [vect(a),vect(b),vect(c),vect(d)]
        if tol.iszero(self.volume()):
            raise ConstructionError('degenerate tetrahedron: {}'.format(self._vertices))

    def __repr__(self):
        return "Tetrahedron({})".format(self._vertices)

    def vertex(self,i):
        if not isinstance(i,int) or i < 0 or i > 3:
            raise VertexIndexError('bad tetrahedron vertex index: {}'.format(i))
        return self._vertices[i]

    def vertices(self):
        return list(self._vertices)

    def triangle(self,i):
        """ face ``i``, wound so that its normal points outward """
        if not isinstance(i,int) or i < 0 or i > 3:
            raise VertexIndexError('bad tetrahedron face index: {}'.format(i))
        j, k, l = _FACES[i]
        v = self._vertices
        # the vertex not on the face
        opposite = v[6 - j - k - l]
        t = Triangle(v[j],v[k],v[l])
        if t.signeddistance(opposite) > 0:
            t = Triangle(v[j],v[l],v[k])
        return t

    def triangles(self):
        return [self.triangle(i) for i in range(4)]

    def planes(self):
        return [t.plane() for t in self.triangles()]

    def volume(self):
        a, b, c, d = self._vertices
        return abs(vectors.triple(b.sub(a),c.sub(a),d.sub(a)))/6.0

    def surfacearea(self):
        return sum(t.area() for t in self.triangles())

    def center(self):
        return vectors.average(self._vertices)

    def contains(self,p):
        p = vect(p)
        return all(tol.lessequal(pl.signeddistance(p),0.0)
                   for pl in self.planes())

    def boundaries(self):
        return AxisAlignedBox.frompointset(self._vertices)

    def translate(self,dx,dy=None,dz=None):
        d = _delta(dx,dy,dz)
        self._vertices = [v.add(d) for v in self._vertices]
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor) or tol.iszero(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._vertices = [v.scale(factor) for v in self._vertices]
        return self


class Cone(Space,Transformable):

    def __init__(self,apex,axis,radius):
        self._apex = vect(apex)
        axis = vect(axis)
        if axis.isnull():
            raise ConstructionError('cone axis has zero length')
        self._axis = axis
        self._r = _checkpositive(radius,'cone base radius')

    def __repr__(self):
        return "Cone({},{},{})".format(self._apex,self._axis,self._r)

    @property
    def apex(self):
        return self._apex

    @property
    def axis(self):
        return self._axis

    @property
    def radius(self):
        return self._r

    def height(self):
        return self._axis.length()

    def aperture(self):
        """ full opening angle at the apex, radians """
        return 2.0*atan(self._r/self.height())

    def basecenter(self):
        return self._apex.add(self._axis)

    def setheight(self,h):
        if not tol.isgoodnum(h) or h <= 0:
            raise ConstructionError('bad cone height: {}'.format(h))
        self._axis = self._axis.setlength(h)
        return self

    def setradius(self,r):
        self._r = _checkpositive(r,'cone base radius')
        return self

    def volume(self):
        return pi*self._r*self._r*self.height()/3.0

    def surfacearea(self):
        r = self._r
        return pi*r*r + pi*r*hypot(r,self.height())

    def center(self):
        """ centroid, a quarter of the height above the base """
        return self._apex.add(self._axis.scale(0.75))

    def contains(self,p):
        h = self.height()
        u = self._axis.scale(1.0/h)
        w = vect(p).sub(self._apex)
        d = w.dot(u)
        if not tol.within(d,0.0,h):
            return False
        rd = self._r*d/h
        perp = w.sub(u.scale(d)).length()
        return tol.lessequal(perp,rd)

    def translate(self,dx,dy=None,dz=None):
        self._apex = self._apex.add(_delta(dx,dy,dz))
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor) or tol.iszero(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._apex = self._apex.scale(factor)
        self._axis = self._axis.scale(factor)
        self._r *= abs(factor)
        return self


class Axis(Enum):
    X = 0
    Y = 1
    Z = 2

    @property
    def vector(self):
        return Vector(*[1.0 if i == self.value else 0.0 for i in range(3)])


class AxisCylinder(Space,Transformable):

    def __init__(self,axis,base,radius,height):
        if not isinstance(axis,Axis):
            raise ConstructionError('bad cylinder axis: {}'.format(axis))
        self._axis = axis
        self._base = vect(base)
        self._r = _checkpositive(radius,'cylinder radius')
        self._h = _checkpositive(height,'cylinder height')

    def __repr__(self):
        return "AxisCylinder({},{},{},{})".format(self._axis.name,self._base,
                                                   self._r,self._h)

    @property
    def axis(self):
        return self._axis

    @property
    def base(self):
        return self._base

    @property
    def radius(self):
        return self._r

    @property
    def height(self):
        return self._h

    def top(self):
        return self._base.add(self._axis.vector.scale(self._h))

    def volume(self):
        return pi*self._r*self._r*self._h

    def surfacearea(self):
        r = self._r
        return 2.0*pi*r*r + 2.0*pi*r*self._h

    def center(self):
        return self._base.add(self._axis.vector.scale(self._h/2.0))

    def contains(self,p):
        rel = vect(p).sub(self._base)
        i = self._axis.value
        j, k = [n for n in range(3) if n != i]
        if not tol.within(rel[i],0.0,self._h):
            return False
        return tol.lessequal(hypot(rel[j],rel[k]),self._r)

    def boundaries(self):
        i = self._axis.value
        d = [self._r]*3
        d[i] = self._h/2.0
        return AxisAlignedBox(self.center(),Vector(*d))

    def translate(self,dx,dy=None,dz=None):
        self._base = self._base.add(_delta(dx,dy,dz))
        return self

    def scale(self,factor):
        """ scale about the origin; a negative factor moves the base to
        the other end so the cylinder still extends along +axis """
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._base = self._base.scale(factor)
        self._r *= abs(factor)
        self._h *= abs(factor)
        if factor < 0:
            self._base = self._base.sub(self._axis.vector.scale(self._h))
        return self
