## planar polygons and triangles for yapspace

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

"""planar polygons for **yapspace**

A ``Polygon`` is a fixed, ordered list of at least three coplanar
vertices.  Everything else (normal, plane, bounding box, center,
circumference, area) is derived from indexed vertex access, so a
subclass only has to provide ``vertex()`` and ``vertexcount()``.

A ``Triangle`` is a three-vertex polygon that also occupies space: it
has zero volume, its surface area is its area, and a point is inside
it when it lies on the triangle's plane and passes the barycentric
test.

"""

from math import *

import yapspace.tolerance as tol
import yapspace.vectors as vectors
from yapspace.box import AxisAlignedBox
from yapspace.errors import ConstructionError, VertexIndexError
from yapspace.plane import Plane
from yapspace.space import Space, Transformable, _delta
from yapspace.vector import Vector, VectorAccumulator, vect


class Polygon(Transformable):
    """planar polygon with a fixed number of vertices"""

    def __init__(self,vertices):
        vertices = [vect(v) for v in vertices]
        if len(vertices) < 3:
            raise ConstructionError('polygon needs at least three vertices, got {}'.format(len(vertices)))
        self._vertices = vertices

    def __repr__(self):
        return "{}({})".format(type(self).__name__,self._vertices)

    def vertexcount(self):
        return len(self._vertices)

    def vertex(self,i):
        if not isinstance(i,int) or i < 0 or i >= self.vertexcount():
            raise VertexIndexError('bad vertex index: {}'.format(i))
        return self._vertices[i]

    def vertices(self):
        return [self.vertex(i) for i in range(self.vertexcount())]

    def edges(self):
        n = self.vertexcount()
        return [(self.vertex(i),self.vertex((i+1) % n)) for i in range(n)]

    def normal(self):
        """ Newell normal, with length twice the polygon area """
        acc = VectorAccumulator()
        for a, b in self.edges():
            acc.iadd(Vector((a.y-b.y)*(a.z+b.z),
                            (a.z-b.z)*(a.x+b.x),
                            (a.x-b.x)*(a.y+b.y)))
        return acc.value()

    def plane(self):
        return Plane(self.vertex(0),self.normal())

    def signeddistance(self,p):
        return self.plane().signeddistance(p)

    def area(self):
        return self.normal().length()/2.0

    def circumference(self):
        return sum(a.distance(b) for a, b in self.edges())

    def center(self):
        return vectors.average(self.vertices())

    def boundaries(self):
        return AxisAlignedBox.frompointset(self.vertices())

    def translate(self,dx,dy=None,dz=None):
        d = _delta(dx,dy,dz)
        self._vertices = [v.add(d) for v in self._vertices]
        return self

    def scale(self,factor):
        if not tol.isgoodnum(factor) or tol.iszero(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self._vertices = [v.scale(factor) for v in self._vertices]
        return self


class Triangle(Polygon,Space):
    """triangle ``a``, ``b``, ``c`` with normal ``(b-a) x (c-a)``"""

    def __init__(self,a,b,c):
        super().__init__([a,b,c])
        if self.normal().isnull():
            raise ConstructionError('degenerate triangle: {}'.format(self._vertices))

    @property
    def a(self):
        return self._vertices[0]

    @property
    def b(self):
        return self._vertices[1]

    @property
    def c(self):
        return self._vertices[2]

    def normal(self):
        a = self.a
        return self.b.sub(a).cross(self.c.sub(a))

    def volume(self):
        return 0.0

    def surfacearea(self):
        return self.area()

    def barycentric(self,p):
        """ return the weights ``(u, v)`` of ``p`` along ``c-a`` and
        ``b-a`` respectively, for ``p`` projected onto the plane """
        a = self.a
        ac = self.c.sub(a)
        ab = self.b.sub(a)
        ap = vect(p).sub(a)

        dot00 = ac.dot(ac)
        dot01 = ac.dot(ab)
        dot02 = ac.dot(ap)
        dot11 = ab.dot(ab)
        dot12 = ab.dot(ap)

        inv = 1.0/(dot00*dot11 - dot01*dot01)
        u = (dot11*dot02 - dot01*dot12)*inv
        v = (dot00*dot12 - dot01*dot02)*inv
        return u, v

    def contains(self,p):
        """ is ``p`` inside the triangle

        The edges ``a-b`` and ``a-c`` are inside, the edge ``b-c``
        (where ``u + v = 1``) is outside.
        """
        p = vect(p)
        if not self.boundaries().contains(p):
            return False
        if not tol.iszero(self.signeddistance(p)):
            return False
        u, v = self.barycentric(p)
        return tol.greaterequal(u,0.0) and tol.greaterequal(v,0.0) and \
            not tol.greaterequal(u+v,1.0)
