## operations on vectors and sets of vectors for yapspace

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

"""free functions on vectors and vector sets for **yapspace**

Most of these accept anything ``vect()`` accepts and return
``Vector`` instances.  Functions that reduce a set of vectors
(``vsum``, ``average``, ``vmin``, ...) raise ``ValueError`` when
handed an empty set.
"""

import random
import threading
from math import *

import yapspace.tolerance as tol
from yapspace.errors import DegenerateGeometryError
from yapspace.vector import Vector, VectorAccumulator, vect

## random generators are confined to the thread that created them
_local = threading.local()

def _rng(rng):
    if rng is not None:
        return rng
    r = getattr(_local,'rng',None)
    if r is None:
        r = random.Random()
        _local.rng = r
    return r


## pairwise operations
## -------------------

def dot(a,b):
    return vect(a).dot(vect(b))

def cross(a,b):
    return vect(a).cross(vect(b))

def triple(a,b,c):
    """ scalar triple product ``a . (b x c)``, the signed volume of
    the parallelepiped spanned by the three vectors """
    return vect(a).dot(vect(b).cross(vect(c)))

def normalize(a):
    return vect(a).normalize()

def distance(a,b):
    return vect(a).distance(vect(b))

def angle(a,b):
    return vect(a).angle(vect(b))

def project(a,b):
    """ projection of ``a`` onto ``b`` """
    a = vect(a)
    b = vect(b)
    l2 = b.lengthsquared()
    if tol.iszero(l2):
        raise DegenerateGeometryError('cannot project onto zero-length vector')
    return b.scale(a.dot(b)/l2)

def ortho(v):
    """ some vector orthogonal to ``v``; zero only if ``v`` is zero """
    v = vect(v)
    if tol.iszero(v.x):
        return Vector(0,v.z,-v.y)
    elif tol.iszero(v.y):
        return Vector(-v.z,0,v.x)
    else:
        return Vector(v.y,-v.x,0)

def ratio(a,b):
    """ componentwise ratio ``a/b``; ``b`` must have no zero component """
    a = vect(a)
    b = vect(b)
    if tol.iszero(b.x) or tol.iszero(b.y) or tol.iszero(b.z):
        raise DegenerateGeometryError('ratio with zero component: {}'.format(b))
    return Vector(a.x/b.x,a.y/b.y,a.z/b.z)


def multiples(a,b):
    """ are ``a`` and ``b`` (anti)parallel, i.e. is one a scalar
    multiple of the other?

    The general test is a zero cross product.  When the same
    coordinate is zero on both sides the problem reduces to two
    dimensions and the cheaper ratio test is used instead.  A zero
    vector is a multiple of everything.
    """
    a = vect(a)
    b = vect(b)
    if a.isnull() or b.isnull():
        return True
    for i, j, k in ((0,1,2),(1,0,2),(2,0,1)):
        if tol.iszero(a[i]) and tol.iszero(b[i]):
            return tol.iszero(a[j]*b[k] - a[k]*b[j])
    return cross(a,b).isnull()


## Gram-Schmidt
## ------------

def orthogonalize(vs):
    """ Gram-Schmidt orthogonalization of an ordered list of vectors

    each vector has its projection onto every previously produced
    vector subtracted, in order.  The first vector is returned
    unchanged.  The result depends on the input order.
    """
    result = []
    for v in vs:
        acc = VectorAccumulator(v)
        for u in result:
            if not u.isnull():
                acc.isub(project(v,u))
        result.append(acc.value())
    return result

def orthonormalize(vs):
    return [u.normalize() for u in orthogonalize(vs)]


## operations on sets of vectors
## -----------------------------

def _checkset(vs,name):
    vs = [vect(v) for v in vs]
    if not vs:
        raise ValueError('empty vector set passed to {}'.format(name))
    return vs

def vsum(vs):
    acc = VectorAccumulator()
    for v in _checkset(vs,'vsum'):
        acc.iadd(v)
    return acc.value()

def average(vs):
    vs = _checkset(vs,'average')
    return vsum(vs).divide(len(vs))

def vmin(vs):
    vs = _checkset(vs,'vmin')
    return Vector(min(v.x for v in vs),
                  min(v.y for v in vs),
                  min(v.z for v in vs))

def vmax(vs):
    vs = _checkset(vs,'vmax')
    return Vector(max(v.x for v in vs),
                  max(v.y for v in vs),
                  max(v.z for v in vs))

def minmax(vs):
    """ return ``[vmin(vs), vmax(vs)]`` """
    vs = _checkset(vs,'minmax')
    return [vmin(vs),vmax(vs)]

def clamp(v,lo,hi):
    v = vect(v)
    lo = vect(lo)
    hi = vect(hi)
    return Vector(max(lo.x,min(hi.x,v.x)),
                  max(lo.y,min(hi.y,v.y)),
                  max(lo.z,min(hi.z,v.z)))


## random vectors
## --------------

def randomunit(rng=None):
    """ uniformly distributed random unit vector """
    r = _rng(rng)
    z = r.uniform(-1.0,1.0)
    phi = r.uniform(0.0,2.0*pi)
    s = sqrt(1.0-z*z)
    return Vector(s*cos(phi),s*sin(phi),z)

def randomvector(rng=None):
    """ random vector with components in [-1, 1) """
    r = _rng(rng)
    return Vector(r.uniform(-1.0,1.0),
                  r.uniform(-1.0,1.0),
                  r.uniform(-1.0,1.0))
